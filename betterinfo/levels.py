"""Level records and the checks and summaries built on them."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import IntEnum

from .text import parse_int


class CompleteMode(IntEnum):
    """Which completion state a level filter looks for."""

    DEFAULT = 0
    COMPLETED = 1
    COMPLETED_21 = 2
    COMPLETED_211 = 3
    ALL_COINS = 4
    NO_COINS = 5
    PERCENTAGE = 6


def _tdiv(a: int, b: int) -> int:
    """Integer division that truncates towards zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


@dataclass
class Level:
    """The parts of a level that difficulty, coin and progress checks use."""

    level_id: int = 0
    name: str = ""
    stars: int = 0
    demon: int = 0
    auto_level: bool = False
    ratings: int = 0
    ratings_sum: int = 0
    demon_difficulty: int = 0
    coins: int = 0
    normal_percent: int = 0
    platformer: bool = False

    def difficulty_as_int(self) -> int:
        """Difficulty face index: 6 for demons, -1 for auto, else the rating average."""
        if self.demon != 0:
            return 6
        if self.auto_level:
            return -1
        if self.ratings == 0:
            return 0
        return _tdiv(self.ratings_sum, self.ratings)

    def demon_difficulty_as_int(self) -> int:
        """Demon difficulty on the 0-4 scale used by search filters."""
        if self.demon_difficulty >= 5:
            return self.demon_difficulty - 2
        if self.demon_difficulty >= 3:
            return self.demon_difficulty - 3
        return 2

    def has_collected_coins(self, is_collected: Callable[[int], bool]) -> bool:
        """Whether every coin of the level is collected.

        ``is_collected`` is called with each coin's 1-based number.
        """
        return all([is_collected(number) for number in range(1, self.coins + 1)])


def completed_levels_in_star_range(
    levels: Iterable[Level], min_stars: int, max_stars: int, platformer: bool
) -> list[Level]:
    """Completed levels whose stars lie in ``[min_stars, max_stars]`` and whose mode matches."""
    return [
        level
        for level in levels
        if level.normal_percent >= 100
        and min_stars <= level.stars <= max_stars
        and level.platformer == platformer
    ]


def printable_progress(personal_bests: str, percentage: int) -> str:
    """Turn comma-separated progress steps into the percentages reached, oldest first.

    The steps are subtracted from ``percentage`` starting with the last one.
    """
    tokens = personal_bests.split(",")
    if tokens[-1] == "":
        tokens.pop()
    reached: list[str] = []
    for step in reversed([parse_int(token) for token in tokens]):
        reached.append(f"{percentage}% ")
        percentage -= step
    return "".join(reversed(reached))