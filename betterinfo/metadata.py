"""Human-readable descriptions of level metadata."""

from __future__ import annotations

_SPECIAL_VERSIONS = {10: "1.7", 11: "Early 1.8"}

_DIFFICULTY_ICONS = {
    1: "difficulty_auto_btn_001.png",
    2: "difficulty_01_btn_001.png",
    3: "difficulty_02_btn_001.png",
    4: "difficulty_03_btn_001.png",
    5: "difficulty_03_btn_001.png",
    6: "difficulty_04_btn_001.png",
    7: "difficulty_04_btn_001.png",
    8: "difficulty_05_btn_001.png",
    9: "difficulty_05_btn_001.png",
    10: "difficulty_06_btn_001.png",
}

_DEMON_ICONS = {
    3: "difficulty_07_btn_001.png",
    4: "difficulty_08_btn_001.png",
    5: "difficulty_09_btn_001.png",
    6: "difficulty_10_btn_001.png",
}


def game_version_name(version: int) -> str:
    """Name of the game version a level was uploaded with."""
    if version < 1 or version > 99:
        return "NA"
    if version in _SPECIAL_VERSIONS:
        return _SPECIAL_VERSIONS[version]
    if version > 17:
        return f"{version / 10.0:.1f}"
    return f"1.{version - 1}"


def string_date(date: str) -> str:
    """Turn a relative date such as ``3 days`` into ``3 days ago``."""
    if date == "":
        return "NA"
    return f"{date} ago"


def difficulty_icon(stars: int) -> str:
    """Sprite name of the difficulty face for a star rating."""
    return _DIFFICULTY_ICONS.get(stars, "difficulty_00_btn_001.png")


def demon_difficulty_icon(demon_difficulty: int) -> str:
    """Sprite name of the demon face for a demon difficulty."""
    return _DEMON_ICONS.get(demon_difficulty, "difficulty_06_btn_001.png")


def password_string(password: int) -> str:
    """Describe a level's copy password."""
    if password == 0:
        return "NA"
    if password == 1:
        return "Free Copy"
    if 10000 <= password <= 19999:
        return str(password - 10000)
    if 1000000 <= password <= 1999999:
        return str(password - 1000000)
    return f"Invalid ({password})"


def zero_if_na(value: int) -> str:
    """Render ``value``, or ``NA`` when it is zero."""
    return "NA" if value == 0 else str(value)


def add_plus(date: str) -> str:
    """Insert a ``+`` before the first space, e.g. ``5 days`` -> ``5+ days``."""
    index = date.find(" ")
    if index == -1:
        return date
    return f"{date[:index]}+{date[index:]}"


def bool_string(value: object) -> str:
    """``True`` or ``False`` as display text, by the truth of ``value``."""
    return str(bool(value))