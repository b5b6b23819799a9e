"""Small text and number helpers shared across the package."""

from __future__ import annotations

import base64
import binascii
import random
import re
import struct
import zlib

_RANK_ICONS = (
    (10, "rankIcon_top10_001.png"),
    (50, "rankIcon_top50_001.png"),
    (100, "rankIcon_top100_001.png"),
    (200, "rankIcon_top200_001.png"),
    (500, "rankIcon_top500_001.png"),
)

_LEADING_INT = re.compile(r"-?\d+")

_INT32 = (-(2**31), 2**31 - 1)
_INT64 = (-(2**63), 2**63 - 1)

_KIB = 1024
_MIB = 1024 * 1024

_random = random.SystemRandom()


def random_number(start: int, end: int) -> int:
    """A random integer in the inclusive range ``[start, end]``."""
    if start > end:
        raise ValueError(f"empty range: {start}..{end}")
    return _random.randint(start, end)


def rank_icon(position: int) -> str:
    """Sprite name of the leaderboard rank icon for a position."""
    if position == 1:
        return "rankIcon_1_001.png"
    if position > 1000 or position <= 0:
        return "rankIcon_all_001.png"
    for limit, icon in _RANK_ICONS:
        if position <= limit:
            return icon
    return "rankIcon_top1000_001.png"


def _float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def file_size(size: int) -> str:
    """Render a byte count as ``B``, ``KB`` or ``MB`` with four significant digits."""
    if size < 0:
        raise ValueError("size must not be negative")
    if size > _MIB:
        return f"{_float32(_float32(size) / _MIB):.4g}MB"
    if size > _KIB:
        return f"{_float32(_float32(size) / _KIB):.4g}KB"
    return f"{size}B"


def fix_color_crashes(text: str) -> str:
    """Close any colour tags left open so the text renders safely."""
    unclosed = text.count("<c") - text.count("</c>")
    return text + "  </c>" * max(unclosed, 0)


def fix_null_byte_crash(text: str) -> str:
    """Replace NUL characters with spaces."""
    return text.replace("\0", " ")


def response_to_dict(response: str) -> dict[str, str]:
    """Parse a ``key:value:key:value`` server response into a dict."""
    tokens = response.split(":")
    if tokens[-1] == "":
        tokens.pop()
    return dict(zip(tokens[0::2], tokens[1::2]))


def _parse_prefix(text: str, bounds: tuple[int, int]) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        return 0
    value = int(match.group())
    low, high = bounds
    return value if low <= value <= high else 0


def parse_int(text: str) -> int:
    """Leading 32-bit integer of ``text``, or 0 if there is none or it overflows."""
    return _parse_prefix(text, _INT32)


def parse_long(text: str) -> int:
    """Leading 64-bit integer of ``text``, or 0 if there is none or it overflows."""
    return _parse_prefix(text, _INT64)


def decode_base64_gzip(data: str) -> str:
    """Decode URL-safe base64 and inflate gzip or zlib data into text."""
    encoded = data.strip().encode("ascii", errors="strict")
    encoded += b"=" * (-len(encoded) % 4)
    try:
        raw = base64.urlsafe_b64decode(encoded)
    except binascii.Error as exc:
        raise ValueError(f"invalid base64 data: {exc}") from exc
    try:
        inflated = zlib.decompress(raw, 15 + 32)
    except zlib.error as exc:
        raise ValueError(f"invalid compressed data: {exc}") from exc
    return inflated.decode("utf-8", errors="replace")