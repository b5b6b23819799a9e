"""Estimate how long a level takes to play from its object data."""

from __future__ import annotations

import logging
import re

from .text import decode_base64_gzip

_log = logging.getLogger(__name__)

_SPEED_PORTALS = frozenset({200, 201, 202, 203, 1334})

_DEFAULT_TRAVEL = 311.58011
_TRAVEL_BY_PORTAL = {
    200: 251.16008,
    202: 387.42014,
    203: 468.00015,
    1334: 576.00018,
}

_DEFAULT_PORTAL = 201
_PORTAL_BY_SPEED = {
    1: 200,
    2: 203,
    3: 202,
    4: 1334,
}

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INT32_MIN, _INT32_MAX = -(2**31), 2**31 - 1
_FLOAT32_MAX = 3.4028234663852886e38


def is_speed_portal(object_id: int) -> bool:
    """Whether an object id is one of the speed portals."""
    return object_id in _SPEED_PORTALS


def travel_for_portal_id(portal_id: int) -> float:
    """Horizontal units travelled per second under a speed portal."""
    return _TRAVEL_BY_PORTAL.get(portal_id, _DEFAULT_TRAVEL)


def speed_to_portal_id(speed: int) -> int:
    """Portal id matching a level's starting speed setting."""
    return _PORTAL_BY_SPEED.get(speed, _DEFAULT_PORTAL)


def _parse_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    value = int(match.group(1))
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _parse_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    value = float(match.group(1))
    if value == value and abs(value) != float("inf") and abs(value) > _FLOAT32_MAX:
        raise ValueError(f"number out of range: {text!r}")
    return value


def _object_fields(level_object: str) -> tuple[int, float, int | None]:
    """Object id, x position and any starting-speed portal found in one object."""
    object_id = 0
    x_pos = 0.0
    start_portal: int | None = None
    key = ""
    for index, token in enumerate(level_object.split(",")):
        if index % 2 == 0:
            key = token
        elif key == "1":
            object_id = _parse_int(token)
        elif key == "2":
            x_pos = _parse_float(token)
        elif key == "kA4":
            start_portal = speed_to_portal_id(_parse_int(token))
        if x_pos != 0 and object_id != 0:
            break
    return object_id, x_pos, start_portal


def time_for_level_string(level_string: str) -> float:
    """Seconds needed to reach the last object of an encoded level string.

    Returns 0 when the level data cannot be decoded or parsed.
    """
    try:
        decoded = decode_base64_gzip(level_string)
        portal_x = 0.0
        portal_id = 0
        total = 0.0
        max_pos = 0.0
        for level_object in decoded.split(";"):
            object_id, x_pos, start_portal = _object_fields(level_object)
            if start_portal is not None:
                portal_id = start_portal
            max_pos = max(max_pos, x_pos)
            if not is_speed_portal(object_id):
                continue
            total += (x_pos - portal_x) / travel_for_portal_id(portal_id)
            portal_id = object_id
            portal_x = x_pos
        total += (max_pos - portal_x) / travel_for_portal_id(portal_id)
        return total
    except ValueError as exc:
        _log.error("An exception has occured while calculating time for levelString: %s", exc)
        return 0.0