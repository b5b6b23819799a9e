# betterinfo

Helpers for working with level data: names for game versions, difficulty
icons, level passwords, time and size formatting, progress strings, and an
estimate of a level's play time from its compressed level string.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Modules

- `betterinfo.metadata`: `game_version_name`, `string_date`,
  `difficulty_icon`, `demon_difficulty_icon`, `password_string`,
  `zero_if_na`, `add_plus`, `bool_string`.
- `betterinfo.timeutils`: `time_to_string` (local `YYYY-MM-DD HH:MM`),
  `iso_time_to_string`, `working_time`, `platformer_time`,
  `timestamp_to_human_readable` (takes an optional `now`, defaulting to the
  current time).
- `betterinfo.text`: `rank_icon`, `file_size`, `fix_color_crashes`,
  `fix_null_byte_crash`, `response_to_dict`, `parse_int`, `parse_long`,
  `decode_base64_gzip`, `random_number`.
- `betterinfo.leveltime`: `time_for_level_string` and the speed portal
  helpers `is_speed_portal`, `travel_for_portal_id`, `speed_to_portal_id`.
- `betterinfo.levels`: the `Level` dataclass (with `difficulty_as_int`,
  `demon_difficulty_as_int` and `has_collected_coins`), the `CompleteMode`
  enum, `completed_levels_in_star_range` and `printable_progress`.

## Examples

```python
from betterinfo.metadata import game_version_name, password_string
from betterinfo.timeutils import working_time
from betterinfo.text import file_size, response_to_dict
from betterinfo.levels import Level, printable_progress

game_version_name(21)          # "2.1"
password_string(10042)         # "42"
working_time(3725)             # "1h 2m 5s"
file_size(2048)                # "2KB"
response_to_dict("1:128:2:Stereo Madness")  # {"1": "128", "2": "Stereo Madness"}
printable_progress("20,30,50", 100)         # "20% 50% 100% "

level = Level(coins=3)
level.has_collected_coins(lambda number: number != 2)  # False
```

`time_for_level_string` takes the URL-safe base64-encoded, gzip- or
zlib-compressed level string and returns the estimated play time in seconds,
accounting for the speed portals placed in the level and its starting speed.
It returns `0.0` (and logs an error) when the string can't be decoded or
parsed. `decode_base64_gzip` on its own raises `ValueError` for bad input.

`random_number(start, end)` raises `ValueError` when `start > end`;
`file_size` raises `ValueError` for a negative size.

## What this package does not do

It works only on values you pass in. It does not read game save files, keep
play statistics, fetch anything from a server, or show any dialogs or
windows. `Level` holds just the fields the checks here use, and coin
collection is decided by the callable you give to `has_collected_coins`.