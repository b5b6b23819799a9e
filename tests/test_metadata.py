import pytest

from betterinfo.metadata import (
    add_plus,
    bool_string,
    demon_difficulty_icon,
    difficulty_icon,
    game_version_name,
    password_string,
    string_date,
    zero_if_na,
)


@pytest.mark.parametrize("version", [0, -3, 100, 250])
def test_game_version_out_of_range(version):
    assert game_version_name(version) == "NA"


def test_game_version_special_cases():
    assert game_version_name(10) == "1.7"
    assert game_version_name(11) == "Early 1.8"


def test_game_version_old():
    assert game_version_name(7) == "1.6"


def test_game_version_new():
    assert game_version_name(21) == "2.1"


@pytest.mark.parametrize("version", range(1, 10))
def test_game_version_old_prefix(version):
    assert game_version_name(version) == f"1.{version - 1}"


@pytest.mark.parametrize("version", range(18, 100))
def test_game_version_new_has_one_decimal(version):
    name = game_version_name(version)
    assert float(name) == pytest.approx(version / 10)
    assert len(name.split(".")[1]) == 1


def test_string_date():
    assert string_date("") == "NA"
    assert string_date("3 days") == "3 days ago"


@pytest.mark.parametrize(
    "stars,icon",
    [
        (1, "difficulty_auto_btn_001.png"),
        (2, "difficulty_01_btn_001.png"),
        (3, "difficulty_02_btn_001.png"),
        (5, "difficulty_03_btn_001.png"),
        (6, "difficulty_04_btn_001.png"),
        (9, "difficulty_05_btn_001.png"),
        (10, "difficulty_06_btn_001.png"),
        (0, "difficulty_00_btn_001.png"),
        (11, "difficulty_00_btn_001.png"),
    ],
)
def test_difficulty_icon(stars, icon):
    assert difficulty_icon(stars) == icon


@pytest.mark.parametrize(
    "demon,icon",
    [
        (3, "difficulty_07_btn_001.png"),
        (4, "difficulty_08_btn_001.png"),
        (5, "difficulty_09_btn_001.png"),
        (6, "difficulty_10_btn_001.png"),
        (0, "difficulty_06_btn_001.png"),
        (2, "difficulty_06_btn_001.png"),
    ],
)
def test_demon_difficulty_icon(demon, icon):
    assert demon_difficulty_icon(demon) == icon


def test_password_special():
    assert password_string(0) == "NA"
    assert password_string(1) == "Free Copy"


@pytest.mark.parametrize("code", [0, 123, 9999])
def test_password_short_form(code):
    assert password_string(10000 + code) == str(code)


@pytest.mark.parametrize("code", [0, 4567, 999999])
def test_password_long_form(code):
    assert password_string(1000000 + code) == str(code)


@pytest.mark.parametrize("value", [5, 20000, 999999, -1, 2000000])
def test_password_invalid(value):
    assert password_string(value) == f"Invalid ({value})"


def test_zero_if_na():
    assert zero_if_na(0) == "NA"
    assert zero_if_na(17) == "17"
    assert zero_if_na(-4) == "-4"


@pytest.mark.parametrize("date", ["5 days", "1 year 2 months", "a b"])
def test_add_plus_inserts_before_first_space(date):
    result = add_plus(date)
    index = date.index(" ")
    assert result[index] == "+"
    assert result.replace("+", "", 1) == date


def test_add_plus_without_space():
    assert add_plus("now") == "now"


def test_bool_string():
    assert bool_string(True) == "True"
    assert bool_string(False) == "False"