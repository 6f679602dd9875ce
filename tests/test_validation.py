import pytest
from app.services.validation import is_present, parse_id, parse_integer


@pytest.mark.parametrize("value, expected", [
    (7, 7),
    (0, 0),
    (-3, -3),
    (7.0, 7),
    ("7", 7),
    (" 12 ", 12),
    ("7.0", 7),
    ("-2", -2),
])
def test_parse_integer_accepts_integral_values(value, expected):
    assert parse_integer(value) == expected


@pytest.mark.parametrize("value", [7.5, "7.5", "abc", "", "  ", None, True, False, "nan", "inf", "1_000", [7], {"a": 1}])
def test_parse_integer_rejects_everything_else(value):
    assert parse_integer(value) is None


def test_is_present_uses_truthiness():
    assert is_present("Ana")
    assert is_present(5)
    assert not is_present("")
    assert not is_present(0)
    assert not is_present(None)


def test_parse_id():
    assert parse_id("15") == 15
    assert parse_id("0") is None
    assert parse_id("abc") is None
    assert parse_id("1.5") is None
