import pytest

from pyinistore import values


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0", 0),
        ("42", 42),
        ("  42 ", 42),
        ("+3", 3),
        ("-2147483648", -2147483648),
        ("2147483647", 2147483647),
        ("2147483648", None),
        ("1_000", None),
        ("1e3", None),
        ("4.0", None),
        ("", None),
        ("abc", None),
    ],
)
def test_parse_int(text, expected):
    assert values.parse_int(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0", 0),
        ("4294967295", 4294967295),
        ("4294967296", None),
        ("-1", None),
        ("+1", 1),
    ],
)
def test_parse_uint(text, expected):
    assert values.parse_uint(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("true", True),
        ("TRUE", True),
        ("1", True),
        ("false", False),
        ("False", False),
        ("0", False),
        ("yes", None),
        ("", None),
    ],
)
def test_parse_bool(text, expected):
    assert values.parse_bool(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1.5", 1.5),
        ("-0.25", -0.25),
        (".5", 0.5),
        ("3.", 3.0),
        ("1e-3", 0.001),
        ("7", 7.0),
        ("inf", None),
        ("nan", None),
        ("1e400", None),
        ("1_0.5", None),
        ("1.2.3", None),
    ],
)
def test_parse_double(text, expected):
    assert values.parse_double(text) == expected


def test_formatters():
    assert values.format_int(-3) == "-3"
    assert values.format_bool(True) == "true"
    assert values.format_bool(False) == "false"
    assert values.format_double(2.0) == "2.0"
    assert values.parse_double(values.format_double(0.1 + 0.2)) == 0.1 + 0.2
    with pytest.raises(ValueError):
        values.format_uint(2**32)
