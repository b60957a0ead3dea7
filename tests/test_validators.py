import pytest

from shotargs.core.errors import ErrorKind, OptionError
from shotargs.utils import validators


@pytest.mark.parametrize(
    "text, expected",
    [("0", 0), ("42", 42), ("-17", -17), ("+5", 5), ("  8", 8), ("2147483647", 2147483647), ("-2147483648", -2147483648)],
)
def test_parse_required_decimal_returns_exact_value(text, expected):
    assert validators.parse_required_decimal(text) == expected


def test_parse_required_decimal_tolerates_trailing_characters():
    assert validators.parse_required_decimal("10abc") == 10


@pytest.mark.parametrize("text", ["2147483648", "-2147483649", "99999999999999999999999"])
def test_parse_required_decimal_rejects_values_outside_int32(text):
    with pytest.raises(OptionError) as info:
        validators.parse_required_decimal(text)
    assert info.value.kind is ErrorKind.NUMBER_OUT_OF_RANGE


@pytest.mark.parametrize("text", ["", "abc", "-", "x10"])
def test_parse_required_decimal_rejects_non_numbers(text):
    with pytest.raises(OptionError) as info:
        validators.parse_required_decimal(text, option="delay")
    assert info.value.kind is ErrorKind.NOT_A_NUMBER
    assert info.value.option == "delay"
    assert "not a number" in str(info.value)


def test_decimal_parser_does_not_read_hex():
    assert validators.parse_required_decimal("0x1f") == 0


@pytest.mark.parametrize("text, expected", [("0x1f", 31), ("0X1F", 31), ("010", 8), ("10", 10), ("-0x10", -16), ("0", 0)])
def test_parse_required_number_detects_base(text, expected):
    assert validators.parse_required_number(text) == expected


def test_parse_required_number_rejects_none():
    with pytest.raises(TypeError):
        validators.parse_required_number(None)


def test_non_negative():
    assert validators.non_negative(-3) == 0
    assert validators.non_negative(0) == 0
    assert validators.non_negative(7) == 7


@pytest.mark.parametrize("number", [-100, 0, 1, 5, 8, 9, 1000])
def test_require_range_stays_within_bounds(number):
    assert 1 <= validators.require_range(number, 1, 8) <= 8


def test_require_range_keeps_values_inside():
    assert validators.require_range(50, 1, 100) == 50
    assert validators.require_range(0, 1, 100) == 1
    assert validators.require_range(200, 1, 100) == 100


def test_is_string():
    assert validators.is_string("a")
    assert not validators.is_string("")
    assert not validators.is_string(None)


@pytest.mark.parametrize("text", ["9" * 5000, "-" + "9" * 5000, "1" + "0" * 12])
def test_parse_required_decimal_rejects_huge_digit_runs(text):
    with pytest.raises(OptionError) as info:
        validators.parse_required_decimal(text)
    assert info.value.kind is ErrorKind.NUMBER_OUT_OF_RANGE


@pytest.mark.parametrize("text", ["9" * 5000, "0x" + "f" * 5000, "0" + "7" * 5000])
def test_parse_required_number_rejects_huge_digit_runs(text):
    with pytest.raises(OptionError) as info:
        validators.parse_required_number(text)
    assert info.value.kind is ErrorKind.NUMBER_OUT_OF_RANGE


def test_leading_zeros_do_not_count_towards_length():
    assert validators.parse_required_decimal("0" * 5000 + "42") == 42
    assert validators.parse_required_number("0x" + "0" * 5000 + "1f") == 31
