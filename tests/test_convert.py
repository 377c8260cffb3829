import pytest

from ftlib.convert import atoi, atol, itoa

INT_MIN = -2147483648
INT_MAX = 2147483647


@pytest.mark.parametrize(
    "text,expected",
    [
        ("0", 0),
        ("123", 123),
        ("-123", -123),
        ("+77", 77),
        ("  \t\n\v\f\r 99", 99),
        ("2147483647", INT_MAX),
        ("-2147483648", INT_MIN),
    ],
)
def test_atoi_values(text, expected):
    assert atoi(text) == expected


def test_atoi_stops_at_first_non_digit():
    assert atoi("  -42abc7") == -42
    assert atoi("12 34") == 12


@pytest.mark.parametrize("text", ["", "abc", "-", "+", "--5", "+-5", "   "])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == INT_MIN
    assert atoi("-2147483649") == INT_MAX


def test_atol_handles_64_bit_range():
    assert atol("9223372036854775807") == 2**63 - 1
    assert atol("-9223372036854775808") == -(2**63)
    assert atol("2147483648") == 2147483648
    assert atol("9223372036854775808") == -(2**63)


def test_atol_agrees_with_atoi_in_int_range():
    for text in ["0", "-1", " +15x", "2147483647", "-2147483648"]:
        assert atol(text) == atoi(text)


def test_itoa_limits():
    assert itoa(INT_MIN) == "-2147483648"
    assert itoa(INT_MAX) == "2147483647"
    assert itoa(0) == "0"


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, -10, 12345, -98765, INT_MAX, INT_MIN])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n
    assert itoa(n) == str(n)