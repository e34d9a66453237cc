import string

import pytest

from pushswap.charclass import (
    atoi,
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    itoa,
    memchr,
    memcmp,
    tolower,
    toupper,
)


@pytest.mark.parametrize(
    "number", [0, 1, -1, 7, 42, -42, 1000, 2147483647, -2147483648]
)
def test_itoa_atoi_round_trip(number):
    assert atoi(itoa(number)) == number


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_zero():
    assert itoa(0) == "0"


def test_atoi_skips_whitespace_and_reads_sign():
    assert atoi(" \t\n\v\f\r-42") == -42
    assert atoi("+17") == 17


def test_atoi_stops_at_non_digit():
    assert atoi("12abc") == 12


def test_atoi_multiple_signs_yield_zero():
    assert atoi("+-5") == atoi("--5") == atoi("abc")


def test_atoi_without_digits():
    assert atoi("abc") == atoi("") == atoi("-")
    assert atoi("") == 0


def test_atoi_wraps_past_int_max():
    assert atoi("2147483648") == -2147483648


def test_letters_are_alpha_and_alnum():
    for ch in string.ascii_letters:
        assert isalpha(ch)
        assert isalnum(ch)
        assert not isdigit(ch)


def test_digits_are_digit_and_alnum():
    for ch in string.digits:
        assert isdigit(ch)
        assert isalnum(ch)
        assert not isalpha(ch)


def test_alnum_is_alpha_or_digit_over_all_bytes():
    for code in range(256):
        assert isalnum(code) == (isalpha(code) or isdigit(code))


def test_string_and_code_agree():
    for code in range(128):
        ch = chr(code)
        assert isalpha(ch) == isalpha(code)
        assert isprint(ch) == isprint(code)


def test_isascii_bounds():
    assert isascii(0)
    assert isascii(127)
    assert not isascii(128)
    assert not isascii(-1)


def test_isprint_bounds():
    assert isprint(" ")
    assert isprint("~")
    assert not isprint("\x7f")
    assert not isprint("\x1f")


def test_case_round_trip():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert toupper(lower) == upper
        assert tolower(upper) == lower
        assert tolower(toupper(lower)) == lower


def test_case_leaves_non_letters_alone():
    for ch in string.digits + string.punctuation + " ":
        assert toupper(ch) == ch
        assert tolower(ch) == ch


def test_case_keeps_integer_type():
    assert toupper(ord("a")) == ord("A")
    assert tolower(ord("Z")) == ord("z")


def test_char_must_be_single():
    with pytest.raises(ValueError):
        isalpha("ab")
    with pytest.raises(ValueError):
        toupper("")


def test_memchr_matches_first_occurrence():
    data = b"hello"
    assert memchr(data, ord("l"), len(data)) == data.index(b"l")


def test_memchr_respects_count():
    assert memchr(b"hello", ord("l"), 2) is None


def test_memchr_uses_low_byte():
    assert memchr(b"\x01", 257, 1) == 0


def test_memchr_count_too_large():
    with pytest.raises(ValueError):
        memchr(b"ab", ord("a"), 3)


def test_memcmp_equal_prefix():
    assert memcmp(b"abc", b"abd", 2) == 0
    assert memcmp(b"abc", b"abc", 3) == 0


def test_memcmp_difference_of_first_mismatch():
    assert memcmp(b"abc", b"abd", 3) == ord("c") - ord("d")


def test_memcmp_antisymmetric():
    assert memcmp(b"xyz", b"xaz", 3) == -memcmp(b"xaz", b"xyz", 3)


def test_memcmp_bytes_are_unsigned():
    assert memcmp(b"\xff", b"\x00", 1) > 0


def test_memcmp_negative_count():
    with pytest.raises(ValueError):
        memcmp(b"a", b"a", -1)