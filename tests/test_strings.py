import pytest
from hypothesis import given
from hypothesis import strategies as st

from libft.strings import (
    atoi,
    itoa,
    strchr,
    strcmp,
    strlcat,
    strlcpy,
    strncmp,
    strnstr,
    strrchr,
)

ascii_text = st.text(alphabet=st.characters(min_codepoint=1, max_codepoint=127), max_size=30)
int32 = st.integers(min_value=-(2 ** 31), max_value=2 ** 31 - 1)


def _sign(value):
    return (value > 0) - (value < 0)


# atoi

def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n  -42abc") == -42


def test_atoi_plus_sign():
    assert atoi("+17") == 17


def test_atoi_no_digits_is_zero():
    assert atoi("hello") == 0
    assert atoi("") == 0


def test_atoi_double_sign_is_zero():
    assert atoi("--5") == 0


def test_atoi_overflow_past_long():
    assert atoi("99999999999999999999") == -1
    assert atoi("-99999999999999999999") == 0


def test_atoi_wraps_to_int():
    assert atoi("2147483648") == -2147483648


@given(int32)
def test_atoi_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


# itoa

@given(st.integers())
def test_itoa_matches_decimal(n):
    assert int(itoa(n)) == n


def test_itoa_extremes():
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(0) == "0"


# strchr / strrchr

@given(ascii_text, st.characters(min_codepoint=1, max_codepoint=127))
def test_strchr_matches_find(text, ch):
    expected = text.find(ch)
    assert strchr(text, ch) == (None if expected < 0 else expected)


@given(ascii_text, st.characters(min_codepoint=1, max_codepoint=127))
def test_strrchr_matches_rfind(text, ch):
    expected = text.rfind(ch)
    assert strrchr(text, ch) == (None if expected < 0 else expected)


def test_strchr_nul_gives_length():
    assert strchr("abc", "\0") == len("abc")
    assert strrchr("abc", 0) == len("abc")


def test_strchr_int_argument_truncated_to_char():
    assert strchr("abc", ord("b") + 256) == "abc".index("b")


def test_strchr_none_text():
    assert strchr(None, "a") is None


def test_strrchr_none_text_raises():
    with pytest.raises(TypeError):
        strrchr(None, "a")


def test_strchr_rejects_long_string():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


# strcmp / strncmp

@given(ascii_text, ascii_text)
def test_strcmp_sign_matches_ordering(a, b):
    result = strcmp(a, b)
    assert _sign(result) == _sign((a.encode() > b.encode()) - (a.encode() < b.encode()))


@given(ascii_text)
def test_strcmp_equal_is_zero(a):
    assert strcmp(a, a) == 0


def test_strcmp_prefix_difference_is_next_byte():
    assert strcmp("abc", "ab") == ord("c")
    assert strcmp("ab", "abc") == -ord("c")


def test_strcmp_uses_unsigned_bytes():
    assert strcmp(b"\x80", b"\x01") > 0


def test_strncmp_zero_count():
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_limits_comparison():
    assert strncmp("abcd", "abcx", 3) == 0
    assert strncmp("abcd", "abcx", 4) == ord("d") - ord("x")


def test_strncmp_negative_count():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


@given(ascii_text, ascii_text, st.integers(min_value=1, max_value=40))
def test_strncmp_agrees_with_strcmp_on_prefixes(a, b, n):
    assert strncmp(a, b, n) == strcmp(a[:n], b[:n])


# strnstr

def test_strnstr_empty_needle():
    assert strnstr("haystack", "", 0) == 0


def test_strnstr_found_within_length():
    big = "foo bar baz"
    assert strnstr(big, "bar", len(big)) == big.index("bar")


def test_strnstr_match_must_fit_in_length():
    big = "foo bar baz"
    position = big.index("bar")
    assert strnstr(big, "bar", position + 2) is None
    assert strnstr(big, "bar", position + 3) == position


def test_strnstr_absent():
    assert strnstr("foo", "zzz", 3) is None


def test_strnstr_negative_length():
    with pytest.raises(ValueError):
        strnstr("a", "a", -1)


# strlcpy

def test_strlcpy_full_copy():
    dst = bytearray(10)
    assert strlcpy(dst, "hello", 10) == len("hello")
    assert dst[:6] == b"hello\0"


def test_strlcpy_truncates():
    dst = bytearray(b"xxxxxxxx")
    assert strlcpy(dst, "hello", 3) == len("hello")
    assert dst[:3] == b"he\0"
    assert dst[3:] == b"xxxxx"


def test_strlcpy_size_zero_leaves_dst():
    dst = bytearray(b"abc")
    assert strlcpy(dst, "hello", 0) == len("hello")
    assert dst == bytearray(b"abc")


def test_strlcpy_missing_arguments():
    assert strlcpy(None, "hello", 5) == 0
    assert strlcpy(bytearray(4), None, 5) == 0


def test_strlcpy_buffer_too_small():
    with pytest.raises(IndexError):
        strlcpy(bytearray(2), "hello", 10)


# strlcat

def test_strlcat_appends():
    dst = bytearray(b"foo" + bytes(7))
    assert strlcat(dst, "bar", 10) == len("foobar")
    assert dst[:7] == b"foobar\0"


def test_strlcat_truncates_to_size():
    dst = bytearray(b"foo" + bytes(7))
    assert strlcat(dst, "barbaz", 6) == len("foobarbaz")
    assert dst[:6] == b"fooba\0"


def test_strlcat_size_not_past_dst():
    dst = bytearray(b"foo" + bytes(7))
    assert strlcat(dst, "bar", 2) == 2 + len("bar")
    assert dst[:4] == b"foo\0"


def test_strlcat_buffer_too_small():
    with pytest.raises(IndexError):
        strlcat(bytearray(b"ab\0"), "cdef", 10)


@given(ascii_text, ascii_text)
def test_strlcat_with_room_concatenates(a, b):
    dst = bytearray(a.encode() + bytes(len(b) + 1))
    size = len(a) + len(b) + 1
    assert strlcat(dst, b, size) == len(a) + len(b)
    assert bytes(dst[:len(a) + len(b)]) == (a + b).encode()