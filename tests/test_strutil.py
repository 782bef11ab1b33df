import pytest

from minishell.strutil import (
    atoi,
    is_alnum,
    itoa,
    split_words,
    strncmp,
    strnstr,
    strtrim,
    substr,
)


@pytest.mark.parametrize("number", [0, 1, -1, 42, -305, 2147483647, -2147483648])
def test_atoi_itoa_round_trip(number):
    assert atoi(itoa(number)) == number


def test_itoa_pinned_values():
    assert itoa(0) == "0"
    assert itoa(-2147483648) == "-2147483648"


def test_atoi_skips_whitespace_and_plus_sign():
    assert atoi(" \t\n\v\f\r+17") == atoi("17")


def test_atoi_negative_is_mirror_of_positive():
    assert atoi("-985") == -atoi("985")


def test_atoi_stops_at_first_non_digit():
    assert atoi("123abc456") == atoi("123")


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == atoi("0")
    assert atoi("--5") == atoi("")


def test_atoi_wraps_like_32_bit_int():
    assert atoi("2147483648") == -2147483648


def test_split_words_drops_empty_pieces():
    words = split_words("  ls   -la  /tmp ", " ")
    assert words == ["ls", "-la", "/tmp"]
    assert "" not in words


def test_split_words_empty_input():
    assert split_words("", " ") == []
    assert split_words("   ", " ") == []


def test_strtrim_both_ends():
    assert strtrim("xxhixx", "x") == "hi"


def test_strtrim_everything_removed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_without_set_returns_text():
    assert strtrim("  keep  ", None) == "  keep  "
    assert strtrim("  keep  ", "") == "  keep  "


def test_substr_middle():
    assert substr("hello", 1, 3) == "ell"


def test_substr_start_past_end():
    assert substr("hello", 5, 2) == ""
    assert substr("hello", 9, 2) == ""


def test_substr_length_clamped():
    assert substr("hello", 2, 100) == "hello"[2:]


def test_strnstr_finds_match_inside_limit():
    haystack = "hello world"
    index = strnstr(haystack, "world", len(haystack))
    assert index == 6
    assert haystack[index:index + len("world")] == "world"


def test_strnstr_match_crossing_limit_is_rejected():
    assert strnstr("hello world", "world", 10) is None


def test_strnstr_empty_needle_is_at_start():
    assert strnstr("abc", "", 0) == 0


def test_strnstr_absent():
    assert strnstr("abc", "zz", 3) is None


def test_strncmp_equal_prefix():
    assert strncmp("abc", "abd", 2) == 0


def test_strncmp_ordering_and_antisymmetry():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) == -strncmp("abc", "abd", 3)


def test_strncmp_shorter_string_sorts_first():
    assert strncmp("ab", "abc", 3) < 0
    assert strncmp("same", "same", 10) == 0


def test_strncmp_zero_limit():
    assert strncmp("a", "b", 0) == 0


@pytest.mark.parametrize("char", ["a", "Z", "0", "9"])
def test_is_alnum_true(char):
    assert is_alnum(char) is True


@pytest.mark.parametrize("char", ["_", " ", "$", "é", "", "ab"])
def test_is_alnum_false(char):
    assert is_alnum(char) is False