import pytest

from pushswap.libft.strings import (
    strchr,
    strdup,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


@pytest.mark.parametrize("text", ["", "a", "hello world", "push swap"])
def test_strlen_counts_characters(text):
    assert strlen(text) == len(text)


def test_strchr_finds_first_occurrence():
    text = "hello"
    index = strchr(text, "l")
    assert text[index] == "l"
    assert "l" not in text[:index]


def test_strchr_accepts_code_point():
    assert strchr("hello", ord("o")) == strchr("hello", "o")


def test_strchr_missing_gives_none():
    assert strchr("hello", "z") is None


def test_strchr_terminator_finds_end():
    assert strchr("hello", 0) == len("hello")
    assert strrchr("hello", "\0") == len("hello")


def test_strrchr_finds_last_occurrence():
    text = "hello"
    index = strrchr(text, "l")
    assert text[index] == "l"
    assert "l" not in text[index + 1 :]
    assert strrchr(text, "l") > strchr(text, "l")


def test_strrchr_missing_gives_none():
    assert strrchr("abc", "d") is None


def test_strchr_rejects_long_string():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strdup_equal_copy():
    original = "duplicate me"
    assert strdup(original) == original


def test_strncmp_equal_strings():
    assert strncmp("abc", "abc", 3) == 0


def test_strncmp_zero_length_is_equal():
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_sign_follows_first_difference():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0


def test_strncmp_stops_after_n():
    assert strncmp("abc", "abd", 2) == 0


def test_strncmp_shorter_string_sorts_first():
    assert strncmp("ab", "abc", 5) < 0
    assert strncmp("abc", "ab", 5) > 0


def test_strncmp_antisymmetric():
    assert strncmp("hello", "help", 4) == -strncmp("help", "hello", 4)


def test_strnstr_empty_needle_found_at_start():
    assert strnstr("anything", "", 3) == 0


def test_strnstr_finds_needle():
    big = "foo bar baz"
    index = strnstr(big, "bar", len(big))
    assert big[index : index + 3] == "bar"


def test_strnstr_respects_length_limit():
    big = "foo bar baz"
    start = big.index("bar")
    assert strnstr(big, "bar", start + 2) is None
    assert strnstr(big, "bar", start + 3) == start


def test_strnstr_after_partial_match():
    big = "aaab"
    index = strnstr(big, "aab", len(big))
    assert big[index:] == "aab"


def test_strnstr_missing():
    assert strnstr("abc", "abcd", 10) is None


def test_strlcpy_fits():
    src = "hello"
    copied, total = strlcpy(src, len(src) + 1)
    assert copied == src
    assert total == len(src)


def test_strlcpy_truncates():
    src = "hello"
    copied, total = strlcpy(src, 3)
    assert len(copied) == 2
    assert src.startswith(copied)
    assert total == len(src)


def test_strlcpy_zero_size():
    copied, total = strlcpy("hello", 0)
    assert copied == ""
    assert total == len("hello")


def test_strlcat_fits():
    result, total = strlcat("foo", "bar", 10)
    assert result == strjoin("foo", "bar")
    assert total == len("foo") + len("bar")


def test_strlcat_truncates_to_size_minus_one():
    dst, src = "foo", "barbaz"
    size = 6
    result, total = strlcat(dst, src, size)
    assert len(result) == size - 1
    assert result.startswith(dst)
    assert src.startswith(result[len(dst) :])
    assert total == len(dst) + len(src)


def test_strlcat_size_not_past_destination():
    result, total = strlcat("hello", "xy", 3)
    assert result == "hello"
    assert total == len("xy") + 3


def test_strlcat_zero_size():
    result, total = strlcat("hello", "xy", 0)
    assert result == "hello"
    assert total == len("xy")


def test_strjoin_round_trip_with_substr():
    joined = strjoin("push", "swap")
    assert substr(joined, 0, len("push")) == "push"
    assert substr(joined, len("push"), 100) == "swap"


def test_substr_start_past_end():
    assert substr("abc", 5, 2) == ""


def test_substr_zero_length():
    assert substr("abc", 1, 0) == ""


def test_substr_clamps_length():
    text = "abcdef"
    assert substr(text, 2, 100) == text[2:]


def test_substr_negative_start_rejected():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strtrim_removes_both_ends():
    assert strtrim("xxhelloxx", "x") == "hello"


def test_strtrim_keeps_inner_characters():
    result = strtrim("  a b  ", " ")
    assert result[0] != " " and result[-1] != " "
    assert " " in result


def test_strtrim_everything_trimmed():
    assert strtrim("xyxy", "xy") == ""


def test_strtrim_empty_charset():
    assert strtrim("  hi  ", "") == "  hi  "


def test_strtrim_charset_must_be_string():
    with pytest.raises(TypeError):
        strtrim("abc", None)