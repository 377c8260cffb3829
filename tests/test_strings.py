import pytest

from ftlib.strings import (
    rptcheck_str,
    str_cmp,
    strbuild,
    strchr,
    strchr_pos,
    strdup,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strncmp,
    strnstr,
    strnstr_pos,
    strrchr,
    substr,
)


@pytest.mark.parametrize("text", ["", "a", "hello world", "tab\there"])
def test_strlen_matches_len(text):
    assert strlen(text) == len(text)


def test_strchr_returns_suffix_from_first_match():
    text = "hello world"
    result = strchr(text, "o")
    assert result is not None
    assert result.startswith("o")
    assert text.endswith(result)
    assert "o" not in text[: len(text) - len(result)]


def test_strchr_missing_and_none():
    assert strchr("hello", "z") is None
    assert strchr(None, "a") is None


def test_strchr_nul_gives_empty_suffix():
    assert strchr("hello", "\0") == ""
    assert strchr("hello", 0) == ""


def test_strchr_accepts_code_point():
    assert strchr("hello", ord("l")) == strchr("hello", "l")


def test_strchr_rejects_long_string():
    with pytest.raises(ValueError):
        strchr("hello", "ll")


def test_strrchr_returns_suffix_from_last_match():
    text = "hello world"
    result = strrchr(text, "o")
    assert result is not None
    assert result.startswith("o")
    assert text.endswith(result)
    assert "o" not in result[1:]


def test_strrchr_missing_and_nul():
    assert strrchr("hello", "z") is None
    assert strrchr("hello", "\0") == ""


def test_strchr_pos_finds_first_index():
    text = "banana"
    pos = strchr_pos(text, "n")
    assert text[pos] == "n"
    assert "n" not in text[:pos]


def test_strchr_pos_missing_none_and_nul():
    assert strchr_pos("banana", "z") == -1
    assert strchr_pos(None, "a") == -1
    assert strchr_pos("banana", "\0") == len("banana")


def test_strnstr_empty_little_returns_big():
    assert strnstr("abcdef", "", 0) == "abcdef"


def test_strnstr_found_within_bound():
    result = strnstr("abcdef", "cd", 4)
    assert result is not None
    assert result.startswith("cd")
    assert "abcdef".endswith(result)


def test_strnstr_match_past_bound_is_rejected():
    assert strnstr("abcdef", "cd", 3) is None
    assert strnstr("abcdef", "xy", 6) is None


def test_strnstr_pos_matches_strnstr():
    big = "the quick fox"
    pos = strnstr_pos(big, "quick", len(big))
    assert big[pos:] == strnstr(big, "quick", len(big))


def test_strnstr_pos_absent_or_empty_is_zero():
    assert strnstr_pos("abcdef", "xy", 6) == 0
    assert strnstr_pos("abcdef", "", 6) == 0
    assert strnstr_pos("abcdef", "ef", 5) == 0


def test_strncmp_equal_and_limited():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abcX", "abcY", 3) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_sign_and_antisymmetry():
    assert strncmp("abcX", "abcY", 4) == -1
    assert strncmp("abcY", "abcX", 4) == 1
    assert strncmp("ab", "abc", 5) == -1
    assert strncmp("abc", "ab", 5) == 1


def test_str_cmp():
    assert str_cmp("same", "same") is True
    assert str_cmp("same", "samex") is False
    assert str_cmp("samex", "same") is False
    assert str_cmp("", "") is True


def test_rptcheck_str():
    assert rptcheck_str(None) is False
    assert rptcheck_str([]) is False
    assert rptcheck_str(["a", "b", "c"]) is False
    assert rptcheck_str(["a", "b", "a"]) is True


def test_strlcpy_truncates_and_reports_length():
    copied, length = strlcpy("hello", 3)
    assert length == len("hello")
    assert len(copied) == 2
    assert "hello".startswith(copied)


def test_strlcpy_fits_and_zero_size():
    assert strlcpy("hi", 10) == ("hi", 2)
    assert strlcpy("hi", 0) == ("", 2)


def test_strlcat_fits():
    assert strlcat("ab", "cd", 10) == ("ab" + "cd", len("abcd"))


def test_strlcat_truncates():
    result, total = strlcat("ab", "cdef", 4)
    assert len(result) == 3
    assert result.startswith("ab")
    assert total == len("ab") + len("cdef")


def test_strlcat_size_below_dest_length():
    result, total = strlcat("abcdef", "xyz", 2)
    assert result == "abcdef"
    assert total == len("xyz") + 2


def test_strdup_copies_and_rejects_none():
    assert strdup("text") == "text"
    with pytest.raises(TypeError):
        strdup(None)


def test_strjoin():
    assert strjoin("foo", "bar") == "foo" + "bar"
    assert strjoin(None, "bar") is None
    assert strjoin("foo", None) is None


def test_strbuild():
    assert strbuild(None, "bar") == "bar"
    assert strbuild("foo", None) == "foo"
    assert strbuild(None, None) == ""
    assert strbuild("foo", "bar") == "foo" + "bar"


def test_substr_slices():
    text = "hello world"
    part = substr(text, 6, 3)
    assert len(part) == 3
    assert text[6:].startswith(part)
    assert substr(text, 6, 100) == text[6:]


def test_substr_empty_cases():
    assert substr("hello", 10, 3) == ""
    assert substr("hello", 1, 0) == ""
    assert substr("hello", 5, 2) == ""


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)
    with pytest.raises(ValueError):
        substr("hello", 1, -2)