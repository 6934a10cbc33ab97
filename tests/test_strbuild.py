import pytest

from zesh.libft.charclass import str_upper, to_upper
from zesh.libft.strbuild import (
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strtrim,
    substr,
)


@pytest.mark.parametrize("src", ["", "a", "hello world"])
def test_strlcpy_with_room_copies_everything(src):
    copied, total = strlcpy(src, len(src) + 1)
    assert copied == src
    assert total == len(src)


@pytest.mark.parametrize("dstsize", [1, 2, 5])
def test_strlcpy_truncates(dstsize):
    src = "truncated text"
    copied, total = strlcpy(src, dstsize)
    assert len(copied) == dstsize - 1
    assert src.startswith(copied)
    assert total == len(src)
    assert total >= dstsize


def test_strlcpy_zero_size_copies_nothing():
    copied, total = strlcpy("abc", 0)
    assert copied == ""
    assert total == len("abc")


def test_strlcpy_negative_size_raises():
    with pytest.raises(ValueError):
        strlcpy("abc", -1)


def test_strlcat_with_room_appends():
    dst, src = "foo", "bar"
    result, total = strlcat(dst, src, 64)
    assert result.startswith(dst)
    assert result.endswith(src)
    assert len(result) == len(dst) + len(src)
    assert total == len(dst) + len(src)


def test_strlcat_full_buffer_leaves_dst_unchanged():
    dst, src = "abcd", "xyz"
    result, total = strlcat(dst, src, len(dst))
    assert result == dst
    assert total == len(src) + len(dst)


def test_strlcat_truncates():
    dst, src = "ab", "cdefgh"
    dstsize = 5
    result, total = strlcat(dst, src, dstsize)
    assert len(result) == dstsize - 1
    assert (dst + src).startswith(result)
    assert total == len(dst) + len(src)


def test_strdup_returns_equal_string():
    assert strdup("some text") == "some text"
    assert strdup("") == ""


def test_substr_start_beyond_end_is_empty():
    assert substr("abc", 10, 2) == ""


@pytest.mark.parametrize("start,length", [(0, 3), (2, 4), (5, 100), (3, 0)])
def test_substr_is_bounded_slice(start, length):
    s = "abcdefgh"
    part = substr(s, start, length)
    assert len(part) <= length
    assert s[start:].startswith(part)


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)
    with pytest.raises(ValueError):
        substr("abc", 0, -2)


def test_strjoin_concatenates():
    s1, s2 = "left", "right"
    joined = strjoin(s1, s2)
    assert joined.startswith(s1)
    assert joined.endswith(s2)
    assert len(joined) == len(s1) + len(s2)


def test_strtrim_both_ends():
    assert strtrim("  ab  ", " ") == "ab"
    assert strtrim("xxabxyx", "xy") == "ab"


def test_strtrim_empty_set_keeps_string():
    assert strtrim("  ab  ", "") == "  ab  "


def test_strtrim_everything_trimmed():
    assert strtrim("    ", " ") == ""


def test_strmapi_applies_function():
    assert strmapi("hello", lambda i, c: to_upper(c)) == str_upper("hello")


def test_strmapi_passes_index():
    assert strmapi("xyz", lambda i, c: str(i)) == "012"


def test_striteri_modifies_in_place():
    chars = list("shell")
    seen = []

    def record(index, ch):
        seen.append(index)
        return to_upper(ch)

    assert striteri(chars, record) is None
    assert "".join(chars) == str_upper("shell")
    assert seen == list(range(len("shell")))