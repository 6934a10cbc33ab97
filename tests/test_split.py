import pytest

from zesh.libft.split import split, split_size, split_space, word_counter

SEPARATED = ["a,b,,c", ",,lead", "trail,,", "", ",,,", "single"]
SPACED = ["hello world", "  lead", "trail \t\n", "", " \t\v\f\r\n", "one\ttwo\nthree"]


@pytest.mark.parametrize("s", SEPARATED)
def test_split_has_no_empty_or_separator(s):
    parts = split(s, ",")
    assert all(parts)
    assert all("," not in part for part in parts)
    assert "".join(parts) == s.replace(",", "")


def test_split_pinned_example():
    assert split("ls,-l,,/tmp", ",") == ["ls", "-l", "/tmp"]


def test_split_empty_string():
    assert split("", ",") == []


def test_split_bad_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


@pytest.mark.parametrize("s", SPACED)
def test_split_space_invariants(s):
    parts = split_space(s)
    assert all(parts)
    assert all(not any(ch in " \t\n\v\f\r" for ch in part) for part in parts)
    assert len(parts) == word_counter(s)


def test_split_space_pinned_example():
    assert split_space("  echo\t hi\n") == ["echo", "hi"]


def test_split_space_keeps_non_ascii_space():
    assert split_space("a\u00a0b") == ["a\u00a0b"]


@pytest.mark.parametrize("s", SPACED)
def test_word_counter_zero_only_for_blank(s):
    assert (word_counter(s) == 0) == (s.strip(" \t\n\v\f\r") == "")


def test_split_size_counts_list():
    parts = split_space("a b c d")
    assert split_size(parts) == len(parts)


def test_split_size_stops_at_none():
    parts = ["x", "y", None, "z"]
    assert split_size(parts) == parts.index(None)