import pytest

from zesh.source import EOS, Source


def test_reads_every_character_then_eos():
    src = Source("ab")
    assert src.get_next_char() == "a"
    assert src.get_next_char() == "b"
    assert src.get_next_char() is EOS
    assert src.get_next_char() is EOS


def test_cursor_starts_before_first_character():
    src = Source("xyz")
    assert src.pos == -1
    assert src.size == 3
    assert not src.at_end


def test_empty_source_is_immediately_at_eos():
    src = Source("")
    assert src.peek_next_char() is EOS
    assert src.get_next_char() is EOS


def test_peek_does_not_advance():
    src = Source("q")
    assert src.peek_next_char() == "q"
    assert src.peek_next_char() == "q"
    assert src.pos == -1
    assert src.get_next_char() == "q"
    assert src.peek_next_char() is EOS


def test_give_back_char_rereads():
    src = Source("hi")
    first = src.get_next_char()
    src.give_back_char()
    assert src.get_next_char() == first


def test_give_back_char_before_start_is_noop():
    src = Source("hi")
    src.give_back_char()
    assert src.pos == -1
    assert src.get_next_char() == "h"


def test_at_end_after_reading_everything():
    src = Source("a")
    src.get_next_char()
    src.get_next_char()
    assert src.at_end
    assert src.pos == src.size


def test_skip_white_spaces_stops_at_word():
    src = Source(" \t\n word")
    src.skip_white_spaces()
    assert src.get_next_char() == "w"


def test_skip_white_spaces_on_blank_line_reaches_end():
    src = Source("   ")
    src.skip_white_spaces()
    assert src.peek_next_char() is EOS


def test_skip_white_spaces_without_spaces_leaves_cursor():
    src = Source("abc")
    src.skip_white_spaces()
    assert src.pos == -1


def test_non_string_buffer_is_rejected():
    with pytest.raises(TypeError):
        Source(None)