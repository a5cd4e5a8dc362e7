import pytest

from sylvan.textbuf import TextBuf


def test_new_places_cursor_at_end():
    buf = TextBuf("hello")
    assert buf.cursor == len("hello")
    assert buf.value == "hello"


def test_insert_then_backspace_round_trip():
    buf = TextBuf("hello")
    buf.set_display_width(10)
    assert buf.insert("x") is True
    assert buf.value == "hello" + "x"
    assert buf.backspace() is True
    assert buf.value == "hello"


def test_backspace_on_empty_or_at_start():
    assert TextBuf("").backspace() is False
    buf = TextBuf("abc")
    buf.set_display_width(5)
    buf.goto(0)
    assert buf.backspace() is False
    assert buf.value == "abc"


def test_left_and_right_limits():
    buf = TextBuf("ab")
    buf.set_display_width(5)
    assert buf.right() is False
    assert buf.left() is True
    assert buf.left() is True
    assert buf.left() is False
    assert buf.cursor == 0
    assert buf.right() is True
    assert buf.cursor == 1


def test_goto_reports_change_and_clamps():
    buf = TextBuf("abc")
    buf.set_display_width(5)
    assert buf.goto(3) is False
    assert buf.goto(1) is True
    assert buf.cursor == 1
    buf.goto(100)
    assert buf.cursor == len("abc")


def test_text_is_padded_to_width():
    buf = TextBuf("ab")
    buf.set_display_width(5)
    assert buf.text() == "ab   "


def test_window_scrolls_to_keep_cursor_visible():
    buf = TextBuf("")
    buf.set_display_width(4)
    for ch in "abcdefghij":
        buf.insert(ch)
        assert 0 <= buf.cursor_display() < buf.width
        assert len(buf.text()) == buf.width
    # The cursor sits at the end, so the last character is visible just before it.
    assert buf.text()[buf.cursor_display() - 1] == "j"


@pytest.mark.parametrize("target", [0, 3, 7, 12])
def test_goto_keeps_cursor_in_window(target):
    buf = TextBuf("abcdefghijkl")
    buf.set_display_width(5)
    buf.goto(target)
    assert 0 <= buf.cursor_display() < buf.width
    if target < len(buf.value):
        assert buf.text()[buf.cursor_display()] == buf.value[target]


def test_left_scrolls_window_back():
    buf = TextBuf("abcdefghij")
    buf.set_display_width(3)
    buf.goto(len(buf.value))
    while buf.left():
        assert 0 <= buf.cursor_display() < buf.width
        assert buf.text()[buf.cursor_display()] == buf.value[buf.cursor]
    assert buf.cursor == 0