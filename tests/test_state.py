import pytest

from sylvan.primitives import CharPos, Cursor, InsertPos, Line, Point, Window
from sylvan.state import State


def seq(a, f, b):
    state = State.from_spec(a)
    f(state)
    assert state == State.from_spec(b)


def assert_window(s, w, h, offset, t):
    s.resize_window(w, h)
    s.window = s.window.at_line(s, offset)
    split = t.split("\n") if t else []
    cp = s.cursor_position()
    for i, line in enumerate(s.window_text()):
        if i < split.len() if False else i < len(split):
            expected = split[i]
            under = expected.find("_")
            arrow = expected.find("<")
            if under >= 0:
                assert cp == Point(under, i)
                expected = expected.replace("_", "")
            elif arrow >= 0:
                assert cp == Point(arrow - 1, i)
                expected = expected.replace("<", "")
            assert line == expected
        else:
            assert line is None


@pytest.mark.parametrize(
    "spec",
    ["_", "foo_", "foo\n_", "foo\nbar_", "<", "x<", "xx<", "x<x", "x\n<", "x\nx<"],
)
def test_to_spec_roundtrip(spec):
    assert State.from_spec(spec).to_spec() == spec


def test_window():
    s = State.from_spec("aaaa\nbbbb\ncccc\n_dddd")
    assert_window(s, 10, 10, 0, "aaaa\nbbbb\ncccc\n_dddd")
    assert_window(s, 10, 3, 0, "aaaa\nbbbb\ncccc")
    assert_window(s, 10, 3, 1, "bbbb\ncccc\n_dddd")
    assert s.window_text() == ["bbbb", "cccc", "dddd"]


def test_window_cursor():
    s = State.from_spec("aaaa\nbbbb\ncccc\n_dddd")
    assert_window(s, 10, 3, 0, "aaaa\nbbbb\ncccc")
    assert s.cursor_position() is None


def test_window_adjust():
    s = State.from_spec("aaaa\nbbbb\ncccc\n_dddd")
    assert_window(s, 10, 3, 0, "aaaa\nbbbb\ncccc")
    s.window = s.window.adjust(s)
    assert s.window == Window(Line(1, 0), 3)
    assert_window(s, 10, 3, 1, "bbbb\ncccc\n_dddd")


def test_from_spec_cursors():
    assert State.from_spec("x<x").cursor == Cursor(CharPos(0, 0))
    assert State.from_spec("ab\nc_d").cursor == Cursor(InsertPos(1, 1))
    assert State.from_spec("ab\nc_d").text() == "ab\ncd"


def test_new_state_defaults():
    s = State("hello\nworld")
    assert s.text() == "hello\nworld"
    assert s.cursor == Cursor(CharPos(0, 0))
    assert s.width == 80


@pytest.mark.parametrize(
    "start, pos, text, end",
    [
        ("_", (0, 0), "a", "a_"),
        ("xx_", (0, 0), "a", "axx_"),
        ("_xx", (0, 2), "a", "_xxa"),
        ("_", (0, 0), "a\nb", "a\nb_"),
    ],
)
def test_insert(start, pos, text, end):
    seq(start, lambda s: s.insert(pos, text), end)


def test_insert_lines_accepts_list():
    s = State.from_spec("_")
    s.insert_lines(InsertPos(0, 0), ["ab", "cd"])
    assert s.text() == "ab\ncd"
    assert s.cursor == Cursor(InsertPos(1, 2))


@pytest.mark.parametrize(
    "start, a, b, end",
    [
        ("a_", (0, 0), (0, 1), "_"),
        ("ab_", (0, 0), (0, 1), "b_"),
        ("ab_", (0, 1), (0, 2), "a_"),
        ("a\n_b", (0, 0), (1, 0), "_b"),
        ("a\n_b", (0, 1), (1, 0), "a_b"),
        ("a\nb\n_c", (0, 1), (2, 0), "a_c"),
        ("ab\nc\n_de", (0, 1), (2, 1), "a_e"),
    ],
)
def test_delete(start, a, b, end):
    seq(start, lambda s: s.delete(a, b), end)


def test_delete_empty_range_is_noop():
    s = State.from_spec("ab_")
    s.delete((0, 1), (0, 1))
    assert s == State.from_spec("ab_")


def test_delete_reversed_chunks_raises():
    s = State.from_spec("a\nb\nc_")
    with pytest.raises(ValueError):
        s.delete((2, 0), (0, 1))


def test_last():
    assert State("ab\ncde").last() == InsertPos(1, 2)
    assert State("").last() == InsertPos(0, 0)


def test_line_and_text_range():
    s = State("abc\ndef")
    assert s.line_range((0, 1), (0, 2)) == ["b"]
    assert s.line_range((0, 1), (1, 2)) == ["bc", "de"]
    assert s.text_range((0, 1), (1, 2)) == "bc\nde"


def test_resize_and_wrap():
    s = State("aaaa bbbb")
    assert s.resize_window(5, 3) == 2
    assert s.resize_window(5, 3) == 2
    assert s.line_height() == 2
    assert s.window_text() == ["aaaa", "bbbb", None]


def test_cursor_shift_and_position():
    s = State("hello")
    s.resize_window(80, 5)
    s.cursor_shift(2)
    assert s.cursor == Cursor(CharPos(0, 2))
    assert s.cursor_position() == Point(2, 0)
    s.cursor_shift(-10)
    assert s.cursor == Cursor(CharPos(0, 0))


def test_cursor_shift_chunk():
    s = State("a\nb\nc")
    s.resize_window(80, 3)
    s.cursor_shift_chunk(1)
    assert s.cursor == Cursor(CharPos(1, 0))
    s.cursor_shift_chunk(10)
    assert s.cursor == Cursor(CharPos(2, 0))


def test_cursor_shift_line_across_wraps():
    s = State("aaaa bbbb")
    s.resize_window(5, 3)
    s.cursor_shift(1)
    s.cursor_shift_line(1)
    assert s.cursor == Cursor(CharPos(0, 6))
    assert s.cursor_position() == Point(1, 1)


def test_cursor_shift_moves_window():
    s = State("a\nb\nc\nd")
    s.resize_window(80, 2)
    s.cursor_shift_chunk(3)
    assert s.window == Window(Line(2, 0), 2)
    assert s.window_text() == ["c", "d"]
    assert s.cursor_position() == Point(0, 1)