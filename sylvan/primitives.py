"""Positions, cursors, wrapped lines and chunks used by the text editor.

Functions here take an editor state ``s`` that exposes ``chunks`` (a list of
:class:`Chunk`), ``cursor`` (a :class:`Cursor`), ``last()`` returning the last
:class:`InsertPos`, and ``line_height()`` returning the number of wrapped lines.
"""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional, Union


@dataclass(frozen=True, order=True)
class Point:
    """A screen co-ordinate."""

    x: int
    y: int


@dataclass(frozen=True, order=True)
class Pos(abc.ABC):
    """A chunk/offset position that can be clamped within a state."""

    chunk: int
    offset: int

    @classmethod
    def create(cls, s: Any, chunk: int, offset: int) -> "Pos":
        """Create a position and constrain it within the state."""
        return cls(chunk, offset).constrain(s)

    @abc.abstractmethod
    def constrain(self, s: Any) -> "Pos":
        """Return a copy of this position clamped within the state bounds."""

    def chunk_offset(self) -> tuple[int, int]:
        return (self.chunk, self.offset)

    def is_between(self, s: Any) -> bool:
        """Whether this position falls on elided whitespace between wrapped lines."""
        return s.chunks[self.chunk].offset_is_between(self.offset)

    def shift(self, s: Any, n: int) -> "Pos":
        """Shift within the chunk, skipping positions that fall between wrapped lines."""
        ret = type(self).create(s, self.chunk, max(0, self.offset + n))
        step = -1 if n < 0 else 1
        while ret.is_between(s):
            ret = type(self).create(s, ret.chunk, max(0, ret.offset + step))
        return ret

    def shift_chunk(self, s: Any, n: int) -> "Pos":
        """Shift by a number of chunks, clamping to the document."""
        return type(self).create(s, max(0, self.chunk + n), self.offset)

    def shift_line(self, s: Any, n: int) -> "Pos":
        """Shift by a number of wrapped lines, keeping the column where possible."""
        line = Line.from_position(s, InsertPos(self.chunk, self.offset))
        if line is not None:
            target = line.shift(s, n)
            if target is not None:
                line_offset = self.offset - line.first_pos(s).offset
                first = target.first_pos(s).offset
                length = target.length(s)
                column = length if line_offset > length else line_offset
                return type(self).create(s, target.chunk, first + column)
        return type(self).create(s, self.chunk, self.offset)


@dataclass(frozen=True, order=True)
class InsertPos(Pos):
    """An insertion point: offset 0 is before the first character, ``len`` after the last."""

    def constrain(self, s: Any) -> "InsertPos":
        end = s.last()
        if self.chunk > end.chunk:
            return InsertPos(end.chunk, len(s.chunks[end.chunk]))
        length = len(s.chunks[self.chunk])
        if self.offset + 1 > length:
            return InsertPos(self.chunk, length)
        return self

    @classmethod
    def from_char(cls, pos: "CharPos") -> "InsertPos":
        return cls(pos.chunk, pos.offset)


@dataclass(frozen=True, order=True)
class CharPos(Pos):
    """A character position: offset 0 is the first character, ``len - 1`` the last."""

    def constrain(self, s: Any) -> "CharPos":
        end = s.last()
        if self.chunk > end.chunk:
            return CharPos(end.chunk, max(0, len(s.chunks[end.chunk]) - 1))
        length = len(s.chunks[self.chunk])
        if length <= self.offset:
            return CharPos(self.chunk, max(0, length - 1))
        return self

    @classmethod
    def from_insert(cls, pos: InsertPos) -> "CharPos":
        return cls(pos.chunk, max(0, pos.offset - 1))


PosLike = Union[Pos, tuple]


def _insert_pos(value: PosLike) -> InsertPos:
    if isinstance(value, InsertPos):
        return value
    if isinstance(value, Pos):
        return InsertPos(value.chunk, value.offset)
    chunk, offset = value
    return InsertPos(chunk, offset)


class CursorMode(enum.Enum):
    """Whether a cursor sits between characters or on a character."""

    INSERT = "insert"
    CHAR = "char"


@dataclass(frozen=True)
class Cursor:
    """An editor cursor, in insert mode (InsertPos) or character mode (CharPos)."""

    pos: Pos

    @property
    def mode(self) -> CursorMode:
        return CursorMode.INSERT if isinstance(self.pos, InsertPos) else CursorMode.CHAR

    def shift(self, s: Any, n: int) -> "Cursor":
        """Shift left or right within a chunk."""
        return Cursor(self.pos.shift(s, n))

    def shift_chunk(self, s: Any, n: int) -> "Cursor":
        """Shift up or down in the list of chunks."""
        return Cursor(self.pos.shift_chunk(s, n))

    def shift_line(self, s: Any, n: int) -> "Cursor":
        """Shift up or down along wrapped lines."""
        return Cursor(self.pos.shift_line(s, n))

    def insert(self, s: Any) -> InsertPos:
        """The insertion point for this cursor, constrained to the state."""
        pos = self.pos if isinstance(self.pos, InsertPos) else InsertPos.from_char(self.pos)
        return pos.constrain(s)

    def at(self, s: Any, chunk: int, offset: int) -> "Cursor":
        """A cursor of the same mode at the given chunk and offset."""
        return Cursor(type(self.pos).create(s, chunk, offset))

    def constrain(self, s: Any) -> "Cursor":
        return Cursor(self.pos.constrain(s))


@dataclass(frozen=True, order=True)
class Line:
    """A wrapped line: a chunk index and a wrap index within that chunk."""

    chunk: int
    wrap_idx: int

    @classmethod
    def from_position(cls, s: Any, pos: PosLike) -> Optional["Line"]:
        """The wrapped line holding a position, or None if it falls between lines."""
        ip = _insert_pos(pos)
        for i, (wstart, wend) in enumerate(s.chunks[ip.chunk].wraps):
            if wstart <= ip.offset and (ip.offset < wend or wstart == wend):
                return cls(ip.chunk, i)
        return None

    def length(self, s: Any) -> int:
        start, end = s.chunks[self.chunk].wraps[self.wrap_idx]
        return end - start

    def first_pos(self, s: Any) -> InsertPos:
        """The first insert position in this line."""
        start, _ = s.chunks[self.chunk].wraps[self.wrap_idx]
        return InsertPos(self.chunk, start)

    def lineno(self, s: Any) -> int:
        """The line number of this line in the whole document."""
        lineno = 0
        for i, chunk in enumerate(s.chunks):
            if i == self.chunk:
                return lineno + self.wrap_idx
            lineno += len(chunk.wraps)
        return lineno

    @classmethod
    def from_lineno(cls, s: Any, line_number: int) -> "Line":
        """The line with a given number; the last line if out of range."""
        wrapped = 0
        for i, chunk in enumerate(s.chunks):
            if wrapped + len(chunk.wraps) > line_number:
                return cls(i, line_number - wrapped)
            wrapped += len(chunk.wraps)
        return cls(len(s.chunks) - 1, len(s.chunks[-1].wraps) - 1)

    def shift(self, s: Any, n: int) -> Optional["Line"]:
        """Shift by a number of lines, or None if that leaves the document."""
        chunk, wrap_idx = self.chunk, self.wrap_idx
        if n < 0:
            for _ in range(-n):
                if wrap_idx > 0:
                    wrap_idx -= 1
                elif chunk > 0:
                    chunk -= 1
                    wrap_idx = 0
                else:
                    return None
        else:
            for _ in range(n):
                if wrap_idx + 1 < len(s.chunks[chunk].wraps):
                    wrap_idx += 1
                elif chunk + 1 < len(s.chunks):
                    chunk += 1
                    wrap_idx = 0
                else:
                    return None
        return Line(chunk, wrap_idx)


@dataclass(frozen=True, order=True)
class Window:
    """A run of wrapped lines: a first line and a height."""

    line: Line
    height: int

    @classmethod
    def from_lineno(cls, s: Any, lineno: int, height: int) -> "Window":
        return cls(Line.from_lineno(s, lineno), height)

    def at_line(self, s: Any, lineno: int) -> "Window":
        """A window of the same height starting at a given line number."""
        return Window(Line.from_lineno(s, lineno), self.height)

    def with_height(self, height: int) -> "Window":
        return Window(self.line, height)

    def lines(self, s: Any) -> list[Optional[Line]]:
        """The lines in the window; None for those past the end of the document."""
        result: list[Optional[Line]] = []
        line: Optional[Line] = self.line
        for _ in range(self.height):
            result.append(line)
            if line is not None:
                line = line.shift(s, 1)
        return result

    def adjust(self, s: Any) -> "Window":
        """Move the window so that it includes the cursor."""
        start = self.line.lineno(s)
        cursor_line = Line.from_position(s, s.cursor.insert(s))
        if cursor_line is not None:
            pos = cursor_line.lineno(s)
        else:
            pos = max(0, s.line_height() - 1)

        if pos >= start + self.height:
            return Window.from_lineno(s, max(0, pos - (self.height - 1)), self.height)
        if pos < start:
            return Window.from_lineno(s, pos, self.height)
        return self


@dataclass(frozen=True)
class _Word:
    start: int
    end: int
    ws_end: int

    @property
    def width(self) -> int:
        return self.end - self.start

    @property
    def ws_width(self) -> int:
        return self.ws_end - self.end


def _find_words(text: str) -> list[_Word]:
    if not text:
        return []
    boundaries = [0]
    for i, (ch, nxt) in enumerate(zip(text, text[1:]), start=1):
        if ch == " " and nxt != " ":
            boundaries.append(i)
        elif (
            ch == "-"
            and i > 1
            and text[i - 2] not in " -"
            and nxt not in " -"
            and not nxt.isdigit()
        ):
            boundaries.append(i)
    boundaries.append(len(text))
    words = []
    for a, b in zip(boundaries, boundaries[1:]):
        end = a + len(text[a:b].rstrip(" "))
        words.append(_Word(a, end, b))
    return words


def _break_words(words: list[_Word], width: int) -> Iterator[_Word]:
    step = max(width, 1)
    for word in words:
        if word.width > width:
            for a in range(word.start, word.end, step):
                b = min(a + step, word.end)
                yield _Word(a, b, word.ws_end if b == word.end else b)
        else:
            yield word


def wrap_offsets(text: str, width: int) -> list[tuple[int, int]]:
    """Wrap text to a width and return the (start, end) offsets of each line."""
    words = list(_break_words(_find_words(text), width))
    if not words:
        return [(0, 0)]
    lines: list[list[_Word]] = []
    start = 0
    used = 0
    for idx, word in enumerate(words):
        if used + word.width > width and idx > start:
            lines.append(words[start:idx])
            start = idx
            used = 0
        used += word.width + word.ws_width
    lines.append(words[start:])
    return [(line[0].start, line[-1].end) for line in lines]


@dataclass(eq=False)
class Chunk:
    """A piece of text with no newlines, wrapped into lines for display."""

    text: str
    wrap_width: int
    wraps: list[tuple[int, int]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.wrap(self.wrap_width)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chunk):
            return NotImplemented
        return self.text == other.text

    def __hash__(self) -> int:
        return hash(self.text)

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text

    def find_wrap(self, off: int) -> Optional[tuple[int, int]]:
        """The wrapped line holding an offset, or None if out of bounds or between lines."""
        for wrap in self.wraps:
            if wrap[0] <= off < wrap[1]:
                return wrap
            if wrap[0] > off:
                break
        return None

    def offset_is_between(self, off: int) -> bool:
        """Whether an in-range offset falls on whitespace elided by wrapping."""
        if off >= len(self.text):
            return False
        return self.find_wrap(off) is None

    def replace_range(self, start: Optional[int], end: Optional[int], s: str) -> None:
        """Replace text[start:end] with s; None means the matching end of the text."""
        lo = 0 if start is None else start
        hi = len(self.text) if end is None else end
        if lo < 0 or lo > hi or hi > len(self.text):
            raise IndexError(f"range {lo}..{hi} out of bounds for chunk of length {len(self.text)}")
        self.text = self.text[:lo] + s + self.text[hi:]
        self.wrap(self.wrap_width)

    def append(self, s: str) -> None:
        self.text += s
        self.wrap(self.wrap_width)

    def insert(self, offset: int, s: str) -> None:
        """Insert a string at the given offset."""
        if offset < 0 or offset > len(self.text):
            raise IndexError(f"offset {offset} out of bounds for chunk of length {len(self.text)}")
        self.text = self.text[:offset] + s + self.text[offset:]
        self.wrap(self.wrap_width)

    def wrap(self, width: int) -> int:
        """Wrap to a width and return the number of wrapped lines."""
        self.wraps = wrap_offsets(self.text, width)
        self.wrap_width = width
        return len(self.wraps)

    def wrapped_line(self, index: int) -> str:
        """The text of a wrapped line by index."""
        start, end = self.wraps[index]
        return self.text[start:end]