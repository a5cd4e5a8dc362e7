"""The editable text state behind the editor: chunks, a cursor and a window."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Union

from sylvan.primitives import (
    CharPos,
    Chunk,
    Cursor,
    InsertPos,
    Line,
    Point,
    Pos,
    Window,
)

DEFAULT_WRAP = 80

PosLike = Union[Pos, tuple]


def _as_insert_pos(value: PosLike) -> InsertPos:
    if isinstance(value, InsertPos):
        return value
    if isinstance(value, Pos):
        return InsertPos(value.chunk, value.offset)
    chunk, offset = value
    return InsertPos(chunk, offset)


def _spec_lines(spec: str) -> list[str]:
    """Split a spec into lines, dropping one trailing line ending."""
    if not spec:
        return []
    if spec.endswith("\n"):
        spec = spec[:-1]
    return [line[:-1] if line.endswith("\r") else line for line in spec.split("\n")]


class State:
    """The current state of the editor."""

    def __init__(self, text: str = "") -> None:
        self.chunks: list[Chunk] = [Chunk(part, DEFAULT_WRAP) for part in text.split("\n")]
        self.cursor: Cursor = Cursor(CharPos(0, 0))
        self.width: int = DEFAULT_WRAP
        self.window: Window = Window(Line(0, 0), 0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, State):
            return NotImplemented
        return (
            self.chunks == other.chunks
            and self.cursor == other.cursor
            and self.width == other.width
            and self.window == other.window
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"State(text={self.text()!r}, cursor={self.cursor!r}, "
            f"width={self.width}, window={self.window!r})"
        )

    @classmethod
    def from_spec(cls, spec: str) -> "State":
        """Build a state from a spec: "_" marks an insert cursor, "<" a character cursor
        pointing at the character before it. The marker is removed from the text."""
        text_lines = []
        cursor: Optional[Cursor] = None
        for lineno, line in enumerate(_spec_lines(spec)):
            under = line.find("_")
            if under >= 0:
                cursor = Cursor(InsertPos(lineno, under))
                text_lines.append(line.replace("_", ""))
                continue
            arrow = line.find("<")
            if arrow >= 0:
                cursor = Cursor(CharPos(lineno, max(0, arrow - 1)))
                text_lines.append(line.replace("<", ""))
            else:
                text_lines.append(line)
        state = cls("\n".join(text_lines))
        if cursor is not None:
            state.cursor = cursor
        return state

    def to_spec(self) -> str:
        """Render the state as a text spec, the inverse of :meth:`from_spec`."""
        is_char = isinstance(self.cursor.pos, CharPos)
        marker = "<" if is_char else "_"
        chunk_idx, offset = self.cursor.pos.chunk_offset()
        out = []
        for i, chunk in enumerate(self.chunks):
            text = str(chunk)
            if i == chunk_idx:
                if is_char:
                    if not text:
                        text = "<"
                    else:
                        text = text[: offset + 1] + marker + text[offset + 1 :]
                else:
                    text = text[:offset] + marker + text[offset:]
            out.append(text)
        return "\n".join(out)

    def insert_lines(self, pos: PosLike, lines: Sequence[object]) -> None:
        """Insert lines at a position, moving the cursor past the insert if it was at or after it."""
        pos = _as_insert_pos(pos)
        parts = [str(item) for item in lines]
        if len(parts) == 1:
            text = parts[0]
            self.chunks[pos.chunk].insert(pos.offset, text)
            if self.cursor.insert(self) >= pos:
                self.cursor = self.cursor.shift(self, len(text))
            return

        original = str(self.chunks[pos.chunk])
        head, tail = original[: pos.offset], original[pos.offset :]
        self.chunks[pos.chunk] = Chunk(head + parts[0], self.width)

        trailer = parts[1:]
        last = trailer.pop()
        trailer.append(last + tail)
        self.chunks[pos.chunk + 1 : pos.chunk + 1] = [Chunk(t, self.width) for t in trailer]

        if self.cursor.insert(self) >= pos:
            self.cursor = self.cursor.shift_chunk(self, max(0, len(parts) - 1))
            if self.cursor.insert(self).chunk == pos.chunk + len(trailer):
                self.cursor = self.cursor.shift(self, len(last))

    def insert(self, pos: PosLike, s: str) -> None:
        """Insert text, which may hold newlines, at a position."""
        self.insert_lines(pos, s.split("\n"))

    def delete(self, start: PosLike, end: PosLike) -> None:
        """Delete text from start (inclusive) to end (exclusive), adjusting the cursor."""
        start = _as_insert_pos(start)
        end = _as_insert_pos(end)
        cursor = self.cursor.insert(self)

        if start.chunk > len(self.chunks) or end == start:
            return

        if start.chunk == end.chunk:
            self.chunks[start.chunk].replace_range(start.offset, end.offset, "")
            ip = self.cursor.insert(self)
            if start < ip < end:
                self.cursor = self.cursor.at(self, start.chunk, start.offset)
            elif ip > start and ip.chunk == start.chunk:
                self.cursor = self.cursor.at(
                    self, ip.chunk, max(0, ip.offset - (end.offset - start.offset - 1))
                )
            else:
                self.cursor = self.cursor.constrain(self)
            return

        if end.chunk < start.chunk:
            raise ValueError(f"delete range end {end} precedes start {start}")

        head = self.chunks.pop(start.chunk)
        head.replace_range(start.offset, None, "")
        if len(self.chunks) > end.chunk - 1:
            last = self.chunks.pop(end.chunk - 1)
            last.replace_range(None, min(end.offset, len(last)), "")
            head.append(str(last))
            del self.chunks[start.chunk : end.chunk - 1]
        self.chunks.insert(start.chunk, head)

        if start < cursor <= end:
            self.cursor = self.cursor.at(self, start.chunk, start.offset)
        elif cursor > start and cursor.chunk == end.chunk:
            self.cursor = self.cursor.at(
                self, start.chunk, start.offset + max(0, cursor.offset - end.offset)
            )
        else:
            self.cursor = self.cursor.at(
                self, max(0, cursor.chunk - (end.chunk - start.chunk)), cursor.offset
            )

    def last(self) -> InsertPos:
        """The last position in the text."""
        if not self.chunks:
            return InsertPos(0, 0)
        chunk = len(self.chunks) - 1
        return InsertPos(chunk, max(0, len(self.chunks[chunk]) - 1))

    def line_range(self, start: PosLike, end: PosLike) -> list[str]:
        """Lines from inclusive start to exclusive end; the first and last may be partial."""
        start = _as_insert_pos(start).constrain(self)
        end = _as_insert_pos(end).constrain(self)
        if start.chunk == end.chunk:
            return [str(self.chunks[start.chunk])[start.offset : end.offset]]
        result = [str(self.chunks[start.chunk])[start.offset :]]
        if end.chunk - start.chunk > 1:
            result.extend(str(c) for c in self.chunks[start.chunk + 1 : end.chunk - 1])
        result.append(str(self.chunks[end.chunk])[: end.offset])
        return result

    def text(self) -> str:
        """The whole text, chunks joined by newlines."""
        return "\n".join(str(c) for c in self.chunks)

    def text_range(self, start: PosLike, end: PosLike) -> str:
        """The text from inclusive start to exclusive end."""
        return "\n".join(self.line_range(start, end))

    def cursor_position(self) -> Optional[Point]:
        """The cursor's (x, y) within the window, or None if it is not in view."""
        pos = self.cursor.insert(self)
        chunk = self.chunks[pos.chunk]
        for y, line in enumerate(self.window.lines(self)):
            if line is None:
                continue
            lstart, lend = self.chunks[line.chunk].wraps[line.wrap_idx]
            if len(chunk) == 0 and line.chunk == pos.chunk:
                return Point(0, y)
            if pos.offset >= len(chunk) and line.chunk > pos.chunk:
                return Point(0, y)
            if line.chunk == pos.chunk and lstart <= pos.offset < lend:
                return Point(pos.offset - lstart, y)
        return None

    def window_text(self) -> list[Optional[str]]:
        """The wrapped lines in the window; None past the end of the text."""
        return [
            None if line is None else self.chunks[line.chunk].wrapped_line(line.wrap_idx)
            for line in self.window.lines(self)
        ]

    def line_height(self) -> int:
        """The total number of wrapped lines."""
        return sum(len(c.wraps) for c in self.chunks)

    def resize_window(self, width: int, height: int) -> int:
        """Set the wrap width and window height; return the number of wrapped lines."""
        if self.width == width and self.window.height == height:
            return self.line_height()
        self.width = width
        self.window = self.window.with_height(height)
        return sum(chunk.wrap(width) for chunk in self.chunks)

    def cursor_shift(self, n: int) -> None:
        """Move the cursor within the current chunk and keep it in the window."""
        self.cursor = self.cursor.shift(self, n)
        self.window = self.window.adjust(self)

    def cursor_shift_line(self, n: int) -> None:
        """Move the cursor by wrapped lines and keep it in the window."""
        self.cursor = self.cursor.shift_line(self, n)
        self.window = self.window.adjust(self)

    def cursor_shift_chunk(self, n: int) -> None:
        """Move the cursor by chunks and keep it in the window."""
        self.cursor = self.cursor.shift_chunk(self, n)
        self.window = self.window.adjust(self)


def _iter_texts(chunks: Iterable[Chunk]) -> list[str]:
    return [str(c) for c in chunks]