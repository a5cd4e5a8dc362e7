"""Reversible edits applied to an editor state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from sylvan.primitives import Cursor, InsertPos, Pos
from sylvan.state import State

PosLike = Union[Pos, tuple]


def _to_insert_pos(value: PosLike) -> InsertPos:
    if isinstance(value, InsertPos):
        return value
    if isinstance(value, Pos):
        return InsertPos(value.chunk, value.offset)
    chunk, offset = value
    return InsertPos(chunk, offset)


@dataclass(frozen=True)
class Insert:
    """Insertion of text, possibly spanning several lines, at a position."""

    pos: InsertPos
    text: tuple[str, ...]
    prev_cursor: Cursor

    @classmethod
    def capture(cls, s: State, pos: PosLike, text: str) -> "Insert":
        """Record an insertion against the current state, remembering its cursor."""
        return cls(_to_insert_pos(pos), tuple(text.split("\n")), s.cursor)

    def apply(self, s: State) -> None:
        s.insert_lines(self.pos, self.text)

    def revert(self, s: State) -> None:
        s.delete(self.pos, InsertPos(self.pos.chunk + len(self.text), self.pos.offset))
        s.cursor = self.prev_cursor


@dataclass(frozen=True)
class Delete:
    """Deletion of the text between two positions."""

    start: InsertPos
    end: InsertPos
    prev_cursor: Cursor
    deleted_text: tuple[str, ...]

    @classmethod
    def capture(cls, s: State, start: PosLike, end: PosLike) -> "Delete":
        """Record a deletion against the current state, saving the text it removes."""
        start_pos = _to_insert_pos(start)
        end_pos = _to_insert_pos(end)
        return cls(
            start_pos,
            end_pos,
            s.cursor,
            tuple(s.line_range(start_pos, end_pos)),
        )

    def apply(self, s: State) -> None:
        s.delete(self.start, self.end)

    def revert(self, s: State) -> None:
        s.insert_lines(self.start, self.deleted_text)
        s.cursor = self.prev_cursor


Effect = Union[Insert, Delete]