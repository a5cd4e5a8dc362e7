"""An editing facade over the editor state with an undo/redo history."""

from __future__ import annotations

from typing import Optional, Union

from sylvan.effect import Delete, Effect, Insert
from sylvan.primitives import Point, Pos
from sylvan.state import State

PosLike = Union[Pos, tuple]


class Core:
    """Operations on a text buffer, recorded so they can be undone and redone."""

    def __init__(self, text: str = "") -> None:
        self.state = State(text)
        self._history: list[Effect] = []
        self._redo: list[Effect] = []

    @classmethod
    def from_spec(cls, spec: str) -> "Core":
        """Build a core whose state comes from a text spec (see State.from_spec)."""
        core = cls()
        core.state = State.from_spec(spec)
        return core

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Core):
            return NotImplemented
        return (
            self.state == other.state
            and self._history == other._history
            and self._redo == other._redo
        )

    __hash__ = None  # type: ignore[assignment]

    def undo(self) -> bool:
        """Undo the last operation; False if there is nothing to undo."""
        if not self._history:
            return False
        effect = self._history.pop()
        effect.revert(self.state)
        self._redo.append(effect)
        return True

    def redo(self) -> bool:
        """Redo the last undone operation; False if there is nothing to redo."""
        if not self._redo:
            return False
        effect = self._redo.pop()
        effect.apply(self.state)
        self._history.append(effect)
        return True

    def _action(self, effect: Effect) -> None:
        effect.apply(self.state)
        self._history.append(effect)
        self._redo.clear()

    def insert_text(self, text: str) -> None:
        """Insert text at the current cursor position."""
        pos = self.state.cursor.insert(self.state)
        self._action(Insert.capture(self.state, pos, text))

    def delete(self, start: PosLike, end: PosLike) -> None:
        """Delete the text in a range."""
        self._action(Delete.capture(self.state, start, end))

    def window_text(self) -> list[Optional[str]]:
        return self.state.window_text()

    def wrapped_height(self) -> int:
        return self.state.line_height()

    def resize_window(self, width: int, height: int) -> None:
        self.state.resize_window(width, height)

    def cursor_position(self) -> Optional[Point]:
        return self.state.cursor_position()

    def cursor_shift(self, n: int) -> None:
        """Move the cursor within the current chunk, across wrapped lines if needed."""
        self.state.cursor_shift(n)

    def cursor_shift_chunk(self, n: int) -> None:
        """Move the cursor up or down in the chunk list."""
        self.state.cursor_shift_chunk(n)

    def cursor_shift_lines(self, n: int) -> None:
        """Move the cursor up or down along wrapped lines."""
        self.state.cursor_shift_line(n)