"""A single-line text buffer with a display window that follows the cursor."""

from __future__ import annotations


class TextBuf:
    """Editable single line of text with a sliding display window."""

    def __init__(self, value: str = "") -> None:
        self.value = value
        self._cursor = len(value)
        self._offset = 0
        self._width = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TextBuf):
            return NotImplemented
        return (self.value, self._cursor, self._offset, self._width) == (
            other.value,
            other._cursor,
            other._offset,
            other._width,
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TextBuf(value={self.value!r}, cursor={self._cursor})"

    @property
    def cursor(self) -> int:
        """The cursor position within the value."""
        return self._cursor

    @property
    def width(self) -> int:
        """The width of the display window."""
        return self._width

    def cursor_display(self) -> int:
        """The cursor's position within the display window."""
        return self._cursor - self._offset

    def text(self) -> str:
        """The visible part of the value, padded with spaces to the window width."""
        end = min(self._offset + self._width, len(self.value))
        visible = self.value[self._offset:end]
        return visible + " " * (self._width - len(visible))

    def _fix_window(self) -> None:
        if self._cursor > len(self.value):
            self._cursor = len(self.value)
        if self._width == 0:
            self._offset = self._cursor
            return
        if self._cursor < self._offset:
            self._offset = self._cursor
        elif self._cursor >= self._offset + self._width:
            offset = self._cursor - self._width
            # At the very end of the value the cursor needs one extra cell.
            if self._cursor == len(self.value):
                offset += 1
            self._offset = offset
        if self.cursor_display() >= self._width:
            self._offset += self.cursor_display() - self._width + 1

    def set_display_width(self, width: int) -> None:
        """Set the width of the display window."""
        self._width = width

    def goto(self, loc: int) -> bool:
        """Move the cursor to a location; True if that differs from where it was."""
        changed = self._cursor != loc
        self._cursor = loc
        self._fix_window()
        return changed

    def insert(self, ch: str) -> bool:
        """Insert text at the cursor and move past it."""
        self.value = self.value[: self._cursor] + ch + self.value[self._cursor :]
        self._cursor += len(ch)
        self._fix_window()
        return True

    def backspace(self) -> bool:
        """Delete the character before the cursor; False if there is none."""
        if not self.value or self._cursor == 0:
            return False
        self.value = self.value[: self._cursor - 1] + self.value[self._cursor :]
        self._cursor -= 1
        self._fix_window()
        return True

    def left(self) -> bool:
        """Move the cursor one place left; False at the start."""
        if self._cursor == 0:
            return False
        self._cursor -= 1
        self._fix_window()
        return True

    def right(self) -> bool:
        """Move the cursor one place right; False at the end."""
        if self._cursor >= len(self.value):
            return False
        self._cursor += 1
        self._fix_window()
        return True