# sylvan

The models behind text widgets in terminal user interfaces: a multi-line
editor with word wrapping and undo/redo, a single-line input buffer, tab
selection and box-drawing glyph sets for frames.

## Modules

- **`sylvan.core.Core`**: a multi-line editor model. It inserts text at the
  cursor (`insert_text`), deletes a range (`delete`), and records each edit
  so that `undo` and `redo` can replay it. Both return `False` when there is
  nothing left to undo or redo. The cursor moves within a chunk
  (`cursor_shift`), between chunks (`cursor_shift_chunk`) or along wrapped
  lines (`cursor_shift_lines`). After each of these moves the visible window
  is scrolled so that the cursor stays in view. `resize_window` sets the wrap
  width and the window height. `window_text` returns the visible wrapped
  lines, with `None` for rows past the end of the text. `cursor_position`
  returns the cursor's `Point` within the window, or `None` when the cursor
  is not in view. `wrapped_height` gives the total number of wrapped lines.
- **`sylvan.state.State`**: the state that `Core` edits. It holds the chunks
  (one per line of text), the cursor, the wrap width (80 by default) and the
  window. `State.from_spec` and `to_spec` convert to and from a compact text
  form, in which `_` marks an insert cursor and `<` marks a character cursor.
- **`sylvan.primitives`**: the types the editor is built from:
  - `InsertPos` and `CharPos` are positions. Both are clamped to the text.
  - `Cursor` holds either kind of position. Its `mode` property gives a
    `CursorMode`.
  - `Line` is a wrapped line and `Window` is a run of wrapped lines.
  - `Chunk` is a line of text together with its wrap offsets.
  - `wrap_offsets` word-wraps a string and returns the `(start, end)` offsets
    of each line. Trailing spaces are left out, and words longer than the
    width are broken.
- **`sylvan.effect`**: `Insert` and `Delete`, the edits that can be applied
  to a `State` and reverted.
- **`sylvan.textbuf.TextBuf`**: a single-line input buffer. It supports
  `insert`, `backspace`, `left`, `right` and `goto`. Its display window,
  whose width is set with `set_display_width`, slides along the line to keep
  the cursor visible. `text()` returns the visible part, padded with spaces.
- **`sylvan.tabs.Tabs`**: a list of tab titles and the index of the active
  tab. `next` wraps from the last tab to the first. `prev` moves back one,
  but from the first tab the index wraps around a 64-bit word before the
  remainder is taken, so where it lands depends on the number of tabs. Both
  raise `ValueError` when there are no tabs.
- **`sylvan.glyphs`**: `FrameGlyphs` and the `SINGLE`, `DOUBLE` and
  `SINGLE_THICK` sets. `padded_title` left-aligns a title in a given width,
  pads it with the horizontal glyph and truncates titles that are too long.

## Installing

```
pip install .
```

To also install what the tests need:

```
pip install .[test]
```

## Example

```python
from sylvan.core import Core

editor = Core()
editor.resize_window(20, 3)
editor.insert_text("hello")
print(editor.window_text())   # ['hello', None, None]
editor.undo()
print(editor.state.text())    # ''
editor.redo()
print(editor.state.text())    # 'hello'
```

```python
from sylvan.textbuf import TextBuf

buf = TextBuf("hello")
buf.set_display_width(4)
buf.left()
buf.insert("!")
print(repr(buf.text()), buf.cursor_display())
```

## What it does not do

These are models only. Nothing here draws to a terminal, reads keys or runs
an event loop. The calling code does the rendering and decides which key
calls which method. The package has no command to run.

## Running the tests

```
pytest
```