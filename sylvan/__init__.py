"""Text models for terminal widgets: editor core, input buffer, tabs and frame glyphs."""

__version__ = "0.0.1"
__all__ = ["core", "effect", "glyphs", "primitives", "state", "tabs", "textbuf"]