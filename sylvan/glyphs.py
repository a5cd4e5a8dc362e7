"""Glyph sets used to draw frames around widgets."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FrameGlyphs:
    """The set of characters used to draw a frame and its active-area indicators."""

    topleft: str
    topright: str
    bottomleft: str
    bottomright: str
    horizontal: str
    vertical: str
    vertical_active: str
    horizontal_active: str

    def padded_title(self, title: str, width: int) -> str:
        """Left-align a title within a width, padding with the horizontal glyph.

        Titles longer than the width are truncated to fit.
        """
        if width < 0:
            raise ValueError(f"width must not be negative, got {width}")
        if len(title) >= width:
            return title[:width]
        return title + self.horizontal * (width - len(title))


SINGLE = FrameGlyphs(
    topleft="┌",
    topright="┐",
    bottomleft="└",
    bottomright="┘",
    horizontal="─",
    vertical="│",
    horizontal_active="▄",
    vertical_active="█",
)
"""Single line thin box drawing frame set."""

DOUBLE = FrameGlyphs(
    topleft="╔",
    topright="╗",
    bottomleft="╚",
    bottomright="╝",
    horizontal="═",
    vertical="║",
    horizontal_active="▄",
    vertical_active="█",
)
"""Double line box drawing frame set."""

SINGLE_THICK = FrameGlyphs(
    topleft="┏",
    topright="┓",
    bottomleft="┗",
    bottomright="┛",
    horizontal="━",
    vertical="┃",
    horizontal_active="▄",
    vertical_active="█",
)
"""Single line thick box drawing frame set."""