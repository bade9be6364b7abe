from __future__ import annotations

from itertools import groupby

import numpy as np

from termcharts.theme import colorize


class Grid:
    """Character-cell buffer a rasterizer draws into.

    Holds one glyph and one colour tag per cell; an empty tag means the cell is
    printed without colour.
    """

    def __init__(self, rows: int, cols: int, fill: str = " "):
        self.fill = fill
        self.glyphs = np.full((rows, cols), fill, dtype="<U1")
        self.colours = np.full((rows, cols), "", dtype=object)

    @property
    def rows(self) -> int:
        return self.glyphs.shape[0]

    @property
    def cols(self) -> int:
        return self.glyphs.shape[1]

    def put(self, row: int, col: int, glyph: str, colour: str = "") -> None:
        self.glyphs[row, col] = glyph
        self.colours[row, col] = colour

    def hline(self, row: int, start: int, length: int, glyph: str, colour: str = "") -> None:
        """Fill a horizontal run, clipped to the grid."""
        stop = min(self.cols, start + max(0, length))
        if stop > start:
            self.glyphs[row, start:stop] = glyph
            self.colours[row, start:stop] = colour

    def row_text(self, row: int, colour: bool, trim: bool = False) -> str:
        glyphs = self.glyphs[row]
        tags = self.colours[row]
        end = len(glyphs)
        if trim:
            while end > 0 and glyphs[end - 1] == self.fill and not tags[end - 1]:
                end -= 1
        parts = []
        # Consecutive cells sharing a colour become one escape-wrapped span
        for tag, cells in groupby(zip(glyphs[:end], tags[:end]), key=lambda cell: cell[1]):
            text = "".join(glyph for glyph, _ in cells)
            parts.append(colorize(text, tag, colour))
        return "".join(parts)

    def lines(self, colour: bool = False, trim: bool = False) -> list[str]:
        return [self.row_text(row, colour, trim) for row in range(self.rows)]
