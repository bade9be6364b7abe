"""Line charts at Braille dot resolution: 2 dots across and 4 down per cell."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from termcharts.charsets import BRAILLE_BASE, BRAILLE_DOTS
from termcharts.grid import Grid
from termcharts.line import assemble, bresenham, map_point, plot_area
from termcharts.options import RenderOptions, Series

DOT_COLS = 2
DOT_ROWS = 4

_DOT_BITS = np.array(BRAILLE_DOTS, dtype=np.int64)  # (DOT_ROWS, DOT_COLS)


class BrailleCanvas:
    """Boolean dot matrix with one colour tag per character cell.

    A cell takes the colour of the last series that set any of its dots;
    overlapping series are never blended.
    """

    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        self.dots = np.zeros((rows * DOT_ROWS, cols * DOT_COLS), dtype=bool)
        self.colours = np.full((rows, cols), "", dtype=object)

    @property
    def dot_width(self) -> int:
        return self.dots.shape[1]

    @property
    def dot_height(self) -> int:
        return self.dots.shape[0]

    def set(self, x: int, y: int, colour: str = "") -> None:
        if 0 <= x < self.dot_width and 0 <= y < self.dot_height:
            self.dots[y, x] = True
            self.colours[y // DOT_ROWS, x // DOT_COLS] = colour

    def draw_segment(self, x0: int, y0: int, x1: int, y1: int, colour: str = "") -> None:
        for x, y in bresenham(x0, y0, x1, y1):
            self.set(x, y, colour)

    def patterns(self) -> np.ndarray:
        """Pack each cell's 8 dots into its Braille bit pattern, shape (rows, cols)."""
        cells = self.dots.reshape(self.rows, DOT_ROWS, self.cols, DOT_COLS)
        bits = np.where(cells, _DOT_BITS[np.newaxis, :, np.newaxis, :], 0)
        return np.bitwise_or.reduce(np.bitwise_or.reduce(bits, axis=3), axis=1)

    def to_grid(self) -> Grid:
        grid = Grid(self.rows, self.cols, fill=chr(BRAILLE_BASE))
        for (row, col), pattern in np.ndenumerate(self.patterns()):
            grid.put(row, col, chr(BRAILLE_BASE + int(pattern)), self.colours[row, col])
        return grid


def draw_series(canvas: BrailleCanvas, values: Sequence[float], lo: float, hi: float, colour: str) -> None:
    count = len(values)
    points = [map_point(i, count, v, lo, hi, canvas.dot_width, canvas.dot_height) for i, v in enumerate(values)]
    if count == 1:
        canvas.set(*points[0], colour)
    for (x0, y0), (x1, y1) in zip(points, points[1:]):
        canvas.draw_segment(x0, y0, x1, y1, colour)


def render_braille(series: Sequence[Series], options: RenderOptions) -> str:
    plot = plot_area(series, options)
    canvas = BrailleCanvas(plot.rows, plot.cols)
    for index, s in enumerate(series):
        draw_series(canvas, s.values, plot.lo, plot.hi, options.series_colour(s, index))
    return assemble(canvas.to_grid().lines(options.use_colour), plot, series, options)
