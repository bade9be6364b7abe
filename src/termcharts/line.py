"""Line chart rasterizer at character-cell resolution.

Also holds the layout, coordinate mapping, segment walk and axis assembly
shared with the Braille renderer.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from termcharts.charsets import (
    AXIS_ASCII,
    AXIS_UNICODE,
    LEGEND_MARKER_ASCII,
    LEGEND_MARKER_UNICODE,
    LINE_ASCII,
    LINE_UNICODE,
)
from termcharts.grid import Grid
from termcharts.options import RenderOptions, Series
from termcharts.scaling import clamp, fraction, min_max, scale
from termcharts.theme import colorize

MIN_PLOT_ROWS = 3
FALLBACK_PLOT_ROWS = 10
MIN_PLOT_COLS = 10
FALLBACK_PLOT_COLS = 60
Y_LABEL_MIN_WIDTH = 7

# Indices into LINE_UNICODE / LINE_ASCII
HORIZONTAL, VERTICAL, DOWN, UP, POINT = range(5)


@dataclass(frozen=True)
class Plot:
    """Plotting area left after title, axes and legend are reserved."""

    rows: int
    cols: int
    lo: float
    hi: float
    y_label_width: int


def plot_area(series: Sequence[Series], options: RenderOptions) -> Plot:
    rows = options.canvas_height
    if options.title:
        rows -= 1
    if options.show_axes:
        rows -= 2  # axis rule and x labels
    if len(series) > 1 and options.show_legend:
        rows -= 2
    if rows < MIN_PLOT_ROWS:
        rows = FALLBACK_PLOT_ROWS

    # One vertical scale for every series
    lo, hi = min_max([v for s in series for v in s.values])

    y_label_width = 0
    if options.show_axes:
        y_label_width = max(Y_LABEL_MIN_WIDTH, len(f"{lo:.1f}"), len(f"{hi:.1f}")) + 1
    cols = options.canvas_width - y_label_width
    if cols < MIN_PLOT_COLS:
        cols = FALLBACK_PLOT_COLS
    return Plot(rows=rows, cols=cols, lo=lo, hi=hi, y_label_width=y_label_width)


def map_point(index: int, count: int, value: float, lo: float, hi: float, cols: int, rows: int) -> tuple[int, int]:
    """Grid (x, y) of a data point; higher values land on smaller rows."""
    if count == 1:
        x = cols // 2
    else:
        x = round(index / (count - 1) * (cols - 1))
    y = round((1.0 - fraction(value, lo, hi)) * (rows - 1))
    return clamp(x, 0, cols - 1), clamp(y, 0, rows - 1)


def bresenham(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    """Yield every cell on the integer segment from (x0, y0) to (x1, y1)."""
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy
    x, y = x0, y0
    while True:
        yield x, y
        if x == x1 and y == y1:
            return
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy


def segment_glyph(dx: int, dy: int, glyphs: str) -> str:
    if dx == 0:
        return glyphs[VERTICAL]
    if dy == 0:
        return glyphs[HORIZONTAL]
    # Rows grow downwards, so matching signs mean down-right or up-left
    if (dx > 0) == (dy > 0):
        return glyphs[DOWN]
    return glyphs[UP]


def draw_series(grid: Grid, values: Sequence[float], lo: float, hi: float, glyphs: str, colour: str) -> None:
    points = [map_point(i, len(values), v, lo, hi, grid.cols, grid.rows) for i, v in enumerate(values)]
    for (x0, y0), (x1, y1) in zip(points, points[1:]):
        glyph = segment_glyph(x1 - x0, y1 - y0, glyphs)
        for x, y in bresenham(x0, y0, x1, y1):
            if grid.glyphs[y, x] in (grid.fill, glyphs[HORIZONTAL]):
                grid.put(y, x, glyph, colour)
    for x, y in points:
        grid.put(y, x, glyphs[POINT], colour)


def x_axis_labels(labels: Sequence[str], width: int) -> str:
    """Labels centred on their index positions; later labels overwrite earlier ones."""
    buffer = [" "] * width
    count = len(labels)
    for index, label in enumerate(labels):
        pos = width // 2 if count == 1 else round(index / (count - 1) * (width - 1))
        start = pos - len(label) // 2
        if start + len(label) > width:
            start = width - len(label)
        start = max(0, start)
        for offset, char in enumerate(label[: width - start]):
            buffer[start + offset] = char
    return "".join(buffer).rstrip()


def legend_line(series: Sequence[Series], options: RenderOptions) -> list[str]:
    if len(series) < 2 or not options.show_legend:
        return []
    marker = LEGEND_MARKER_UNICODE if options.use_unicode else LEGEND_MARKER_ASCII
    entries = []
    for index, s in enumerate(series):
        swatch = colorize(marker, options.series_colour(s, index), options.use_colour)
        entries.append(f"{swatch} {s.label or f'Series {index + 1}'}")
    return ["", "  ".join(entries)]


def assemble(plot_lines: Sequence[str], plot: Plot, series: Sequence[Series], options: RenderOptions) -> str:
    """Surround rasterized plot rows with title, axes and legend."""
    colour = options.use_colour
    muted = options.theme.muted
    lines = []
    if options.title:
        lines.append(colorize(options.title, options.theme.text, colour))

    for row, text in enumerate(plot_lines):
        if options.show_axes:
            value = scale(row, 0, plot.rows - 1, plot.hi, plot.lo)
            label = f"{value:>{plot.y_label_width - 1}.1f} "
            text = colorize(label, muted, colour) + text
        lines.append(text)

    if options.show_axes:
        pad = " " * plot.y_label_width
        axis = AXIS_UNICODE if options.use_unicode else AXIS_ASCII
        lines.append(pad + colorize(axis * plot.cols, muted, colour))
        if options.labels:
            lines.append(pad + colorize(x_axis_labels(options.labels, plot.cols), muted, colour))

    lines.extend(legend_line(series, options))
    return "\n".join(lines)


def render_line(series: Sequence[Series], options: RenderOptions) -> str:
    plot = plot_area(series, options)
    glyphs = LINE_UNICODE if options.use_unicode else LINE_ASCII
    grid = Grid(plot.rows, plot.cols)
    for index, s in enumerate(series):
        draw_series(grid, s.values, plot.lo, plot.hi, glyphs, options.series_colour(s, index))
    return assemble(grid.lines(options.use_colour), plot, series, options)
