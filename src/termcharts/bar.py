"""Bar chart layout: single, grouped and stacked bars in either orientation."""

from __future__ import annotations

import math
from collections.abc import Sequence

from termcharts.charsets import BAR_ASCII, BAR_UNICODE, SERIES_FILL_ASCII, SERIES_FILL_UNICODE
from termcharts.grid import Grid
from termcharts.options import BarMode, Orientation, RenderOptions, Series
from termcharts.scaling import clamp, sum_unit
from termcharts.theme import colorize

MIN_BAR_WIDTH = 20  # used when labels and values leave no room
MIN_BAR_HEIGHT = 3
FALLBACK_BAR_HEIGHT = 10
BAR_COLUMNS = 3  # widest vertical bar, per series
GAP = 1


def bar_extent(value: float, maximum: float, extent: int) -> int:
    """Cells covered by a bar of the given value; a zero maximum counts as 1.

    Negative values are not clipped here: the grid write limits the run to the
    canvas.
    """
    if maximum == 0:
        maximum = 1
    cells = extent * (value / maximum)
    if math.isinf(cells):
        return extent if cells > 0 else -extent
    return math.floor(cells)


def category_count(series: Sequence[Series]) -> int:
    return max(len(s.values) for s in series)


def category_values(series: Sequence[Series], category: int) -> list[float]:
    """One value per series for a category; short series contribute 0."""
    return [s.values[category] if category < len(s.values) else 0.0 for s in series]


def grouped_max(series: Sequence[Series]) -> float:
    """Largest value across every series and category."""
    return max(max(s.values) for s in series)


def stacked_max(series: Sequence[Series], unit: float = 1.0) -> float:
    """Largest per-category sum, counted in multiples of unit."""
    return max(sum(v / unit for v in category_values(series, c)) for c in range(category_count(series)))


def stack_boundaries(values: Sequence[float], maximum: float, extent: int, unit: float = 1.0) -> list[int]:
    """Cumulative segment ends, in cells, for one stacked category.

    maximum is in multiples of unit, as returned by stacked_max.
    """
    boundaries = []
    running = 0.0
    for value in values:
        running += value / unit
        boundaries.append(bar_extent(running, maximum, extent))
    return boundaries


def stack_owner(boundaries: Sequence[int], position: int) -> int | None:
    """Index of the series owning the cell at a 1-based position, if any."""
    previous = 0
    for index, boundary in enumerate(boundaries):
        if previous < position <= boundary:
            return index
        previous = boundary
    return None


def _paint(options: RenderOptions, series: Sequence[Series], index: int) -> tuple[str, str]:
    """(glyph, colour) used to fill bars of one series."""
    if len(series) == 1:
        glyph = BAR_UNICODE if options.use_unicode else BAR_ASCII
        return glyph, series[0].colour or options.theme.primary
    colour = options.series_colour(series[index], index)
    if options.use_colour:
        return (BAR_UNICODE if options.use_unicode else BAR_ASCII), colour
    fills = SERIES_FILL_UNICODE if options.use_unicode else SERIES_FILL_ASCII
    return fills[index % len(fills)], colour


def _is_stacked(series: Sequence[Series], options: RenderOptions) -> bool:
    return options.bar_mode is BarMode.STACKED and len(series) > 1


def _bar_scale(series: Sequence[Series], stacked: bool) -> tuple[float, float]:
    """(maximum, unit) for bar extents; stacked sums are taken in multiples of unit."""
    unit = sum_unit([v for s in series for v in s.values]) if stacked else 1.0
    maximum = stacked_max(series, unit) if stacked else grouped_max(series)
    return maximum or 1, unit


def _legend(series: Sequence[Series], options: RenderOptions) -> list[str]:
    if len(series) < 2 or not options.show_legend:
        return []
    entries = []
    for index, s in enumerate(series):
        glyph, colour = _paint(options, series, index)
        label = s.label or f"Series {index + 1}"
        entries.append(f"{colorize(glyph, colour, options.use_colour)} {label}")
    return ["", "  ".join(entries)]


def _title(options: RenderOptions) -> list[str]:
    if not options.title:
        return []
    return [colorize(options.title, options.theme.text, options.use_colour)]


def render_horizontal(series: Sequence[Series], options: RenderOptions) -> list[str]:
    colour = options.use_colour
    muted = options.theme.muted
    stacked = _is_stacked(series, options)
    categories = category_count(series)
    maximum, unit = _bar_scale(series, stacked)

    label_width = 0
    if options.show_axes and options.labels:
        label_width = max(len(label) for label in options.labels) + 1
    value_width = len(f" {maximum * unit:.1f}") + 1 if options.show_values else 0

    bar_width = options.canvas_width - label_width - value_width - 2
    if bar_width < 1:
        bar_width = MIN_BAR_WIDTH

    rows_per_category = 1 if stacked else len(series)
    grid = Grid(categories * rows_per_category, bar_width)
    values: list[float] = []
    for category in range(categories):
        category_vals = category_values(series, category)
        if stacked:
            boundaries = stack_boundaries(category_vals, maximum, bar_width, unit)
            for col in range(bar_width):
                owner = stack_owner(boundaries, col + 1)
                if owner is not None:
                    grid.put(category, col, *_paint(options, series, owner))
            values.append(sum(category_vals))
            continue
        for index, value in enumerate(category_vals):
            row = category * rows_per_category + index
            glyph, tint = _paint(options, series, index)
            grid.hline(row, 0, bar_extent(value, maximum, bar_width), glyph, tint)
            values.append(value)

    lines = _title(options)
    for row in range(grid.rows):
        parts = []
        if label_width:
            label = options.label(row // rows_per_category) if row % rows_per_category == 0 else ""
            parts.append(colorize(f"{label:<{label_width}} ", muted, colour))
        parts.append(grid.row_text(row, colour, trim=True))
        if options.show_values:
            parts.append(colorize(f" {values[row]:.1f}", muted, colour))
        lines.append("".join(parts))
    return lines + _legend(series, options)


def _fit_cell(text: str, width: int) -> str:
    return f"{text[:width]:<{width}}"


def render_vertical(series: Sequence[Series], options: RenderOptions) -> list[str]:
    colour = options.use_colour
    muted = options.theme.muted
    stacked = _is_stacked(series, options)
    grouped = len(series) > 1 and not stacked
    categories = category_count(series)
    maximum, unit = _bar_scale(series, stacked)

    show_labels = options.show_axes and bool(options.labels)
    bar_height = options.canvas_height
    if options.title:
        bar_height -= 1
    if show_labels:
        bar_height -= 1
    if options.show_values:
        bar_height -= 1
    if len(series) > 1 and options.show_legend:
        bar_height -= 2
    if bar_height < MIN_BAR_HEIGHT:
        bar_height = FALLBACK_BAR_HEIGHT

    # Each category gets an equal share of the width, split evenly across series
    slot = (options.canvas_width + GAP) // categories - GAP
    if grouped:
        series_width = clamp(slot, len(series), len(series) * BAR_COLUMNS) // len(series)
        category_width = series_width * len(series)
    else:
        category_width = series_width = clamp(slot, 1, BAR_COLUMNS)

    grid = Grid(bar_height, categories * category_width + (categories - 1) * GAP)
    value_cells: list[str] = []
    for category in range(categories):
        left = category * (category_width + GAP)
        category_vals = category_values(series, category)
        if stacked:
            boundaries = stack_boundaries(category_vals, maximum, bar_height, unit)
            for row in range(bar_height):
                owner = stack_owner(boundaries, bar_height - row)
                if owner is not None:
                    glyph, tint = _paint(options, series, owner)
                    grid.hline(row, left, category_width, glyph, tint)
            value_cells.append(_fit_cell(f"{sum(category_vals):g}", category_width))
            continue
        for index, value in enumerate(category_vals):
            glyph, tint = _paint(options, series, index)
            bar_rows = bar_extent(value, maximum, bar_height)
            for row in range(bar_height):
                if bar_height - row <= bar_rows:
                    grid.hline(row, left + index * series_width, series_width, glyph, tint)
        value_cells.append("".join(_fit_cell(f"{v:g}", series_width) for v in category_vals))

    lines = _title(options)
    lines.extend(grid.lines(colour, trim=True))
    if show_labels:
        cells = [_fit_cell(options.label(c), category_width) for c in range(categories)]
        lines.append(colorize(" ".join(cells).rstrip(), muted, colour))
    if options.show_values:
        lines.append(colorize(" ".join(value_cells).rstrip(), muted, colour))
    return lines + _legend(series, options)


def render_bar(series: Sequence[Series], options: RenderOptions) -> str:
    if options.orientation is Orientation.VERTICAL:
        lines = render_vertical(series, options)
    else:
        lines = render_horizontal(series, options)
    return "\n".join(lines)
