"""Pie chart rasterizer: angular sectors of an aspect-corrected circle."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from termcharts.charsets import BAR_ASCII, BAR_UNICODE, PIE_SYMBOLS_ASCII, PIE_SYMBOLS_UNICODE
from termcharts.grid import Grid
from termcharts.options import RenderOptions
from termcharts.scaling import clamp, sum_unit
from termcharts.theme import colorize

# Terminal cells are roughly twice as tall as they are wide
ASPECT = 2.0
# Pulls the rim in slightly so single cells don't poke out at the poles
EDGE_INSET = 0.3
START_ANGLE = -90.0  # 12 o'clock
MIN_RADIUS = 2
MAX_RADIUS = 8
LEGEND_GAP = 3


@dataclass(frozen=True)
class Slice:
    label: str
    value: float
    percentage: float


def pie_slices(values: Sequence[float], labels: Sequence[str] = ()) -> list[Slice]:
    """Share of each value in the positive total; empty when nothing is positive."""
    positive = [v for v in values if v > 0]
    # Totals are taken in multiples of unit so they stay finite
    unit = sum_unit(positive)
    total = sum(v / unit for v in positive)
    if total == 0:
        return []
    slices = []
    for i, value in enumerate(values):
        label = labels[i] if i < len(labels) and labels[i] else f"Item {i + 1}"
        percentage = value / unit / total * 100.0 if value > 0 else 0.0
        slices.append(Slice(label=label, value=value, percentage=percentage))
    return slices


def sector_ends(slices: Sequence[Slice]) -> np.ndarray:
    """Clockwise end angle of each sector, in degrees from START_ANGLE."""
    return START_ANGLE + np.cumsum([s.percentage * 3.6 for s in slices])


def pie_size(radius: int) -> tuple[int, int]:
    """(rows, cols) of the cell block holding a pie of the given radius."""
    return 2 * radius + 1, int(2 * radius * ASPECT) + 1


def sector_map(slices: Sequence[Slice], radius: int) -> np.ndarray:
    """Owning sector index for every cell of the pie block, -1 outside the circle."""
    rows, cols = pie_size(radius)
    ys, xs = np.mgrid[0:rows, 0:cols]
    dy = ys - radius
    dx = (xs - radius * ASPECT) / ASPECT
    inside = np.hypot(dx, dy) <= radius + 0.5 - EDGE_INSET

    # atan2 gives (-180, 180]; shift into [START_ANGLE, START_ANGLE + 360)
    angle = np.degrees(np.arctan2(dy, dx))
    angle = np.where(angle < START_ANGLE, angle + 360.0, angle)

    # Half-open [start, end): the first end strictly greater than the angle
    owner = np.searchsorted(sector_ends(slices), angle, side="right")
    last = max(i for i, s in enumerate(slices) if s.percentage > 0)
    owner = np.minimum(owner, last)
    return np.where(inside, owner, -1)


def _swatch(options: RenderOptions, index: int) -> tuple[str, str]:
    """(glyph, colour) for a sector and its legend entry."""
    colour = options.theme.series_colour(index)
    if options.use_colour:
        return (BAR_UNICODE if options.use_unicode else BAR_ASCII), colour
    symbols = PIE_SYMBOLS_UNICODE if options.use_unicode else PIE_SYMBOLS_ASCII
    return symbols[index % len(symbols)], colour


def legend_lines(slices: Sequence[Slice], options: RenderOptions, colour: bool) -> list[str]:
    label_width = max(len(s.label) for s in slices)
    lines = []
    for index, s in enumerate(slices):
        glyph, tint = _swatch(options, index)
        parts = [
            colorize(glyph, tint, colour),
            " ",
            colorize(f"{s.label:<{label_width}}", options.theme.text, colour),
        ]
        if options.show_values:
            parts.append(colorize(f"  {s.value:>8.1f}", options.theme.muted, colour))
        parts.append(colorize(f"  {s.percentage:5.1f}%", options.theme.muted, colour))
        lines.append("".join(parts))
    return lines


def render_pie(slices: Sequence[Slice], options: RenderOptions) -> str:
    colour = options.use_colour
    legend = legend_lines(slices, options, colour) if options.show_legend else []
    legend_width = max((len(line) for line in legend_lines(slices, options, False)), default=0)

    available = options.canvas_height - (2 if options.title else 0)
    radius = clamp((available - 1) // 2, MIN_RADIUS, MAX_RADIUS)
    while radius > MIN_RADIUS and legend and pie_size(radius)[1] + LEGEND_GAP + legend_width > options.canvas_width:
        radius -= 1

    owners = sector_map(slices, radius)
    grid = Grid(*owners.shape)
    for (row, col), index in np.ndenumerate(owners):
        if index >= 0:
            grid.put(row, col, *_swatch(options, int(index)))

    lines = []
    if options.title:
        lines.extend([colorize(options.title, options.theme.text, colour), ""])

    pie_lines = grid.lines(colour)
    blank = " " * grid.cols
    total_rows = max(len(pie_lines), len(legend))
    # Centre the shorter of the two blocks against the taller one
    pie_top = (total_rows - len(pie_lines)) // 2
    legend_top = (total_rows - len(legend)) // 2
    for row in range(total_rows):
        pie_row = row - pie_top
        text = pie_lines[pie_row] if 0 <= pie_row < len(pie_lines) else blank
        legend_row = row - legend_top
        if 0 <= legend_row < len(legend):
            text += " " * LEGEND_GAP + legend[legend_row]
        lines.append(text.rstrip())
    return "\n".join(lines)
