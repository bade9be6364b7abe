from __future__ import annotations

from collections.abc import Sequence

from termcharts.charsets import SPARK_ASCII, SPARK_UNICODE
from termcharts.grid import Grid
from termcharts.options import RenderOptions, Series
from termcharts.scaling import clamp, normalize
from termcharts.theme import colorize


def downsample(values: Sequence, width: int) -> list:
    """Keep every (len/width)-th value so the result fits in width columns."""
    if width <= 0 or len(values) <= width:
        return list(values)
    step = len(values) / width
    return [values[min(int(i * step), len(values) - 1)] for i in range(width)]


def spark_levels(values: Sequence[float], levels: int) -> list[int]:
    normalized, _, _ = normalize(values)
    return [clamp(int(v * (levels - 1)), 0, levels - 1) for v in normalized]


def level_colour(level: int, levels: int, options: RenderOptions) -> str:
    """Low levels are muted, the middle primary, the top accent."""
    ratio = level / (levels - 1)
    if ratio < 0.33:
        return options.theme.muted
    if ratio < 0.66:
        return options.theme.primary
    return options.theme.accent


def spark_line(values: Sequence[float], options: RenderOptions) -> str:
    ramp = SPARK_UNICODE if options.use_unicode else SPARK_ASCII
    # A width of 0 leaves the series unbounded
    levels = downsample(spark_levels(values, len(ramp)), options.width)
    grid = Grid(1, len(levels))
    for col, level in enumerate(levels):
        grid.put(0, col, ramp[level], level_colour(level, len(ramp), options))
    return grid.row_text(0, options.use_colour)


def render_spark(series: Sequence[Series], options: RenderOptions) -> str:
    lines = []
    if options.title:
        lines.append(colorize(options.title, options.theme.text, options.use_colour))
    label_width = max(len(s.label) for s in series)
    for s in series:
        line = spark_line(s.values, options)
        if label_width:
            line = f"{s.label:<{label_width}} {line}"
        lines.append(line)
    return "\n".join(lines)
