"""Public entry points: one render function per chart kind.

Every call is a pure function of its data and options. Empty input, an empty
series or any non-finite value produces an empty string rather than a partial
chart.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from termcharts.bar import render_bar
from termcharts.braille import render_braille
from termcharts.line import render_line
from termcharts.options import RenderOptions, Series, Style
from termcharts.pie import pie_slices, render_pie
from termcharts.scaling import all_finite
from termcharts.sparkline import render_spark

logger = logging.getLogger(__name__)

ChartData = Sequence[float] | Series | Sequence[Series]


class ChartKind(str, Enum):
    BAR = "bar"
    LINE = "line"
    PIE = "pie"
    SPARK = "spark"


@dataclass(frozen=True)
class RenderRequest:
    kind: ChartKind
    series: tuple[Series, ...]
    options: RenderOptions = dataclasses.field(default_factory=RenderOptions)


def as_series(data: ChartData) -> tuple[Series, ...]:
    """Wrap plain numbers in a single unlabelled series."""
    if isinstance(data, Series):
        return (data,)
    items = list(data)
    if items and all(isinstance(item, Series) for item in items):
        return tuple(items)
    return (Series(values=items),)


def _valid(series: Sequence[Series], kind: ChartKind) -> bool:
    if not series:
        logger.debug("%s chart: no series", kind.value)
        return False
    for s in series:
        if len(s.values) == 0:
            logger.debug("%s chart: empty series %r", kind.value, s.label)
            return False
        if not all_finite(s.values):
            logger.debug("%s chart: non-finite value in series %r", kind.value, s.label)
            return False
    return True


def _line(series: Sequence[Series], options: RenderOptions) -> str:
    if options.style is Style.BRAILLE:
        return render_braille(series, options)
    return render_line(series, options)


def _pie(series: Sequence[Series], options: RenderOptions) -> str:
    slices = pie_slices(series[0].values, options.labels)
    if not slices:
        logger.debug("pie chart: values sum to zero")
        return ""
    return render_pie(slices, options)


_RENDERERS: dict[ChartKind, Callable[[Sequence[Series], RenderOptions], str]] = {
    ChartKind.BAR: render_bar,
    ChartKind.LINE: _line,
    ChartKind.PIE: _pie,
    ChartKind.SPARK: render_spark,
}


def render(request: RenderRequest) -> str:
    series = request.series
    if request.kind is ChartKind.PIE:
        # Pie charts show one series; any others are ignored
        series = series[:1]
    if not _valid(series, request.kind):
        return ""
    return _RENDERERS[request.kind](series, request.options)


def _request(kind: ChartKind, data: ChartData, options: RenderOptions | None, overrides) -> RenderRequest:
    options = options or RenderOptions()
    if overrides:
        options = dataclasses.replace(options, **overrides)
    return RenderRequest(kind=kind, series=as_series(data), options=options)


def bar(data: ChartData, options: RenderOptions | None = None, **overrides) -> str:
    """Render a bar chart; several series are grouped or stacked per ``bar_mode``."""
    return render(_request(ChartKind.BAR, data, options, overrides))


def line(data: ChartData, options: RenderOptions | None = None, **overrides) -> str:
    """Render a line chart; ``style="braille"`` switches to dot resolution."""
    return render(_request(ChartKind.LINE, data, options, overrides))


def pie(data: ChartData, options: RenderOptions | None = None, **overrides) -> str:
    return render(_request(ChartKind.PIE, data, options, overrides))


def spark(data: ChartData, options: RenderOptions | None = None, **overrides) -> str:
    return render(_request(ChartKind.SPARK, data, options, overrides))
