from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from termcharts.theme import DEFAULT_THEME, Theme


class Style(str, Enum):
    AUTO = "auto"
    ASCII = "ascii"
    UNICODE = "unicode"
    BRAILLE = "braille"  # line charts only


class Orientation(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class BarMode(str, Enum):
    GROUPED = "grouped"
    STACKED = "stacked"


@dataclass(frozen=True)
class Series:
    values: Sequence[float]
    label: str = ""
    colour: str = ""  # empty means the theme assigns one by index


@dataclass(frozen=True)
class Capabilities:
    """What the output terminal supports.

    Consulted only for options left on auto: Style.AUTO, colour=None and a zero
    width or height.
    """

    width: int = 80
    height: int = 24
    unicode: bool = True
    colour: bool = False


@dataclass(frozen=True)
class RenderOptions:
    width: int = 80
    height: int = 24
    title: str = ""
    labels: Sequence[str] = ()
    style: Style = Style.AUTO
    orientation: Orientation = Orientation.HORIZONTAL
    bar_mode: BarMode = BarMode.GROUPED
    show_values: bool = False
    show_axes: bool = True
    show_legend: bool = True
    colour: bool | None = None
    theme: Theme = DEFAULT_THEME
    capabilities: Capabilities = field(default_factory=Capabilities)

    def __post_init__(self):
        # Accept plain strings for the enum fields ("ascii", "vertical", ...)
        object.__setattr__(self, "style", Style(self.style))
        object.__setattr__(self, "orientation", Orientation(self.orientation))
        object.__setattr__(self, "bar_mode", BarMode(self.bar_mode))
        object.__setattr__(self, "labels", tuple(self.labels))

    @property
    def canvas_width(self) -> int:
        return self.width if self.width > 0 else self.capabilities.width

    @property
    def canvas_height(self) -> int:
        return self.height if self.height > 0 else self.capabilities.height

    @property
    def use_unicode(self) -> bool:
        if self.style is Style.ASCII:
            return False
        if self.style in (Style.UNICODE, Style.BRAILLE):
            return True
        return self.capabilities.unicode

    @property
    def use_colour(self) -> bool:
        if self.colour is not None:
            return self.colour
        return self.capabilities.colour

    def label(self, index: int) -> str:
        return self.labels[index] if index < len(self.labels) else ""

    def series_colour(self, series: Series, index: int) -> str:
        return series.colour or self.theme.series_colour(index)
