import argparse
import logging
import sys

from termcharts.data import DataError, load, parse_labels, parse_series
from termcharts.options import BarMode, Orientation, RenderOptions, Series, Style
from termcharts.render import ChartKind, RenderRequest, render
from termcharts.terminal import detect_capabilities
from termcharts.theme import THEMES, get_theme

logger = logging.getLogger(__name__)

# Default canvas per chart kind; None means the terminal size
DEFAULT_SIZES = {
    ChartKind.BAR: (80, 15),
    ChartKind.LINE: (60, 12),
    ChartKind.PIE: (80, None),
    ChartKind.SPARK: (0, None),
}


def _add_common(parser: argparse.ArgumentParser, kind: ChartKind) -> None:
    width, height = DEFAULT_SIZES[kind]
    parser.add_argument("values", nargs="*", help="Numbers, a data file, or nothing to read stdin")
    parser.add_argument("-w", "--width", type=int, default=width, help="Chart width in columns")
    parser.add_argument("--height", type=int, default=height, help="Chart height in rows")
    parser.add_argument("-t", "--title", default="", help="Chart title")
    parser.add_argument("-l", "--labels", default="", help="Comma-separated labels")
    parser.add_argument("--ascii", action="store_true", help="Use ASCII characters only")
    parser.add_argument("--unicode", action="store_true", help="Force Unicode characters")
    colour = parser.add_mutually_exclusive_group()
    colour.add_argument("-c", "--colour", "--color", dest="colour", action="store_const", const=True, default=None)
    colour.add_argument("--no-colour", "--no-color", dest="colour", action="store_const", const=False)
    parser.add_argument("--theme", default="default", choices=sorted(THEMES), help="Colour theme")
    parser.add_argument("--verbose", action="store_true", help="Log debug output to stderr")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="termcharts", description="Render charts in the terminal")
    commands = parser.add_subparsers(dest="kind", required=True)

    bar = commands.add_parser("bar", help="Bar chart")
    _add_common(bar, ChartKind.BAR)
    bar.add_argument("--series", action="append", default=[], help="Extra series as label=1,2,3 (repeatable)")
    bar.add_argument("-v", "--vertical", action="store_true", help="Vertical bars")
    bar.add_argument("--stacked", action="store_true", help="Stack multiple series")
    bar.add_argument("--show-values", action="store_true", help="Print values next to bars")
    bar.add_argument("--no-axes", action="store_true", help="Hide labels")
    bar.add_argument("--no-legend", action="store_true", help="Hide the series legend")

    line = commands.add_parser("line", help="Line chart")
    _add_common(line, ChartKind.LINE)
    line.add_argument("--series", action="append", default=[], help="Extra series as label=1,2,3 (repeatable)")
    line.add_argument("-b", "--braille", action="store_true", help="High-resolution Braille dots")
    line.add_argument("--no-axes", action="store_true", help="Hide axes")
    line.add_argument("--no-legend", action="store_true", help="Hide the series legend")

    pie = commands.add_parser("pie", help="Pie chart")
    _add_common(pie, ChartKind.PIE)
    pie.add_argument("--show-values", action="store_true", help="Print raw values in the legend")
    pie.add_argument("--no-legend", action="store_true", help="Hide the legend")

    spark = commands.add_parser("spark", help="Sparkline")
    _add_common(spark, ChartKind.SPARK)
    return parser


def _style(args) -> Style:
    if getattr(args, "braille", False):
        return Style.BRAILLE
    if args.ascii:
        return Style.ASCII
    if args.unicode:
        return Style.UNICODE
    return Style.AUTO


def build_request(args) -> RenderRequest:
    kind = ChartKind(args.kind)
    series = [parse_series(text) for text in getattr(args, "series", [])]
    if args.values or not series:
        values, file_labels = load(args.values, sys.stdin)
        if not values:
            raise DataError("No data provided")
        series.insert(0, Series(values=values))
    else:
        file_labels = []

    capabilities = detect_capabilities()
    options = RenderOptions(
        width=args.width if args.width is not None else capabilities.width,
        height=args.height if args.height is not None else capabilities.height,
        title=args.title,
        labels=parse_labels(args.labels) if args.labels else file_labels,
        style=_style(args),
        orientation=Orientation.VERTICAL if getattr(args, "vertical", False) else Orientation.HORIZONTAL,
        bar_mode=BarMode.STACKED if getattr(args, "stacked", False) else BarMode.GROUPED,
        show_values=getattr(args, "show_values", False),
        show_axes=not getattr(args, "no_axes", False),
        show_legend=not getattr(args, "no_legend", False),
        colour=args.colour,
        theme=get_theme(args.theme),
        capabilities=capabilities,
    )
    return RenderRequest(kind=kind, series=tuple(series), options=options)


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(name)s: %(message)s")

    try:
        request = build_request(args)
    except (DataError, OSError) as e:
        print(f"termcharts: {e}", file=sys.stderr)
        sys.exit(1)

    logger.debug("rendering %s chart with %d series", request.kind.value, len(request.series))
    output = render(request)
    if not output:
        print("termcharts: nothing to render (empty or non-finite data)", file=sys.stderr)
        sys.exit(1)
    print(output)
