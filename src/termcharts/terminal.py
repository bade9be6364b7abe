import os
import sys

from termcharts.options import Capabilities

DEFAULT_SIZE = (80, 24)
COLOUR_TERMS = ("color", "ansi", "xterm", "screen", "tmux", "rxvt")


def _size_from_env() -> tuple[int, int]:
    try:
        return int(os.environ.get("COLUMNS", "")), int(os.environ.get("LINES", ""))
    except ValueError:
        return 0, 0


def get_terminal_size() -> tuple[int, int]:
    """Return (columns, rows) of the terminal, or (80, 24) if not a tty."""
    if sys.stdout.isatty():
        size = os.get_terminal_size()
        if size.columns and size.lines:
            return (size.columns, size.lines)
    columns, rows = _size_from_env()
    if columns > 0 and rows > 0:
        return (columns, rows)
    return DEFAULT_SIZE


def supports_colour() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    term = os.environ.get("TERM", "")
    if term in ("", "dumb"):
        return False
    if any(name in term for name in COLOUR_TERMS):
        return True
    if sys.platform == "win32" and (os.environ.get("WT_SESSION") or os.environ.get("ConEmuANSI") == "ON"):
        return True
    return sys.stdout.isatty()


def supports_unicode() -> bool:
    if os.environ.get("LANG") == "C" or os.environ.get("LC_ALL") == "C":
        return False
    locale = os.environ.get("LANG") or os.environ.get("LC_ALL") or os.environ.get("LC_CTYPE") or ""
    if "UTF-8" in locale.upper() or "UTF8" in locale.upper():
        return True
    return sys.platform.startswith(("linux", "darwin", "win32"))


def detect_capabilities() -> Capabilities:
    """Probe the current terminal once, for callers that want auto defaults."""
    width, height = get_terminal_size()
    return Capabilities(width=width, height=height, unicode=supports_unicode(), colour=supports_colour())
