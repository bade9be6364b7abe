import re

from termcharts.charsets import BRAILLE_BASE
from termcharts.options import Capabilities, RenderOptions

ANSI_ESCAPE = re.compile(r"\033\[[0-9;]*m")
BRAILLE_BLANK = chr(BRAILLE_BASE)


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE.sub("", text)


def make_options(**overrides) -> RenderOptions:
    """Deterministic options: no colour, Unicode terminal, 80x24."""
    overrides.setdefault("colour", False)
    overrides.setdefault("capabilities", Capabilities())
    return RenderOptions(**overrides)


def is_printable(text: str) -> bool:
    """No control characters other than newlines and ANSI escapes."""
    return all(char.isprintable() for char in strip_ansi(text).replace("\n", ""))
