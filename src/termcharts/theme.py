from dataclasses import dataclass

RESET = "\033[0m"

ANSI_CODES = {
    "black": "\033[30m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "orange": "\033[33m",
    "blue": "\033[34m",
    "magenta": "\033[35m",
    "purple": "\033[35m",
    "cyan": "\033[36m",
    "white": "\033[37m",
    "gray": "\033[90m",
    "grey": "\033[90m",
    "brown": "\033[31m",
}


@dataclass(frozen=True)
class Theme:
    name: str
    primary: str
    secondary: str
    accent: str
    muted: str
    text: str
    series: tuple[str, ...] = ()

    def series_colour(self, index: int) -> str:
        """Colour for the series at index, cycling through the palette."""
        if not self.series:
            return self.primary
        return self.series[index % len(self.series)]


DEFAULT_THEME = Theme(
    name="default",
    primary="blue",
    secondary="green",
    accent="yellow",
    muted="gray",
    text="",
    series=("red", "blue", "yellow", "magenta", "green", "cyan"),
)

DARK_THEME = Theme(
    name="dark",
    primary="cyan",
    secondary="magenta",
    accent="yellow",
    muted="gray",
    text="white",
    series=("cyan", "magenta", "yellow", "green", "blue", "red"),
)

LIGHT_THEME = Theme(
    name="light",
    primary="blue",
    secondary="red",
    accent="orange",
    muted="gray",
    text="black",
    series=("blue", "red", "green", "purple", "orange", "brown"),
)

MONOCHROME_THEME = Theme(
    name="mono",
    primary="white",
    secondary="gray",
    accent="white",
    muted="gray",
    text="white",
    series=("white", "gray"),
)

THEMES = {
    "default": DEFAULT_THEME,
    "dark": DARK_THEME,
    "light": LIGHT_THEME,
    "mono": MONOCHROME_THEME,
    "monochrome": MONOCHROME_THEME,
}


def get_theme(name: str) -> Theme:
    return THEMES.get(name, DEFAULT_THEME)


def colorize(text: str, colour: str, enabled: bool = True) -> str:
    """Wrap text in an ANSI colour sequence followed by a reset.

    Unknown or empty colour names leave the text unchanged.
    """
    if not enabled or not text:
        return text
    code = ANSI_CODES.get(colour)
    if code is None:
        return text
    return f"{code}{text}{RESET}"
