from termcharts.theme import DEFAULT_THEME, MONOCHROME_THEME, RESET, THEMES, Theme, colorize, get_theme


def test_series_colour_cycles():
    theme = DEFAULT_THEME
    count = len(theme.series)
    assert theme.series_colour(0) == theme.series[0]
    assert theme.series_colour(count) == theme.series[0]
    assert theme.series_colour(count + 1) == theme.series[1]


def test_series_colour_falls_back_to_primary():
    theme = Theme(name="bare", primary="green", secondary="", accent="", muted="", text="")
    assert theme.series_colour(3) == "green"


def test_get_theme():
    assert get_theme("dark") is THEMES["dark"]
    assert get_theme("monochrome") is MONOCHROME_THEME
    assert get_theme("no-such-theme") is DEFAULT_THEME


def test_colorize_wraps_with_reset():
    text = colorize("abc", "red")
    assert text.startswith("\033[31m")
    assert text.endswith(RESET)
    assert "abc" in text


def test_colorize_passthrough():
    assert colorize("abc", "red", enabled=False) == "abc"
    assert colorize("abc", "") == "abc"
    assert colorize("abc", "chartreuse") == "abc"
    assert colorize("", "red") == ""
