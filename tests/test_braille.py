import numpy as np
import pytest

from termcharts.braille import BrailleCanvas
from termcharts.charsets import BRAILLE_BASE
from termcharts.options import Series
from termcharts.render import line
from tests.conftest import BRAILLE_BLANK, strip_ansi


def braille(data, **overrides):
    overrides.setdefault("colour", False)
    overrides.setdefault("show_axes", False)
    return line(data, style="braille", **overrides).split("\n")


def is_braille(char):
    return BRAILLE_BASE <= ord(char) <= BRAILLE_BASE + 0xFF


def test_canvas_resolution():
    canvas = BrailleCanvas(3, 5)
    assert (canvas.dot_height, canvas.dot_width) == (12, 10)


@pytest.mark.parametrize(
    "x, y, bit",
    [(0, 0, 0x01), (0, 1, 0x02), (0, 2, 0x04), (1, 0, 0x08), (1, 1, 0x10), (1, 2, 0x20), (0, 3, 0x40), (1, 3, 0x80)],
)
def test_dot_bits(x, y, bit):
    canvas = BrailleCanvas(1, 1)
    canvas.set(x, y)
    assert canvas.patterns()[0, 0] == bit


def test_full_cell():
    canvas = BrailleCanvas(1, 2)
    for y in range(4):
        for x in range(2):
            canvas.set(x, y)
    np.testing.assert_array_equal(canvas.patterns(), [[0xFF, 0]])
    assert canvas.to_grid().lines() == ["⣿" + BRAILLE_BLANK]


def test_out_of_range_dots_are_ignored():
    canvas = BrailleCanvas(1, 1)
    canvas.set(2, 0)
    canvas.set(0, -1)
    assert canvas.patterns()[0, 0] == 0


def test_last_writer_colours_the_cell():
    canvas = BrailleCanvas(1, 1)
    canvas.set(0, 0, "red")
    canvas.set(1, 3, "blue")
    assert canvas.colours[0, 0] == "blue"
    assert canvas.patterns()[0, 0] == 0x81


def test_segment_sets_every_dot_on_the_walk():
    canvas = BrailleCanvas(1, 2)
    canvas.draw_segment(0, 0, 3, 0)
    np.testing.assert_array_equal(canvas.patterns(), [[0x09, 0x09]])


@pytest.mark.parametrize("data", [[1, 5, 2, 8, 3, 7], [0.5], [-3, -1, -2], [1e6, 1e-6]])
def test_output_is_a_full_braille_block(data):
    lines = braille(data, width=30, height=8)
    assert len(lines) == 8
    for text in lines:
        assert len(text) == 30
        assert all(is_braille(char) for char in text)


def test_flat_series_is_one_row_of_top_dots():
    lines = braille([5, 5, 5, 5], width=20, height=10)
    assert len(lines) == 10
    non_blank = [i for i, text in enumerate(lines) if set(text) != {BRAILLE_BLANK}]
    assert non_blank == [5]
    assert lines[5] == "⠉" * 20


def test_single_point():
    lines = braille([3], width=10, height=3)
    assert lines[1][5] == chr(BRAILLE_BASE + 0x04)
    assert "".join(lines).replace(BRAILLE_BLANK, "") == chr(BRAILLE_BASE + 0x04)


def test_endpoints_reach_the_corners():
    lines = braille([0, 10], width=10, height=4)
    # lowest value: bottom-left dot; highest: top-right dot
    assert ord(lines[-1][0]) - BRAILLE_BASE & 0x40
    assert ord(lines[0][-1]) - BRAILLE_BASE & 0x08


def test_axes_surround_braille_rows():
    lines = line([1, 2, 3], style="braille", colour=False, width=30, height=8).split("\n")
    assert len(lines) == 7
    for text in lines[:6]:
        assert len(text) == 30
        assert all(is_braille(char) for char in text[8:])
    assert lines[0].startswith("    3.0 ")
    assert lines[6] == " " * 8 + "─" * 22


def test_colour_follows_series():
    data = [Series([1, 2], colour="green"), Series([2, 1], colour="cyan")]
    output = line(data, style="braille", colour=True, show_axes=False, show_legend=False, width=20, height=5)
    assert "\033[32m" in output
    assert "\033[36m" in output
    plain = line(data, style="braille", colour=False, show_axes=False, show_legend=False, width=20, height=5)
    assert strip_ansi(output) == plain
