import io
import sys

import pytest

from termcharts.cli import build_parser, main
from tests.conftest import BRAILLE_BLANK


def run(capsys, *argv):
    main(list(argv))
    return capsys.readouterr().out


def test_spark(capsys):
    assert run(capsys, "spark", "1", "2", "--ascii", "--no-colour") == "_@\n"


def test_bar_width(capsys):
    out = run(capsys, "bar", "5", "10", "--ascii", "--no-colour", "-w", "42")
    assert out.splitlines() == ["#" * 20, "#" * 40]


def test_vertical_bar(capsys):
    out = run(capsys, "bar", "1", "2", "-v", "--ascii", "--no-colour", "--height", "4")
    assert out.splitlines() == ["    ###", "    ###", "### ###", "### ###"]


def test_stacked_series_without_values(capsys):
    out = run(capsys, "bar", "--series", "A=1,2", "--series", "B=2,1", "--stacked", "--ascii", "--no-colour")
    assert out.splitlines()[-1] == "# A  = B"


def test_pie_with_labels(capsys):
    out = run(capsys, "pie", "50", "50", "-l", "A,B", "--ascii", "--no-color", "--height", "10")
    assert out.count("50.0%") == 2
    assert "A   50.0%" in out


def test_braille_line(capsys):
    out = run(capsys, "line", "1", "2", "3", "-b", "--no-axes", "-w", "20", "--height", "5", "--no-colour")
    lines = out.splitlines()
    assert len(lines) == 5
    assert all(len(text) == 20 for text in lines)
    assert BRAILLE_BLANK in out


def test_line_with_extra_series(capsys):
    out = run(capsys, "line", "1", "2", "--series", "up=1,3", "--ascii", "--no-colour", "-w", "30", "--height", "8")
    assert out.splitlines()[-1] == "* Series 1  * up"


def test_data_file_labels(capsys, tmp_path):
    path = tmp_path / "sales.csv"
    path.write_text("# sales\n10,Q1\n20,Q2\n", encoding="utf-8")
    out = run(capsys, "bar", str(path), "--ascii", "--no-colour")
    lines = out.splitlines()
    assert lines[0].startswith("Q1  #")
    assert lines[1].startswith("Q2  #")


def test_label_flag_beats_file_labels(capsys, tmp_path):
    path = tmp_path / "sales.csv"
    path.write_text("10,Q1\n20,Q2\n", encoding="utf-8")
    out = run(capsys, "bar", str(path), "-l", "Jan,Feb", "--ascii", "--no-colour")
    assert out.startswith("Jan  #")


def test_stdin(capsys, monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("3\n1\n2\n"))
    assert run(capsys, "spark", "--ascii", "--no-colour") == "@_=\n"


def test_forced_colour(capsys):
    out = run(capsys, "bar", "1", "2", "--ascii", "--colour")
    assert "\033[34m" in out


def test_invalid_number_exits(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["bar", "abc", "--no-colour"])
    assert exc.value.code == 1
    assert "termcharts: Invalid number: abc" in capsys.readouterr().err


def test_non_finite_data_exits(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["spark", "nan", "--no-colour"])
    assert exc.value.code == 1
    assert "nothing to render" in capsys.readouterr().err


def test_colour_flags_are_exclusive():
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["bar", "1", "--colour", "--no-colour"])
    assert exc.value.code == 2


def test_unknown_theme_is_rejected():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["bar", "1", "--theme", "neon"])


def test_per_kind_defaults():
    parser = build_parser()
    assert parser.parse_args(["line"]).width == 60
    assert parser.parse_args(["bar"]).height == 15
    assert parser.parse_args(["spark"]).width == 0
    assert parser.parse_args(["pie"]).height is None
