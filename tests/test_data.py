import io

import pytest

from termcharts.data import DataError, load, parse_labels, parse_line, parse_numbers, parse_series, read_file, read_values
from termcharts.options import Series


class FakeTerminal(io.StringIO):
    def isatty(self):
        return True


def test_parse_numbers_skips_blanks():
    assert parse_numbers(["1", " 2.5 ", "", "-3e2"]) == [1.0, 2.5, -300.0]


def test_parse_numbers_rejects_words():
    with pytest.raises(DataError, match="Invalid number: abc"):
        parse_numbers(["1", "abc"])


def test_parse_line_separators():
    assert parse_line("1, 2,3") == [1.0, 2.0, 3.0]
    assert parse_line("4 5\t6") == [4.0, 5.0, 6.0]


def test_read_values_with_labels_and_comments():
    lines = ["# quarterly", "", "10,Q1", "20, Q2", "1 2", "3,4"]
    values, labels = read_values(lines)
    assert values == [10.0, 20.0, 1.0, 2.0, 3.0, 4.0]
    assert labels == ["Q1", "Q2"]


def test_read_file(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("5,apples\n7,pears\n", encoding="utf-8")
    assert read_file(path) == ([5.0, 7.0], ["apples", "pears"])


def test_load_prefers_arguments():
    assert load(["1", "2"], io.StringIO("9\n")) == ([1.0, 2.0], [])


def test_load_single_file_argument(tmp_path):
    path = tmp_path / "values.txt"
    path.write_text("1\n2\n3\n", encoding="utf-8")
    assert load([str(path)], io.StringIO()) == ([1.0, 2.0, 3.0], [])


def test_load_reads_piped_stdin():
    assert load([], io.StringIO("1\n2,3\n")) == ([1.0, 2.0, 3.0], [])


def test_load_refuses_interactive_stdin():
    with pytest.raises(DataError):
        load([], FakeTerminal())


def test_missing_file_is_a_number_error():
    with pytest.raises(DataError):
        load(["no-such-file.csv"], io.StringIO())


def test_parse_labels():
    assert parse_labels("a, b,,c ") == ["a", "b", "c"]


def test_parse_series():
    assert parse_series("Sales=1,2,3") == Series(values=[1.0, 2.0, 3.0], label="Sales")
    assert parse_series("4 5") == Series(values=[4.0, 5.0], label="")


def test_parse_series_needs_values():
    with pytest.raises(DataError, match="no values"):
        parse_series("empty=")
