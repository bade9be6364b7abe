"""Read numeric series from command-line tokens, files or stdin."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import TextIO

from termcharts.options import Series


class DataError(ValueError):
    pass


def parse_numbers(tokens: Iterable[str]) -> list[float]:
    values = []
    for token in tokens:
        token = token.strip()
        if not token:
            continue
        try:
            values.append(float(token))
        except ValueError:
            raise DataError(f"Invalid number: {token}") from None
    return values


def _is_number(text: str) -> bool:
    try:
        float(text)
    except ValueError:
        return False
    return True


def parse_line(line: str) -> list[float]:
    """Numbers on one line, comma-separated or whitespace-separated."""
    if "," in line:
        return parse_numbers(line.split(","))
    return parse_numbers(line.split())


def read_values(lines: Iterable[str]) -> tuple[list[float], list[str]]:
    """Parse data lines into values and labels.

    Blank lines and ``#`` comments are skipped. A ``value,label`` line, where the
    part after the first comma is not a number, contributes a labelled value.
    """
    values: list[float] = []
    labels: list[str] = []
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        head, sep, tail = line.partition(",")
        if sep and _is_number(head) and not _is_number(tail.split(",")[0]):
            values.append(float(head))
            labels.append(tail.strip())
            continue
        values.extend(parse_line(line))
    return values, labels


def read_file(path: str | Path) -> tuple[list[float], list[str]]:
    path = Path(path)
    with path.open(encoding="utf-8") as f:
        return read_values(f)


def load(args: Sequence[str], stdin: TextIO) -> tuple[list[float], list[str]]:
    """Values from arguments, a single file argument, or stdin when there are none."""
    if not args:
        if stdin.isatty():
            raise DataError("No data provided via stdin")
        return read_values(stdin)
    if len(args) == 1 and Path(args[0]).is_file():
        return read_file(args[0])
    return parse_numbers(args), []


def parse_labels(text: str) -> list[str]:
    return [label.strip() for label in text.split(",") if label.strip()]


def parse_series(text: str) -> Series:
    """Parse ``label=1,2,3`` (or just ``1,2,3``) into a series."""
    label, sep, numbers = text.partition("=")
    if not sep:
        label, numbers = "", text
    values = parse_line(numbers)
    if not values:
        raise DataError(f"Series has no values: {text}")
    return Series(values=values, label=label.strip())
