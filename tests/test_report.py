import math
import re

import pytest

from gostats.options import Options
from gostats.report import (COMPACT_FIELDS, COMPLETE_FIELDS, format_value,
                            print_summary, render, row)
from gostats.stats import summarize


@pytest.mark.parametrize("value, expected", [
    (4, "4"),
    (4.0, "4"),
    (2.5, "2.5"),
    (-0.125, "-0.125"),
    (0.1, "0.1"),
    (1e22, "1e+22"),
    (1000000.0, "1000000"),
    (123456789.0, "123456789"),
    (math.inf, "inf"),
])
def test_format_value(value, expected):
    assert format_value(value) == expected


def test_compact_row():
    summary = summarize([1.0, 2.0, 3.0, 4.0])
    cells = row(summary)
    assert len(cells) == len(COMPACT_FIELDS) == 6
    assert cells[:4] == ["4", "1", "4", "2.5"]


def test_complete_row():
    summary = summarize([8.0, 7.0, 6.0, 5.0, 4.0, 3.0, 2.0, 1.0])
    cells = row(summary, complete=True)
    assert len(cells) == len(COMPLETE_FIELDS) == 10
    assert cells[:8] == ["8", "1", "2.5", "4.5", "6.5", "8", "36", "4.5"]


def test_render_compact():
    lines = render(summarize([1.0, 2.0, 3.0]), Options()).splitlines()
    assert len(lines) == 2
    assert lines[0].split() == list(COMPACT_FIELDS)
    assert len(lines[1].split()) == 6


def test_render_complete():
    lines = render(summarize([1.0, 2.0, 3.0]), Options(complete=True)).splitlines()
    assert lines[0].split() == list(COMPLETE_FIELDS)
    assert len(lines[1].split()) == 10


def test_render_columns_aligned():
    lines = render(summarize([1000.5, 2.0]), Options(complete=True)).splitlines()
    header, data = [[m.start() for m in re.finditer(r"\S+", line)] for line in lines]
    assert header == data


def test_render_no_header():
    lines = render(summarize([1.0, 2.0, 3.0]), Options(no_header=True)).splitlines()
    assert lines == [lines[0]]
    assert lines[0].split()[:3] == ["3", "1", "3"]


def test_print_summary(capsys):
    print_summary(summarize([5.0]), Options(no_header=True))
    out = capsys.readouterr().out
    assert out.endswith("\n")
    assert out.split() == ["1", "5", "5", "5", "0", "0"]
