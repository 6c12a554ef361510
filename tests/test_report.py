"""Tests for tiny_color.core.report — text and JSON rendering."""

import json

from tiny_color import Color
from tiny_color.core.report import format_json, format_text


class TestFormatText:
    def test_single(self):
        assert format_text([('red', Color(255, 0, 0))]) == 'red  #FF0000  rgb(255, 0, 0)'

    def test_labels_aligned(self):
        out = format_text([('a', Color(0, 0, 0)), ('longer', Color(1, 2, 3))])
        lines = out.splitlines()
        assert lines[0] == 'a       #000000  rgb(0, 0, 0)'
        assert lines[1] == 'longer  #010203  rgb(1, 2, 3)'

    def test_empty(self):
        assert format_text([]) == ''


class TestFormatJson:
    def test_fields(self):
        data = json.loads(format_json([('x', Color(37, 99, 235))]))
        assert data == [{'label': 'x', 'hex': '#2563EB', 'r': 37, 'g': 99, 'b': 235}]

    def test_empty(self):
        assert json.loads(format_json([])) == []
