"""Tests for webcolor.core.report — text and JSON rendering."""

import json

from webcolor.core.report import format_json, format_text
from webcolor.core.types import Report


def _report() -> Report:
    report = Report(command='contrast')
    report.add('#fff vs #767676', {'ratio': 4.54, 'aa': True, 'aaa': False})
    report.add('#fff vs #777', {'ratio': 4.48, 'aa': False})
    report.record_pass()
    report.record_fail()
    return report


class TestReport:
    def test_add_merges(self) -> None:
        report = Report()
        report.add('x', {'a': 1})
        report.add('x', {'b': 2})
        assert report.entries == {'x': {'a': 1, 'b': 2}}

    def test_errors(self) -> None:
        report = Report()
        report.error('boom')
        assert report.errors == ['boom']


class TestFormatText:
    def test_header(self) -> None:
        assert format_text(_report()).splitlines()[0] == 'webcolor: contrast (2 results)'

    def test_blocks(self) -> None:
        text = format_text(_report())
        assert '── #fff vs #767676' in text
        assert '  ratio: 4.54' in text
        assert '  aa: ✓' in text
        assert '  aaa: ✗' in text

    def test_summary(self) -> None:
        assert format_text(_report()).endswith('PASS 1/2  FAIL 1/2')

    def test_no_summary_without_scores(self) -> None:
        report = Report(command='info')
        report.add('red', {'luminance': 0.2126, 'nearest': 'red'})
        text = format_text(report)
        assert 'PASS' not in text
        assert '  luminance: 0.2126' in text

    def test_none_value(self) -> None:
        report = Report(command='shade')
        report.add('red', {'blend': None})
        assert '  blend: None' in format_text(report)


class TestFormatJson:
    def test_structure(self) -> None:
        obj = json.loads(format_json(_report()))
        assert obj['command'] == 'contrast'
        assert obj['results'][0] == {'label': '#fff vs #767676', 'ratio': 4.54, 'aa': True, 'aaa': False}
        assert obj['summary'] == {'total': 2, 'pass': 1, 'fail': 1}
        assert 'errors' not in obj

    def test_errors_included(self) -> None:
        report = Report(command='info')
        report.error("cannot parse colour: 'nope'")
        obj = json.loads(format_json(report))
        assert obj['errors'] == ["cannot parse colour: 'nope'"]
        assert obj['results'] == []
        assert 'summary' not in obj
