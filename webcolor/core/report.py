"""Report builder — text and JSON output for webcolor commands."""

import json
from typing import Any

from webcolor.core.types import Report


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return '✓' if value else '✗'
    if isinstance(value, float):
        return f'{value:.4g}' if abs(value) < 1 else f'{value:.2f}'
    if isinstance(value, dict):
        return '  '.join(f'{k}={_format_value(v)}' for k, v in value.items())
    if isinstance(value, list):
        return ', '.join(_format_value(v) for v in value)
    return str(value)


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = [f'webcolor: {report.command} ({len(report.entries)} results)', '']

    for label, data in report.entries.items():
        lines.append(f'── {label}')
        for key, value in data.items():
            lines.append(f'  {key}: {_format_value(value)}')
        lines.append('')

    total = report.pass_count + report.fail_count
    if total > 0:
        lines.append(f'PASS {report.pass_count}/{total}  FAIL {report.fail_count}/{total}')
    return '\n'.join(lines).rstrip('\n')


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'command': report.command,
        'results': [{'label': label, **data} for label, data in report.entries.items()],
    }
    if report.errors:
        obj['errors'] = report.errors
    if report.pass_count + report.fail_count:
        obj['summary'] = {
            'total': report.pass_count + report.fail_count,
            'pass': report.pass_count,
            'fail': report.fail_count,
        }
    return json.dumps(obj, indent=2)
