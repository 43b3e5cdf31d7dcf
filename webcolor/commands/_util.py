"""Helpers shared by the command modules."""

from typing import Any

from webcolor.core.color import Color, WebColor
from webcolor.core.env import Settings
from webcolor.core.types import Report


def output_format(args: Any, settings: Settings) -> str:
    return getattr(args, 'format', None) or settings.output_format


def resolve(report: Report, value: str) -> WebColor | None:
    """Parse a colour argument, recording an error on the report if it fails."""
    color = Color(value)
    if color is None:
        report.error(f'cannot parse colour: {value!r}')
    return color
