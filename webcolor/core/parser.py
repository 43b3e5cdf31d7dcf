"""Colour parser: strings, partial records and colour values to ColorRecord.

String grammar, tried in order after trimming and lowercasing:
  1. CSS keyword         'purple'            -> its hex, then rule 3
  2. 'transparent'                           -> (0, 0, 0, 0)
  3. hex                 '#rgb' '#rgba' '#rrggbb' '#rrggbbaa'
  4. functional          'rgb(r,g,b)' 'rgba(r,g,b,a)'

Percentage components in rgb()/rgba() are not supported and are rejected.
Bad input is returned as a ParseFailure, never raised.
"""

import logging
import math
import numbers
import re
from collections.abc import Mapping
from functools import singledispatch
from typing import Any

from webcolor.core.names import NAMED_COLORS, expand_hex
from webcolor.core.types import ColorRecord, ParseFailure

logger = logging.getLogger(__name__)

_HEX_LENGTHS = (4, 5, 7, 9)  # including the leading '#'
_HEX_DIGITS = re.compile(r'[0-9a-f]+')
_FUNCTIONAL = re.compile(r'rgba?\((.*)\)', re.DOTALL)
_INT = re.compile(r'\s*[+-]?\d+\s*')
_FLOAT = re.compile(r'\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?\s*')


def round_half_up(x: float) -> int:
    """Round to nearest integer, halves away from -inf (0.5 -> 1, 2.5 -> 3)."""
    return math.floor(x + 0.5)


def _fail(value: Any, reason: str) -> ParseFailure:
    logger.debug('cannot parse colour %r: %s', value, reason)
    return ParseFailure(value=value, reason=reason)


def _is_finite(x: float) -> bool:
    """False for NaN, infinities and ints too large for a float."""
    try:
        return math.isfinite(x)
    except OverflowError:
        return False


@singledispatch
def parse(value: Any) -> ColorRecord | ParseFailure:
    """Parse any supported colour input into a ColorRecord."""
    return _fail(value, f'unsupported input type {type(value).__name__}')


@parse.register
def _(value: ColorRecord) -> ColorRecord | ParseFailure:
    return value


@parse.register
def _(value: Mapping) -> ColorRecord | ParseFailure:
    fields: dict[str, float] = {}
    for key in 'rgba':
        channel = value.get(key)
        if channel is None:
            continue
        if isinstance(channel, bool) or not isinstance(channel, numbers.Real):
            return _fail(value, f'{key} is not a number: {channel!r}')
        if not _is_finite(channel):
            return _fail(value, f'{key} is not a finite number')
        fields[key] = channel
    return ColorRecord(**fields)


@parse.register
def _(value: str) -> ColorRecord | ParseFailure:
    s = value.strip().lower()
    if s in NAMED_COLORS:
        s = '#' + NAMED_COLORS[s]
    elif s == 'transparent':
        return ColorRecord(0, 0, 0, 0)

    if s.startswith('#'):
        return _parse_hex(value, s)
    if s.startswith('r'):
        return _parse_functional(value, s)
    return _fail(value, 'not a colour keyword, hex or rgb() string')


def _parse_hex(value: str, s: str) -> ColorRecord | ParseFailure:
    if len(s) not in _HEX_LENGTHS:
        return _fail(value, f'hex colour must have 3, 4, 6 or 8 digits, got {len(s) - 1}')
    digits = s[1:]
    if not _HEX_DIGITS.fullmatch(digits):
        return _fail(value, 'invalid hex digit')

    digits = expand_hex(digits)
    n = int(digits, 16)
    if len(digits) == 8:
        return ColorRecord(
            r=n >> 24 & 255,
            g=n >> 16 & 255,
            b=n >> 8 & 255,
            a=round_half_up((n & 255) / 0.255) / 1000,
        )
    return ColorRecord(r=n >> 16, g=n >> 8 & 255, b=n & 255, a=1)


def _parse_functional(value: str, s: str) -> ColorRecord | ParseFailure:
    m = _FUNCTIONAL.fullmatch(s)
    if not m:
        return _fail(value, 'expected rgb(...) or rgba(...)')
    parts = m.group(1).split(',')
    if len(parts) not in (3, 4):
        return _fail(value, f'expected 3 or 4 components, got {len(parts)}')

    channels = []
    for part in parts[:3]:
        if not _INT.fullmatch(part):
            return _fail(value, f'invalid channel {part.strip()!r}')
        try:
            channel = int(part)
        except ValueError:
            return _fail(value, 'channel has too many digits')
        if not _is_finite(channel):
            return _fail(value, f'channel out of range {part.strip()[:20]!r}')
        channels.append(channel)

    alpha = 1.0
    if len(parts) == 4:
        if not _FLOAT.fullmatch(parts[3]):
            return _fail(value, f'invalid alpha {parts[3].strip()!r}')
        alpha = float(parts[3])
        if not math.isfinite(alpha):
            return _fail(value, 'alpha is not finite')

    r, g, b = channels
    return ColorRecord(r=r, g=g, b=b, a=alpha)
