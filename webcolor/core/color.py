"""The WebColor value type and the Color() factory.

A WebColor is never modified after construction; invert, with_alpha,
shade_blend and contrasting_color all return new values. Brightness and
relative luminance are computed on first use and cached on the instance.

Channels are not clamped: out-of-range values flow through to strings and
metrics unchanged.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping
from dataclasses import dataclass, replace
from functools import cached_property
from typing import Union

from webcolor.core import contrast
from webcolor.core.parser import parse, round_half_up
from webcolor.core.types import ColorRecord

ColorLike = Union[str, Mapping, ColorRecord, 'WebColor']


def _format_number(x: float) -> str:
    return str(int(x)) if x == int(x) else repr(x)


@dataclass(frozen=True, eq=False)
class WebColor:
    """An 8-bit sRGB colour with an alpha channel in [0, 1]."""

    r: float = 0
    g: float = 0
    b: float = 0
    a: float = 1

    @classmethod
    def from_record(cls, record: ColorRecord) -> WebColor:
        return cls(r=record.r, g=record.g, b=record.b, a=record.a)

    @classmethod
    def black(cls) -> WebColor:
        return cls(0, 0, 0, 1)

    @classmethod
    def white(cls) -> WebColor:
        return cls(255, 255, 255, 1)

    def record(self) -> ColorRecord:
        return ColorRecord(r=self.r, g=self.g, b=self.b, a=self.a)

    # -- rendering ---------------------------------------------------------

    def to_string(self, fmt: str = 'rgb') -> str:
        """Render as 'rgb(...)'/'rgba(...)' or '#rrggbb'/'#rrggbbaa'.

        Alpha is left out entirely when it is exactly 1.
        """
        opaque = self.a == 1
        r, g, b = round_half_up(self.r), round_half_up(self.g), round_half_up(self.b)
        if fmt == 'hex':
            n = 0x100000000 + r * 0x1000000 + g * 0x10000 + b * 0x100 + (0 if opaque else round_half_up(self.a * 255))
            digits = format(n, 'x')[1:]
            return '#' + (digits[:-2] if opaque else digits)
        if opaque:
            return f'rgb({r},{g},{b})'
        return f'rgba({r},{g},{b},{_format_number(round_half_up(self.a * 1000) / 1000)})'

    def __str__(self) -> str:
        return self.to_string()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WebColor):
            return NotImplemented
        return self.to_string() == other.to_string()

    def __hash__(self) -> int:
        return hash(self.to_string())

    # -- queries (alpha is ignored by all of them) -------------------------

    @cached_property
    def _brightness(self) -> float:
        # http://www.w3.org/TR/AERT#color-contrast
        return (self.r * 299 + self.g * 587 + self.b * 114) / 1000

    @cached_property
    def _luminance(self) -> float:
        # http://www.w3.org/TR/2008/REC-WCAG20-20081211/#relativeluminancedef
        def linear(channel: float) -> float:
            x = channel / 255
            if x <= 0.03928:
                return x / 12.92
            return ((x + 0.055) / 1.055) ** 2.4

        return 0.2126 * linear(self.r) + 0.7152 * linear(self.g) + 0.0722 * linear(self.b)

    def get_brightness(self) -> float:
        return self._brightness

    def get_luminance(self) -> float:
        return self._luminance

    def is_dark(self) -> bool:
        return self.get_brightness() < 128

    # NOTE: is_white/is_black test all-zero and all-255 channels respectively.
    # The names look swapped, but callers (the contrast search included) rely
    # on the channel tests, so they are kept as-is.
    def is_white(self) -> bool:
        return self.r == 0 and self.g == 0 and self.b == 0

    def is_black(self) -> bool:
        return self.r == 255 and self.g == 255 and self.b == 255

    def equals(self, other: ColorLike) -> bool:
        """True when both render to the same canonical rgb() string."""
        other_color = Color(other)
        if other_color is None:
            return False
        return self.to_string() == other_color.to_string()

    def contrast_ratio(self, other: ColorLike) -> float | None:
        """WCAG 2.0 contrast ratio, 1 to 21. None if `other` does not parse."""
        other_color = Color(other)
        if other_color is None:
            return None
        return contrast.contrast_ratio(self.get_luminance(), other_color.get_luminance())

    # -- transforms --------------------------------------------------------

    def with_alpha(self, a: float) -> WebColor | None:
        """Copy with a new alpha.

        Values in (1, 100] are read as percentages. Anything that does not end
        up in [0, 1] gives None.
        """
        if isinstance(a, bool) or not isinstance(a, numbers.Real):
            return None
        if 1 < a <= 100:
            a = a / 100
        if 0 <= a <= 1:
            return replace(self, a=a)
        return None

    def invert(self) -> WebColor:
        return replace(self, r=255 - self.r, g=255 - self.g, b=255 - self.b)

    def shade_blend(self, p: float, blend: ColorLike | None = None, linear: bool = False) -> WebColor | None:
        """Darken (p < 0) or lighten (p > 0) by |p|, or blend toward `blend`.

        The default blend works on squared channels, which keeps perceived
        lightness steadier than a straight linear mix; pass linear=True for
        the plain mix. Returns None when p is not a number in [-1, 1] or
        `blend` does not parse.

        Based on https://github.com/PimpTrizkit/PJs/wiki/12.-Shade,-Blend-and-Convert-a-Web-Color-(pSBC.js)
        """
        target = None
        if blend is not None:
            target = Color(blend)
            if target is None:
                return None
        if isinstance(p, bool) or not isinstance(p, numbers.Real) or math.isnan(p) or p < -1 or p > 1:
            return None

        if target is None:
            target = self.black() if p < 0 else self.white()
        p = abs(p)
        q = 1 - p

        if linear:
            r = q * self.r + p * target.r
            g = q * self.g + p * target.g
            b = q * self.b + p * target.b
        else:
            r = (q * self.r**2 + p * target.r**2) ** 0.5
            g = (q * self.g**2 + p * target.g**2) ** 0.5
            b = (q * self.b**2 + p * target.b**2) ** 0.5

        # A negative alpha counts as unset; the other side wins
        if self.a >= 0 or target.a >= 0:
            if self.a < 0:
                a = target.a
            elif target.a < 0:
                a = self.a
            else:
                a = self.a * q + target.a * p
        else:
            a = 1
        return WebColor(r=r, g=g, b=b, a=a)

    def contrasting_color(
        self, target: ColorLike | None = None, min_ratio: float = contrast.AA_NORMAL
    ) -> WebColor | None:
        """A colour with at least `min_ratio` contrast against this one.

        Without a target: white for dark colours, black otherwise. With a
        target: the target shaded toward black or white in 20% steps until
        the ratio is reached or it becomes pure black or white. `invert()` is
        often a good target. None if `target` does not parse.
        """
        if target is None:
            return self.white() if self.is_dark() else self.black()
        start = Color(target)
        if start is None:
            return None
        return contrast.find_contrasting(self, start, min_ratio)


@parse.register
def _(value: WebColor) -> ColorRecord:
    return value.record()


def Color(value: ColorLike) -> WebColor | None:  # noqa: N802
    """Build a WebColor from any supported input. Returns `value` itself if it
    already is one, and None if it does not parse."""
    if isinstance(value, WebColor):
        return value
    record = parse(value)
    if not record:
        return None
    return WebColor.from_record(record)
