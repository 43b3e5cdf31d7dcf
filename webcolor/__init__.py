"""webcolor — 8-bit sRGB colour values with WCAG contrast helpers.

    >>> from webcolor import Color
    >>> Color('#333').contrasting_color('#444').to_string()
    'rgb(162,162,162)'
"""

from webcolor.core.color import Color, ColorLike, WebColor
from webcolor.core.names import NAMED_COLORS
from webcolor.core.parser import parse
from webcolor.core.types import ColorRecord, ParseFailure

__all__ = [
    'NAMED_COLORS',
    'Color',
    'ColorLike',
    'ColorRecord',
    'ParseFailure',
    'WebColor',
    'parse',
]
