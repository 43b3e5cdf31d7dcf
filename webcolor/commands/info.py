"""Describe colours: canonical forms, brightness, luminance, nearest keyword.

Accepts any colour the parser understands: CSS keywords, #rgb, #rgba,
#rrggbb, #rrggbbaa, rgb(r,g,b) and rgba(r,g,b,a).

Brightness is the W3C AERT weighting (0-255); luminance is the WCAG 2.0
relative luminance (0-1). Neither looks at alpha.

Example:
    webcolor info rebeccapurple '#43C40399' 'rgba(0,0,0,0.5)'
"""

from webcolor.commands._util import resolve
from webcolor.core.names import nearest_name
from webcolor.core.types import Command, Report

command = Command(
    name='info',
    help='Canonical rgb/hex forms, brightness, luminance and nearest CSS keyword.',
)


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('colors', nargs='+', help='Colours to describe')


@command.run
def run(report: Report, args, settings) -> None:
    for value in args.colors:
        color = resolve(report, value)
        if color is None:
            continue
        name, dist = nearest_name((color.r, color.g, color.b))
        report.add(
            value,
            {
                'rgb': color.to_string('rgb'),
                'hex': color.to_string('hex'),
                'alpha': color.a,
                'brightness': round(color.get_brightness(), 2),
                'luminance': round(color.get_luminance(), 4),
                'dark': color.is_dark(),
                'nearest': name,
                'distance': round(dist, 1),
            },
        )
