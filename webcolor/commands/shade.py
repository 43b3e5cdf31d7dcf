"""Darken, lighten or blend a colour.

p in [-1, 1]: negative darkens toward black, positive lightens toward white,
or both move toward --blend when given. The default mix works on squared
channels; --linear uses a straight linear mix. Alpha is blended too.

Example:
    webcolor shade '#3366cc' -0.25
    webcolor shade '#3366cc' 0.5 --blend tomato --linear
"""

from webcolor.commands._util import output_format, resolve
from webcolor.core.types import Command, Report

command = Command(
    name='shade',
    help='Darken (p<0), lighten (p>0) or blend a colour by a fraction p in [-1, 1].',
)


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('color', help='Colour to shade')
    parser.add_argument('p', type=float, help='Amount in [-1, 1]')
    parser.add_argument('-b', '--blend', default=None, help='Colour to blend toward')
    parser.add_argument('-l', '--linear', action='store_true', help='Linear instead of gamma-aware mix')


@command.run
def run(report: Report, args, settings) -> None:
    color = resolve(report, args.color)
    if color is None:
        return
    if args.blend is not None and resolve(report, args.blend) is None:
        return
    shaded = color.shade_blend(args.p, args.blend, args.linear)
    if shaded is None:
        report.error(f'p must be a number in [-1, 1], got {args.p}')
        return
    report.add(
        args.color,
        {
            'p': args.p,
            'blend': args.blend,
            'linear': args.linear,
            'result': shaded.to_string(output_format(args, settings)),
        },
    )
