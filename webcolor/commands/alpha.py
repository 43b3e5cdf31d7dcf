"""Set the alpha channel of a colour.

Alpha may be a fraction in [0, 1] or a percentage in (1, 100].

Example:
    webcolor alpha '#3366cc' 0.4
    webcolor alpha '#3366cc' 40 --format hex
"""

from webcolor.commands._util import output_format, resolve
from webcolor.core.types import Command, Report

command = Command(name='alpha', help='Replace the alpha channel (fraction or percentage).')


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('color', help='Colour to change')
    parser.add_argument('a', type=float, help='Alpha in [0, 1] or percentage in (1, 100]')


@command.run
def run(report: Report, args, settings) -> None:
    color = resolve(report, args.color)
    if color is None:
        return
    result = color.with_alpha(args.a)
    if result is None:
        report.error(f'alpha must be in [0, 1] or (1, 100], got {args.a}')
        return
    report.add(args.color, {'alpha': result.a, 'result': result.to_string(output_format(args, settings))})
