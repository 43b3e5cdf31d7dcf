"""Invert colours (255 - channel). Alpha is kept.

Example:
    webcolor invert '#3366cc' navy
"""

from webcolor.commands._util import output_format, resolve
from webcolor.core.types import Command, Report

command = Command(name='invert', help='Invert colours, keeping alpha.')


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('colors', nargs='+', help='Colours to invert')


@command.run
def run(report: Report, args, settings) -> None:
    fmt = output_format(args, settings)
    for value in args.colors:
        color = resolve(report, value)
        if color is not None:
            report.add(value, {'result': color.invert().to_string(fmt)})
