"""WCAG 2.0 contrast ratio between a base colour and one or more others.

For each pair reports the ratio (1-21) and whether it meets AA (4.5),
AA large text (3), AAA (7) and AAA large text (4.5). Alpha is ignored.

With --fail-below N every pair is scored pass/fail against N and the
process exits 1 if any pair falls short (CI gating).

Example:
    webcolor contrast '#ffffff' '#767676' '#777777'
    webcolor contrast '#1e293b' '#94a3b8' --fail-below 4.5
"""

from webcolor.commands._util import resolve
from webcolor.core.contrast import wcag_levels
from webcolor.core.types import Command, Report

command = Command(
    name='contrast',
    help='WCAG contrast ratio of a base colour against others, with AA/AAA flags.',
)


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('base', help='Base (background) colour')
    parser.add_argument('others', nargs='+', help='Colours to compare against the base')
    parser.add_argument(
        '--fail-below',
        type=float,
        default=None,
        metavar='N',
        help='Exit 1 if any ratio is below N',
    )


@command.run
def run(report: Report, args, settings) -> None:
    base = resolve(report, args.base)
    if base is None:
        return
    for value in args.others:
        other = resolve(report, value)
        if other is None:
            continue
        ratio = base.contrast_ratio(other)
        data = {'ratio': round(ratio, 2), **wcag_levels(ratio)}
        if args.fail_below is not None:
            passed = ratio >= args.fail_below
            data['pass'] = passed
            if passed:
                report.record_pass()
            else:
                report.record_fail()
        report.add(f'{args.base} vs {value}', data)
