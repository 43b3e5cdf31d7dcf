"""Find a colour with enough contrast against a base colour.

Without --target: white for dark bases, black for light ones.

With --target: the target is shaded 20% toward black or white per step until
its contrast against the base reaches --min-ratio, or it becomes pure black
or white. The step never shrinks, so the result can overshoot the minimum;
when an endpoint is hit first the ratio can stay below it ('reached' is then
false).

--min-ratio defaults to WEBCOLOR_MIN_RATIO, or 4.5 (WCAG AA).

Example:
    webcolor contrasting '#333' --target '#444'
    webcolor contrasting '#eee' --target '#eee' --min-ratio 7
"""

from webcolor.commands._util import output_format, resolve
from webcolor.core.types import Command, Report

command = Command(
    name='contrasting',
    help='Shade a target colour until it contrasts enough with a base colour.',
)


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('base', help='Base (background) colour')
    parser.add_argument('-t', '--target', default=None, help='Starting colour to shade (default: black/white)')
    parser.add_argument('-m', '--min-ratio', type=float, default=None, help='Minimum contrast ratio')


@command.run
def run(report: Report, args, settings) -> None:
    base = resolve(report, args.base)
    if base is None:
        return
    if args.target is not None and resolve(report, args.target) is None:
        return

    min_ratio = args.min_ratio if args.min_ratio is not None else settings.min_ratio
    result = base.contrasting_color(args.target, min_ratio)
    ratio = base.contrast_ratio(result)
    reached = ratio >= min_ratio
    if reached:
        report.record_pass()
    else:
        report.record_fail()
    report.add(
        args.base,
        {
            'target': args.target,
            'result': result.to_string(output_format(args, settings)),
            'ratio': round(ratio, 2),
            'min_ratio': min_ratio,
            'reached': reached,
        },
    )
