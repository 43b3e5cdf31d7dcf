"""Sample an image region and pick a readable text colour for it.

Samples up to 10,000 pixels (fixed seed). Reports the dominant colour
(fullest 16-level bin, averaged), its share of the region, the mean colour,
the nearest CSS keyword within distance 30, and black or white text for the
dominant colour with the resulting contrast ratio.

--box x1,y1,x2,y2 crops the region first (pixel coordinates, x2/y2
exclusive).

Example:
    webcolor sample screenshot.png --box 0,0,280,800
"""

from PIL import Image

from webcolor.commands._util import output_format
from webcolor.core.contrast import wcag_levels
from webcolor.core.names import nearest_name
from webcolor.core.pixels import dominant_color, mean_color
from webcolor.core.types import Command, Report

command = Command(
    name='sample',
    help='Dominant and mean colour of an image region, plus a readable text colour.',
)


def _parse_box(value: str) -> tuple[int, int, int, int] | None:
    parts = value.split(',')
    if len(parts) != 4:
        return None
    try:
        x1, y1, x2, y2 = (int(p) for p in parts)
    except ValueError:
        return None
    if x2 <= x1 or y2 <= y1:
        return None
    return (x1, y1, x2, y2)


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('image', help='Path to PNG/JPG')
    parser.add_argument('--box', default=None, metavar='X1,Y1,X2,Y2', help='Region to sample')


@command.run
def run(report: Report, args, settings) -> None:
    try:
        image = Image.open(args.image)
        image.load()
    except (FileNotFoundError, OSError) as exc:
        report.error(f'cannot open image {args.image}: {exc}')
        return

    label = args.image
    if args.box is not None:
        box = _parse_box(args.box)
        if box is None:
            report.error(f'invalid --box {args.box!r}, expected x1,y1,x2,y2')
            return
        image = image.crop(box)
        label = f'{args.image} [{args.box}]'

    found = dominant_color(image)
    if found is None:
        report.error(f'no visible pixels in {label}')
        return
    dominant, pct = found
    mean = mean_color(image)
    text = dominant.contrasting_color()
    ratio = dominant.contrast_ratio(text)
    name, _dist = nearest_name((dominant.r, dominant.g, dominant.b), threshold=30)

    fmt = output_format(args, settings)
    report.add(
        label,
        {
            'dominant': dominant.to_string(fmt),
            'pct': pct,
            'mean': mean.to_string(fmt),
            'nearest': name,
            'text': text.to_string(fmt),
            'ratio': round(ratio, 2),
            **wcag_levels(ratio),
        },
    )
