"""Render colours as a PNG strip of labelled swatches.

Each swatch is filled with its colour (alpha kept, so translucent colours
show the PNG background) and labelled with its hex value in the colour's
contrasting text colour: white on dark swatches, black on light ones.

Example:
    webcolor swatch ./palette.png '#1e293b' tomato 'rgba(0,128,0,0.5)'
"""

import os

from PIL import Image, ImageDraw

from webcolor.commands._util import resolve
from webcolor.core.parser import round_half_up
from webcolor.core.types import Command, Report

command = Command(name='swatch', help='Write a PNG strip of labelled colour swatches.')

SWATCH_WIDTH = 160
SWATCH_HEIGHT = 80


def _rgba(color) -> tuple[int, int, int, int]:
    channels = (color.r, color.g, color.b, color.a * 255)
    return tuple(min(255, max(0, round_half_up(c))) for c in channels)


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('output', help='PNG file to write')
    parser.add_argument('colors', nargs='+', help='Colours to render')


@command.run
def run(report: Report, args, settings) -> None:
    colors = [(value, resolve(report, value)) for value in args.colors]
    colors = [(value, c) for value, c in colors if c is not None]
    if not colors:
        return

    strip = Image.new('RGBA', (SWATCH_WIDTH * len(colors), SWATCH_HEIGHT), (0, 0, 0, 0))
    draw = ImageDraw.Draw(strip)
    for i, (value, color) in enumerate(colors):
        x = i * SWATCH_WIDTH
        draw.rectangle((x, 0, x + SWATCH_WIDTH - 1, SWATCH_HEIGHT - 1), fill=_rgba(color))
        label_color = color.contrasting_color()
        draw.text((x + 8, 8), color.to_string('hex'), fill=_rgba(label_color))
        report.add(value, {'x': x, 'fill': color.to_string('hex'), 'text': label_color.to_string('hex')})

    parent = os.path.dirname(args.output)
    if parent:
        os.makedirs(parent, exist_ok=True)
    strip.save(args.output)
    report.add('_output', {'file': args.output, 'width': strip.width, 'height': strip.height})
