"""Hex, RGB and HSL forms of a colour plus its complement and contrast colour.

The complement is the channel-wise RGB inversion (#ff4757 -> #00b8a8), not a
180 degree hue rotation. The contrast colour is black or white by a weighted
luma threshold of 0.55.

Example:
    uv run colour-kit info '#ff4757'
    uv run colour-kit info abc --json
"""

from colour_kit.core.convert import require_rgb, rgb_to_hsl
from colour_kit.core.derived import (
    complementary,
    contrast_color,
    css_var,
    hsl_css,
    luminance,
    reference_url,
    rgb_css,
)
from colour_kit.core.types import Command, HexColour, Report

command = Command(
    name='info',
    help='Hex/RGB/HSL forms, complement and contrast colour.',
)


@command.run
def run(colour: HexColour, report: Report, args) -> None:
    rgb = require_rgb(colour)
    hsl = rgb_to_hsl(rgb)
    report.add(
        'info',
        {
            'hex': colour,
            'rgb': rgb.as_dict(),
            'hsl': hsl.as_dict(),
            'css_var': css_var(colour),
            'rgb_css': rgb_css(rgb),
            'hsl_css': hsl_css(hsl),
            'complementary': complementary(colour),
            'contrast': contrast_color(colour),
            'luminance': round(luminance(colour), 3),
            'reference_url': reference_url(colour),
        },
    )
