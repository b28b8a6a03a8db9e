"""Shade ramp: darker and lighter variants of a colour at constant hue and saturation.

Produces count // 2 darker steps, the colour itself and count // 2 lighter
steps, `step` lightness points apart (defaults 6 and 12, see
COLOUR_KIT_SHADE_COUNT / COLOUR_KIT_SHADE_STEP). Steps that clamp to the same
colour near black or white are merged, so very light or very dark colours
yield fewer entries. Output is sorted darkest first.

Example:
    uv run colour-kit shades '#1e90ff'
    uv run colour-kit shades '#f0f0f0' --count 8 --step 5
"""

from colour_kit.core.shades import generate_shades
from colour_kit.core.types import Command, HexColour, Report

command = Command(
    name='shades',
    help='Deterministic darkest-to-lightest shade ramp, duplicates removed.',
)


def ramp_options(args) -> tuple[int, int]:
    """count/step from the command line, falling back to settings."""
    settings = getattr(args, 'settings', None)
    count = getattr(args, 'count', None)
    step = getattr(args, 'step', None)
    if count is None:
        count = settings.shade_count if settings else 6
    if step is None:
        step = settings.shade_step if settings else 12
    return count, step


@command.run
def run(colour: HexColour, report: Report, args) -> None:
    count, step = ramp_options(args)
    ramp = generate_shades(colour, count=count, step=step)
    report.add(
        'shades',
        {
            'count': count,
            'step': step,
            'entries': [e.as_dict() for e in ramp],
        },
    )
