"""Shade ramps: tonal variants of a base colour, darkest first.

A ramp holds count // 2 darker steps, the base colour and count // 2 lighter
steps, each step moving lightness by `step` percentage points at constant hue
and saturation. Steps that clamp to the same colour near black or white
collapse into one entry.
"""

from colour_kit.core.convert import hsl_to_hex, require_rgb, rgb_to_hex, rgb_to_hsl
from colour_kit.core.types import HexColour, HslColour, InvalidColourError, ShadeEntry, ShadeRamp

DEFAULT_COUNT = 6
DEFAULT_STEP = 12

# Offered when a search query is not a colour
PRESETS: tuple[HexColour, ...] = (
    HexColour('#ff4757'),
    HexColour('#1e90ff'),
    HexColour('#2ed573'),
    HexColour('#ffb142'),
    HexColour('#3742fa'),
    HexColour('#ff6b81'),
)


def _entry(hex_colour: HexColour) -> ShadeEntry:
    return ShadeEntry(hex=hex_colour, hsl=rgb_to_hsl(require_rgb(hex_colour)))


def generate_shades(hex_colour: str, count: int = DEFAULT_COUNT, step: int = DEFAULT_STEP) -> ShadeRamp:
    """Build the shade ramp for a colour.

    Raises InvalidColourError if hex_colour does not normalize, ValueError for
    a negative count or a step below 1.
    """
    rgb = require_rgb(hex_colour)
    if count < 0:
        raise ValueError(f'count must be >= 0, got {count}')
    if step < 1:
        raise ValueError(f'step must be >= 1, got {step}')

    base = rgb_to_hsl(rgb)
    half = count // 2

    targets: list[HexColour] = []
    for i in range(half, 0, -1):
        targets.append(hsl_to_hex(HslColour(base.h, base.s, max(0, base.l - step * i))))
    targets.append(rgb_to_hex(rgb))
    for i in range(1, half + 1):
        targets.append(hsl_to_hex(HslColour(base.h, base.s, min(100, base.l + step * i))))

    seen: set[str] = set()
    entries = []
    for hex_value in targets:
        if hex_value in seen:
            continue
        seen.add(hex_value)
        entries.append(_entry(hex_value))

    # sorted() is stable: equal lightness keeps dark-to-light generation order
    return tuple(sorted(entries, key=lambda e: e.hsl.l))


def suggest(query: str, count: int = DEFAULT_COUNT, step: int = DEFAULT_STEP) -> tuple[ShadeEntry, ...]:
    """Swatches for a search box: the query's shade ramp, or the presets if it is not a colour."""
    try:
        return generate_shades(query, count=count, step=step)
    except InvalidColourError:
        return tuple(_entry(h) for h in PRESETS)
