"""RGB / HSL / HEX conversions.

All conversions are pure. Rounding is half-up (floor(x + 0.5)) rather than
Python's round-half-to-even, so that e.g. 50% grey lands on 128 and not 127.
"""

import math

from colour_kit.core.hexcode import normalize
from colour_kit.core.types import HexColour, HslColour, InvalidColourError, RgbColour


def _round(x: float) -> int:
    return math.floor(x + 0.5)


def hex_to_rgb(hex_colour: str) -> RgbColour | None:
    """Parse a hex colour (any form normalize() accepts). None if invalid."""
    h = normalize(hex_colour)
    if h is None:
        return None
    return RgbColour(int(h[1:3], 16), int(h[3:5], 16), int(h[5:7], 16))


def require_rgb(hex_colour: str) -> RgbColour:
    """Like hex_to_rgb(), for callers that were promised a valid colour."""
    rgb = hex_to_rgb(hex_colour)
    if rgb is None:
        raise InvalidColourError(f'Not a hex colour: {hex_colour!r}')
    return rgb


def rgb_to_hex(rgb: RgbColour) -> HexColour:
    return HexColour(f'#{rgb.r:02x}{rgb.g:02x}{rgb.b:02x}')


def rgb_to_hsl(rgb: RgbColour) -> HslColour:
    r, g, b = rgb.r / 255, rgb.g / 255, rgb.b / 255
    hi, lo = max(r, g, b), min(r, g, b)
    light = (hi + lo) / 2

    if hi == lo:
        return HslColour(0, 0, _round(light * 100))

    d = hi - lo
    sat = d / (2 - hi - lo) if light > 0.5 else d / (hi + lo)
    if hi == r:
        hue = (g - b) / d + (6 if g < b else 0)
    elif hi == g:
        hue = (b - r) / d + 2
    else:
        hue = (r - g) / d + 4
    hue /= 6

    # 359.5 and up rounds to 360, which is 0
    return HslColour(_round(hue * 360) % 360, _round(sat * 100), _round(light * 100))


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t >= 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def _to_byte(x: float) -> int:
    return min(255, max(0, _round(x * 255)))


def hsl_to_rgb(hsl: HslColour) -> RgbColour:
    h, s, light = hsl.h / 360, hsl.s / 100, hsl.l / 100
    if s == 0:
        v = _to_byte(light)
        return RgbColour(v, v, v)

    q = light * (1 + s) if light < 0.5 else light + s - light * s
    p = 2 * light - q
    return RgbColour(
        _to_byte(_hue_to_channel(p, q, h + 1 / 3)),
        _to_byte(_hue_to_channel(p, q, h)),
        _to_byte(_hue_to_channel(p, q, h - 1 / 3)),
    )


def hsl_to_hex(hsl: HslColour) -> HexColour:
    return rgb_to_hex(hsl_to_rgb(hsl))
