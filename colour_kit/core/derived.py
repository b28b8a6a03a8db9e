"""Facts derived from a single colour: complement, legible foreground, CSS strings."""

from colour_kit.core.convert import require_rgb, rgb_to_hex
from colour_kit.core.hexcode import normalize
from colour_kit.core.types import HexColour, HslColour, InvalidColourError, RgbColour

BLACK = HexColour('#000000')
WHITE = HexColour('#ffffff')

# Luma weights and cutoff are tuning constants, not WCAG relative luminance
LUMA_WEIGHTS = (0.299, 0.587, 0.114)
CONTRAST_THRESHOLD = 0.55


def complementary(hex_colour: str) -> HexColour:
    """Channel-wise RGB inversion. Note: this is not a 180 degree hue rotation."""
    rgb = require_rgb(hex_colour)
    return rgb_to_hex(RgbColour(255 - rgb.r, 255 - rgb.g, 255 - rgb.b))


def luminance(hex_colour: str) -> float:
    """Weighted luma in [0, 1]."""
    rgb = require_rgb(hex_colour)
    wr, wg, wb = LUMA_WEIGHTS
    return (wr * rgb.r + wg * rgb.g + wb * rgb.b) / 255


def contrast_color(hex_colour: str) -> HexColour:
    """Black text on light backgrounds, white text on dark ones."""
    return BLACK if luminance(hex_colour) > CONTRAST_THRESHOLD else WHITE


def css_var(hex_colour: str, name: str = 'color') -> str:
    h = normalize(hex_colour)
    if h is None:
        raise InvalidColourError(f'Not a hex colour: {hex_colour!r}')
    return f'--{name}: {h};'


def rgb_css(rgb: RgbColour) -> str:
    return f'rgb({rgb.r}, {rgb.g}, {rgb.b})'


def hsl_css(hsl: HslColour) -> str:
    return f'hsl({hsl.h}, {hsl.s}%, {hsl.l}%)'


def reference_url(hex_colour: str) -> str:
    """color-hex.com page for the colour."""
    h = normalize(hex_colour)
    if h is None:
        raise InvalidColourError(f'Not a hex colour: {hex_colour!r}')
    return f'https://www.color-hex.com/color/{h[1:]}'
