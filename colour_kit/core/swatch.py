"""Render a shade ramp as a horizontal strip of square swatches.

Each cell is filled with its entry's colour and labelled with its hex code in
that colour's contrast colour (black on light cells, white on dark ones).
"""

from collections.abc import Sequence

import numpy as np
from PIL import Image, ImageDraw

from colour_kit.core.convert import require_rgb
from colour_kit.core.derived import contrast_color
from colour_kit.core.types import ShadeEntry


def render_swatch(entries: Sequence[ShadeEntry], cell: int = 96, labels: bool = True) -> Image.Image:
    """Return an RGB image one cell high and len(entries) cells wide."""
    if not entries:
        raise ValueError('cannot render an empty swatch')

    arr = np.zeros((cell, cell * len(entries), 3), dtype=np.uint8)
    for i, entry in enumerate(entries):
        rgb = require_rgb(entry.hex)
        arr[:, i * cell : (i + 1) * cell] = rgb.as_tuple()

    image = Image.fromarray(arr)
    if labels:
        draw = ImageDraw.Draw(image)
        for i, entry in enumerate(entries):
            fg = require_rgb(contrast_color(entry.hex))
            draw.text((i * cell + 4, cell - 14), entry.hex, fill=fg.as_tuple())
    return image


def save_swatch(entries: Sequence[ShadeEntry], path: str, cell: int = 96, labels: bool = True) -> str:
    render_swatch(entries, cell=cell, labels=labels).save(path, format='PNG')
    return path
