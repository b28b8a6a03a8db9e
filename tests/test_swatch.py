"""Tests for colour_kit.core.swatch — PNG rendering of shade ramps."""

from pathlib import Path

import pytest
from colour_kit.core.shades import generate_shades
from colour_kit.core.swatch import render_swatch, save_swatch
from colour_kit.core.types import HslColour, InvalidColourError, ShadeEntry
from PIL import Image


class TestRenderSwatch:
    def test_dimensions(self):
        ramp = generate_shades('#000000')
        img = render_swatch(ramp, cell=10, labels=False)
        assert img.size == (40, 10)
        assert img.mode == 'RGB'

    def test_cells_filled_in_order(self):
        ramp = generate_shades('#000000')
        img = render_swatch(ramp, cell=10, labels=False)
        assert img.getpixel((5, 5)) == (0, 0, 0)
        assert img.getpixel((15, 5)) == (31, 31, 31)
        assert img.getpixel((35, 5)) == (92, 92, 92)

    def test_labels_keep_top_of_cell(self):
        ramp = generate_shades('#fafafa')
        img = render_swatch(ramp, cell=64)
        assert img.size == (64 * len(ramp), 64)
        # labels are drawn along the bottom edge only
        assert img.getpixel((1, 1)) == (158, 158, 158)

    def test_empty_ramp(self):
        with pytest.raises(ValueError):
            render_swatch(())

    def test_entry_with_bad_hex(self):
        entries = (ShadeEntry(hex='not-hex', hsl=HslColour(0, 0, 50)),)
        with pytest.raises(InvalidColourError):
            render_swatch(entries, cell=8)


class TestSaveSwatch:
    def test_writes_png(self, tmp_path: Path) -> None:
        path = tmp_path / 'swatch.png'
        save_swatch(generate_shades('#2ed573'), str(path), cell=16)
        img = Image.open(path)
        assert img.format == 'PNG'
        assert img.height == 16
