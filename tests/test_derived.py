"""Tests for colour_kit.core.derived — complement, contrast colour, CSS strings."""

import itertools

import pytest
from colour_kit.core.derived import (
    complementary,
    contrast_color,
    css_var,
    hsl_css,
    luminance,
    reference_url,
    rgb_css,
)
from colour_kit.core.types import HslColour, InvalidColourError, RgbColour


class TestComplementary:
    def test_scenario_colour(self):
        assert complementary('#ff4757') == '#00b8a8'

    def test_black_white(self):
        assert complementary('#000000') == '#ffffff'
        assert complementary('#ffffff') == '#000000'

    def test_shorthand_input(self):
        assert complementary('abc') == '#554433'

    def test_is_rgb_inversion_not_hue_rotation(self):
        # a hue rotation would leave a grey unchanged
        assert complementary('#404040') == '#bfbfbf'

    def test_involution(self):
        for r, g, b in itertools.product(range(0, 256, 15), repeat=3):
            h = f'#{r:02x}{g:02x}{b:02x}'
            assert complementary(complementary(h)) == h

    def test_invalid(self):
        with pytest.raises(InvalidColourError):
            complementary('nope')


class TestContrastColor:
    def test_white_background(self):
        assert contrast_color('#ffffff') == '#000000'

    def test_black_background(self):
        assert contrast_color('#000000') == '#ffffff'

    def test_mid_grey_is_below_threshold(self):
        assert luminance('#808080') == pytest.approx(128 / 255)
        assert contrast_color('#808080') == '#ffffff'

    def test_scenario_colour(self):
        assert luminance('#ff4757') == pytest.approx(0.5013, abs=1e-4)
        assert contrast_color('#ff4757') == '#ffffff'

    def test_yellow_gets_black(self):
        assert contrast_color('#ffff00') == '#000000'

    def test_blue_gets_white(self):
        assert contrast_color('#0000ff') == '#ffffff'

    def test_invalid(self):
        with pytest.raises(InvalidColourError):
            contrast_color('')


class TestCssStrings:
    def test_css_var(self):
        assert css_var('ABC') == '--color: #aabbcc;'
        assert css_var('#1e90ff', name='brand') == '--brand: #1e90ff;'

    def test_rgb_css(self):
        assert rgb_css(RgbColour(255, 71, 87)) == 'rgb(255, 71, 87)'

    def test_hsl_css(self):
        assert hsl_css(HslColour(355, 100, 64)) == 'hsl(355, 100%, 64%)'

    def test_reference_url(self):
        assert reference_url('#1E90FF') == 'https://www.color-hex.com/color/1e90ff'

    def test_invalid(self):
        with pytest.raises(InvalidColourError):
            css_var('nope')
        with pytest.raises(InvalidColourError):
            reference_url('nope')
