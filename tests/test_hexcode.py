"""Tests for colour_kit.core.hexcode — normalization and API body extraction."""

import pytest
from colour_kit.core.hexcode import extract_hex, is_hex, normalize


class TestNormalize:
    def test_canonical_passthrough(self):
        assert normalize('#1e90ff') == '#1e90ff'

    def test_uppercase_lowered(self):
        assert normalize('#1E90FF') == '#1e90ff'

    def test_no_hash(self):
        assert normalize('ff4757') == '#ff4757'

    def test_shorthand_expanded(self):
        assert normalize('abc') == '#aabbcc'
        assert normalize('#ABC') == '#aabbcc'

    def test_whitespace_trimmed(self):
        assert normalize('  #2ed573 \n') == '#2ed573'

    @pytest.mark.parametrize('bad', ['xyz123', '#1234', '', '#', '##abc', 'abcd', '12345g', '#1234567', 'red'])
    def test_invalid_returns_none(self, bad):
        assert normalize(bad) is None

    def test_non_string_returns_none(self):
        assert normalize(None) is None
        assert normalize(0xFFFFFF) is None

    @pytest.mark.parametrize('value', ['abc', '#ABC', ' 1e90ff', '#ff4757', 'nope', '', '#1234'])
    def test_idempotent(self, value):
        once = normalize(value)
        assert normalize(once) == once

    def test_is_hex(self):
        assert is_hex('fff')
        assert not is_hex('ffff')


class TestExtractHex:
    def test_bare_string(self):
        assert extract_hex('#ABC') == '#aabbcc'

    def test_hex_field(self):
        assert extract_hex({'hex': '1E90FF', 'rgb': 'rgb(30, 144, 255)'}) == '#1e90ff'

    def test_value_field(self):
        assert extract_hex({'value': '#fff'}) == '#ffffff'

    def test_hex_field_wins_over_value(self):
        assert extract_hex({'value': '#000000', 'hex': '#ffffff'}) == '#ffffff'

    def test_first_hex_like_value(self):
        body = {'name': 'Emerald', 'code': 'not-a-colour', 'colour': ' #2ed573 '}
        assert extract_hex(body) == '#2ed573'

    def test_invalid_hex_field(self):
        assert extract_hex({'hex': 'nope'}) is None

    def test_hex_like_but_wrong_length(self):
        assert extract_hex({'a': 'abcd'}) is None

    def test_list_body(self):
        assert extract_hex(['Emerald', 3, '#2ED573', '#000000']) == '#2ed573'

    def test_list_body_without_colour(self):
        assert extract_hex(['Emerald', 'abcd']) is None

    def test_nothing_usable(self):
        assert extract_hex({'a': 'hello', 'b': 3}) is None
        assert extract_hex([1, 2, 3]) is None
        assert extract_hex(None) is None
