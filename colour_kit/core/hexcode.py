"""Hex colour validation and canonicalization.

normalize() is the gate every free-text colour goes through: it returns a
canonical '#rrggbb' or None, and never raises.
"""

import re
from collections.abc import Mapping
from typing import Any

from colour_kit.core.types import HexColour

_HEX6 = re.compile(r'[0-9a-fA-F]{6}')
_HEX3 = re.compile(r'[0-9a-fA-F]{3}')
# What a random-colour API might hand back in an arbitrary field
_HEX_LIKE = re.compile(r'#?[0-9a-fA-F]{3,6}')


def normalize(value: Any) -> HexColour | None:
    """Canonicalize 'abc', '#ABC', ' aabbcc ' etc. to '#aabbcc'. None if not a hex colour."""
    if not isinstance(value, str):
        return None
    s = value.strip()
    if s.startswith('#'):
        s = s[1:]
    if _HEX6.fullmatch(s):
        return HexColour('#' + s.lower())
    if _HEX3.fullmatch(s):
        return HexColour('#' + ''.join(ch * 2 for ch in s).lower())
    return None


def is_hex(value: Any) -> bool:
    return normalize(value) is not None


def extract_hex(payload: Any) -> HexColour | None:
    """Pull a colour out of a random-colour API response body.

    Accepts a bare string, or a mapping with a 'hex' or 'value' field.
    Failing those, the first string value (or list item) that looks like a hex
    colour wins.
    """
    if isinstance(payload, str):
        return normalize(payload)
    if isinstance(payload, Mapping):
        for key in ('hex', 'value'):
            if payload.get(key):
                return normalize(payload[key])
        candidates = list(payload.values())
    elif isinstance(payload, list):
        candidates = payload
    else:
        return None

    for v in candidates:
        if isinstance(v, str) and _HEX_LIKE.fullmatch(v.strip()):
            hex_colour = normalize(v)
            if hex_colour:
                return hex_colour
    return None
