"""Shared types for colour-kit: RgbColour, HslColour, ShadeEntry, Command, Report."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, NewType

# Canonical '#rrggbb', lowercase. Only hexcode.normalize() should mint these.
HexColour = NewType('HexColour', str)


class InvalidColourError(ValueError):
    """Raised when an operation that needs a colour is handed something that does not normalize."""


def _check_channel(name: str, value: Any, lo: int, hi: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f'{name} must be an int, got {value!r}')
    if not lo <= value <= hi:
        raise ValueError(f'{name} must be in [{lo}, {hi}], got {value}')


@dataclass(frozen=True)
class RgbColour:
    """An sRGB colour with 8-bit integer channels."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ('r', 'g', 'b'):
            _check_channel(name, getattr(self, name), 0, 255)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def as_dict(self) -> dict[str, int]:
        return {'r': self.r, 'g': self.g, 'b': self.b}


@dataclass(frozen=True)
class HslColour:
    """Hue in whole degrees [0, 360), saturation and lightness in whole percent."""

    h: int
    s: int
    l: int  # noqa: E741

    def __post_init__(self) -> None:
        _check_channel('h', self.h, 0, 359)
        _check_channel('s', self.s, 0, 100)
        _check_channel('l', self.l, 0, 100)

    def as_dict(self) -> dict[str, int]:
        return {'h': self.h, 's': self.s, 'l': self.l}


@dataclass(frozen=True)
class ShadeEntry:
    """One tonal variant of a base colour."""

    hex: HexColour
    hsl: HslColour

    def as_dict(self) -> dict[str, Any]:
        return {'hex': self.hex, 'hsl': self.hsl.as_dict()}


# Darkest first, unique by hex, base colour included exactly once.
ShadeRamp = tuple[ShadeEntry, ...]


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='shades', help='Shade ramp for a colour')

        @command.run
        def run(colour, report, args):
            ...
    """

    def __init__(self, name: str, help: str = '', writes_files: bool = False):
        self.name = name
        self.help = help
        self.writes_files = writes_files
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, colour: HexColour, report: Report, args: Any) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(colour, report, args)


@dataclass
class Report:
    """Accumulates command results for one colour, for text/JSON output."""

    query: str = ''
    colour: str = ''
    source: str = 'input'  # input | default | json
    sections: dict[str, dict[str, Any]] = field(default_factory=dict)
    artefacts: list[str] = field(default_factory=list)

    def add(self, section: str, data: dict[str, Any]) -> None:
        """Add (or replace) the results of one command."""
        self.sections[section] = data

    def record_artefact(self, path: str) -> None:
        self.artefacts.append(path)
