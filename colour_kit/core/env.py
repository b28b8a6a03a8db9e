"""Settings and .env loading for colour-kit.

Load order (first wins):
  1. Existing OS environment variables — never overwrite.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognized variables:
  COLOUR_KIT_DEFAULT       fallback colour for unusable input (#1e90ff)
  COLOUR_KIT_SHADE_COUNT   shades around the base colour (6)
  COLOUR_KIT_SHADE_STEP    lightness step between shades, in percent (12)
  COLOUR_KIT_SWATCH_SIZE   swatch cell edge in pixels (96)
"""

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from colour_kit.core.hexcode import normalize
from colour_kit.core.shades import DEFAULT_COUNT, DEFAULT_STEP
from colour_kit.core.types import HexColour

ENV_PREFIX = 'COLOUR_KIT_'


def find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git can be a dir (normal clone) or a file (worktree)
        if (current / '.git').exists():
            return None
        if current.parent == current:
            return None
        current = current.parent


def parse_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value lines. Quotes around values are dropped, # lines skipped."""
    result: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        if key.startswith('export '):
            key = key[len('export ') :].strip()
        if key:
            result[key] = value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path: Path | None = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def _warn(msg: str) -> None:
    print(f'colour-kit: {msg}', file=sys.stderr)


def _int_setting(name: str, default: int, minimum: int) -> int:
    raw = os.environ.get(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        _warn(f'ignoring {ENV_PREFIX}{name}={raw!r}, not an integer')
        return default
    if value < minimum:
        _warn(f'ignoring {ENV_PREFIX}{name}={value}, must be >= {minimum}')
        return default
    return value


@dataclass(frozen=True)
class Settings:
    default_colour: HexColour = HexColour('#1e90ff')
    shade_count: int = DEFAULT_COUNT
    shade_step: int = DEFAULT_STEP
    swatch_size: int = 96

    @classmethod
    def from_env(cls) -> 'Settings':
        """Read settings from os.environ (call load_env() first to pick up .env)."""
        defaults = cls()
        default_colour = defaults.default_colour
        raw = os.environ.get(ENV_PREFIX + 'DEFAULT')
        if raw:
            hex_colour = normalize(raw)
            if hex_colour:
                default_colour = hex_colour
            else:
                _warn(f'ignoring {ENV_PREFIX}DEFAULT={raw!r}, not a hex colour')
        return cls(
            default_colour=default_colour,
            shade_count=_int_setting('SHADE_COUNT', defaults.shade_count, 0),
            shade_step=_int_setting('SHADE_STEP', defaults.shade_step, 1),
            swatch_size=_int_setting('SWATCH_SIZE', defaults.swatch_size, 8),
        )
