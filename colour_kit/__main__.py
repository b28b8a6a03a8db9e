"""colour-kit — Hex/RGB/HSL conversion, shade ramps and derived colours.

Usage: uv run colour-kit <command> <colour> [options]

Commands are auto-discovered from colour_kit/commands/.
Each command module's docstring is its documentation.
Run `colour-kit help <command>` for full module docs.

Colour input:
  Any of 'abc', '#ABC', 'aabbcc', '#aabbcc'. Input that is not a hex colour
  falls back to COLOUR_KIT_DEFAULT (#1e90ff) with a warning on stderr.
  --from-json takes the colour from a saved random-colour API response.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, colour-kit looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import json
import os
import sys

from colour_kit import registry
from colour_kit.core.env import Settings, load_env
from colour_kit.core.hexcode import extract_hex, normalize
from colour_kit.core.report import format_json, format_text
from colour_kit.core.types import HexColour, Report


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'colour_kit.commands.{name}')


def _short_help(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        "  colour-kit info '#ff4757'\n"
        '  colour-kit shades 1e90ff --count 8 --step 10\n'
        '  colour-kit all abc --json\n'
        "  colour-kit suggest 'sky blue'\n"
        "  colour-kit swatch '#2ed573' --out ./tmp\n"
        '  colour-kit export --from-json response.json --out ./tmp\n'
        '  colour-kit help shades\n'
        '\n'
        'Settings (set in .env or environment):\n'
        '  COLOUR_KIT_DEFAULT      fallback colour (#1e90ff)\n'
        '  COLOUR_KIT_SHADE_COUNT  shades around the base colour (6)\n'
        '  COLOUR_KIT_SHADE_STEP   lightness step in percent (12)\n'
        '  COLOUR_KIT_SWATCH_SIZE  swatch cell size in px (96)\n'
    )
    parser = argparse.ArgumentParser(
        prog='colour-kit',
        description='Hex/RGB/HSL conversion, shade ramps and derived colours.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    # Auto-register each command as a subcommand using module docstring
    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name, cmd.help))
        p.add_argument('colour', nargs='?', default='', help="Hex colour, e.g. '#ff4757', 'abc'")
        p.add_argument('-o', '--out', default='.', help='Directory for written files (default: .)')
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument('-n', '--count', type=int, default=None, metavar='N', help='Number of shades (default: 6)')
        p.add_argument(
            '-s', '--step', type=int, default=None, metavar='N', help='Lightness step in percent (default: 12)'
        )
        p.add_argument(
            '-f',
            '--from-json',
            metavar='FILE',
            default=None,
            help='Take the colour from a saved random-colour API response body',
        )

    # `help` subcommand prints the full module docstring for a command
    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<10} {_short_help(name, cmd.help)}')
        print('\nRun: colour-kit help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_command_module(topic).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def _colour_from_json(path: str) -> HexColour:
    if not os.path.isfile(path):
        print(f'Error: file not found: {path}', file=sys.stderr)
        sys.exit(1)
    try:
        with open(path, encoding='utf-8') as f:
            body = json.load(f)
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        print(f'Error: {path} is not valid UTF-8 JSON: {e}', file=sys.stderr)
        sys.exit(1)

    hex_colour = extract_hex(body)
    if hex_colour is None:
        print(f'Error: no colour found in {path}', file=sys.stderr)
        sys.exit(1)
    return hex_colour


def _resolve_colour(args: argparse.Namespace, settings: Settings) -> Report:
    """Build the report skeleton: which colour the commands will work on, and why."""
    if args.from_json:
        return Report(query=args.from_json, colour=_colour_from_json(args.from_json), source='json')

    query = args.colour or ''
    hex_colour = normalize(query)
    if hex_colour is None:
        # suggest shows presets for a non-colour query, no need to warn
        if args.command != 'suggest':
            print(f'colour-kit: {query!r} is not a hex colour, using {settings.default_colour}', file=sys.stderr)
        return Report(query=query, colour=settings.default_colour, source='default')
    return Report(query=query, colour=hex_colour)


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Load .env before anything else; OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    if env_path:
        print(f'colour-kit: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(getattr(args, 'topic', None))
        return

    settings = Settings.from_env()
    args.settings = settings

    if args.count is not None and args.count < 0:
        print('Error: --count must be >= 0', file=sys.stderr)
        sys.exit(1)
    if args.step is not None and args.step < 1:
        print('Error: --step must be >= 1', file=sys.stderr)
        sys.exit(1)

    report = _resolve_colour(args, settings)

    cmd = registry.get(args.command)
    cmd.execute(HexColour(report.colour), report, args)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))


if __name__ == '__main__':
    main()
