"""Run every read-only command, combine into a single report.

Runs: info, shades.
Skips: suggest (same ramp as shades for a valid colour).
Skips: swatch, export (write files — run explicitly).

Example:
    uv run colour-kit all '#3742fa'
    uv run colour-kit all '#3742fa' --json
"""

from colour_kit.core.types import Command, HexColour, Report

command = Command(
    name='all',
    help='Run info and shades. Combine into a single report.',
)

# Commands never run automatically
SKIP = {'all', 'suggest'}


@command.run
def run(colour: HexColour, report: Report, args) -> None:
    from colour_kit.registry import all_commands

    for name, cmd in sorted(all_commands().items()):
        if name in SKIP or cmd.writes_files:
            continue
        cmd.execute(colour, report, args)
