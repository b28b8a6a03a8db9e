"""Search-box suggestions for a free-text query.

If the query is a hex colour, suggests its shade ramp. Otherwise suggests the
preset colours (#ff4757 #1e90ff #2ed573 #ffb142 #3742fa #ff6b81). Unlike the
other commands, the raw query is used here, not the fallback colour.

Example:
    uv run colour-kit suggest 1e9
    uv run colour-kit suggest 'sky blue'
"""

from colour_kit.commands.shades import ramp_options
from colour_kit.core.hexcode import is_hex
from colour_kit.core.shades import suggest
from colour_kit.core.types import Command, HexColour, Report

command = Command(
    name='suggest',
    help='Shade ramp for a hex query, preset colours otherwise.',
)


@command.run
def run(colour: HexColour, report: Report, args) -> None:
    count, step = ramp_options(args)
    # a colour pulled from a JSON body is the query, not the file path
    query = report.colour if report.source == 'json' else report.query
    presets = not is_hex(query)
    entries = suggest(query, count=count, step=step)
    report.add('suggest', {'query': query, 'presets': presets, 'entries': [e.as_dict() for e in entries]})
