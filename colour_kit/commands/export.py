"""Write the colour as a JSON record {hex, rgb, hsl}.

Output: <out>/color_<rrggbb>.json

Example:
    uv run colour-kit export '#ffb142' --out ./tmp
"""

import json
import os

from colour_kit.core.report import colour_payload, export_filename
from colour_kit.core.types import Command, HexColour, Report

command = Command(
    name='export',
    help='Write {hex, rgb, hsl} to <out>/color_<hex>.json.',
    writes_files=True,
)


@command.run
def run(colour: HexColour, report: Report, args) -> None:
    out_dir = getattr(args, 'out', None) or '.'
    os.makedirs(out_dir, exist_ok=True)
    path = os.path.join(out_dir, export_filename(colour))

    with open(path, 'w', encoding='utf-8') as f:
        json.dump(colour_payload(colour), f, indent=2)
        f.write('\n')
    report.record_artefact(path)
    report.add('export', {'path': path})
