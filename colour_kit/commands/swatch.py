"""Write the shade ramp as a PNG strip, one labelled square per shade.

Output: <out>/swatch_<rrggbb>.png. Cell size comes from COLOUR_KIT_SWATCH_SIZE
(default 96px). Labels are drawn in each cell's contrast colour.

Example:
    uv run colour-kit swatch '#2ed573' --out ./tmp
"""

import os

from colour_kit.commands.shades import ramp_options
from colour_kit.core.report import export_filename
from colour_kit.core.shades import generate_shades
from colour_kit.core.swatch import save_swatch
from colour_kit.core.types import Command, HexColour, Report

command = Command(
    name='swatch',
    help='Render the shade ramp to <out>/swatch_<hex>.png.',
    writes_files=True,
)


@command.run
def run(colour: HexColour, report: Report, args) -> None:
    count, step = ramp_options(args)
    settings = getattr(args, 'settings', None)
    cell = settings.swatch_size if settings else 96

    out_dir = getattr(args, 'out', None) or '.'
    os.makedirs(out_dir, exist_ok=True)
    path = os.path.join(out_dir, export_filename(colour, prefix='swatch', suffix='png'))

    ramp = generate_shades(colour, count=count, step=step)
    save_swatch(ramp, path, cell=cell)
    report.record_artefact(path)
    report.add('swatch', {'path': path, 'cells': len(ramp), 'cell_size': cell})
