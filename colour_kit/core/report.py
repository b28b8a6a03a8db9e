"""Report builder — text and JSON output for colour-kit results."""

import json
from typing import Any

from colour_kit.core.convert import require_rgb, rgb_to_hex, rgb_to_hsl
from colour_kit.core.types import Report


def _ramp_line(entries: list[dict[str, Any]]) -> str:
    return '  '.join(f'{e["hex"]} (l={e["hsl"]["l"]})' for e in entries)


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    header = f'colour-kit: {report.colour}'
    if report.source != 'input' or report.query != report.colour:
        header += f' (from {report.source} {report.query!r})'
    lines = [header, '']

    for section, data in report.sections.items():
        lines.append(f'── {section}')
        if section == 'info':
            lines.append(f'  hex: {data["hex"]}   {data["css_var"]}')
            lines.append(f'  rgb: {data["rgb_css"]}')
            lines.append(f'  hsl: {data["hsl_css"]}')
            lines.append(f'  complement: {data["complementary"]}')
            lines.append(f'  contrast: {data["contrast"]} (luminance {data["luminance"]})')
            lines.append(f'  ref: {data["reference_url"]}')
        elif section in ('shades', 'suggest') and 'entries' in data:
            if data.get('presets'):
                lines.append('  not a colour, showing presets')
            lines.append(f'  {_ramp_line(data["entries"])}')
        elif 'path' in data:
            lines.append(f'  wrote {data["path"]}')
        else:
            # Generic fallback
            for k, v in data.items():
                lines.append(f'  {section}.{k}: {v}')
        lines.append('')

    return '\n'.join(lines).rstrip('\n')


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'query': report.query,
        'colour': report.colour,
        'source': report.source,
        'sections': report.sections,
    }
    if report.artefacts:
        obj['artefacts'] = report.artefacts
    return json.dumps(obj, indent=2)


def colour_payload(hex_colour: str) -> dict[str, Any]:
    """The {hex, rgb, hsl} record written by the export command."""
    rgb = require_rgb(hex_colour)
    hsl = rgb_to_hsl(rgb)
    return {'hex': rgb_to_hex(rgb), 'rgb': rgb.as_dict(), 'hsl': hsl.as_dict()}


def export_filename(hex_colour: str, prefix: str = 'color', suffix: str = 'json') -> str:
    """color_1e90ff.json style name for a colour artefact."""
    return f'{prefix}_{hex_colour.lstrip("#")}.{suffix}'
