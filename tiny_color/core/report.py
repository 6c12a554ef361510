"""Report builder: text and JSON output for labelled colours."""

import json
from typing import Any

from tiny_color.core.types import Color


def format_text(entries: list[tuple[str, Color]]) -> str:
    """Format as aligned 'label  #RRGGBB  rgb(r, g, b)' lines."""
    if not entries:
        return ''
    width = max(len(label) for label, _color in entries)
    lines = []
    for label, color in entries:
        lines.append(f'{label:<{width}}  {color.to_hex()}  rgb({color.r}, {color.g}, {color.b})')
    return '\n'.join(lines)


def format_json(entries: list[tuple[str, Color]]) -> str:
    """Format as a JSON list of {label, hex, r, g, b} objects."""
    obj: list[dict[str, Any]] = []
    for label, color in entries:
        obj.append({'label': label, 'hex': color.to_hex(), 'r': color.r, 'g': color.g, 'b': color.b})
    return json.dumps(obj, indent=2)
