"""Report builder: text and JSON output for scan results and presentation lists."""

import json
import os
from typing import Any

from shader_swatch.core.types import CanonicalColour, DocumentColour, PresentationCandidate


def line_col(text: str, offset: int) -> tuple[int, int]:
    """1-based (line, column) of a character offset."""
    line = text.count('\n', 0, offset) + 1
    col = offset - (text.rfind('\n', 0, offset) + 1) + 1
    return line, col


def _colour_dict(colour: CanonicalColour) -> dict[str, float]:
    return {
        'red': round(colour.red, 4),
        'green': round(colour.green, 4),
        'blue': round(colour.blue, 4),
        'alpha': round(colour.alpha, 4),
    }


def format_text(colours: list[DocumentColour], text: str, source_path: str | None = None) -> str:
    """Format scan results as human-readable text, one swatch per line."""
    name = os.path.basename(source_path) if source_path else '<text>'
    lines = [f'shader-swatch: {name} \u2014 {len(colours)} colour(s)', '']
    for dc in colours:
        line, col = line_col(text, dc.start)
        literal = text[dc.start : dc.start + dc.length]
        c = dc.colour
        rgba = f'{c.red:.3f} {c.green:.3f} {c.blue:.3f} {c.alpha:.3f}'
        lines.append(f'  {line}:{col:<5} {dc.grammar.value:<16} {literal:<32} rgba {rgba}')
    return '\n'.join(lines)


def format_json(colours: list[DocumentColour], text: str, source_path: str | None = None) -> str:
    """Format scan results as JSON."""
    obj: dict[str, Any] = {}
    if source_path:
        obj['source'] = source_path
    obj['colours'] = []
    for dc in colours:
        line, col = line_col(text, dc.start)
        obj['colours'].append(
            {
                'start': dc.start,
                'length': dc.length,
                'line': line,
                'column': col,
                'grammar': dc.grammar.value,
                'text': text[dc.start : dc.start + dc.length],
                'colour': _colour_dict(dc.colour),
            }
        )
    obj['summary'] = {'total': len(colours)}
    return json.dumps(obj, indent=2)


def format_presentations_text(colour: CanonicalColour, candidates: list[PresentationCandidate]) -> str:
    c = colour
    lines = [f'rgba {c.red:.3f} {c.green:.3f} {c.blue:.3f} {c.alpha:.3f}', '']
    for i, cand in enumerate(candidates):
        mark = '*' if i == 0 else ' '
        lines.append(f' {mark} {cand.text:<34} {cand.grammar.value}')
    return '\n'.join(lines)


def format_presentations_json(colour: CanonicalColour, candidates: list[PresentationCandidate]) -> str:
    obj = {
        'colour': _colour_dict(colour),
        'candidates': [{'text': c.text, 'grammar': c.grammar.value, 'alpha': c.has_alpha} for c in candidates],
    }
    return json.dumps(obj, indent=2)
