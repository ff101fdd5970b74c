"""CSS-style rgb(r, g, b) with integer channels 0..255.

Channels above 255 do not match. Whitespace is allowed around the parens
and commas. Decodes channel / 255 with alpha 1.0; encodes channels
rounded to the nearest integer, e.g. rgb(255, 128, 0).

Example:
    shader-swatch present 'rgb(255, 153, 0)'
"""

import re

from shader_swatch.core.colour import rgb_bytes
from shader_swatch.core.errors import MalformedOccurrence
from shader_swatch.core.types import CanonicalColour, ColourSyntax, Grammar, PresentationCandidate

# 0..255 with optional leading zeros
BYTE = r'(25[0-5]|2[0-4]\d|[01]?\d?\d)'
_SEP = r'\s*,\s*'

syntax = ColourSyntax(
    name='rgb',
    order=2,
    pattern=rf'(?<!\w)rgb\s*\(\s*{BYTE}{_SEP}{BYTE}{_SEP}{BYTE}\s*\)',
    grammars=(Grammar.FUNCTIONAL_RGB,),
    help='rgb(r, g, b) with integer channels 0..255.',
    flags=re.ASCII,
)


def parse_channels(occurrence, fields) -> list[float]:
    """int / 255 for each field; anything the scanner could not produce is malformed."""
    try:
        values = [int(f, 10) for f in fields]
    except ValueError as e:
        raise MalformedOccurrence(f'non-integer channel in {fields}', occurrence) from e
    if any(not 0 <= v <= 255 for v in values):
        raise MalformedOccurrence(f'channel outside 0..255 in {fields}', occurrence)
    return [v / 255 for v in values]


@syntax.classify
def classify(match):
    return Grammar.FUNCTIONAL_RGB, match.groups()


@syntax.decoder
def decode(occurrence, policy):
    if occurrence.arity != 3:
        raise MalformedOccurrence(f'rgb() takes 3 channels, got {occurrence.arity}', occurrence)
    red, green, blue = parse_channels(occurrence, occurrence.raw_fields)
    return CanonicalColour(red, green, blue, 1.0)


@syntax.encoder
def encode(colour, alpha_wanted):
    r, g, b = rgb_bytes(colour)
    return [PresentationCandidate(f'rgb({r}, {g}, {b})', Grammar.FUNCTIONAL_RGB)]
