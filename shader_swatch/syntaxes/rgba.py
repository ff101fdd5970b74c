"""CSS-style rgba(r, g, b, a): integer channels 0..255, decimal alpha in [0, 1].

Alpha is taken as-is (no division by 255) and clamped to [0, 1].
Encoded only for translucent colours (alpha < 0.99) unless the literal
being replaced was itself an rgba(); alpha is written with two decimals,
e.g. rgba(255, 128, 0, 0.50).

Example:
    shader-swatch present 'rgba(255, 128, 0, 0.5)'
"""

import re

from shader_swatch.core.colour import clamp01, rgb_bytes, to_fixed
from shader_swatch.core.errors import MalformedOccurrence
from shader_swatch.core.types import CanonicalColour, ColourSyntax, Grammar, PresentationCandidate
from shader_swatch.syntaxes.rgb import BYTE, parse_channels

_ALPHA = r'(\d*\.?\d+|\d+\.)'
_SEP = r'\s*,\s*'

syntax = ColourSyntax(
    name='rgba',
    order=3,
    pattern=rf'(?<!\w)rgba\s*\(\s*{BYTE}{_SEP}{BYTE}{_SEP}{BYTE}{_SEP}{_ALPHA}\s*\)',
    grammars=(Grammar.FUNCTIONAL_RGBA,),
    help='rgba(r, g, b, a): integer channels 0..255, decimal alpha 0..1.',
    flags=re.ASCII,
)


@syntax.classify
def classify(match):
    return Grammar.FUNCTIONAL_RGBA, match.groups()


@syntax.decoder
def decode(occurrence, policy):
    if occurrence.arity != 4:
        raise MalformedOccurrence(f'rgba() takes 4 fields, got {occurrence.arity}', occurrence)
    red, green, blue = parse_channels(occurrence, occurrence.raw_fields[:3])
    try:
        alpha = float(occurrence.raw_fields[3])
    except ValueError as e:
        raise MalformedOccurrence(f'unparsable alpha {occurrence.raw_fields[3]!r}', occurrence) from e
    return CanonicalColour(red, green, blue, clamp01(alpha))


@syntax.encoder
def encode(colour, alpha_wanted):
    if not alpha_wanted:
        return []
    r, g, b = rgb_bytes(colour)
    text = f'rgba({r}, {g}, {b}, {to_fixed(colour.alpha, 2)})'
    return [PresentationCandidate(text, Grammar.FUNCTIONAL_RGBA, has_alpha=True)]
