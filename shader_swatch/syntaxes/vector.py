"""GLSL vector constructors used as colours: vec3(r, g, b) and vec4(r, g, b, a).

vec3 takes exactly three decimal literals, vec4 exactly four. Whitespace
is allowed around the parens and commas. Integer vectors (ivec3, uvec4,
dvec3 ...) are not matched.

A vector is only a guess at a colour: positions and directions use the
same constructor. Decoding therefore applies a policy:

    permissive  reject when |r|, |g| or |b| > 2.0, clamp everything else
    strict      reject when any component (alpha included) is outside [0, 1]

Encoded with exactly three decimals, e.g. vec3(0.500, 0.500, 0.500).

Example:
    shader-swatch scan shader.frag
    shader-swatch present 'vec4(1.0, 0.5, 0.0, 0.25)'
"""

import re

from shader_swatch.core.colour import clamp01, to_fixed
from shader_swatch.core.env import POLICY_STRICT
from shader_swatch.core.errors import MalformedOccurrence
from shader_swatch.core.types import REJECTED, CanonicalColour, ColourSyntax, Grammar, PresentationCandidate

# Beyond this magnitude a component is taken to be a coordinate, not a colour
REJECT_MAGNITUDE = 2.0

_NUM = r'([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)'
_SEP = r'\s*,\s*'

syntax = ColourSyntax(
    name='vector',
    order=0,
    pattern=(
        r'(?<![\w.])vec(?:'
        rf'3\s*\(\s*{_NUM}{_SEP}{_NUM}{_SEP}{_NUM}\s*\)'
        r'|'
        rf'4\s*\(\s*{_NUM}{_SEP}{_NUM}{_SEP}{_NUM}{_SEP}{_NUM}\s*\)'
        r')'
    ),
    grammars=(Grammar.VECTOR_COLOUR,),
    help='vec3(r, g, b) / vec4(r, g, b, a) with components in [0, 1].',
    flags=re.ASCII,
)


@syntax.classify
def classify(match):
    groups = match.groups()
    if groups[0] is not None:
        return Grammar.VECTOR_COLOUR, groups[:3]
    return Grammar.VECTOR_COLOUR, groups[3:]


def _components(occurrence) -> list[float]:
    if occurrence.arity not in (3, 4):
        raise MalformedOccurrence(f'vector literal needs 3 or 4 components, got {occurrence.arity}', occurrence)
    try:
        return [float(field) for field in occurrence.raw_fields]
    except ValueError as e:
        raise MalformedOccurrence(f'unparsable vector component in {occurrence.raw_fields}', occurrence) from e


@syntax.decoder
def decode(occurrence, policy):
    values = _components(occurrence)

    if policy == POLICY_STRICT:
        if any(not 0.0 <= v <= 1.0 for v in values):
            return REJECTED
    elif any(abs(v) > REJECT_MAGNITUDE for v in values[:3]):
        return REJECTED

    alpha = values[3] if len(values) == 4 else 1.0
    return CanonicalColour(clamp01(values[0]), clamp01(values[1]), clamp01(values[2]), clamp01(alpha))


@syntax.encoder
def encode(colour, alpha_wanted):
    r, g, b, a = (to_fixed(c, 3) for c in colour.as_tuple())
    out = [PresentationCandidate(f'vec3({r}, {g}, {b})', Grammar.VECTOR_COLOUR)]
    if alpha_wanted:
        out.append(PresentationCandidate(f'vec4({r}, {g}, {b}, {a})', Grammar.VECTOR_COLOUR, has_alpha=True))
    return out
