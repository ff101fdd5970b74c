"""Scan shader text for colour literals, decode them, and spell edited colours back.

    scan(text)                      -> [Occurrence]        left to right, non-overlapping
    decode(occurrence)              -> CanonicalColour | REJECTED
    encode(colour, grammar, alpha)  -> [PresentationCandidate], original notation first
    document_colours(text)          -> [DocumentColour]    scan + decode, rejected dropped
    presentations(colour, text)     -> encode with the notation inferred from `text`

Everything here is a pure function of its arguments (plus the decode
policy, read from SHADER_SWATCH_POLICY when not passed).
"""

import logging

from shader_swatch import registry
from shader_swatch.core.colour import clamp_colour, is_opaque
from shader_swatch.core.env import resolve_policy
from shader_swatch.core.errors import UnknownLiteral
from shader_swatch.core.types import (
    ALPHA_GRAMMARS,
    REJECTED,
    CanonicalColour,
    DecodeResult,
    DocumentColour,
    Grammar,
    Occurrence,
    PresentationCandidate,
)

log = logging.getLogger(__name__)

# Short hex has no spelling for most colours; fall back to the long form
_HEX_FALLBACK = {
    Grammar.HEX_SHORT: Grammar.HEX_LONG,
    Grammar.HEX_SHORT_ALPHA: Grammar.HEX_LONG_ALPHA,
}


def scan(text: str) -> list[Occurrence]:
    """Find every colour literal in text.

    Each syntax scans independently; results are merged by start offset.
    Ties on the same offset go to the syntax earlier in scan order
    (vector, hex, rgb, rgba), and a match overlapping one already taken
    is dropped.
    """
    found = []
    for syn in registry.ordered():
        found.extend((occ.start, syn.order, occ) for occ in syn.matches(text))
    found.sort(key=lambda item: (item[0], item[1]))

    result: list[Occurrence] = []
    taken_until = 0
    for start, _order, occ in found:
        if start < taken_until:
            continue
        result.append(occ)
        taken_until = occ.end
    return result


def decode(occurrence: Occurrence, policy: str | None = None) -> DecodeResult:
    """Decode an occurrence into a CanonicalColour, or REJECTED.

    Raises MalformedOccurrence if the occurrence could not have come from scan().
    """
    syn = registry.for_grammar(occurrence.grammar)
    return syn.decode(occurrence, resolve_policy(policy))


def encode(
    colour: CanonicalColour,
    original_grammar: Grammar,
    has_original_alpha: bool = False,
) -> list[PresentationCandidate]:
    """Spell colour in every supported notation, the original notation first.

    Alpha-bearing forms are only offered for translucent colours (alpha < 0.99),
    except the original notation itself, which is always offered.
    """
    colour = clamp_colour(colour)
    original_alpha = has_original_alpha or original_grammar in ALPHA_GRAMMARS
    translucent = not is_opaque(colour)

    candidates: list[PresentationCandidate] = []
    for syn in registry.ordered():
        keep_alpha = translucent or (original_alpha and original_grammar in syn.grammars)
        candidates.extend(syn.encode(colour, keep_alpha))

    first = _find_preferred(candidates, original_grammar, original_alpha)
    if first is None and original_grammar in _HEX_FALLBACK:
        first = _find_preferred(candidates, _HEX_FALLBACK[original_grammar], original_alpha)
    if first is not None:
        candidates.remove(first)
        candidates.insert(0, first)
    return candidates


def _find_preferred(
    candidates: list[PresentationCandidate], grammar: Grammar, has_alpha: bool
) -> PresentationCandidate | None:
    for cand in candidates:
        if cand.grammar is not grammar:
            continue
        if grammar is Grammar.VECTOR_COLOUR and cand.has_alpha != has_alpha:
            continue
        return cand
    return None


def document_colours(text: str, policy: str | None = None) -> list[DocumentColour]:
    """Every decodable colour in text; rejected occurrences are left out."""
    policy = resolve_policy(policy)
    colours = []
    for occ in scan(text):
        colour = decode(occ, policy)
        if colour is REJECTED:
            log.debug('not a colour: %r at %d', text[occ.start : occ.end], occ.start)
            continue
        colours.append(DocumentColour(start=occ.start, length=occ.length, colour=colour, grammar=occ.grammar))
    return colours


def grammar_of_text(text: str) -> tuple[Grammar, bool]:
    """(grammar, has_alpha) of a text that is exactly one colour literal."""
    literal = text.strip()
    occurrences = scan(literal)
    if len(occurrences) != 1 or occurrences[0].start != 0 or occurrences[0].length != len(literal):
        raise UnknownLiteral(f'Not a single colour literal: {text!r}')
    occ = occurrences[0]
    return occ.grammar, occ.has_alpha


def presentations(colour: CanonicalColour, original_text: str) -> list[PresentationCandidate]:
    """encode() for the literal currently occupying the edited range.

    Text that is not a colour literal gets the vector-first ordering.
    """
    try:
        grammar, has_alpha = grammar_of_text(original_text)
    except UnknownLiteral:
        log.debug('unrecognised original text %r, offering vector forms first', original_text)
        grammar, has_alpha = Grammar.VECTOR_COLOUR, False
    return encode(colour, grammar, has_alpha)
