"""Hexadecimal colours: #rgb, #rgba, #rrggbb, #rrggbbaa.

A literal is '#' followed by exactly 3, 4, 6 or 8 hex digits, and no
further hex digit or word character (so '#abcde', '#1234567' and
'#fffx' are not colours). The variant is decided by digit count alone.
Short forms expand each digit ('f' -> 'ff'). Any match decodes.

Encoding offers the short forms only when every channel is a doubled
digit (0xcc, not 0xc7); #rgba then rounds alpha to the nearest nibble.
The 6-digit form is always offered; alpha forms only for translucent
colours. Digits are written lowercase.

Example:
    shader-swatch present '#F90'
"""

from shader_swatch.core.colour import hex_byte, is_doubled, rgb_bytes, to_byte, to_nibble
from shader_swatch.core.errors import MalformedOccurrence
from shader_swatch.core.types import CanonicalColour, ColourSyntax, Grammar, PresentationCandidate

_BY_DIGIT_COUNT = {
    3: Grammar.HEX_SHORT,
    4: Grammar.HEX_SHORT_ALPHA,
    6: Grammar.HEX_LONG,
    8: Grammar.HEX_LONG_ALPHA,
}
_HEX_DIGITS = frozenset('0123456789abcdefABCDEF')
_DIGIT_COUNT = {grammar: count for count, grammar in _BY_DIGIT_COUNT.items()}

syntax = ColourSyntax(
    name='hex',
    order=1,
    pattern=r'#([0-9a-fA-F]{8}|[0-9a-fA-F]{6}|[0-9a-fA-F]{4}|[0-9a-fA-F]{3})(?!\w)',
    grammars=tuple(_BY_DIGIT_COUNT.values()),
    help='#rgb, #rgba, #rrggbb or #rrggbbaa.',
)


@syntax.classify
def classify(match):
    digits = match.group(1)
    return _BY_DIGIT_COUNT[len(digits)], (digits,)


@syntax.decoder
def decode(occurrence, policy):
    if len(occurrence.raw_fields) != 1:
        raise MalformedOccurrence('hex literal carries exactly one field', occurrence)
    digits = occurrence.raw_fields[0]
    expected = _DIGIT_COUNT.get(occurrence.grammar)
    if expected is None or len(digits) != expected:
        raise MalformedOccurrence(f'{len(digits)} hex digits do not fit {occurrence.grammar.value}', occurrence)

    if expected in (3, 4):
        pairs = [d * 2 for d in digits]
    else:
        pairs = [digits[i : i + 2] for i in range(0, expected, 2)]

    if any(c not in _HEX_DIGITS for c in digits):
        raise MalformedOccurrence(f'not hexadecimal: {digits!r}', occurrence)
    channels = [int(p, 16) / 255 for p in pairs]

    if len(channels) == 3:
        channels.append(1.0)
    return CanonicalColour(*channels)


@syntax.encoder
def encode(colour, alpha_wanted):
    r, g, b = rgb_bytes(colour)
    a = to_byte(colour.alpha)
    long_rgb = f'#{hex_byte(r)}{hex_byte(g)}{hex_byte(b)}'

    out = []
    if is_doubled(r) and is_doubled(g) and is_doubled(b):
        short_rgb = '#' + ''.join(f'{to_nibble(c):x}' for c in (colour.red, colour.green, colour.blue))
        out.append(PresentationCandidate(short_rgb, Grammar.HEX_SHORT))
        if alpha_wanted:
            short_rgba = short_rgb + f'{to_nibble(colour.alpha):x}'
            out.append(PresentationCandidate(short_rgba, Grammar.HEX_SHORT_ALPHA, has_alpha=True))

    out.append(PresentationCandidate(long_rgb, Grammar.HEX_LONG))
    if alpha_wanted:
        out.append(PresentationCandidate(long_rgb + hex_byte(a), Grammar.HEX_LONG_ALPHA, has_alpha=True))
    return out
