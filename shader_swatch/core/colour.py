"""Channel arithmetic shared by every syntax: clamping, byte rounding, fixed-point text.

Rounding follows what editors and web tooling print, not Python's
round-half-even: bytes round half up, and fixed decimals round half away
from zero on the exact binary value of the float (JavaScript toFixed).
"""

import math
from decimal import ROUND_HALF_UP, Decimal

from shader_swatch.core.types import CanonicalColour

# Alpha at or above this is treated as opaque when choosing which forms to offer
OPAQUE_THRESHOLD = 0.99


def clamp01(value: float) -> float:
    """Saturate value to [0, 1]."""
    return max(0.0, min(1.0, value))


def clamp_colour(colour: CanonicalColour) -> CanonicalColour:
    return CanonicalColour(
        red=clamp01(colour.red),
        green=clamp01(colour.green),
        blue=clamp01(colour.blue),
        alpha=clamp01(colour.alpha),
    )


def is_opaque(colour: CanonicalColour) -> bool:
    return colour.alpha >= OPAQUE_THRESHOLD


def to_byte(channel: float) -> int:
    """Scale a [0, 1] channel to 0..255, rounding half up."""
    return int(math.floor(channel * 255 + 0.5))


def to_nibble(channel: float) -> int:
    """Scale a [0, 1] channel to 0..15, rounding half up."""
    return int(math.floor(channel * 15 + 0.5))


def to_fixed(value: float, digits: int) -> str:
    """Format value with exactly `digits` decimals, ties away from zero."""
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def hex_byte(value: int) -> str:
    return f'{value:02x}'


def is_doubled(value: int) -> bool:
    """True when a byte's two hex digits are identical (0xcc, not 0xc7)."""
    digits = hex_byte(value)
    return digits[0] == digits[1]


def rgb_bytes(colour: CanonicalColour) -> tuple[int, int, int]:
    return (to_byte(colour.red), to_byte(colour.green), to_byte(colour.blue))
