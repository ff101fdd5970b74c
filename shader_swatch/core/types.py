"""Shared types for shader-swatch: Grammar, Occurrence, CanonicalColour, ColourSyntax."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum


class Grammar(Enum):
    """Textual colour-literal notations recognised in shader source."""

    VECTOR_COLOUR = 'vector'
    HEX_SHORT = 'hex-short'
    HEX_SHORT_ALPHA = 'hex-short-alpha'
    HEX_LONG = 'hex-long'
    HEX_LONG_ALPHA = 'hex-long-alpha'
    FUNCTIONAL_RGB = 'rgb'
    FUNCTIONAL_RGBA = 'rgba'


# Grammars whose notation always carries an alpha channel
ALPHA_GRAMMARS = frozenset({Grammar.HEX_SHORT_ALPHA, Grammar.HEX_LONG_ALPHA, Grammar.FUNCTIONAL_RGBA})


@dataclass(frozen=True)
class Occurrence:
    """A located, unparsed colour literal found by the scanner."""

    grammar: Grammar
    start: int
    length: int
    raw_fields: tuple[str, ...]  # captured text, verbatim

    @property
    def end(self) -> int:
        return self.start + self.length

    @property
    def arity(self) -> int:
        return len(self.raw_fields)

    @property
    def has_alpha(self) -> bool:
        if self.grammar is Grammar.VECTOR_COLOUR:
            return self.arity == 4
        return self.grammar in ALPHA_GRAMMARS


@dataclass(frozen=True)
class CanonicalColour:
    """RGBA colour, every channel a float in [0, 1]."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.red, self.green, self.blue, self.alpha)


@dataclass(frozen=True)
class PresentationCandidate:
    """One textual spelling of a colour, offered to the user as a replacement."""

    text: str
    grammar: Grammar
    has_alpha: bool = False


@dataclass(frozen=True)
class DocumentColour:
    """A decoded swatch: where it sits in the text and what colour it is."""

    start: int
    length: int
    colour: CanonicalColour
    grammar: Grammar


class _Rejected:
    """Decode outcome for a literal that parses but is judged not to be a colour."""

    _instance: _Rejected | None = None

    def __new__(cls) -> _Rejected:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'REJECTED'

    def __bool__(self) -> bool:
        return False


REJECTED = _Rejected()

# What decode() hands back
DecodeResult = CanonicalColour | _Rejected


class ColourSyntax:
    """A self-registering colour-literal family: matcher, decoder and encoder.

    Usage in a syntax module:

        syntax = ColourSyntax(
            name='rgb',
            order=2,
            pattern=r'rgb\\s*\\(...\\)',
            grammars=(Grammar.FUNCTIONAL_RGB,),
            help='rgb(r, g, b) with integer channels',
        )

        @syntax.classify
        def classify(match):
            return Grammar.FUNCTIONAL_RGB, match.groups()

        @syntax.decoder
        def decode(occurrence, policy):
            ...

        @syntax.encoder
        def encode(colour, alpha_wanted):
            ...
    """

    def __init__(
        self,
        name: str,
        order: int,
        pattern: str,
        grammars: tuple[Grammar, ...],
        help: str = '',
        flags: int = 0,
    ):
        self.name = name
        self.order = order
        self.pattern = re.compile(pattern, flags)
        self.grammars = grammars
        self.help = help
        self._classify_fn: Callable | None = None
        self._decode_fn: Callable | None = None
        self._encode_fn: Callable | None = None

    def classify(self, fn: Callable) -> Callable:
        """Decorator to register the match -> (grammar, raw fields) function."""
        self._classify_fn = fn
        return fn

    def decoder(self, fn: Callable) -> Callable:
        """Decorator to register the decode function."""
        self._decode_fn = fn
        return fn

    def encoder(self, fn: Callable) -> Callable:
        """Decorator to register the encode function."""
        self._encode_fn = fn
        return fn

    def matches(self, text: str) -> Iterator[Occurrence]:
        """Yield every occurrence of this syntax in text, left to right.

        A fresh finditer per call; nothing about the cursor outlives the call.
        """
        if self._classify_fn is None:
            raise RuntimeError(f'Syntax {self.name} has no classify function')
        for m in self.pattern.finditer(text):
            grammar, fields = self._classify_fn(m)
            yield Occurrence(
                grammar=grammar,
                start=m.start(),
                length=m.end() - m.start(),
                raw_fields=tuple(fields),
            )

    def decode(self, occurrence: Occurrence, policy: str) -> CanonicalColour | _Rejected:
        if self._decode_fn is None:
            raise RuntimeError(f'Syntax {self.name} has no decode function')
        return self._decode_fn(occurrence, policy)

    def encode(self, colour: CanonicalColour, alpha_wanted: bool) -> list[PresentationCandidate]:
        if self._encode_fn is None:
            raise RuntimeError(f'Syntax {self.name} has no encode function')
        return self._encode_fn(colour, alpha_wanted)
