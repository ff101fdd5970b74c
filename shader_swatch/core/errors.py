"""
Exceptions for shader-swatch.

Exception Hierarchy:
    ShaderSwatchError (base)
    ├── MalformedOccurrence   occurrence fields do not fit their grammar
    ├── UnknownLiteral        text is not a single colour literal
    └── UnknownSyntax         registry lookup miss

A rejected vector literal is NOT an error: decode returns REJECTED.
"""


class ShaderSwatchError(Exception):
    """Base exception for all shader-swatch errors."""


class MalformedOccurrence(ShaderSwatchError, ValueError):
    """
    Raised when an Occurrence reaching decode cannot have come from the scanner.

    Attributes:
        occurrence: the offending Occurrence
    """

    def __init__(self, message: str, occurrence=None):
        super().__init__(message)
        self.occurrence = occurrence


class UnknownLiteral(ShaderSwatchError, ValueError):
    """Raised when text handed to grammar_of_text is not exactly one colour literal."""


class UnknownSyntax(ShaderSwatchError, KeyError):
    """Raised when a syntax or grammar has no registered handler."""
