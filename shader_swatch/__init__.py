"""shader-swatch: colour literals in GLSL/HLSL source as editable swatches."""

from shader_swatch.core.errors import MalformedOccurrence, ShaderSwatchError, UnknownLiteral, UnknownSyntax
from shader_swatch.core.types import (
    REJECTED,
    CanonicalColour,
    DocumentColour,
    Grammar,
    Occurrence,
    PresentationCandidate,
)
from shader_swatch.engine import decode, document_colours, encode, grammar_of_text, presentations, scan

# Shader languages the colour provider is registered for
LANGUAGES = ('glsl', 'hlsl')

__all__ = [
    'LANGUAGES',
    'REJECTED',
    'CanonicalColour',
    'DocumentColour',
    'Grammar',
    'MalformedOccurrence',
    'Occurrence',
    'PresentationCandidate',
    'ShaderSwatchError',
    'UnknownLiteral',
    'UnknownSyntax',
    'decode',
    'document_colours',
    'encode',
    'grammar_of_text',
    'presentations',
    'scan',
]
