"""Syntax auto-discovery and registration.

Scans shader_swatch/syntaxes/ for modules that define a `syntax` object
of type ColourSyntax. Collects them into a dict keyed by name; the dict
is filled once and only read afterwards.

Handles both normal Python (pkgutil.iter_modules) and frozen binaries
(where iter_modules returns nothing: falls back to the known module list).
"""

import importlib
import pkgutil

from shader_swatch.core.errors import UnknownSyntax
from shader_swatch.core.types import ColourSyntax, Grammar

_registry: dict[str, ColourSyntax] = {}

# Known syntax module names: fallback for frozen binaries
_SYNTAX_MODULES = [
    'hex',
    'rgb',
    'rgba',
    'vector',
]


def discover() -> dict[str, ColourSyntax]:
    """Import all syntax modules and return the registry."""
    if _registry:
        return _registry

    import shader_swatch.syntaxes as pkg

    found_modules = [
        modname for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__) if not modname.startswith('_')
    ]
    if not found_modules:
        found_modules = _SYNTAX_MODULES

    found: dict[str, ColourSyntax] = {}
    for modname in found_modules:
        module = importlib.import_module(f'shader_swatch.syntaxes.{modname}')
        syn = getattr(module, 'syntax', None)
        if isinstance(syn, ColourSyntax):
            found[syn.name] = syn

    _registry.update(sorted(found.items(), key=lambda item: item[1].order))
    return _registry


def get(name: str) -> ColourSyntax:
    """Get a syntax by name."""
    reg = discover()
    if name not in reg:
        raise UnknownSyntax(f'Unknown syntax: {name}. Available: {", ".join(reg)}')
    return reg[name]


def ordered() -> list[ColourSyntax]:
    """All syntaxes in scan order."""
    return list(discover().values())


def for_grammar(grammar: Grammar) -> ColourSyntax:
    """The syntax that decodes and encodes a grammar."""
    for syn in discover().values():
        if grammar in syn.grammars:
            return syn
    raise UnknownSyntax(f'No syntax handles grammar {grammar!r}')
