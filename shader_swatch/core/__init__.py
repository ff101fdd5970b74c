"""shader_swatch.core: Foundation layer.

Contains the types, channel arithmetic, errors, settings, report builder
and swatch renderer. This module has NO dependencies on
shader_swatch.syntaxes, shader_swatch.registry or shader_swatch.engine.
Only stdlib, numpy, and PIL are allowed here.
"""
