"""Auto-discovery of colour syntax modules.

Every .py file in this package that defines a `syntax` object is
auto-registered by shader_swatch.registry.discover(). A syntax's `order`
is its scan priority: when two literals start at the same offset the
lower order wins.

The explicit imports below keep the modules visible to frozen builds,
where pkgutil.iter_modules cannot list the package.
"""

# Frozen-build hidden imports: keep this list in sync with syntax modules
import shader_swatch.syntaxes.hex as _hex  # noqa: F401
import shader_swatch.syntaxes.rgb as _rgb  # noqa: F401
import shader_swatch.syntaxes.rgba as _rgba  # noqa: F401
import shader_swatch.syntaxes.vector as _vector  # noqa: F401
