"""Render decoded colours as a strip of square swatches.

Translucent colours are composited over a grey checkerboard so alpha is
visible. One swatch per colour, left to right in document order.
"""

import numpy as np
from PIL import Image

from shader_swatch.core.types import CanonicalColour

CHECK_LIGHT = 204
CHECK_DARK = 153


def _checkerboard(height: int, width: int, cell: int) -> np.ndarray:
    ys, xs = np.indices((height, width))
    board = ((ys // cell + xs // cell) % 2).astype(np.float64)
    grey = np.where(board == 0, CHECK_LIGHT, CHECK_DARK).astype(np.float64)
    return np.repeat(grey[:, :, None], 3, axis=2)


def render_swatches(colours: list[CanonicalColour], size: int = 48) -> Image.Image:
    """Return an RGB image size*len(colours) wide and size tall.

    An empty list gives a single checkerboard cell.
    """
    count = max(1, len(colours))
    cell = max(1, size // 4)
    canvas = _checkerboard(size, size * count, cell)

    for i, colour in enumerate(colours):
        x0 = i * size
        rgb = np.array([colour.red, colour.green, colour.blue], dtype=np.float64) * 255.0
        region = canvas[:, x0 : x0 + size, :]
        canvas[:, x0 : x0 + size, :] = region * (1.0 - colour.alpha) + rgb * colour.alpha

    return Image.fromarray(np.clip(np.rint(canvas), 0, 255).astype(np.uint8))


def save_swatches(colours: list[CanonicalColour], path: str, size: int = 48) -> Image.Image:
    image = render_swatches(colours, size=size)
    image.save(path)
    return image
