"""Read Colors out of Pillow images.

sample_pixel returns the exact colour at one coordinate. sample_region
returns the mean colour of an (x1, y1, x2, y2) box, x2/y2 exclusive, with
each channel rounded to the nearest integer (ties round up).

Images in any mode are converted to RGB first, so alpha is dropped.
"""

import logging

import numpy as np
from PIL import Image

from tiny_color.core.types import Color

logger = logging.getLogger(__name__)


def sample_pixel(image: Image.Image, x: int, y: int) -> Color:
    """Colour of the pixel at (x, y)."""
    if not (0 <= x < image.width and 0 <= y < image.height):
        raise ValueError(f'pixel ({x}, {y}) outside image {image.width}x{image.height}')
    r, g, b = image.convert('RGB').getpixel((x, y))
    return Color(int(r), int(g), int(b))


def sample_region(image: Image.Image, bounds: tuple[int, int, int, int]) -> Color:
    """Mean colour of the pixels inside bounds."""
    x1, y1, x2, y2 = bounds
    if not (0 <= x1 < x2 <= image.width and 0 <= y1 < y2 <= image.height):
        raise ValueError(f'bounds {bounds} empty or outside image {image.width}x{image.height}')

    crop = image.convert('RGB').crop((x1, y1, x2, y2))
    # int64 so the sum of many 255s cannot overflow uint8
    pixels = np.array(crop).reshape(-1, 3).astype(np.int64)
    means = pixels.mean(axis=0)
    r, g, b = (int(v) for v in np.floor(means + 0.5))
    logger.debug('sampled %d pixels in %s: mean (%.2f, %.2f, %.2f)', len(pixels), bounds, *means)
    return Color(r, g, b)
