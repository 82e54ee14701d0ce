"""Standard pixel classification predicates.

A predicate decides whether a single pixel belongs to the filled region. Three
variants are provided:

- opacity: at least half opaque
- dark: opaque and darker than mid-grey
- light: opaque and lighter than mid-grey

Pixels are 8-bit values: an int (gray), or a 1-4 tuple of gray, gray+alpha,
RGB or RGBA. Anything without alpha is opaque.
"""

from collections.abc import Callable

from rastertrace.config.settings import FillConfig, FillPolicy
from rastertrace.exceptions import PixelFormatError
from rastertrace.raster.field import Pixel

FillPredicate = Callable[[Pixel], bool]

OPACITY_THRESHOLD = 0x80
LUMA_THRESHOLD = 0x80


def to_rgba(pixel: Pixel) -> tuple[int, int, int, int]:
    """Normalize a pixel to an (r, g, b, a) tuple of 8-bit ints.

    Raises:
        PixelFormatError: If the value is not a supported 8-bit pixel
    """
    if isinstance(pixel, bool):
        raise PixelFormatError(pixel)
    if isinstance(pixel, int):
        channels: tuple = (pixel, pixel, pixel, 255)
    elif isinstance(pixel, (tuple, list)):
        values = tuple(pixel)
        if len(values) == 1:
            channels = (values[0], values[0], values[0], 255)
        elif len(values) == 2:
            channels = (values[0], values[0], values[0], values[1])
        elif len(values) == 3:
            channels = (*values, 255)
        elif len(values) == 4:
            channels = values
        else:
            raise PixelFormatError(pixel)
    else:
        raise PixelFormatError(pixel)

    if not all(isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255 for c in channels):
        raise PixelFormatError(pixel)
    return channels


def luma(r: int, g: int, b: int) -> int:
    """JFIF luma (the Y of YCbCr) of an 8-bit RGB color, rounded to an int."""
    return (19595 * r + 38470 * g + 7471 * b + (1 << 15)) >> 16


def is_opaque(pixel: Pixel, threshold: int = OPACITY_THRESHOLD) -> bool:
    """Filled when alpha is at least ``threshold`` (50% by default)."""
    return to_rgba(pixel)[3] >= threshold


def is_dark(
    pixel: Pixel,
    threshold: int = LUMA_THRESHOLD,
    alpha_threshold: int = OPACITY_THRESHOLD,
) -> bool:
    """Filled when opaque and luma is below ``threshold``."""
    r, g, b, a = to_rgba(pixel)
    if a < alpha_threshold:
        return False
    return luma(r, g, b) < threshold


def is_light(
    pixel: Pixel,
    threshold: int = LUMA_THRESHOLD,
    alpha_threshold: int = OPACITY_THRESHOLD,
) -> bool:
    """Filled when opaque and luma is above ``threshold``."""
    r, g, b, a = to_rgba(pixel)
    if a < alpha_threshold:
        return False
    return luma(r, g, b) > threshold


def make_fill_predicate(config: FillConfig | None = None) -> FillPredicate:
    """Build the predicate selected by a FillConfig.

    Args:
        config: Fill settings (defaults to the dark-pixel policy)

    Returns:
        Callable taking a pixel and returning whether it is filled
    """
    config = config or FillConfig()
    alpha = config.alpha_threshold
    luma_split = config.luma_threshold

    if config.policy is FillPolicy.OPACITY:
        return lambda pixel: is_opaque(pixel, alpha)
    if config.policy is FillPolicy.LIGHT:
        return lambda pixel: is_light(pixel, luma_split, alpha)
    return lambda pixel: is_dark(pixel, luma_split, alpha)
