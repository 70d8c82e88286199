from dataclasses import dataclass
from typing import List

from pcut.acquire import ImageSource, acquire, describe_source
from pcut.aggregate import dominant_by_frequency, median_blend
from pcut.pixels import ColorRecord, decode
from pcut.quantize import DEFAULT_MAX_DEPTH, quantize


@dataclass(frozen=True)
class ImageAnalysis:
    source: str
    pixel_count: int
    blend: ColorRecord
    dominant: ColorRecord
    palette: List[ColorRecord]


def extract_palette_from_image(path: ImageSource, max_depth: int = DEFAULT_MAX_DEPTH, shrink_factor: int = 1) -> List[ColorRecord]:
    """
    Extract a median-cut palette straight from an image.

    Args:
        path: Path or binary file object of the image.
        max_depth (int): Split depth; the palette holds 2^max_depth colors.
        shrink_factor (int): Downsampling divisor applied before reading pixels.

    Returns:
        List[ColorRecord]: Palette colors in median-cut order.
    """
    pixels = decode(acquire(path, shrink_factor))
    return quantize(pixels, max_depth)


def analyze_image(path: ImageSource, max_depth: int = DEFAULT_MAX_DEPTH, shrink_factor: int = 1) -> ImageAnalysis:
    """Acquire an image once and run every reducer over its pixels."""
    pixels = decode(acquire(path, shrink_factor))
    return ImageAnalysis(
        source=describe_source(path),
        pixel_count=len(pixels),
        blend=median_blend(pixels),
        dominant=dominant_by_frequency(pixels),
        palette=quantize(pixels, max_depth),
    )
