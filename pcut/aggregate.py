import numpy as np

from pcut.errors import EmptyInputError
from pcut.pixels import ColorRecord, PixelInput, as_pixels


def median_blend(seq: PixelInput) -> ColorRecord:
    """
    Blend a whole pixel population into one color.

    Each of r, g, b is summed and floor-divided by the pixel count (no
    rounding). Alpha is full opacity.

    Raises:
        EmptyInputError: If there are no pixels to blend.
    """
    pixels = as_pixels(seq)
    count = len(pixels)
    if count == 0:
        raise EmptyInputError("Cannot blend an empty pixel sequence")

    totals = pixels[:, :3].sum(axis=0, dtype=np.int64)
    r, g, b = (totals // count).tolist()
    return ColorRecord(r, g, b)


def dominant_by_frequency(seq: PixelInput) -> ColorRecord:
    """
    Return the most frequent exact (r, g, b, a) color.

    When several colors share the highest count, the one that appears first
    in scan order wins.

    Raises:
        EmptyInputError: If there are no pixels to count.
    """
    pixels = as_pixels(seq)
    if len(pixels) == 0:
        raise EmptyInputError("Cannot pick a dominant color from an empty pixel sequence")

    colors, first_seen, counts = np.unique(pixels, axis=0, return_index=True, return_counts=True)
    # lexsort keys go from least to most significant: count desc, then first sighting
    winner = np.lexsort((first_seen, -counts))[0]
    return ColorRecord(*colors[winner].tolist())
