import numpy as np
from typing import List, Tuple

from pcut.errors import ConfigurationError, EmptyBucketError
from pcut.pixels import ColorRecord, PixelInput, as_pixels

DEFAULT_MAX_DEPTH = 2


def dominant_channel(bucket: np.ndarray) -> int:
    """
    Index (0=r, 1=g, 2=b) of the channel with the widest max-min spread.
    Ties go to the earlier channel, so r beats g beats b.
    """
    if len(bucket) == 0:
        raise EmptyBucketError("Cannot find the dominant channel of an empty bucket")
    rgb = bucket[:, :3].astype(np.int16)
    spreads = rgb.max(axis=0) - rgb.min(axis=0)
    return int(np.argmax(spreads))  # argmax returns the first maximum


def bucket_average(bucket: np.ndarray) -> ColorRecord:
    """Mean r, g, b of a bucket, rounded half-up (not floored), fully opaque."""
    count = len(bucket)
    if count == 0:
        raise EmptyBucketError("Cannot average an empty bucket")
    totals = bucket[:, :3].sum(axis=0, dtype=np.int64)
    r, g, b = ((2 * totals + count) // (2 * count)).tolist()
    return ColorRecord(r, g, b)


def _validate_depths(max_depth: int, starting_depth: int):
    for name, value in (("max_depth", max_depth), ("starting_depth", starting_depth)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    if starting_depth < 0:
        raise ConfigurationError(f"starting_depth must not be negative, got {starting_depth}")
    if starting_depth >= max_depth:
        raise ConfigurationError(
            f"starting_depth ({starting_depth}) must be smaller than max_depth ({max_depth})"
        )


def _split(work: np.ndarray, start: int, stop: int, depth: int, max_depth: int,
           ranges: List[Tuple[int, int]]):
    if stop == start:
        raise EmptyBucketError(f"Bucket at depth {depth} is empty; too few pixels for depth {max_depth}")

    if depth == max_depth:
        ranges.append((start, stop))
        return

    bucket = work[start:stop]
    channel = dominant_channel(bucket)
    # Stable sort keeps scan order among equal channel values.
    order = np.argsort(bucket[:, channel], kind="stable")
    work[start:stop] = bucket[order]

    middle = start + (stop - start) // 2
    _split(work, start, middle, depth + 1, max_depth, ranges)
    _split(work, middle, stop, depth + 1, max_depth, ranges)


def median_cut(seq: PixelInput, max_depth: int = DEFAULT_MAX_DEPTH, starting_depth: int = 0) -> List[np.ndarray]:
    """
    Partition pixels into 2^(max_depth - starting_depth) median-cut buckets.

    All buckets are views over one private working copy of the input, sorted
    and split in place; the caller's data is never reordered.

    Returns:
        List[np.ndarray]: Terminal buckets, left-to-right. Their lengths add up
        to the number of input pixels.

    Raises:
        ConfigurationError: If starting_depth >= max_depth.
        EmptyBucketError: If any bucket runs out of pixels.
    """
    _validate_depths(max_depth, starting_depth)
    work = as_pixels(seq).copy()
    if len(work) == 0:
        raise EmptyBucketError("Cannot quantize an empty pixel sequence")

    ranges: List[Tuple[int, int]] = []
    _split(work, 0, len(work), starting_depth, max_depth, ranges)
    return [work[start:stop] for start, stop in ranges]


def quantize(seq: PixelInput, max_depth: int = DEFAULT_MAX_DEPTH, starting_depth: int = 0) -> List[ColorRecord]:
    """
    Reduce pixels to a palette of 2^max_depth colors (for the default
    starting_depth of 0) using recursive median cut.

    At each level the bucket is sorted on its widest channel and halved; the
    left half gets len // 2 pixels. Each terminal bucket collapses to its
    rounded mean color. Left results always precede right results.
    """
    return [bucket_average(bucket) for bucket in median_cut(seq, max_depth, starting_depth)]
