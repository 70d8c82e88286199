from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union

import numpy as np

from pcut.errors import ConfigurationError

OPAQUE = 255  # full opacity, 8-bit convention used across the engine
CHANNELS = ("r", "g", "b")


@dataclass(frozen=True)
class ColorRecord:
    r: int
    g: int
    b: int
    a: int = OPAQUE

    def __post_init__(self):
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise ConfigurationError(f"Channel '{name}' must be an integer, got {value!r}")
            if not 0 <= value <= 255:
                raise ConfigurationError(f"Channel '{name}' out of range 0-255: {value}")
            object.__setattr__(self, name, int(value))  # normalize numpy ints

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    def to_css(self) -> str:
        """Render as CSS text, e.g. 'rgba(200,100,50,1)'."""
        return f"rgba({self.r},{self.g},{self.b},{self.a / 255:.3g})"

    def __str__(self):
        return self.to_css()


PixelInput = Union[np.ndarray, Iterable[Union[ColorRecord, Tuple[int, ...]]]]


def _as_byte_array(buffer) -> np.ndarray:
    if isinstance(buffer, (bytes, bytearray, memoryview)):
        return np.frombuffer(buffer, dtype=np.uint8)

    data = np.asarray(buffer).ravel()
    if data.size == 0:
        return data.astype(np.uint8)
    if not np.issubdtype(data.dtype, np.integer):
        raise ConfigurationError(f"Pixel buffer must hold integers, got dtype {data.dtype}")
    if data.min() < 0 or data.max() > 255:
        raise ConfigurationError("Pixel buffer values must be in range 0-255")
    return data.astype(np.uint8)


def decode(buffer) -> np.ndarray:
    """
    Decode a flat RGBA byte buffer into one row per pixel.

    Args:
        buffer: bytes-like object, list of ints or numpy array in row-major
                (R, G, B, A) order. Only the total length matters.

    Returns:
        np.ndarray: Owned uint8 array of shape (N, 4). Alpha is replaced
        by full opacity (255), since it is not analyzed.

    Raises:
        ConfigurationError: If the length is not a multiple of 4 or a value
        does not fit in a byte.
    """
    data = _as_byte_array(buffer)
    if data.size % 4 != 0:
        raise ConfigurationError(f"Buffer length {data.size} is not a multiple of 4 (RGBA)")

    pixels = data.reshape(-1, 4).copy()
    pixels[:, 3] = OPAQUE
    return pixels


def as_pixels(seq: PixelInput) -> np.ndarray:
    """Coerce records, tuples or an (N, 3)/(N, 4) array into an (N, 4) uint8 array."""
    if isinstance(seq, np.ndarray):
        if seq.ndim != 2 or seq.shape[1] not in (3, 4):
            if seq.size == 0:
                return np.empty((0, 4), dtype=np.uint8)
            raise ConfigurationError(f"Pixel array must have shape (N, 3) or (N, 4), got {seq.shape}")
        if seq.shape[1] == 4 and seq.dtype == np.uint8:
            return seq
        rows = seq
    else:
        rows = [c.as_tuple() if isinstance(c, ColorRecord) else tuple(c) for c in seq]
        if not rows:
            return np.empty((0, 4), dtype=np.uint8)
        widths = {len(row) for row in rows}
        if not widths <= {3, 4} or len(widths) != 1:
            raise ConfigurationError("Every color must have 3 (RGB) or 4 (RGBA) channels")

    data = np.asarray(rows)
    if not np.issubdtype(data.dtype, np.integer):
        raise ConfigurationError(f"Color channels must be integers, got dtype {data.dtype}")
    if data.size and (data.min() < 0 or data.max() > 255):
        raise ConfigurationError("Color channels must be in range 0-255")

    pixels = np.full((data.shape[0], 4), OPAQUE, dtype=np.uint8)
    pixels[:, : data.shape[1]] = data
    return pixels


def to_records(pixels: PixelInput) -> List[ColorRecord]:
    return [ColorRecord(*row) for row in as_pixels(pixels).tolist()]
