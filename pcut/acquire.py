from pathlib import Path
from typing import BinaryIO, Union

import typer  # for typer.echo
from PIL import Image, UnidentifiedImageError

from pcut.errors import AcquisitionError, ConfigurationError

ImageSource = Union[str, Path, BinaryIO]


def describe_source(source: ImageSource) -> str:
    if isinstance(source, (str, Path)):
        return str(source)
    return getattr(source, "name", repr(source))


def acquire(source: ImageSource, shrink_factor: int = 1) -> bytes:
    """
    Decode an image and read its pixels back as a flat RGBA byte buffer.

    Args:
        source: Path to an image file, or a binary file object.
        shrink_factor (int): Both dimensions are integer-divided by this
                             before reading back. 1 keeps the full size.

    Returns:
        bytes: Row-major (R, G, B, A) buffer, 4 bytes per pixel.

    Raises:
        ConfigurationError: If shrink_factor is smaller than 1.
        AcquisitionError: If the source cannot be opened or decoded.
    """
    if isinstance(shrink_factor, bool) or not isinstance(shrink_factor, int) or shrink_factor < 1:
        raise ConfigurationError(f"shrink_factor must be a positive integer, got {shrink_factor!r}")

    source_id = describe_source(source)
    try:
        with Image.open(source) as image:
            rgba = image.convert("RGBA")
    except FileNotFoundError as e:
        raise AcquisitionError(source_id, "file not found") from e
    except UnidentifiedImageError as e:
        raise AcquisitionError(source_id, "not a recognized image format") from e
    except (OSError, ValueError) as e:
        raise AcquisitionError(source_id, e) from e

    if shrink_factor > 1:
        w, h = rgba.size
        if w < shrink_factor or h < shrink_factor:
            typer.echo(f"Warning: Shrink factor ({shrink_factor}) is larger than image dimensions ({w}x{h}). Keeping at least 1 pixel per side.")
        target_size = (max(1, w // shrink_factor), max(1, h // shrink_factor))
        rgba = rgba.resize(target_size, Image.Resampling.BILINEAR)

    return rgba.tobytes()
