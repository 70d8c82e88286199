import math
from typing import Tuple

from pcut.errors import ConfigurationError


def round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; palettes expect .5 to go up.
    return int(math.floor(value + 0.5))


def rgb_to_hsl(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """
    Convert 8-bit RGB channels to HSL.

    Args:
        r, g, b (int): Channels in range 0-255.

    Returns:
        Tuple[float, float, float]: (hue in [0, 360), saturation in [0, 100],
        lightness in [0, 100]).
    """
    for name, value in zip("rgb", (r, g, b)):
        if not 0 <= value <= 255:
            raise ConfigurationError(f"Channel '{name}' out of range 0-255: {value}")

    r, g, b = r / 255, g / 255, b / 255
    high = max(r, g, b)
    chroma = high - min(r, g, b)
    lightness = (2 * high - chroma) / 2

    if chroma == 0:  # achromatic
        return 0.0, 0.0, lightness * 100

    if high == r:
        hue = (g - b) / chroma
    elif high == g:
        hue = 2 + (b - r) / chroma
    else:
        hue = 4 + (r - g) / chroma
    hue *= 60
    if hue < 0:
        hue += 360

    if lightness <= 0.5:
        saturation = chroma / (2 * lightness)
    else:
        saturation = chroma / (2 - 2 * lightness)

    # float error can push a fully saturated color a hair past 100
    return hue, min(100.0, saturation * 100), lightness * 100


def hsl_to_rgb(h: float, s: float, l: float) -> Tuple[int, int, int]:
    """
    Convert HSL back to 8-bit RGB channels, each rounded to the nearest integer.
    Only approximately inverts rgb_to_hsl (at most 1 off per channel).
    """
    if not 0 <= s <= 100:
        raise ConfigurationError(f"Saturation out of range 0-100: {s}")
    if not 0 <= l <= 100:
        raise ConfigurationError(f"Lightness out of range 0-100: {l}")

    s /= 100
    l /= 100
    a = s * min(l, 1 - l)

    def k(n):
        return (n + h / 30) % 12

    def f(n):
        return l - a * max(-1, min(k(n) - 3, 9 - k(n), 1))

    return tuple(min(255, max(0, round_half_up(255 * f(n)))) for n in (0, 8, 4))  # type: ignore
