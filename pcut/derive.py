from dataclasses import dataclass
from typing import List, Tuple, Union

from pcut.convert import hsl_to_rgb, rgb_to_hsl, round_half_up
from pcut.errors import ConfigurationError
from pcut.pixels import ColorRecord

ColorInput = Union[ColorRecord, Tuple[int, int, int]]


@dataclass(frozen=True)
class MonochromaticResult:
    light: Tuple[ColorRecord, ...]
    dark: Tuple[ColorRecord, ...]
    original: ColorRecord
    # Raw lightness ramps (percent), before clamping for conversion.
    light_levels: Tuple[float, ...] = ()
    dark_levels: Tuple[float, ...] = ()


def _as_record(base: ColorInput) -> ColorRecord:
    if isinstance(base, ColorRecord):
        return base
    return ColorRecord(*base)


def _lightness_ramp(lightness: float, percent: float, steps: int, direction: int) -> List[float]:
    levels = []
    current = lightness
    for _ in range(steps):
        # offset is taken from the evolving lightness, not the base
        offset = round_half_up(current * percent / 100)
        current += direction * offset
        levels.append(current)
    return levels


def monochromatic(base: ColorInput, percent: float = 10, num_of_colors: int = 3) -> MonochromaticResult:
    """
    Build lighter and darker shades of a color, keeping hue and saturation.

    Args:
        base: ColorRecord or (r, g, b) tuple.
        percent (float): Step size as a percentage of the current lightness.
        num_of_colors (int): Number of shades on each side.

    Returns:
        MonochromaticResult: `dark` and `light` start at the step closest to
        `original`. Lightness levels outside [0, 100] are kept in the
        *_levels ramps but clamped when converted, so they render as black
        or white.
    """
    if percent < 0:
        raise ConfigurationError(f"percent must not be negative, got {percent}")
    if isinstance(num_of_colors, bool) or not isinstance(num_of_colors, int) or num_of_colors < 0:
        raise ConfigurationError(f"num_of_colors must be a non-negative integer, got {num_of_colors!r}")

    original = _as_record(base)
    hue, saturation, lightness = rgb_to_hsl(*original.rgb)

    def render(level: float) -> ColorRecord:
        return ColorRecord(*hsl_to_rgb(hue, saturation, min(100.0, max(0.0, level))))

    dark_levels = _lightness_ramp(lightness, percent, num_of_colors, -1)
    light_levels = _lightness_ramp(lightness, percent, num_of_colors, 1)

    return MonochromaticResult(
        light=tuple(render(level) for level in light_levels),
        dark=tuple(render(level) for level in dark_levels),
        original=ColorRecord(*original.rgb),
        light_levels=tuple(light_levels),
        dark_levels=tuple(dark_levels),
    )


def complementary(base: ColorInput) -> ColorRecord:
    """Rotate the hue by 180 degrees; saturation and lightness stay put."""
    hue, saturation, lightness = rgb_to_hsl(*_as_record(base).rgb)
    hue = hue - 180 if hue >= 180 else hue + 180
    return ColorRecord(*hsl_to_rgb(hue, saturation, lightness))
