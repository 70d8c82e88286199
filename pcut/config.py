import os
from dataclasses import dataclass
from typing import Dict, Optional

from pcut.errors import ConfigurationError
from pcut.quantize import DEFAULT_MAX_DEPTH  # 4 palette colors

DEFAULT_SHRINK_FACTOR = 50   # photos are shrunk 50x per side before analysis
DEFAULT_PERCENT = 10
DEFAULT_SHADES = 3

SHRINK_FACTOR_ENV = "PALETTECUT_SHRINK_FACTOR"

PRESETS: Dict[str, Dict[str, int]] = {
    "coarse": {"max_depth": 1, "shrink_factor": 50},
    "standard": {"max_depth": 2, "shrink_factor": 50},
    "fine": {"max_depth": 4, "shrink_factor": 10},
}


@dataclass(frozen=True)
class Settings:
    max_depth: int = DEFAULT_MAX_DEPTH
    shrink_factor: int = DEFAULT_SHRINK_FACTOR
    percent: float = DEFAULT_PERCENT
    shades: int = DEFAULT_SHADES


def shrink_factor_from_env() -> Optional[int]:
    raw = os.environ.get(SHRINK_FACTOR_ENV, "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{SHRINK_FACTOR_ENV} must be an integer, got '{raw}'")
    if value < 1:
        raise ConfigurationError(f"{SHRINK_FACTOR_ENV} must be at least 1, got {value}")
    return value


def resolve_settings(
    preset: Optional[str] = None,
    max_depth: Optional[int] = None,
    shrink_factor: Optional[int] = None,
    percent: Optional[float] = None,
    shades: Optional[int] = None,
) -> Settings:
    """
    Work out the effective settings for one run.

    Explicit values win over the preset, the preset wins over the
    environment (shrink factor only), and the environment wins over the
    built-in defaults.
    """
    preset_values: Dict[str, int] = {}
    if preset:
        if preset not in PRESETS:
            raise ConfigurationError(f"Unknown preset '{preset}'. Choose from: {', '.join(PRESETS)}")
        preset_values = PRESETS[preset]

    effective_max_depth = max_depth
    if effective_max_depth is None:
        effective_max_depth = preset_values.get("max_depth", DEFAULT_MAX_DEPTH)

    effective_shrink_factor = shrink_factor
    if effective_shrink_factor is None:
        effective_shrink_factor = preset_values.get("shrink_factor")
    if effective_shrink_factor is None:
        effective_shrink_factor = shrink_factor_from_env()
    if effective_shrink_factor is None:
        effective_shrink_factor = DEFAULT_SHRINK_FACTOR

    return Settings(
        max_depth=effective_max_depth,
        shrink_factor=effective_shrink_factor,
        percent=DEFAULT_PERCENT if percent is None else percent,
        shades=DEFAULT_SHADES if shades is None else shades,
    )
