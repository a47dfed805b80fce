"""
Palette Provider.

Named palettes and the ColorGenerator that draws colors from them:
- Discrete palettes are cyclic color sequences
- Continuous palettes are linear interpolations over [0, 1] between
  evenly spaced hex color stops

Usage:
    generator = ColorGenerator("blues")
    first = generator.next()          # color at t=0
    middle = generator.get_at(0.5)    # interpolated

    register_palette("traffic", ["#00ff00", "#ffff00", "#ff0000"], PaletteType.CONTINUOUS)

Exports:
    Palette: Pydantic palette definition
    PALETTES: Registry of named palettes
    get_palette: Lookup with fallback to the default palette
    register_palette: Add or replace a named palette
    hex_to_rgb, rgb_to_hex, interpolate_hex: Color helpers
    ColorGenerator: Sequential / positional color source
"""

import math
import re
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ValidationError, model_validator

from core.models.enums import PaletteType
from config import get_config
from config.defaults import ColorDefaults
from exceptions import ConfigError
from util_logger import LoggerFactory, ComponentType

logger = LoggerFactory.create_logger(ComponentType.PALETTE, "PaletteProvider")

_HEX_PATTERN = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE)


# ============================================================================
# PALETTE MODEL
# ============================================================================

class Palette(BaseModel):
    """
    A named palette.

    Continuous palettes need at least two 6-digit hex stops so they can be
    interpolated; discrete palettes accept any CSS color string.
    """

    name: str
    colors: List[str]
    type: PaletteType = PaletteType.DISCRETE

    @model_validator(mode="after")
    def validate_colors(self) -> "Palette":
        if not self.colors:
            raise ValueError(f"Palette '{self.name}' has no colors")
        if self.type == PaletteType.CONTINUOUS:
            if len(self.colors) < 2:
                raise ValueError(f"Continuous palette '{self.name}' needs at least 2 color stops")
            bad = [c for c in self.colors if not _HEX_PATTERN.match(c)]
            if bad:
                raise ValueError(f"Continuous palette '{self.name}' has non-hex stops: {bad}")
        return self


# ============================================================================
# PALETTE REGISTRY
# ============================================================================

PALETTES: Dict[str, Palette] = {
    "default": Palette(
        name="default",
        colors=["#1f77b4", "#ff7f0e", "#2ca02c", "#d62728", "#9467bd", "#8c564b"],
        type=PaletteType.DISCRETE,
    ),
    "superrandom": Palette(
        name="superrandom",
        colors=[
            "#FF0000", "#00FF00", "#0000FF", "#FF00FF", "#FFA500", "#800080",
            "#FFFF00", "#A52A2A", "#FFC0CB", "#808080", "#00FFFF", "#008000",
            "#000080", "#800000", "#FFD700", "#808000", "#4682B4", "#D2691E",
            "#FF4500", "#DA70D6", "#ADFF2F", "#87CEEB",
        ],
        type=PaletteType.DISCRETE,
    ),
    "blues": Palette(
        name="blues",
        colors=["#deebf7", "#9ecae1", "#6baed6", "#4292c6", "#2171b5", "#08519c"],
        type=PaletteType.CONTINUOUS,
    ),
    "reds": Palette(
        name="reds",
        colors=["#fee5d9", "#fcae91", "#fb6a4a", "#de2d26", "#a50f15", "#67000d"],
        type=PaletteType.CONTINUOUS,
    ),
    "greens": Palette(
        name="greens",
        colors=["#e5f5e0", "#a1d99b", "#74c476", "#41ab5d", "#238b45", "#006d2c"],
        type=PaletteType.CONTINUOUS,
    ),
    # red -> orange -> yellow -> green
    "rog": Palette(
        name="rog",
        colors=["#FF0000", "#FF3300", "#FF6600", "#FF9900", "#FFCC00", "#8B8000", "#00CC00", "#00FF00"],
        type=PaletteType.CONTINUOUS,
    ),
    "redgreen": Palette(
        name="redgreen",
        colors=[
            "#FF0000", "#FF4500", "#FF8C00", "#FFA500", "#FFD700",
            "#ADFF2F", "#7FFF00", "#32CD32", "#228B22", "#008000",
        ],
        type=PaletteType.CONTINUOUS,
    ),
    "redwhite": Palette(
        name="redwhite",
        colors=["#FFEDA0", "#FED976", "#FEB24C", "#FD8D3C", "#FC4E2A", "#FF0000", "#E31A1C"],
        type=PaletteType.CONTINUOUS,
    ),
    "viridis": Palette(
        name="viridis",
        colors=["#440154", "#414487", "#2a788e", "#22a884", "#7ad151", "#fde725"],
        type=PaletteType.CONTINUOUS,
    ),
}


def get_palette(name: Optional[str] = None) -> Palette:
    """
    Look up a palette by name.

    None resolves to the configured default palette. Unknown names fall
    back to the 'default' discrete palette (logged, not raised).
    """
    if name is None:
        name = get_config().classification.default_palette
    palette = PALETTES.get(name)
    if palette is None:
        logger.warning(
            f"Unknown palette '{name}', falling back to '{ColorDefaults.FALLBACK_PALETTE}'"
        )
        palette = PALETTES[ColorDefaults.FALLBACK_PALETTE]
    return palette


def register_palette(
    name: str,
    colors: List[str],
    palette_type: PaletteType = PaletteType.DISCRETE
) -> Palette:
    """
    Add or replace a named palette.

    Raises:
        ConfigError: If the palette definition is invalid
    """
    try:
        palette = Palette(name=name, colors=list(colors), type=palette_type)
    except ValidationError as e:
        raise ConfigError(f"Invalid palette '{name}': {e}") from e
    PALETTES[name] = palette
    logger.info(f"Registered {palette.type.value} palette '{name}' with {len(palette.colors)} colors")
    return palette


# ============================================================================
# COLOR HELPERS
# ============================================================================

def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """
    '#RRGGBB' (or 'RRGGBB') -> (r, g, b).

    Raises:
        ValueError: If the string is not a 6-digit hex color
    """
    match = _HEX_PATTERN.match(hex_color)
    if not match:
        raise ValueError(f"Invalid hex color: {hex_color!r}")
    return tuple(int(part, 16) for part in match.groups())


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """(r, g, b) -> '#rrggbb', rounding half up and clamping to 0..255."""
    channels = [min(255, max(0, _round_half_up(c))) for c in (r, g, b)]
    return "#" + "".join(f"{c:02x}" for c in channels)


def interpolate_hex(color1: str, color2: str, ratio: float) -> str:
    """Linear RGB interpolation: ratio 0 -> color1, ratio 1 -> color2."""
    rgb1 = hex_to_rgb(color1)
    rgb2 = hex_to_rgb(color2)
    return rgb_to_hex(*(a * (1 - ratio) + b * ratio for a, b in zip(rgb1, rgb2)))


# ============================================================================
# COLOR GENERATOR
# ============================================================================

class ColorGenerator:
    """
    Draws colors from a named palette.

    Discrete palettes: next() cycles through the colors.
    Continuous palettes: next() walks the stops (t = i / (n - 1)); draws
    past the last stop keep returning the last color.
    """

    def __init__(self, palette_name: Optional[str] = None):
        self.palette = get_palette(palette_name)
        self.current_index = 0

    @property
    def is_continuous(self) -> bool:
        return self.palette.type == PaletteType.CONTINUOUS

    def interpolate(self, t: float) -> str:
        """
        Color at position t in [0, 1] of a continuous palette.

        t is clamped to [0, 1].
        """
        colors = self.palette.colors
        t = max(0.0, min(1.0, t))
        n = len(colors) - 1
        i = min(int(math.floor(t * n)), n - 1)
        ratio = t * n - i
        return interpolate_hex(colors[i], colors[i + 1], ratio)

    def next(self) -> str:
        """Next color of the sequence."""
        colors = self.palette.colors
        if not self.is_continuous:
            color = colors[self.current_index]
            self.current_index = (self.current_index + 1) % len(colors)
            return color

        color = self.interpolate(self.current_index / (len(colors) - 1))
        self.current_index += 1
        return color

    def get_at(self, position: float) -> str:
        """
        Color at a position in [0, 1].

        Discrete palettes pick floor(position * n), clamped to the last color.
        """
        colors = self.palette.colors
        if not self.is_continuous:
            index = int(math.floor(position * len(colors)))
            return colors[max(0, min(index, len(colors) - 1))]
        return self.interpolate(position)

    def take(self, count: int) -> List[str]:
        """Next count colors of the sequence."""
        return [self.next() for _ in range(count)]

    def reset(self) -> None:
        """Restart the sequence."""
        self.current_index = 0
