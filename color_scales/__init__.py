"""
Color Classification Engine.

Turns attribute values into stable per-id colors.

Exports:
    Palettes: Palette, PALETTES, get_palette, register_palette, ColorGenerator,
              hex_to_rgb, rgb_to_hex, interpolate_hex
    Scales: ColorScale, ImplicitBinScale, BinEdgeColorScale
    Classifiers: classify, classify_group, classify_scale, classify_bin_pairs, to_number
    Legend: LegendItem, legend_from_assignment, legend_from_bins, legend_from_bin_pairs
"""

from .palettes import (
    Palette,
    PALETTES,
    get_palette,
    register_palette,
    hex_to_rgb,
    rgb_to_hex,
    interpolate_hex,
    ColorGenerator
)
from .scales import ColorScale, ImplicitBinScale, BinEdgeColorScale
from .classifier import (
    to_number,
    classify,
    classify_group,
    classify_scale,
    classify_bin_pairs
)
from .legend import (
    LegendItem,
    legend_from_assignment,
    legend_from_bins,
    legend_from_bin_pairs
)

__all__ = [
    'Palette',
    'PALETTES',
    'get_palette',
    'register_palette',
    'hex_to_rgb',
    'rgb_to_hex',
    'interpolate_hex',
    'ColorGenerator',
    'ColorScale',
    'ImplicitBinScale',
    'BinEdgeColorScale',
    'to_number',
    'classify',
    'classify_group',
    'classify_scale',
    'classify_bin_pairs',
    'LegendItem',
    'legend_from_assignment',
    'legend_from_bins',
    'legend_from_bin_pairs',
]
