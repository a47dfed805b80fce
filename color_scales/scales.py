"""
Numeric Color Scales.

Two interchangeable strategies mapping a number to a color:

- ImplicitBinScale: ordered bin edges with one generated palette color per
  adjacent pair. A value belongs to the lowest bin whose closed interval
  [edge_i, edge_i+1] contains it; values outside every bin fall back to
  the first bin.
- BinEdgeColorScale: caller-supplied (color, edge) pairs sorted by edge,
  looked up by binary search with a left/right exclusivity policy and
  clamping outside the edge range.

The two deliberately keep their own edge semantics.

Exports:
    ColorScale: Strategy interface
    ImplicitBinScale: Generated-palette bins
    BinEdgeColorScale: Explicit color/bin-edge pairs
"""

import math
from abc import ABC, abstractmethod
from bisect import bisect_left, bisect_right
from typing import Iterable, List, Optional, Sequence

from pydantic import ValidationError

from core.models.classification import ColorBinPair
from core.models.enums import ExclusiveType
from exceptions import ConfigError
from .palettes import ColorGenerator


class ColorScale(ABC):
    """Maps a numeric value to a color."""

    @property
    @abstractmethod
    def edges(self) -> List[float]:
        """Bin edges in lookup order."""

    @property
    @abstractmethod
    def colors(self) -> List[str]:
        """Color per bin, aligned with bin indices."""

    @abstractmethod
    def bin_index(self, value: float) -> int:
        """Index of the bin that owns value."""

    def color_for_value(self, value: float) -> str:
        return self.colors[self.bin_index(value)]


# ============================================================================
# IMPLICIT BINS (generated palette)
# ============================================================================

def _bin_colors(generator: ColorGenerator, count: int) -> List[str]:
    """
    One color per bin.

    Continuous palettes with fewer stops than bins are sampled evenly over
    [0, 1] so no two bins share the last stop.
    """
    stops = len(generator.palette.colors)
    if generator.is_continuous and count > stops:
        return [generator.get_at(i / (count - 1)) for i in range(count)]
    return generator.take(count)


class ImplicitBinScale(ColorScale):
    """
    Ordered bin edges with generated colors.

    Bin i spans [bins[i], bins[i+1]], both ends inclusive. A value on a
    shared edge belongs to the lower bin because bins are scanned in order.
    """

    def __init__(self, bins: Sequence[float], palette_name: Optional[str] = None):
        if len(bins) < 2:
            raise ConfigError(f"At least 2 bin edges are required, got {len(bins)}")
        self._edges = [float(b) for b in bins]
        self._colors = _bin_colors(ColorGenerator(palette_name), len(self._edges) - 1)

    @property
    def edges(self) -> List[float]:
        return list(self._edges)

    @property
    def colors(self) -> List[str]:
        return list(self._colors)

    def find_bin(self, value: float) -> int:
        """
        Lowest i with bins[i] <= value <= bins[i+1].

        Falls back to 0 when no bin contains value.
        """
        for i in range(len(self._edges) - 1):
            if self._edges[i] <= value <= self._edges[i + 1]:
                return i
        return 0

    def bin_index(self, value: float) -> int:
        return self.find_bin(value)


# ============================================================================
# EXPLICIT COLOR / BIN-EDGE PAIRS
# ============================================================================

class BinEdgeColorScale(ColorScale):
    """
    Caller-supplied (color, edge) pairs.

    right exclusive (default): bin i owns [edge_i, edge_i+1);
        value < edge_0 -> first color, value >= edge_last -> last color.
    left exclusive: bin i owns (edge_i, edge_i+1];
        value <= edge_0 -> first color, value > edge_last -> last color.

    Example:
        >>> scale = BinEdgeColorScale([("#c0", 0), ("#c1", 5), ("#c2", 10)])
        >>> scale.color_for_value(5)
        '#c1'
        >>> BinEdgeColorScale([("#c0", 0), ("#c1", 5), ("#c2", 10)], "left").color_for_value(5)
        '#c0'
    """

    def __init__(self, color_bin_pairs: Iterable, exclusive: ExclusiveType = ExclusiveType.RIGHT):
        try:
            pairs = [ColorBinPair.coerce(p) for p in color_bin_pairs]
        except (ValidationError, TypeError, ValueError) as e:
            raise ConfigError(f"Invalid color-bin pair: {e}") from e

        if len(pairs) < 2:
            raise ConfigError(f"At least 2 color-bin pairs are required, got {len(pairs)}")
        if any(math.isnan(p.edge) for p in pairs):
            raise ConfigError("Color-bin pair edges must be numbers, got NaN")

        try:
            self.exclusive = ExclusiveType(exclusive)
        except ValueError as e:
            raise ConfigError(f"Exclusive must be 'left' or 'right', got {exclusive!r}") from e

        # Stable sort: equal edges keep their supplied order
        self.pairs = sorted(pairs, key=lambda p: p.edge)
        self._edges = [p.edge for p in self.pairs]
        self._colors = [p.color for p in self.pairs]

    @property
    def edges(self) -> List[float]:
        return list(self._edges)

    @property
    def colors(self) -> List[str]:
        return list(self._colors)

    def bin_index(self, value: float) -> int:
        """Binary search, O(log n) in the number of pairs."""
        if self.exclusive == ExclusiveType.LEFT:
            index = bisect_left(self._edges, value) - 1
        else:
            index = bisect_right(self._edges, value) - 1
        return max(0, min(index, len(self._edges) - 1))

    def linear_index(self, value: float) -> int:
        """Reference linear scan; must agree with bin_index for every value."""
        edges = self._edges
        last = len(edges) - 1
        if self.exclusive == ExclusiveType.LEFT:
            if value <= edges[0]:
                return 0
            if value > edges[last]:
                return last
            for i in range(last):
                if edges[i] < value <= edges[i + 1]:
                    return i
        else:
            if value < edges[0]:
                return 0
            if value >= edges[last]:
                return last
            for i in range(last):
                if edges[i] <= value < edges[i + 1]:
                    return i
        return 0

    def linear_lookup(self, value: float) -> str:
        return self._colors[self.linear_index(value)]
