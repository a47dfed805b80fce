"""
Color Classification.

Turns per-entity attribute values into a ColorAssignment (id -> color).

Strategies:
    classify_group: categorical, one palette color per distinct value in
        first-encounter order, cycling when values outnumber colors
    classify_scale: numeric, implicit bins with generated palette colors
    classify_bin_pairs: numeric, explicit (color, edge) pairs with
        left/right exclusivity (or categorical over the pair colors)
    classify: facade dispatching on ColorLogic and the options model

Classification never raises on data: ids whose value is not numeric are
omitted from numeric results and out-of-range values are clamped.
ConfigError is raised only for invalid static options.

Exports:
    to_number, classify_group, classify_scale, classify_bin_pairs, classify
"""

import json
import math
from typing import Any, Dict, Hashable, Iterable, Optional, Sequence, Union

from core.models.attributes import AttributeTable
from core.models.classification import (
    BinPairOptions,
    ColorAssignment,
    ColorBinPair,
    GroupOptions,
    ScaleOptions,
)
from core.models.enums import ColorLogic, ExclusiveType
from config import get_config
from exceptions import ConfigError
from util_logger import LoggerFactory, ComponentType
from .palettes import get_palette
from .scales import BinEdgeColorScale, ImplicitBinScale

logger = LoggerFactory.create_logger(ComponentType.CLASSIFIER, "ColorClassifier")


# ============================================================================
# VALUE HELPERS
# ============================================================================

def to_number(value: Any) -> Optional[float]:
    """
    Coerce an attribute value to a float, or None if it is not numeric.

    None, booleans, blank or non-numeric strings and NaN are not numeric.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number):
        return None
    return number


def _group_token(value: Any) -> Hashable:
    """Hashable stand-in for a grouping value (lists and dicts become canonical JSON)."""
    try:
        hash(value)
        return value
    except TypeError:
        return ("__json__", json.dumps(value, sort_keys=True, default=str))


def _numeric_values(table: AttributeTable, color_key: str) -> Dict[Any, float]:
    """id -> numeric value, skipping ids whose value is not numeric."""
    values = {}
    for record_id, record in table.items():
        number = to_number(record.get(color_key))
        if number is not None:
            values[record_id] = number
    return values


def _assign_by_first_encounter(table: AttributeTable, color_key: str, colors: Sequence[str]) -> ColorAssignment:
    """Bind colors[index mod len] to distinct values in table order."""
    value_colors: Dict[Hashable, str] = {}
    for record in table.values():
        token = _group_token(record.get(color_key))
        if token not in value_colors:
            value_colors[token] = colors[len(value_colors) % len(colors)]

    assignment = {
        record_id: value_colors[_group_token(record.get(color_key))]
        for record_id, record in table.items()
    }
    logger.debug(
        f"group '{color_key}': {len(value_colors)} distinct values, "
        f"{len(colors)} colors, {len(assignment)} ids"
    )
    return assignment


# ============================================================================
# STRATEGIES
# ============================================================================

def classify_group(
    table: AttributeTable,
    color_key: str,
    palette: Optional[str] = None,
    colors: Optional[Sequence[str]] = None
) -> ColorAssignment:
    """
    Categorical classification.

    Every id sharing a value at color_key gets the same color; distinct
    values take palette colors in first-encounter order, cycling when they
    outnumber the palette.

    Args:
        table: Attribute table
        color_key: Field holding the category
        palette: Palette name (configured default when None)
        colors: Explicit color list, overrides palette

    Returns:
        id -> color for every id in the table
    """
    if colors is not None:
        if not colors:
            raise ConfigError("Group classification needs at least one color")
        return _assign_by_first_encounter(table, color_key, list(colors))

    # Continuous palettes contribute their stops, cycled like a discrete list
    return _assign_by_first_encounter(table, color_key, list(get_palette(palette).colors))


def classify_scale(
    table: AttributeTable,
    color_key: str,
    bins: Optional[Sequence[float]] = None,
    palette: Optional[str] = None
) -> ColorAssignment:
    """
    Numeric classification over implicit bins.

    Args:
        table: Attribute table
        color_key: Field holding the number
        bins: Ordered bin edges (configured default when None)
        palette: Palette generating one color per bin

    Returns:
        id -> color for every id with a numeric value

    Raises:
        ConfigError: If fewer than 2 bin edges are given
    """
    if bins is None:
        bins = get_config().classification.default_bins
    scale = ImplicitBinScale(bins, palette)

    values = _numeric_values(table, color_key)
    assignment = {record_id: scale.color_for_value(value) for record_id, value in values.items()}
    logger.debug(
        f"scale '{color_key}': {len(assignment)} of {len(table)} ids numeric, "
        f"{len(scale.colors)} bins"
    )
    return assignment


def classify_bin_pairs(
    table: AttributeTable,
    color_key: str,
    color_bin_pairs: Iterable,
    exclusive: Union[ExclusiveType, str, None] = None,
    logic: ColorLogic = ColorLogic.SCALE
) -> ColorAssignment:
    """
    Classification with explicit (color, edge) pairs.

    SCALE logic: binary-search lookup per id; when every numeric value is
    identical the lookup runs once. GROUP logic: the pair colors (in
    supplied order) are cycled over distinct values.

    Raises:
        ConfigError: If fewer than 2 pairs are given or exclusive is invalid
    """
    if exclusive is None:
        exclusive = get_config().classification.default_exclusive
    pairs = list(color_bin_pairs)
    scale = BinEdgeColorScale(pairs, exclusive)

    if ColorLogic(logic) == ColorLogic.GROUP:
        # Supplied order, not edge order
        supplied_colors = [ColorBinPair.coerce(p).color for p in pairs]
        return _assign_by_first_encounter(table, color_key, supplied_colors)

    values = _numeric_values(table, color_key)
    if not values:
        return {}

    distinct = set(values.values())
    if len(distinct) == 1:
        color = scale.color_for_value(distinct.pop())
        return {record_id: color for record_id in values}

    assignment = {record_id: scale.color_for_value(value) for record_id, value in values.items()}
    logger.debug(
        f"bin pairs '{color_key}': {len(assignment)} of {len(table)} ids numeric, "
        f"{len(scale.colors)} pairs, {scale.exclusive.value} exclusive"
    )
    return assignment


# ============================================================================
# FACADE
# ============================================================================

def classify(
    table: AttributeTable,
    color_key: str,
    logic: Union[ColorLogic, str],
    options: Union[GroupOptions, ScaleOptions, BinPairOptions, None] = None
) -> ColorAssignment:
    """
    Classify with the strategy selected by logic and the options type.

    BinPairOptions selects explicit pairs under either logic; otherwise
    GROUP -> classify_group and SCALE -> classify_scale.
    """
    try:
        logic = ColorLogic(logic)
    except ValueError as e:
        raise ConfigError(f"Unknown color logic {logic!r}") from e

    if isinstance(options, BinPairOptions):
        return classify_bin_pairs(
            table, color_key, options.color_bin_pairs, options.exclusive, logic
        )
    if logic == ColorLogic.GROUP:
        options = options if isinstance(options, GroupOptions) else GroupOptions()
        return classify_group(table, color_key, palette=options.palette, colors=options.colors)

    options = options if isinstance(options, ScaleOptions) else ScaleOptions()
    return classify_scale(table, color_key, bins=options.bins, palette=options.palette)
