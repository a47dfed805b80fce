"""
Legend Derivation.

Builds ordered legend entries from classification results so a legend
panel can be rendered by the host UI. Rendering itself is not done here.

Exports:
    LegendItem: One legend row (color swatch + label)
    legend_from_assignment: Rows for a categorical assignment
    legend_from_bins: Rows for implicit bins
    legend_from_bin_pairs: Rows for explicit color/bin-edge pairs
"""

import json
from typing import Any, List, Optional, Sequence

from pydantic import BaseModel

from core.models.attributes import AttributeTable
from core.models.classification import ColorAssignment
from core.models.enums import ExclusiveType
from .scales import BinEdgeColorScale


class LegendItem(BaseModel):
    """One legend row."""

    color: str
    label: str
    value: Optional[Any] = None


def _format_edge(edge: float) -> str:
    """5.0 -> '5', 2.5 -> '2.5'."""
    if float(edge).is_integer():
        return str(int(edge))
    return str(edge)


def _label_for(value: Any) -> str:
    if value is None:
        return "No data"
    if isinstance(value, (list, dict)):
        return json.dumps(value, sort_keys=True, default=str)
    return str(value)


def legend_from_assignment(
    table: AttributeTable,
    color_key: str,
    assignment: ColorAssignment
) -> List[LegendItem]:
    """
    One row per distinct value, in table order.

    Only ids present in the assignment contribute, so numeric assignments
    that omitted non-numeric ids do not produce rows for them.
    """
    items: List[LegendItem] = []
    seen = set()
    for record_id, record in table.items():
        color = assignment.get(record_id)
        if color is None:
            continue
        value = record.get(color_key)
        label = _label_for(value)
        if (label, color) in seen:
            continue
        seen.add((label, color))
        items.append(LegendItem(color=color, label=label, value=value))
    return items


def legend_from_bins(bins: Sequence[float], colors: Sequence[str]) -> List[LegendItem]:
    """Rows 'lo - hi' for implicit bins; value is the lower edge."""
    return [
        LegendItem(color=color, label=f"{_format_edge(lo)} - {_format_edge(hi)}", value=lo)
        for lo, hi, color in zip(bins, bins[1:], colors)
    ]


def legend_from_bin_pairs(scale: BinEdgeColorScale) -> List[LegendItem]:
    """
    Rows for explicit pairs, in edge order.

    The last pair owns everything past the last edge, so its label is open
    ended: '>= edge' for right exclusivity, '> edge' for left.
    """
    edges = scale.edges
    colors = scale.colors
    items = []
    for i, (edge, color) in enumerate(zip(edges, colors)):
        if i == len(edges) - 1:
            op = ">" if scale.exclusive == ExclusiveType.LEFT else ">="
            label = f"{op} {_format_edge(edge)}"
        else:
            label = f"{_format_edge(edge)} - {_format_edge(edges[i + 1])}"
        items.append(LegendItem(color=color, label=label, value=edge))
    return items
