"""
Color Classification Models.

Defines schemas for:
- ColorBinPair (explicit color/bin-edge pair)
- Option bags for the three classification strategies
- ColorConfig (classification block of an overlay configuration)

Exports:
    ColorAssignment: Type alias for the id -> color result
    ColorBinPair: (color, edge) pair
    GroupOptions: Categorical classification options
    ScaleOptions: Implicit-bin numeric classification options
    BinPairOptions: Explicit color/bin-edge classification options
    ColorConfig: Overlay classification settings
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, Field, model_validator

from .enums import ColorLogic, ExclusiveType


ColorAssignment = Dict[Any, str]


class ColorBinPair(BaseModel):
    """
    A color bound to a numeric bin edge.

    Accepts tuples as well: ColorBinPair.coerce(("#ff0000", 5)).
    """

    color: str
    edge: float

    @classmethod
    def coerce(cls, value: Union["ColorBinPair", Tuple[str, float], Sequence[Any], Dict[str, Any]]) -> "ColorBinPair":
        """Build from a pair model, a (color, edge) tuple or a dict."""
        if isinstance(value, cls):
            return value
        if isinstance(value, dict):
            return cls(**value)
        color, edge = value
        return cls(color=color, edge=edge)


class GroupOptions(BaseModel):
    """
    Categorical classification options.

    colors overrides the palette when given; it is cycled as-is.
    """

    palette: Optional[str] = None
    colors: Optional[List[str]] = None


class ScaleOptions(BaseModel):
    """Implicit-bin numeric classification options."""

    bins: Optional[List[float]] = None
    palette: Optional[str] = None


class BinPairOptions(BaseModel):
    """Explicit color/bin-edge classification options."""

    color_bin_pairs: List[ColorBinPair]
    exclusive: ExclusiveType = ExclusiveType.RIGHT

    @model_validator(mode="before")
    @classmethod
    def coerce_pairs(cls, data: Any) -> Any:
        """Allow (color, edge) tuples in color_bin_pairs."""
        if isinstance(data, dict) and "color_bin_pairs" in data:
            data = dict(data)
            data["color_bin_pairs"] = [
                ColorBinPair.coerce(p) if isinstance(p, (tuple, list)) else p
                for p in data["color_bin_pairs"]
            ]
        return data


class ColorConfig(BaseModel):
    """
    Classification block of an overlay configuration.

    Example:
        {"color_key": "score", "logic": "scale", "bins": [0, 10, 20], "palette": "blues"}
        {"color_key": "score", "logic": "scale",
         "color_bin_pairs": [["#fee5d9", 0], ["#de2d26", 50]], "exclusive": "left"}
    """

    color_key: str
    logic: ColorLogic = ColorLogic.GROUP
    palette: Optional[str] = None
    bins: Optional[List[float]] = None
    colors: Optional[List[str]] = None
    color_bin_pairs: Optional[List[ColorBinPair]] = None
    exclusive: ExclusiveType = ExclusiveType.RIGHT

    @model_validator(mode="before")
    @classmethod
    def coerce_pairs(cls, data: Any) -> Any:
        """Allow (color, edge) tuples in color_bin_pairs."""
        if isinstance(data, dict) and data.get("color_bin_pairs"):
            data = dict(data)
            data["color_bin_pairs"] = [
                ColorBinPair.coerce(p) if isinstance(p, (tuple, list)) else p
                for p in data["color_bin_pairs"]
            ]
        return data

    def to_options(self) -> Union[GroupOptions, ScaleOptions, BinPairOptions]:
        """Option bag for the classifier facade."""
        if self.color_bin_pairs:
            return BinPairOptions(color_bin_pairs=self.color_bin_pairs, exclusive=self.exclusive)
        if self.logic == ColorLogic.SCALE:
            return ScaleOptions(bins=self.bins, palette=self.palette)
        return GroupOptions(palette=self.palette, colors=self.colors)
