"""
Color Classification Configuration.

Provides configuration for:
    - Default palette name for generated colors
    - Default implicit bin edges for scale classification
    - Default exclusivity policy for explicit color/bin-edge pairs

Exports:
    ClassificationConfig: Pydantic classification configuration model
"""

import os
from typing import List, Literal

from pydantic import BaseModel, Field, field_validator

from config.defaults import ColorDefaults


# ============================================================================
# CLASSIFICATION CONFIGURATION
# ============================================================================

class ClassificationConfig(BaseModel):
    """
    Color classification defaults used when a caller omits options.
    """

    default_palette: str = Field(
        default=ColorDefaults.PALETTE,
        description="Palette used when a classification call names none",
        examples=["viridis", "default", "blues"]
    )

    default_bins: List[float] = Field(
        default_factory=lambda: list(ColorDefaults.BINS),
        description="Implicit bin edges for scale classification (ascending, at least 2)",
        examples=[[0, 1, 2, 3, 4, 5], [0, 10, 100]]
    )

    default_exclusive: Literal["left", "right"] = Field(
        default=ColorDefaults.EXCLUSIVE,
        description="Which side of an explicit bin is open"
    )

    @field_validator('default_bins')
    @classmethod
    def validate_bins(cls, v: List[float]) -> List[float]:
        """Require at least two ascending edges."""
        if len(v) < 2:
            raise ValueError("default_bins needs at least 2 edges")
        if any(prev > nxt for prev, nxt in zip(v, v[1:])):
            raise ValueError(f"default_bins must be ascending, got {v}")
        return v

    @classmethod
    def from_environment(cls):
        """Load from environment variables."""
        raw_bins = os.environ.get("OVERLAY_DEFAULT_BINS")
        bins = (
            [float(part) for part in raw_bins.split(",") if part.strip()]
            if raw_bins else list(ColorDefaults.BINS)
        )
        return cls(
            default_palette=os.environ.get("OVERLAY_DEFAULT_PALETTE", ColorDefaults.PALETTE),
            default_bins=bins,
            default_exclusive=os.environ.get("OVERLAY_DEFAULT_EXCLUSIVE", ColorDefaults.EXCLUSIVE).lower()
        )
