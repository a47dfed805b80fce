"""
Interaction Configuration.

Provides configuration for:
    - Locking on click / double-click
    - Hover suppression after click / double-click
    - Popup isolation within a sibling group

Exports:
    InteractionConfig: Pydantic interaction configuration model
"""

import os
from pydantic import BaseModel, Field

from config.defaults import InteractionDefaults


def _env_flag(name: str, default: bool) -> bool:
    """Read a true/false environment flag."""
    return os.environ.get(name, str(default)).lower() == "true"


# ============================================================================
# INTERACTION CONFIGURATION
# ============================================================================

class InteractionConfig(BaseModel):
    """
    Default interaction behavior for overlays that do not configure their own.
    """

    lock_on_click: bool = Field(
        default=InteractionDefaults.LOCK_ON_CLICK,
        description="Lock the overlay on the clicked feature"
    )

    lock_on_dblclick: bool = Field(
        default=InteractionDefaults.LOCK_ON_DBLCLICK,
        description="Lock the overlay on the double-clicked feature"
    )

    prevent_hover_on_click: bool = Field(
        default=InteractionDefaults.PREVENT_HOVER_ON_CLICK,
        description="Suppress hover restyling once a feature was clicked"
    )

    prevent_hover_on_dblclick: bool = Field(
        default=InteractionDefaults.PREVENT_HOVER_ON_DBLCLICK,
        description="Suppress hover restyling once a feature was double-clicked"
    )

    isolate_popup: bool = Field(
        default=InteractionDefaults.ISOLATE_POPUP,
        description="Close sibling popups before opening a feature popup"
    )

    @classmethod
    def from_environment(cls):
        """Load from environment variables."""
        return cls(
            lock_on_click=_env_flag("OVERLAY_LOCK_ON_CLICK", InteractionDefaults.LOCK_ON_CLICK),
            lock_on_dblclick=_env_flag("OVERLAY_LOCK_ON_DBLCLICK", InteractionDefaults.LOCK_ON_DBLCLICK),
            prevent_hover_on_click=_env_flag(
                "OVERLAY_PREVENT_HOVER_ON_CLICK", InteractionDefaults.PREVENT_HOVER_ON_CLICK
            ),
            prevent_hover_on_dblclick=_env_flag(
                "OVERLAY_PREVENT_HOVER_ON_DBLCLICK", InteractionDefaults.PREVENT_HOVER_ON_DBLCLICK
            ),
            isolate_popup=_env_flag("OVERLAY_ISOLATE_POPUP", InteractionDefaults.ISOLATE_POPUP)
        )
