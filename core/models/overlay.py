"""
Overlay Configuration Models.

Static description of one overlay: which attribute identifies a feature,
how it is displayed, how it is colored and what its events do.
Callables (popup content, display filter, callbacks) live in
overlay.builder.OverlayCallbacks, not here.

Exports:
    DisplayConfig: Display type, locking, hover prevention, filter key
    OverlayConfig: Complete overlay configuration
"""

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .behavior import EventsConfig, LockedOn, PreventHoverOn
from .classification import ColorConfig
from .enums import DisplayType


class DisplayConfig(BaseModel):
    """
    Display settings of an overlay.

    locked_on / prevent_hover_on / isolate_popup left as None are taken
    from the interaction section of the application config.
    """

    model_config = ConfigDict(populate_by_name=True)

    type: DisplayType = DisplayType.SHAPE
    locked_on: Optional[LockedOn] = Field(
        default=None, validation_alias=AliasChoices("locked_on", "lockedOn")
    )
    prevent_hover_on: Optional[PreventHoverOn] = Field(
        default=None, validation_alias=AliasChoices("prevent_hover_on", "preventHoverOn")
    )
    isolate_popup: Optional[bool] = Field(
        default=None, validation_alias=AliasChoices("isolate_popup", "isolatePopup")
    )
    filter_key: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("filter_key", "filterKey")
    )


class OverlayConfig(BaseModel):
    """
    Complete overlay configuration.

    Example:
        {
            "id": "districts",
            "key": "district_code",
            "display": {"type": "shape", "locked_on": {"click": True}},
            "color": {"color_key": "region", "logic": "group"},
            "events": {"click": [{"type": "filter", "key": "region"},
                                 {"type": "highlight", "key": "region"}]}
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    key: str
    display: DisplayConfig = Field(
        default_factory=DisplayConfig,
        validation_alias=AliasChoices("display", "displayConfig")
    )
    color: Optional[ColorConfig] = None
    events: EventsConfig = Field(
        default_factory=EventsConfig,
        validation_alias=AliasChoices("events", "eventsConfig")
    )
