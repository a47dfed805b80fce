"""
Event Behavior Binding Models.

Declarative description of what each trigger does on an overlay.

Exports:
    EventBehaviorBinding: One behavior bound to a trigger
    EventsConfig: Ordered behavior lists per trigger
    LockedOn: Which triggers lock the overlay on the triggering feature
    PreventHoverOn: Which sticky click flags suppress hover restyling
"""

from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .enums import BehaviorType, TriggerType
from config.defaults import InteractionDefaults


class EventBehaviorBinding(BaseModel):
    """
    One behavior bound to a trigger.

    key is the attribute compared (highlight/style/filter) or handed out
    (drilldown). None means the overlay's primary key.

    Example:
        >>> EventBehaviorBinding(type="filter", key="province")
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    behavior: BehaviorType = Field(validation_alias=AliasChoices("behavior", "type"))
    key: Optional[str] = None

    def resolve_key(self, primary_key: str) -> str:
        """Attribute this binding reads, falling back to the primary key."""
        return self.key or primary_key


class EventsConfig(BaseModel):
    """
    Ordered behavior lists per trigger.

    Behaviors run in list order, so a later one observes state mutated by
    an earlier one in the same event.
    """

    model_config = ConfigDict(populate_by_name=True)

    click: List[EventBehaviorBinding] = Field(
        default_factory=lambda: [
            EventBehaviorBinding(behavior=BehaviorType.POPUP),
            EventBehaviorBinding(behavior=BehaviorType.HIGHLIGHT),
        ]
    )
    dblclick: List[EventBehaviorBinding] = Field(
        default_factory=list,
        validation_alias=AliasChoices("dblclick", "dbclick")
    )
    hover: List[EventBehaviorBinding] = Field(default_factory=list)

    def bindings_for(self, trigger: TriggerType) -> List[EventBehaviorBinding]:
        """Behavior list bound to a trigger."""
        if trigger == TriggerType.CLICK:
            return self.click
        if trigger == TriggerType.DBLCLICK:
            return self.dblclick
        return self.hover


class LockedOn(BaseModel):
    """Triggers that lock the overlay on the triggering feature."""

    model_config = ConfigDict(populate_by_name=True)

    click: bool = InteractionDefaults.LOCK_ON_CLICK
    dblclick: bool = Field(
        default=InteractionDefaults.LOCK_ON_DBLCLICK,
        validation_alias=AliasChoices("dblclick", "dbclick")
    )


class PreventHoverOn(BaseModel):
    """Sticky click flags that suppress hover restyling."""

    model_config = ConfigDict(populate_by_name=True)

    click: bool = InteractionDefaults.PREVENT_HOVER_ON_CLICK
    dblclick: bool = Field(
        default=InteractionDefaults.PREVENT_HOVER_ON_DBLCLICK,
        validation_alias=AliasChoices("dblclick", "dbclick")
    )
