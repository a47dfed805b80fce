"""
Core Data Models Package.

Contains pure data structures without business logic.
All business logic is in the core.logic package.

Exports:
    Enums: TriggerType, MapEvent, BehaviorType, ColorLogic, ExclusiveType,
           PaletteType, DisplayType, LayerPhase
    Attributes: AttributeRecord, AttributeTable
    Classification: ColorBinPair, GroupOptions, ScaleOptions, BinPairOptions, ColorConfig
    Behavior: EventBehaviorBinding, EventsConfig, LockedOn, PreventHoverOn
    State: LayerState
    Overlay: DisplayConfig, OverlayConfig
"""

# Enums
from .enums import (
    TriggerType,
    MapEvent,
    BehaviorType,
    ColorLogic,
    ExclusiveType,
    PaletteType,
    DisplayType,
    LayerPhase
)

# Attribute table
from .attributes import (
    AttributeKey,
    AttributeRecord,
    AttributeTable
)

# Classification
from .classification import (
    ColorAssignment,
    ColorBinPair,
    GroupOptions,
    ScaleOptions,
    BinPairOptions,
    ColorConfig
)

# Behavior bindings
from .behavior import (
    EventBehaviorBinding,
    EventsConfig,
    LockedOn,
    PreventHoverOn
)

# State
from .state import LayerState

# Overlay configuration
from .overlay import (
    DisplayConfig,
    OverlayConfig
)

__all__ = [
    # Enums
    'TriggerType',
    'MapEvent',
    'BehaviorType',
    'ColorLogic',
    'ExclusiveType',
    'PaletteType',
    'DisplayType',
    'LayerPhase',

    # Attributes
    'AttributeKey',
    'AttributeRecord',
    'AttributeTable',

    # Classification
    'ColorAssignment',
    'ColorBinPair',
    'GroupOptions',
    'ScaleOptions',
    'BinPairOptions',
    'ColorConfig',

    # Behavior
    'EventBehaviorBinding',
    'EventsConfig',
    'LockedOn',
    'PreventHoverOn',

    # State
    'LayerState',

    # Overlay
    'DisplayConfig',
    'OverlayConfig',
]
