"""
Pure Enumeration Types for the Overlay Engine.

Defines triggers, behaviors, classification modes and layer phases.
No business logic - pure type definitions only.

Exports:
    TriggerType: Declarative event trigger for behavior bindings
    MapEvent: Raw event names delivered by the renderer
    BehaviorType: Effect produced by a bound event
    ColorLogic: Classification semantics (group vs scale)
    ExclusiveType: Open side of an explicit color/bin-edge interval
    PaletteType: Discrete vs continuous palette
    DisplayType: How overlay geometries are drawn
    LayerPhase: Derived interaction phase of an overlay
"""

from enum import Enum


class TriggerType(str, Enum):
    """
    Triggers a behavior list can be bound to.

    HOVER covers both mouseover (behaviors run) and mouseout (reset).
    """

    CLICK = "click"
    DBLCLICK = "dblclick"
    HOVER = "hover"


class MapEvent(str, Enum):
    """Events the renderer forwards for a geometry."""

    CLICK = "click"
    DBLCLICK = "dblclick"
    MOUSEOVER = "mouseover"
    MOUSEOUT = "mouseout"


class BehaviorType(str, Enum):
    """
    Effects an event binding can produce.

    - HIGHLIGHT: restyle siblings sharing the trigger's value (lock aware)
    - STYLE: restyle matching siblings with a custom style
    - VIEW: hand the trigger's record to the view callback
    - POPUP: open the trigger's popup (optionally closing siblings)
    - DRILLDOWN: hand the trigger's key value to the drilldown callback
    - FILTER: move non-matching siblings out of the group
    """

    HIGHLIGHT = "highlight"
    STYLE = "style"
    VIEW = "view"
    POPUP = "popup"
    DRILLDOWN = "drilldown"
    FILTER = "filter"


class ColorLogic(str, Enum):
    """Classification semantics."""

    GROUP = "group"  # Categorical: one color per distinct value
    SCALE = "scale"  # Numeric: one color per bin


class ExclusiveType(str, Enum):
    """
    Open side of explicit bin intervals.

    RIGHT: bin i owns [edge_i, edge_i+1)
    LEFT:  bin i owns (edge_i, edge_i+1]
    """

    LEFT = "left"
    RIGHT = "right"


class PaletteType(str, Enum):
    """Palette kinds served by the palette provider."""

    DISCRETE = "discrete"      # Cyclic color sequence
    CONTINUOUS = "continuous"  # Interpolated over [0, 1]


class DisplayType(str, Enum):
    """
    How overlay geometries are drawn.

    MARKER, TEXT and BUFFER need point geometries; polygons are reduced
    to a label point before rendering.
    """

    MARKER = "marker"
    TEXT = "text"
    SHAPE = "shape"
    BUFFER = "buffer"


class LayerPhase(str, Enum):
    """
    Interaction phase of one overlay, derived from its LayerState.

    State transitions:
    - IDLE -> CLICKED (click/dblclick without lock)
    - IDLE -> LOCKED (click/dblclick with lock configured)
    - CLICKED <-> LOCKED (subsequent click/dblclick)
    - any -> IDLE (map-level deselect)
    """

    IDLE = "idle"
    CLICKED = "clicked"
    LOCKED = "locked"
