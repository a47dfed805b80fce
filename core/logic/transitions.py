"""
Layer State Transition Logic.

Contains the interaction state machine of one overlay. Phases are derived
from LayerState (IDLE, CLICKED, LOCKED); the filtered flag is orthogonal
and cleared by the reset protocol before any click/dblclick re-applies
behaviors.

Exports:
    get_layer_phase: Derive the phase of a LayerState
    can_layer_transition: Check if a phase transition is valid
    next_layer_phase: Phase reached by a renderer event
    apply_click: Click transition (sets is_clicked, sets/clears lock)
    apply_double_click: Double-click transition (sets is_double_clicked, sets/clears lock)
    is_hover_suppressed: Shared mouseover/mouseout suppression predicate
    deselect: Map-level deselect (back to IDLE)

Dependencies:
    core.models.enums: LayerPhase, MapEvent
    core.models.state: LayerState
"""

from typing import Any

from ..models.enums import LayerPhase, MapEvent
from ..models.state import LayerState
from ..models.behavior import PreventHoverOn
from util_logger import LoggerFactory, ComponentType

logger = LoggerFactory.create_logger(ComponentType.STATE, "LayerStateMachine")


def get_layer_phase(state: LayerState) -> LayerPhase:
    """
    Derive the interaction phase of a layer state.

    A lock wins over the click flags.
    """
    if state.locked_on_id is not None:
        return LayerPhase.LOCKED
    if state.is_clicked or state.is_double_clicked:
        return LayerPhase.CLICKED
    return LayerPhase.IDLE


def can_layer_transition(current: LayerPhase, target: LayerPhase) -> bool:
    """
    Check if a layer can move from current to target phase.

    Args:
        current: Current layer phase
        target: Target layer phase

    Returns:
        True if transition is valid, False otherwise
    """
    # Same phase is always allowed (no-op)
    if current == target:
        return True

    transitions = {
        LayerPhase.IDLE: [LayerPhase.CLICKED, LayerPhase.LOCKED],
        LayerPhase.CLICKED: [LayerPhase.LOCKED, LayerPhase.IDLE],
        LayerPhase.LOCKED: [LayerPhase.CLICKED, LayerPhase.IDLE],
    }

    return target in transitions.get(current, [])


def next_layer_phase(current: LayerPhase, event: MapEvent, lock: bool) -> LayerPhase:
    """
    Phase reached after a renderer event on a geometry.

    Args:
        current: Current layer phase
        event: Event delivered by the renderer
        lock: Whether this event type is configured to lock

    Returns:
        The resulting phase (hover events never change it)
    """
    if event in (MapEvent.CLICK, MapEvent.DBLCLICK):
        return LayerPhase.LOCKED if lock else LayerPhase.CLICKED
    return current


def apply_click(state: LayerState, feature_id: Any, lock: bool) -> LayerState:
    """
    Click transition.

    Sets is_clicked; locks on feature_id when lock is configured,
    otherwise clears any previous lock.
    """
    state.is_clicked = True
    state.locked_on_id = feature_id if lock else None
    logger.debug(f"click on {feature_id!r} -> {get_layer_phase(state).value}")
    return state


def apply_double_click(state: LayerState, feature_id: Any, lock: bool) -> LayerState:
    """
    Double-click transition.

    Same rule as apply_click against the independent is_double_clicked flag.
    """
    state.is_double_clicked = True
    state.locked_on_id = feature_id if lock else None
    logger.debug(f"dblclick on {feature_id!r} -> {get_layer_phase(state).value}")
    return state


def is_hover_suppressed(state: LayerState, prevent_hover_on: PreventHoverOn) -> bool:
    """
    Whether mouseover/mouseout must be ignored.

    True when a sticky click, a sticky double-click or a lock is active.
    Evaluated identically for both hover events.
    """
    return (
        (state.is_clicked and prevent_hover_on.click)
        or (state.is_double_clicked and prevent_hover_on.dblclick)
        or state.locked_on_id is not None
    )


def deselect(state: LayerState) -> LayerState:
    """
    Map-level deselect: clear click flags and lock.

    Filtered geometries are restored by the reset protocol, which needs
    the sibling group and therefore lives in overlay.behavior.
    """
    state.is_clicked = False
    state.is_double_clicked = False
    state.locked_on_id = None
    logger.debug("deselect -> idle")
    return state
