"""
Exhaustive layer state machine tests.

Anti-overfitting: Every (current, target) phase pair and every
(phase, event, lock) combination is tested.
"""

import pytest

from core.models.behavior import PreventHoverOn
from core.models.enums import LayerPhase, MapEvent
from core.models.state import LayerState
from core.logic.transitions import (
    apply_click,
    apply_double_click,
    can_layer_transition,
    deselect,
    get_layer_phase,
    is_hover_suppressed,
    next_layer_phase,
)


# ============================================================================
# DATA: Expected transition map (source of truth for tests)
# ============================================================================

_LAYER_TRANSITIONS = {
    LayerPhase.IDLE: {LayerPhase.CLICKED, LayerPhase.LOCKED},
    LayerPhase.CLICKED: {LayerPhase.LOCKED, LayerPhase.IDLE},
    LayerPhase.LOCKED: {LayerPhase.CLICKED, LayerPhase.IDLE},
}

ALL_PHASES = list(LayerPhase)
ALL_EVENTS = list(MapEvent)

_PHASE_PAIRS = [(current, target) for current in ALL_PHASES for target in ALL_PHASES]
_EVENT_CASES = [
    (phase, event, lock) for phase in ALL_PHASES for event in ALL_EVENTS for lock in (True, False)
]


def _expected_transition(current: LayerPhase, target: LayerPhase) -> bool:
    if current == target:
        return True
    return target in _LAYER_TRANSITIONS[current]


def _expected_next(phase: LayerPhase, event: MapEvent, lock: bool) -> LayerPhase:
    if event in (MapEvent.CLICK, MapEvent.DBLCLICK):
        return LayerPhase.LOCKED if lock else LayerPhase.CLICKED
    return phase


# ============================================================================
# TestLayerTransitionsExhaustive
# ============================================================================

class TestLayerTransitionsExhaustive:
    """Exhaustive tests for can_layer_transition() and next_layer_phase()."""

    @pytest.mark.parametrize("current,target", _PHASE_PAIRS,
                             ids=[f"{c.value}->{t.value}" for c, t in _PHASE_PAIRS])
    def test_transition_pair(self, current, target):
        expected = _expected_transition(current, target)
        result = can_layer_transition(current, target)
        assert result == expected, (
            f"can_layer_transition({current.value}, {target.value}) "
            f"returned {result}, expected {expected}"
        )

    @pytest.mark.parametrize("phase,event,lock", _EVENT_CASES,
                             ids=[f"{p.value}-{e.value}-{'lock' if l else 'nolock'}" for p, e, l in _EVENT_CASES])
    def test_next_phase(self, phase, event, lock):
        assert next_layer_phase(phase, event, lock) == _expected_next(phase, event, lock)

    @pytest.mark.parametrize("phase,event,lock", _EVENT_CASES,
                             ids=[f"{p.value}-{e.value}-{'lock' if l else 'nolock'}" for p, e, l in _EVENT_CASES])
    def test_next_phase_is_always_a_valid_transition(self, phase, event, lock):
        assert can_layer_transition(phase, next_layer_phase(phase, event, lock)) is True

    def test_no_terminal_phase(self):
        for phase in ALL_PHASES:
            assert any(can_layer_transition(phase, t) for t in ALL_PHASES if t != phase)


# ============================================================================
# TestClickTransitions
# ============================================================================

class TestClickTransitions:

    def test_fresh_state_is_idle(self):
        assert get_layer_phase(LayerState()) == LayerPhase.IDLE

    def test_click_with_lock(self):
        state = apply_click(LayerState(), "A", lock=True)
        assert state.is_clicked is True
        assert state.locked_on_id == "A"
        assert get_layer_phase(state) == LayerPhase.LOCKED

    def test_click_without_lock_clears_previous_lock(self):
        state = LayerState(locked_on_id="A")
        apply_click(state, "B", lock=False)
        assert state.locked_on_id is None
        assert get_layer_phase(state) == LayerPhase.CLICKED

    def test_double_click_uses_independent_flag(self):
        state = apply_double_click(LayerState(), "A", lock=False)
        assert state.is_double_clicked is True
        assert state.is_clicked is False
        assert get_layer_phase(state) == LayerPhase.CLICKED

    def test_double_click_with_lock(self):
        state = apply_double_click(LayerState(), "C", lock=True)
        assert state.locked_on_id == "C"

    def test_deselect_returns_to_idle(self):
        state = apply_double_click(apply_click(LayerState(), "A", lock=True), "A", lock=False)
        deselect(state)
        assert get_layer_phase(state) == LayerPhase.IDLE
        assert not state.is_clicked and not state.is_double_clicked

    def test_lock_wins_over_flags(self):
        assert get_layer_phase(LayerState(locked_on_id=0)) == LayerPhase.LOCKED


# ============================================================================
# TestHoverSuppression
# ============================================================================

_FLAG_CASES = [
    (clicked, dbl, locked, p_click, p_dbl)
    for clicked in (False, True)
    for dbl in (False, True)
    for locked in (False, True)
    for p_click in (False, True)
    for p_dbl in (False, True)
]


class TestHoverSuppression:

    @pytest.mark.parametrize("clicked,dbl,locked,p_click,p_dbl", _FLAG_CASES)
    def test_predicate_grid(self, clicked, dbl, locked, p_click, p_dbl):
        state = LayerState(is_clicked=clicked, is_double_clicked=dbl, locked_on_id="X" if locked else None)
        prevent = PreventHoverOn(click=p_click, dblclick=p_dbl)
        expected = (clicked and p_click) or (dbl and p_dbl) or locked
        assert is_hover_suppressed(state, prevent) == expected

    def test_falsy_lock_id_still_suppresses(self):
        assert is_hover_suppressed(LayerState(locked_on_id=0), PreventHoverOn()) is True


# ============================================================================
# TestFilteredCollection
# ============================================================================

class TestFilteredCollection:

    def test_add_filtered_deduplicates_by_identity(self):
        state = LayerState()
        geometry = object()
        state.add_filtered(geometry)
        state.add_filtered(geometry)
        assert state.filtered_out == [geometry]
        assert state.is_filtered

    def test_equal_but_distinct_geometries_both_kept(self):
        state = LayerState()
        state.add_filtered({"id": 1})
        state.add_filtered({"id": 1})
        assert len(state.filtered_out) == 2

    def test_drain_clears(self):
        state = LayerState()
        state.add_filtered("g")
        assert state.drain_filtered() == ["g"]
        assert state.filtered_out == []
        assert not state.is_filtered
