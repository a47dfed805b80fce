"""
Behavior Engine.

Interprets event behavior bindings against the attribute table, the
overlay's LayerState and the live sibling group.

The engine itself holds no mutable state: the LayerState is passed into
every dispatch and returned from it (mutated in place). Dispatch goes
through a table keyed by BehaviorType that is checked for completeness
when the engine is built.

Behaviors:
    highlight: Restyle siblings matching the trigger's value (lock aware)
    style: Same matching, caller-supplied style, lock ignored
    view: view_callback(record)
    popup: Open the trigger's popup, optionally closing sibling popups
    drilldown: drilldown_callback(record[key])
    filter: Move non-matching siblings out of the group into state

Exports:
    BehaviorOptions: Styles, popup isolation and callbacks
    BehaviorEngine: Enum-keyed behavior dispatcher
    create_behavior_handler: Curried binding -> (feature, geometry, group) form
    reset_layer: Reset protocol (restore filtered geometries and styles)

Dependencies:
    core.models: AttributeTable, BehaviorType, EventBehaviorBinding, LayerState
    overlay.geometry: GeometryRef, SiblingGroup
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from config.defaults import StyleDefaults
from core.models.attributes import AttributeRecord, AttributeTable
from core.models.behavior import EventBehaviorBinding
from core.models.enums import BehaviorType
from core.models.state import LayerState
from exceptions import ContractViolationError
from util_logger import LoggerFactory, ComponentType
from .geometry import GeometryRef, SiblingGroup

logger = LoggerFactory.create_logger(ComponentType.BEHAVIOR, "BehaviorEngine")


@dataclass
class BehaviorOptions:
    """
    Styles and callbacks used by the behaviors.

    style_default is merged into non-matching geometries, so the empty
    default leaves their classification style untouched. style is the
    custom style of the 'style' behavior; None falls back to style_highlight.
    """

    style_highlight: Dict[str, Any] = field(
        default_factory=lambda: dict(StyleDefaults.CHOROPLETH_HIGHLIGHT)
    )
    style_semi_highlight: Dict[str, Any] = field(
        default_factory=lambda: dict(StyleDefaults.CHOROPLETH_SEMI_HIGHLIGHT)
    )
    style_default: Dict[str, Any] = field(default_factory=dict)
    style: Optional[Dict[str, Any]] = None
    isolate_popup: bool = True
    view_callback: Optional[Callable[[AttributeRecord], None]] = None
    drilldown_callback: Optional[Callable[[Any], None]] = None


def _properties(feature: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    if not feature:
        return {}
    return feature.get("properties") or {}


# ============================================================================
# ENGINE
# ============================================================================

class BehaviorEngine:
    """
    Enum-keyed behavior dispatcher for one overlay.

    Args:
        table: Attribute table shared (read-only) with the classifier
        primary_key: Feature property joining a geometry to its record
        options: Styles, popup isolation and callbacks

    Example:
        engine = BehaviorEngine(table, "district_code")
        binding = EventBehaviorBinding(type="highlight", key="region")
        state = engine.dispatch(binding, layer.feature, layer, group, state)
    """

    def __init__(self, table: AttributeTable, primary_key: str, options: Optional[BehaviorOptions] = None):
        self.table = table
        self.primary_key = primary_key
        self.options = options or BehaviorOptions()

        self._handlers = {
            BehaviorType.HIGHLIGHT: self._highlight,
            BehaviorType.STYLE: self._style,
            BehaviorType.VIEW: self._view,
            BehaviorType.POPUP: self._popup,
            BehaviorType.DRILLDOWN: self._drilldown,
            BehaviorType.FILTER: self._filter,
        }
        missing = [b.value for b in BehaviorType if b not in self._handlers]
        if missing:
            raise ContractViolationError(f"No handler registered for behaviors: {missing}")

    def record_for(self, feature: Optional[Dict[str, Any]]) -> Optional[AttributeRecord]:
        """Attribute record joined to a feature, or None."""
        return self.table.lookup(_properties(feature).get(self.primary_key))

    def dispatch(
        self,
        binding: EventBehaviorBinding,
        feature: Dict[str, Any],
        geometry: GeometryRef,
        group: SiblingGroup,
        state: LayerState
    ) -> LayerState:
        """
        Run one bound behavior for the triggering geometry.

        Returns:
            The same LayerState, mutated by the behavior

        Raises:
            ContractViolationError: If binding.behavior is not a BehaviorType
        """
        behavior = getattr(binding, "behavior", None)
        if not isinstance(behavior, BehaviorType):
            raise ContractViolationError(
                f"Binding behavior must be a BehaviorType, got {type(behavior).__name__}: {behavior!r}"
            )

        key = binding.resolve_key(self.primary_key)
        record = self.record_for(feature)
        logger.debug(
            f"{behavior.value} on {_properties(feature).get(self.primary_key)!r} (key={key})"
        )
        self._handlers[behavior](key, record, geometry, group, state)
        return state

    # ------------------------------------------------------------------------
    # Matching
    # ------------------------------------------------------------------------

    def _match_style_function(
        self,
        key: str,
        record: Optional[AttributeRecord],
        state: Optional[LayerState],
        match_style: Dict[str, Any]
    ) -> Callable[[Dict[str, Any]], Dict[str, Any]]:
        """
        Style function comparing each sibling to the trigger at key.

        With a state, a lock wins: the locked sibling is highlighted and
        other matches get the semi-highlight.
        """
        options = self.options

        def style_for(sibling_feature: Dict[str, Any]) -> Dict[str, Any]:
            sibling_id = _properties(sibling_feature).get(self.primary_key)
            sibling_record = self.table.lookup(sibling_id)
            if record is None or sibling_record is None:
                return options.style_default
            if state is not None:
                if state.is_locked and sibling_id == state.locked_on_id:
                    return options.style_highlight
                if sibling_record.get(key) == record.get(key):
                    return options.style_semi_highlight if state.is_locked else match_style
                return options.style_default
            if sibling_record.get(key) == record.get(key):
                return match_style
            return options.style_default

        return style_for

    # ------------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------------

    def _highlight(self, key, record, geometry, group, state):
        group.set_style(
            self._match_style_function(key, record, state, self.options.style_highlight)
        )

    def _style(self, key, record, geometry, group, state):
        custom = self.options.style if self.options.style is not None else self.options.style_highlight
        group.set_style(self._match_style_function(key, record, None, custom))

    def _view(self, key, record, geometry, group, state):
        if record is not None and self.options.view_callback is not None:
            self.options.view_callback(record)

    def _popup(self, key, record, geometry, group, state):
        if self.options.isolate_popup:
            own_id = group.get_layer_id(geometry)
            for sibling in group.get_layers():
                if group.get_layer_id(sibling) != own_id:
                    sibling.close_popup()
        geometry.open_popup()

    def _drilldown(self, key, record, geometry, group, state):
        if record is not None and self.options.drilldown_callback is not None:
            self.options.drilldown_callback(record.get(key))

    def _filter(self, key, record, geometry, group, state):
        if record is None:
            return
        removed = 0
        for sibling in group.get_layers():
            sibling_record = self.record_for(sibling.feature)
            # Siblings without a record are not filterable
            if sibling_record is None:
                continue
            if sibling_record.get(key) != record.get(key):
                group.remove_layer(sibling)
                state.add_filtered(sibling)
                removed += 1
        logger.debug(f"filter on '{key}' removed {removed} geometries, {len(state.filtered_out)} filtered")


# ============================================================================
# CURRIED FORM AND RESET
# ============================================================================

def create_behavior_handler(
    table: AttributeTable,
    primary_key: str,
    state: Optional[LayerState] = None,
    options: Optional[BehaviorOptions] = None
) -> Callable[[EventBehaviorBinding], Callable[[Dict[str, Any], GeometryRef, SiblingGroup], None]]:
    """
    binding -> (feature, geometry, group) -> None, bound to one owned state.

    Example:
        handler = create_behavior_handler(table, "id", state)
        handler(EventBehaviorBinding(type="filter", key="region"))(feature, layer, group)
    """
    engine = BehaviorEngine(table, primary_key, options)
    owned_state = state if state is not None else LayerState()

    def for_binding(binding: EventBehaviorBinding):
        def run(feature: Dict[str, Any], geometry: GeometryRef, group: SiblingGroup) -> None:
            engine.dispatch(binding, feature, geometry, group, owned_state)
        return run

    return for_binding


def reset_layer(group: SiblingGroup, state: LayerState) -> LayerState:
    """
    Reset protocol.

    Re-adds every filtered geometry to the group, clears the filtered
    collection and re-runs the group's style function on every geometry.
    Click flags and lock are left to the caller.
    """
    restored = state.drain_filtered()
    for geometry in restored:
        if not group.has_layer(geometry):
            group.add_layer(geometry)
    group.reset_style()
    if restored:
        logger.debug(f"reset restored {len(restored)} filtered geometries")
    return state
