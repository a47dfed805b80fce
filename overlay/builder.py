"""
Overlay Builder.

Orchestrates one rendered overlay: validates the configuration, enforces
points for point display types, applies the display filter, classifies
colors, builds the geometry group and wires renderer events to the
behavior engine and the layer state machine.

Event protocol (MapOverlay.fire):
    click / dblclick: reset -> bound behaviors in order -> stop propagation
        -> click transition (sets flag, sets or clears the lock)
    mouseover: bound hover behaviors, unless hover is suppressed
    mouseout: reset, unless hover is suppressed
    map-level click (on_map_click): reset and deselect

Exports:
    OverlayCallbacks: Popup content, display filter and external callbacks
    EventResult: Outcome of one renderer event
    MapOverlay: Rendered overlay with its owned state
    create_map_layer: Build a MapOverlay

Dependencies:
    color_scales: classification and legend
    overlay.behavior: BehaviorEngine, reset_layer
    core.logic.transitions: click transitions, hover suppression, deselect
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from pydantic import ValidationError

from color_scales import (
    BinEdgeColorScale,
    ImplicitBinScale,
    LegendItem,
    classify,
    legend_from_assignment,
    legend_from_bin_pairs,
    legend_from_bins,
)
from config import get_config
from config.defaults import StyleDefaults
from core.logic.transitions import (
    apply_click,
    apply_double_click,
    can_layer_transition,
    deselect,
    get_layer_phase,
    is_hover_suppressed,
    next_layer_phase,
)
from core.models.attributes import AttributeRecord, AttributeTable
from core.models.behavior import LockedOn, PreventHoverOn
from core.models.classification import ColorAssignment
from core.models.enums import ColorLogic, DisplayType, LayerPhase, MapEvent, TriggerType
from core.models.overlay import OverlayConfig
from core.models.state import LayerState
from exceptions import ConfigError, ContractViolationError
from util_logger import LoggerFactory, ComponentType, log_exceptions
from .behavior import BehaviorEngine, BehaviorOptions, reset_layer
from .geojson_exchange import enforce_points
from .geometry import GeometryGroup, GeometryLayer

POINT_DISPLAY_TYPES = (DisplayType.MARKER, DisplayType.TEXT, DisplayType.BUFFER)


@dataclass
class OverlayCallbacks:
    """
    Callables attached to an overlay.

    popup_function(feature, record) -> popup content (None binds nothing)
    filter_function(record[filter_key]) -> whether a feature is rendered
    view_callback(record) and drilldown_callback(value) back the view and
    drilldown behaviors.
    """

    popup_function: Optional[Callable[[Dict[str, Any], Optional[AttributeRecord]], Any]] = None
    filter_function: Optional[Callable[[Any], bool]] = None
    view_callback: Optional[Callable[[AttributeRecord], None]] = None
    drilldown_callback: Optional[Callable[[Any], None]] = None


@dataclass
class EventResult:
    """
    Outcome of one renderer event.

    handled is False when the event was ignored (hover suppression).
    stopped_propagation tells the renderer not to deliver the event to the
    map, so a geometry click never also deselects in the same tick.
    """

    event: MapEvent
    handled: bool = True
    stopped_propagation: bool = False
    phase: LayerPhase = LayerPhase.IDLE


class MapOverlay:
    """
    One rendered overlay.

    Owns its LayerState. Overlays built from the same attribute table share
    nothing else.
    """

    def __init__(
        self,
        config: OverlayConfig,
        table: AttributeTable,
        group: GeometryGroup,
        engine: BehaviorEngine,
        state: LayerState,
        assignment: Optional[ColorAssignment],
        locked_on: LockedOn,
        prevent_hover_on: PreventHoverOn
    ):
        self.config = config
        self.table = table
        self.group = group
        self.engine = engine
        self.state = state
        self.assignment = assignment
        self.locked_on = locked_on
        self.prevent_hover_on = prevent_hover_on
        self.logger = LoggerFactory.create_with_context(
            ComponentType.ORCHESTRATOR,
            f"MapOverlay.{config.id or config.key}",
            overlay_id=config.id,
            layer_key=config.key
        )

    @property
    def layers(self) -> List[GeometryLayer]:
        """Geometries currently rendered."""
        return self.group.get_layers()

    def feature_id(self, geometry: GeometryLayer) -> Any:
        return geometry.properties.get(self.config.key)

    def style_function(self, feature: Dict[str, Any]) -> Dict[str, Any]:
        """Initial (and reset) style: classification color over the default path options."""
        key = (feature.get("properties") or {}).get(self.config.key)
        color = None
        if self.assignment:
            try:
                color = self.assignment.get(key)
            except TypeError:
                color = None
        if color:
            return {**StyleDefaults.CHOROPLETH_DEFAULT, "fillColor": color}
        return dict(StyleDefaults.CHOROPLETH_DEFAULT)

    def _run_bindings(self, trigger: TriggerType, geometry: GeometryLayer) -> None:
        for binding in self.config.events.bindings_for(trigger):
            self.engine.dispatch(binding, geometry.feature, geometry, self.group, self.state)

    def _check_transition(self, target: LayerPhase) -> LayerPhase:
        """
        Validate a phase change against the layer phase graph.

        Raises:
            ContractViolationError: If the graph does not allow the change
        """
        current = get_layer_phase(self.state)
        if not can_layer_transition(current, target):
            raise ContractViolationError(
                f"Invalid layer phase transition: {current.value} -> {target.value}"
            )
        if current != target:
            self.logger.debug(
                f"phase {current.value} -> {target.value}",
                extra={'custom_dimensions': {'phase_from': current.value, 'phase_to': target.value}}
            )
        return target

    def fire(self, event: Union[MapEvent, str], geometry: GeometryLayer) -> EventResult:
        """
        Deliver a renderer event on one geometry.

        Raises:
            ContractViolationError: If event is not a MapEvent
        """
        try:
            event = MapEvent(event)
        except ValueError as e:
            raise ContractViolationError(f"Unknown map event {event!r}") from e

        feature_id = self.feature_id(geometry)
        self.logger.debug(
            f"{event.value} on {feature_id!r}",
            extra={'custom_dimensions': {'event': event.value, 'feature_id': feature_id}}
        )

        if event in (MapEvent.CLICK, MapEvent.DBLCLICK):
            lock = self.locked_on.click if event == MapEvent.CLICK else self.locked_on.dblclick
            target = self._check_transition(next_layer_phase(get_layer_phase(self.state), event, lock))
            reset_layer(self.group, self.state)
            if event == MapEvent.CLICK:
                self._run_bindings(TriggerType.CLICK, geometry)
                apply_click(self.state, feature_id, lock)
            else:
                self._run_bindings(TriggerType.DBLCLICK, geometry)
                apply_double_click(self.state, feature_id, lock)
            return EventResult(event=event, stopped_propagation=True, phase=target)

        phase = get_layer_phase(self.state)
        if is_hover_suppressed(self.state, self.prevent_hover_on):
            self.logger.debug(f"{event.value} on {feature_id!r} suppressed")
            return EventResult(event=event, handled=False, phase=phase)

        if event == MapEvent.MOUSEOVER:
            self._run_bindings(TriggerType.HOVER, geometry)
        else:
            reset_layer(self.group, self.state)
        return EventResult(event=event, phase=next_layer_phase(phase, event, lock=False))

    def on_map_click(self) -> EventResult:
        """Map-level click outside any geometry: reset and deselect."""
        self._check_transition(LayerPhase.IDLE)
        reset_layer(self.group, self.state)
        deselect(self.state)
        return EventResult(event=MapEvent.CLICK, phase=get_layer_phase(self.state))

    def legend(self) -> List[LegendItem]:
        """Legend rows for the configured classification (empty without one)."""
        color = self.config.color
        if color is None:
            return []
        if color.logic == ColorLogic.SCALE:
            if color.color_bin_pairs:
                return legend_from_bin_pairs(BinEdgeColorScale(color.color_bin_pairs, color.exclusive))
            bins = color.bins if color.bins is not None else get_config().classification.default_bins
            return legend_from_bins(bins, ImplicitBinScale(bins, color.palette).colors)
        return legend_from_assignment(self.table, color.color_key, self.assignment or {})

    def __repr__(self) -> str:
        return f"MapOverlay(id={self.config.id!r}, key={self.config.key!r}, layers={len(self.group)})"


# ============================================================================
# BUILDER
# ============================================================================

def _resolve_config(config: Union[OverlayConfig, Mapping[str, Any]]) -> OverlayConfig:
    if isinstance(config, OverlayConfig):
        return config
    try:
        return OverlayConfig.model_validate(config)
    except ValidationError as e:
        raise ConfigError(f"Invalid overlay configuration: {e}") from e


@log_exceptions(ComponentType.ORCHESTRATOR, "OverlayBuilder")
def create_map_layer(
    feature_collection: Mapping[str, Any],
    table: AttributeTable,
    config: Union[OverlayConfig, Mapping[str, Any]],
    state: Optional[LayerState] = None,
    callbacks: Optional[OverlayCallbacks] = None
) -> MapOverlay:
    """
    Build a rendered overlay.

    Args:
        feature_collection: GeoJSON FeatureCollection
        table: Attribute table joined on config.key
        config: OverlayConfig or its dict form
        state: LayerState to own (fresh one when None)
        callbacks: Popup, display filter and behavior callbacks

    Returns:
        MapOverlay with every rendered geometry styled

    Raises:
        ConfigError: If the configuration or classification options are invalid
    """
    config = _resolve_config(config)
    callbacks = callbacks or OverlayCallbacks()
    state = state if state is not None else LayerState()
    interaction = get_config().interaction
    display = config.display

    locked_on = display.locked_on or LockedOn(
        click=interaction.lock_on_click, dblclick=interaction.lock_on_dblclick
    )
    prevent_hover_on = display.prevent_hover_on or PreventHoverOn(
        click=interaction.prevent_hover_on_click, dblclick=interaction.prevent_hover_on_dblclick
    )
    isolate_popup = display.isolate_popup if display.isolate_popup is not None else interaction.isolate_popup
    filter_key = display.filter_key or config.key

    features = list(feature_collection.get("features") or [])
    if display.type in POINT_DISPLAY_TYPES:
        features = [f for f in (enforce_points(f) for f in features) if f.get("geometry") is not None]

    rendered = []
    for feature in features:
        record = table.lookup((feature.get("properties") or {}).get(config.key))
        if record is not None and callbacks.filter_function is not None:
            if not callbacks.filter_function(record.get(filter_key)):
                continue
        rendered.append((feature, record))

    assignment = None
    if config.color is not None:
        assignment = classify(table, config.color.color_key, config.color.logic, config.color.to_options())

    engine = BehaviorEngine(
        table,
        config.key,
        BehaviorOptions(
            isolate_popup=isolate_popup,
            view_callback=callbacks.view_callback,
            drilldown_callback=callbacks.drilldown_callback,
        ),
    )

    group = GeometryGroup()
    for feature, record in rendered:
        layer = GeometryLayer(feature)
        if callbacks.popup_function is not None:
            content = callbacks.popup_function(feature, record)
        else:
            content = StyleDefaults.DEFAULT_POPUP_CONTENT
        if content is not None:
            layer.bind_popup(content)
        group.add_layer(layer)

    overlay = MapOverlay(config, table, group, engine, state, assignment, locked_on, prevent_hover_on)
    group.style_function = overlay.style_function
    group.reset_style()

    overlay.logger.info(
        f"Built overlay with {len(group)} of {len(features)} features "
        f"({display.type.value}, {len(assignment) if assignment is not None else 0} colored)"
    )
    return overlay
