"""
Overlay Package.

Rendering capability, behavior engine and the overlay builder.

Exports:
    Geometry: GeometryRef, SiblingGroup, GeometryLayer, GeometryGroup
    Behavior: BehaviorOptions, BehaviorEngine, create_behavior_handler, reset_layer
    Builder: OverlayCallbacks, EventResult, MapOverlay, create_map_layer
    Exchange: table_from_features, table_from_records, merge_table_into_features, enforce_points
"""

from .geometry import GeometryRef, SiblingGroup, GeometryLayer, GeometryGroup
from .behavior import BehaviorOptions, BehaviorEngine, create_behavior_handler, reset_layer
from .geojson_exchange import (
    table_from_features,
    table_from_records,
    merge_table_into_features,
    enforce_points
)
from .builder import OverlayCallbacks, EventResult, MapOverlay, create_map_layer

__all__ = [
    'GeometryRef',
    'SiblingGroup',
    'GeometryLayer',
    'GeometryGroup',
    'BehaviorOptions',
    'BehaviorEngine',
    'create_behavior_handler',
    'reset_layer',
    'table_from_features',
    'table_from_records',
    'merge_table_into_features',
    'enforce_points',
    'OverlayCallbacks',
    'EventResult',
    'MapOverlay',
    'create_map_layer',
]
