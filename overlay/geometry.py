"""
Geometry Rendering Capability.

Abstract contract the behavior engine drives, plus in-memory
implementations that keep Leaflet semantics:

- set_style merges path options into the current style
- reset_style replaces the style with the group's style function output
- set_style on a group only touches layers currently in the group

The in-memory layer counts style assignments so effects (or their
absence) can be observed.

Exports:
    GeometryRef: Interface of one rendered geometry
    SiblingGroup: Interface of the group holding an overlay's geometries
    GeometryLayer: In-memory GeometryRef
    GeometryGroup: In-memory SiblingGroup
"""

import itertools
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

StyleFunction = Callable[[Dict[str, Any]], Dict[str, Any]]


# ============================================================================
# INTERFACES
# ============================================================================

class GeometryRef(ABC):
    """One rendered geometry bound to a GeoJSON feature."""

    @property
    @abstractmethod
    def feature(self) -> Dict[str, Any]:
        """GeoJSON feature the geometry was built from."""
        pass

    @abstractmethod
    def set_style(self, style: Dict[str, Any]) -> None:
        """Merge path options into the current style."""
        pass

    @abstractmethod
    def bind_popup(self, content: Any) -> None:
        pass

    @abstractmethod
    def open_popup(self) -> None:
        pass

    @abstractmethod
    def close_popup(self) -> None:
        pass

    @abstractmethod
    def is_popup_open(self) -> bool:
        pass


class SiblingGroup(ABC):
    """The live set of geometries rendered for one overlay."""

    @abstractmethod
    def get_layers(self) -> List[GeometryRef]:
        """Geometries currently in the group, in insertion order."""
        pass

    @abstractmethod
    def add_layer(self, layer: GeometryRef) -> None:
        pass

    @abstractmethod
    def remove_layer(self, layer: GeometryRef) -> None:
        pass

    @abstractmethod
    def has_layer(self, layer: GeometryRef) -> bool:
        pass

    @abstractmethod
    def get_layer_id(self, layer: GeometryRef) -> int:
        pass

    @abstractmethod
    def set_style(self, style: Union[Dict[str, Any], StyleFunction]) -> None:
        """
        Restyle every geometry in the group.

        Args:
            style: Path options, or a function feature -> path options
        """
        pass

    @abstractmethod
    def reset_style(self, layer: Optional[GeometryRef] = None) -> None:
        """Re-run the group's style function on one geometry or all of them."""
        pass


# ============================================================================
# IN-MEMORY IMPLEMENTATIONS
# ============================================================================

_layer_ids = itertools.count(1)


class GeometryLayer(GeometryRef):
    """
    In-memory geometry.

    Attributes:
        style: Current path options
        style_assignments: Number of style mutations applied so far
        popup_content: Bound popup content, None when unbound
    """

    def __init__(self, feature: Dict[str, Any], style: Optional[Dict[str, Any]] = None):
        self._feature = feature
        self.layer_id = next(_layer_ids)
        self.style: Dict[str, Any] = dict(style or {})
        self.style_assignments = 0
        self.popup_content: Any = None
        self._popup_open = False

    @property
    def feature(self) -> Dict[str, Any]:
        return self._feature

    @property
    def properties(self) -> Dict[str, Any]:
        return self._feature.get("properties") or {}

    def set_style(self, style: Dict[str, Any]) -> None:
        self.style = {**self.style, **style}
        self.style_assignments += 1

    def replace_style(self, style: Dict[str, Any]) -> None:
        """Drop the current path options and apply style."""
        self.style = dict(style)
        self.style_assignments += 1

    def bind_popup(self, content: Any) -> None:
        self.popup_content = content

    def open_popup(self) -> None:
        # Opening an unbound popup is a no-op
        if self.popup_content is not None:
            self._popup_open = True

    def close_popup(self) -> None:
        self._popup_open = False

    def is_popup_open(self) -> bool:
        return self._popup_open

    def __repr__(self) -> str:
        return f"GeometryLayer(id={self.layer_id}, properties={self.properties!r})"


class GeometryGroup(SiblingGroup):
    """
    In-memory sibling group.

    Args:
        style_function: feature -> path options used at render and on reset.
            None renders every geometry with empty options.
        layers: Initial geometries
    """

    def __init__(self, style_function: Optional[StyleFunction] = None, layers: Iterable[GeometryLayer] = ()):
        self.style_function = style_function
        self._layers: Dict[int, GeometryLayer] = {}
        for layer in layers:
            self.add_layer(layer)

    def get_layers(self) -> List[GeometryLayer]:
        # Creation order, so a removed and re-added layer keeps its place
        return [self._layers[layer_id] for layer_id in sorted(self._layers)]

    def add_layer(self, layer: GeometryLayer) -> None:
        self._layers[layer.layer_id] = layer

    def remove_layer(self, layer: GeometryLayer) -> None:
        self._layers.pop(layer.layer_id, None)

    def has_layer(self, layer: GeometryLayer) -> bool:
        return self._layers.get(layer.layer_id) is layer

    def get_layer_id(self, layer: GeometryLayer) -> int:
        return layer.layer_id

    def set_style(self, style: Union[Dict[str, Any], StyleFunction]) -> None:
        for layer in self.get_layers():
            layer.set_style(style(layer.feature) if callable(style) else style)

    def reset_style(self, layer: Optional[GeometryLayer] = None) -> None:
        targets = [layer] if layer is not None else self.get_layers()
        for target in targets:
            computed = self.style_function(target.feature) if self.style_function else {}
            target.replace_style(computed)

    def __len__(self) -> int:
        return len(self._layers)

    def __iter__(self):
        return iter(self.get_layers())
