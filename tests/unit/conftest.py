"""
Unit test fixtures - factory-built tables, features and geometry groups.
"""

import pytest

from tests.factories.overlay_factories import make_feature_collection, make_table


# id -> region; A and C share a region, D has no record
REGIONS = {"A": "north", "B": "south", "C": "north"}
FEATURE_IDS = ["A", "B", "C", "D"]


@pytest.fixture
def region_table():
    """Randomized table with regions north/south/north for A/B/C."""
    return make_table(REGIONS)


@pytest.fixture
def region_features():
    """FeatureCollection for A, B, C and the recordless D."""
    return make_feature_collection(FEATURE_IDS)


@pytest.fixture
def region_group(region_features):
    """GeometryGroup with one GeometryLayer per feature and a constant base style."""
    from overlay.geometry import GeometryGroup, GeometryLayer

    group = GeometryGroup(lambda feature: {"fillColor": f"base-{feature['properties']['id']}"})
    for feature in region_features["features"]:
        layer = GeometryLayer(feature)
        layer.bind_popup(f"popup {feature['properties']['id']}")
        group.add_layer(layer)
    group.reset_style()
    return group


@pytest.fixture
def layer_by_id(region_group):
    """Lookup helper id -> GeometryLayer (including filtered-out layers)."""
    layers = {layer.properties["id"]: layer for layer in region_group.get_layers()}
    return layers.__getitem__
