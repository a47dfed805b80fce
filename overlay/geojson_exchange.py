"""
GeoJSON Exchange Helpers.

Joins between GeoJSON feature collections and attribute tables, and
point enforcement for point-based display types.

Exports:
    table_from_features: Attribute table from feature properties
    table_from_records: Attribute table from a record list
    merge_table_into_features: Overlay record fields onto feature properties
    enforce_points: Reduce a feature's geometry to a Point (pole of inaccessibility)

Dependencies:
    shapely: geometry parsing, polylabel, representative points
"""

from typing import Any, Dict, Iterable, Mapping, Optional

from shapely.errors import ShapelyError
from shapely.geometry import MultiPolygon, Point, Polygon, mapping, shape
from shapely.ops import polylabel

from core.models.attributes import AttributeRecord, AttributeTable
from util_logger import LoggerFactory, ComponentType

logger = LoggerFactory.create_logger(ComponentType.ADAPTER, "GeoJSONExchange")

POLYLABEL_TOLERANCE = 0.001


# ============================================================================
# ATTRIBUTE JOINS
# ============================================================================

def table_from_features(feature_collection: Mapping[str, Any], key: str) -> AttributeTable:
    """
    Attribute table keyed by properties[key].

    Features with no properties or a null key are skipped.
    """
    records = []
    for feature in feature_collection.get("features") or []:
        properties = feature.get("properties")
        if not properties or properties.get(key) is None:
            continue
        records.append(AttributeRecord(id=properties[key], fields=dict(properties)))
    return AttributeTable(records)


def table_from_records(records: Iterable[Optional[Mapping[str, Any]]], id_field: str) -> AttributeTable:
    """Attribute table from flat records; None entries are skipped."""
    return AttributeTable.from_records(records, id_field)


def merge_table_into_features(
    table: AttributeTable,
    feature_collection: Mapping[str, Any],
    key: str
) -> Dict[str, Any]:
    """
    New feature collection with each feature's record fields overlaid on
    its properties. The input collection is not modified.
    """
    features = []
    for feature in feature_collection.get("features") or []:
        properties = dict(feature.get("properties") or {})
        record = table.lookup(properties.get(key))
        if record is not None:
            properties.update(record.fields)
        features.append({**feature, "properties": properties})
    return {**feature_collection, "features": features}


# ============================================================================
# POINT ENFORCEMENT
# ============================================================================

def _label_point(geometry) -> Point:
    if geometry.is_empty:
        raise ValueError("empty geometry")
    if isinstance(geometry, Polygon):
        return polylabel(geometry, tolerance=POLYLABEL_TOLERANCE)
    if isinstance(geometry, MultiPolygon):
        largest = max(geometry.geoms, key=lambda part: part.area)
        return polylabel(largest, tolerance=POLYLABEL_TOLERANCE)
    return geometry.representative_point()


def enforce_points(feature: Dict[str, Any]) -> Dict[str, Any]:
    """
    Copy of feature whose geometry is a GeoJSON Point.

    Points are kept; polygons become their pole of inaccessibility (largest
    part for multipolygons); other geometries become a representative
    point. The geometry is None when no point can be derived.
    """
    geometry = feature.get("geometry")
    if geometry and geometry.get("type") == "Point" and geometry.get("coordinates"):
        return {**feature, "geometry": dict(geometry)}

    logger.warning("Geometry is not a Point, converting by polylabel")
    try:
        if not geometry:
            raise ValueError("feature has no geometry")
        point = _label_point(shape(geometry))
        if point.is_empty:
            raise ValueError("no label point")
    except (ShapelyError, ValueError, TypeError, KeyError, IndexError, AttributeError) as e:
        logger.error(f"Could not enforce feature geometry to Point: {e}")
        return {**feature, "geometry": None}

    return {**feature, "geometry": mapping(Point(point.x, point.y))}
