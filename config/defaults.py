"""
Configuration Defaults - Single source of truth for all default values.

Organization:
    - ColorDefaults: palette, implicit bins, bin-edge exclusivity
    - StyleDefaults: Leaflet path options for choropleth geometries
    - InteractionDefaults: locking, hover prevention, popup isolation
    - AppDefaults: log level, debug mode

Usage:
    from config.defaults import ColorDefaults, StyleDefaults

    # In Pydantic Field definitions:
    default_palette: str = Field(default=ColorDefaults.PALETTE, ...)
"""


# =============================================================================
# COLOR CLASSIFICATION DEFAULTS
# =============================================================================

class ColorDefaults:
    """
    Color classification defaults.

    BINS partitions the numeric range for implicit-bin (scale) classification;
    one palette color is generated per adjacent pair of edges.
    """

    PALETTE = "viridis"
    FALLBACK_PALETTE = "default"
    BINS = (0, 1, 2, 3, 4, 5)
    EXCLUSIVE = "right"


# =============================================================================
# STYLE DEFAULTS (Leaflet path options)
# =============================================================================

class StyleDefaults:
    """
    Leaflet path options applied to choropleth geometries.

    Dicts are templates: always copy before handing them to a geometry.
    """

    CHOROPLETH_DEFAULT = {
        "color": "#000000",
        "weight": 0.9,
        "fillOpacity": 0.5,
    }

    CHOROPLETH_HIGHLIGHT = {
        "color": "#1C3FAA",
        "fillOpacity": 0.9,
        "opacity": 0.9,
        "weight": 4,
    }

    CHOROPLETH_SEMI_HIGHLIGHT = {
        "color": "#1C3FAA",
        "fillOpacity": 0.9,
        "opacity": 1,
        "weight": 2,
    }

    DEFAULT_POPUP_CONTENT = "Default Popup"


# =============================================================================
# INTERACTION DEFAULTS
# =============================================================================

class InteractionDefaults:
    """
    Interaction behavior defaults.

    A click locks the overlay on the clicked feature; a double-click does not.
    Hover is never suppressed by click flags unless configured.
    """

    LOCK_ON_CLICK = True
    LOCK_ON_DBLCLICK = False
    PREVENT_HOVER_ON_CLICK = False
    PREVENT_HOVER_ON_DBLCLICK = False
    ISOLATE_POPUP = True


# =============================================================================
# APP DEFAULTS
# =============================================================================

class AppDefaults:
    """Application-wide defaults."""

    LOG_LEVEL = "INFO"
    DEBUG_MODE = False
