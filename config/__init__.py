"""
Configuration Package - Domain-Specific Configuration Modules

Structure:
    config/
    ├── __init__.py                # This file - exports and singleton
    ├── app_config.py              # Main config (composes domain configs)
    ├── classification_config.py   # Palette, implicit bins, exclusivity
    ├── interaction_config.py      # Locking, hover prevention, popups
    └── defaults.py                # Default value constants

Usage:
    # Singleton pattern (preferred)
    from config import get_config
    config = get_config()
    palette = config.classification.default_palette

    # Debug output
    from config import debug_config
    info = debug_config()
"""

from typing import Optional

from .classification_config import ClassificationConfig
from .interaction_config import InteractionConfig
from .app_config import AppConfig
from .defaults import ColorDefaults, StyleDefaults, InteractionDefaults, AppDefaults


# ============================================================================
# SINGLETON PATTERN
# ============================================================================

_config_instance: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Get global configuration singleton.

    Returns:
        AppConfig instance loaded from environment
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = AppConfig.from_environment()
    return _config_instance


def reset_config() -> None:
    """Drop the cached singleton so the next get_config() re-reads the environment."""
    global _config_instance
    _config_instance = None


def debug_config() -> dict:
    """
    Get configuration as a plain dict for debugging.

    Returns:
        Dictionary with configuration values, or an 'error' entry
    """
    try:
        config = get_config()
        return {
            'classification': {
                'default_palette': config.classification.default_palette,
                'default_bins': config.classification.default_bins,
                'default_exclusive': config.classification.default_exclusive,
            },
            'interaction': config.interaction.model_dump(),
            'debug_mode': config.debug_mode,
            'log_level': config.log_level,
        }
    except Exception as e:
        return {'error': f'Configuration validation failed: {e}'}


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    'AppConfig',
    'get_config',
    'reset_config',
    'debug_config',
    'ClassificationConfig',
    'InteractionConfig',
    'ColorDefaults',
    'StyleDefaults',
    'InteractionDefaults',
    'AppDefaults',
]
