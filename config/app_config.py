"""
Main Application Configuration.

Composes domain-specific configuration modules:
    - ClassificationConfig (palette, implicit bins, exclusivity)
    - InteractionConfig (locking, hover prevention, popup isolation)

Exports:
    AppConfig: Main configuration class

Dependencies:
    pydantic: BaseModel for configuration validation
    config.classification_config: ClassificationConfig
    config.interaction_config: InteractionConfig
    config.defaults: Default value constants

Pattern:
    Composition over inheritance - domain configs are composed, not inherited.
"""

import os
from pydantic import BaseModel, Field, field_validator

from exceptions import ConfigError
from .classification_config import ClassificationConfig
from .interaction_config import InteractionConfig
from .defaults import AppDefaults


# ============================================================================
# APPLICATION CONFIGURATION
# ============================================================================

class AppConfig(BaseModel):
    """
    Application configuration - composition of domain configs.
    """

    debug_mode: bool = Field(
        default=AppDefaults.DEBUG_MODE,
        description="Enable debug mode for verbose diagnostics. "
                    "Set DEBUG_MODE=true in environment to enable."
    )

    log_level: str = Field(
        default=AppDefaults.LOG_LEVEL,
        description="Log level for overlay components",
        examples=["DEBUG", "INFO", "WARNING"]
    )

    classification: ClassificationConfig = Field(
        default_factory=ClassificationConfig,
        description="Color classification defaults"
    )

    interaction: InteractionConfig = Field(
        default_factory=InteractionConfig,
        description="Interaction behavior defaults"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Must name a standard logging level."""
        if v.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"log_level must be a standard level name, got {v!r}")
        return v.upper()

    @classmethod
    def from_environment(cls) -> "AppConfig":
        """
        Load configuration from environment variables.

        Raises:
            ConfigError: If any OVERLAY_* / DEBUG_MODE / LOG_LEVEL value is invalid
        """
        try:
            return cls(
                debug_mode=os.environ.get("DEBUG_MODE", "false").lower() == "true",
                log_level=os.environ.get("LOG_LEVEL", AppDefaults.LOG_LEVEL).upper(),
                classification=ClassificationConfig.from_environment(),
                interaction=InteractionConfig.from_environment(),
            )
        except ValueError as e:
            # pydantic.ValidationError is a ValueError subclass
            raise ConfigError(f"Invalid overlay configuration in environment: {e}") from e
