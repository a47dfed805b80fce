"""
Configuration loading tests.

Covers defaults, OVERLAY_* environment parsing, validation errors and the
singleton lifecycle.
"""

import pytest
from pydantic import ValidationError

from config import AppConfig, ClassificationConfig, InteractionConfig, debug_config, get_config, reset_config
from config.defaults import ColorDefaults, InteractionDefaults
from exceptions import ConfigError


class TestDefaults:

    def test_classification_defaults(self):
        config = ClassificationConfig()
        assert config.default_palette == "viridis"
        assert config.default_bins == [0, 1, 2, 3, 4, 5]
        assert config.default_exclusive == "right"

    def test_interaction_defaults(self):
        config = InteractionConfig()
        assert config.lock_on_click is InteractionDefaults.LOCK_ON_CLICK is True
        assert config.lock_on_dblclick is False
        assert config.prevent_hover_on_click is False
        assert config.prevent_hover_on_dblclick is False
        assert config.isolate_popup is True

    def test_environment_without_variables_matches_defaults(self, clean_env):
        config = AppConfig.from_environment()
        assert config.classification.default_bins == list(ColorDefaults.BINS)
        assert config.log_level == "INFO"
        assert config.debug_mode is False


class TestClassificationEnvironment:

    def test_bins_parsed(self, set_env):
        set_env({"OVERLAY_DEFAULT_BINS": "0, 10,100,"})
        assert ClassificationConfig.from_environment().default_bins == [0.0, 10.0, 100.0]

    def test_palette_and_exclusive(self, set_env):
        set_env({"OVERLAY_DEFAULT_PALETTE": "blues", "OVERLAY_DEFAULT_EXCLUSIVE": "LEFT"})
        config = ClassificationConfig.from_environment()
        assert config.default_palette == "blues"
        assert config.default_exclusive == "left"

    @pytest.mark.parametrize("bins", ["5", "10,0", "a,b"])
    def test_invalid_bins_raise_config_error(self, set_env, bins):
        set_env({"OVERLAY_DEFAULT_BINS": bins})
        with pytest.raises(ConfigError):
            AppConfig.from_environment()

    def test_invalid_exclusive_raises_config_error(self, set_env):
        set_env({"OVERLAY_DEFAULT_EXCLUSIVE": "middle"})
        with pytest.raises(ConfigError):
            get_config()

    def test_direct_model_validation(self):
        with pytest.raises(ValidationError):
            ClassificationConfig(default_bins=[3, 1])


class TestInteractionEnvironment:

    @pytest.mark.parametrize("var,field", [
        ("OVERLAY_LOCK_ON_CLICK", "lock_on_click"),
        ("OVERLAY_LOCK_ON_DBLCLICK", "lock_on_dblclick"),
        ("OVERLAY_PREVENT_HOVER_ON_CLICK", "prevent_hover_on_click"),
        ("OVERLAY_PREVENT_HOVER_ON_DBLCLICK", "prevent_hover_on_dblclick"),
        ("OVERLAY_ISOLATE_POPUP", "isolate_popup"),
    ])
    @pytest.mark.parametrize("raw,expected", [("true", True), ("TRUE", True), ("false", False), ("no", False)])
    def test_flags(self, set_env, var, field, raw, expected):
        set_env({var: raw})
        assert getattr(InteractionConfig.from_environment(), field) is expected


class TestAppConfig:

    def test_log_level_normalized(self, set_env):
        set_env({"LOG_LEVEL": "debug", "DEBUG_MODE": "true"})
        config = AppConfig.from_environment()
        assert config.log_level == "DEBUG"
        assert config.debug_mode is True

    def test_invalid_log_level(self, set_env):
        set_env({"LOG_LEVEL": "LOUD"})
        with pytest.raises(ConfigError):
            AppConfig.from_environment()


class TestSingleton:

    def test_cached_until_reset(self, set_env):
        first = get_config()
        assert get_config() is first
        set_env({"OVERLAY_DEFAULT_PALETTE": "reds"})
        assert get_config().classification.default_palette == "viridis"
        reset_config()
        assert get_config().classification.default_palette == "reds"

    def test_debug_config(self):
        info = debug_config()
        assert info["classification"]["default_palette"] == "viridis"
        assert info["interaction"]["isolate_popup"] is True

    def test_debug_config_reports_errors(self, set_env):
        set_env({"OVERLAY_DEFAULT_BINS": "1"})
        assert "error" in debug_config()
