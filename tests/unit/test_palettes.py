"""
Palette provider and ColorGenerator tests.
"""

import pytest

from color_scales.palettes import (
    PALETTES,
    ColorGenerator,
    get_palette,
    hex_to_rgb,
    interpolate_hex,
    register_palette,
    rgb_to_hex,
)
from core.models.enums import PaletteType
from exceptions import ConfigError


@pytest.fixture
def restore_palettes():
    snapshot = dict(PALETTES)
    yield
    PALETTES.clear()
    PALETTES.update(snapshot)


class TestColorHelpers:

    def test_hex_round_trip(self):
        assert hex_to_rgb("#1C3FAA") == (28, 63, 170)
        assert rgb_to_hex(28, 63, 170) == "#1c3faa"

    def test_hex_without_hash(self):
        assert hex_to_rgb("ff0000") == (255, 0, 0)

    def test_invalid_hex(self):
        with pytest.raises(ValueError):
            hex_to_rgb("red")

    def test_rgb_rounds_half_up_and_clamps(self):
        assert rgb_to_hex(127.5, -3, 300) == "#8000ff"

    def test_interpolate_midpoint(self):
        assert interpolate_hex("#000000", "#ffffff", 0.5) == "#808080"
        assert interpolate_hex("#000000", "#ffffff", 0) == "#000000"
        assert interpolate_hex("#000000", "#ffffff", 1) == "#ffffff"


class TestPaletteRegistry:

    @pytest.mark.parametrize("name", ["default", "superrandom"])
    def test_discrete_palettes(self, name):
        assert PALETTES[name].type == PaletteType.DISCRETE

    @pytest.mark.parametrize("name", ["blues", "reds", "greens", "rog", "redgreen", "redwhite", "viridis"])
    def test_continuous_palettes(self, name):
        palette = PALETTES[name]
        assert palette.type == PaletteType.CONTINUOUS
        assert len(palette.colors) >= 2

    def test_none_resolves_to_configured_default(self):
        assert get_palette(None).name == "viridis"

    def test_none_follows_environment(self, clean_env):
        clean_env.setenv("OVERLAY_DEFAULT_PALETTE", "reds")
        assert get_palette().name == "reds"

    def test_unknown_falls_back_to_default(self, caplog):
        assert get_palette("no-such-palette").name == "default"
        assert "no-such-palette" in caplog.text

    def test_register_palette(self, restore_palettes):
        register_palette("traffic", ["#00ff00", "#ff0000"], PaletteType.CONTINUOUS)
        assert ColorGenerator("traffic").get_at(0.5) == "#808000"

    def test_register_invalid_continuous_palette(self, restore_palettes):
        with pytest.raises(ConfigError):
            register_palette("broken", ["#00ff00"], PaletteType.CONTINUOUS)
        with pytest.raises(ConfigError):
            register_palette("broken", ["red", "blue"], PaletteType.CONTINUOUS)
        assert "broken" not in PALETTES

    def test_register_empty_palette(self, restore_palettes):
        with pytest.raises(ConfigError):
            register_palette("empty", [])


class TestColorGenerator:

    def test_discrete_cycles(self):
        generator = ColorGenerator("default")
        colors = PALETTES["default"].colors
        drawn = generator.take(len(colors) + 2)
        assert drawn[:len(colors)] == colors
        assert drawn[len(colors):] == colors[:2]

    def test_continuous_walks_stops_then_repeats_last(self):
        generator = ColorGenerator("blues")
        stops = [c.lower() for c in PALETTES["blues"].colors]
        drawn = generator.take(len(stops) + 2)
        assert drawn[:len(stops)] == stops
        assert drawn[len(stops):] == [stops[-1], stops[-1]]

    def test_reset_restarts(self):
        generator = ColorGenerator("superrandom")
        first = generator.next()
        generator.next()
        generator.reset()
        assert generator.next() == first

    def test_interpolate_clamps(self):
        generator = ColorGenerator("reds")
        assert generator.interpolate(-1) == generator.interpolate(0)
        assert generator.interpolate(2) == PALETTES["reds"].colors[-1].lower()

    def test_interpolate_between_stops(self):
        register_palette("bw", ["#000000", "#ffffff"], PaletteType.CONTINUOUS)
        try:
            generator = ColorGenerator("bw")
            assert generator.get_at(0.25) == "#404040"
        finally:
            PALETTES.pop("bw")

    def test_discrete_get_at(self):
        generator = ColorGenerator("default")
        colors = PALETTES["default"].colors
        assert generator.get_at(0) == colors[0]
        assert generator.get_at(0.99) == colors[-1]
        assert generator.get_at(1) == colors[-1]
        assert generator.get_at(-0.5) == colors[0]

    def test_is_continuous(self):
        assert ColorGenerator("viridis").is_continuous
        assert not ColorGenerator("default").is_continuous
