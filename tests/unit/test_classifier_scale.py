"""
Implicit-bin (scale) classification tests.
"""

import math

import pytest

from color_scales.classifier import classify, classify_scale, to_number
from color_scales.palettes import ColorGenerator
from color_scales.scales import ImplicitBinScale
from core.models.attributes import AttributeTable
from core.models.classification import ScaleOptions
from exceptions import ConfigError


def _scores(values):
    return AttributeTable.from_mapping({f"id{i}": {"score": v} for i, v in enumerate(values)})


class TestToNumber:

    @pytest.mark.parametrize("value,expected", [
        (3, 3.0),
        (2.5, 2.5),
        ("4", 4.0),
        (" 7.25 ", 7.25),
        ("-1e3", -1000.0),
    ])
    def test_numeric(self, value, expected):
        assert to_number(value) == expected

    @pytest.mark.parametrize("value", [None, True, False, "", "   ", "abc", [1], {"a": 1}, float("nan"), "nan"])
    def test_not_numeric(self, value):
        assert to_number(value) is None

    def test_infinity_is_numeric(self):
        assert to_number(float("inf")) == math.inf


class TestImplicitBinScale:

    def test_inclusive_edges_prefer_lower_bin(self):
        scale = ImplicitBinScale([0, 10, 20, 30], "default")
        assert scale.find_bin(0) == 0
        assert scale.find_bin(10) == 0
        assert scale.find_bin(10.5) == 1
        assert scale.find_bin(20) == 1
        assert scale.find_bin(30) == 2

    @pytest.mark.parametrize("value", [-5, 31, math.inf, -math.inf])
    def test_out_of_range_falls_back_to_first_bin(self, value):
        assert ImplicitBinScale([0, 10, 20, 30]).find_bin(value) == 0

    def test_one_generated_color_per_bin(self):
        scale = ImplicitBinScale([0, 1, 2, 3], "reds")
        assert scale.colors == ColorGenerator("reds").take(3)

    def test_more_bins_than_stops_spread_over_palette(self):
        stops = ColorGenerator("viridis").palette.colors
        scale = ImplicitBinScale(list(range(10)), "viridis")
        assert len(scale.colors) == 9
        assert len(set(scale.colors)) == 9
        assert scale.colors[0] == stops[0]
        assert scale.colors[-1] == stops[-1]

    def test_more_bins_than_stops_distinct_assignment(self):
        table = _scores([i + 0.5 for i in range(9)])
        assignment = classify_scale(table, "score", bins=list(range(10)))
        assert len(set(assignment.values())) == 9

    def test_caller_order_kept(self):
        scale = ImplicitBinScale([10, 0, 20])
        assert scale.edges == [10.0, 0.0, 20.0]
        # [10, 0] is empty
        assert scale.find_bin(15) == 1
        assert scale.find_bin(-1) == 0

    @pytest.mark.parametrize("bins", [[], [5]])
    def test_fewer_than_two_bins(self, bins):
        with pytest.raises(ConfigError):
            ImplicitBinScale(bins)


class TestClassifyScale:

    def test_default_bins_and_palette(self):
        table = _scores([0, 1.5, 4.9, 5])
        assignment = classify_scale(table, "score")
        colors = ColorGenerator("viridis").take(5)
        assert assignment == {"id0": colors[0], "id1": colors[1], "id2": colors[4], "id3": colors[4]}

    def test_non_numeric_omitted(self):
        table = _scores([1, None, "x", "2", True, float("nan")])
        assignment = classify_scale(table, "score", bins=[0, 5])
        assert set(assignment) == {"id0", "id3"}

    def test_missing_field_omitted(self):
        table = AttributeTable.from_mapping({"a": {"score": 1}, "b": {"other": 2}})
        assert set(classify_scale(table, "score", bins=[0, 5])) == {"a"}

    def test_configured_default_bins(self, clean_env):
        clean_env.setenv("OVERLAY_DEFAULT_BINS", "0,100")
        assignment = classify_scale(_scores([50, 99]), "score", palette="default")
        assert len(set(assignment.values())) == 1

    def test_facade_dispatch(self):
        table = _scores([0.5, 1.5])
        via_facade = classify(table, "score", "scale", ScaleOptions(bins=[0, 1, 2], palette="greens"))
        assert via_facade == classify_scale(table, "score", bins=[0, 1, 2], palette="greens")

    def test_invalid_bins(self):
        with pytest.raises(ConfigError):
            classify_scale(_scores([1]), "score", bins=[1])
