"""
Categorical (group) classification tests.
"""

import pytest

from color_scales.classifier import classify, classify_bin_pairs, classify_group
from color_scales.palettes import PALETTES
from core.models.attributes import AttributeTable
from core.models.classification import GroupOptions
from core.models.enums import ColorLogic
from exceptions import ConfigError
from tests.factories.overlay_factories import make_table


class TestClassifyGroup:

    def test_same_value_same_color(self):
        table = make_table({"a": "x", "b": "y", "c": "x", "d": "y", "e": "z"})
        assignment = classify_group(table, "region")
        assert assignment["a"] == assignment["c"]
        assert assignment["b"] == assignment["d"]
        assert len({assignment["a"], assignment["b"], assignment["e"]}) == 3

    def test_every_id_assigned(self):
        table = make_table({i: f"g{i % 4}" for i in range(25)})
        assert set(classify_group(table, "region")) == set(range(25))

    def test_palette_wraps_by_first_encounter(self):
        table = make_table({"1": "A", "2": "B", "3": "C", "4": "D"})
        assignment = classify_group(table, "region", colors=["#r", "#g", "#b"])
        assert [assignment[k] for k in "1234"] == ["#r", "#g", "#b", "#r"]

    @pytest.mark.parametrize("palette", [None, "viridis", "blues"])
    def test_continuous_palette_cycles_its_stops(self, palette):
        stops = PALETTES[palette or "viridis"].colors
        table = make_table({str(i): f"value-{i}" for i in range(len(stops) + 2)})
        assignment = classify_group(table, "region", palette=palette)
        expected = [stops[i % len(stops)] for i in range(len(stops) + 2)]
        assert [assignment[str(i)] for i in range(len(stops) + 2)] == expected
        assert assignment[str(len(stops))] == assignment["0"]

    def test_first_encounter_order_follows_table_order(self):
        table = make_table({"1": "late", "2": "early"})
        assignment = classify_group(table, "region", palette="default")
        assert assignment["1"] == PALETTES["default"].colors[0]
        assert assignment["2"] == PALETTES["default"].colors[1]

    def test_deterministic(self):
        table = make_table({i: i % 3 for i in range(10)})
        assert classify_group(table, "region") == classify_group(table, "region")

    def test_missing_field_groups_under_none(self):
        table = AttributeTable.from_mapping({"a": {"region": "x"}, "b": {}, "c": {"region": None}})
        assignment = classify_group(table, "region", colors=["#1", "#2", "#3"])
        assert assignment == {"a": "#1", "b": "#2", "c": "#2"}

    def test_unhashable_values_grouped_by_content(self):
        table = AttributeTable.from_mapping({
            "a": {"tags": ["x", "y"]},
            "b": {"tags": ["x", "y"]},
            "c": {"tags": {"k": 1}},
        })
        assignment = classify_group(table, "tags", colors=["#1", "#2"])
        assert assignment == {"a": "#1", "b": "#1", "c": "#2"}

    def test_empty_color_list_rejected(self):
        with pytest.raises(ConfigError):
            classify_group(make_table({"a": "x"}), "region", colors=[])

    def test_empty_table(self):
        assert classify_group(AttributeTable(), "region") == {}


class TestGroupLogicWithBinPairs:

    def test_pair_colors_cycle_in_supplied_order(self):
        table = make_table({"1": "A", "2": "B", "3": "C"})
        assignment = classify_bin_pairs(
            table, "region", [("#hi", 10), ("#lo", 0)], logic=ColorLogic.GROUP
        )
        assert assignment == {"1": "#hi", "2": "#lo", "3": "#hi"}


class TestFacade:

    def test_group_dispatch(self):
        table = make_table({"1": "A", "2": "B"})
        assignment = classify(table, "region", "group", GroupOptions(colors=["#1", "#2"]))
        assert assignment == {"1": "#1", "2": "#2"}

    def test_group_default_options(self):
        table = make_table({"1": "A"})
        assert classify(table, "region", ColorLogic.GROUP) == {"1": PALETTES["viridis"].colors[0].lower()}

    def test_unknown_logic(self):
        with pytest.raises(ConfigError):
            classify(make_table({"1": "A"}), "region", "quantile")
