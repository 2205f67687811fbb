"""Tests for deep merge helpers."""

import copy

from cli_agent_config.utils.merge import deep_merge_json, deep_merged, merge_sisyphus_config


class TestDeepMergeJson:
    """Tests for deep_merge_json function."""

    def test_overlay_wins_on_scalars(self):
        base = {"a": 1, "b": 2}
        deep_merge_json(base, {"b": 3})
        assert base == {"a": 1, "b": 3}

    def test_nested_objects_merge_recursively(self):
        base = {"agents": {"oracle": {"model": "gpt", "temperature": 0.1}, "explore": {"model": "x"}}}
        overlay = {"agents": {"oracle": {"model": "claude"}}}

        deep_merge_json(base, overlay)

        assert base == {
            "agents": {"oracle": {"model": "claude", "temperature": 0.1}, "explore": {"model": "x"}}
        }

    def test_inserts_overlay_only_keys(self):
        base = {"a": 1}
        deep_merge_json(base, {"b": {"c": 2}})
        assert base == {"a": 1, "b": {"c": 2}}

    def test_never_removes_base_only_keys(self):
        base = {"keep": True, "nested": {"keep": 1, "change": 1}}
        deep_merge_json(base, {"nested": {"change": 2}, "extra": None})
        assert base["keep"] is True
        assert base["nested"] == {"keep": 1, "change": 2}

    def test_mismatched_shapes_replace(self):
        base = {"a": {"b": 1}, "c": 5}
        deep_merge_json(base, {"a": [1, 2], "c": {"d": 1}})
        assert base == {"a": [1, 2], "c": {"d": 1}}

    def test_lists_replaced_not_concatenated(self):
        base = {"disabled_agents": ["oracle"]}
        deep_merge_json(base, {"disabled_agents": ["explore"]})
        assert base == {"disabled_agents": ["explore"]}

    def test_result_does_not_alias_overlay(self):
        overlay = {"lsp": {"servers": ["a"]}}
        base = {}
        deep_merge_json(base, overlay)

        base["lsp"]["servers"].append("b")

        assert overlay == {"lsp": {"servers": ["a"]}}

    def test_idempotent_when_overlay_equals_base(self):
        value = {"a": 1, "b": {"c": [1, 2], "d": {"e": "f"}}, "g": None}
        base = copy.deepcopy(value)
        deep_merge_json(base, copy.deepcopy(value))
        assert base == value

    def test_non_mapping_inputs_are_ignored(self):
        base = {"a": 1}
        deep_merge_json(base, ["not", "a", "mapping"])
        assert base == {"a": 1}


class TestDeepMerged:
    """Tests for deep_merged function."""

    def test_does_not_mutate_inputs(self):
        base = {"a": {"b": 1}}
        overlay = {"a": {"c": 2}}

        result = deep_merged(base, overlay)

        assert result == {"a": {"b": 1, "c": 2}}
        assert base == {"a": {"b": 1}}
        assert overlay == {"a": {"c": 2}}


class TestMergeSisyphusConfig:
    """Tests for merge_sisyphus_config function."""

    def test_canonical_wins_on_overlap(self):
        result = merge_sisyphus_config({"disabled": True}, {"disabled": False, "plannerEnabled": True})
        assert result == {"disabled": True, "planner_enabled": True}

    def test_disjoint_fields_are_unioned(self):
        result = merge_sisyphus_config(
            {"default_builder_enabled": True, "replace_plan": False},
            {"disabled": True, "plannerEnabled": False},
        )
        assert result == {
            "disabled": True,
            "default_builder_enabled": True,
            "planner_enabled": False,
            "replace_plan": False,
        }

    def test_output_uses_snake_case(self):
        result = merge_sisyphus_config({}, {"defaultBuilderEnabled": True, "replacePlan": True})
        assert result == {"default_builder_enabled": True, "replace_plan": True}

    def test_unknown_fields_are_dropped(self):
        result = merge_sisyphus_config({"unknown": 1}, {"alsoUnknown": 2, "disabled": True})
        assert result == {"disabled": True}

    def test_empty_result_is_none(self):
        assert merge_sisyphus_config({}, {}) is None
        assert merge_sisyphus_config({"other": 1}, {"another": 2}) is None

    def test_non_object_side_contributes_nothing(self):
        assert merge_sisyphus_config("broken", {"plannerEnabled": True}) == {"planner_enabled": True}
        assert merge_sisyphus_config(None, 5) is None
