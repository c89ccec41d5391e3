"""Tests for hook_utils.dotpath module."""

import pytest

from hook_utils.config import configure
from hook_utils.dotpath import MISSING, get_by_dot, has_by_dot, set_by_dot, split_path
from hook_utils.errors import InvalidPathError


# =============================================================================
# split_path
# =============================================================================


class TestSplitPath:
    def test_splits_on_dots(self):
        assert split_path("a.b.c") == ["a", "b", "c"]

    def test_permissive_keeps_empty_segments(self):
        assert split_path("") == [""]
        assert split_path("a..b.") == ["a", "", "b", ""]

    def test_strict_rejects_empty_segments(self):
        with pytest.raises(InvalidPathError) as exc_info:
            split_path(".a", strict=True)
        assert exc_info.value.path == ".a"

    def test_strict_from_settings(self):
        configure(strict_paths=True)
        with pytest.raises(InvalidPathError):
            split_path("a.")
        assert split_path("a.", strict=False) == ["a", ""]

    def test_invalid_path_is_value_error(self):
        with pytest.raises(ValueError):
            split_path("", strict=True)


# =============================================================================
# get_by_dot / has_by_dot
# =============================================================================


class TestGetByDot:
    def test_nested_value(self):
        assert get_by_dot({"a": {"b": 1}}, "a.b") == 1

    def test_single_segment(self):
        assert get_by_dot({"a": 1}, "a") == 1

    def test_missing_key(self):
        assert get_by_dot({"a": {}}, "a.b") is MISSING

    def test_non_mapping_intermediate(self):
        assert get_by_dot({"a": 1}, "a.b") is MISSING
        assert get_by_dot({"a": 1}, "a.b.c.d") is MISSING

    def test_lists_are_not_indexed(self):
        assert get_by_dot({"a": [10, 20]}, "a.0") is MISSING

    def test_non_mapping_root(self):
        assert get_by_dot(None, "a") is MISSING
        assert get_by_dot("text", "a") is MISSING

    def test_none_is_a_value(self):
        assert get_by_dot({"a": None}, "a") is None

    def test_default(self):
        assert get_by_dot({}, "a.b", default="fallback") == "fallback"

    def test_empty_key_in_permissive_mode(self):
        assert get_by_dot({"": {"x": 1}}, ".x") == 1

    def test_does_not_mutate(self):
        root = {"a": {"b": 1}}
        get_by_dot(root, "a.c.d")
        assert root == {"a": {"b": 1}}


class TestHasByDot:
    def test_present(self):
        assert has_by_dot({"a": {"b": None}}, "a.b") is True

    def test_absent(self):
        assert has_by_dot({"a": {}}, "a.b") is False
        assert has_by_dot({"a": 1}, "a.b") is False

    def test_distinguishes_stored_missing(self):
        root = set_by_dot({}, "a", MISSING)
        assert get_by_dot(root, "a") is MISSING
        assert has_by_dot(root, "a") is True


# =============================================================================
# set_by_dot
# =============================================================================


class TestSetByDot:
    def test_creates_intermediates(self):
        assert set_by_dot({}, "a.b.c", 1) == {"a": {"b": {"c": 1}}}

    def test_returns_same_object(self):
        root = {"x": 1}
        assert set_by_dot(root, "y", 2) is root
        assert root == {"x": 1, "y": 2}

    def test_keeps_existing_siblings(self):
        root = {"a": {"keep": True}}
        set_by_dot(root, "a.b", 1)
        assert root == {"a": {"keep": True, "b": 1}}

    def test_overwrites_non_mapping_intermediate(self):
        root = {"a": 1}
        set_by_dot(root, "a.b", 2)
        assert root == {"a": {"b": 2}}

    def test_overwrites_list_intermediate(self):
        root = {"a": [1, 2]}
        set_by_dot(root, "a.0", "x")
        assert root == {"a": {"0": "x"}}

    def test_round_trip(self):
        value = object()
        root = set_by_dot({"a": {"z": 0}}, "a.b.c", value)
        assert get_by_dot(root, "a.b.c") is value

    def test_delete(self):
        root = {"a": {"b": 1, "c": 2}}
        set_by_dot(root, "a.b", MISSING, True)
        assert root == {"a": {"c": 2}}

    def test_delete_keeps_created_intermediates(self):
        assert set_by_dot({}, "a.b.c", MISSING, True) == {"a": {"b": {}}}

    def test_missing_without_delete_is_stored(self):
        root = set_by_dot({}, "a", MISSING)
        assert "a" in root

    def test_none_is_never_deleted(self):
        root = set_by_dot({"a": 1}, "a", None, True)
        assert root == {"a": None}

    def test_non_mapping_root_raises(self):
        with pytest.raises(TypeError):
            set_by_dot([], "a", 1)

    def test_empty_path_sets_empty_key(self):
        assert set_by_dot({}, "", 1) == {"": 1}


class TestMissing:
    def test_falsy_and_repr(self):
        assert not MISSING
        assert repr(MISSING) == "MISSING"
