"""Tests for nested mapping helpers."""

import pytest

from noname_common.domain.arr import each, flatten


class TestFlatten:
    def test_nested_mapping(self) -> None:
        data = {"a": "b", "c": {"d": "e", "f": {"g": 1}}}
        assert flatten(data) == {"a": "b", "c.d": "e", "c.f.g": 1}

    def test_sequences_use_indexes(self) -> None:
        assert flatten({"a": [10, {"b": 20}]}) == {"a.0": 10, "a.1.b": 20}

    def test_custom_separator(self) -> None:
        assert flatten({"a": {"b": 1}}, separator="__") == {"a__b": 1}

    def test_prepend(self) -> None:
        assert flatten({"a": {"b": 1}}, prepend="root.") == {"root.a.b": 1}

    @pytest.mark.parametrize("empty", [{}, []], ids=["dict", "list"])
    def test_empty_branch_kept_as_leaf(self, empty: object) -> None:
        assert flatten({"a": empty, "b": 1}) == {"a": empty, "b": 1}

    def test_first_writer_wins_on_collision(self) -> None:
        assert flatten({"a.b": 1, "a": {"b": 2}}) == {"a.b": 1}

    def test_top_level_list(self) -> None:
        assert flatten(["x", ["y"]]) == {"0": "x", "1.0": "y"}


class TestEach:
    def test_maps_leaves(self) -> None:
        result = each({"a": 1, "b": {"c": 2}}, lambda value, key: value * 10)
        assert result == {"a": 10, "b": {"c": 20}}

    def test_callback_receives_key(self) -> None:
        assert each({"a": 1, "b": 2}, lambda value, key: key) == {"a": "a", "b": "b"}

    def test_preserves_container_types(self) -> None:
        result = each({"l": [1, 2], "t": (3, 4)}, lambda value, key: value + 1)
        assert result == {"l": [2, 3], "t": (4, 5)}
        assert isinstance(result["t"], tuple)

    def test_does_not_mutate_input(self) -> None:
        data = {"a": [1]}
        each(data, lambda value, key: 0)
        assert data == {"a": [1]}

    def test_scalar_passthrough(self) -> None:
        assert each(5, lambda value, key: 0) == 5
