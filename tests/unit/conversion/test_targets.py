"""
Tests for envcast.utilities.conversion.targets.

Covers deriving target tags from defaults and from explicit type hints.
"""

import datetime
import typing

import numpy as np
import pytest

from envcast.utilities.conversion.targets import (
    TargetType,
    as_target,
    infer_target,
    target_for
)


class TestInferTarget:
    """Test target inference from default values."""

    @pytest.mark.parametrize("default, expected", [
        ("info", str),
        (True, bool),
        (8, int),
        (1.23, float),
        (np.uint8(10), np.uint8),
        (np.int16(-3), np.int16),
        (np.float32(1.5), np.float32),
        (datetime.date(2020, 1, 1), datetime.date),
        (datetime.datetime(2020, 1, 1, 12, 0), datetime.datetime),
        (datetime.time(7, 32), datetime.time),
    ])
    def test_scalar_defaults(self, default, expected):
        """Test that scalar defaults map to their exact type."""
        assert infer_target(default) == TargetType(expected)

    def test_bool_is_not_int(self):
        """Test that a bool default is never treated as an integer."""
        assert infer_target(False).python_type is bool

    def test_list_default(self):
        """Test element type inference for lists."""
        assert infer_target([1, 2, 3]) == TargetType(list, TargetType(int))

    def test_nested_list_default(self):
        """Test inference through nested lists."""
        expected = TargetType(list, TargetType(list, TargetType(str)))
        assert infer_target([["a"], ["b", "c"]]) == expected

    def test_dict_default(self):
        """Test value type inference for mappings."""
        target = infer_target({"connect": 1.0, "request": 2.0})
        assert target == TargetType(dict, TargetType(float))

    def test_empty_collections_need_a_hint(self):
        """Test that empty defaults cannot be inferred."""
        with pytest.raises(TypeError, match="as_type"):
            infer_target([])
        with pytest.raises(TypeError, match="as_type"):
            infer_target({})

    def test_mixed_elements_rejected(self):
        """Test that heterogeneous defaults are rejected."""
        with pytest.raises(TypeError, match="Mixed"):
            infer_target([1, "two"])
        with pytest.raises(TypeError, match="Mixed"):
            infer_target([1, 2.0])

    def test_non_string_keys_rejected(self):
        """Test that mapping keys must be strings."""
        with pytest.raises(TypeError, match="keys"):
            infer_target({1: "a"})

    def test_none_needs_a_hint(self):
        """Test that None cannot be inferred."""
        with pytest.raises(TypeError):
            infer_target(None)

    @pytest.mark.parametrize("default", [object(), (1, 2), {1, 2}, b"raw"])
    def test_unsupported_defaults(self, default):
        """Test that unsupported default types raise TypeError."""
        with pytest.raises(TypeError):
            infer_target(default)


class TestAsTarget:
    """Test explicit type hints."""

    @pytest.mark.parametrize("alias, expected", [
        ("i8", np.int8),
        ("i32", np.int32),
        ("u8", np.uint8),
        ("usize", np.uint64),
        ("f32", np.float32),
        ("F64", np.float64),
        ("str", str),
        ("bool", bool),
    ])
    def test_width_aliases(self, alias, expected):
        """Test that width alias strings resolve to numpy types."""
        assert as_target(alias).python_type is expected

    def test_unknown_alias(self):
        """Test that unknown aliases are rejected."""
        with pytest.raises(TypeError, match="Unknown type alias"):
            as_target("i128")

    def test_generic_aliases(self):
        """Test builtin and typing generic aliases."""
        assert as_target(list[int]) == TargetType(list, TargetType(int))
        assert as_target(typing.List[float]) == TargetType(list, TargetType(float))
        assert as_target(dict[str, int]) == TargetType(dict, TargetType(int))
        assert as_target(typing.Dict[str, str]) == TargetType(dict, TargetType(str))
        assert as_target(list[list[np.uint8]]).describe() == "list[list[uint8]]"

    def test_bare_collections_rejected(self):
        """Test that list/dict hints need element types."""
        with pytest.raises(TypeError):
            as_target(list)
        with pytest.raises(TypeError):
            as_target(dict)

    def test_non_string_key_hint_rejected(self):
        """Test that mapping hints must have string keys."""
        with pytest.raises(TypeError):
            as_target(dict[int, int])

    def test_target_type_passthrough(self):
        """Test that an existing tag is returned as is."""
        target = TargetType(np.int64)
        assert as_target(target) is target

    def test_unsupported_hint(self):
        """Test that unsupported types are rejected."""
        with pytest.raises(TypeError):
            as_target(complex)


class TestTargetFor:
    """Test combining defaults with hints."""

    def test_hint_with_matching_default(self):
        """Test that a matching default is accepted."""
        assert target_for({}, dict[str, int]) == TargetType(dict, TargetType(int))
        assert target_for([1, 2], list[int]) == TargetType(list, TargetType(int))
        assert target_for(np.uint8(5), "u8") == TargetType(np.uint8)

    def test_hint_with_none_default(self):
        """Test that None is allowed when a hint is given."""
        assert target_for(None, "f32") == TargetType(np.float32)

    def test_mismatched_default_rejected(self):
        """Test that the default must match the hint exactly."""
        with pytest.raises(TypeError, match="is not a uint8"):
            target_for(5, "u8")
        with pytest.raises(TypeError):
            target_for([1, "a"], list[int])
        with pytest.raises(TypeError):
            target_for({"a": 1.0}, dict[str, int])


class TestTargetType:
    """Test the tag itself."""

    def test_describe(self):
        """Test readable names."""
        assert TargetType(int).describe() == "int"
        assert TargetType(dict, TargetType(np.uint8)).describe() == "dict[str, uint8]"
        assert TargetType(list, TargetType(str)).describe() == "list[str]"

    def test_invalid_tags(self):
        """Test construction checks."""
        with pytest.raises(TypeError):
            TargetType(list)
        with pytest.raises(TypeError):
            TargetType(int, TargetType(int))
        with pytest.raises(TypeError):
            TargetType(object)

    def test_accepts_is_exact(self):
        """Test that accepts() does not widen types."""
        assert TargetType(int).accepts(3)
        assert not TargetType(int).accepts(True)
        assert not TargetType(float).accepts(3)
        assert not TargetType(datetime.date).accepts(datetime.datetime(2020, 1, 1))

    def test_collection_flags(self):
        """Test the shape properties."""
        sequence = TargetType(list, TargetType(int))
        mapping = TargetType(dict, TargetType(int))
        assert sequence.is_sequence and sequence.is_collection
        assert mapping.is_mapping and mapping.is_collection
        assert not TargetType(str).is_collection
