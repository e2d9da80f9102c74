"""
Tests for annotation to Cairo type mapping
"""

import pytest
from py2cairo.translators.types import TypeMapper, DEFAULT_TYPE_MAPPER


def test_default_table():
    """Test the built-in scalar mappings"""
    cases = [
        ("int", "felt252"),
        ("str", "felt252"),
        ("bool", "bool"),
        ("bigint", "u256"),
    ]

    for python_type, expected_cairo in cases:
        result = DEFAULT_TYPE_MAPPER.resolve(python_type)
        assert result == expected_cairo, f"Failed for {python_type}: got {result}"


def test_missing_annotation_falls_back():
    assert DEFAULT_TYPE_MAPPER.resolve(None) == "felt252"


def test_unmapped_types_fall_back():
    """Test that lookup is exact and never fails"""
    for text in ["float", "Int", "BOOL", "List[int]", "Optional[bool]", "'int'", ""]:
        assert DEFAULT_TYPE_MAPPER.resolve(text) == "felt252", text


def test_custom_table_and_fallback():
    mapper = TypeMapper({"Address": "ContractAddress"}, fallback="u128")

    assert mapper.resolve("Address") == "ContractAddress"
    assert mapper.resolve("int") == "u128"
    assert mapper.resolve(None) == "u128"
    assert mapper.fallback == "u128"


def test_table_is_immutable():
    source = {"int": "felt252"}
    mapper = TypeMapper(source)

    with pytest.raises(TypeError):
        mapper.table["bool"] = "bool"

    # Mutating the dict it was built from has no effect either
    source["bool"] = "bool"
    assert mapper.resolve("bool") == "felt252"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
