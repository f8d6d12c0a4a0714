"""Unit tests for option creation."""

import dataclasses
import enum

import pytest

from option_state import (
    Option,
    OptionRegistry,
    boolean_option,
    default_registry,
    enum_option,
    option,
)

from tests.fixtures import ENUM_FLAG, ONE, Sample


class Color(enum.Enum):
    RED = "red"
    BLUE = "blue"


class TestOptionFactories:
    """Tests for option(), boolean_option() and enum_option()."""

    def test_boolean_option(self, registry):
        """Test creating a boolean option."""
        flag = boolean_option("bool", True, registry=registry)
        assert flag.id == "bool"
        assert flag.type is bool
        assert flag.default_value is True
        assert "bool" in registry

    def test_enum_option(self, registry):
        """Test creating an enum option."""
        color = enum_option("color", Color, Color.RED, registry=registry)
        assert color.type is Color
        assert color.default_value is Color.RED

    def test_enum_option_without_default(self, registry):
        """Test that enum options may omit a default."""
        color = enum_option("color", Color, None, registry=registry)
        assert color.default_value is None

    def test_generic_option(self, registry):
        """Test the typed factory for arbitrary value types."""
        retries = option("retries", int, 3, registry=registry)
        assert retries.type is int
        assert retries.default_value == 3

        name = option("name", str, registry=registry)
        assert name.default_value is None

    def test_duplicate_id_fails(self, registry):
        """Test that an id cannot be reused."""
        boolean_option("dup", True, registry=registry)
        with pytest.raises(ValueError, match="already been used"):
            boolean_option("dup", False, registry=registry)

    def test_duplicate_id_fails_across_types(self, registry):
        """Test that uniqueness ignores the value type."""
        boolean_option("dup", True, registry=registry)
        with pytest.raises(ValueError):
            enum_option("dup", Color, Color.RED, registry=registry)

    def test_default_registry_rejects_fixture_ids(self):
        """Test that module-level option ids are taken process-wide."""
        with pytest.raises(ValueError):
            boolean_option(ONE.id, True)

    def test_private_registry_is_isolated(self):
        """Test that ids claimed in a fresh registry stay out of the default one."""
        private = OptionRegistry()
        boolean_option("isolated", True, registry=private)
        assert "isolated" in private
        assert "isolated" not in default_registry()

    def test_private_registry_allows_default_ids(self):
        """Test that a fresh registry scopes uniqueness to itself."""
        twin = boolean_option(ONE.id, False, registry=OptionRegistry())
        assert twin.id == ONE.id

    def test_direct_construction_fails(self):
        """Test that options cannot skip the registry."""
        with pytest.raises(TypeError, match="must be created with"):
            Option(ONE.id, bool)
        with pytest.raises(TypeError):
            Option("unclaimed", int, 3)
        assert "unclaimed" not in default_registry()

    def test_none_id_fails(self, registry):
        """Test that a missing id is rejected."""
        with pytest.raises(ValueError):
            boolean_option(None, True, registry=registry)

    def test_empty_id_fails(self, registry):
        """Test that an empty id is rejected."""
        with pytest.raises(ValueError):
            option("", int, registry=registry)

    def test_none_type_fails(self, registry):
        """Test that a missing type is rejected."""
        with pytest.raises(ValueError):
            option("typeless", None, registry=registry)

    def test_non_class_type_fails(self, registry):
        """Test that the type must be a class."""
        with pytest.raises(TypeError):
            option("odd", "int", registry=registry)

    def test_mismatched_default_fails(self, registry):
        """Test that the default must match the value type."""
        with pytest.raises(TypeError):
            option("retries", int, "three", registry=registry)
        with pytest.raises(TypeError):
            boolean_option("flag", 1, registry=registry)
        with pytest.raises(TypeError):
            enum_option("color", Color, Sample.ONE, registry=registry)

    def test_failed_creation_does_not_claim_id(self, registry):
        """Test that a rejected option leaves its id available."""
        with pytest.raises(TypeError):
            option("retries", int, "three", registry=registry)
        assert "retries" not in registry
        option("retries", int, 3, registry=registry)

    def test_enum_option_requires_enum(self, registry):
        """Test that enum_option only accepts Enum subclasses."""
        with pytest.raises(TypeError):
            enum_option("not_enum", str, "x", registry=registry)


class TestOptionIdentity:
    """Tests for option equality and immutability."""

    def test_equality_ignores_default(self):
        """Test that equality covers id and type only."""
        a = option("same", int, 1, registry=OptionRegistry())
        b = option("same", int, 2, registry=OptionRegistry())
        assert a == b
        assert hash(a) == hash(b)

    def test_different_type_not_equal(self):
        """Test that options with different types differ."""
        a = option("same", int, registry=OptionRegistry())
        b = option("same", str, registry=OptionRegistry())
        assert a != b

    def test_frozen(self):
        """Test that options cannot be modified."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            ONE.default_value = False

    def test_repr(self):
        """Test the string representation."""
        text = repr(ENUM_FLAG)
        assert "option-state:test/enum_flag" in text
        assert "Sample.ONE" in text


class TestAccepts:
    """Tests for Option.accepts."""

    def test_matching_value(self):
        """Test values of the declared type."""
        assert ONE.accepts(False)
        assert ENUM_FLAG.accepts(Sample.THREE)

    def test_mismatched_value(self):
        """Test values of other types."""
        assert not ONE.accepts(1)
        assert not ENUM_FLAG.accepts(3)
        assert not ENUM_FLAG.accepts(Color.RED)

    def test_none_rejected(self):
        """Test that None is never a value."""
        assert not ONE.accepts(None)

    def test_int_option_rejects_bool(self, registry):
        """Test that booleans are not numbers for int options."""
        retries = option("retries", int, registry=registry)
        assert retries.accepts(3)
        assert not retries.accepts(True)

    def test_subclass_accepted(self, registry):
        """Test that instances of subclasses are accepted."""
        anything = option("anything", object, registry=registry)
        assert anything.accepts(True)
        assert anything.accepts("text")
