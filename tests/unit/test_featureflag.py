"""Unit tests for the deprecated feature-flag names."""

import pytest

from option_state import Option, Versioned, empty_option_state
from option_state import featureflag
from option_state.featureflag import (
    FeatureFlagConfig,
    boolean_flag,
    child_sets,
    enum_flag,
)

from tests.fixtures import ENUM_FLAG, ONE, Sample


class TestFlagFactories:
    """Tests for boolean_flag and enum_flag."""

    def test_feature_flag_is_option(self):
        """Test that FeatureFlag names the Option class and warns."""
        with pytest.warns(DeprecationWarning, match="Option"):
            alias = featureflag.FeatureFlag
        assert alias is Option

    def test_unknown_attribute(self):
        """Test that other missing names still raise AttributeError."""
        with pytest.raises(AttributeError):
            featureflag.FeatureRing

    def test_boolean_flag(self, registry):
        """Test that boolean_flag creates an option and warns."""
        with pytest.warns(DeprecationWarning, match="boolean_option"):
            flag = boolean_flag("legacy", True, registry=registry)
        assert isinstance(flag, Option)
        assert flag.default_value is True
        assert "legacy" in registry

    def test_enum_flag(self, registry):
        """Test that enum_flag creates an option and warns."""
        with pytest.warns(DeprecationWarning, match="enum_option"):
            flag = enum_flag("legacy_enum", Sample, Sample.TWO, registry=registry)
        assert flag.type is Sample


class TestFeatureFlagConfig:
    """Tests for the FeatureFlagConfig factories."""

    def test_empty(self):
        """Test the empty config."""
        with pytest.warns(DeprecationWarning):
            config = FeatureFlagConfig.empty()
        assert config is empty_option_state()
        assert not config.has(ONE)

    def test_builder(self):
        """Test the unversioned builder."""
        with pytest.warns(DeprecationWarning):
            builder = FeatureFlagConfig.builder()
        config = builder.value(ONE, False).build()
        assert config.has(ONE)
        assert config.value(ONE) is False

    def test_versioned_builder_and_child_sets(self):
        """Test the versioned builder and child_sets alias."""
        with pytest.warns(DeprecationWarning):
            builder = FeatureFlagConfig.versioned_builder()
        versioned = (
            builder
            .version(1, lambda b: b.value(ENUM_FLAG, Sample.TWO))
            .version(2, lambda b: b.value(ENUM_FLAG, Sample.THREE))
            .build()
        )
        assert isinstance(versioned, Versioned)
        with pytest.warns(DeprecationWarning, match="child_states"):
            children = child_sets(versioned.at(1))
        assert list(children) == [1]
