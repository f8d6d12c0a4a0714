"""Deprecated feature-flag names for options and option states.

Options were first published as "feature flags" and states as "feature
flag configs". These names still work but warn; use the equivalents in
:mod:`option_state` instead.

=========================================  ==================================
Deprecated                                 Replacement
=========================================  ==================================
``FeatureFlag``                            ``Option``
``boolean_flag(id, default)``              ``boolean_option(id, default)``
``enum_flag(id, enum_type, default)``      ``enum_option(id, enum_type, default)``
``FeatureFlagConfig.empty()``              ``empty_option_state()``
``FeatureFlagConfig.builder()``            ``option_state()``
``FeatureFlagConfig.versioned_builder()``  ``versioned_option_state()``
``child_sets(versioned)``                  ``versioned.child_states()``
=========================================  ==================================
"""

import warnings
from typing import Mapping, Optional, Type

from .options import E, Option, boolean_option, enum_option
from .registry import OptionRegistry
from .state import Builder, OptionState, empty_option_state, option_state
from .versioned import Versioned, VersionedBuilder, versioned_option_state


def __getattr__(name: str):
    if name == "FeatureFlag":
        warnings.warn(
            "FeatureFlag is deprecated, use Option instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return Option
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def _deprecated(old: str, new: str) -> None:
    warnings.warn(
        f"{old} is deprecated, use {new} instead",
        DeprecationWarning,
        stacklevel=3,
    )


def boolean_flag(
    flag_id: str, default: bool, *, registry: Optional[OptionRegistry] = None
) -> Option[bool]:
    """Create a boolean flag. Deprecated alias of :func:`boolean_option`."""
    _deprecated("boolean_flag()", "boolean_option()")
    return boolean_option(flag_id, default, registry=registry)


def enum_flag(
    flag_id: str,
    enum_type: Type[E],
    default: Optional[E],
    *,
    registry: Optional[OptionRegistry] = None,
) -> Option[E]:
    """Create an enum flag. Deprecated alias of :func:`enum_option`."""
    _deprecated("enum_flag()", "enum_option()")
    return enum_option(flag_id, enum_type, default, registry=registry)


class FeatureFlagConfig:
    """Deprecated factory namespace for option states."""

    @staticmethod
    def empty() -> OptionState:
        _deprecated("FeatureFlagConfig.empty()", "empty_option_state()")
        return empty_option_state()

    @staticmethod
    def builder() -> Builder:
        _deprecated("FeatureFlagConfig.builder()", "option_state()")
        return option_state()

    @staticmethod
    def versioned_builder() -> VersionedBuilder:
        _deprecated("FeatureFlagConfig.versioned_builder()", "versioned_option_state()")
        return versioned_option_state()


def child_sets(versioned: Versioned) -> Mapping[int, OptionState]:
    """Per-version changes. Deprecated alias of ``Versioned.child_states()``."""
    _deprecated("child_sets()", "Versioned.child_states()")
    return versioned.child_states()
