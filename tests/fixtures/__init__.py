"""Test fixtures for option-state.

Provides shared options and prebuilt option states.
"""

from .states import (
    ENUM_FLAG,
    ONE,
    SCENARIO,
    TWO,
    UNVERSIONED,
    Sample,
    build_scenario,
    key,
)

__all__ = [
    "ENUM_FLAG",
    "ONE",
    "SCENARIO",
    "TWO",
    "UNVERSIONED",
    "Sample",
    "build_scenario",
    "key",
]
