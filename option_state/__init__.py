"""option-state: typed, immutable configuration snapshots.

This package provides:
- Typed options with defaults, unique by id within a process
- Immutable option states built from mutable builders
- Versioned states that layer per-version changes and can be viewed at
  any version number

Example usage:
    >>> import enum
    >>> from option_state import boolean_option, enum_option, versioned_option_state
    >>>
    >>> class Format(enum.Enum):
    ...     TEXT = "text"
    ...     JSON = "json"
    >>>
    >>> COMPACT = boolean_option("myapp:compact", False)
    >>> FORMAT = enum_option("myapp:format", Format, Format.TEXT)
    >>>
    >>> states = (
    ...     versioned_option_state()
    ...     .version(1, lambda b: b.value(FORMAT, Format.TEXT))
    ...     .version(2, lambda b: b.value(FORMAT, Format.JSON).value(COMPACT, True))
    ...     .build()
    ... )
    >>> states.value(FORMAT), states.at(1).value(FORMAT)
    (<Format.JSON: 'json'>, <Format.TEXT: 'text'>)
"""

__version__ = "1.0.0"

# Options
from .options import (
    Option,
    boolean_option,
    enum_option,
    option,
)

# Registry
from .registry import (
    OptionRegistry,
    default_registry,
)

# Unversioned states
from .state import (
    Builder,
    ImmutableOptionState,
    OptionState,
    empty_option_state,
    option_state,
)

# Versioned states
from .versioned import (
    Versioned,
    VersionedBuilder,
    flatten,
    versioned_option_state,
)

__all__ = [
    # Version
    "__version__",
    # Options
    "Option",
    "boolean_option",
    "enum_option",
    "option",
    # Registry
    "OptionRegistry",
    "default_registry",
    # States
    "Builder",
    "ImmutableOptionState",
    "OptionState",
    "empty_option_state",
    "option_state",
    # Versioned states
    "Versioned",
    "VersionedBuilder",
    "flatten",
    "versioned_option_state",
]
