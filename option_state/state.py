"""Immutable option states and their builder.

An option state maps options to values. Lookups are keyed by the option
instance, not by its id: two distinct options that happen to share an id
and type (possible across registries) are different keys.

Example
-------
>>> from option_state import boolean_option, option_state
>>> VERBOSE = boolean_option("example:verbose", False)
>>> state = option_state().value(VERBOSE, True).build()
>>> state.has(VERBOSE), state.value(VERBOSE)
(True, True)
"""

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple, TypeVar

from .options import Option

V = TypeVar("V")

# id(option) -> (option, value). The option is kept alongside its value so
# the id cannot be recycled while the entry exists.
Entries = Mapping[int, Tuple[Option, Any]]

_PACKAGE = __name__.split(".")[0]


def _require(value: Any, name: str) -> Any:
    if value is None:
        raise ValueError(f"{name} must not be None")
    return value


class OptionState(ABC):
    """An immutable collection of option values.

    The hierarchy is closed: the only implementations are
    :class:`ImmutableOptionState` and :class:`~option_state.versioned.Versioned`.
    Defining a subclass anywhere else raises ``TypeError``.
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.__module__.split(".")[0] != _PACKAGE:
            raise TypeError(
                f"{cls.__qualname__} cannot extend OptionState: only "
                f"{_PACKAGE} provides option state implementations"
            )

    @abstractmethod
    def has(self, option: Option[Any]) -> bool:
        """Get whether this state contains a value for ``option`` at all."""

    @abstractmethod
    def value(self, option: Option[V]) -> V:
        """Get the value for ``option``, or its default if none is set."""

    @abstractmethod
    def _entries(self) -> Entries:
        """Backing entries copied by :meth:`Builder.values`."""

    def items(self) -> List[Tuple[Option, Any]]:
        """Get the ``(option, value)`` pairs explicitly set in this state."""
        return list(self._entries().values())

    def __len__(self) -> int:
        return len(self._entries())


class ImmutableOptionState(OptionState):
    """An unversioned option state, created by :class:`Builder`."""

    __slots__ = ("_values",)

    def __init__(self, values: Entries):
        self._values = MappingProxyType(dict(values))

    def has(self, option: Option[Any]) -> bool:
        return id(_require(option, "option")) in self._values

    def value(self, option: Option[V]) -> V:
        entry = self._values.get(id(_require(option, "option")))
        if entry is None:
            return option.default_value
        stored = entry[1]
        if not option.accepts(stored):
            raise TypeError(
                f"value {stored!r} stored for option '{option.id}' is not a "
                f"{option.type.__name__}"
            )
        return stored

    def _entries(self) -> Entries:
        return self._values

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return dict(self._values) == dict(other._values)

    def __hash__(self) -> int:
        # Values may be unhashable, so only the keys take part.
        return hash((len(self._values), frozenset(self._values)))

    def __repr__(self) -> str:
        values = {opt.id: value for opt, value in self._values.values()}
        return f"{type(self).__name__}(values={values!r})"


EMPTY = ImmutableOptionState({})


class Builder:
    """Mutable accumulator producing an :class:`ImmutableOptionState`.

    A builder is meant for a single owner. It is not synchronized.
    """

    __slots__ = ("_values",)

    def __init__(self):
        self._values: Dict[int, Tuple[Option, Any]] = {}

    def value(self, option: Option[V], value: V) -> "Builder":
        """Set the value for a specific option.

        Parameters
        ----------
        option : Option
            Option to set the value for
        value
            The value, an instance of the option's type

        Returns
        -------
        Builder
            This builder

        Raises
        ------
        ValueError
            If option or value is None
        TypeError
            If the value does not match the option's type
        """
        _require(option, "option")
        _require(value, "value")
        if not isinstance(option, Option):
            raise TypeError(f"expected an Option, got {option!r}")
        if not option.accepts(value):
            raise TypeError(
                f"value {value!r} for option '{option.id}' is not a "
                f"{option.type.__name__}"
            )
        self._values[id(option)] = (option, value)
        return self

    def values(self, existing: OptionState) -> "Builder":
        """Apply all values from an existing state, overwriting conflicts.

        A versioned state contributes its current flattened view.

        Raises
        ------
        ValueError
            If existing is None
        TypeError
            If existing is not an option state built by this package
        """
        _require(existing, "existing")
        if not isinstance(existing, OptionState):
            raise TypeError(
                f"existing set {existing!r} is of an unknown implementation type"
            )
        self._values.update(existing._entries())
        return self

    def build(self) -> OptionState:
        """Create a completed option state.

        Returns the shared empty state when no values were set.
        """
        if not self._values:
            return EMPTY
        return ImmutableOptionState(self._values)


def empty_option_state() -> OptionState:
    """Get an empty set of options."""
    return EMPTY


def option_state() -> Builder:
    """Create a builder for an unversioned option state."""
    return Builder()
