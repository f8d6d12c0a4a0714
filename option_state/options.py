"""Typed configuration options.

An :class:`Option` is a key into an option state. It carries an id that is
unique within its registry, the type its values must have, and a default
returned whenever a state holds no value for it.

Options are meant to be created once, usually as module-level constants,
and shared by reference.

Example
-------
>>> import enum
>>> from option_state import boolean_option, enum_option
>>> class Mode(enum.Enum):
...     FAST = "fast"
...     SAFE = "safe"
>>> STRICT = boolean_option("example:strict", False)
>>> MODE = enum_option("example:mode", Mode, Mode.SAFE)
>>> MODE.default_value
<Mode.SAFE: 'safe'>
"""

import enum
import logging
from dataclasses import InitVar, dataclass, field
from typing import Any, Generic, Optional, Type, TypeVar

from .registry import OptionRegistry, default_registry

logger = logging.getLogger(__name__)

V = TypeVar("V")
E = TypeVar("E", bound=enum.Enum)

# Passed by the factories so options are only created through a registry.
_CREATE = object()


@dataclass(frozen=True)
class Option(Generic[V]):
    """A uniquely identified, typed configuration key.

    Options are created with :func:`option`, :func:`boolean_option` or
    :func:`enum_option`. Calling the class directly raises ``TypeError``.

    Two options compare equal when their id and type match. The default
    value is not part of an option's identity. States never rely on this
    equality: they key values by the option instance itself.

    Attributes
    ----------
    id : str
        Option id, unique within the registry it was created in
    type : Type[V]
        Type every value of this option must have
    default_value : V, optional
        Value reported when a state does not contain this option
    """

    id: str
    type: Type[V]
    default_value: Optional[V] = field(default=None, compare=False)
    _token: InitVar[object] = None

    def __post_init__(self, _token: object) -> None:
        if _token is not _CREATE:
            raise TypeError(
                "options must be created with option(), boolean_option() "
                "or enum_option()"
            )

    def accepts(self, value: Any) -> bool:
        """Check whether a value can be stored for this option.

        ``bool`` is a subclass of ``int`` in Python, but a flag value is not
        a number: ``int`` options reject ``True``/``False``.
        """
        if value is None:
            return False
        if isinstance(value, bool) and self.type is int:
            return False
        return isinstance(value, self.type)


def option(
    option_id: str,
    value_type: Type[V],
    default: Optional[V] = None,
    *,
    registry: Optional[OptionRegistry] = None,
) -> Option[V]:
    """Create an option holding values of ``value_type``.

    Option ids must not be reused between option instances.

    Parameters
    ----------
    option_id : str
        Option id
    value_type : type
        Type of the option's values
    default : optional
        Default value, ``None`` for no default
    registry : OptionRegistry, optional
        Registry that claims the id. Defaults to the process-wide registry.

    Returns
    -------
    Option
        The new option

    Raises
    ------
    ValueError
        If the id is missing, empty or already used, or the type is missing
    TypeError
        If the type is not a class or the default does not match it
    """
    if option_id is None:
        raise ValueError("option id must not be None")
    if not isinstance(option_id, str) or not option_id:
        raise ValueError(f"option id must be a non-empty string, got {option_id!r}")
    if value_type is None:
        raise ValueError(f"value type of option '{option_id}' must not be None")
    if not isinstance(value_type, type):
        raise TypeError(
            f"value type of option '{option_id}' must be a class, got {value_type!r}"
        )

    created = Option(option_id, value_type, default, _CREATE)
    if default is not None and not created.accepts(default):
        raise TypeError(
            f"default {default!r} of option '{option_id}' is not a "
            f"{value_type.__name__}"
        )

    (registry if registry is not None else default_registry()).claim(option_id)
    logger.debug("Created option %s (%s)", option_id, value_type.__name__)
    return created


def boolean_option(
    option_id: str,
    default: bool,
    *,
    registry: Optional[OptionRegistry] = None,
) -> Option[bool]:
    """Create an option with a boolean value type."""
    if not isinstance(default, bool):
        raise TypeError(
            f"default of boolean option '{option_id}' must be a bool, got {default!r}"
        )
    return option(option_id, bool, default, registry=registry)


def enum_option(
    option_id: str,
    enum_type: Type[E],
    default: Optional[E],
    *,
    registry: Optional[OptionRegistry] = None,
) -> Option[E]:
    """Create an option with an enum value type.

    Parameters
    ----------
    option_id : str
        Option id
    enum_type : Type[Enum]
        Enum class of the option's values
    default : Enum, optional
        Default member, ``None`` for no default
    registry : OptionRegistry, optional
        Registry that claims the id

    Returns
    -------
    Option
        The new option
    """
    if not (isinstance(enum_type, type) and issubclass(enum_type, enum.Enum)):
        raise TypeError(
            f"value type of enum option '{option_id}' must be an Enum subclass, "
            f"got {enum_type!r}"
        )
    return option(option_id, enum_type, default, registry=registry)
