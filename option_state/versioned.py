"""Versioned option states.

A versioned state holds one incremental option state per version number.
Looking values up at a version applies every state registered at or below
that version in ascending order, later versions overriding earlier ones.

Example
-------
>>> from option_state import boolean_option, versioned_option_state
>>> LEGACY = boolean_option("example:legacy", True)
>>> versioned = (
...     versioned_option_state()
...     .version(1, lambda b: b.value(LEGACY, True))
...     .version(4, lambda b: b.value(LEGACY, False))
...     .build()
... )
>>> versioned.value(LEGACY), versioned.at(3).value(LEGACY)
(False, True)
"""

import logging
from bisect import bisect_right
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Tuple, TypeVar

from .options import Option
from .state import EMPTY, Builder, Entries, OptionState

logger = logging.getLogger(__name__)

V = TypeVar("V")


def _require_version(version: Any) -> int:
    if isinstance(version, bool) or not isinstance(version, int):
        raise TypeError(f"version must be an int, got {version!r}")
    return version


def _applicable(
    sets: Mapping[int, OptionState], target_version: int
) -> List[Tuple[int, OptionState]]:
    """Entries of ``sets`` with version <= target, ascending by version."""
    versions = sorted(sets)
    cut = bisect_right(versions, target_version)
    return [(version, sets[version]) for version in versions[:cut]]


def flatten(sets: Mapping[int, OptionState], target_version: int) -> OptionState:
    """Merge all states registered at or below ``target_version``.

    States are applied in ascending version order, so for any option the
    value from the highest applicable version wins. Versions above the
    target have no influence.

    Parameters
    ----------
    sets : Mapping[int, OptionState]
        Incremental state per version
    target_version : int
        Highest version to include

    Returns
    -------
    OptionState
        The flattened state, the shared empty state if nothing applied
    """
    builder = Builder()
    for _, child in _applicable(sets, target_version):
        builder.values(child)
    return builder.build()


class Versioned(OptionState):
    """A composite option state.

    Lookups use the flattened view at :attr:`target_version`, which by
    default is the newest registered version. :meth:`at` gives views at
    other versions without modifying this instance.
    """

    __slots__ = ("_sets", "_target_version", "_filtered")

    def __init__(
        self,
        sets: Mapping[int, OptionState],
        target_version: int,
        filtered: OptionState,
    ):
        self._sets = sets
        self._target_version = target_version
        self._filtered = filtered

    @property
    def target_version(self) -> int:
        """Version whose flattened view this instance reports."""
        return self._target_version

    @property
    def versions(self) -> Tuple[int, ...]:
        """All registered versions, ascending, regardless of the target."""
        return tuple(sorted(self._sets))

    def has(self, option: Option[Any]) -> bool:
        return self._filtered.has(option)

    def value(self, option: Option[V]) -> V:
        return self._filtered.value(option)

    def _entries(self) -> Entries:
        return self._filtered._entries()

    def child_states(self) -> Mapping[int, OptionState]:
        """The individual changes in each version up to the target.

        Returns
        -------
        Mapping[int, OptionState]
            Read-only mapping of version to its incremental state
        """
        return MappingProxyType(dict(_applicable(self._sets, self._target_version)))

    def at(self, version: int) -> "Versioned":
        """Get a view showing only values from versions <= ``version``.

        Parameters
        ----------
        version : int
            Version to query. Need not be a registered version.

        Returns
        -------
        Versioned
            A new instance sharing this instance's per-version states
        """
        _require_version(version)
        logger.debug("Viewing versioned option state at version %d", version)
        return Versioned(self._sets, version, flatten(self._sets, version))

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return (
            self._target_version == other._target_version
            and dict(self._sets) == dict(other._sets)
            and self._filtered == other._filtered
        )

    def __hash__(self) -> int:
        return hash(
            (self._target_version, frozenset(self._sets.items()), self._filtered)
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(sets={dict(self._sets)!r}, "
            f"target_version={self._target_version!r}, "
            f"filtered={self._filtered!r})"
        )


EMPTY_VERSIONED = Versioned(MappingProxyType({}), 0, EMPTY)


class VersionedBuilder:
    """Accumulates one :class:`Builder` per version.

    Not synchronized; use from a single owner, then call :meth:`build`.
    """

    __slots__ = ("_builders",)

    def __init__(self):
        self._builders: Dict[int, Builder] = {}

    def version(
        self, version: int, configure: Callable[[Builder], Any]
    ) -> "VersionedBuilder":
        """Register options for a specific version.

        Calling this again with the same version adds to the same builder.

        Parameters
        ----------
        version : int
            Version to register
        configure : Callable[[Builder], Any]
            Receives the version's builder

        Returns
        -------
        VersionedBuilder
            This builder
        """
        _require_version(version)
        if configure is None:
            raise ValueError("configure must not be None")
        if not callable(configure):
            raise TypeError(f"configure must be callable, got {configure!r}")

        builder = self._builders.get(version)
        if builder is None:
            builder = self._builders[version] = Builder()
        configure(builder)
        return self

    def build(self) -> Versioned:
        """Create a completed versioned state viewing the newest version."""
        if not self._builders:
            return EMPTY_VERSIONED

        built = {
            version: self._builders[version].build()
            for version in sorted(self._builders)
        }
        sets = MappingProxyType(built)
        latest = max(built)
        logger.debug(
            "Built versioned option state with versions %s, targeting %d",
            list(built),
            latest,
        )
        return Versioned(sets, latest, flatten(sets, latest))


def versioned_option_state() -> VersionedBuilder:
    """Create a builder for a versioned option state."""
    return VersionedBuilder()
