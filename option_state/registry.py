"""Process-wide registry of option ids.

Every option claims its id here when it is created. An id can only be
claimed once for the lifetime of the registry, which makes option ids
unique within a process.

Example
-------
>>> from option_state.registry import OptionRegistry
>>> registry = OptionRegistry()
>>> registry.claim("example:flag")
>>> "example:flag" in registry
True
"""

import threading
from typing import List, Set


class OptionRegistry:
    """Thread-safe set of claimed option ids.

    Ids are only ever added. The registry behind :func:`default_registry`
    lives for the whole process; separate instances are useful for isolated
    option families (and tests).

    Attributes
    ----------
    name : str
        Label used in error messages
    """

    def __init__(self, name: str = "options"):
        self.name = name
        self._ids: Set[str] = set()
        self._lock = threading.Lock()

    def claim(self, option_id: str) -> None:
        """Claim an id, failing if it was claimed before.

        Parameters
        ----------
        option_id : str
            Option id to claim

        Raises
        ------
        ValueError
            If the id has already been used in this registry
        """
        with self._lock:
            if option_id in self._ids:
                raise ValueError(
                    f"Key {option_id} has already been used in registry "
                    f"'{self.name}'. Option keys must be unique."
                )
            self._ids.add(option_id)

    def ids(self) -> List[str]:
        """Get a sorted snapshot of the claimed ids.

        Returns
        -------
        List[str]
            Claimed ids
        """
        with self._lock:
            return sorted(self._ids)

    def __contains__(self, option_id: object) -> bool:
        with self._lock:
            return option_id in self._ids

    def __len__(self) -> int:
        with self._lock:
            return len(self._ids)

    def __repr__(self) -> str:
        return f"OptionRegistry(name={self.name!r}, size={len(self)})"


_DEFAULT_REGISTRY = OptionRegistry(name="default")


def default_registry() -> OptionRegistry:
    """Get the process-wide registry used by the option factories."""
    return _DEFAULT_REGISTRY
