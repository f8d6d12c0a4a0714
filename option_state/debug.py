"""Human-readable renderings of option states.

Provides plain-dict and YAML views of states for logs and the CLI. The
output is for reading only; nothing parses it back.
"""

from __future__ import annotations

import enum
import logging
from typing import Any, Dict

import yaml

from .state import OptionState
from .versioned import Versioned


def _plain(value: Any) -> Any:
    if isinstance(value, enum.Enum):
        return value.name
    if isinstance(value, (bool, int, float, str)):
        return value
    return repr(value)


def state_to_dict(state: OptionState) -> Dict[str, Any]:
    """Map option ids to the values explicitly set in ``state``.

    Parameters
    ----------
    state : OptionState
        State to render. A versioned state renders its current view.

    Returns
    -------
    Dict[str, Any]
        Option id -> value, sorted by id. Enum members are given by name.
    """
    pairs = sorted(state.items(), key=lambda pair: pair[0].id)
    return {option.id: _plain(value) for option, value in pairs}


def versioned_to_dict(versioned: Versioned) -> Dict[str, Any]:
    """Describe a versioned state: its target, per-version changes and view."""
    return {
        "target_version": versioned.target_version,
        "versions": {
            version: state_to_dict(child)
            for version, child in versioned.child_states().items()
        },
        "effective": state_to_dict(versioned),
    }


def format_state(state: OptionState, children: bool = True) -> str:
    """Render a state as YAML.

    Parameters
    ----------
    state : OptionState
        State to render
    children : bool
        For versioned states, include the per-version changes. If False,
        only the target version and effective values are shown.

    Returns
    -------
    str
        YAML document
    """
    if isinstance(state, Versioned):
        record = versioned_to_dict(state)
        if not children:
            record.pop("versions")
    else:
        record = state_to_dict(state)
    return yaml.safe_dump(record, sort_keys=False, default_flow_style=False)


def log_state(
    state: OptionState,
    *,
    logger: logging.Logger | None = None,
    level: int = logging.DEBUG,
) -> None:
    """Log a YAML rendering of ``state`` as a single record.

    Parameters
    ----------
    state : OptionState
        State to log
    logger : logging.Logger, optional
        Destination logger. Defaults to this module's logger.
    level : int
        Logging level (default: DEBUG)
    """
    logger = logger or logging.getLogger(__name__)
    if not logger.isEnabledFor(level):
        return
    yaml_text = format_state(state).rstrip("\n")
    logger.log(level, "%s\n---", yaml_text)
