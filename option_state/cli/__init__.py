"""Command-line interface for option-state.

Example Usage
-------------
    # From command line:
    option-state --help
    option-state inspect myapp.settings:FEATURES
    option-state inspect myapp.settings:FEATURES --at 3 --children
"""

from .main import cli, main, resolve_state

__all__ = [
    "cli",
    "main",
    "resolve_state",
]
