"""Command-line interface for option-state.

Provides commands for inspecting option states declared in application code.
"""

import importlib
import logging
import sys
from typing import Optional

import click

from option_state import __version__
from option_state.debug import format_state
from option_state.state import OptionState
from option_state.versioned import Versioned


def setup_logging(verbose: bool = False, debug: bool = False) -> logging.Logger:
    """Setup logging for CLI commands."""
    level = logging.DEBUG if debug else (logging.INFO if verbose else logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )
    return logging.getLogger("option_state")


def resolve_state(target: str) -> OptionState:
    """Import the option state named by ``module:attribute``.

    Parameters
    ----------
    target : str
        Import path, e.g. ``myapp.settings:DEFAULTS``. The attribute part
        may be dotted.

    Returns
    -------
    OptionState
        The resolved state

    Raises
    ------
    ValueError
        If target is not of the form ``module:attribute``
    ImportError
        If the module cannot be imported
    AttributeError
        If the attribute does not exist
    TypeError
        If the attribute is not an option state
    """
    module_name, sep, attribute = target.partition(":")
    if not sep or not module_name or not attribute:
        raise ValueError(f"Target must look like 'module:attribute', got '{target}'")

    resolved = importlib.import_module(module_name)
    for part in attribute.split("."):
        resolved = getattr(resolved, part)

    if not isinstance(resolved, OptionState):
        raise TypeError(
            f"'{target}' is a {type(resolved).__name__}, not an option state"
        )
    return resolved


@click.group()
@click.version_option(version=__version__, prog_name="option-state")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, debug: bool) -> None:
    """option-state: typed, versioned configuration snapshots.

    Examples:

        # Show the newest view of a versioned state
        option-state inspect myapp.settings:FEATURES

        # Show the view at version 3 with each version's changes
        option-state inspect myapp.settings:FEATURES --at 3 --children
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["logger"] = setup_logging(verbose, debug)


@cli.command()
@click.argument("target")
@click.option("--at", "at_version", type=int, default=None,
              help="Version to view (versioned states only)")
@click.option("--children", is_flag=True,
              help="Include the changes registered at each version")
@click.pass_context
def inspect(
    ctx: click.Context,
    target: str,
    at_version: Optional[int],
    children: bool,
) -> None:
    """Print the values held by the option state TARGET as YAML.

    TARGET is an import path of the form module:attribute.
    """
    logger = ctx.obj["logger"]
    logger.info(f"Resolving option state: {target}")

    try:
        state = resolve_state(target)
    except (ImportError, AttributeError, ValueError, TypeError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if at_version is not None:
        if not isinstance(state, Versioned):
            raise click.UsageError("--at requires a versioned option state")
        state = state.at(at_version)

    if isinstance(state, Versioned):
        logger.info(f"Versions: {list(state.versions)}, target: {state.target_version}")

    click.echo(format_state(state, children=children), nl=False)


def main() -> None:
    """Main entry point for CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
