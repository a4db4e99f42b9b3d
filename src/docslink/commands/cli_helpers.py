"""Shared helper functions for CLI commands."""

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click

from docslink.errors import DocslinkError
from docslink.modules.git_client import GitError

logger = logging.getLogger(__name__)

project_path_argument = click.argument(
    "project_path",
    required=False,
    type=click.Path(file_okay=False, path_type=Path),
)


def resolve_project_path(project_path: Path | None) -> Path:
    """Explicit project path, or the current working directory."""
    return project_path if project_path is not None else Path.cwd()


def exit_with_error(error: DocslinkError) -> NoReturn:
    """Print ``error`` to stderr and exit.

    Git failures exit with git's own return code so callers see the same
    status the underlying command produced.
    """
    click.echo(f"Error: {error}", err=True)
    if isinstance(error, GitError):
        sys.exit(error.returncode or 1)
    sys.exit(1)


def configure_logging(verbose: bool) -> None:
    """Configure logging levels based on verbose flag."""
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    if verbose:
        logging.getLogger("docslink").setLevel(logging.DEBUG)
    else:
        logging.getLogger("docslink.modules.git_client").setLevel(logging.WARNING)
