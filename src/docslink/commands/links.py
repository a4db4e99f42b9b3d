"""Link management commands for docslink CLI.

Provides link, unlink and status for a single project directory.
"""

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from docslink.commands.cli_helpers import (
    exit_with_error,
    project_path_argument,
    resolve_project_path,
)
from docslink.config_manager import ConfigManager
from docslink.errors import DocslinkError
from docslink.linker import DocsLinker, LinkState
from docslink.modules.git_client import GitClient

console = Console()

STATE_STYLES = {
    LinkState.LINKED: "[green]linked[/green]",
    LinkState.MISSING: "[yellow]missing[/yellow]",
    LinkState.FOREIGN_LINK: "[red]points elsewhere[/red]",
    LinkState.CONFLICT: "[red]blocked by existing file[/red]",
}


def register_link_commands(main: click.Group) -> None:
    """Register link, unlink and status commands with main CLI group."""

    @main.command()
    @project_path_argument
    @click.option("--docs-path", help="Documentation clone path", type=str)
    @click.option("--config", help="Config file path", type=click.Path())
    def link(project_path: Path | None, docs_path: str | None, config: str | None):
        """Link the documentation clone into PROJECT_PATH (default: cwd).

        Creates ./.augment and ./docs symlinks and adds them to .gitignore
        when the project is a git repository. Safe to run repeatedly.
        """
        target = resolve_project_path(project_path)
        try:
            cfg = ConfigManager.resolve(config, docs_path=docs_path)
            result = DocsLinker(cfg.docs_dir).link(target)
        except DocslinkError as e:
            exit_with_error(e)

        for name in result.created:
            console.print(f"[green]✓[/green] Linked ./{name}")
        for name in result.skipped:
            console.print(f"[dim]• ./{name} already linked[/dim]")
        if result.gitignore_added:
            console.print(f"[green]✓[/green] Added to .gitignore: {', '.join(result.gitignore_added)}")
        elif not result.gitignore_updated:
            console.print("[dim]Not a git repository; .gitignore left untouched[/dim]")

    @main.command()
    @project_path_argument
    @click.option("--docs-path", help="Documentation clone path", type=str)
    @click.option("--config", help="Config file path", type=click.Path())
    def unlink(project_path: Path | None, docs_path: str | None, config: str | None):
        """Remove documentation symlinks from PROJECT_PATH (default: cwd).

        Only symlinks pointing into the documentation clone are removed.
        """
        target = resolve_project_path(project_path)
        try:
            cfg = ConfigManager.resolve(config, docs_path=docs_path)
            result = DocsLinker(cfg.docs_dir).unlink(target)
        except DocslinkError as e:
            exit_with_error(e)

        if not result.removed:
            console.print("Nothing to remove")
        for name in result.removed:
            console.print(f"[green]✓[/green] Removed ./{name}")

    @main.command()
    @project_path_argument
    @click.option("--docs-path", help="Documentation clone path", type=str)
    @click.option("--config", help="Config file path", type=click.Path())
    def status(project_path: Path | None, docs_path: str | None, config: str | None):
        """Show documentation clone and link state for PROJECT_PATH."""
        target = resolve_project_path(project_path)
        try:
            cfg = ConfigManager.resolve(config, docs_path=docs_path)
            linker = DocsLinker(cfg.docs_dir)
            states = linker.status(target)
        except DocslinkError as e:
            exit_with_error(e)

        docs_dir = cfg.docs_dir
        if GitClient.is_repository(docs_dir):
            console.print(f"Docs: {docs_dir} [green](git clone)[/green]", soft_wrap=True)
        elif docs_dir.exists():
            console.print(f"Docs: {docs_dir} [red](not a git repository)[/red]", soft_wrap=True)
        else:
            console.print(f"Docs: {docs_dir} [yellow](not installed)[/yellow]", soft_wrap=True)

        table = Table(title=f"Links in {target}")
        table.add_column("Link", style="cyan")
        table.add_column("Source")
        table.add_column("State")
        for name, state in states.items():
            table.add_row(f"./{name}", str(linker.source_for(name)), STATE_STYLES[state])
        console.print(table)
