"""Sync command for docslink CLI."""

import click
from rich.console import Console

from docslink.commands.cli_helpers import exit_with_error
from docslink.config_manager import ConfigManager
from docslink.errors import DocslinkError
from docslink.sync import DocsSync

console = Console()


def register_sync_command(main: click.Group) -> None:
    """Register sync command with main CLI group."""

    @main.command()
    @click.option("--docs-path", help="Documentation clone path", type=str)
    @click.option("--branch", help="Branch to pull", type=str)
    @click.option("--config", help="Config file path", type=click.Path())
    def sync(docs_path: str | None, branch: str | None, config: str | None):
        """Pull the latest documentation into the shared clone.

        All symlinked projects pick up the update automatically.
        """
        console.print("[blue]Documentation Sync[/blue]")
        try:
            cfg = ConfigManager.resolve(config, docs_path=docs_path, branch=branch)
            console.print("📥 Pulling latest documentation updates...")
            DocsSync(cfg.docs_dir, cfg.branch).sync()
        except DocslinkError as e:
            exit_with_error(e)

        console.print("[green]✓ Documentation updated successfully![/green]")
        console.print(
            "[blue]All symlinked projects will automatically use the updated documentation.[/blue]"
        )
