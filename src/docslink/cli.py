"""CLI entry point for docslink.

Commands:
    docslink install [PROJECT_PATH]   # Clone or update docs, then link project
    docslink link [PROJECT_PATH]      # Link project only
    docslink unlink [PROJECT_PATH]    # Remove links from project
    docslink status [PROJECT_PATH]    # Show clone and link state
    docslink sync                     # Pull latest docs into shared clone
    docslink config show|set          # Persistent settings
"""

import logging
from pathlib import Path

import click
from rich.console import Console

from docslink import __version__
from docslink.commands import config_group
from docslink.commands.cli_helpers import (
    configure_logging,
    exit_with_error,
    project_path_argument,
    resolve_project_path,
)
from docslink.commands.links import register_link_commands
from docslink.commands.sync import register_sync_command
from docslink.config_manager import ConfigManager
from docslink.errors import DocslinkError
from docslink.installer import CloneAction, DocsInstaller, InstallResult

logger = logging.getLogger(__name__)
console = Console()


@click.group(
    invoke_without_command=True,
    context_settings={"help_option_names": ["--help", "-h"]},
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug output")
@click.pass_context
@click.version_option(version=__version__)
def main(ctx: click.Context, verbose: bool) -> None:
    """docslink - shared documentation for AI-assisted development.

    Keeps one clone of the documentation repository at a fixed path and
    links it into any number of projects.

    \b
    Examples:
        docslink install                  # Install into current directory
        docslink install ~/src/my_app     # Install into a specific project
        docslink sync                     # Update the shared clone

    \b
    CONFIGURATION:
        Config file: ~/.docslink/config.toml
        Keys: docs_path, repo_url, branch

    For help on any command: docslink <command> --help
    """
    configure_logging(verbose)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)


@main.command()
@project_path_argument
@click.option("--docs-path", help="Documentation clone path", type=str)
@click.option("--repo-url", help="Documentation repository URL", type=str)
@click.option("--branch", help="Branch to clone and pull", type=str)
@click.option("--config", help="Config file path", type=click.Path())
def install(
    project_path: Path | None,
    docs_path: str | None,
    repo_url: str | None,
    branch: str | None,
    config: str | None,
):
    """Install documentation into PROJECT_PATH (default: current directory).

    Clones the documentation repository to the shared path, or pulls it if it
    is already there, then links ./.augment and ./docs into the project.
    """
    target = resolve_project_path(project_path)
    try:
        cfg = ConfigManager.resolve(config, docs_path=docs_path, repo_url=repo_url, branch=branch)
        console.print("🤖 Installing development documentation for AI agents...")
        console.print(f"📁 Project: {target}")
        console.print(f"📚 Docs: {cfg.docs_dir}")

        result = DocsInstaller(cfg).install(target)
    except DocslinkError as e:
        exit_with_error(e)

    _print_summary(result)


def _print_summary(result: InstallResult) -> None:
    if result.action is CloneAction.CLONED:
        console.print("📥 Cloned documentation repository")
    else:
        console.print("🔄 Updated existing documentation repository")

    console.print()
    console.print("[green]🎉 Installation complete![/green]")
    console.print()
    console.print("📋 Symlinks:")
    console.print("   ./.augment/                - AI configuration and rules")
    console.print("   ./docs/                    - Development documentation")
    if result.link.gitignore_added:
        console.print(f"📝 Added to .gitignore: {', '.join(result.link.gitignore_added)}")
    elif not result.link.gitignore_updated:
        console.print("[dim]Not a git repository; .gitignore left untouched[/dim]")
    console.print()
    console.print("🔄 To update documentation later:")
    console.print(f"   Run: docslink sync (or cd {result.docs_dir} && git pull)")


main.add_command(config_group)
register_link_commands(main)
register_sync_command(main)


if __name__ == "__main__":
    main()
