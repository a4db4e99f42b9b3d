"""Config commands for docslink CLI."""

import click
from rich.console import Console

from docslink.commands.cli_helpers import exit_with_error
from docslink.config_manager import ConfigError, ConfigManager

console = Console()


@click.group(name="config")
def config_group():
    """View or change persistent settings.

    \b
    Examples:
        docslink config show
        docslink config set docs_path ~/shared/flutter-docs
        docslink config set branch develop
    """
    pass


@config_group.command(name="show")
@click.option("--config", help="Config file path", type=click.Path())
def show(config: str | None):
    """Show the effective configuration."""
    try:
        cfg = ConfigManager.load_config(config)
    except ConfigError as e:
        exit_with_error(e)

    console.print(f"[dim]{ConfigManager.get_config_path(config)}[/dim]")
    for key, value in cfg.to_dict().items():
        console.print(f"{key} = {value}")


@config_group.command(name="set")
@click.argument("key")
@click.argument("value")
@click.option("--config", help="Config file path", type=click.Path())
def set_value(key: str, value: str, config: str | None):
    """Persist KEY = VALUE."""
    try:
        ConfigManager.update_config(config, **{key: value})
    except ConfigError as e:
        exit_with_error(e)

    console.print(f"[green]✓[/green] {key} = {value}")
