"""Command groups for docslink CLI."""

from docslink.commands.config import config_group

__all__ = ["config_group"]
