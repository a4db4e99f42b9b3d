"""Configuration management module.

This module handles persistent configuration storage using TOML format.
Stores where the documentation clone lives and where it is cloned from.

Security:
- Config file permissions: 0600 (owner read/write only)
- Atomic writes (temp file + rename)
"""

import logging
import os
import sys
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

import tomlkit

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from docslink.errors import DocslinkError

logger = logging.getLogger(__name__)

DEFAULT_DOCS_PATH = "/opt/flutter/flutter-docs"
DEFAULT_REPO_URL = "https://github.com/solutionsunity/flutter-docs.git"
DEFAULT_BRANCH = "main"


class ConfigError(DocslinkError):
    """Raised when configuration operations fail."""

    pass


@dataclass
class DocsConfig:
    """docslink configuration data."""

    docs_path: str = DEFAULT_DOCS_PATH
    repo_url: str = DEFAULT_REPO_URL
    branch: str = DEFAULT_BRANCH

    @property
    def docs_dir(self) -> Path:
        """Canonical documentation directory as a Path."""
        return Path(self.docs_path).expanduser().resolve()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, excluding None values."""
        return {k: v for k, v in asdict(self).items() if v is not None}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DocsConfig":
        """Create from dictionary.

        Raises:
            ConfigError: If a value is not a string
        """
        values = {
            "docs_path": data.get("docs_path", DEFAULT_DOCS_PATH),
            "repo_url": data.get("repo_url", DEFAULT_REPO_URL),
            "branch": data.get("branch", DEFAULT_BRANCH),
        }
        for key, value in values.items():
            if not isinstance(value, str):
                raise ConfigError(
                    f"Config value for {key} must be a string, got {type(value).__name__}"
                )
        return cls(**values)

    def with_overrides(self, **overrides: str | None) -> "DocsConfig":
        """Return a copy with every non-None override applied."""
        data = self.to_dict()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return DocsConfig.from_dict(data)


class ConfigManager:
    """Manage docslink configuration file.

    Configuration is stored at ~/.docslink/config.toml with secure permissions.
    """

    DEFAULT_CONFIG_DIR = Path.home() / ".docslink"
    DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.toml"

    @classmethod
    def valid_keys(cls) -> list[str]:
        return [f.name for f in fields(DocsConfig)]

    @classmethod
    def get_config_path(cls, custom_path: str | None = None) -> Path:
        """Get configuration file path.

        Args:
            custom_path: Custom config file path (optional)

        Returns:
            Path to config file
        """
        if custom_path:
            return Path(custom_path).expanduser().resolve()
        return cls.DEFAULT_CONFIG_FILE

    @classmethod
    def load_config(cls, custom_path: str | None = None) -> DocsConfig:
        """Load configuration from file.

        A missing file is not an error; built-in defaults are returned.

        Raises:
            ConfigError: If the file exists but cannot be read or parsed
        """
        config_path = cls.get_config_path(custom_path)

        if not config_path.exists():
            logger.debug("Config file not found, using defaults")
            return DocsConfig()

        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(f"Failed to load config: {e}") from e

        logger.debug(f"Loaded config from: {config_path}")
        return DocsConfig.from_dict(data)

    @classmethod
    def save_config(cls, config: DocsConfig, custom_path: str | None = None) -> Path:
        """Save configuration to file.

        Existing comments and formatting are preserved.

        Returns:
            Path the config was written to

        Raises:
            ConfigError: If saving fails
        """
        config_path = cls.get_config_path(custom_path)
        temp_path = config_path.with_suffix(".tmp")
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)

            if config_path.exists():
                with open(config_path) as f:
                    doc = tomlkit.load(f)
            else:
                doc = tomlkit.document()

            for key, value in config.to_dict().items():
                doc[key] = value

            with open(temp_path, "w") as f:
                tomlkit.dump(doc, f)

            os.chmod(temp_path, 0o600)
            temp_path.replace(config_path)

            logger.debug(f"Saved config to: {config_path}")
            return config_path

        except Exception as e:
            if temp_path.exists():
                temp_path.unlink()
            raise ConfigError(f"Failed to save config: {e}") from e

    @classmethod
    def update_config(cls, custom_path: str | None = None, **updates: Any) -> DocsConfig:
        """Update configuration values.

        Raises:
            ConfigError: On an unknown key or if saving fails
        """
        config = cls.load_config(custom_path)

        for key, value in updates.items():
            if key not in cls.valid_keys():
                raise ConfigError(
                    f"Unknown config key: {key} (valid keys: {', '.join(cls.valid_keys())})"
                )
            setattr(config, key, value)

        cls.save_config(config, custom_path)
        return config

    @classmethod
    def resolve(
        cls,
        custom_path: str | None = None,
        docs_path: str | None = None,
        repo_url: str | None = None,
        branch: str | None = None,
    ) -> DocsConfig:
        """Load configuration with CLI overrides taking precedence."""
        return cls.load_config(custom_path).with_overrides(
            docs_path=docs_path, repo_url=repo_url, branch=branch
        )
