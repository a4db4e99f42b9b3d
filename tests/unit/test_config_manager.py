"""Tests for configuration management."""

import stat

import pytest

from docslink.config_manager import (
    DEFAULT_DOCS_PATH,
    ConfigError,
    ConfigManager,
    DocsConfig,
)


class TestDocsConfig:
    def test_defaults(self):
        config = DocsConfig()
        assert config.docs_path == DEFAULT_DOCS_PATH
        assert config.branch == "main"
        assert config.repo_url.endswith("flutter-docs.git")

    def test_overrides_skip_none(self):
        config = DocsConfig().with_overrides(docs_path="/tmp/docs", branch=None)
        assert config.docs_path == "/tmp/docs"
        assert config.branch == "main"

    def test_docs_dir_expands_user(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert DocsConfig(docs_path="~/docs").docs_dir == tmp_path / "docs"


class TestConfigManager:
    def test_missing_file_gives_defaults(self, isolated_config):
        assert not isolated_config.exists()
        assert ConfigManager.load_config() == DocsConfig()

    def test_save_and_load(self, isolated_config):
        ConfigManager.save_config(DocsConfig(docs_path="/srv/docs", branch="develop"))

        loaded = ConfigManager.load_config()
        assert loaded.docs_path == "/srv/docs"
        assert loaded.branch == "develop"

    def test_saved_file_is_private(self, isolated_config):
        ConfigManager.save_config(DocsConfig())

        mode = stat.S_IMODE(isolated_config.stat().st_mode)
        assert mode == 0o600

    def test_save_preserves_comments(self, isolated_config):
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text('# shared docs\nbranch = "main"\n')

        ConfigManager.update_config(branch="stable")

        content = isolated_config.read_text()
        assert "# shared docs" in content
        assert 'branch = "stable"' in content

    def test_update_rejects_unknown_key(self, isolated_config):
        with pytest.raises(ConfigError, match="Unknown config key"):
            ConfigManager.update_config(colour="blue")

    def test_invalid_toml(self, isolated_config):
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text("docs_path = [unclosed")

        with pytest.raises(ConfigError, match="Failed to load config"):
            ConfigManager.load_config()

    def test_custom_path(self, tmp_path):
        custom = tmp_path / "custom.toml"
        ConfigManager.save_config(DocsConfig(repo_url="git@example.com:docs.git"), str(custom))

        assert ConfigManager.load_config(str(custom)).repo_url == "git@example.com:docs.git"

    def test_resolve_prefers_cli_values(self, isolated_config):
        ConfigManager.save_config(DocsConfig(docs_path="/from/file", branch="file-branch"))

        config = ConfigManager.resolve(docs_path="/from/cli")

        assert config.docs_path == "/from/cli"
        assert config.branch == "file-branch"

    def test_non_string_value_is_config_error(self, isolated_config):
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text("branch = 1\n")

        with pytest.raises(ConfigError, match="branch must be a string"):
            ConfigManager.load_config()

    def test_relative_docs_path_is_made_absolute(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        docs_dir = DocsConfig(docs_path="flutter-docs").docs_dir

        assert docs_dir.is_absolute()
        assert docs_dir == (tmp_path / "flutter-docs").resolve()
