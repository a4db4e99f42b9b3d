"""
Shared test fixtures and configuration for docslink tests.

This module provides common fixtures used across all test types:
- Isolated config file (never touches ~/.docslink)
- Fake documentation clone and project directories
- Fake git binary at the subprocess boundary
"""

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from docslink.config_manager import ConfigManager

# ============================================================================
# CONFIG FIXTURES
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the default config file at a temporary directory."""
    config_dir = tmp_path / ".docslink"
    monkeypatch.setattr(ConfigManager, "DEFAULT_CONFIG_DIR", config_dir)
    monkeypatch.setattr(ConfigManager, "DEFAULT_CONFIG_FILE", config_dir / "config.toml")
    return config_dir / "config.toml"


# ============================================================================
# DIRECTORY FIXTURES
# ============================================================================


def make_docs_tree(path: Path) -> Path:
    """Create a minimal documentation clone at ``path``."""
    (path / ".git").mkdir(parents=True)
    (path / ".augment" / "rules").mkdir(parents=True)
    (path / ".augment" / "rules" / "README.md").write_text("# Rules\n")
    (path / "docs").mkdir()
    (path / "docs" / "index.md").write_text("# Docs\n")
    return path


@pytest.fixture
def docs_clone(tmp_path):
    """An existing documentation clone."""
    return make_docs_tree(tmp_path / "opt" / "flutter-docs")


@pytest.fixture
def project_dir(tmp_path):
    """A plain project directory (not a git repository)."""
    path = tmp_path / "project"
    path.mkdir()
    return path


@pytest.fixture
def git_project_dir(project_dir):
    """A project directory that is a git repository."""
    (project_dir / ".git").mkdir()
    return project_dir


# ============================================================================
# GIT FIXTURES
# ============================================================================


@pytest.fixture
def fake_git():
    """Replace the git binary.

    ``git clone ... <url> <dest>`` builds a documentation tree at dest; every
    other command succeeds with no output. Set ``fake_git.fail_with`` to a
    (returncode, stderr) tuple to make the next call fail.
    """
    calls: list[list[str]] = []

    def run(cmd, cwd=None, **kwargs):
        calls.append(list(cmd))
        if run.fail_with is not None:
            returncode, stderr = run.fail_with
            raise subprocess.CalledProcessError(returncode, cmd, output="", stderr=stderr)
        if cmd[1] == "clone":
            make_docs_tree(Path(cmd[-1]))
        return subprocess.CompletedProcess(cmd, 0, stdout="", stderr="")

    run.fail_with = None
    run.calls = calls

    with (
        patch("docslink.modules.git_client.subprocess.run", side_effect=run),
        patch("docslink.modules.prerequisites.shutil.which", return_value="/usr/bin/git"),
    ):
        yield run
