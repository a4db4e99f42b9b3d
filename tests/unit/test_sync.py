"""Tests for documentation sync."""

import pytest

from docslink.modules.git_client import GitError
from docslink.sync import DocsSync, SyncError


class TestSync:
    def test_pulls_latest(self, fake_git, docs_clone):
        result = DocsSync(docs_clone).sync()

        assert fake_git.calls == [["git", "pull", "origin", "main"]]
        assert result.docs_dir == docs_clone.resolve()
        assert result.branch == "main"

    def test_missing_clone_fails_with_hint(self, fake_git, tmp_path):
        with pytest.raises(SyncError, match="docslink install"):
            DocsSync(tmp_path / "missing").sync()

        assert fake_git.calls == []

    def test_not_a_repository(self, fake_git, tmp_path):
        plain = tmp_path / "plain"
        plain.mkdir()

        with pytest.raises(SyncError, match="not a git repository"):
            DocsSync(plain).sync()

    def test_pull_failure_propagates(self, fake_git, docs_clone):
        fake_git.fail_with = (1, "fatal: couldn't find remote ref main")

        with pytest.raises(GitError, match="couldn't find remote ref"):
            DocsSync(docs_clone).sync()
