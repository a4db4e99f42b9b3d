"""Tests for PrerequisiteChecker."""

from unittest.mock import patch

import pytest

from docslink.modules.prerequisites import (
    PrerequisiteChecker,
    PrerequisiteError,
    PrerequisiteResult,
)


class TestCheckAll:
    @patch("docslink.modules.prerequisites.shutil.which", return_value="/usr/bin/git")
    def test_git_available(self, mock_which):
        result = PrerequisiteChecker.check_all()

        assert isinstance(result, PrerequisiteResult)
        assert result.all_available is True
        assert result.available == ["git"]
        assert result.missing == []

    @patch("docslink.modules.prerequisites.shutil.which", return_value=None)
    def test_git_missing(self, mock_which):
        result = PrerequisiteChecker.check_all()

        assert result.all_available is False
        assert result.missing == ["git"]


class TestRequire:
    @patch("docslink.modules.prerequisites.platform.system", return_value="Darwin")
    @patch("docslink.modules.prerequisites.shutil.which", return_value=None)
    def test_raises_with_install_hint(self, mock_which, mock_system):
        with pytest.raises(PrerequisiteError, match="brew install git"):
            PrerequisiteChecker.require()

    @patch("docslink.modules.prerequisites.shutil.which", return_value="/usr/bin/git")
    def test_passes_when_available(self, mock_which):
        assert PrerequisiteChecker.require().all_available
