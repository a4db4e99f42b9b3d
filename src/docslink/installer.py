"""Installer module.

Ensures the canonical documentation clone exists and is current, then links
it into a project directory.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from docslink.config_manager import DocsConfig
from docslink.errors import DocslinkError
from docslink.linker import DocsLinker, LinkResult
from docslink.modules.git_client import GitClient
from docslink.modules.prerequisites import PrerequisiteChecker

logger = logging.getLogger(__name__)


class InstallError(DocslinkError):
    """Raised when installation cannot proceed."""

    pass


class CloneAction(Enum):
    CLONED = "cloned"
    UPDATED = "updated"


@dataclass
class InstallResult:
    """Result of an install."""

    docs_dir: Path
    action: CloneAction
    link: LinkResult


class DocsInstaller:
    """Clone-or-pull the documentation repository, then link a project.

    Example:
        >>> installer = DocsInstaller(DocsConfig())
        >>> result = installer.install(Path("~/src/my_app"))
        >>> result.action
        <CloneAction.CLONED: 'cloned'>
    """

    def __init__(self, config: DocsConfig):
        self.config = config
        self.docs_dir = config.docs_dir

    def ensure_docs(self) -> CloneAction:
        """Clone the documentation repository, or pull if it is already there.

        Raises:
            PrerequisiteError: If git is not installed
            InstallError: If the documentation path is occupied by a file or
                by a directory that is not a git clone
            GitError: If clone or pull fails
        """
        PrerequisiteChecker.require()

        if self.docs_dir.exists() and not self.docs_dir.is_dir():
            raise InstallError(f"{self.docs_dir} exists and is not a directory")

        if self.docs_dir.exists() and not GitClient.is_repository(self.docs_dir):
            raise InstallError(f"{self.docs_dir} exists but is not a git repository")

        if not self.docs_dir.exists():
            logger.debug(f"Cloning documentation into {self.docs_dir}")
            GitClient.clone(self.config.repo_url, self.docs_dir, self.config.branch)
            return CloneAction.CLONED

        logger.debug(f"Updating existing documentation in {self.docs_dir}")
        GitClient.pull(self.docs_dir, self.config.branch)
        return CloneAction.UPDATED

    def install(self, target: Path | None = None) -> InstallResult:
        """Install documentation into ``target`` (default: current directory)."""
        target = Path(target) if target is not None else Path.cwd()

        action = self.ensure_docs()
        link_result = DocsLinker(self.docs_dir).link(target)

        return InstallResult(docs_dir=self.docs_dir, action=action, link=link_result)
