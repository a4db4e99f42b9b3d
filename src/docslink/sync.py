"""Documentation sync module.

Refreshes the canonical documentation clone. Every linked project sees the
update immediately through its symlinks.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from docslink.errors import DocslinkError
from docslink.modules.git_client import GitClient

logger = logging.getLogger(__name__)


class SyncError(DocslinkError):
    """Raised when the documentation clone cannot be synced."""

    pass


@dataclass
class SyncResult:
    """Result of a sync."""

    docs_dir: Path
    branch: str
    output: str


class DocsSync:
    """Pull the latest revision into an existing documentation clone."""

    def __init__(self, docs_dir: Path, branch: str = "main"):
        self.docs_dir = Path(docs_dir).expanduser().resolve()
        self.branch = branch

    def sync(self) -> SyncResult:
        """
        Run ``git pull origin <branch>`` in the documentation clone.

        Raises:
            SyncError: If the clone is missing or not a git repository
            GitError: If the pull itself fails
        """
        if not self.docs_dir.is_dir():
            raise SyncError(
                f"Documentation not found at {self.docs_dir}\n"
                "Run the installer first: docslink install"
            )

        if not GitClient.is_repository(self.docs_dir):
            raise SyncError(f"{self.docs_dir} is not a git repository")

        result = GitClient.pull(self.docs_dir, self.branch)
        logger.debug(f"Synced {self.docs_dir} ({self.branch})")
        return SyncResult(docs_dir=self.docs_dir, branch=self.branch, output=result.stdout)
