"""Project linker module.

Links the canonical documentation clone into a project checkout:

    <project>/.augment -> <docs>/.augment
    <project>/docs     -> <docs>/docs

and registers both links in the project's .gitignore when the project is a
git repository. Every operation is idempotent.

Public API:
    DocsLinker: link, unlink and status
    LinkResult: outcome of link/unlink
    LinkState: state of a single link path
    LinkError: raised on path conflicts
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import ClassVar

from docslink.errors import DocslinkError
from docslink.modules.git_client import GitClient

logger = logging.getLogger(__name__)


class LinkError(DocslinkError):
    """Raised when a link cannot be created or removed."""

    pass


class LinkState(Enum):
    """State of a link path inside a project."""

    LINKED = "linked"
    MISSING = "missing"
    FOREIGN_LINK = "foreign_link"
    CONFLICT = "conflict"


@dataclass
class LinkResult:
    """Result of a link or unlink operation."""

    target: Path
    created: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)
    gitignore_added: list[str] = field(default_factory=list)
    gitignore_updated: bool = False


class DocsLinker:
    """Create and inspect documentation symlinks for a project.

    Example:
        >>> linker = DocsLinker(Path("/opt/flutter/flutter-docs"))
        >>> result = linker.link(Path.cwd())
        >>> print(result.created)
        ['.augment', 'docs']
    """

    # link name in the project -> folder inside the documentation clone
    LINKS: ClassVar[dict[str, str]] = {
        ".augment": ".augment",
        "docs": "docs",
    }
    GITIGNORE_ENTRIES: ClassVar[list[str]] = ["/docs", "/.augment"]

    def __init__(self, docs_dir: Path):
        self.docs_dir = Path(docs_dir).expanduser().resolve()

    def source_for(self, name: str) -> Path:
        return self.docs_dir / self.LINKS[name]

    def state_of(self, target: Path, name: str) -> LinkState:
        """Classify what currently sits at ``target/name``."""
        link_path = target / name
        if link_path.is_symlink():
            if link_path.resolve() == self.source_for(name).resolve():
                return LinkState.LINKED
            return LinkState.FOREIGN_LINK
        if link_path.exists():
            return LinkState.CONFLICT
        return LinkState.MISSING

    def status(self, target: Path) -> dict[str, LinkState]:
        """Report the state of every link in ``target``."""
        target = self._check_target(target)
        return {name: self.state_of(target, name) for name in self.LINKS}

    def link(self, target: Path) -> LinkResult:
        """Create the documentation symlinks in ``target``.

        Existing correct links are left alone. Anything else occupying a link
        path is a conflict and aborts the operation.

        Raises:
            LinkError: If the target or documentation clone is missing, or a
                link path is already taken
        """
        target = self._check_target(target)
        if not self.docs_dir.is_dir():
            raise LinkError(
                f"Documentation not found at {self.docs_dir}. Run 'docslink install' first."
            )

        result = LinkResult(target=target)

        for name in self.LINKS:
            source = self.source_for(name)
            link_path = target / name
            state = self.state_of(target, name)

            if state is LinkState.LINKED:
                logger.debug(f"Already linked: {link_path}")
                result.skipped.append(name)
                continue
            if state is LinkState.FOREIGN_LINK:
                raise LinkError(f"{link_path} is a symlink to somewhere else; remove it first")
            if state is LinkState.CONFLICT:
                raise LinkError(f"{link_path} already exists and is not a symlink")

            if not source.exists():
                logger.warning(f"Documentation folder missing, link will dangle: {source}")

            try:
                link_path.symlink_to(source, target_is_directory=True)
            except OSError as e:
                raise LinkError(f"Failed to create symlink {link_path}: {e}") from e

            logger.debug(f"Linked {link_path} -> {source}")
            result.created.append(name)

        if GitClient.is_repository(target):
            result.gitignore_added = self.update_gitignore(target)
            result.gitignore_updated = True
        else:
            logger.debug(f"{target} is not a git repository; skipping .gitignore update")

        return result

    def unlink(self, target: Path) -> LinkResult:
        """Remove the documentation symlinks from ``target``.

        Only links pointing into the documentation clone are removed.
        .gitignore is left as is.
        """
        target = self._check_target(target)
        result = LinkResult(target=target)

        for name in self.LINKS:
            link_path = target / name
            state = self.state_of(target, name)
            if state is LinkState.LINKED:
                link_path.unlink()
                logger.debug(f"Removed {link_path}")
                result.removed.append(name)
            else:
                if state is not LinkState.MISSING:
                    logger.warning(f"Leaving {link_path} in place ({state.value})")
                result.skipped.append(name)

        return result

    def update_gitignore(self, target: Path) -> list[str]:
        """Append missing entries to ``target/.gitignore``.

        Returns:
            The entries that were appended (empty if all were present)
        """
        gitignore = target / ".gitignore"
        content = gitignore.read_text() if gitignore.exists() else ""
        present = {line.strip() for line in content.splitlines()}

        missing = [entry for entry in self.GITIGNORE_ENTRIES if entry not in present]
        if not missing:
            logger.debug(f"{gitignore} already has all entries")
            return []

        prefix = "\n" if content and not content.endswith("\n") else ""
        try:
            with open(gitignore, "a") as f:
                f.write(prefix + "\n".join(missing) + "\n")
        except OSError as e:
            raise LinkError(f"Failed to update {gitignore}: {e}") from e

        logger.debug(f"Added to {gitignore}: {', '.join(missing)}")
        return missing

    @staticmethod
    def _check_target(target: Path) -> Path:
        target = Path(target).expanduser().resolve()
        if not target.is_dir():
            raise LinkError(f"Project directory not found: {target}")
        return target
