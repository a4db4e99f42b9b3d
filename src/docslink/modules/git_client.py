"""
Git Client Module

Clone and update the documentation repository with the local git binary.

Security Requirements:
- Argument lists only (no shell=True)
- URL validation before clone
- No credential handling (git's own config applies)
"""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlparse

from docslink.errors import DocslinkError

logger = logging.getLogger(__name__)


class GitError(DocslinkError):
    """Raised when a git command exits non-zero."""

    def __init__(self, message: str, returncode: int = 1, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


@dataclass
class GitResult:
    """Output of a successful git command."""

    command: list[str]
    stdout: str
    stderr: str


class GitClient:
    """
    Thin wrapper over the git command line.

    Every call is blocking and has no timeout: a clone or pull waits as long
    as git does.
    """

    ALLOWED_SCHEMES = ("https", "http", "ssh", "git", "file")

    @classmethod
    def run(cls, args: list[str], cwd: Path | None = None) -> GitResult:
        """
        Run git with the given arguments.

        Args:
            args: Arguments after ``git``
            cwd: Working directory for the command

        Returns:
            GitResult: Captured output

        Raises:
            GitError: If git is missing or exits non-zero
        """
        cmd = ["git", *args]
        logger.debug(f"Running: {' '.join(cmd)}")

        try:
            result = subprocess.run(
                cmd,
                cwd=cwd,
                capture_output=True,
                text=True,
                check=True,
            )
        except FileNotFoundError as e:
            raise GitError("git executable not found in PATH", returncode=127) from e
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            raise GitError(
                f"git {args[0]} failed: {stderr or f'exit code {e.returncode}'}",
                returncode=e.returncode,
                stderr=stderr,
            ) from e

        if result.stdout:
            logger.debug(result.stdout.strip())
        return GitResult(command=cmd, stdout=result.stdout, stderr=result.stderr)

    @classmethod
    def clone(cls, repo_url: str, dest: Path, branch: str | None = None) -> GitResult:
        """
        Clone ``repo_url`` into ``dest``.

        Raises:
            GitError: If the URL is not acceptable or the clone fails
        """
        valid, message = cls.validate_repo_url(repo_url)
        if not valid:
            raise GitError(f"Invalid repository URL: {message}")

        args = ["clone"]
        if branch:
            args += ["--branch", branch]
        args += [repo_url, str(dest)]

        logger.info(f"Cloning {repo_url} into {dest}")
        return cls.run(args)

    @classmethod
    def pull(cls, repo_path: Path, branch: str = "main", remote: str = "origin") -> GitResult:
        """Pull ``branch`` from ``remote`` inside an existing clone."""
        logger.info(f"Pulling {remote}/{branch} in {repo_path}")
        return cls.run(["pull", remote, branch], cwd=repo_path)

    @staticmethod
    def is_repository(path: Path) -> bool:
        """True if ``path`` has a ``.git`` entry (directory, or file for worktrees)."""
        return (path / ".git").exists()

    @classmethod
    def validate_repo_url(cls, repo_url: str) -> tuple[bool, str]:
        """
        Validate a repository URL.

        Accepts URLs with a known scheme and scp-style ``user@host:path``.

        Returns:
            tuple: (is_valid, message)
        """
        if not repo_url or not repo_url.strip():
            return False, "URL is empty"

        if any(ch in repo_url for ch in (" ", "\n", ";", "|", "`", "$")):
            return False, "URL contains invalid characters"

        if repo_url.startswith("-"):
            return False, "URL must not start with '-'"

        parsed = urlparse(repo_url)
        if parsed.scheme:
            if parsed.scheme not in cls.ALLOWED_SCHEMES:
                return False, f"Unsupported scheme: {parsed.scheme}"
            if parsed.scheme != "file" and not parsed.netloc:
                return False, "URL has no host"
            return True, "Valid"

        if "@" in repo_url and ":" in repo_url:
            return True, "Valid"

        return False, "URL must include a scheme or use user@host:path form"


__all__ = ["GitClient", "GitError", "GitResult"]
