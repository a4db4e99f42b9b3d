"""
Prerequisites Checker Module

Verifies required external tools are installed before any git operation.
"""

import logging
import platform
import shutil
from dataclasses import dataclass
from typing import ClassVar

from docslink.errors import DocslinkError

logger = logging.getLogger(__name__)


@dataclass
class PrerequisiteResult:
    """Result of prerequisite checks."""

    all_available: bool
    missing: list[str]
    available: list[str]
    platform_name: str


class PrerequisiteError(DocslinkError):
    """Raised when prerequisites are missing."""

    pass


class PrerequisiteChecker:
    """
    Check required external tools are installed.

    Required tools:
    - git
    """

    REQUIRED_TOOLS: ClassVar[list[str]] = ["git"]

    @classmethod
    def check_tool(cls, tool_name: str) -> bool:
        """
        Check if a single tool is available in PATH.

        Security: Uses shutil.which (safe, no subprocess)
        """
        result = shutil.which(tool_name)
        if result:
            logger.debug(f"Found {tool_name} at {result}")
            return True
        logger.debug(f"Tool not found: {tool_name}")
        return False

    @classmethod
    def check_all(cls) -> PrerequisiteResult:
        """
        Check all prerequisites and return comprehensive result.

        Example:
            >>> result = PrerequisiteChecker.check_all()
            >>> if not result.all_available:
            ...     print(f"Missing: {result.missing}")
        """
        missing: list[str] = []
        available: list[str] = []

        for tool in cls.REQUIRED_TOOLS:
            if cls.check_tool(tool):
                available.append(tool)
            else:
                missing.append(tool)

        result = PrerequisiteResult(
            all_available=(len(missing) == 0),
            missing=missing,
            available=available,
            platform_name=platform.system().lower(),
        )

        if not result.all_available:
            logger.error(f"Missing prerequisites: {', '.join(missing)}")

        return result

    @classmethod
    def require(cls) -> PrerequisiteResult:
        """
        Check prerequisites and raise if any are missing.

        Raises:
            PrerequisiteError: With install guidance for the missing tools
        """
        result = cls.check_all()
        if not result.all_available:
            raise PrerequisiteError(cls.format_missing_message(result.missing, result.platform_name))
        return result

    @classmethod
    def format_missing_message(cls, missing: list[str], platform_name: str) -> str:
        """Build a message with platform-specific install hints."""
        hints = {
            "darwin": "brew install git",
            "linux": "sudo apt install git  (or your distribution's package manager)",
            "windows": "winget install Git.Git",
        }
        lines = [f"Missing required tools: {', '.join(missing)}"]
        hint = hints.get(platform_name)
        if hint:
            lines.append(f"Install with: {hint}")
        return "\n".join(lines)
