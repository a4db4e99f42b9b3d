"""docslink modules - self-contained bricks

- Git Client: Clone and pull the documentation repository
- Prerequisites Checker: Verify required tools
"""

from . import git_client, prerequisites

__all__ = ["git_client", "prerequisites"]
