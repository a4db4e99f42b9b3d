"""Base exception for docslink.

Each module defines its own error type derived from DocslinkError so the CLI
can catch everything docslink raises in one place.
"""


class DocslinkError(Exception):
    """Base class for all docslink errors."""

    pass
