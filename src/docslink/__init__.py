"""docslink - shared documentation installer and linker

Philosophy:
- One canonical clone, many linked projects
- Symlinks instead of copies
- Idempotent: running twice changes nothing
- Fail fast with the underlying error

docslink clones a documentation repository to a fixed path once, then links
its folders into project checkouts and keeps the clone current.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
