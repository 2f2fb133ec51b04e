"""Errors raised while resolving the latest entry of a content collection.

All of these are caught at the resolver boundary and reported as
"no latest entry". They are public so lower-level steps can be tested
and reused on their own.
"""

from pathlib import Path


class ResolverError(Exception):
    """Base class for resolution failures."""


class ContentRootUnavailable(ResolverError):
    """Content root is missing, not a directory, or unreadable."""

    def __init__(self, content_root: Path, reason: str) -> None:
        self.content_root = content_root
        self.reason = reason
        super().__init__(f"Content root unavailable: {content_root} ({reason})")


class NoCandidatesFound(ResolverError):
    """Content root exists but no entry matches the naming convention."""

    def __init__(self, content_root: Path) -> None:
        self.content_root = content_root
        super().__init__(f"No matching entries in {content_root}")


class IndexFileMissing(ResolverError):
    """Directory candidate has no index.md or index.mdx."""

    def __init__(self, candidate_dir: Path) -> None:
        self.candidate_dir = candidate_dir
        super().__init__(f"No index file in {candidate_dir}")
