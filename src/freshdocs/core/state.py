"""Build-time state shared with the presentation layer.

The latest records are computed once during the content-load phase,
stored in a BuildContext, and only read afterwards.
"""

from dataclasses import dataclass
from typing import TypedDict

from freshdocs.core.entry import LatestEntry, LatestEntryDict

CONTENT_KINDS = ("blog", "changelog")


class BuildStateDict(TypedDict):
    """Dictionary representation of the build state."""

    latestBlogPost: LatestEntryDict | None
    latestChangelog: LatestEntryDict | None


@dataclass(frozen=True)
class BuildState:
    """Latest records of every content collection; None means no entry."""

    latest_blog_post: LatestEntry | None = None
    latest_changelog: LatestEntry | None = None

    def get(self, kind: str) -> LatestEntry | None:
        """Get the latest record by collection kind ("blog" or "changelog").

        Raises:
            KeyError: If kind is not a known collection
        """
        if kind == "blog":
            return self.latest_blog_post
        if kind == "changelog":
            return self.latest_changelog
        raise KeyError(kind)

    def to_dict(self) -> BuildStateDict:
        """Convert to dictionary for JSON serialization."""
        return {
            "latestBlogPost": self.latest_blog_post.to_dict() if self.latest_blog_post else None,
            "latestChangelog": self.latest_changelog.to_dict() if self.latest_changelog else None,
        }


class BuildContext:
    """Holder for the build state, populated exactly once."""

    __slots__ = ("_state",)

    def __init__(self) -> None:
        self._state: BuildState | None = None

    @property
    def is_populated(self) -> bool:
        return self._state is not None

    @property
    def state(self) -> BuildState:
        """Current build state.

        Raises:
            RuntimeError: If the content-load phase has not run yet
        """
        if self._state is None:
            raise RuntimeError("Build state has not been loaded yet")
        return self._state

    def populate(self, state: BuildState) -> None:
        """Store the build state.

        Raises:
            RuntimeError: If the context was already populated
        """
        if self._state is not None:
            raise RuntimeError("Build state is already loaded")
        self._state = state
