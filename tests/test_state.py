"""Tests for build-time state."""

import pytest
from freshdocs.core.entry import LatestEntry
from freshdocs.core.state import BuildContext, BuildState
from freshdocs.core.types import URLPath

POST = LatestEntry(
    title="Launch",
    description="We shipped.",
    url=URLPath("/blog/2024/01/02/launch"),
    date="2024-01-02",
)


class TestBuildState:
    """Tests for BuildState."""

    def test__to_dict__missing_records_are_null(self) -> None:
        """Serialize absent records as None."""
        state = BuildState(latest_blog_post=POST)

        assert state.to_dict() == {
            "latestBlogPost": POST.to_dict(),
            "latestChangelog": None,
        }

    def test__get__by_kind(self) -> None:
        """Look up records by collection kind."""
        state = BuildState(latest_blog_post=POST)

        assert state.get("blog") == POST
        assert state.get("changelog") is None

    def test__get__unknown_kind__raises(self) -> None:
        """Raise KeyError for unknown kinds."""
        with pytest.raises(KeyError):
            BuildState().get("docs")


class TestBuildContext:
    """Tests for BuildContext."""

    def test__populate__makes_state_available(self) -> None:
        """Expose the state once populated."""
        context = BuildContext()
        state = BuildState(latest_blog_post=POST)

        context.populate(state)

        assert context.is_populated
        assert context.state is state

    def test__state_before_populate__raises(self) -> None:
        """Refuse to read before the content-load phase."""
        context = BuildContext()

        assert not context.is_populated
        with pytest.raises(RuntimeError, match="not been loaded"):
            _ = context.state

    def test__populate_twice__raises(self) -> None:
        """Allow populating only once."""
        context = BuildContext()
        context.populate(BuildState())

        with pytest.raises(RuntimeError, match="already loaded"):
            context.populate(BuildState(latest_blog_post=POST))
