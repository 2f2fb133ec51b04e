"""Latest changelog entry.

Changelog entries are named after the release, ``vMAJOR.MINOR.PATCH`` with
optional pre-release and build metadata, and ordered by semantic-version
precedence. The entry URL is ``/changelogs/<version>``.
"""

import re
from dataclasses import dataclass
from pathlib import Path

from freshdocs.core.entry import LatestEntry, excerpt, front_matter_text, join_url
from freshdocs.core.frontmatter import ParsedEntry
from freshdocs.core.ordering import SemVer, semver_sort_key
from freshdocs.core.resolver import Candidate, LatestContentResolver

DEFAULT_ROUTE_PREFIX = "/changelogs"

# Changelog entries must spell the leading "v"
CHANGELOG_NAME_RE = re.compile(r"^v\d+\.\d+\.\d+")


@dataclass(frozen=True)
class ChangelogPolicy:
    """Release-ordered changelog entries."""

    route_prefix: str = DEFAULT_ROUTE_PREFIX
    label: str = "changelog"
    name_pattern: re.Pattern[str] = CHANGELOG_NAME_RE

    def sort_key(self, stem: str) -> SemVer | None:
        return semver_sort_key(stem)

    def slug(self, stem: str) -> str:
        # Versions carry no slug; whatever follows is pre-release/build data
        return ""

    def build_entry(self, candidate: Candidate, parsed: ParsedEntry) -> LatestEntry:
        version = candidate.stem

        title = front_matter_text(parsed.front_matter, "title") or version

        description = front_matter_text(parsed.front_matter, "description")
        if description is None:
            description = excerpt(parsed.body)

        return LatestEntry(
            title=title,
            description=description,
            url=join_url(self.route_prefix, version),
            date=front_matter_text(parsed.front_matter, "date"),
            version=version,
        )


def create_changelog_resolver(
    content_dir: Path, route_prefix: str = DEFAULT_ROUTE_PREFIX
) -> LatestContentResolver:
    """Create a resolver for the latest changelog entry under content_dir."""
    return LatestContentResolver(content_dir, ChangelogPolicy(route_prefix=route_prefix))
