"""Latest blog post.

Blog entries are named ``YYYY-MM-DD-slug`` (a file with a markup extension
or a directory holding an index file) and ordered by date. The post URL
follows the blog route layout ``/blog/YYYY/MM/DD/slug``.
"""

import re
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from freshdocs.core.entry import (
    LatestEntry,
    excerpt,
    front_matter_text,
    join_url,
    title_from_slug,
)
from freshdocs.core.frontmatter import ParsedEntry
from freshdocs.core.ordering import DATE_PREFIX_RE, date_slug, date_sort_key
from freshdocs.core.resolver import Candidate, LatestContentResolver

DEFAULT_ROUTE_PREFIX = "/blog"


@dataclass(frozen=True)
class BlogPolicy:
    """Date-ordered blog posts."""

    route_prefix: str = DEFAULT_ROUTE_PREFIX
    label: str = "blog"
    name_pattern: re.Pattern[str] = DATE_PREFIX_RE

    def sort_key(self, stem: str) -> date | None:
        return date_sort_key(stem)

    def slug(self, stem: str) -> str:
        return date_slug(stem)

    def build_entry(self, candidate: Candidate, parsed: ParsedEntry) -> LatestEntry:
        post_date: date = candidate.sort_key
        date_text = post_date.isoformat()

        title = front_matter_text(parsed.front_matter, "title")
        if title is None:
            title = title_from_slug(candidate.slug) or date_text

        description = front_matter_text(parsed.front_matter, "description")
        if description is None:
            description = excerpt(parsed.body)

        url = join_url(
            self.route_prefix,
            f"{post_date.year:04d}",
            f"{post_date.month:02d}",
            f"{post_date.day:02d}",
            candidate.slug,
        )
        return LatestEntry(title=title, description=description, url=url, date=date_text)


def create_blog_resolver(
    content_dir: Path, route_prefix: str = DEFAULT_ROUTE_PREFIX
) -> LatestContentResolver:
    """Create a resolver for the latest blog post under content_dir."""
    return LatestContentResolver(content_dir, BlogPolicy(route_prefix=route_prefix))
