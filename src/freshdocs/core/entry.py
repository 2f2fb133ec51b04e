"""Normalized latest-entry record and field derivation helpers."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, NotRequired, TypedDict

from freshdocs.core.types import URLPath

TRUNCATE_MARKER = "<!-- truncate -->"


class LatestEntryDict(TypedDict):
    """Dictionary representation of a latest entry."""

    title: str
    description: str
    url: str
    date: NotRequired[str]
    version: NotRequired[str]


@dataclass(frozen=True)
class LatestEntry:
    """Summary of the most recent entry of a content collection.

    Blog entries carry ``date``; changelog entries carry ``version`` and,
    when their front matter has one, ``date``.
    """

    title: str
    description: str
    url: URLPath
    date: str | None = None
    version: str | None = None

    def to_dict(self) -> LatestEntryDict:
        """Convert to dictionary for JSON serialization."""
        result: LatestEntryDict = {
            "title": self.title,
            "description": self.description,
            "url": self.url,
        }
        if self.date is not None:
            result["date"] = self.date
        if self.version is not None:
            result["version"] = self.version
        return result


def excerpt(body: str) -> str:
    """Return the body text before the first truncation marker.

    The whole body is used when the marker is absent.
    Leading and trailing whitespace is stripped.
    """
    head, _, _ = body.partition(TRUNCATE_MARKER)
    return head.strip()


def title_from_slug(slug: str) -> str:
    """Turn "hello-world" into "Hello World"."""
    words = [word for word in slug.split("-") if word]
    return " ".join(word[0].upper() + word[1:] for word in words)


def front_matter_text(front_matter: dict[str, Any], key: str) -> str | None:
    """Read a front matter field as display text.

    Returns None when the field is absent, null, or blank. Dates parsed
    by YAML are rendered as YYYY-MM-DD.
    """
    value = front_matter.get(key)
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    text = str(value).strip()
    return text or None


def join_url(route_prefix: str, *segments: str) -> URLPath:
    """Join a route prefix and path segments into a URL path.

    >>> join_url("/blog/", "2024", "01", "02", "launch")
    '/blog/2024/01/02/launch'
    """
    parts = [part.strip("/") for part in (route_prefix, *segments)]
    return URLPath("/" + "/".join(part for part in parts if part))
