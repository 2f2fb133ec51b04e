"""Sort keys for date- and version-named content entries.

Each extractor maps an entry stem (name without markup extension) to a
comparable key, or None when the stem does not carry a valid key. Keys
sort ascending; the resolver reverses the order to pick the most recent.
"""

import re
from dataclasses import dataclass, field
from datetime import date

DATE_PREFIX_RE = re.compile(r"^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})(?:-(?P<slug>.*))?$")

# Semantic Versioning 2.0.0, with an optional leading "v"
_PRERELEASE_ID = r"(?:0|[1-9]\d*|\d*[A-Za-z-][0-9A-Za-z-]*)"

SEMVER_RE = re.compile(
    r"^v?(?P<major>0|[1-9]\d*)\.(?P<minor>0|[1-9]\d*)\.(?P<patch>0|[1-9]\d*)"
    rf"(?:-(?P<prerelease>{_PRERELEASE_ID}(?:\.{_PRERELEASE_ID})*))?"
    r"(?:\+(?P<build>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?$"
)


def date_sort_key(stem: str) -> date | None:
    """Parse the YYYY-MM-DD prefix of a stem into a calendar date.

    Returns None for stems without a date prefix and for impossible dates
    such as 2024-02-30.
    """
    match = DATE_PREFIX_RE.match(stem)
    if match is None:
        return None
    try:
        return date(int(match["year"]), int(match["month"]), int(match["day"]))
    except ValueError:
        return None


def date_slug(stem: str) -> str:
    """Return the part of a date-prefixed stem after the date (may be empty)."""
    match = DATE_PREFIX_RE.match(stem)
    if match is None:
        return ""
    return match["slug"] or ""


@dataclass(frozen=True)
class SemVer:
    """Semantic version ordered by SemVer 2.0.0 precedence.

    Build metadata is kept for display but ignored by comparison and
    equality, so ``1.0.0+a == 1.0.0+b``.
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = field(default=(), compare=False)

    @classmethod
    def parse(cls, text: str) -> "SemVer | None":
        """Parse "v1.2.3-beta.1+build.5" style strings, None if invalid."""
        match = SEMVER_RE.match(text)
        if match is None:
            return None

        prerelease = tuple(match["prerelease"].split(".")) if match["prerelease"] else ()
        build = tuple(match["build"].split(".")) if match["build"] else ()
        return cls(
            major=int(match["major"]),
            minor=int(match["minor"]),
            patch=int(match["patch"]),
            prerelease=prerelease,
            build=build,
        )

    def _precedence(self) -> tuple:
        # A release outranks any of its pre-releases
        if not self.prerelease:
            return (self.major, self.minor, self.patch, 1, ())
        identifiers = tuple(
            (0, int(part), "") if part.isdigit() else (1, 0, part)
            for part in self.prerelease
        )
        return (self.major, self.minor, self.patch, 0, identifiers)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self._precedence() < other._precedence()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self._precedence() <= other._precedence()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self._precedence() > other._precedence()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self._precedence() >= other._precedence()

    def __str__(self) -> str:
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += "-" + ".".join(self.prerelease)
        if self.build:
            version += "+" + ".".join(self.build)
        return version


def semver_sort_key(stem: str) -> SemVer | None:
    """Parse a version-named stem such as "v1.10.0" into a SemVer."""
    return SemVer.parse(stem)
