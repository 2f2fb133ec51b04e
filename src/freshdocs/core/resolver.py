"""Latest-content resolution.

Scans a content root for date- or version-named entries, picks the most
recent one according to a policy, and builds a normalized LatestEntry
from its front matter and body.

Content roots look like:

    blog/
    ├── 2024-01-02-launch.mdx
    ├── 2024-03-10-roadmap/
    │   └── index.md
    └── authors.yml              # ignored, does not match the convention
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

from freshdocs.core.entry import LatestEntry
from freshdocs.core.errors import (
    ContentRootUnavailable,
    IndexFileMissing,
    NoCandidatesFound,
    ResolverError,
)
from freshdocs.core.frontmatter import ParsedEntry, parse_front_matter

logger = logging.getLogger(__name__)

MARKUP_EXTENSIONS = (".md", ".mdx")
INDEX_FILENAMES = frozenset(f"index{ext}" for ext in MARKUP_EXTENSIONS)


@dataclass(frozen=True)
class Candidate:
    """Content root entry matching the policy's naming convention."""

    name: str
    path: Path
    stem: str
    sort_key: Any
    slug: str


class ContentPolicy(Protocol):
    """Naming and ordering rules for one content collection.

    ``name_pattern`` recognizes candidate stems, ``sort_key`` maps a stem
    to a comparable key (None rejects the entry). Keys must be totally
    ordered; larger keys are more recent.
    """

    @property
    def label(self) -> str: ...

    @property
    def name_pattern(self) -> re.Pattern[str]: ...

    def sort_key(self, stem: str) -> Any | None: ...

    def slug(self, stem: str) -> str: ...

    def build_entry(self, candidate: Candidate, parsed: ParsedEntry) -> LatestEntry: ...


def strip_markup_extension(name: str) -> str:
    """Remove a trailing .md or .mdx from an entry name."""
    for ext in MARKUP_EXTENSIONS:
        if name.endswith(ext):
            return name[: -len(ext)]
    return name


def is_markup_file(path: Path) -> bool:
    """Check whether a path is a regular file with a markup extension."""
    return path.suffix in MARKUP_EXTENSIONS and path.is_file()


class LatestContentResolver:
    """Finds and summarizes the most recent entry under a content root.

    Every call to resolve() rescans the filesystem; nothing is cached.
    """

    def __init__(self, content_root: Path, policy: ContentPolicy) -> None:
        """Initialize resolver.

        Args:
            content_root: Directory holding the collection's entries
            policy: Naming, ordering and entry assembly rules
        """
        self._content_root = content_root
        self._policy = policy

    @property
    def content_root(self) -> Path:
        """Directory holding the collection's entries."""
        return self._content_root

    @property
    def policy(self) -> ContentPolicy:
        """Naming and ordering rules in use."""
        return self._policy

    def resolve(self) -> LatestEntry | None:
        """Resolve the latest entry.

        Never raises: missing roots, empty collections, unresolvable
        entries and unreadable files are logged and reported as None.

        Returns:
            LatestEntry for the most recent candidate, None if there is none
        """
        label = self._policy.label
        try:
            candidates = self.find_candidates()
            latest = self.select_latest(candidates)
            source_path = self.resolve_source(latest)
            parsed = self.load_entry(source_path)
            entry = self._policy.build_entry(latest, parsed)
        except NoCandidatesFound as e:
            logger.info(f"No latest {label} entry: {e}")
            return None
        except ResolverError as e:
            logger.warning(f"No latest {label} entry: {e}")
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to load latest {label} entry: {e}")
            return None

        logger.info(f"Latest {label} entry: {latest.name} -> {entry.url}")
        return entry

    def find_candidates(self) -> list[Candidate]:
        """List root entries matching the naming convention.

        Returns:
            Candidates in directory-listing order

        Raises:
            ContentRootUnavailable: If the root is missing or unreadable
            NoCandidatesFound: If no entry matches
        """
        root = self._content_root
        if not root.exists():
            raise ContentRootUnavailable(root, "does not exist")
        if not root.is_dir():
            raise ContentRootUnavailable(root, "not a directory")

        try:
            children = list(root.iterdir())
        except OSError as e:
            raise ContentRootUnavailable(root, str(e)) from e

        candidates: list[Candidate] = []
        for child in children:
            candidate = self._to_candidate(child)
            if candidate is not None:
                candidates.append(candidate)

        if not candidates:
            raise NoCandidatesFound(root)

        logger.debug(f"Found {len(candidates)} {self._policy.label} candidates in {root}")
        return candidates

    def select_latest(self, candidates: list[Candidate]) -> Candidate:
        """Pick the most recent candidate.

        Equal sort keys fall back to the lexically greatest entry name, so
        the choice never depends on directory-listing order.

        Raises:
            NoCandidatesFound: If candidates is empty
        """
        if not candidates:
            raise NoCandidatesFound(self._content_root)
        return max(candidates, key=lambda c: (c.sort_key, c.name))

    def resolve_source(self, candidate: Candidate) -> Path:
        """Resolve a candidate to the markup file backing it.

        Flat files are their own source. Directories are backed by
        index.md or index.mdx; when both exist index.md wins.

        Raises:
            IndexFileMissing: If a directory candidate has no index file
        """
        if is_markup_file(candidate.path):
            return candidate.path

        for child in sorted(candidate.path.iterdir(), key=lambda p: p.name):
            if child.name in INDEX_FILENAMES and child.is_file():
                return child

        raise IndexFileMissing(candidate.path)

    def load_entry(self, source_path: Path) -> ParsedEntry:
        """Read a source file and split it into front matter and body."""
        text = source_path.read_text(encoding="utf-8")
        parsed = parse_front_matter(text)
        if parsed.degraded:
            logger.warning(f"Ignored unusable front matter in {source_path}")
        return parsed

    def _to_candidate(self, path: Path) -> Candidate | None:
        """Build a Candidate from a root entry, None if it does not qualify."""
        name = path.name
        if path.is_dir():
            stem = name
        elif is_markup_file(path):
            stem = strip_markup_extension(name)
        else:
            return None

        if not self._policy.name_pattern.match(stem):
            return None

        sort_key = self._policy.sort_key(stem)
        if sort_key is None:
            logger.debug(f"Ignoring {name}: no valid sort key")
            return None

        return Candidate(
            name=name,
            path=path,
            stem=stem,
            sort_key=sort_key,
            slug=self._policy.slug(stem),
        )


def resolve_latest(content_root: Path, policy: ContentPolicy) -> LatestEntry | None:
    """Resolve the latest entry of a content root, None if there is none."""
    return LatestContentResolver(content_root, policy).resolve()
