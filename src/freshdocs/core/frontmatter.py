"""Front matter parsing.

Splits a markdown source into a YAML metadata block and the remaining body:

    ---
    title: Launch
    description: We shipped.
    ---
    Body text<!-- truncate -->More text

Front matter is optional. A block that is present but cannot be parsed
into a mapping degrades to an empty mapping; parsing never fails.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any

import yaml

logger = logging.getLogger(__name__)

FRONT_MATTER_DELIMITER = "---"

# Closing delimiter on its own line, optionally followed by trailing spaces
_CLOSING_RE = re.compile(r"^---[ \t]*\r?$", re.MULTILINE)


@dataclass(frozen=True)
class ParsedEntry:
    """Source text split into metadata and body."""

    front_matter: dict[str, Any] = field(default_factory=dict)
    body: str = ""
    degraded: bool = False


def parse_front_matter(text: str) -> ParsedEntry:
    """Split text into front matter and body.

    Args:
        text: Raw markdown source

    Returns:
        ParsedEntry with the metadata mapping (empty when absent or
        malformed) and the body following the metadata block
    """
    text = text.removeprefix("\ufeff")

    first_line, newline, rest = text.partition("\n")
    if first_line.rstrip() != FRONT_MATTER_DELIMITER or not newline:
        return ParsedEntry(body=text)

    closing = _CLOSING_RE.search(rest)
    if closing is None:
        return ParsedEntry(body=text)

    raw_block = rest[: closing.start()]
    body = rest[closing.end() :].removeprefix("\n")

    try:
        data = yaml.safe_load(raw_block)
    except (yaml.YAMLError, ValueError) as e:
        # PyYAML raises ValueError for values it cannot construct (2024-02-30, !!int abc)
        logger.warning(f"Malformed front matter, ignoring it: {e}")
        return ParsedEntry(body=body, degraded=True)

    if data is None:
        return ParsedEntry(body=body)

    if not isinstance(data, dict):
        logger.warning(
            f"Front matter must be a mapping, got {type(data).__name__}; ignoring it"
        )
        return ParsedEntry(body=body, degraded=True)

    return ParsedEntry(front_matter={str(k): v for k, v in data.items()}, body=body)
