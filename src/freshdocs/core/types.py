"""Core type definitions."""

from typing import NewType

# URL path for routing (e.g., "/blog/2024/01/02/launch", "/changelogs/v1.2.0")
# Distinct from filesystem Path to catch type mismatches
URLPath = NewType("URLPath", str)
