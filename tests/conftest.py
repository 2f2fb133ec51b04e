"""Shared test fixtures."""

from pathlib import Path

import pytest
from freshdocs.config import CollectionConfig, Config, ServerConfig


@pytest.fixture
def blog_dir(tmp_path: Path) -> Path:
    """Create an empty blog content directory."""
    blog = tmp_path / "blog"
    blog.mkdir(exist_ok=True)
    return blog


@pytest.fixture
def changelog_dir(tmp_path: Path) -> Path:
    """Create an empty changelog content directory."""
    changelogs = tmp_path / "changelogs"
    changelogs.mkdir(exist_ok=True)
    return changelogs


@pytest.fixture
def test_config(blog_dir: Path, changelog_dir: Path) -> Config:
    """Create a test configuration pointing at tmp_path content directories."""
    return Config(
        server=ServerConfig(),
        blog=CollectionConfig(content_dir=blog_dir, route_prefix="/blog"),
        changelog=CollectionConfig(content_dir=changelog_dir, route_prefix="/changelogs"),
    )


def write_entry(path: Path, text: str) -> Path:
    """Write a content file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path
