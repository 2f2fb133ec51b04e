"""Resolver policies for the site's content collections."""

from freshdocs.plugins.blog import BlogPolicy
from freshdocs.plugins.changelog import ChangelogPolicy

__all__ = ["BlogPolicy", "ChangelogPolicy"]
