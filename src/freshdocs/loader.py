"""Content-load phase.

Builds the blog and changelog resolvers from configuration and resolves
the build state they feed.
"""

import asyncio
import logging

from freshdocs.config import Config
from freshdocs.core.resolver import LatestContentResolver
from freshdocs.core.state import BuildState
from freshdocs.plugins.blog import create_blog_resolver
from freshdocs.plugins.changelog import create_changelog_resolver

logger = logging.getLogger(__name__)


def create_resolvers(config: Config) -> dict[str, LatestContentResolver]:
    """Create one resolver per content collection, keyed by kind."""
    return {
        "blog": create_blog_resolver(config.blog.content_dir, config.blog.route_prefix),
        "changelog": create_changelog_resolver(
            config.changelog.content_dir, config.changelog.route_prefix
        ),
    }


def load_build_state(config: Config) -> BuildState:
    """Resolve the latest entry of every collection."""
    resolvers = create_resolvers(config)
    return BuildState(
        latest_blog_post=resolvers["blog"].resolve(),
        latest_changelog=resolvers["changelog"].resolve(),
    )


async def load_build_state_async(config: Config) -> BuildState:
    """Resolve the latest entries in worker threads.

    Keeps the event loop free while the collections are scanned.
    """
    resolvers = create_resolvers(config)
    latest_blog_post, latest_changelog = await asyncio.gather(
        asyncio.to_thread(resolvers["blog"].resolve),
        asyncio.to_thread(resolvers["changelog"].resolve),
    )
    state = BuildState(latest_blog_post=latest_blog_post, latest_changelog=latest_changelog)
    logger.debug(f"Loaded build state: {state}")
    return state
