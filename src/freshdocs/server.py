"""aiohttp server for freshdocs.

Application factory and route registration. The latest entries are
resolved once on startup and served read-only afterwards.
"""

import logging

from aiohttp import web

from freshdocs.api.latest import create_latest_routes
from freshdocs.app_keys import build_context_key, config_key
from freshdocs.config import Config
from freshdocs.core.state import BuildContext
from freshdocs.loader import load_build_state_async

logger = logging.getLogger(__name__)


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application
    """
    app = web.Application()

    app[config_key] = config
    app[build_context_key] = BuildContext()

    app.router.add_routes(create_latest_routes())
    app.on_startup.append(_load_content)

    return app


async def _load_content(app: web.Application) -> None:
    """Resolve the latest entries on application startup."""
    state = await load_build_state_async(app[config_key])
    app[build_context_key].populate(state)

    if state.latest_blog_post is None:
        logger.info("No latest blog post available")
    if state.latest_changelog is None:
        logger.info("No latest changelog available")


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
