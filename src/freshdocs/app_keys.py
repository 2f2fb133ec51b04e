"""Application keys for type-safe app configuration access."""

from aiohttp import web

from freshdocs.config import Config
from freshdocs.core.state import BuildContext

config_key = web.AppKey("config", Config)
build_context_key = web.AppKey("build_context", BuildContext)
