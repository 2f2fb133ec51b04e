"""Latest entries API endpoints.

Exposes the build-time latest blog post and changelog records. A missing
record is a valid state: the combined endpoint reports it as null.
"""

from aiohttp import web

from freshdocs.app_keys import build_context_key
from freshdocs.core.state import CONTENT_KINDS, BuildState


def create_latest_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/latest", get_latest),
        web.get("/api/latest/{kind}", get_latest_entry),
    ]


async def get_latest(request: web.Request) -> web.Response:
    state = _get_state(request)
    return web.json_response(state.to_dict())


async def get_latest_entry(request: web.Request) -> web.Response:
    kind = request.match_info["kind"]
    if kind not in CONTENT_KINDS:
        return web.json_response(
            {"error": "Unknown content kind", "kind": kind},
            status=404,
        )

    entry = _get_state(request).get(kind)
    if entry is None:
        return web.json_response(
            {"error": "No latest entry", "kind": kind},
            status=404,
        )

    return web.json_response(entry.to_dict())


def _get_state(request: web.Request) -> BuildState:
    build_context = request.app[build_context_key]
    if not build_context.is_populated:
        raise web.HTTPServiceUnavailable(
            text='{"error": "Content is still loading"}',
            content_type="application/json",
        )
    return build_context.state
