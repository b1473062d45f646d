"""Navigation API endpoints.

Provides the sidebar tree and the raw category listing.
"""

from aiohttp import web

from docviewer.app_keys import resolver_key
from docviewer.core.navigation import build_navigation


def create_navigation_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/navigation", get_navigation),
        web.get("/api/categories", get_categories),
    ]


async def get_navigation(request: web.Request) -> web.Response:
    resolver = request.app[resolver_key]
    nav_items = build_navigation(resolver.categories_view())
    return web.json_response({"items": [item.to_dict() for item in nav_items]})


async def get_categories(request: web.Request) -> web.Response:
    resolver = request.app[resolver_key]
    return web.json_response(
        {"categories": [category.to_dict() for category in resolver.categories_view()]}
    )
