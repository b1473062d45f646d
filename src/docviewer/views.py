"""HTML page handlers."""

from aiohttp import web

from docviewer.api.pages import raw_slug
from docviewer.app_keys import page_builder_key


def create_view_routes() -> list[web.RouteDef]:
    return [
        web.get("/", home),
        web.get("/docs/{category}/{name}", document),
    ]


async def home(request: web.Request) -> web.Response:
    builder = request.app[page_builder_key]
    return web.Response(text=await builder.home(), content_type="text/html")


async def document(request: web.Request) -> web.Response:
    builder = request.app[page_builder_key]
    category_id, file_id = raw_slug(request)

    html = await builder.document(category_id, file_id)
    if html is None:
        return web.Response(text=builder.not_found(), status=404, content_type="text/html")
    return web.Response(text=html, content_type="text/html")


async def not_found(request: web.Request) -> web.Response:
    """Fallback for any other path."""
    builder = request.app[page_builder_key]
    return web.Response(text=builder.not_found(), status=404, content_type="text/html")
