"""Pages API endpoints.

Handles document rendering and returns JSON responses with metadata,
breadcrumbs, prev/next links and HTML content.
"""

from datetime import UTC, datetime
from email.utils import formatdate
from hashlib import md5

from aiohttp import web

from docviewer.app_keys import resolver_key
from docviewer.core.navigation import build_breadcrumbs, find_neighbors


def create_pages_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/pages/{category}/{name}", get_page),
        web.get("/api/home", get_home),
    ]


def raw_slug(request: web.Request) -> tuple[str, str]:
    """Return the last two path segments still percent-encoded.

    The resolver decodes each segment exactly once.
    """
    category_id, file_id = request.rel_url.raw_parts[-2:]
    return category_id, file_id


async def get_page(request: web.Request) -> web.Response:
    category_id, file_id = raw_slug(request)
    path = f"{request.match_info['category']}/{request.match_info['name']}"
    resolver = request.app[resolver_key]

    doc = await resolver.resolve(category_id, file_id)
    if doc is None:
        return _not_found(path)

    try:
        source_mtime = doc.source_path.stat().st_mtime
    except OSError:
        return _not_found(path)
    last_modified = datetime.fromtimestamp(source_mtime, tz=UTC)

    etag = _compute_etag(doc.content_html)

    if_none_match = request.headers.get("If-None-Match")
    if if_none_match == etag:
        return web.Response(status=304)

    category = resolver.get_category_view(doc.slug[0])
    previous, following = find_neighbors(category.docs if category else (), doc.slug)

    response_data = {
        "meta": {
            **doc.meta.to_dict(),
            "last_modified": last_modified.isoformat(),
        },
        "breadcrumbs": [b.to_dict() for b in build_breadcrumbs(doc.meta)],
        "navigation": {
            "previous": previous.to_dict() if previous else None,
            "next": following.to_dict() if following else None,
        },
        "content": doc.content_html,
    }

    return web.json_response(
        response_data,
        headers={
            "ETag": etag,
            "Last-Modified": formatdate(source_mtime, usegmt=True),
            "Cache-Control": "private, max-age=60",
        },
    )


async def get_home(request: web.Request) -> web.Response:
    resolver = request.app[resolver_key]
    content = await resolver.get_home_content()
    return web.json_response({"content": content})


def _not_found(path: str) -> web.Response:
    return web.json_response({"error": "Page not found", "path": path}, status=404)


def _compute_etag(content: str) -> str:
    # First 16 hex chars (64 bits) are enough for cache validation
    content_hash = md5(content.encode("utf-8"), usedforsecurity=False).hexdigest()[:16]
    return f'"{content_hash}"'
