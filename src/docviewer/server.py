"""aiohttp server for docviewer.

Application factory and route registration.
"""

import logging

from aiohttp import web

from docviewer.api.navigation import create_navigation_routes
from docviewer.api.pages import create_pages_routes
from docviewer.app_keys import page_builder_key, resolver_key
from docviewer.assets import get_static_dir
from docviewer.config import Config
from docviewer.core.manifest import DEFAULT_MANIFEST, Manifest
from docviewer.core.renderer import MarkdownRenderer
from docviewer.core.resolver import DocumentResolver
from docviewer.pages import PageBuilder
from docviewer.views import create_view_routes, not_found

logger = logging.getLogger(__name__)


def create_resolver(config: Config, manifest: Manifest = DEFAULT_MANIFEST) -> DocumentResolver:
    """Create a resolver for the configured documents root."""
    renderer = MarkdownRenderer(allow_html=config.docs.allow_raw_html)
    return DocumentResolver(config.docs.source_dir, manifest, renderer)


def create_app(config: Config, manifest: Manifest = DEFAULT_MANIFEST) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration
        manifest: Declared categories and documents

    Returns:
        Configured aiohttp application
    """
    app = web.Application()

    resolver = create_resolver(config, manifest)
    app[resolver_key] = resolver
    app[page_builder_key] = PageBuilder(resolver, config.site)

    # API routes first so they take precedence over the catch-all
    app.router.add_routes(create_pages_routes())
    app.router.add_routes(create_navigation_routes())
    app.router.add_routes(create_view_routes())

    app.router.add_static("/static", get_static_dir())

    # Catch-all must be last
    app.router.add_get("/{path:.*}", not_found)

    return app


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    logger.info(f"Serving {config.docs.source_dir} on {config.server.host}:{config.server.port}")
    web.run_app(app, host=config.server.host, port=config.server.port, print=None)
