"""Application keys for type-safe app configuration access."""

from aiohttp import web

from docviewer.core.resolver import DocumentResolver
from docviewer.pages import PageBuilder

resolver_key = web.AppKey("resolver", DocumentResolver)
page_builder_key = web.AppKey("page_builder", PageBuilder)
