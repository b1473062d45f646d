"""HTML page composition.

Wraps rendered document fragments into full pages with the sidebar,
breadcrumbs and prev/next links. Shared by the server and the static export.
"""

from jinja2 import Environment, PackageLoader, select_autoescape

from docviewer.config import SiteConfig
from docviewer.core.navigation import (
    build_breadcrumbs,
    build_navigation,
    find_neighbors,
)
from docviewer.core.resolver import DocumentResolver
from docviewer.core.types import ResolvedDocument, URLPath


def create_environment() -> Environment:
    """Create Jinja environment for the bundled templates.

    Document HTML is inserted with ``|safe``; everything else is escaped.
    """
    return Environment(
        loader=PackageLoader("docviewer", "templates"),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


class PageBuilder:
    """Builds full HTML pages for the home page and documents."""

    def __init__(
        self,
        resolver: DocumentResolver,
        site: SiteConfig,
        environment: Environment | None = None,
    ) -> None:
        self._resolver = resolver
        self._site = site
        self._env = environment or create_environment()
        self._navigation = build_navigation(resolver.categories_view())

    @property
    def resolver(self) -> DocumentResolver:
        return self._resolver

    async def home(self) -> str:
        """Render the home page with README content and category cards."""
        content_html = await self._resolver.get_home_content()
        return self._env.get_template("home.html").render(
            site=self._site,
            navigation=self._navigation,
            current_path=URLPath("/"),
            categories=self._resolver.categories_view(),
            content_html=content_html,
        )

    async def document(self, category_id: str, file_id: str) -> str | None:
        """Render a document page.

        Args:
            category_id: Raw category slug segment
            file_id: Raw file slug segment

        Returns:
            Full HTML page, or None if the document cannot be resolved
        """
        doc = await self._resolver.resolve(category_id, file_id)
        if doc is None:
            return None
        return self.render_document(doc)

    def render_document(self, doc: ResolvedDocument) -> str:
        """Render a page for an already resolved document."""
        category = self._resolver.get_category_view(doc.slug[0])
        docs = category.docs if category is not None else ()
        previous, following = find_neighbors(docs, doc.slug)

        return self._env.get_template("doc.html").render(
            site=self._site,
            navigation=self._navigation,
            current_path=doc.meta.href,
            doc=doc,
            breadcrumbs=build_breadcrumbs(doc.meta),
            previous=previous,
            next=following,
        )

    def not_found(self) -> str:
        """Render the generic not-found page."""
        return self._env.get_template("not_found.html").render(
            site=self._site,
            navigation=self._navigation,
            current_path=None,
        )
