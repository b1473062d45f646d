"""Document resolution.

Maps two-segment slugs to manifest entries and files on disk, and renders
them. Every lookup or read failure collapses into ``None`` (not found);
nothing is raised past this module.
"""

import asyncio
import logging
from pathlib import Path
from urllib.parse import unquote

from docviewer.core.manifest import DEFAULT_MANIFEST, Manifest
from docviewer.core.renderer import FrontMatterError, MarkdownRenderer
from docviewer.core.types import DocCategory, DocMeta, ResolvedDocument, Slug

logger = logging.getLogger(__name__)

HOME_FILENAME = "README.md"
HOME_FALLBACK_HTML = "<p>ドキュメントが見つかりません。</p>"


class DocumentResolver:
    """Resolves and renders documents declared in a manifest.

    Holds no mutable state; one instance is shared by all requests.
    """

    def __init__(
        self,
        source_dir: Path,
        manifest: Manifest = DEFAULT_MANIFEST,
        renderer: MarkdownRenderer | None = None,
    ) -> None:
        """Initialize resolver.

        Args:
            source_dir: Documents root containing one directory per category
            manifest: Declared categories and documents
            renderer: Markdown renderer (default: raw HTML allowed)
        """
        self._source_dir = source_dir
        self._manifest = manifest
        self._renderer = renderer or MarkdownRenderer()
        self._categories = tuple(
            DocCategory(
                id=category.id,
                name=category.name,
                docs=tuple(
                    DocMeta(
                        slug=(category.id, doc.file_id),
                        title=doc.title,
                        category=category.name,
                        order=doc.order,
                    )
                    for doc in category.docs
                ),
            )
            for category in manifest
        )
        self._slugs = [doc.slug for category in self._categories for doc in category.docs]

    @property
    def source_dir(self) -> Path:
        """Documents root directory."""
        return self._source_dir

    @property
    def manifest(self) -> Manifest:
        return self._manifest

    @property
    def renderer(self) -> MarkdownRenderer:
        return self._renderer

    def list_slugs(self) -> list[Slug]:
        """Return every declared slug in manifest order."""
        return list(self._slugs)

    def categories_view(self) -> list[DocCategory]:
        """Return categories with their documents in manifest order."""
        return list(self._categories)

    def get_category_view(self, category_id: str) -> DocCategory | None:
        """Return a single category view by id, exact match."""
        for category in self._categories:
            if category.id == category_id:
                return category
        return None

    async def resolve(self, category_id: str, file_id: str) -> ResolvedDocument | None:
        """Resolve and render a document.

        Args:
            category_id: Percent-encoded or literal category id
            file_id: Percent-encoded or literal file name without extension

        Returns:
            ResolvedDocument, or None if the slug is undeclared or the file
            cannot be read
        """
        category_id = unquote(category_id)
        file_id = unquote(file_id)

        category = self._manifest.get_category(category_id)
        if category is None:
            logger.debug(f"Unknown category: {category_id}")
            return None

        doc = category.get_document(file_id)
        if doc is None:
            logger.debug(f"Unknown document: {category_id}/{file_id}")
            return None

        source_path = self._source_dir / category.path / doc.file
        html = await self._load(source_path)
        if html is None:
            return None

        return ResolvedDocument(
            slug=(category.id, doc.file_id),
            title=doc.title,
            category=category.name,
            order=doc.order,
            content_html=html,
            source_path=source_path,
        )

    async def get_home_content(self) -> str:
        """Render the documents root README, or a fallback fragment."""
        html = await self._load(self._source_dir / HOME_FILENAME)
        if html is None:
            logger.info(f"Home content unavailable, using fallback: {self._source_dir / HOME_FILENAME}")
            return HOME_FALLBACK_HTML
        return html

    async def _load(self, source_path: Path) -> str | None:
        """Read and render a file, returning None on any failure."""
        try:
            text = await asyncio.to_thread(self._read_contained, source_path)
            return self._renderer.render(text)
        except (OSError, RuntimeError, UnicodeDecodeError, FrontMatterError) as e:
            logger.debug(f"Cannot load {source_path}: {e}")
            return None

    def _read_contained(self, source_path: Path) -> str:
        """Read a file that must resolve inside source_dir.

        Runs in a worker thread; path resolution touches the filesystem.
        Symlink loops raise RuntimeError on Python < 3.13.
        """
        root = self._source_dir.resolve()
        if not source_path.resolve().is_relative_to(root):
            raise PermissionError(f"Path escapes documents root: {source_path}")
        return source_path.read_text(encoding="utf-8")
