"""Core type definitions."""

from dataclasses import dataclass
from pathlib import Path
from typing import NewType, TypedDict
from urllib.parse import quote

# URL path for routing (e.g., "/docs/common/開発標準")
# Distinct from filesystem Path to catch type mismatches
URLPath = NewType("URLPath", str)

# (category_id, file_id) pair addressing one document
Slug = tuple[str, str]


def doc_url(slug: Slug) -> URLPath:
    """Build percent-encoded document URL for a slug."""
    category_id, file_id = slug
    return URLPath(f"/docs/{quote(category_id, safe='')}/{quote(file_id, safe='')}")


class DocMetaDict(TypedDict):
    """Dictionary representation of document metadata."""

    slug: list[str]
    title: str
    category: str
    order: int
    path: str


@dataclass(frozen=True)
class DocMeta:
    """Document metadata derived from the manifest."""

    slug: Slug
    title: str
    category: str
    order: int

    @property
    def href(self) -> URLPath:
        return doc_url(self.slug)

    def to_dict(self) -> DocMetaDict:
        """Convert to dictionary for JSON serialization."""
        return {
            "slug": list(self.slug),
            "title": self.title,
            "category": self.category,
            "order": self.order,
            "path": self.href,
        }


@dataclass(frozen=True)
class DocCategory:
    """Category view for sidebar and navigation consumers."""

    id: str
    name: str
    docs: tuple[DocMeta, ...]

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "docs": [doc.to_dict() for doc in self.docs],
        }


@dataclass(frozen=True)
class ResolvedDocument:
    """Rendered document produced for a single request."""

    slug: Slug
    title: str
    category: str
    order: int
    content_html: str
    source_path: Path

    @property
    def meta(self) -> DocMeta:
        return DocMeta(
            slug=self.slug,
            title=self.title,
            category=self.category,
            order=self.order,
        )
