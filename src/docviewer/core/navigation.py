"""Navigation derivation.

Builds sidebar trees, breadcrumbs and prev/next links from category views.
Navigation is a view layer over the manifest; adjacency follows declaration
order, not the ``order`` field.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TypedDict

from docviewer.core.types import DocCategory, DocMeta, Slug, URLPath


class NavItemDict(TypedDict, total=False):
    """Dictionary representation of a navigation item."""

    title: str
    path: str
    children: list["NavItemDict"]


@dataclass
class NavItem:
    """Navigation item with children for UI tree.

    Category items have no path of their own.
    """

    title: str
    path: URLPath | None = None
    children: list["NavItem"] = field(default_factory=list)

    def to_dict(self) -> NavItemDict:
        """Convert to dictionary for JSON serialization."""
        result: NavItemDict = {"title": self.title}
        if self.path is not None:
            result["path"] = self.path
        if self.children:
            result["children"] = [child.to_dict() for child in self.children]
        return result


@dataclass(frozen=True)
class BreadcrumbItem:
    """Breadcrumb navigation item."""

    title: str
    path: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        """Convert to dictionary for JSON serialization."""
        return {"title": self.title, "path": self.path}


def build_navigation(categories: Sequence[DocCategory]) -> list[NavItem]:
    """Build sidebar tree with one item per category.

    Args:
        categories: Category views in display order

    Returns:
        List of NavItem trees for navigation UI
    """
    return [
        NavItem(
            title=category.name,
            children=[NavItem(title=doc.title, path=doc.href) for doc in category.docs],
        )
        for category in categories
    ]


def find_neighbors(
    docs: Sequence[DocMeta], slug: Slug
) -> tuple[DocMeta | None, DocMeta | None]:
    """Find previous and next documents around a slug.

    Args:
        docs: Documents of one category in declaration order
        slug: Slug of the current document

    Returns:
        Tuple of (previous, next); either is None at the ends, both are None
        when the slug is not in ``docs``
    """
    for idx, doc in enumerate(docs):
        if doc.slug == slug:
            previous = docs[idx - 1] if idx > 0 else None
            following = docs[idx + 1] if idx < len(docs) - 1 else None
            return previous, following
    return None, None


def build_breadcrumbs(doc: DocMeta) -> list[BreadcrumbItem]:
    """Build breadcrumbs: Home, category (unlinked), document title."""
    return [
        BreadcrumbItem(title="ホーム", path="/"),
        BreadcrumbItem(title=doc.category),
        BreadcrumbItem(title=doc.title, path=doc.href),
    ]
