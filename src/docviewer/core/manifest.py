"""Document manifest.

Declares the categories and documents the viewer serves. The manifest is
built once at import time and never mutated; lookups are exact string matches.
"""

from collections.abc import Iterator
from dataclasses import dataclass

MARKDOWN_SUFFIX = ".md"


class ManifestError(ValueError):
    """Raised when a manifest declares duplicate categories or slugs."""


def strip_suffix(file_name: str) -> str:
    """Return file name without its Markdown extension."""
    return file_name.removesuffix(MARKDOWN_SUFFIX)


@dataclass(frozen=True)
class DocumentEntry:
    """Single document declared in a category."""

    file: str
    title: str
    order: int

    @property
    def file_id(self) -> str:
        """Second slug segment (file name without extension)."""
        return strip_suffix(self.file)


@dataclass(frozen=True)
class CategoryEntry:
    """Category with an ordered list of documents.

    Declaration order of ``docs`` defines prev/next navigation; ``order``
    on each document is display metadata only.
    """

    id: str
    name: str
    path: str
    docs: tuple[DocumentEntry, ...]

    def get_document(self, file_id: str) -> DocumentEntry | None:
        """Get document by file id (file name without extension).

        Args:
            file_id: Decoded second slug segment

        Returns:
            DocumentEntry if declared, None otherwise
        """
        for doc in self.docs:
            if doc.file_id == file_id:
                return doc
        return None


class Manifest:
    """Immutable ordered collection of categories.

    Validates on construction that category ids and ``(category, file_id)``
    slugs are unique.
    """

    __slots__ = ("_categories", "_index")

    def __init__(self, categories: tuple[CategoryEntry, ...]) -> None:
        """Initialize manifest.

        Args:
            categories: Categories in display order

        Raises:
            ManifestError: If ids or slugs are duplicated
        """
        index: dict[str, CategoryEntry] = {}
        for category in categories:
            if category.id in index:
                raise ManifestError(f"Duplicate category id: {category.id}")
            seen: set[str] = set()
            for doc in category.docs:
                if doc.file_id in seen:
                    raise ManifestError(f"Duplicate slug: {category.id}/{doc.file_id}")
                seen.add(doc.file_id)
            index[category.id] = category

        self._categories = tuple(categories)
        self._index = index

    def __iter__(self) -> Iterator[CategoryEntry]:
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)

    @property
    def categories(self) -> tuple[CategoryEntry, ...]:
        """Categories in declaration order."""
        return self._categories

    def get_category(self, category_id: str) -> CategoryEntry | None:
        """Get category by id, exact match."""
        return self._index.get(category_id)


def _category(id: str, name: str, docs: list[tuple[str, str, int]]) -> CategoryEntry:
    # Category directories are named after the display name
    return CategoryEntry(
        id=id,
        name=name,
        path=name,
        docs=tuple(DocumentEntry(file=f, title=t, order=o) for f, t, o in docs),
    )


DEFAULT_MANIFEST = Manifest(
    (
        _category(
            "common",
            "共通",
            [
                ("開発標準.md", "開発標準", 1),
                ("コード設計書.md", "コード設計書", 2),
                ("ドメイン定義書.md", "ドメイン定義書", 3),
                ("セキュリティ対応表.md", "セキュリティ対応表", 4),
            ],
        ),
        _category(
            "a1",
            "A1_プロジェクト管理システム",
            [
                ("README.md", "システム概要", 0),
                ("01_画面設計書.md", "画面設計書", 1),
                ("02_バッチ設計書.md", "バッチ設計書", 2),
                ("03_帳票設計書.md", "帳票設計書", 3),
                ("04_ファイルIF設計書.md", "ファイルIF設計書", 4),
                ("05_メッセージ設計書.md", "メッセージ設計書", 5),
                ("06_データモデル設計書.md", "データモデル設計書", 6),
                ("07_ジョブフロー設計書.md", "ジョブフロー設計書", 7),
                ("08_テスト仕様書.md", "テスト仕様書", 8),
            ],
        ),
        _category(
            "b1",
            "B1_顧客管理システム",
            [
                ("README.md", "システム概要", 0),
                ("01_API設計書.md", "API設計書", 1),
                ("02_メッセージ設計書.md", "メッセージ設計書", 2),
                ("03_データモデル設計書.md", "データモデル設計書", 3),
                ("04_テスト仕様書.md", "テスト仕様書", 4),
            ],
        ),
        _category(
            "auto-generated",
            "ソースコード自動生成",
            [
                ("README.md", "自動生成について", 0),
                ("01_システム概要.md", "システム概要", 1),
                ("02_画面設計書.md", "画面設計書", 2),
                ("03_API設計書.md", "API設計書", 3),
                ("04_バッチ設計書.md", "バッチ設計書", 4),
                ("05_データモデル設計書.md", "データモデル設計書", 5),
                ("06_バリデーション設計書.md", "バリデーション設計書", 6),
            ],
        ),
        _category(
            "diff-analysis",
            "差分分析",
            [
                ("README.md", "差分分析について", 0),
                ("01_差分サマリー.md", "差分サマリー", 1),
                ("02_抽出可能項目.md", "抽出可能項目", 2),
                ("03_抽出不可項目.md", "抽出不可項目", 3),
                ("04_精度評価.md", "精度評価", 4),
            ],
        ),
    )
)
