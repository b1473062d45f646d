"""Shared test fixtures."""

from pathlib import Path

import pytest
from docviewer.config import Config, DocsConfig, ServerConfig, SiteConfig
from docviewer.core.manifest import CategoryEntry, DocumentEntry, Manifest
from docviewer.core.resolver import DocumentResolver

SAMPLE_MANIFEST = Manifest(
    (
        CategoryEntry(
            id="guides",
            name="ガイド",
            path="ガイド",
            docs=(
                DocumentEntry(file="01_intro.md", title="Intro", order=1),
                DocumentEntry(file="02_setup.md", title="Setup", order=2),
                DocumentEntry(file="03_usage.md", title="Usage", order=3),
            ),
        ),
        CategoryEntry(
            id="共通",
            name="共通ドキュメント",
            path="common",
            docs=(
                DocumentEntry(file="README.md", title="概要", order=0),
                DocumentEntry(file="開発標準.md", title="開発標準", order=1),
            ),
        ),
    )
)


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """Create docs directory backing every SAMPLE_MANIFEST entry."""
    docs = tmp_path / "docs"
    guides = docs / "ガイド"
    guides.mkdir(parents=True)
    (guides / "01_intro.md").write_text("# Intro\n\nWelcome.", encoding="utf-8")
    (guides / "02_setup.md").write_text(
        "---\ntitle: Setup\nauthor: team\n---\n# Setup\n\nInstall steps.",
        encoding="utf-8",
    )
    (guides / "03_usage.md").write_text("# Usage\n\nRun it.", encoding="utf-8")

    common = docs / "common"
    common.mkdir()
    (common / "README.md").write_text("# 概要\n\n共通の説明。", encoding="utf-8")
    (common / "開発標準.md").write_text("# 開発標準\n\nコーディング規約。", encoding="utf-8")

    (docs / "README.md").write_text("# Home\n\nWelcome to the docs.", encoding="utf-8")
    return docs


@pytest.fixture
def resolver(docs_dir: Path) -> DocumentResolver:
    return DocumentResolver(docs_dir, SAMPLE_MANIFEST)


@pytest.fixture
def test_config(docs_dir: Path) -> Config:
    """Create a test configuration pointing at docs_dir."""
    return Config(
        server=ServerConfig(),
        docs=DocsConfig(source_dir=docs_dir),
        site=SiteConfig(),
    )
