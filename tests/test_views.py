"""Tests for HTML page handlers."""

from pathlib import Path
from urllib.parse import quote

import pytest
from aiohttp.test_utils import TestClient
from docviewer.config import Config
from docviewer.server import create_app

from tests.conftest import SAMPLE_MANIFEST


@pytest.fixture
async def client(test_config: Config, aiohttp_client) -> TestClient:
    """Create test client with configured app."""
    return await aiohttp_client(create_app(test_config, SAMPLE_MANIFEST))


class TestHomePage:
    """Tests for GET /."""

    @pytest.mark.asyncio
    async def test__renders_readme_and_sidebar(self, client: TestClient) -> None:
        """Home page embeds README HTML and lists every category."""
        response = await client.get("/")

        assert response.status == 200
        assert "text/html" in response.headers["Content-Type"]
        html = await response.text()
        assert "<h1>Home</h1>" in html
        assert "ガイド" in html
        assert "共通ドキュメント" in html
        assert 'href="/docs/guides/01_intro"' in html

    @pytest.mark.asyncio
    async def test__missing_readme__renders_fallback(
        self, docs_dir: Path, client: TestClient
    ) -> None:
        """Missing README shows fallback text instead of failing."""
        (docs_dir / "README.md").unlink()

        response = await client.get("/")

        assert response.status == 200
        assert "<p>ドキュメントが見つかりません。</p>" in await response.text()


class TestDocumentPage:
    """Tests for GET /docs/{category}/{name}."""

    @pytest.mark.asyncio
    async def test__existing_document__renders_page(self, client: TestClient) -> None:
        """Document page has title, badge, content and both pager links."""
        response = await client.get("/docs/guides/02_setup")

        assert response.status == 200
        html = await response.text()
        assert "<title>Setup | ガイド | 設計書ビューア</title>" in html
        assert '<span class="badge">ガイド</span>' in html
        assert "Install steps." in html
        assert 'class="prev" href="/docs/guides/01_intro"' in html
        assert 'class="next" href="/docs/guides/03_usage"' in html

    @pytest.mark.asyncio
    async def test__current_document__marked_active(self, client: TestClient) -> None:
        """Sidebar marks the current document."""
        response = await client.get("/docs/guides/02_setup")

        html = await response.text()
        assert 'href="/docs/guides/02_setup" class="active"' in html

    @pytest.mark.asyncio
    async def test__first_document__has_no_previous_link(self, client: TestClient) -> None:
        """First document renders only a next link."""
        response = await client.get("/docs/guides/01_intro")

        html = await response.text()
        assert 'class="prev"' not in html
        assert 'class="next"' in html

    @pytest.mark.asyncio
    async def test__last_document__has_no_next_link(self, client: TestClient) -> None:
        """Last document renders only a previous link."""
        response = await client.get("/docs/guides/03_usage")

        html = await response.text()
        assert 'class="prev"' in html
        assert 'class="next"' not in html

    @pytest.mark.asyncio
    async def test__encoded_and_literal_paths__render_same(self, client: TestClient) -> None:
        """Percent-encoded and literal URLs address the same document."""
        encoded = await client.get(f"/docs/{quote('共通')}/{quote('開発標準')}")
        literal = await client.get("/docs/共通/開発標準")

        assert encoded.status == 200
        assert literal.status == 200
        assert await encoded.text() == await literal.text()

    @pytest.mark.asyncio
    async def test__raw_html__passes_through(self, docs_dir: Path, client: TestClient) -> None:
        """Trusted document HTML is not escaped."""
        (docs_dir / "ガイド" / "01_intro.md").write_text(
            '<div class="note">注意</div>\n', encoding="utf-8"
        )

        response = await client.get("/docs/guides/01_intro")

        assert '<div class="note">注意</div>' in await response.text()

    @pytest.mark.asyncio
    async def test__unknown_document__returns_404_page(self, client: TestClient) -> None:
        """Undeclared document renders the not-found page."""
        response = await client.get("/docs/guides/unknown")

        assert response.status == 404
        html = await response.text()
        assert "<title>ドキュメントが見つかりません</title>" in html

    @pytest.mark.asyncio
    async def test__deleted_file__returns_404_page(
        self, docs_dir: Path, client: TestClient
    ) -> None:
        """Declared document without a file renders the not-found page."""
        (docs_dir / "ガイド" / "02_setup.md").unlink()

        response = await client.get("/docs/guides/02_setup")

        assert response.status == 404


class TestFallbackRoutes:
    """Tests for static and catch-all routes."""

    @pytest.mark.asyncio
    async def test__stylesheet__served(self, client: TestClient) -> None:
        """Bundled stylesheet is served."""
        response = await client.get("/static/style.css")

        assert response.status == 200

    @pytest.mark.asyncio
    async def test__unknown_path__returns_404_page(self, client: TestClient) -> None:
        """Paths outside the addressing scheme are not found."""
        response = await client.get("/docs/guides")

        assert response.status == 404
        assert "ドキュメントが見つかりません" in await response.text()
