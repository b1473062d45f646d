"""Static site export.

Writes the home page, one page per declared slug and the bundled static
assets into an output directory, mirroring the server's URL layout.
"""

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from docviewer.assets import get_static_dir
from docviewer.core.types import Slug
from docviewer.pages import PageBuilder

logger = logging.getLogger(__name__)


@dataclass
class ExportResult:
    """Outcome of a static export."""

    written: list[Path] = field(default_factory=list)
    missing: list[Slug] = field(default_factory=list)


async def export_site(builder: PageBuilder, output_dir: Path) -> ExportResult:
    """Export all pages to output_dir.

    Slugs whose documents cannot be resolved are skipped and reported in
    ``ExportResult.missing``.

    Args:
        builder: Page builder over the documents to export
        output_dir: Destination directory, created if missing

    Returns:
        ExportResult listing written files and unresolved slugs
    """
    result = ExportResult()
    output_dir.mkdir(parents=True, exist_ok=True)

    result.written.append(_write(output_dir / "index.html", await builder.home()))
    result.written.append(_write(output_dir / "404.html", builder.not_found()))

    for category_id, file_id in builder.resolver.list_slugs():
        doc = await builder.resolver.resolve(category_id, file_id)
        if doc is None:
            logger.warning(f"Skipping unresolved document: {category_id}/{file_id}")
            result.missing.append((category_id, file_id))
            # Drop pages left over from an earlier export
            shutil.rmtree(output_dir / "docs" / category_id / file_id, ignore_errors=True)
            continue
        target = output_dir / "docs" / category_id / file_id / "index.html"
        result.written.append(_write(target, builder.render_document(doc)))

    shutil.copytree(get_static_dir(), output_dir / "static", dirs_exist_ok=True)
    return result


def _write(path: Path, html: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html, encoding="utf-8")
    logger.info(f"Wrote {path}")
    return path
