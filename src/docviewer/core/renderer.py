"""Markdown rendering.

Strips the YAML metadata block from a document and converts the body to
HTML with markdown-it-py (CommonMark plus GFM tables, strikethrough and
task lists).

Raw HTML embedded in documents is passed through unescaped by default.
Documents are maintained by the same authors as the manifest, so output is
trusted; set ``allow_html=False`` to escape raw HTML instead.
"""

from typing import Any, cast

import yaml
from markdown_it import MarkdownIt
from mdit_py_plugins.tasklists import tasklists_plugin

FRONT_MATTER_DELIMITER = "---"


class FrontMatterError(ValueError):
    """Raised when a document has a malformed metadata block."""


def split_front_matter(text: str) -> tuple[dict[str, Any], str]:
    """Split document text into metadata and body.

    A metadata block starts with a ``---`` line on the first line and ends
    at the next ``---`` line. Text without a leading delimiter has no metadata.

    Args:
        text: Raw document text

    Returns:
        Tuple of (metadata mapping, Markdown body)

    Raises:
        FrontMatterError: If the block is unterminated or not a YAML mapping
    """
    text = text.removeprefix("\ufeff")
    lines = text.split("\n")
    if not lines or lines[0].strip() != FRONT_MATTER_DELIMITER:
        return {}, text

    for idx, line in enumerate(lines[1:], start=1):
        if line.strip() == FRONT_MATTER_DELIMITER:
            raw = "\n".join(lines[1:idx])
            body = "\n".join(lines[idx + 1 :])
            try:
                data = yaml.safe_load(raw)
            except yaml.YAMLError as exc:
                raise FrontMatterError(f"Invalid metadata block: {exc}") from exc
            if data is None:
                return {}, body
            if not isinstance(data, dict):
                raise FrontMatterError("Metadata block must be a mapping")
            return data, body

    raise FrontMatterError(f"Closing metadata delimiter '{FRONT_MATTER_DELIMITER}' missing")


class MarkdownRenderer:
    """Converts Markdown documents to HTML fragments.

    Stateless after construction; a single instance is shared across requests.
    """

    def __init__(self, *, allow_html: bool = True) -> None:
        """Initialize renderer.

        Args:
            allow_html: Pass raw HTML in documents through unescaped
        """
        self._allow_html = allow_html
        md = MarkdownIt("commonmark", {"html": allow_html})
        md.enable("table").enable("strikethrough")
        md.use(tasklists_plugin)
        self._md = md

    @property
    def allow_html(self) -> bool:
        """Whether raw HTML passes through unescaped."""
        return self._allow_html

    def render(self, raw_text: str) -> str:
        """Render document text to an HTML fragment.

        Args:
            raw_text: Document text, optionally starting with a metadata block

        Returns:
            HTML fragment, empty for an empty body

        Raises:
            FrontMatterError: If the metadata block is malformed
        """
        _, body = split_front_matter(raw_text)
        return self.render_body(body)

    def render_body(self, body: str) -> str:
        """Render a Markdown body that has no metadata block."""
        if not body.strip():
            return ""
        return cast(str, self._md.render(body))
