"""
Markdown to HTML rendering.

Rendering runs three stages, each consuming the full text produced by the one
before: reference definition extraction, block parsing into a block-node
sequence, then HTML rendering with inline conversion of each block's text.
"""

import functools
import logging
from typing import Tuple

from mdhtml.markdown_ast_node import MarkdownASTDocumentNode
from mdhtml.markdown_block_parser import MarkdownBlockParser
from mdhtml.markdown_html_renderer import MarkdownHTMLRenderer
from mdhtml.markdown_inline_renderer import MarkdownInlineRenderer
from mdhtml.markdown_reference_extractor import MarkdownReferenceExtractor, ReferenceTable
from mdhtml.markdown_renderer_settings import MarkdownRendererSettings


class MarkdownRenderer:
    """
    Converts a constrained subset of GitHub-Flavored Markdown to an HTML fragment.

    A renderer holds only its settings and compiled patterns, neither of which
    change after construction.  Everything built while rendering a document
    belongs to that call, so one renderer may be used from several threads.
    """

    def __init__(self, settings: MarkdownRendererSettings | None = None) -> None:
        """
        Initialize the renderer.

        Args:
            settings: Renderer settings, or None for the defaults
        """
        self._settings = settings or MarkdownRendererSettings.create_default()
        self._reference_extractor = MarkdownReferenceExtractor()
        self._block_parser = MarkdownBlockParser(self._settings)
        self._inline_renderer = MarkdownInlineRenderer(self._settings)

        self._logger = logging.getLogger("MarkdownRenderer")

    @property
    def settings(self) -> MarkdownRendererSettings:
        """The settings this renderer was created with."""
        return self._settings

    def parse(self, markdown: str) -> Tuple[MarkdownASTDocumentNode, ReferenceTable]:
        """
        Parse markdown into its block-node sequence.

        Args:
            markdown: The markdown text

        Returns:
            A tuple of (document node, reference table)
        """
        text = markdown.replace('\r\n', '\n')
        text, references = self._reference_extractor.extract(text)
        document = self._block_parser.parse(text)
        return document, references

    def render(self, markdown: str) -> str:
        """
        Render markdown to an HTML fragment.

        Malformed or incomplete syntax is passed through as literal text rather
        than rejected, so this never fails for string input.

        Args:
            markdown: The markdown text

        Returns:
            The HTML fragment
        """
        document, references = self.parse(markdown)
        self._logger.debug(
            "rendering %d blocks with %d reference definitions", len(document.children), len(references)
        )

        html_renderer = MarkdownHTMLRenderer(self._inline_renderer, references)
        return html_renderer.visit(document)


@functools.lru_cache(maxsize=None)
def default_renderer() -> MarkdownRenderer:
    """
    Get the shared renderer with default settings.

    The renderer is created on first use; creating it is idempotent and it is
    never modified afterwards.

    Returns:
        The shared MarkdownRenderer
    """
    return MarkdownRenderer()


def render(markdown: str) -> str:
    """
    Render markdown to an HTML fragment using the default settings.

    Args:
        markdown: The markdown text

    Returns:
        The HTML fragment
    """
    return default_renderer().render(markdown)
