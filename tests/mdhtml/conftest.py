"""Shared fixtures for markdown renderer tests."""

import pytest

from mdhtml import (
    MarkdownBlockParser,
    MarkdownInlineRenderer,
    MarkdownListBuilder,
    MarkdownReferenceExtractor,
    MarkdownRenderer,
    MarkdownRendererSettings,
    ReferenceTable
)


@pytest.fixture
def renderer():
    """Fixture providing a renderer with default settings."""
    return MarkdownRenderer()


@pytest.fixture
def renderer_no_underscores():
    """Fixture providing a renderer with underscore formatting disabled."""
    return MarkdownRenderer(MarkdownRendererSettings(no_underscores=True))


@pytest.fixture
def block_parser():
    """Fixture providing a block parser instance."""
    return MarkdownBlockParser()


@pytest.fixture
def list_builder():
    """Fixture providing a list builder instance."""
    return MarkdownListBuilder()


@pytest.fixture
def inline_renderer():
    """Fixture providing an inline renderer instance."""
    return MarkdownInlineRenderer()


@pytest.fixture
def extractor():
    """Fixture providing a reference definition extractor."""
    return MarkdownReferenceExtractor()


@pytest.fixture
def no_references():
    """Fixture providing an empty reference table."""
    return ReferenceTable()
