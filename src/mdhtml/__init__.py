"""A dependency-free renderer from GitHub-Flavored Markdown to HTML fragments."""

from mdhtml.markdown_ast_node import (
    MarkdownASTBlankLineNode,
    MarkdownASTBlockquoteNode,
    MarkdownASTCodeBlockNode,
    MarkdownASTDocumentNode,
    MarkdownASTHeadingNode,
    MarkdownASTHorizontalRuleNode,
    MarkdownASTHTMLBlockNode,
    MarkdownASTListItemNode,
    MarkdownASTListNode,
    MarkdownASTNode,
    MarkdownASTOrderedListNode,
    MarkdownASTParagraphNode,
    MarkdownASTTableBodyNode,
    MarkdownASTTableCellNode,
    MarkdownASTTableHeaderNode,
    MarkdownASTTableNode,
    MarkdownASTTableRowNode,
    MarkdownASTTextNode,
    MarkdownASTUnorderedListNode,
    MarkdownASTVisitor,
    MarkdownListKind
)
from mdhtml.markdown_ast_printer import MarkdownASTPrinter
from mdhtml.markdown_block_parser import MarkdownBlockParser
from mdhtml.markdown_document import GITHUB_MARKDOWN_CSS, wrap_html_document
from mdhtml.markdown_exceptions import MarkdownEditSpanError, MarkdownError, MarkdownSettingsError
from mdhtml.markdown_html_renderer import MarkdownHTMLRenderer
from mdhtml.markdown_inline_renderer import MarkdownInlineRenderer
from mdhtml.markdown_list_builder import ListContext, ListLine, MarkdownListBuilder
from mdhtml.markdown_reference_extractor import (
    EditSpan,
    MarkdownReferenceExtractor,
    ReferenceTable,
    apply_edit_spans
)
from mdhtml.markdown_renderer import MarkdownRenderer, default_renderer, render
from mdhtml.markdown_renderer_settings import MarkdownRendererSettings
from mdhtml.markdown_table import TableAlignment, parse_table_alignments, parse_table_row


__all__ = [
    # Rendering
    "render",
    "default_renderer",
    "MarkdownRenderer",
    "MarkdownRendererSettings",
    "wrap_html_document",
    "GITHUB_MARKDOWN_CSS",
    # Stages
    "MarkdownReferenceExtractor",
    "ReferenceTable",
    "EditSpan",
    "apply_edit_spans",
    "MarkdownBlockParser",
    "MarkdownListBuilder",
    "ListContext",
    "ListLine",
    "MarkdownInlineRenderer",
    "MarkdownHTMLRenderer",
    "MarkdownASTPrinter",
    # Tables
    "TableAlignment",
    "parse_table_row",
    "parse_table_alignments",
    # AST
    "MarkdownASTBlankLineNode",
    "MarkdownASTBlockquoteNode",
    "MarkdownASTCodeBlockNode",
    "MarkdownASTDocumentNode",
    "MarkdownASTHeadingNode",
    "MarkdownASTHorizontalRuleNode",
    "MarkdownASTHTMLBlockNode",
    "MarkdownASTListItemNode",
    "MarkdownASTListNode",
    "MarkdownASTNode",
    "MarkdownASTOrderedListNode",
    "MarkdownASTParagraphNode",
    "MarkdownASTTableBodyNode",
    "MarkdownASTTableCellNode",
    "MarkdownASTTableHeaderNode",
    "MarkdownASTTableNode",
    "MarkdownASTTableRowNode",
    "MarkdownASTTextNode",
    "MarkdownASTUnorderedListNode",
    "MarkdownASTVisitor",
    "MarkdownListKind",
    # Exceptions
    "MarkdownError",
    "MarkdownSettingsError",
    "MarkdownEditSpanError",
]
