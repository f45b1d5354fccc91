"""
Tests for the markdown block parser
"""
import pytest

from mdhtml import (
    MarkdownASTBlankLineNode,
    MarkdownASTBlockquoteNode,
    MarkdownASTCodeBlockNode,
    MarkdownASTHeadingNode,
    MarkdownASTHorizontalRuleNode,
    MarkdownASTHTMLBlockNode,
    MarkdownASTParagraphNode,
    MarkdownASTTableNode,
    MarkdownASTTextNode,
    MarkdownASTUnorderedListNode,
    TableAlignment
)


def block_types(document):
    """Get the class names of a document's block nodes."""
    return [child.__class__.__name__ for child in document.children]


class TestMarkdownBlockParser:
    """Tests for the MarkdownBlockParser class."""

    def test_empty_document(self, block_parser):
        """Test that an empty document is a single blank line."""
        doc = block_parser.parse("")
        assert block_types(doc) == ["MarkdownASTBlankLineNode"]

    def test_simple_paragraph(self, block_parser):
        """Test parsing a simple paragraph."""
        doc = block_parser.parse("This is a paragraph.")
        assert len(doc.children) == 1
        paragraph = doc.children[0]
        assert isinstance(paragraph, MarkdownASTParagraphNode)
        assert len(paragraph.children) == 1
        assert isinstance(paragraph.children[0], MarkdownASTTextNode)
        assert paragraph.text == "This is a paragraph."

    def test_paragraph_lines_are_trimmed_and_joined(self, block_parser):
        """Test that paragraph lines are trimmed and joined with spaces."""
        doc = block_parser.parse("  first line  \nsecond line")
        assert doc.children[0].text == "first line second line"
        assert (doc.children[0].line_start, doc.children[0].line_end) == (0, 1)

    def test_heading(self, block_parser):
        """Test parsing a heading."""
        doc = block_parser.parse("### Heading 3")
        heading = doc.children[0]
        assert isinstance(heading, MarkdownASTHeadingNode)
        assert heading.level == 3
        assert heading.text == "Heading 3"

    def test_inline_markdown_is_not_converted(self, block_parser):
        """Test that block parsing keeps inline markdown as written."""
        doc = block_parser.parse("# A **bold** title")
        assert doc.children[0].text == "A **bold** title"

    def test_code_block(self, block_parser):
        """Test parsing a fenced code block."""
        doc = block_parser.parse("```python\ndef f():\n    pass\n```")
        assert len(doc.children) == 1
        code = doc.children[0]
        assert isinstance(code, MarkdownASTCodeBlockNode)
        assert code.language_name == "python"
        assert code.content == "def f():\n    pass\n"
        assert (code.line_start, code.line_end) == (0, 3)

    def test_code_block_hides_block_syntax(self, block_parser):
        """Test that lines inside a code block are not parsed as blocks."""
        doc = block_parser.parse("```\n# heading\n| a | b |\n|---|---|\n> quote\n```")
        assert block_types(doc) == ["MarkdownASTCodeBlockNode"]

    def test_unterminated_fence(self, block_parser):
        """Test that an unterminated fence becomes paragraph text."""
        doc = block_parser.parse("```\ncode")
        assert block_types(doc) == ["MarkdownASTParagraphNode"]
        assert doc.children[0].text == "``` code"

    def test_blockquote_lines_are_grouped(self, block_parser):
        """Test that consecutive quote lines form one blockquote."""
        doc = block_parser.parse("> a\n>b\n\n> c")
        assert block_types(doc) == [
            "MarkdownASTBlockquoteNode",
            "MarkdownASTBlankLineNode",
            "MarkdownASTBlockquoteNode"
        ]
        assert isinstance(doc.children[0], MarkdownASTBlockquoteNode)
        assert doc.children[0].text == "a b"
        assert doc.children[2].text == "c"

    @pytest.mark.parametrize("line", ["---", "***", "___", "------", "*****"])
    def test_horizontal_rule(self, block_parser, line):
        """Test horizontal rule variants."""
        doc = block_parser.parse(line)
        assert isinstance(doc.children[0], MarkdownASTHorizontalRuleNode)

    @pytest.mark.parametrize("line", ["--", " ---", "--- ", "-*-"])
    def test_not_horizontal_rule(self, block_parser, line):
        """Test lines that are not horizontal rules."""
        doc = block_parser.parse(line)
        assert not isinstance(doc.children[0], MarkdownASTHorizontalRuleNode)

    def test_spaced_dashes_are_a_list_item(self, block_parser):
        """Test that `- - -` is a list item rather than a rule."""
        doc = block_parser.parse("- - -")
        assert isinstance(doc.children[0], MarkdownASTUnorderedListNode)
        assert doc.children[0].children[0].text == "- -"

    def test_table(self, block_parser):
        """Test parsing a table."""
        doc = block_parser.parse("| A | B |\n|:-:|--:|\n| 1 | 2 |\n| 3 | 4 |")
        table = doc.children[0]
        assert isinstance(table, MarkdownASTTableNode)
        assert table.alignments == [TableAlignment.CENTER, TableAlignment.RIGHT]
        assert (table.line_start, table.line_end) == (0, 3)

        header, body = table.children
        header_cells = header.children[0].children
        assert [cell.text for cell in header_cells] == ["A", "B"]
        assert all(cell.is_header for cell in header_cells)

        assert len(body.children) == 2
        assert [cell.text for cell in body.children[1].children] == ["3", "4"]
        assert body.children[1].children[1].alignment == TableAlignment.RIGHT
        assert not body.children[1].children[0].is_header

    def test_pipe_without_separator_is_paragraph(self, block_parser):
        """Test that a line with pipes but no separator row is text."""
        doc = block_parser.parse("a | b\nc | d")
        assert block_types(doc) == ["MarkdownASTParagraphNode"]

    def test_html_line(self, block_parser):
        """Test that lines starting with `<` are kept as HTML lines."""
        doc = block_parser.parse("text\n  <div>x</div>\nmore")
        assert block_types(doc) == [
            "MarkdownASTParagraphNode",
            "MarkdownASTHTMLBlockNode",
            "MarkdownASTParagraphNode"
        ]
        assert isinstance(doc.children[1], MarkdownASTHTMLBlockNode)
        assert doc.children[1].text == "  <div>x</div>"

    def test_blank_line_content_is_kept(self, block_parser):
        """Test that whitespace-only lines are passed through as they are."""
        doc = block_parser.parse("a\n   \nb")
        blank = doc.children[1]
        assert isinstance(blank, MarkdownASTBlankLineNode)
        assert blank.content == "   "

    def test_list_interrupts_paragraph(self, block_parser):
        """Test that a list item ends the current paragraph."""
        doc = block_parser.parse("intro\n- item\noutro")
        assert block_types(doc) == [
            "MarkdownASTParagraphNode",
            "MarkdownASTUnorderedListNode",
            "MarkdownASTParagraphNode"
        ]

    def test_block_precedence(self, block_parser):
        """Test a heading line takes precedence over paragraph continuation."""
        doc = block_parser.parse("text\n# Heading\nmore text")
        assert block_types(doc) == [
            "MarkdownASTParagraphNode",
            "MarkdownASTHeadingNode",
            "MarkdownASTParagraphNode"
        ]

    def test_parser_is_reusable(self, block_parser):
        """Test that parsing one document leaves no state behind for the next."""
        block_parser.parse("- a\n  - b")
        doc = block_parser.parse("para")
        assert block_types(doc) == ["MarkdownASTParagraphNode"]
