"""
Tests for the markdown AST printer
"""
from mdhtml import MarkdownASTPrinter


def test_print_document(renderer, capsys):
    """Test the printed tree shows node kinds, details and source lines."""
    markdown = "# Title\n\n| A | B |\n|---|--:|\n| 1 | 2 |\n- a\n  - b\n```py\nx\n```"
    document, _ = renderer.parse(markdown)

    MarkdownASTPrinter().visit(document)
    lines = capsys.readouterr().out.splitlines()

    assert lines[0] == "MarkdownASTDocumentNode"
    assert lines[1] == "  Heading (level 1) (line 0)"
    assert lines[2] == "    Text: 'Title'"
    assert lines[3] == "  BlankLine (line 1)"
    assert lines[4] == "  Table [none, right] (lines 2-4)"
    assert "  UnorderedList (indent 0) (lines 5-6)" in lines
    assert "    UnorderedList (indent 2) (line 6)" in lines
    assert "        HeaderCell (alignment: none)" in lines
    assert "        Cell (alignment: right)" in lines
    assert "  CodeBlock (lines 7-9): language='py'" in lines


def test_print_ordered_list(renderer, capsys):
    """Test ordered lists are labelled as such."""
    document, _ = renderer.parse("1. one")
    MarkdownASTPrinter().visit(document)
    output = capsys.readouterr().out
    assert "OrderedList (indent 0) (line 0)" in output
    assert "Text: 'one'" in output
