"""
Markdown AST visitor to render the AST as HTML.
"""

from typing import List

from mdhtml.markdown_ast_node import (
    MarkdownASTBlankLineNode, MarkdownASTBlockquoteNode, MarkdownASTCodeBlockNode,
    MarkdownASTDocumentNode, MarkdownASTHeadingNode, MarkdownASTHorizontalRuleNode,
    MarkdownASTHTMLBlockNode, MarkdownASTListItemNode, MarkdownASTListNode, MarkdownASTNode,
    MarkdownASTOrderedListNode, MarkdownASTParagraphNode, MarkdownASTTableBodyNode,
    MarkdownASTTableCellNode, MarkdownASTTableHeaderNode, MarkdownASTTableNode,
    MarkdownASTTableRowNode, MarkdownASTTextNode, MarkdownASTUnorderedListNode, MarkdownASTVisitor
)
from mdhtml.markdown_inline_renderer import MarkdownInlineRenderer
from mdhtml.markdown_reference_extractor import ReferenceTable
from mdhtml.markdown_table import TableAlignment


class MarkdownHTMLRenderer(MarkdownASTVisitor):
    """
    Visitor that renders the block AST as an HTML fragment.

    Blocks are separated by newlines.  Inline markdown is converted as each text
    node is visited, using the reference table the renderer was created with.
    """
    def __init__(self, inline_renderer: MarkdownInlineRenderer, references: ReferenceTable) -> None:
        """
        Initialize the HTML renderer.

        Args:
            inline_renderer: Renderer for inline markdown
            references: Reference definitions for the document being rendered
        """
        super().__init__()
        self._inline_renderer = inline_renderer
        self._references = references

    def _render_children(self, node: MarkdownASTNode) -> List[str]:
        return [self.visit(child) for child in node.children]

    def _inline(self, node: MarkdownASTNode) -> str:
        return "".join(self._render_children(node))

    def visit_MarkdownASTDocumentNode(self, node: MarkdownASTDocumentNode) -> str:  # pylint: disable=invalid-name
        """
        Render a document node to HTML.

        Args:
            node: The document node to render

        Returns:
            The HTML fragment for the whole document
        """
        return "\n".join(self._render_children(node))

    def visit_MarkdownASTTextNode(self, node: MarkdownASTTextNode) -> str:  # pylint: disable=invalid-name
        """
        Render a text node to HTML.

        Args:
            node: The text node to render

        Returns:
            The text with its inline markdown converted
        """
        return self._inline_renderer.render(node.content, self._references)

    def visit_MarkdownASTBlankLineNode(self, node: MarkdownASTBlankLineNode) -> str:  # pylint: disable=invalid-name
        """Blank lines pass through unchanged."""
        return node.content

    def visit_MarkdownASTCodeBlockNode(self, node: MarkdownASTCodeBlockNode) -> str:  # pylint: disable=invalid-name
        """
        Render a code block node to HTML.

        The content is emitted verbatim, without inline conversion or escaping.

        Args:
            node: The code block node to render

        Returns:
            The HTML string representation of the code block
        """
        return f'<pre><code class="language-{node.language_name}">{node.content}</code></pre>'

    def visit_MarkdownASTBlockquoteNode(self, node: MarkdownASTBlockquoteNode) -> str:  # pylint: disable=invalid-name
        """
        Render a blockquote node to HTML.

        Args:
            node: The blockquote node to render

        Returns:
            The blockquote, as a single paragraph
        """
        return f"<blockquote><p>{self._inline(node)}</p></blockquote>"

    def visit_MarkdownASTHeadingNode(self, node: MarkdownASTHeadingNode) -> str:  # pylint: disable=invalid-name
        """
        Render a heading node to HTML.

        Args:
            node: The heading node to render

        Returns:
            The HTML string representation of the heading
        """
        return f"<h{node.level}>{self._inline(node)}</h{node.level}>"

    def visit_MarkdownASTHorizontalRuleNode(self, _node: MarkdownASTHorizontalRuleNode) -> str:  # pylint: disable=invalid-name
        """Render a horizontal rule node to HTML."""
        return "<hr>"

    def visit_MarkdownASTParagraphNode(self, node: MarkdownASTParagraphNode) -> str:  # pylint: disable=invalid-name
        """
        Render a paragraph node to HTML.

        Args:
            node: The paragraph node to render

        Returns:
            The HTML string representation of the paragraph
        """
        return f"<p>{self._inline(node)}</p>"

    def visit_MarkdownASTHTMLBlockNode(self, node: MarkdownASTHTMLBlockNode) -> str:  # pylint: disable=invalid-name
        """Raw HTML lines are kept as they are, apart from inline conversion."""
        return self._inline(node)

    def _render_list(self, node: MarkdownASTListNode) -> str:
        tag = node.kind.value
        return "\n".join([f"<{tag}>", *self._render_children(node), f"</{tag}>"])

    def visit_MarkdownASTOrderedListNode(self, node: MarkdownASTOrderedListNode) -> str:  # pylint: disable=invalid-name
        """
        Render an ordered list node to HTML.

        Args:
            node: The ordered list node to render

        Returns:
            The HTML string representation of the ordered list
        """
        return self._render_list(node)

    def visit_MarkdownASTUnorderedListNode(self, node: MarkdownASTUnorderedListNode) -> str:  # pylint: disable=invalid-name
        """
        Render an unordered list node to HTML.

        Args:
            node: The unordered list node to render

        Returns:
            The HTML string representation of the unordered list
        """
        return self._render_list(node)

    def visit_MarkdownASTListItemNode(self, node: MarkdownASTListItemNode) -> str:  # pylint: disable=invalid-name
        """
        Render a list item node to HTML.

        Args:
            node: The list item node to render

        Returns:
            The HTML string representation of the list item
        """
        return f"<li>{self._inline(node)}</li>"

    def visit_MarkdownASTTableNode(self, node: MarkdownASTTableNode) -> str:  # pylint: disable=invalid-name
        """
        Render a table node to HTML.

        Args:
            node: The table node to render

        Returns:
            The HTML string representation of the table
        """
        return "\n".join(["<table>", *self._render_children(node), "</table>"])

    def visit_MarkdownASTTableHeaderNode(self, node: MarkdownASTTableHeaderNode) -> str:  # pylint: disable=invalid-name
        """Render the header section of a table."""
        return "\n".join(["<thead>", *self._render_children(node), "</thead>"])

    def visit_MarkdownASTTableBodyNode(self, node: MarkdownASTTableBodyNode) -> str:  # pylint: disable=invalid-name
        """Render the body section of a table."""
        return "\n".join(["<tbody>", *self._render_children(node), "</tbody>"])

    def visit_MarkdownASTTableRowNode(self, node: MarkdownASTTableRowNode) -> str:  # pylint: disable=invalid-name
        """Render a table row."""
        return "\n".join(["<tr>", *self._render_children(node), "</tr>"])

    def visit_MarkdownASTTableCellNode(self, node: MarkdownASTTableCellNode) -> str:  # pylint: disable=invalid-name
        """
        Render a table cell node to HTML.

        Cells without an explicit alignment get no style attribute.

        Args:
            node: The table cell node to render

        Returns:
            The HTML string representation of the cell
        """
        tag = "th" if node.is_header else "td"
        style = ""
        if node.alignment != TableAlignment.NONE:
            style = f' style="text-align:{node.alignment.value}"'

        return f"<{tag}{style}>{self._inline(node)}</{tag}>"
