"""
Visitor class to print markdown AST structures for debugging
"""
from typing import Any, List

from mdhtml.markdown_ast_node import (
    MarkdownASTBlankLineNode, MarkdownASTCodeBlockNode, MarkdownASTHeadingNode, MarkdownASTListNode,
    MarkdownASTNode, MarkdownASTTableCellNode, MarkdownASTTableNode, MarkdownASTTextNode, MarkdownASTVisitor
)


class MarkdownASTPrinter(MarkdownASTVisitor):
    """Visitor that prints the AST structure for debugging."""
    def __init__(self) -> None:
        """Initialize the AST printer with zero indentation."""
        super().__init__()
        self.indent_level = 0

    def _indent(self) -> str:
        return "  " * self.indent_level

    def _line_range(self, node: MarkdownASTNode) -> str:
        if node.line_start is None or node.line_end is None:
            return ""

        if node.line_start == node.line_end:
            return f" (line {node.line_start})"

        return f" (lines {node.line_start}-{node.line_end})"

    def _print_with_children(self, node: MarkdownASTNode, label: str) -> List[Any]:
        print(f"{self._indent()}{label}{self._line_range(node)}")
        self.indent_level += 1
        results = super().generic_visit(node)
        self.indent_level -= 1
        return results

    def generic_visit(self, node: MarkdownASTNode) -> List[Any]:
        """
        Default visit method that prints the node type.

        Args:
            node: The node to visit

        Returns:
            The results of visiting the children
        """
        return self._print_with_children(node, node.__class__.__name__)

    def visit_MarkdownASTTextNode(self, node: MarkdownASTTextNode) -> str:  # pylint: disable=invalid-name
        """
        Visit a text node and print its content.

        Args:
            node: The text node to visit

        Returns:
            The text content
        """
        print(f"{self._indent()}Text: '{node.content}'")
        return node.content

    def visit_MarkdownASTBlankLineNode(self, node: MarkdownASTBlankLineNode) -> str:  # pylint: disable=invalid-name
        """Visit a blank line node."""
        print(f"{self._indent()}BlankLine{self._line_range(node)}")
        return node.content

    def visit_MarkdownASTHeadingNode(self, node: MarkdownASTHeadingNode) -> List[Any]:  # pylint: disable=invalid-name
        """
        Visit a heading node and print its level.

        Args:
            node: The heading node to visit

        Returns:
            The results of visiting the children
        """
        return self._print_with_children(node, f"Heading (level {node.level})")

    def visit_MarkdownASTCodeBlockNode(self, node: MarkdownASTCodeBlockNode) -> str:  # pylint: disable=invalid-name
        """
        Visit a code block node and print its language and content.

        Args:
            node: The code block node to visit

        Returns:
            The code block content
        """
        print(f"{self._indent()}CodeBlock{self._line_range(node)}: language='{node.language_name}'")
        self.indent_level += 1
        print(f"{self._indent()}Content: '{node.content[:30]}...' ({len(node.content)} chars)")
        self.indent_level -= 1
        return node.content

    def visit_MarkdownASTOrderedListNode(self, node: MarkdownASTListNode) -> List[Any]:  # pylint: disable=invalid-name
        """Visit an ordered list node and print its indent."""
        return self._print_with_children(node, f"OrderedList (indent {node.indent})")

    def visit_MarkdownASTUnorderedListNode(self, node: MarkdownASTListNode) -> List[Any]:  # pylint: disable=invalid-name
        """Visit an unordered list node and print its indent."""
        return self._print_with_children(node, f"UnorderedList (indent {node.indent})")

    def visit_MarkdownASTTableNode(self, node: MarkdownASTTableNode) -> List[Any]:  # pylint: disable=invalid-name
        """
        Visit a table node and print its column alignments.

        Args:
            node: The table node to visit

        Returns:
            The results of visiting the children
        """
        alignments = ", ".join(alignment.value or "none" for alignment in node.alignments)
        return self._print_with_children(node, f"Table [{alignments}]")

    def visit_MarkdownASTTableCellNode(self, node: MarkdownASTTableCellNode) -> List[Any]:  # pylint: disable=invalid-name
        """
        Visit a table cell node and print its properties.

        Args:
            node: The table cell node to visit

        Returns:
            The results of visiting the children
        """
        cell_type = "HeaderCell" if node.is_header else "Cell"
        return self._print_with_children(node, f"{cell_type} (alignment: {node.alignment.value or 'none'})")
