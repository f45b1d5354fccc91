"""
List nesting state machine.

Lists are tracked purely by the raw indentation of each item line.  A stack of
open list contexts (outermost first) decides when a nested list opens, when
finished nested lists close, and when a list changes kind at the same indent.
"""

from dataclasses import dataclass
import re
from typing import List, Tuple

from mdhtml.markdown_ast_node import (
    MarkdownASTListItemNode, MarkdownASTListNode, MarkdownASTOrderedListNode,
    MarkdownASTUnorderedListNode, MarkdownListKind
)
from mdhtml.markdown_renderer_settings import MarkdownRendererSettings


@dataclass
class ListLine:
    """A source line classified as a list item."""

    kind: MarkdownListKind
    indent: int  # Count of leading spaces and tabs
    content: str  # Item text, with the task marker already prefixed for task items


@dataclass
class ListContext:
    """An open list scope."""

    kind: MarkdownListKind
    indent: int
    node: MarkdownASTListNode


class MarkdownListBuilder:
    """Classifies list item lines and builds list nodes from runs of them."""

    def __init__(self, settings: MarkdownRendererSettings | None = None) -> None:
        """
        Initialize the list builder.

        Args:
            settings: Renderer settings, used for the task item markers
        """
        self._settings = settings or MarkdownRendererSettings.create_default()

        # Checked in this order; a task item also looks like a plain unordered item
        self._task_item_pattern = re.compile(r'^[-*+] \[([ xX])\] (.*)$')
        self._unordered_item_pattern = re.compile(r'^[-*+] (.*)$')
        self._ordered_item_pattern = re.compile(r'^\d+\. (.*)$')

    def classify(self, line: str) -> ListLine | None:
        """
        Classify a line as a list item.

        Args:
            line: The raw source line

        Returns:
            A ListLine if the trimmed line is a task, unordered or ordered item, otherwise None
        """
        trimmed = line.strip(' \t')
        indent = len(line) - len(line.lstrip(' \t'))

        task_match = self._task_item_pattern.match(trimmed)
        if task_match:
            checked = task_match.group(1) in ('x', 'X')
            marker = self._settings.checked_task_marker if checked else self._settings.unchecked_task_marker
            return ListLine(MarkdownListKind.UNORDERED, indent, f"{marker} {task_match.group(2)}")

        unordered_match = self._unordered_item_pattern.match(trimmed)
        if unordered_match:
            return ListLine(MarkdownListKind.UNORDERED, indent, unordered_match.group(1))

        ordered_match = self._ordered_item_pattern.match(trimmed)
        if ordered_match:
            return ListLine(MarkdownListKind.ORDERED, indent, ordered_match.group(1))

        return None

    def _create_list(self, kind: MarkdownListKind, indent: int) -> MarkdownASTListNode:
        if kind == MarkdownListKind.ORDERED:
            return MarkdownASTOrderedListNode(indent)

        return MarkdownASTUnorderedListNode(indent)

    def _open_list(
        self,
        stack: List[ListContext],
        top_level: List[MarkdownASTListNode],
        item: ListLine,
        line_num: int
    ) -> None:
        """
        Open a new list context for an item and push it.

        A list opened while another is open is added to the enclosing list after its
        last item, so it ends up as that item's sibling rather than its child.
        """
        node = self._create_list(item.kind, item.indent)
        node.set_lines(line_num, line_num)
        if stack:
            stack[-1].node.add_child(node)

        else:
            top_level.append(node)

        stack.append(ListContext(item.kind, item.indent, node))

    def build(self, items: List[Tuple[int, ListLine]]) -> List[MarkdownASTListNode]:
        """
        Build list nodes from a consecutive run of list item lines.

        The context stack is created here and is fully drained when the run ends.

        Args:
            items: (line number, classified line) pairs, in document order

        Returns:
            The top-level list nodes, in document order
        """
        stack: List[ListContext] = []
        top_level: List[MarkdownASTListNode] = []

        for line_num, item in items:
            # Close nested lists that are deeper than this item
            while stack and stack[-1].indent > item.indent:
                stack.pop()

            if not stack or stack[-1].indent < item.indent:
                self._open_list(stack, top_level, item, line_num)

            elif stack[-1].kind != item.kind:
                # Same indent, different kind: close the old list and open the new one
                stack.pop()
                self._open_list(stack, top_level, item, line_num)

            item_node = MarkdownASTListItemNode(item.content)
            item_node.set_lines(line_num, line_num)
            stack[-1].node.add_child(item_node)

            # Every context still open now spans this line
            for context in stack:
                context.node.line_end = line_num

        return top_level
