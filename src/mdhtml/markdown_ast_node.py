"""
Block-level AST for markdown rendering.

The block parser produces one node per logical block.  Blocks that carry inline
markdown hold it, unconverted, in a MarkdownASTTextNode child; inline
substitution is applied to that text when the tree is rendered to HTML.
"""

from enum import Enum
from typing import Any, List

from mdhtml.markdown_table import TableAlignment


class MarkdownASTNode:
    """Base class for all markdown AST nodes."""

    def __init__(self) -> None:
        """Initialize an AST node with no parent, no children and no source range."""
        self.parent: MarkdownASTNode | None = None
        self.children: List[MarkdownASTNode] = []

        # Source range information (0-based line numbers)
        self.line_start: int | None = None
        self.line_end: int | None = None

    def add_child(self, child: "MarkdownASTNode") -> "MarkdownASTNode":
        """
        Add a child node to this node.

        Args:
            child: The child node to add

        Returns:
            The added child node for method chaining
        """
        child.parent = self
        self.children.append(child)
        return child

    def set_lines(self, line_start: int, line_end: int) -> None:
        """Record the range of source lines this node was built from."""
        self.line_start = line_start
        self.line_end = line_end


class MarkdownASTVisitor:
    """
    Base visitor class for markdown AST traversal.

    Dispatches to a `visit_<ClassName>` method when one exists, and to
    `generic_visit` otherwise.
    """

    def visit(self, node: MarkdownASTNode) -> Any:
        """
        Visit a node and dispatch to the appropriate visit method.

        Args:
            node: The node to visit

        Returns:
            The result of visiting the node
        """
        method_name = f'visit_{node.__class__.__name__}'
        visitor = getattr(self, method_name, self.generic_visit)
        return visitor(node)

    def generic_visit(self, node: MarkdownASTNode) -> List[Any]:
        """
        Default visit method for nodes without specific handlers.

        Args:
            node: The node to visit

        Returns:
            A list of results from visiting each child
        """
        return [self.visit(child) for child in node.children]


class MarkdownListKind(Enum):
    """Kind of list, valued by its HTML tag name."""
    ORDERED = "ol"
    UNORDERED = "ul"


class MarkdownASTDocumentNode(MarkdownASTNode):
    """Root node holding the sequence of block nodes for a document."""


class MarkdownASTTextNode(MarkdownASTNode):
    """Node holding raw inline markdown text."""
    def __init__(self, content: str) -> None:
        """
        Initialize a text node.

        Args:
            content: The inline markdown, not yet converted to HTML
        """
        super().__init__()
        self.content = content


class MarkdownASTInlineBlockNode(MarkdownASTNode):
    """Base class for blocks whose content is a single run of inline markdown."""
    def __init__(self, text: str) -> None:
        super().__init__()
        self.add_child(MarkdownASTTextNode(text))

    @property
    def text(self) -> str:
        """The raw inline markdown for this block."""
        return self.children[0].content  # type: ignore[attr-defined]


class MarkdownASTBlankLineNode(MarkdownASTNode):
    """Node representing a blank source line, passed through unchanged."""
    def __init__(self, content: str = "") -> None:
        super().__init__()
        self.content = content


class MarkdownASTCodeBlockNode(MarkdownASTNode):
    """Node representing a fenced code block (<pre><code>)."""
    def __init__(self, language_name: str, content: str) -> None:
        """
        Initialize a code block node.

        Args:
            language_name: Language tag from the opening fence, or an empty string
            content: The code, verbatim
        """
        super().__init__()
        self.language_name = language_name
        self.content = content


class MarkdownASTBlockquoteNode(MarkdownASTInlineBlockNode):
    """Node representing a flattened blockquote (<blockquote><p>)."""


class MarkdownASTHeadingNode(MarkdownASTInlineBlockNode):
    """Node representing an HTML heading (<h1> through <h6>)."""
    def __init__(self, level: int, text: str) -> None:
        """
        Initialize a heading node.

        Args:
            level: The heading level (1-6)
            text: The heading text
        """
        super().__init__(text)
        self.level = max(1, min(6, level))


class MarkdownASTHorizontalRuleNode(MarkdownASTNode):
    """Node representing a horizontal rule (<hr>)."""


class MarkdownASTParagraphNode(MarkdownASTInlineBlockNode):
    """Node representing an HTML paragraph (<p>)."""


class MarkdownASTHTMLBlockNode(MarkdownASTInlineBlockNode):
    """Node representing a source line that already starts with HTML markup."""


class MarkdownASTListNode(MarkdownASTNode):
    """
    Base class for list nodes.

    Children are list items and nested lists.  A nested list is a sibling of the
    item that precedes it, not a child of that item.
    """
    kind = MarkdownListKind.UNORDERED

    def __init__(self, indent: int = 0) -> None:
        """
        Initialize a list node.

        Args:
            indent: The indentation column of the items in this list
        """
        super().__init__()
        self.indent = indent


class MarkdownASTOrderedListNode(MarkdownASTListNode):
    """Node representing an HTML ordered list (<ol>)."""
    kind = MarkdownListKind.ORDERED


class MarkdownASTUnorderedListNode(MarkdownASTListNode):
    """Node representing an HTML unordered list (<ul>)."""
    kind = MarkdownListKind.UNORDERED


class MarkdownASTListItemNode(MarkdownASTInlineBlockNode):
    """Node representing an HTML list item (<li>)."""


class MarkdownASTTableNode(MarkdownASTNode):
    """Node representing an HTML table (<table>)."""
    def __init__(self, alignments: List[TableAlignment]) -> None:
        """
        Initialize a table node.

        Args:
            alignments: Per-column alignments, in header column order
        """
        super().__init__()
        self.alignments = alignments


class MarkdownASTTableHeaderNode(MarkdownASTNode):
    """Node representing the header row section of a table (<thead>)."""


class MarkdownASTTableBodyNode(MarkdownASTNode):
    """Node representing the body section of a table (<tbody>)."""


class MarkdownASTTableRowNode(MarkdownASTNode):
    """Node representing a table row (<tr>)."""


class MarkdownASTTableCellNode(MarkdownASTInlineBlockNode):
    """Node representing a table cell (<td> or <th>)."""
    def __init__(self, text: str, is_header: bool = False, alignment: TableAlignment = TableAlignment.NONE) -> None:
        """
        Initialize a table cell node.

        Args:
            text: The cell text
            is_header: Whether this is a header cell (<th>) or a data cell (<td>)
            alignment: Cell alignment
        """
        super().__init__(text)
        self.is_header = is_header
        self.alignment = alignment
