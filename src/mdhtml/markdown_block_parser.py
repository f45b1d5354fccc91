"""
Parser to construct the block-node sequence for a markdown document.

Each source line is classified against the block kinds in a fixed precedence:
fenced code, blockquote, heading, horizontal rule, table, list item, blank line,
raw HTML line and finally paragraph text.  Inline markdown inside blocks is kept
unconverted; it is rendered later, block by block.
"""

import logging
import re
from typing import List, Tuple

from mdhtml.markdown_ast_node import (
    MarkdownASTBlankLineNode, MarkdownASTBlockquoteNode, MarkdownASTCodeBlockNode,
    MarkdownASTDocumentNode, MarkdownASTHeadingNode, MarkdownASTHorizontalRuleNode,
    MarkdownASTHTMLBlockNode, MarkdownASTNode, MarkdownASTParagraphNode,
    MarkdownASTTableBodyNode, MarkdownASTTableCellNode, MarkdownASTTableHeaderNode,
    MarkdownASTTableNode, MarkdownASTTableRowNode
)
from mdhtml.markdown_list_builder import ListLine, MarkdownListBuilder
from mdhtml.markdown_renderer_settings import MarkdownRendererSettings
from mdhtml.markdown_table import (
    TableAlignment, is_table_body_row, is_table_start, parse_table_alignments, parse_table_row
)


class MarkdownBlockParser:
    """
    Builds a document node from markdown text.

    The parser keeps no per-document state between calls, so one instance can
    parse documents from several threads at once.
    """

    def __init__(self, settings: MarkdownRendererSettings | None = None) -> None:
        """
        Initialize the block parser with regex patterns for block elements.

        Args:
            settings: Renderer settings
        """
        self._settings = settings or MarkdownRendererSettings.create_default()
        self._list_builder = MarkdownListBuilder(self._settings)

        self._code_fence_open_pattern = re.compile(r'^\s*(`{3,})[ \t]*([\w\-#+.]*)[ \t]*$')
        self._code_fence_close_pattern = re.compile(r'^\s*(`{3,})\s*$')
        self._heading_pattern = re.compile(r'^(#{1,6}) (.+)$')
        self._horizontal_rule_pattern = re.compile(r'^(?:-{3,}|\*{3,}|_{3,})$')

        self._logger = logging.getLogger("MarkdownBlockParser")

    def _find_closing_fence(self, lines: List[str], start: int, fence_length: int) -> int:
        """
        Find the line that closes a code fence.

        Args:
            lines: All source lines
            start: Index of the first line after the opening fence
            fence_length: Number of backticks in the opening fence

        Returns:
            Index of the closing fence line, or -1 if the fence is never closed
        """
        for i in range(start, len(lines)):
            close_match = self._code_fence_close_pattern.match(lines[i])
            if close_match and len(close_match.group(1)) >= fence_length:
                return i

        return -1

    def _parse_code_block(self, lines: List[str], index: int) -> Tuple[MarkdownASTNode, int] | None:
        open_match = self._code_fence_open_pattern.match(lines[index])
        if not open_match:
            return None

        close_index = self._find_closing_fence(lines, index + 1, len(open_match.group(1)))
        if close_index == -1:
            # Unterminated fences are left as ordinary text
            self._logger.debug("unterminated code fence at line %d", index)
            return None

        code_lines = lines[index + 1:close_index]
        content = "\n".join(code_lines) + "\n" if code_lines else ""
        node = MarkdownASTCodeBlockNode(open_match.group(2), content)
        node.set_lines(index, close_index)
        return node, close_index + 1

    def _parse_blockquote(self, lines: List[str], index: int) -> Tuple[MarkdownASTNode, int] | None:
        if not lines[index].startswith('>'):
            return None

        quote_lines = []
        end = index
        while end < len(lines) and lines[end].startswith('>'):
            quote_lines.append(lines[end][1:].strip())
            end += 1

        node = MarkdownASTBlockquoteNode(" ".join(quote_lines))
        node.set_lines(index, end - 1)
        return node, end

    def _parse_heading(self, lines: List[str], index: int) -> Tuple[MarkdownASTNode, int] | None:
        heading_match = self._heading_pattern.match(lines[index])
        if not heading_match:
            return None

        node = MarkdownASTHeadingNode(len(heading_match.group(1)), heading_match.group(2))
        node.set_lines(index, index)
        return node, index + 1

    def _parse_horizontal_rule(self, lines: List[str], index: int) -> Tuple[MarkdownASTNode, int] | None:
        if not self._horizontal_rule_pattern.match(lines[index]):
            return None

        node = MarkdownASTHorizontalRuleNode()
        node.set_lines(index, index)
        return node, index + 1

    def _create_table_row(
        self,
        cells: List[str],
        alignments: List[TableAlignment],
        is_header: bool,
        line_num: int
    ) -> MarkdownASTTableRowNode:
        row_node = MarkdownASTTableRowNode()
        row_node.set_lines(line_num, line_num)

        # Rows may have more or fewer cells than the header; render what is there
        for j, cell_content in enumerate(cells):
            alignment = alignments[j] if j < len(alignments) else TableAlignment.NONE
            row_node.add_child(MarkdownASTTableCellNode(cell_content, is_header, alignment))

        return row_node

    def _parse_table(self, lines: List[str], index: int) -> Tuple[MarkdownASTNode, int] | None:
        if not is_table_start(lines, index):
            return None

        alignments = parse_table_alignments(lines[index + 1])
        table_node = MarkdownASTTableNode(alignments)

        header_node = MarkdownASTTableHeaderNode()
        header_node.set_lines(index, index)
        header_node.add_child(self._create_table_row(parse_table_row(lines[index]), alignments, True, index))
        table_node.add_child(header_node)

        body_node = MarkdownASTTableBodyNode()
        end = index + 2
        while end < len(lines) and is_table_body_row(lines[end]):
            body_node.add_child(self._create_table_row(parse_table_row(lines[end]), alignments, False, end))
            end += 1

        if body_node.children:
            body_node.set_lines(index + 2, end - 1)

        table_node.add_child(body_node)
        table_node.set_lines(index, end - 1)
        return table_node, end

    def parse(self, text: str) -> MarkdownASTDocumentNode:
        """
        Build the block-node sequence for a document.

        Args:
            text: The markdown text, with reference definitions already removed

        Returns:
            The document root node
        """
        document = MarkdownASTDocumentNode()
        lines = text.split('\n')

        # Runs of list items and paragraph lines stay pending until a different kind of line ends them
        pending_list: List[Tuple[int, ListLine]] = []
        pending_paragraph: List[Tuple[int, str]] = []

        def flush_list() -> None:
            for list_node in self._list_builder.build(pending_list):
                document.add_child(list_node)

            pending_list.clear()

        def flush_paragraph() -> None:
            if pending_paragraph:
                paragraph = MarkdownASTParagraphNode(" ".join(line for _, line in pending_paragraph))
                paragraph.set_lines(pending_paragraph[0][0], pending_paragraph[-1][0])
                document.add_child(paragraph)

            pending_paragraph.clear()

        block_parsers = (
            self._parse_code_block,
            self._parse_blockquote,
            self._parse_heading,
            self._parse_horizontal_rule,
            self._parse_table
        )

        index = 0
        while index < len(lines):
            line = lines[index]

            parsed = None
            for block_parser in block_parsers:
                parsed = block_parser(lines, index)
                if parsed is not None:
                    break

            if parsed is not None:
                flush_list()
                flush_paragraph()
                node, index = parsed
                document.add_child(node)
                continue

            list_line = self._list_builder.classify(line)
            if list_line is not None:
                flush_paragraph()
                pending_list.append((index, list_line))
                index += 1
                continue

            flush_list()

            trimmed = line.strip()
            if not trimmed:
                flush_paragraph()
                blank_node = MarkdownASTBlankLineNode(line)
                blank_node.set_lines(index, index)
                document.add_child(blank_node)

            elif trimmed.startswith('<'):
                flush_paragraph()
                html_node = MarkdownASTHTMLBlockNode(line)
                html_node.set_lines(index, index)
                document.add_child(html_node)

            else:
                pending_paragraph.append((index, trimmed))

            index += 1

        flush_list()
        flush_paragraph()

        self._logger.debug("parsed %d lines into %d blocks", len(lines), len(document.children))
        return document
