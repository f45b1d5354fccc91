"""
Reference link definition extraction.

Definitions look like `[key]: url` on a line of their own.  They are collected
into a ReferenceTable and removed from the text before any block parsing, so
the inline pipeline can later resolve `[text][key]` links against them.
"""

from dataclasses import dataclass
import logging
import re
from typing import Dict, Iterable, Iterator, List, Mapping, Tuple

from mdhtml.markdown_exceptions import MarkdownEditSpanError


@dataclass(frozen=True)
class EditSpan:
    """A pending replacement of text[start:end]."""

    start: int
    end: int
    replacement: str


def apply_edit_spans(text: str, spans: Iterable[EditSpan]) -> str:
    """
    Apply a set of edit spans to a text in a single left-to-right copy pass.

    All offsets refer to the original text, so the order the spans are supplied
    in does not matter.

    Args:
        text: The text to edit
        spans: Spans to apply

    Returns:
        The edited text

    Raises:
        MarkdownEditSpanError: If a span is out of range or spans overlap
    """
    parts: List[str] = []
    position = 0

    for span in sorted(spans, key=lambda s: (s.start, s.end)):
        if span.start < 0 or span.end > len(text) or span.start > span.end:
            raise MarkdownEditSpanError(
                f"Edit span {span.start}-{span.end} is outside text of length {len(text)}",
                {"start": span.start, "end": span.end, "length": len(text)}
            )

        if span.start < position:
            raise MarkdownEditSpanError(
                f"Edit span {span.start}-{span.end} overlaps a previous span ending at {position}",
                {"start": span.start, "end": span.end, "previous_end": position}
            )

        parts.append(text[position:span.start])
        parts.append(span.replacement)
        position = span.end

    parts.append(text[position:])
    return "".join(parts)


class ReferenceTable(Mapping[str, str]):
    """
    Read-only mapping from reference key to URL.

    Keys are stored lowercased and lookups lowercase the requested key, so
    `[Text][KEY]` resolves against a `[key]: url` definition.
    """

    def __init__(self, references: Dict[str, str] | None = None) -> None:
        self._references: Dict[str, str] = {}
        for key, url in (references or {}).items():
            self._references.setdefault(key.lower(), url)

    def __getitem__(self, key: str) -> str:
        return self._references[key.lower()]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._references

    def __iter__(self) -> Iterator[str]:
        return iter(self._references)

    def __len__(self) -> int:
        return len(self._references)

    def __repr__(self) -> str:
        return f"ReferenceTable({self._references!r})"


class MarkdownReferenceExtractor:
    """Finds and removes reference link definitions."""

    def __init__(self) -> None:
        """Initialize the extractor with its definition pattern."""
        self._definition_pattern = re.compile(r'^[ \t]*\[([^\]\n]+)\]:[ \t]*(\S[^\n]*)$', re.MULTILINE)
        self._logger = logging.getLogger("MarkdownReferenceExtractor")

    def extract(self, text: str) -> Tuple[str, ReferenceTable]:
        """
        Extract reference definitions from markdown text.

        Each definition line is replaced by an empty line so the blank line still
        separates the blocks around it.  When a key is defined more than once the
        definition that appears first in the document wins; later ones are dropped.

        Args:
            text: The markdown text

        Returns:
            A tuple of (text with definitions removed, reference table)
        """
        references: Dict[str, str] = {}
        spans: List[EditSpan] = []

        for match in self._definition_pattern.finditer(text):
            key = match.group(1).lower()
            url = match.group(2).strip()
            spans.append(EditSpan(match.start(), match.end(), ""))

            if key in references:
                self._logger.debug("discarding duplicate reference definition for '%s': %s", key, url)
                continue

            references[key] = url

        if not spans:
            return text, ReferenceTable()

        return apply_edit_spans(text, spans), ReferenceTable(references)
