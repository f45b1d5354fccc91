"""
Inline markdown to HTML conversion.

Inline elements are converted by a fixed sequence of substitutions over a run of
text.  Later steps see the HTML produced by earlier ones, so the order matters:

1. images, before links, as a link pattern would match an image minus its `!`
2. direct links `[text](url)`
3. reference links `[text][key]`
4. bare http(s) URLs, unless they directly follow `"` or `=`
5. bold, before italic, so `**x**` is not eaten as two italics
6. italic, only where the marker is not next to the same marker or a word character
7. strikethrough and inline code
"""

import logging
import re
from typing import List

from mdhtml.markdown_reference_extractor import ReferenceTable
from mdhtml.markdown_renderer_settings import MarkdownRendererSettings


def _is_word_char(ch: str) -> bool:
    return ch.isalnum() or ch == '_'


class MarkdownInlineRenderer:
    """Applies the inline substitution pipeline to text."""

    def __init__(self, settings: MarkdownRendererSettings | None = None) -> None:
        """
        Initialize the inline renderer with its substitution patterns.

        Args:
            settings: Renderer settings
        """
        self._settings = settings or MarkdownRendererSettings.create_default()

        self._image_pattern = re.compile(r'!\[([^\]]*)\]\(([^\s)]+)(?:\s+"([^"]+)")?\)')
        self._link_pattern = re.compile(r'\[([^\]]+)\]\(([^)]+)\)')
        self._reference_link_pattern = re.compile(r'\[([^\]]+)\]\[([^\]]+)\]')
        self._bold_asterisk_pattern = re.compile(r'\*\*([^*]+)\*\*')
        self._bold_underscore_pattern = re.compile(r'__([^_]+)__')
        self._strikethrough_pattern = re.compile(r'~~([^~]+)~~')
        self._inline_code_pattern = re.compile(r'`([^`]+)`')

        self._logger = logging.getLogger("MarkdownInlineRenderer")

    def _replace_image(self, match: re.Match) -> str:
        alt_text, url, title = match.group(1), match.group(2), match.group(3)
        title_attribute = f' title="{title}"' if title else ""
        return f'<img alt="{alt_text}" src="{url}"{title_attribute}>'

    def _convert_reference_links(self, text: str, references: ReferenceTable) -> str:
        """
        Resolve `[text][key]` links against the reference table.

        Unresolved keys leave the original bracket text in place.
        """
        def replace(match: re.Match) -> str:
            url = references.get(match.group(2))
            if url is None:
                self._logger.debug("unresolved reference key '%s'", match.group(2))
                return match.group(0)

            return f'<a href="{url}">{match.group(1)}</a>'

        return self._reference_link_pattern.sub(replace, text)

    def _convert_autolinks(self, text: str) -> str:
        """
        Link bare http:// and https:// URLs.

        A URL only starts where the previous character is not a word character,
        `"` or `=`, which leaves URLs inside generated href/src attributes alone.
        The URL runs until whitespace, `<` or `>`.
        """
        parts: List[str] = []
        copied = 0
        i = 0
        length = len(text)

        while i < length:
            if text[i] != 'h':
                i += 1
                continue

            if text.startswith('https://', i):
                scheme_end = i + 8

            elif text.startswith('http://', i):
                scheme_end = i + 7

            else:
                i += 1
                continue

            previous = text[i - 1] if i > 0 else ""
            if previous and (previous in '"=' or _is_word_char(previous)):
                i += 1
                continue

            end = scheme_end
            while end < length and not text[end].isspace() and text[end] not in '<>':
                end += 1

            if end == scheme_end:
                i += 1
                continue

            url = text[i:end]
            parts.append(text[copied:i])
            parts.append(f'<a href="{url}">{url}</a>')
            copied = end
            i = end

        parts.append(text[copied:])
        return "".join(parts)

    def _convert_emphasis(self, text: str, marker: str) -> str:
        """
        Convert single-marker emphasis to <em>.

        An opening marker counts only if the character before it is neither the
        marker nor a word character; the closing marker is the next occurrence of
        the marker and counts only if the character after it is neither.  This
        keeps `snake_case_word` and `**` runs intact.
        """
        parts: List[str] = []
        copied = 0
        i = 0
        length = len(text)

        while i < length:
            if text[i] != marker:
                i += 1
                continue

            previous = text[i - 1] if i > 0 else ""
            if previous and (previous == marker or _is_word_char(previous)):
                i += 1
                continue

            close = text.find(marker, i + 1)
            if close == -1:
                break

            following = text[close + 1] if close + 1 < length else ""
            if close == i + 1 or (following and (following == marker or _is_word_char(following))):
                i += 1
                continue

            parts.append(text[copied:i])
            parts.append(f'<em>{text[i + 1:close]}</em>')
            copied = close + 1
            i = close + 1

        parts.append(text[copied:])
        return "".join(parts)

    def render(self, text: str, references: ReferenceTable) -> str:
        """
        Convert the inline markdown in a run of text to HTML.

        Args:
            text: The text to convert
            references: Reference definitions for resolving `[text][key]` links

        Returns:
            The converted text
        """
        result = self._image_pattern.sub(self._replace_image, text)
        result = self._link_pattern.sub(r'<a href="\2">\1</a>', result)
        result = self._convert_reference_links(result, references)
        result = self._convert_autolinks(result)

        result = self._bold_asterisk_pattern.sub(r'<strong>\1</strong>', result)
        if not self._settings.no_underscores:
            result = self._bold_underscore_pattern.sub(r'<strong>\1</strong>', result)

        result = self._convert_emphasis(result, '*')
        if not self._settings.no_underscores:
            result = self._convert_emphasis(result, '_')

        result = self._strikethrough_pattern.sub(r'<del>\1</del>', result)
        return self._inline_code_pattern.sub(r'<code>\1</code>', result)
