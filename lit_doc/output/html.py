"""HTML rendering of parsed chunks.

Turns code chunks into escaped preformatted blocks and comment chunks
into Markdown-rendered prose, wrapping inline comments in a styled div.
"""

import html
import logging
from collections.abc import Iterable

from lit_doc.output.markup import MarkupConverter
from lit_doc.parsers.lines import COMMENT_TOKEN
from lit_doc.parsers.structure import Chunk, ChunkKind, SourceLine

logger = logging.getLogger(__name__)

CODE_CLASS = "code prettyprint lang-lisp"
INLINE_COMMENT_CLASS = "inline-comment"


class ChunkRenderer:
    """Renders chunks into HTML fragments.

    Each fragment ends with a newline so fragments can be concatenated
    directly into the page body.
    """

    def __init__(
        self, converter: MarkupConverter, comment_token: str = COMMENT_TOKEN
    ) -> None:
        """Initialize the renderer.

        Args:
            converter: Shared Markdown converter for comment prose.
            comment_token: The language's line-comment token.
        """
        self.converter = converter
        self.prefix = comment_token * 2

    def render_chunks(self, chunks: Iterable[Chunk]) -> list[str]:
        """Render chunks in order.

        Args:
            chunks: Chunks of a parsed file.

        Returns:
            One HTML fragment per chunk, in the same order.
        """
        return [self.render_chunk(chunk) for chunk in chunks]

    def render_chunk(self, chunk: Chunk) -> str:
        """Render a chunk with the renderer matching its kind.

        Args:
            chunk: The chunk to render.

        Returns:
            HTML fragment for the chunk.
        """
        if chunk.kind == ChunkKind.CODE:
            return self.render_code(chunk)
        if chunk.inline:
            return self.render_inline_comment(chunk)
        return self.render_comment(chunk)

    def render_code(self, chunk: Chunk) -> str:
        """Render a code chunk as an escaped ``pre`` block.

        Args:
            chunk: A code chunk.

        Returns:
            HTML fragment, or an empty string for a chunk with no lines.
        """
        if not chunk.lines:
            return ""
        text = "".join(f"{line.text}\n" for line in chunk.lines)
        return f'<pre class="{CODE_CLASS}">{html.escape(text)}</pre>\n'

    def render_comment_line(self, line: SourceLine) -> str:
        """Strip the comment prefix from a line for Markdown input.

        The prefix and a single following space are removed. A comment
        with nothing after the prefix becomes a blank line so paragraph
        breaks survive.

        Args:
            line: A comment line.

        Returns:
            The comment text followed by a newline.
        """
        trimmed = line.text.strip()
        width = len(self.prefix)
        if len(trimmed) > width and trimmed[width] == " ":
            stripped = trimmed[width + 1 :]
        else:
            stripped = trimmed[width:]
        return f"{stripped}\n" if stripped else "\n"

    def render_comment(self, chunk: Chunk) -> str:
        """Render a comment chunk through the Markdown converter.

        Args:
            chunk: A comment chunk.

        Returns:
            HTML fragment, or an empty string for a chunk with no lines.
        """
        if not chunk.lines:
            return ""
        text = "".join(self.render_comment_line(line) for line in chunk.lines)
        return f"{self.converter.convert(text)}\n"

    def render_inline_comment(self, chunk: Chunk) -> str:
        """Render a comment chunk wrapped in the inline-comment div.

        Args:
            chunk: An inline comment chunk.

        Returns:
            HTML fragment wrapping the rendered comment.
        """
        return (
            f'<div class="{INLINE_COMMENT_CLASS}">\n'
            f"{self.render_comment(chunk)}"
            "</div>\n"
        )
