"""Chunk parser for literate source files.

Groups the lines of a source file into alternating runs of code and
comment, tagging each comment run as inline or block.
"""

import logging
from collections.abc import Iterable
from typing import Optional

from lit_doc.parsers.lines import LineClassifier, read_lines, split_lines
from lit_doc.parsers.structure import Chunk, ChunkKind, ParsedFile, SourceLine

logger = logging.getLogger(__name__)


class ChunkParser:
    """Parses source lines into ParsedFile structures.

    Walks the lines once, keeping the kind of the current run and a
    buffer of its lines. A change between comment and code closes the
    buffer as a chunk. Inline status never splits a run; it is read
    from the first line of each comment chunk.
    """

    def __init__(self, classifier: Optional[LineClassifier] = None) -> None:
        """Initialize the parser.

        Args:
            classifier: Line classifier to use. Defaults to one for
                ``;;`` comments.
        """
        self.classifier = classifier or LineClassifier()

    def parse_file(self, file_path: str) -> ParsedFile:
        """Parse a source file into chunks.

        Args:
            file_path: Path to the source file.

        Returns:
            A ParsedFile covering every line of the file.

        Raises:
            FileNotFoundError: If the file does not exist.
        """
        return self.parse_lines(read_lines(file_path), str(file_path))

    def parse_source(self, source: str, file_path: str = "<string>") -> ParsedFile:
        """Parse source text into chunks.

        Args:
            source: Full text of a source file.
            file_path: Optional file path for reference in the result.

        Returns:
            A ParsedFile covering every line of the text.
        """
        return self.parse_lines(split_lines(source), file_path)

    def parse_lines(
        self, lines: Iterable[SourceLine], file_path: str = "<string>"
    ) -> ParsedFile:
        """Group numbered lines into code and comment chunks.

        Args:
            lines: Lines in source order.
            file_path: Optional file path for reference in the result.

        Returns:
            A ParsedFile whose chunks partition the lines.
        """
        chunks: list[Chunk] = []
        state: Optional[ChunkKind] = None
        buffer: list[SourceLine] = []

        for line in lines:
            kind = self._classify(line)
            if state is not None and kind != state:
                chunks.append(self._close(state, buffer))
                buffer = []
            state = kind
            buffer.append(line)

        if buffer and state is not None:
            chunks.append(self._close(state, buffer))

        logger.debug("Parsed %s into %d chunks", file_path, len(chunks))
        return ParsedFile(path=file_path, chunks=chunks)

    def _classify(self, line: SourceLine) -> ChunkKind:
        if self.classifier.is_comment(line.text):
            return ChunkKind.COMMENT
        return ChunkKind.CODE

    def _close(self, kind: ChunkKind, buffer: list[SourceLine]) -> Chunk:
        """Build a chunk from a completed run of lines.

        Args:
            kind: Kind of the run being closed.
            buffer: Lines of the run, non-empty.

        Returns:
            The completed Chunk.
        """
        inline = kind == ChunkKind.COMMENT and self.classifier.is_inline_comment(
            buffer[0].text
        )
        return Chunk(kind=kind, lines=tuple(buffer), inline=inline)
