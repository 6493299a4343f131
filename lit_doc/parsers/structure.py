"""Data models for representing parsed source files.

Defines the source line, chunk and parsed file dataclasses shared
between the chunk parser and the HTML renderer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ChunkKind(str, Enum):
    """Classification of a run of source lines."""

    CODE = "code"
    COMMENT = "comment"


@dataclass(frozen=True)
class SourceLine:
    """A single line read from a source file.

    Attributes:
        number: 1-based line number in the source file.
        text: Line text without its line terminator.
    """

    number: int
    text: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dictionary.

        Returns:
            Dictionary representation of this line.
        """
        return {"number": self.number, "text": self.text}


@dataclass(frozen=True)
class Chunk:
    """A maximal contiguous run of lines sharing one classification.

    Attributes:
        kind: Whether the run is code or comment.
        lines: The lines in the run, in source order.
        inline: Whether a comment run is indented alongside code.
            Always False for code.
    """

    kind: ChunkKind
    lines: tuple[SourceLine, ...] = ()
    inline: bool = False

    @property
    def is_comment(self) -> bool:
        """Whether this chunk holds comment lines."""
        return self.kind == ChunkKind.COMMENT

    @property
    def start_line(self) -> int:
        """Line number of the first line, or 0 for an empty chunk."""
        return self.lines[0].number if self.lines else 0

    @property
    def end_line(self) -> int:
        """Line number of the last line, or 0 for an empty chunk."""
        return self.lines[-1].number if self.lines else 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dictionary.

        Returns:
            Dictionary representation of this chunk.
        """
        return {
            "kind": self.kind.value,
            "inline": self.inline,
            "start_line": self.start_line,
            "end_line": self.end_line,
            "lines": [line.text for line in self.lines],
        }


@dataclass
class ParsedFile:
    """The ordered chunks of one source file.

    Attributes:
        path: Path of the source file, for reference.
        chunks: Chunks in original line order.
    """

    path: str
    chunks: list[Chunk] = field(default_factory=list)

    @property
    def lines(self) -> list[SourceLine]:
        """All lines of the file, recovered from the chunks."""
        return [line for chunk in self.chunks for line in chunk.lines]

    @property
    def line_count(self) -> int:
        """Total number of lines covered by the chunks."""
        return sum(len(chunk.lines) for chunk in self.chunks)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dictionary.

        Returns:
            Dictionary representation of this parsed file.
        """
        return {
            "path": self.path,
            "line_count": self.line_count,
            "chunks": [chunk.to_dict() for chunk in self.chunks],
        }
