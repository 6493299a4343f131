"""Line reading and comment classification.

Reads source files line by line and decides whether each line is a
comment, and whether a comment sits inline with code or stands alone
as a block.
"""

import logging
from pathlib import Path

from lit_doc.parsers.structure import SourceLine

logger = logging.getLogger(__name__)

# Line-comment token for Lisp-family sources; comments use it doubled.
COMMENT_TOKEN = ";"


def split_lines(source: str) -> list[SourceLine]:
    """Split source text into numbered lines.

    Accepts ``\\n``, ``\\r\\n`` and ``\\r`` terminators. A trailing
    terminator does not produce an extra empty line.

    Args:
        source: Full text of a source file.

    Returns:
        List of SourceLine objects numbered from 1.
    """
    normalized = source.replace("\r\n", "\n").replace("\r", "\n")
    texts = normalized.split("\n")
    if texts and texts[-1] == "":
        texts.pop()
    return [SourceLine(number=i, text=text) for i, text in enumerate(texts, start=1)]


def read_lines(file_path: str) -> list[SourceLine]:
    """Read a source file into numbered lines.

    Args:
        file_path: Path to the source file.

    Returns:
        List of SourceLine objects numbered from 1.

    Raises:
        FileNotFoundError: If the file does not exist.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    lines = split_lines(path.read_text(encoding="utf-8"))
    logger.debug("Read %d lines from %s", len(lines), path)
    return lines


class LineClassifier:
    """Classifies source lines as comments or code.

    A comment line starts, after trimming, with the comment token
    doubled (``;;`` for Lisp). Nothing else is considered: a single
    ``;`` or a trailing comment after code is code.
    """

    def __init__(self, comment_token: str = COMMENT_TOKEN) -> None:
        """Initialize the classifier.

        Args:
            comment_token: The language's line-comment token.
        """
        self.prefix = comment_token * 2

    def is_comment(self, text: str) -> bool:
        """Return True if the line is a comment line.

        Empty and whitespace-only lines are never comments.

        Args:
            text: Line text without its terminator.

        Returns:
            True if the trimmed line starts with the comment prefix.
        """
        trimmed = text.strip()
        return len(trimmed) > 1 and trimmed[: len(self.prefix)] == self.prefix

    def is_inline_comment(self, text: str) -> bool:
        """Return True if the line is a comment indented with a space.

        Indented comments are taken to be mixed in with code; comments
        starting at column 0 (or indented with a tab) are block comments.

        Args:
            text: Line text without its terminator.

        Returns:
            True if the line is a comment and begins with a space.
        """
        return self.is_comment(text) and text[:1] == " "
