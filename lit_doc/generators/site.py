"""Literate documentation generation for a source tree.

Runs every source file through the read, parse, render and write
pipeline, producing one HTML page per file.
"""

import logging
from pathlib import Path
from typing import Optional

from lit_doc.output.html import ChunkRenderer
from lit_doc.output.markup import MarkupConverter
from lit_doc.output.page import PageAssembler
from lit_doc.parsers.chunk_parser import ChunkParser
from lit_doc.parsers.lines import COMMENT_TOKEN, LineClassifier
from lit_doc.parsers.structure import ParsedFile
from lit_doc.utils.files import (
    SOURCE_EXTENSION,
    check_directories,
    check_source_directory,
    find_source_files,
    output_file_name,
)

logger = logging.getLogger(__name__)


class LiterateDocGenerator:
    """Generates HTML documentation pages from literate source files.

    The converter is built once by the caller and shared across files;
    everything else is per-file and holds no state between them.
    """

    def __init__(
        self,
        converter: MarkupConverter,
        extension: str = SOURCE_EXTENSION,
        comment_token: str = COMMENT_TOKEN,
        templates_dir: Optional[str] = None,
    ) -> None:
        """Initialize the generator.

        Args:
            converter: Shared Markdown converter for comment prose.
            extension: Suffix of the source files to document.
            comment_token: The language's line-comment token.
            templates_dir: Optional override for the page templates.
        """
        self.extension = extension
        self.parser = ChunkParser(LineClassifier(comment_token))
        self.renderer = ChunkRenderer(converter, comment_token=comment_token)
        self.assembler = PageAssembler(templates_dir)

    def plan(self, source_dir: str, dest_dir: str) -> list[tuple[Path, Path]]:
        """List the pages a run would write, without writing anything.

        Args:
            source_dir: Directory containing the source code.
            dest_dir: Directory that would receive the HTML files.

        Returns:
            Pairs of (source file, destination file).

        Raises:
            ValueError: If the source directory is unusable.
        """
        problem = check_source_directory(source_dir)
        if problem:
            raise ValueError(problem)

        dest = Path(dest_dir)
        return [
            (source_path, dest / output_file_name(source_dir, source_path))
            for source_path in find_source_files(source_dir, self.extension)
        ]

    def generate(self, source_dir: str, dest_dir: str) -> list[Path]:
        """Write documentation for every source file in a tree.

        Args:
            source_dir: Directory containing the source code.
            dest_dir: Directory that will receive the HTML files.

        Returns:
            Paths of the written HTML files, in walk order.

        Raises:
            ValueError: If either directory is unusable.
            OSError: If a source file cannot be read or a page cannot
                be written. The run stops at the first failure.
        """
        problem = check_directories(source_dir, dest_dir)
        if problem:
            raise ValueError(problem)

        written = []
        for source_path, dest_path in self.plan(source_dir, dest_dir):
            parsed = self.parser.parse_file(str(source_path))
            written.append(self.render_file(dest_path, parsed))
            logger.info("Documented %s -> %s", source_path, dest_path)

        logger.info("Wrote %d pages to %s", len(written), dest_dir)
        return written

    def render_file(self, dest_path: Path, parsed: ParsedFile) -> Path:
        """Render a parsed file and write it as an HTML page.

        Args:
            dest_path: Path of the HTML file to write.
            parsed: The parsed source file.

        Returns:
            Path to the written file.
        """
        fragments = self.renderer.render_chunks(parsed.chunks)
        return self.assembler.write_page(dest_path, fragments)
