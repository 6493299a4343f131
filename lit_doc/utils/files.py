"""Source discovery and output naming.

Walks a source tree for files with the configured extension, maps each
one to a flat output file name, and validates the source and
destination directories before a run.
"""

import logging
import os
from collections.abc import Iterator
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

SOURCE_EXTENSION = ".clj"


def find_source_files(
    source_dir: str, extension: str = SOURCE_EXTENSION
) -> Iterator[Path]:
    """Yield source files below a directory, depth first.

    Entries are visited in sorted order so repeated runs see files in
    the same sequence. A file named exactly like the extension is
    skipped. Symlinked directories are not followed.

    Args:
        source_dir: Root directory to walk.
        extension: File name suffix to match, including the dot.

    Yields:
        Paths of matching files.
    """
    stack = sorted(Path(source_dir).iterdir(), reverse=True)
    while stack:
        entry = stack.pop()
        if entry.is_dir() and entry.is_symlink():
            logger.debug("Skipping symlinked directory %s", entry)
        elif entry.is_dir():
            stack.extend(sorted(entry.iterdir(), reverse=True))
        elif len(entry.name) > len(extension) and entry.name.endswith(extension):
            yield entry


def output_file_name(source_dir: str, source_path: Path) -> str:
    """Build a flat output file name for a source file.

    Joins the components of the path relative to the source directory
    with underscores, so ``com/x/main.clj`` becomes
    ``com_x_main.clj.html``.

    Args:
        source_dir: Root of the source tree.
        source_path: Path of a file inside the tree.

    Returns:
        The HTML file name.
    """
    relative = Path(source_path).relative_to(source_dir)
    return "_".join(relative.parts) + ".html"


def check_directories(source_dir: str, dest_dir: str) -> Optional[str]:
    """Validate the directories for a run, creating the destination.

    Args:
        source_dir: Directory containing the source code.
        dest_dir: Directory that will receive the HTML files.

    Returns:
        A description of the first problem found, or None if both
        directories are usable.
    """
    problem = check_source_directory(source_dir)
    if problem:
        return problem

    dest = Path(dest_dir)
    if not dest.exists():
        try:
            dest.mkdir(parents=True)
        except OSError as e:
            return f'Cannot create "{dest}": {e.strerror or e}'
        logger.info("Created output directory %s", dest)

    if not dest.is_dir():
        return f'"{dest}" is not a directory'
    if not os.access(dest, os.W_OK):
        return f'Cannot write to "{dest}"'

    return None


def check_source_directory(source_dir: str) -> Optional[str]:
    """Validate the source directory without touching the destination.

    Args:
        source_dir: Directory containing the source code.

    Returns:
        A description of the problem, or None if it is a readable
        directory.
    """
    source = Path(source_dir)
    if not source.is_dir():
        return f'"{source}" is not a directory'
    if not os.access(source, os.R_OK | os.X_OK):
        return f'Cannot read from "{source}"'
    return None
