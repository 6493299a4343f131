"""Page assembly for rendered documentation.

Wraps the rendered fragments of one source file in the fixed page
chrome loaded from a Jinja2 template.
"""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader

logger = logging.getLogger(__name__)

_DEFAULT_TEMPLATES_DIR = Path(__file__).parent.parent / "templates"

PAGE_TEMPLATE = "page.html.j2"
PAGE_TITLE = "Literate Documentation"


class PageAssembler:
    """Builds complete HTML documents from rendered fragments."""

    def __init__(self, templates_dir: Optional[str] = None) -> None:
        """Initialize the page assembler.

        Args:
            templates_dir: Path to the templates directory. Uses the
                packaged templates/ directory if not specified.
        """
        self._templates_path = (
            Path(templates_dir) if templates_dir else _DEFAULT_TEMPLATES_DIR
        )

        if not self._templates_path.exists():
            logger.warning("Templates directory not found: %s", self._templates_path)

        self._env = Environment(
            loader=FileSystemLoader(str(self._templates_path)),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        logger.debug("Page assembler initialized with: %s", self._templates_path)

    def assemble(self, fragments: Iterable[str]) -> str:
        """Render the full page around the fragments.

        Fragments are inserted in order with no separators.

        Args:
            fragments: HTML fragments for the page body.

        Returns:
            The complete HTML document.
        """
        template = self._env.get_template(PAGE_TEMPLATE)
        return template.render(title=PAGE_TITLE, fragments=list(fragments))

    def write_page(self, dest_path: Path, fragments: Iterable[str]) -> Path:
        """Write a complete page to disk, replacing any existing file.

        Args:
            dest_path: Path of the HTML file to write.
            fragments: HTML fragments for the page body.

        Returns:
            Path to the written file.
        """
        page = self.assemble(fragments)
        with open(dest_path, "w", encoding="utf-8") as f:
            f.write(page)

        logger.debug("Wrote page: %s", dest_path)
        return dest_path
