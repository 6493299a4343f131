"""CLI commands for the literate documentation generator.

Provides the Click-based command group 'lit-doc' with subcommands for
generating a documentation site and inspecting how a single file is
split into chunks.
"""

import logging
from typing import Optional

import click
import yaml

from lit_doc import __version__
from lit_doc.generators.site import LiterateDocGenerator
from lit_doc.output.markup import MarkupConverter
from lit_doc.parsers.chunk_parser import ChunkParser
from lit_doc.utils.config import AppConfig, load_config
from lit_doc.utils.logging import setup_logging

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="lit-doc")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to a YAML config file.",
)
@click.pass_context
def lit_doc(ctx: click.Context, config_path: Optional[str]) -> None:
    """Lit-Doc: literate programming documentation for Clojure code."""
    config = load_config(config_path)
    setup_logging(
        level=config.logging.level,
        log_format=config.logging.format,
        log_file=config.logging.file,
    )
    ctx.obj = config


@lit_doc.command()
@click.option(
    "--source",
    "-s",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory containing source code.",
)
@click.option(
    "--dest",
    "-d",
    type=click.Path(file_okay=False),
    default=None,
    help="Destination directory for HTML output.",
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Show which pages would be written without writing them.",
)
@click.pass_obj
def generate(
    config: AppConfig, source: Optional[str], dest: Optional[str], dry_run: bool
) -> None:
    """Generate literate documentation for a source tree.

    Every source file becomes one HTML page in the destination
    directory, with comments rendered as prose and code as
    preformatted blocks.
    """
    source_dir = source or config.source.directory
    dest_dir = dest or config.output.directory

    converter = MarkupConverter(smart_punctuation=True, auto_link_urls=True)
    generator = LiterateDocGenerator(converter, extension=config.source.extension)

    try:
        if dry_run:
            pages = generator.plan(source_dir, dest_dir)
            for source_path, dest_path in pages:
                click.echo(f"  Would write: {source_path} -> {dest_path}")
            click.echo(f"Dry run complete. {len(pages)} pages would be written.")
            return

        written = generator.generate(source_dir, dest_dir)
    except (OSError, ValueError) as e:
        logger.warning("Documentation run failed: %s", e)
        raise click.ClickException(str(e)) from e

    click.echo(f"Wrote {len(written)} pages to {dest_dir}")


@lit_doc.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def inspect(path: str) -> None:
    """Show how a source file is split into code and comment chunks."""
    try:
        parsed = ChunkParser().parse_file(path)
    except (OSError, ValueError) as e:
        logger.warning("Could not parse %s: %s", path, e)
        raise click.ClickException(str(e)) from e

    click.echo(yaml.safe_dump(parsed.to_dict(), sort_keys=False), nl=False)
