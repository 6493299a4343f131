"""Entry point for the literate documentation generator.

Delegates to the Click command group, which loads configuration and
sets up logging before running a command.
"""

from lit_doc.cli.commands import lit_doc


def main() -> None:
    """Launch the CLI."""
    lit_doc(prog_name="lit-doc")


if __name__ == "__main__":
    main()
