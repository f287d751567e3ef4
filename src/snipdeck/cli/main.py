"""Entry point for the ``snipdeck`` command line tool."""

import click

from snipdeck import __version__
from snipdeck.cli.commands.category import categories, select
from snipdeck.cli.commands.keymap import keymap
from snipdeck.cli.commands.snippet import capture, edit, expand, insert, list_cmd
from snipdeck.cli.context import CliContext
from snipdeck.lib.logging_config import setup_logging


@click.group()
@click.version_option(__version__, prog_name="snipdeck")
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Config file to use instead of ./config.yaml",
)
@click.option(
    "--source",
    "source_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Snippet outline file (overrides source_file in config)",
)
@click.option(
    "--category",
    "-c",
    default=None,
    help="Category to use for this invocation",
)
@click.option(
    "--context",
    "context_id",
    envvar="SNIPDECK_CONTEXT",
    default=None,
    help="Host context (mode or project name) used to pick a category",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output with debug information",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Only show warnings and errors",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_file: str | None,
    source_file: str | None,
    category: str | None,
    context_id: str | None,
    verbose: bool,
    quiet: bool,
) -> None:
    """SnipDeck - snippets kept in an outline file.

    Top-level headings of the outline are categories; the headings below
    them are snippets. Tags on a snippet heading decide what it does.

    \b
    EXAMPLES:

        Pick the category to work in:
            snipdeck select Python

        Insert a snippet by name:
            snipdeck insert "Main guard"

        Expand a keyword:
            snipdeck expand main
    """
    setup_logging(verbose=verbose, quiet=quiet)
    ctx.obj = CliContext(
        config_file=config_file,
        overrides={"source_file": source_file},
        category=category,
        context_id=context_id,
    )


cli.add_command(categories)
cli.add_command(select)
cli.add_command(list_cmd)
cli.add_command(insert)
cli.add_command(expand)
cli.add_command(keymap)
cli.add_command(edit)
cli.add_command(capture)


def main() -> None:
    """Run the CLI."""
    cli()


if __name__ == "__main__":
    main()
