"""Click commands for using and maintaining snippets.

Inserted text is written to stdout so it can be piped into an editor or
captured by an editor integration.
"""

import sys

import click

from snipdeck.cli.context import CliContext, handle_errors, pass_cli_context
from snipdeck.host.buffer import TextBuffer
from snipdeck.lib.logging_config import get_logger
from snipdeck.snippets.dispatch import DispatchResult

logger = get_logger(__name__)

depth_option = click.option(
    "--depth",
    type=click.IntRange(min=1),
    default=None,
    help="Heading depth at the insertion point",
)
column_option = click.option(
    "--column",
    type=click.IntRange(min=0),
    default=0,
    help="Column of the insertion point, used for indentation",
)


def make_buffer(depth: int | None, column: int) -> TextBuffer:
    """Buffer standing in for the caller's cursor position."""
    return TextBuffer(text=" " * column, cursor=column, depth=depth)


def emit(result: DispatchResult, buffer: TextBuffer, column: int) -> None:
    """Print whatever the dispatch inserted, or its notice."""
    if result.notice:
        click.secho(result.notice, fg="yellow", err=True)
    if result.inserted_text is not None:
        click.echo(buffer.text[column:], nl=False)


@click.command(name="list")
@click.option("--tags", "show_tags", is_flag=True, help="Show snippet tags")
@pass_cli_context
@handle_errors
def list_cmd(cli_ctx: CliContext, show_tags: bool) -> None:
    """List the snippets of the active category."""
    engine = cli_ctx.active_engine()
    for snippet in engine.snippets():
        if show_tags and snippet.tags:
            click.echo(f"{snippet.name}  :{':'.join(snippet.tags)}:")
        else:
            click.echo(snippet.name)


@click.command(name="insert")
@click.argument("name", required=False)
@depth_option
@column_option
@pass_cli_context
@handle_errors
def insert(
    cli_ctx: CliContext, name: str | None, depth: int | None, column: int
) -> None:
    """Insert a snippet from the active category.

    NAME is the snippet heading. Without it you are asked to choose.
    Function snippets run instead of inserting text.
    """
    engine = cli_ctx.active_engine()
    buffer = make_buffer(depth, column)
    result = engine.insert_snippet(buffer, name)
    logger.debug(f"Inserted '{result.snippet.name}' ({result.kind.value})")
    emit(result, buffer, column)


@click.command(name="expand")
@click.argument("word")
@depth_option
@column_option
@pass_cli_context
@handle_errors
def expand(cli_ctx: CliContext, word: str, depth: int | None, column: int) -> None:
    """Expand WORD into the snippet keyed by it.

    A snippet named "main: guard block" is keyed by "main" when the expand
    separator is ":". Exits with status 1 when nothing matches.
    """
    engine = cli_ctx.active_engine()
    buffer = make_buffer(depth, column)
    result = engine.expand_at_point(word, buffer)
    if result is None:
        click.secho(
            f"No snippet for '{word}' in category '{engine.category}'",
            fg="yellow",
            err=True,
        )
        sys.exit(1)
    emit(result, buffer, column)


@click.command(name="edit")
@pass_cli_context
@handle_errors
def edit(cli_ctx: CliContext) -> None:
    """Open the snippet file in $EDITOR."""
    path = cli_ctx.engine().edit_source_file()
    logger.info(f"Edited {path}")


@click.command(name="capture")
@click.argument("name")
@click.option(
    "--tag",
    "tags",
    multiple=True,
    help="Tag for the new snippet (repeatable, order kept)",
)
@click.option(
    "--content",
    default=None,
    help="Snippet body; read from stdin when omitted",
)
@pass_cli_context
@handle_errors
def capture(
    cli_ctx: CliContext, name: str, tags: tuple[str, ...], content: str | None
) -> None:
    """Add snippet NAME to the end of the active category.

    \b
    EXAMPLES:

        echo 'print("hi")' | snipdeck capture Hello
        snipdeck capture Today --tag results --content '#+begin_src python ...'
    """
    engine = cli_ctx.active_engine()
    if content is None:
        content = click.get_text_stream("stdin").read()
    snippet = engine.capture_snippet(name, content or None, tags)
    click.secho(
        f"Captured '{snippet.name}' into category '{engine.category}'", fg="green"
    )
