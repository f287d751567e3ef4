"""Click command for the tag-derived key table."""

import sys

import click

from snipdeck.cli.commands.snippet import (
    column_option,
    depth_option,
    emit,
    make_buffer,
)
from snipdeck.cli.context import CliContext, handle_errors, pass_cli_context
from snipdeck.snippets.keymap import key_token


@click.command(name="keymap")
@click.option("--key", default=None, help="Fire the snippet bound to KEY")
@depth_option
@column_option
@pass_cli_context
@handle_errors
def keymap(
    cli_ctx: CliContext, key: str | None, depth: int | None, column: int
) -> None:
    """Show the key table of the active category, or fire one key.

    A snippet's last tag is its key, unless that tag is reserved
    (func, results, indent_*). Later snippets win a shared key.
    """
    engine = cli_ctx.active_engine()
    buffer = make_buffer(depth, column)
    table = engine.build_keybinding_table(buffer)

    if key is None:
        bound = {key_token(s): s.name for s in engine.snippets() if key_token(s)}
        for token in table:
            click.echo(f"{token}\t{bound[token]}")
        return

    action = table.get(key)
    if action is None:
        click.secho(f"No snippet bound to '{key}'", fg="yellow", err=True)
        sys.exit(1)
    emit(action(), buffer, column)
