"""Click commands for listing and selecting snippet categories."""

import click

from snipdeck.cli.context import CliContext, handle_errors, pass_cli_context
from snipdeck.config.state import remembered_category
from snipdeck.lib.logging_config import get_logger

logger = get_logger(__name__)


@click.command(name="categories")
@pass_cli_context
@handle_errors
def categories(cli_ctx: CliContext) -> None:
    """List the categories in the snippet file.

    The remembered or requested category is marked with an asterisk.
    """
    engine = cli_ctx.engine()
    names = engine.list_categories()
    if not names:
        click.echo(f"No categories in {engine.source_file}")
        return

    active = cli_ctx.category
    if active is None:
        active = remembered_category(cli_ctx.state_path, engine.source_file)

    for name in names:
        marker = "*" if name == active else " "
        click.echo(f"{marker} {name}")


@click.command(name="select")
@click.argument("name", required=False)
@click.option(
    "--context",
    "context_id",
    default=None,
    help="Select the category named like this context, if there is one",
)
@pass_cli_context
@handle_errors
def select(cli_ctx: CliContext, name: str | None, context_id: str | None) -> None:
    """Select the category later commands use.

    NAME is the category title. Without it, a category matching --context is
    used, and failing that you are asked to choose.

    \b
    EXAMPLES:

        snipdeck select Python
        snipdeck select --context python-mode
    """
    engine = cli_ctx.engine()

    selected = None
    if name is None and context_id is not None:
        selected = engine.select_for_context(context_id)
        if selected is None:
            logger.info(f"No category matches context '{context_id}'")
    if selected is None:
        selected = engine.select_category(name)

    cli_ctx.remember(selected)
    click.secho(f"Category: {selected}", fg="green")

