import logging

import click

from ghi.cli.commands.config import config_group
from ghi.cli.commands.issue import issue_group
from ghi.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="ghi")
@click.option("--debug", is_flag=True, help="Log gh invocations and store writes to stderr.")
@click.option("--dry-run", is_flag=True, help="Print mutations instead of performing them.")
@click.pass_context
def cli(ctx: click.Context, debug: bool, dry_run: bool) -> None:
    """Work with GitHub issues from the command line."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(dry_run=dry_run)


cli.add_command(config_group)
cli.add_command(issue_group)


def main() -> None:
    """CLI entry point used by the `ghi` console script."""
    cli()
