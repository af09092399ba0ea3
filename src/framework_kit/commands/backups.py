"""Backup listing command."""

import click

from framework_kit.commands import get_manager, run
from framework_kit.error_boundary import cli_error_boundary


@click.command()
@click.argument("framework-id")
@click.pass_context
@cli_error_boundary
def backups(ctx: click.Context, framework_id: str) -> None:
    """List backups of a framework's file, oldest first.

    To restore one, copy it back over the framework's file.
    """
    manager = get_manager(ctx)
    paths = run(manager.list_backups(framework_id))
    if not paths:
        click.echo(f"No backups for {framework_id}")
        return
    for path in paths:
        click.echo(str(path))
