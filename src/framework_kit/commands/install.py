"""Mutation commands: install, remove, mark-customized."""

import click

from framework_kit.commands import get_manager, run
from framework_kit.error_boundary import cli_error_boundary
from framework_kit.models.operations import InstallOptions


@click.command()
@click.argument("framework-id")
@click.option("--overwrite", is_flag=True, help="Replace an existing file")
@click.option("--merge", is_flag=True, help="Append the new content to an existing file")
@click.option("--backup", is_flag=True, help="Back up an existing file before changing it")
@click.pass_context
@cli_error_boundary
def install(
    ctx: click.Context, framework_id: str, overwrite: bool, merge: bool, backup: bool
) -> None:
    """Install a framework into the workspace.

    Examples:

        # Install a framework
        framework-kit install tdd

        # Replace an edited copy, keeping a backup
        framework-kit install tdd --overwrite --backup
    """
    manager = get_manager(ctx)
    options = InstallOptions(overwrite=overwrite, merge=merge, backup=backup)
    result = run(manager.install_framework(framework_id, options))

    click.echo(f"✓ {result.action.value.capitalize()} {result.framework_id} v{result.version}")
    click.echo(f"  Location: {result.target_path}")
    if result.backup_path is not None:
        click.echo(f"  Backup: {result.backup_path}")


@click.command()
@click.argument("framework-id")
@click.pass_context
@cli_error_boundary
def remove(ctx: click.Context, framework_id: str) -> None:
    """Remove an installed framework's file and registry entry."""
    manager = get_manager(ctx)
    run(manager.remove_framework(framework_id))
    click.echo(f"✓ Removed {framework_id}")


@click.command("mark-customized")
@click.argument("framework-id")
@click.pass_context
@cli_error_boundary
def mark_customized(ctx: click.Context, framework_id: str) -> None:
    """Record that a framework's file was edited locally."""
    manager = get_manager(ctx)
    record = run(manager.mark_framework_as_customized(framework_id))
    if record is None:
        click.echo(f"Framework '{framework_id}' has no registry entry; nothing to mark")
        return
    click.echo(f"✓ Marked {framework_id} as customized")
