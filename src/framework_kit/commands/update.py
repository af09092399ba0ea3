"""Update commands: check, update, update-all."""

import click

from framework_kit.commands import get_manager, run
from framework_kit.error_boundary import cli_error_boundary
from framework_kit.errors import FrameworkKitError
from framework_kit.models.operations import UpdateResult


def _echo_result(result: UpdateResult) -> None:
    click.echo(f"✓ Updated {result.framework_id}: {result.old_version} → {result.new_version}")
    if result.backup_path is not None:
        click.echo(f"  Backup created: {result.backup_path.name}")


@click.command()
@click.pass_context
@cli_error_boundary
def check(ctx: click.Context) -> None:
    """List installed frameworks with a newer catalog version."""
    manager = get_manager(ctx)
    updates = run(manager.check_for_updates())
    if not updates:
        click.echo("All frameworks are up to date")
        return
    for pending in updates:
        click.echo(
            f"{pending.framework_id}: {pending.current_version} → {pending.latest_version}"
        )
        for change in pending.changes:
            click.echo(f"  - {change}")


@click.command()
@click.argument("framework-id")
@click.pass_context
@cli_error_boundary
def update(ctx: click.Context, framework_id: str) -> None:
    """Update an installed framework to the catalog version.

    Customized files are backed up before being replaced.
    """
    manager = get_manager(ctx)
    _echo_result(run(manager.update_framework(framework_id)))


@click.command("update-all")
@click.option("--yes", "-y", is_flag=True, help="Skip the batch confirmation")
@click.pass_context
@cli_error_boundary
def update_all(ctx: click.Context, yes: bool) -> None:
    """Update every framework that has a newer catalog version.

    Each framework is updated on its own; a failure is reported and the
    remaining frameworks are still attempted.
    """
    manager = get_manager(ctx)
    updates = run(manager.check_for_updates())
    if not updates:
        click.echo("All frameworks are up to date")
        return

    noun = "framework" if len(updates) == 1 else "frameworks"
    for pending in updates:
        versions = f"{pending.current_version} → {pending.latest_version}"
        click.echo(f"• {pending.framework_id} ({versions})")
    if not yes and not click.confirm(f"Update {len(updates)} {noun}?", default=False):
        click.echo("Cancelled")
        return

    async def _update_each() -> list[str]:
        failures: list[str] = []
        for pending in updates:
            try:
                _echo_result(await manager.update_framework(pending.framework_id))
            except (FrameworkKitError, OSError) as e:
                failures.append(f"{pending.framework_id}: {e}")
        return failures

    failures = run(_update_each())

    succeeded = len(updates) - len(failures)
    click.echo(f"Updated {succeeded} of {len(updates)} {noun}")
    if failures:
        for failure in failures:
            click.echo(f"  ✗ {failure}", err=True)
        raise SystemExit(1)
