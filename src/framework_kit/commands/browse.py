"""Read-only catalog commands: list, search, show."""

import click

from framework_kit.commands import get_manager, run
from framework_kit.error_boundary import cli_error_boundary
from framework_kit.manager import FrameworkManager
from framework_kit.models.framework import FrameworkCategory, FrameworkDescriptor


async def _format_rows(
    manager: FrameworkManager, frameworks: list[FrameworkDescriptor]
) -> list[str]:
    rows: list[str] = []
    for framework in frameworks:
        marker = "[installed]" if await manager.is_framework_installed(framework.id) else ""
        rows.append(
            f"{framework.id:<28} v{framework.version:<14} "
            f"{framework.category.value:<16} {marker}".rstrip()
        )
    return rows


@click.command("list")
@click.option(
    "--category",
    "-c",
    type=click.Choice([c.value for c in FrameworkCategory]),
    default=None,
    help="Only show frameworks in this category",
)
@click.option("--installed", "-i", is_flag=True, help="Only show installed frameworks")
@click.pass_context
@cli_error_boundary
def list_frameworks(ctx: click.Context, category: str | None, installed: bool) -> None:
    """List frameworks in the catalog."""
    manager = get_manager(ctx)

    async def _collect() -> list[str]:
        if installed:
            frameworks = await manager.get_installed_frameworks()
        elif category is not None:
            frameworks = await manager.get_frameworks_by_category(FrameworkCategory(category))
        else:
            frameworks = await manager.list_available_frameworks()
        if installed and category is not None:
            frameworks = [f for f in frameworks if f.category.value == category]
        return await _format_rows(manager, frameworks)

    rows = run(_collect())
    if not rows:
        click.echo("No frameworks found")
        return
    for row in rows:
        click.echo(row)


@click.command()
@click.argument("query")
@click.pass_context
@cli_error_boundary
def search(ctx: click.Context, query: str) -> None:
    """Search frameworks by name, description or category."""
    manager = get_manager(ctx)

    async def _collect() -> list[str]:
        return await _format_rows(manager, await manager.search_frameworks(query))

    rows = run(_collect())
    if not rows:
        click.echo(f"No frameworks match '{query}'")
        return
    for row in rows:
        click.echo(row)


@click.command()
@click.argument("framework-id")
@click.pass_context
@cli_error_boundary
def show(ctx: click.Context, framework_id: str) -> None:
    """Show catalog and installation details for a framework."""
    manager = get_manager(ctx)

    async def _collect():
        framework = await manager.catalog.require(framework_id, "show")
        installed = await manager.is_framework_installed(framework_id)
        record = await manager.get_installed_metadata(framework_id)
        return framework, installed, record

    framework, installed, record = run(_collect())

    click.echo(f"{framework.name} ({framework.id})")
    click.echo(f"  Category: {framework.category.value}")
    click.echo(f"  Version: {framework.version}")
    if framework.description:
        click.echo(f"  Description: {framework.description}")
    if framework.dependencies:
        click.echo(f"  Dependencies: {', '.join(framework.dependencies)}")
    click.echo(f"  Installed: {'yes' if installed else 'no'}")
    if record is not None:
        click.echo(f"  Installed version: {record.version} (at {record.installed_at})")
        if record.customized:
            click.echo(f"  Customized: yes (at {record.customized_at})")
