import logging
import os
from pathlib import Path

import click

from framework_kit import __version__
from framework_kit.context import create_context
from framework_kit.error_boundary import cli_error_boundary
from framework_kit.manager import FrameworkManager

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


def _configure_logging(debug: bool) -> None:
    if debug or os.getenv("FRAMEWORK_KIT_DEBUG"):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Show full stack traces and debug logs")
@click.option(
    "--workspace",
    "-w",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Project directory to manage (defaults to the current directory)",
)
@click.option(
    "--resources",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Catalog directory (defaults to FRAMEWORK_KIT_RESOURCES_DIR or the bundled catalog)",
)
@click.pass_context
@cli_error_boundary
def cli(ctx: click.Context, debug: bool, workspace: Path | None, resources: Path | None) -> None:
    """Install and update framework guidance documents."""
    _configure_logging(debug)

    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    if "manager" not in ctx.obj:
        kit_ctx = create_context(
            workspace_root=workspace if workspace is not None else Path.cwd(),
            resources_dir=resources,
            debug=debug,
        )
        ctx.obj["manager"] = FrameworkManager(kit_ctx)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _register_commands() -> None:
    from framework_kit.commands.backups import backups
    from framework_kit.commands.browse import list_frameworks, search, show
    from framework_kit.commands.install import install, mark_customized, remove
    from framework_kit.commands.update import check, update, update_all

    cli.add_command(list_frameworks)
    cli.add_command(search)
    cli.add_command(show)
    cli.add_command(install)
    cli.add_command(remove)
    cli.add_command(mark_customized)
    cli.add_command(check)
    cli.add_command(update)
    cli.add_command(update_all)
    cli.add_command(backups)


_register_commands()


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
