"""Command line interface for taskdeck."""

from __future__ import annotations

from pathlib import Path

import click

from taskdeck.paths import get_config_path
from taskdeck.version import get_taskdeck_version


@click.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to config.toml (defaults to the user config directory)",
)
@click.option("--debug", is_flag=True, help="Capture DEBUG level logs")
def tui(config_path: Path | None, debug: bool) -> None:
    """Open the kanban board."""
    import tomllib

    from pydantic import ValidationError

    from taskdeck.app import TaskdeckApp
    from taskdeck.config import TaskdeckConfig

    try:
        config = TaskdeckConfig.load(config_path)
    except (ValidationError, tomllib.TOMLDecodeError) as exc:
        raise click.ClickException(f"Invalid config: {exc}") from exc

    TaskdeckApp(config=config, debug=debug).run()


@click.command("config-path")
@click.option("--init", is_flag=True, help="Write a default config file if none exists")
def config_path_cmd(init: bool) -> None:
    """Print the location of the config file."""
    path = get_config_path()
    if init:
        from taskdeck.config import TaskdeckConfig

        if path.exists():
            click.echo("Config already exists, leaving it unchanged", err=True)
        else:
            TaskdeckConfig().save(path)
            click.echo("Wrote default config", err=True)
    click.echo(str(path))


@click.group(invoke_without_command=True)
@click.option("--version", is_flag=True, help="Show version and exit")
@click.pass_context
def cli(ctx: click.Context, version: bool) -> None:
    """Kanban board TUI for composing and editing tasks."""
    if version:
        click.echo(f"taskdeck {get_taskdeck_version()}")
        ctx.exit(0)

    if ctx.invoked_subcommand is None:
        ctx.invoke(tui)


cli.add_command(tui)
cli.add_command(config_path_cmd)
