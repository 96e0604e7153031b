"""personval command-line entry point."""

from __future__ import annotations

import click

from personval import __version__
from personval.commands._context import AppContext
from personval.commands.validate import validate
from personval.config.settings import PersonvalSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="personval")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print nothing when the person is valid.")
@click.option("-v", "--verbose", is_flag=True, help="Log validation decisions to stderr.")
@click.option("--log-json", is_flag=True, help="Log as JSON lines.")
@click.pass_context
def cli(ctx: click.Context, **flags: bool) -> None:
    """personval — validate a Person's name and age."""
    ctx.obj = AppContext(PersonvalSettings.from_cli(**flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(validate)
