"""Command: validate a person's name and age."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from personval.commands._context import AppContext

EXAMPLES = """\
  personval validate Alice 30
  personval validate "" -1
  personval --json validate Alice 131
  personval validate --fail-fast "  " 24"""


def _show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if value:
        click.echo(f"Examples for '{ctx.command_path}':\n\n{EXAMPLES}")
        ctx.exit(0)


# Unknown short options are passed through so negative ages like ``-1``
# reach the AGE argument.
@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("name")
@click.argument("age", type=int)
@click.option("--fail-fast", is_flag=True, help="Stop at the first violated rule.")
@click.option(
    "--examples",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_show_examples,
    help="Show usage examples.",
)
@click.pass_obj
def validate(app: AppContext, name: str, age: int, fail_fast: bool) -> None:
    """Validate NAME and AGE, reporting every violated rule."""
    from personval.domain.errors import PersonValidationFailed
    from personval.domain.result import Valid
    from personval.services.validation import require_person, validate_person

    if not fail_fast:
        app.emit(validate_person(name, age))
        return

    try:
        person = require_person(name, age)
    except PersonValidationFailed as exc:
        app.fail_fast(exc.error)
    else:
        app.emit(Valid(person=person))
