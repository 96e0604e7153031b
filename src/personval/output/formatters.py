"""Rich/JSON rendering of validation results.

Humans get a short colored summary; machines (--json) get the
serialized result model. Rich renders into a StringIO buffer, so in
non-TTY environments (tests, pipes) no escape codes are emitted.
"""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

from personval.domain.result import Valid

if TYPE_CHECKING:
    from personval.domain.result import ValidationResult

THEME = Theme({"pv.ok": "bold green", "pv.invalid": "bold red", "pv.tag": "yellow"})


def format_result(
    result: ValidationResult,
    *,
    json_output: bool = False,
    no_color: bool = False,
    width: int | None = None,
) -> str:
    """Format a validation result for display.

    Args:
        result: The result to format.
        json_output: If True, return JSON; otherwise human-readable text.
        no_color: Strip styling from human output.
        width: Wrap width for human output.
    """
    if json_output:
        return result.model_dump_json(indent=2)

    buffer = StringIO()
    console = Console(
        file=buffer, theme=THEME, no_color=no_color, highlight=False, width=width or 100
    )
    if isinstance(result, Valid):
        person = result.person
        console.print(f"[pv.ok]OK:[/pv.ok] {escape(person.name)} (age {person.age})")
    else:
        console.print("[pv.invalid]INVALID:[/pv.invalid]")
        for error in result.errors:
            console.print(f"  - [pv.tag]{error.value}[/pv.tag]: {error.message}")
    return buffer.getvalue().rstrip("\n")
