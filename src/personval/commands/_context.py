"""AppContext — settings plus result emission, shared via ``ctx.obj``."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from personval.config.logging import configure_logging
from personval.domain.result import Invalid
from personval.output.formatters import format_result

if TYPE_CHECKING:
    from personval.config.settings import PersonvalSettings
    from personval.domain.errors import PersonValidationError
    from personval.domain.result import ValidationResult


class AppContext:
    """Holds the resolved settings; configures logging on creation."""

    def __init__(self, settings: PersonvalSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, result: ValidationResult) -> None:
        """Print *result*; a valid one goes to stdout, an invalid one to stderr with exit 1."""
        output = format_result(
            result,
            json_output=self.settings.json_output,
            no_color=not self.settings.output.color,
            width=self.settings.output.width,
        )
        if not result.ok:
            click.echo(output, err=True)
            raise SystemExit(1)
        if not self.settings.quiet:
            click.echo(output)

    def fail_fast(self, error: PersonValidationError) -> None:
        """Report the single rule a fail-fast run stopped at, then exit 1."""
        if self.settings.json_output:
            click.echo(Invalid(errors=(error,)).model_dump_json(indent=2), err=True)
        else:
            click.echo(f"ERROR: {error.message}", err=True)
        raise SystemExit(1)
