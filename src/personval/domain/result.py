"""Valid and Invalid — the two shapes of a Person validation result."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from personval.domain.errors import PersonValidationError
from personval.domain.person import Person


class Valid(BaseModel):
    """All rules held; carries the constructed Person."""

    model_config = {"frozen": True}

    ok: Literal[True] = True
    person: Person


class Invalid(BaseModel):
    """One or more rules failed.

    Attributes:
        ok: Always False.
        errors: Failing rule tags in rule evaluation order. Never empty.
    """

    model_config = {"frozen": True}

    ok: Literal[False] = False
    errors: tuple[PersonValidationError, ...] = Field(min_length=1)

    @property
    def messages(self) -> tuple[str, ...]:
        return tuple(error.message for error in self.errors)

    @property
    def message(self) -> str:
        """All error messages joined with ``", "``."""
        return ", ".join(self.messages)


ValidationResult = Valid | Invalid
