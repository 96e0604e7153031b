"""Validation error tags for the Person record.

The tag set is closed: exactly one member per rule in
:data:`personval.domain.rules.PERSON_RULES`.
"""

from __future__ import annotations

from enum import StrEnum


class PersonValidationError(StrEnum):
    """Tag identifying a violated Person rule."""

    BLANK_NAME = "blank_name"
    NEGATIVE_AGE = "negative_age"
    MAX_AGE_EXCEEDED = "max_age_exceeded"

    @property
    def message(self) -> str:
        """Human-readable description of the violation."""
        return ERROR_MESSAGES[self]


ERROR_MESSAGES: dict[PersonValidationError, str] = {
    PersonValidationError.BLANK_NAME: "Name cannot be empty or contain only white space",
    PersonValidationError.NEGATIVE_AGE: "Age cannot be negative",
    PersonValidationError.MAX_AGE_EXCEEDED: "Age cannot be bigger than 130 years",
}


class PersonValidationFailed(ValueError):
    """Raised by the fail-fast entry point on the first violated rule."""

    def __init__(self, error: PersonValidationError) -> None:
        super().__init__(error.message)
        self.error = error
