"""personval — applicative validation of a Person record."""

from __future__ import annotations

from personval.domain.errors import PersonValidationError, PersonValidationFailed
from personval.domain.person import Person
from personval.domain.result import Invalid, Valid, ValidationResult
from personval.domain.rules import MAX_AGE
from personval.services.validation import check_person, require_person, validate_person

__version__ = "0.1.0"

__all__ = [
    "MAX_AGE",
    "Invalid",
    "Person",
    "PersonValidationError",
    "PersonValidationFailed",
    "Valid",
    "ValidationResult",
    "__version__",
    "check_person",
    "require_person",
    "validate_person",
]
