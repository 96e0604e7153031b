"""The Validator: accumulating and fail-fast Person construction.

``validate_person`` is applicative: all three rules are evaluated and
every failure is returned inside :class:`~personval.domain.result.Invalid`.
``require_person`` stops at the first failing rule and raises.

Wrong argument types are programmer errors and raise ``TypeError``;
they are never reported as validation errors.
"""

from __future__ import annotations

import logging

from personval.domain.errors import PersonValidationError, PersonValidationFailed
from personval.domain.person import Person
from personval.domain.result import Invalid, Valid, ValidationResult
from personval.domain.rules import PERSON_RULES, failed_rules

logger = logging.getLogger(__name__)


def _check_arguments(name: object, age: object) -> None:
    if name is not None and not isinstance(name, str):
        msg = f"name must be a str or None, got {type(name).__name__}"
        raise TypeError(msg)
    # bool is an int subclass but never a meaningful age
    if isinstance(age, bool) or not isinstance(age, int):
        msg = f"age must be an int, got {type(age).__name__}"
        raise TypeError(msg)


def check_person(name: str | None, age: int) -> tuple[PersonValidationError, ...]:
    """Return the failing rule tags for ``(name, age)`` in rule order."""
    _check_arguments(name, age)
    return failed_rules(name, age)


def validate_person(name: str | None, age: int) -> ValidationResult:
    """Validate ``(name, age)`` and accumulate every rule violation.

    Args:
        name: Candidate name. ``None``, empty, and whitespace-only are blank.
        age: Candidate age in years.

    Returns:
        ``Valid`` holding the Person (name stored untrimmed), or
        ``Invalid`` holding the failing tags in rule order.

    Raises:
        TypeError: If *name* is not a str/None or *age* is not an int.
    """
    errors = check_person(name, age)
    if errors:
        logger.debug("Person rejected: %s", ", ".join(errors))
        return Invalid(errors=errors)
    logger.debug("Person accepted")
    assert name is not None
    return Valid(person=Person(name=name, age=age))


def require_person(name: str | None, age: int) -> Person:
    """Build a Person or raise on the first failing rule.

    Raises:
        PersonValidationFailed: Carrying the first failing tag.
        TypeError: If *name* is not a str/None or *age* is not an int.
    """
    _check_arguments(name, age)
    for rule in PERSON_RULES:
        if not rule.holds(name, age):
            logger.debug("Person rejected at first rule: %s", rule.error)
            raise PersonValidationFailed(rule.error)
    assert name is not None
    return Person(name=name, age=age)
