"""The three fixed Person rules, in evaluation order.

INVARIANT: Rule order is part of the contract. Accumulated errors are
reported in exactly the order of :data:`PERSON_RULES`.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from personval.domain.errors import PersonValidationError

MAX_AGE = 130


def is_blank(name: str | None) -> bool:
    """Return True if *name* is absent, empty, or whitespace-only."""
    return name is None or name.strip() == ""


@dataclass(frozen=True)
class ValidationRule:
    """A named predicate over ``(name, age)``.

    ``predicate`` returns True when the rule holds.
    """

    error: PersonValidationError
    predicate: Callable[[str | None, int], bool]

    def holds(self, name: str | None, age: int) -> bool:
        return self.predicate(name, age)


PERSON_RULES: tuple[ValidationRule, ...] = (
    ValidationRule(PersonValidationError.BLANK_NAME, lambda name, _age: not is_blank(name)),
    ValidationRule(PersonValidationError.NEGATIVE_AGE, lambda _name, age: age >= 0),
    ValidationRule(PersonValidationError.MAX_AGE_EXCEEDED, lambda _name, age: age <= MAX_AGE),
)


def failed_rules(name: str | None, age: int) -> tuple[PersonValidationError, ...]:
    """Evaluate every rule and return the failing tags in rule order.

    No rule short-circuits another; an empty tuple means all rules hold.
    """
    return tuple(rule.error for rule in PERSON_RULES if not rule.holds(name, age))
