"""The validated Person record.

INVARIANT: A Person instance only exists if every rule in
:data:`~personval.domain.rules.PERSON_RULES` held at construction.
Instances are frozen and copies are re-validated, so the invariant
holds for their whole lifetime.

Obtain instances through :func:`personval.validate_person` (accumulating)
or :func:`personval.require_person` (fail-fast). Constructing a Person
directly with rule-violating data raises ``pydantic.ValidationError``.
"""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, model_validator

from personval.domain.rules import failed_rules


class Person(BaseModel):
    """A person whose name and age passed all three rules."""

    model_config = {"frozen": True, "strict": True}

    name: str
    age: int

    @model_validator(mode="after")
    def _enforce_rules(self) -> Self:
        errors = failed_rules(self.name, self.age)
        if errors:
            msg = ", ".join(error.message for error in errors)
            raise ValueError(msg)
        return self

    def model_copy(self, *, update: dict[str, Any] | None = None, deep: bool = False) -> Self:
        """Copy, re-validating any *update* (pydantic's copy skips validators)."""
        if not update:
            return super().model_copy(deep=deep)
        return self.model_validate({**self.model_dump(), **update})
