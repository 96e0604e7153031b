"""Tests for the Person model invariant."""

import pytest
from pydantic import ValidationError

from personval.domain.person import Person


class TestPerson:
    def test_valid_construction(self) -> None:
        person = Person(name="Paco de Lucía", age=66)
        assert person.name == "Paco de Lucía"
        assert person.age == 66

    def test_frozen(self) -> None:
        person = Person(name="Alice", age=30)
        with pytest.raises(ValidationError):
            person.age = -1  # type: ignore[misc]

    def test_value_equality(self) -> None:
        assert Person(name="Alice", age=30) == Person(name="Alice", age=30)
        assert Person(name="Alice", age=30) != Person(name="Alice", age=31)

    @pytest.mark.parametrize(("name", "age"), [("", 24), ("Alice", -1), ("Alice", 131)])
    def test_rejects_rule_violations(self, name: str, age: int) -> None:
        with pytest.raises(ValidationError):
            Person(name=name, age=age)

    def test_rejects_violations_on_model_validate(self) -> None:
        with pytest.raises(ValidationError):
            Person.model_validate({"name": "  ", "age": 24})

    def test_strict_types(self) -> None:
        with pytest.raises(ValidationError):
            Person(name="Alice", age="30")  # type: ignore[arg-type]

    def test_error_lists_all_messages(self) -> None:
        with pytest.raises(ValidationError, match="Name cannot be empty.*Age cannot be negative"):
            Person(name="", age=-1)


class TestPersonCopy:
    def test_copy_with_invalid_update_rejected(self) -> None:
        person = Person(name="Alice", age=30)
        with pytest.raises(ValidationError):
            person.model_copy(update={"age": -5})

    def test_copy_with_blank_name_rejected(self) -> None:
        person = Person(name="Alice", age=30)
        with pytest.raises(ValidationError):
            person.model_copy(update={"name": "   "})

    def test_copy_with_valid_update(self) -> None:
        person = Person(name="Alice", age=30)
        assert person.model_copy(update={"age": 130}) == Person(name="Alice", age=130)

    def test_plain_copy(self) -> None:
        person = Person(name="Alice", age=30)
        copy = person.model_copy()
        assert copy == person
        assert copy is not person
