"""Tests for person validation and serialization."""

import pytest

from phonebook.db_models import Person, validate_person
from phonebook.errors import ErrorKind, FieldError, PersonValidationError
from phonebook.models import PersonResponse


class TestValidatePerson:
    @pytest.mark.parametrize("number", ["040-123456", "09-1234556", "39-445323523"])
    def test_valid(self, number):
        assert validate_person(name="Arto Hellas", number=number) is None

    @pytest.mark.parametrize(
        "number, reason",
        [
            ("", "Path `number` is required."),
            (None, "Path `number` is required."),
            ("1234567", "Path `number` (`1234567`) is shorter than the minimum allowed length (8)."),
            ("1-22334455", "validation of `number` failed with value `1-22334455`"),
            ("1234-556677", "validation of `number` failed with value `1234-556677`"),
            ("040123456", "validation of `number` failed with value `040123456`"),
            ("39-44-5323523", "validation of `number` failed with value `39-44-5323523`"),
        ],
    )
    def test_invalid_number(self, number, reason):
        with pytest.raises(PersonValidationError) as exc_info:
            validate_person(name="Arto Hellas", number=number)
        assert exc_info.value.errors == [FieldError("number", reason)]

    def test_short_name(self):
        with pytest.raises(PersonValidationError) as exc_info:
            validate_person(name="Al", number="040-123456")
        assert exc_info.value.errors == [
            FieldError(
                "name", "Path `name` (`Al`) is shorter than the minimum allowed length (3)."
            )
        ]

    def test_reports_every_failing_field(self):
        with pytest.raises(PersonValidationError) as exc_info:
            validate_person(name="", number="12")
        error = exc_info.value
        assert [e.field for e in error.errors] == ["name", "number"]
        assert error.message.startswith("Person validation failed: name: Path `name` is required.")
        assert error.kind is ErrorKind.INPUT

    def test_only_requested_fields(self):
        # name is not checked on a number-only update
        assert validate_person(number="040-123456", fields=("number",)) is None


class TestPersonResponse:
    def test_from_record_drops_internal_fields(self):
        person = Person(name="Arto Hellas", number="040-123456", version=3)
        data = PersonResponse.from_record(person).model_dump()
        assert data == {"id": person.id, "name": "Arto Hellas", "number": "040-123456"}

    def test_new_records_get_distinct_ids(self):
        first = Person(name="Arto Hellas", number="040-123456")
        second = Person(name="Arto Hellas", number="040-123456")
        assert first.id != second.id
