"""Tests for the SQLModel-backed person store."""

import uuid

import pytest

from phonebook.errors import MalformedIdError, PersonValidationError
from phonebook.storage import parse_person_id


class TestParsePersonId:
    def test_canonical_id(self):
        person_id = str(uuid.uuid4())
        assert parse_person_id(person_id) == person_id

    def test_normalizes_case_and_hyphens(self):
        person_id = uuid.uuid4()
        assert parse_person_id(person_id.hex.upper()) == str(person_id)

    @pytest.mark.parametrize("raw", ["123", "", "not-a-uuid", "5c41c90e84d891c15dfa3431"])
    def test_malformed(self, raw):
        with pytest.raises(MalformedIdError) as exc_info:
            parse_person_id(raw)
        assert exc_info.value.message == "malformatted id"


class TestPersonStore:
    def test_create(self, person_store):
        person = person_store.create("Arto Hellas", "040-123456")
        assert person.id
        assert person.version == 0
        assert person_store.count() == 1

    def test_create_validates(self, person_store):
        with pytest.raises(PersonValidationError):
            person_store.create("Arto Hellas", "123456")
        assert person_store.count() == 0

    def test_get(self, person_store):
        person = person_store.create("Arto Hellas", "040-123456")
        retrieved = person_store.get(person.id)
        assert retrieved is not None
        assert retrieved.name == "Arto Hellas"

    def test_get_not_found(self, person_store):
        assert person_store.get(str(uuid.uuid4())) is None

    def test_get_malformed(self, person_store):
        with pytest.raises(MalformedIdError):
            person_store.get("123")

    def test_list(self, person_store):
        person_store.create("Arto Hellas", "040-123456")
        person_store.create("Ada Lovelace", "39-445323523")
        names = {p.name for p in person_store.list()}
        assert names == {"Arto Hellas", "Ada Lovelace"}

    def test_update_number(self, person_store):
        person = person_store.create("Arto Hellas", "040-123456")
        updated = person_store.update_number(person.id, "040-999999", run_validators=True)
        assert updated.number == "040-999999"
        assert updated.name == "Arto Hellas"
        assert updated.id == person.id
        assert updated.version == 1
        assert person_store.get(person.id).number == "040-999999"

    def test_update_skips_validation_by_default(self, person_store):
        person = person_store.create("Arto Hellas", "040-123456")
        updated = person_store.update_number(person.id, "1")
        assert updated.number == "1"

    def test_update_without_number_keeps_stored_number(self, person_store):
        person = person_store.create("Arto Hellas", "040-123456")
        updated = person_store.update_number(person.id, None)
        assert updated.number == "040-123456"
        assert updated.version == 0
        assert person_store.get(person.id).number == "040-123456"

    def test_update_with_validation(self, person_store):
        person = person_store.create("Arto Hellas", "040-123456")
        with pytest.raises(PersonValidationError):
            person_store.update_number(person.id, "1", run_validators=True)
        assert person_store.get(person.id).number == "040-123456"

    def test_update_not_found(self, person_store):
        assert person_store.update_number(str(uuid.uuid4()), "040-999999") is None

    def test_delete(self, person_store):
        person = person_store.create("Arto Hellas", "040-123456")
        assert person_store.delete(person.id) is True
        assert person_store.count() == 0

    def test_delete_not_found(self, person_store):
        assert person_store.delete(str(uuid.uuid4())) is False

    def test_clear(self, person_store):
        person_store.create("Arto Hellas", "040-123456")
        person_store.create("Ada Lovelace", "39-445323523")
        person_store.clear()
        assert person_store.list() == []
