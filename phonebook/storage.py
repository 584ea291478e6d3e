"""SQLModel-backed storage for phonebook contacts."""

from __future__ import annotations

import logging
import uuid

from sqlalchemy import func
from sqlalchemy.engine import Engine
from sqlmodel import select

from .database import get_db
from .db_models import Person, validate_person
from .errors import MalformedIdError

logger = logging.getLogger(__name__)


def parse_person_id(raw_id: str) -> str:
    """Return the canonical form of a record id.

    Raises MalformedIdError when *raw_id* is not a UUID. This is what
    separates a malformed id (400) from a well-formed id that simply
    isn't stored (404).
    """
    try:
        return str(uuid.UUID(str(raw_id)))
    except ValueError as exc:
        raise MalformedIdError(raw_id) from exc


class PersonStore:
    """Storage for contact records.

    The engine is handed in by whoever builds the store; nothing here
    reaches for a module-level connection.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def list(self) -> list[Person]:
        with get_db(self.engine) as session:
            return list(session.exec(select(Person)).all())

    def get(self, person_id: str) -> Person | None:
        key = parse_person_id(person_id)
        with get_db(self.engine) as session:
            return session.get(Person, key)

    def create(self, name: str, number: str) -> Person:
        """Validate and insert a new record. Returns it with its assigned id."""
        validate_person(name=name, number=number)
        person = Person(name=name, number=number)
        with get_db(self.engine) as session:
            session.add(person)
        logger.info(f"Created person {person.id}")
        return person

    def update_number(
        self, person_id: str, number: str | None, run_validators: bool = False
    ) -> Person | None:
        """Replace a record's number. Returns the updated record, or None if absent.

        Validation is skipped unless *run_validators* is set. A number of None
        leaves the stored number unchanged.
        """
        key = parse_person_id(person_id)
        if run_validators:
            validate_person(number=number, fields=("number",))
        with get_db(self.engine) as session:
            person = session.get(Person, key)
            if person is None:
                return None
            if number is None:
                return person
            person.number = number
            person.version += 1
            session.add(person)
            session.commit()
            session.refresh(person)
        logger.info(f"Updated number of person {key} (version {person.version})")
        return person

    def delete(self, person_id: str) -> bool:
        key = parse_person_id(person_id)
        with get_db(self.engine) as session:
            person = session.get(Person, key)
            if person:
                session.delete(person)
                logger.info(f"Deleted person {key}")
                return True
            return False

    def count(self) -> int:
        with get_db(self.engine) as session:
            return session.exec(select(func.count()).select_from(Person)).one()

    def clear(self) -> None:
        with get_db(self.engine) as session:
            for person in session.exec(select(Person)).all():
                session.delete(person)
