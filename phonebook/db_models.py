"""SQLModel database models for the phonebook.

Field constraints live next to the table definition so every write path
(HTTP handlers and the CLI) checks the same rules.
"""

from __future__ import annotations

import re
import uuid
from collections.abc import Iterable

from sqlmodel import Field, SQLModel

from .errors import FieldError, PersonValidationError

NAME_MIN_LENGTH = 3
NUMBER_MIN_LENGTH = 8
NUMBER_PATTERN = re.compile(r"^\d{2,3}-\d+$")


def generate_uuid() -> str:
    return str(uuid.uuid4())


class Person(SQLModel, table=True):
    """Contact record."""

    __tablename__ = "persons"

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    name: str
    number: str
    # Revision counter, bumped on each update. Never serialized.
    version: int = Field(default=0)


def _too_short(field: str, value: str, minimum: int) -> str:
    return (
        f"Path `{field}` (`{value}`) is shorter than the minimum allowed length ({minimum})."
    )


def _check_name(name: str | None) -> str | None:
    if not name:
        return "Path `name` is required."
    if len(name) < NAME_MIN_LENGTH:
        return _too_short("name", name, NAME_MIN_LENGTH)
    return None


def _check_number(number: str | None) -> str | None:
    if not number:
        return "Path `number` is required."
    if len(number) < NUMBER_MIN_LENGTH:
        return _too_short("number", number, NUMBER_MIN_LENGTH)
    if not NUMBER_PATTERN.match(number):
        return f"validation of `number` failed with value `{number}`"
    return None


_CHECKS = {
    "name": _check_name,
    "number": _check_number,
}


def validate_person(
    name: str | None = None,
    number: str | None = None,
    fields: Iterable[str] = ("name", "number"),
) -> None:
    """Check the requested fields, raising PersonValidationError on failure.

    Only the fields listed in *fields* are checked, so a number-only update
    can validate just ``number``. Each field reports its first failing rule.
    """
    values = {"name": name, "number": number}
    errors = []
    for field in fields:
        reason = _CHECKS[field](values[field])
        if reason is not None:
            errors.append(FieldError(field, reason))
    if errors:
        raise PersonValidationError(errors)
