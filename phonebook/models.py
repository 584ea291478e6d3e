"""Request and response models for the phonebook API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .db_models import Person


class PersonCreateRequest(BaseModel):
    """Request model for adding a contact.

    Both fields are optional here; the create handler reports missing values.
    """

    name: str | None = Field(default=None, description="Contact name, at least 3 characters")
    number: str | None = Field(
        default=None, description="Phone number such as 040-123456, at least 8 characters"
    )


class PersonUpdateRequest(BaseModel):
    """Request model for changing a contact's number. Names are not updatable."""

    number: str | None = Field(default=None, description="New phone number")


class PersonResponse(BaseModel):
    """Public representation of a contact record."""

    id: str = Field(..., description="Record identifier")
    name: str
    number: str

    @classmethod
    def from_record(cls, person: Person) -> PersonResponse:
        """Serialize a stored record, leaving out internal bookkeeping fields."""
        return cls(id=str(person.id), name=person.name, number=person.number)
