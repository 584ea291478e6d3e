"""Route registration for the contact CRUD API and the info page."""

from __future__ import annotations

import logging
from datetime import datetime

from fastapi import FastAPI, Response
from fastapi.responses import HTMLResponse

from .errors import InputError, NotFoundError
from .models import PersonCreateRequest, PersonResponse, PersonUpdateRequest
from .storage import PersonStore

logger = logging.getLogger(__name__)

MISSING_FIELDS = "person must have a name and a number"


def format_info_date(now: datetime) -> str:
    """Render a timestamp like ``Mon Oct 19 2026 14:03:07 GMT+0000 (UTC)``."""
    return now.strftime("%a %b %d %Y %H:%M:%S GMT%z (%Z)")


def register_person_routes(app: FastAPI, *, person_store: PersonStore) -> None:
    """Register the phonebook endpoints against *person_store*."""

    @app.api_route("/info", methods=["GET", "HEAD"], response_class=HTMLResponse)
    def get_info():
        """Summary of how many contacts are stored, as an HTML fragment."""
        count = person_store.count()
        now = datetime.now().astimezone()
        return HTMLResponse(f"Phonebook has info for {count} people<br/>{format_info_date(now)}")

    @app.api_route("/api/persons", methods=["GET", "HEAD"], response_model=list[PersonResponse])
    def list_persons():
        return [PersonResponse.from_record(p) for p in person_store.list()]

    @app.api_route(
        "/api/persons/{person_id}", methods=["GET", "HEAD"], response_model=PersonResponse
    )
    def get_person(person_id: str):
        person = person_store.get(person_id)
        if person is None:
            raise NotFoundError(f"person {person_id} not found")
        return PersonResponse.from_record(person)

    @app.post("/api/persons", response_model=PersonResponse, status_code=201)
    def create_person(request: PersonCreateRequest | None = None):
        """Add a contact. Both name and number are required."""
        if request is None or not request.name or not request.number:
            raise InputError(MISSING_FIELDS)
        person = person_store.create(request.name, request.number)
        return PersonResponse.from_record(person)

    @app.put("/api/persons/{person_id}", response_model=PersonResponse)
    def update_person(person_id: str, request: PersonUpdateRequest | None = None):
        """Change a contact's number. The name in the body, if any, is ignored."""
        number = request.number if request is not None else None
        person = person_store.update_number(person_id, number, run_validators=True)
        if person is None:
            raise NotFoundError(f"person {person_id} not found")
        return PersonResponse.from_record(person)

    @app.delete("/api/persons/{person_id}", status_code=204)
    def delete_person(person_id: str):
        # Deleting an absent record still counts as success
        if not person_store.delete(person_id):
            logger.debug(f"Delete of unknown person {person_id}")
        return Response(status_code=204)
