"""Command-line access to the phonebook store.

Usage:
    phonebook-cli                 # list every contact
    phonebook-cli NAME NUMBER     # add a contact

The store location comes from DATABASE_URL, same as the server. A .env
file in the working directory (or above it) is read first.
"""

from __future__ import annotations

import argparse
import sys

from .database import create_db_engine, init_db
from .db_models import Person
from .errors import PersonValidationError
from .settings import get_setting, load_env_file
from .storage import PersonStore

USAGE_HINT = "give name and number to create new contact"


def format_person(person: Person) -> str:
    return f"{person.name} number {person.number}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="phonebook-cli",
        description="List the phonebook, or add NAME NUMBER to it.",
    )
    parser.add_argument("contact", nargs="*", metavar="NAME NUMBER")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if len(args.contact) not in (0, 2):
        parser.print_usage(sys.stderr)
        print(USAGE_HINT, file=sys.stderr)
        return 1

    load_env_file()
    engine = create_db_engine(get_setting("database.url"))
    try:
        init_db(engine)
        store = PersonStore(engine)

        if not args.contact:
            print("phonebook:")
            for person in store.list():
                print(format_person(person))
            return 0

        name, number = args.contact
        try:
            person = store.create(name, number)
        except PersonValidationError as e:
            print(e.message, file=sys.stderr)
            return 1
        print(f"added {format_person(person)} to phonebook")
        return 0
    finally:
        engine.dispose()


if __name__ == "__main__":
    sys.exit(main())
