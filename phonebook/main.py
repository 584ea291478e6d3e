"""Phonebook Service - FastAPI Application."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from . import __version__
from .access_log import AccessLogMiddleware
from .database import create_db_engine, init_db
from .errors import register_error_handlers
from .routes_persons import register_person_routes
from .settings import (
    get_setting,
    get_setting_bool,
    get_setting_int,
    get_setting_list,
    load_env_file,
    log_settings_sources,
)
from .storage import PersonStore

logger = logging.getLogger(__name__)


def create_app(
    person_store: PersonStore | None = None,
    static_dir: str | Path | None = None,
) -> FastAPI:
    """Build the application around *person_store*.

    Without an explicit store, one is created from the ``database.url``
    setting. The static frontend is mounted only if its directory exists.
    """
    if person_store is None:
        person_store = PersonStore(create_db_engine(get_setting("database.url")))
    if static_dir is None:
        static_dir = get_setting("server.static_dir")
    static_path = Path(static_dir)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_db(person_store.engine)
        logger.info("Database initialized")
        yield

    app = FastAPI(
        title="Phonebook",
        description="Contact records over a small REST API",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_setting_list("server.cors_origins"),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if get_setting_bool("logging.access_log"):
        app.add_middleware(AccessLogMiddleware)

    register_person_routes(app, person_store=person_store)
    register_error_handlers(app)

    # Mount static files after routes to avoid conflicts
    if static_path.is_dir():
        app.mount("/", StaticFiles(directory=str(static_path), html=True), name="static")
        logger.info(f"Serving static files from {static_path}")

    return app


def main():
    import uvicorn

    load_env_file()
    logging.basicConfig(
        level=getattr(logging, get_setting("logging.level").upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    log_settings_sources()

    port = get_setting_int("server.port")
    logger.info(f"Server running on port {port}")
    uvicorn.run(create_app(), host=get_setting("server.host"), port=port, access_log=False)


# Run with: uvicorn phonebook.main:create_app --factory --port 3001
if __name__ == "__main__":
    main()
