# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ADMINISTRATOR", "admin")

from autorotate.core.security import create_access_token
from autorotate.db.session import Base, build_engine, create_tables, drop_tables
from autorotate.db.session import get_db as app_get_session
from autorotate.main import app as fastapi_app
from autorotate.services.events import CatalogEvent, EventBus
from autorotate.services.gallery import Gallery
from autorotate.services.registry import EntityRegistry

TEST_DB_URL = "sqlite://"

ADMIN = "admin"
ALICE = "0xA11CE"
BOB = "0xB0B"
CAROL = "0xCA201"

IMAGES = [
    {"reference": "ipfs://QmPm1hiVsZRUwEBCuaUCpxzRaRdhQ6Ys5S6fn8XfNdcM8R/IMG_0405.png", "attribution": "@artmilitonian"},
    {"reference": "ipfs://QmPm1hiVsZRUwEBCuaUCpxzRaRdhQ6Ys5S6fn8XfNdcM8R/IMG_0406.png", "attribution": "@artmilitonian"},
    {"reference": "ipfs://QmPm1hiVsZRUwEBCuaUCpxzRaRdhQ6Ys5S6fn8XfNdcM8R/IMG_0407.png", "attribution": "@artmilitonian"},
    {"reference": "ipfs://QmPm1hiVsZRUwEBCuaUCpxzRaRdhQ6Ys5S6fn8XfNdcM8R/IMG_0411.png", "attribution": "@artmilitonian"},
    {"reference": "ipfs://QmPm1hiVsZRUwEBCuaUCpxzRaRdhQ6Ys5S6fn8XfNdcM8R/Supporter_Purple121.png", "attribution": "@noiamgodzilla"},
    {"reference": "ipfs://QmPm1hiVsZRUwEBCuaUCpxzRaRdhQ6Ys5S6fn8XfNdcM8R/Supporter_Purple23.png", "attribution": "@noiamgodzilla"},
    {"reference": "ipfs://QmPm1hiVsZRUwEBCuaUCpxzRaRdhQ6Ys5S6fn8XfNdcM8R/Supporter_Purple_2.png", "attribution": "@noiamgodzilla"},
    {"reference": "ipfs://QmPm1hiVsZRUwEBCuaUCpxzRaRdhQ6Ys5S6fn8XfNdcM8R/Supporter_Purplepixel.png", "attribution": "@noiamgodzilla"},
    {"reference": "ipfs://QmPm1hiVsZRUwEBCuaUCpxzRaRdhQ6Ys5S6fn8XfNdcM8R/pooly.png", "attribution": "@its_honestwork"},
]


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    """A private in-memory database, separate from the application engine."""
    engine = build_engine(TEST_DB_URL)
    create_tables(engine)
    try:
        yield engine
    finally:
        drop_tables(engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()

        # Ensure each test sees a clean database even if commits occurred.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def auth_headers() -> Callable[[str], dict[str, str]]:
    """Return a factory building bearer headers for an identity."""

    def _headers(identity: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(identity)}"}

    return _headers


@pytest.fixture()
def event_bus() -> EventBus:
    """A private event bus so tests never see each other's events."""
    return EventBus()


@pytest.fixture()
def recorded_events(event_bus: EventBus) -> list[CatalogEvent]:
    """Events published on ``event_bus`` during the test, in order."""
    events: list[CatalogEvent] = []
    event_bus.subscribe(events.append)
    return events


@pytest.fixture()
def registry(db_session: Session) -> EntityRegistry:
    return EntityRegistry(db_session)


@pytest.fixture()
def gallery(db_session: Session, registry: EntityRegistry, event_bus: EventBus) -> Gallery:
    return Gallery(db_session, registry=registry, bus=event_bus)


@pytest.fixture()
def loaded_gallery(gallery: Gallery) -> Gallery:
    """Gallery whose catalog holds every test image."""
    for image in IMAGES:
        gallery.push_image(ADMIN, image["reference"], image["attribution"])
    return gallery


@pytest.fixture()
def alice_entity(registry: EntityRegistry) -> int:
    """Entity 0, owned by Alice."""
    return registry.mint(ALICE)
