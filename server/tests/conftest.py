from __future__ import annotations

from collections.abc import Callable, Generator
from datetime import datetime

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from staff_portal.core.config import Settings
from staff_portal.core.db import Base
from staff_portal.main import create_app
from staff_portal.models.staff import Staff

SQLALCHEMY_TEST_URL = "sqlite+pysqlite://"


@pytest.fixture()
def settings() -> Settings:
    return Settings(DATABASE_URL=SQLALCHEMY_TEST_URL, _env_file=None)


@pytest.fixture()
def app(settings: Settings) -> Generator[FastAPI, None, None]:
    application = create_app(settings)
    engine = application.state.engine
    Base.metadata.create_all(bind=engine)
    yield application
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def db_session(app: FastAPI) -> Generator[Session, None, None]:
    session = app.state.session_factory()
    try:
        yield session
        session.commit()
    finally:
        session.close()


@pytest.fixture()
def client(app: FastAPI, db_session: Session) -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def make_staff(db_session: Session) -> Callable[..., Staff]:
    def _create(
        first_name: str,
        last_name: str,
        *,
        last_update: datetime | None = None,
        **fields,
    ) -> Staff:
        staff = Staff(
            first_name=first_name,
            last_name=last_name,
            email=fields.get("email", f"{first_name.lower()}@example.com"),
            username=fields.get("username", first_name.lower()),
            password=fields.get("password", "secret"),
            store_id=1,
            address_id=61,
            last_update=last_update,
        )
        db_session.add(staff)
        db_session.commit()
        db_session.refresh(staff)
        return staff

    return _create
