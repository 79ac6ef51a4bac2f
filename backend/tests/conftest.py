from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

from restcore.infra.db.session import build_session_factory, get_db
from restcore.main import create_app
from restcore.services.context import RequestContext
from restcore.services.resolver import ResourceRegistry
from restcore.services.transaction import TransactionState
from restcore.settings import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(app_name="restcore-test", app_version="0.0.0", debug=False, database_url="sqlite://")


@pytest.fixture
def session_factory(settings: Settings) -> sessionmaker[Session]:
    return build_session_factory(settings)


@pytest.fixture
def db(session_factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    yield from get_db(session_factory)


@pytest.fixture
def context(db: Session, settings: Settings) -> RequestContext:
    return RequestContext(db=db, settings=settings, registry=ResourceRegistry(), transaction=TransactionState())


@pytest.fixture
def client(settings: Settings, session_factory: sessionmaker[Session]) -> TestClient:
    return TestClient(create_app(settings, session_factory=session_factory))
