import os

# Settings are read at import time: point the app at SQLite and give it a secret
# before anything under jobportal is imported.
os.environ.setdefault("JWT_SECRET", "test_jwt_secret")
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from jobportal.core.base import Base
from jobportal.core.database import enable_sqlite_foreign_keys, get_db
from jobportal.core.errors import register_error_handlers
from jobportal.core.security import TokenAuth, get_token_auth
from jobportal.dependencies.services import get_service
from jobportal.services import ServiceError

# Import models so they register with SQLAlchemy metadata.
from jobportal.models import Company, Job, User  # noqa: F401

TEST_ISSUER = "jobportal-test"


class FakeService:
    """
    Stand-in for PortalService in route tests.

    Set ``results[name]`` to control a method's return value or
    ``errors[name]`` to make it raise ServiceError with that message.
    Every call is recorded in ``calls``.
    """

    def __init__(self) -> None:
        self.results: dict = {}
        self.errors: dict[str, str] = {}
        self.calls: list[tuple] = []

    def _call(self, name: str, *args):
        self.calls.append((name, *args))
        if name in self.errors:
            raise ServiceError(self.errors[name])
        return self.results.get(name)

    def signup(self, new_user):
        return self._call("signup", new_user)

    def login(self, credentials):
        return self._call("login", credentials)

    def add_company(self, new_company):
        return self._call("add_company", new_company)

    def view_all_companies(self):
        return self._call("view_all_companies")

    def view_company(self, cid):
        return self._call("view_company", cid)

    def add_job(self, new_job, cid):
        return self._call("add_job", new_job, cid)

    def view_all_jobs(self):
        return self._call("view_all_jobs")

    def view_jobs_by_company(self, cid):
        return self._call("view_jobs_by_company", cid)

    def view_job(self, jid):
        return self._call("view_job", jid)


@pytest.fixture(scope="session")
def db_engine():
    # In-memory SQLite for fast, isolated tests.
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    return engine


@pytest.fixture()
def db_session(db_engine):
    # The in-memory DB persists across tests with StaticPool; reset schema per test.
    Base.metadata.drop_all(bind=db_engine)
    Base.metadata.create_all(bind=db_engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def token_auth():
    return TokenAuth("test_jwt_secret", expire_minutes=5, issuer=TEST_ISSUER)


@pytest.fixture()
def auth_headers(token_auth):
    return {"Authorization": f"Bearer {token_auth.generate_token(1)}"}


@pytest.fixture()
def app(db_session, token_auth):
    from jobportal.main import app as fastapi_app

    def override_get_db():
        yield db_session

    fastapi_app.dependency_overrides[get_db] = override_get_db
    fastapi_app.dependency_overrides[get_token_auth] = lambda: token_auth
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture()
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def fake_service():
    return FakeService()


@pytest.fixture()
def service_client(app, fake_service):
    """
    Client for the full app whose routes talk to a FakeService.
    """
    app.dependency_overrides[get_service] = lambda: fake_service
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def untraced_client(fake_service, token_auth):
    """
    Client for an app assembled without the trace middleware, i.e. a
    misconfigured pipeline.
    """
    from jobportal.routes.auth import router as auth_router
    from jobportal.routes.companies import router as companies_router
    from jobportal.routes.health import router as health_router
    from jobportal.routes.jobs import router as jobs_router

    bare = FastAPI()
    register_error_handlers(bare)
    for router in (health_router, auth_router, companies_router, jobs_router):
        bare.include_router(router)
    bare.dependency_overrides[get_service] = lambda: fake_service
    bare.dependency_overrides[get_token_auth] = lambda: token_auth
    with TestClient(bare) as c:
        yield c
