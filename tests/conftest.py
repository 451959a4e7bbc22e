from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from salon.config import Settings
from salon.database import enable_sqlite_fk, init_db, make_session_factory
from salon.main import create_app
from salon.services.clock import BusinessClock

ADMIN_PASSWORD = "admin-secret"
REVEAL_PASSWORD = "reveal-secret"

# 10:00 in the salon (UTC-3)
DEFAULT_NOW = datetime(2024, 6, 1, 13, 0, tzinfo=timezone.utc)


class FakeTime:
    """Controllable UTC time source."""

    def __init__(self, current: datetime = DEFAULT_NOW):
        self.current = current

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **delta) -> None:
        self.current += timedelta(**delta)

    def set_local(self, hour: int, minute: int = 0, second: int = 0) -> None:
        """Move to HH:MM:SS business time on the current business date."""
        local = self.current.astimezone(timezone(timedelta(hours=-3)))
        self.current = local.replace(hour=hour, minute=minute, second=second).astimezone(timezone.utc)


@pytest.fixture
def fake_time():
    return FakeTime()


@pytest.fixture
def clock(fake_time):
    return BusinessClock(-3, source=fake_time)


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        database_url="sqlite://",
        admin_password=ADMIN_PASSWORD,
        reveal_password=REVEAL_PASSWORD,
        seed_defaults=False,
        redis_url=None,
    )


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_fk(engine)
    init_db(engine, seed=False)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = make_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def app(settings, engine, clock):
    return create_app(settings=settings, engine=engine, clock=clock)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def admin_token(client):
    response = client.post("/api/auth/login", json={"password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture
def admin(client, admin_token):
    client.headers["Authorization"] = f"Bearer {admin_token}"
    return client


@pytest.fixture
def service_id(db):
    from salon.models.tables import Services

    service = Services(name="Volume Russo", description="", price=200.0, duration=150)
    db.add(service)
    db.commit()
    return service.id
