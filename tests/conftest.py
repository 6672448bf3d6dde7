"""
Shared pytest fixtures.

The application engine is pointed at an in-memory SQLite database before
any app module is imported, so services, repositories and the API all run
against the same StaticPool connection.
"""

import os

os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from datetime import datetime
from decimal import Decimal
from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient

from app.config.database import Base, SessionLocal, create_tables, engine, get_db
from app.core.auth.dependencies import get_current_principal
from app.core.auth.schemas import CurrentPrincipal, Roles
from app.main import app
from app.modules.session_transfers.ledger import InMemoryTransferLedger, get_transfer_ledger
from app.shared.database.models import SessionOffering, SessionType


@pytest.fixture(scope="session", autouse=True)
def database():
    """Create the schema once for the whole run."""
    create_tables()
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session(database):
    """A session per test; every table is emptied afterwards."""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        for table in reversed(Base.metadata.sorted_tables):
            session.execute(table.delete())
        session.commit()
        session.close()


@pytest.fixture
def ledger() -> InMemoryTransferLedger:
    return InMemoryTransferLedger()


@pytest.fixture
def source_branch_id() -> UUID:
    return uuid4()


@pytest.fixture
def target_branch_id() -> UUID:
    return uuid4()


@pytest.fixture
def session_type_factory(db_session):
    """Create and persist SessionType rows."""

    def _create(name=None, duration=30, **kwargs) -> SessionType:
        session_type = SessionType(
            name=name or f"Consult {uuid4().hex[:8]}",
            description=kwargs.pop("description", "Test consultation"),
            default_duration_minutes=duration,
            **kwargs,
        )
        db_session.add(session_type)
        db_session.commit()
        db_session.refresh(session_type)
        return session_type

    return _create


@pytest.fixture
def offering_factory(db_session, session_type_factory):
    """Create and persist SessionOffering rows.

    A fresh session type is created unless one is passed in.
    """

    def _create(
        branch_id,
        price="50.00",
        is_active=True,
        session_type=None,
        doctor_id=None,
        created_at=None,
    ) -> SessionOffering:
        session_type = session_type or session_type_factory()
        offering = SessionOffering(
            doctor_id=doctor_id or uuid4(),
            branch_id=branch_id,
            session_type_id=session_type.id,
            price=Decimal(price),
            is_active=is_active,
        )
        if created_at is not None:
            offering.created_at = created_at
        db_session.add(offering)
        db_session.commit()
        db_session.refresh(offering)
        return offering

    return _create


@pytest.fixture
def principal():
    """Mutable principal returned by the auth override; defaults to ADMIN."""
    return CurrentPrincipal(user_id=str(uuid4()), roles=[Roles.ADMIN])


@pytest.fixture
def client(db_session, principal, ledger):
    """TestClient with database, principal and ledger overridden."""
    app.dependency_overrides[get_db] = lambda: db_session
    app.dependency_overrides[get_current_principal] = lambda: principal
    app.dependency_overrides[get_transfer_ledger] = lambda: ledger
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def at(day: int, hour: int = 12) -> datetime:
    """Naive UTC timestamp in January 2025."""
    return datetime(2025, 1, day, hour, 0, 0)
