import os
# Override DATABASE_URL before any app imports to avoid PostgreSQL driver requirement
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ.pop("DATABASE_PUBLIC_URL", None)
os.environ["MENTOR_BUDGET_HARD_FILTER"] = "false"

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from startup911.platform.database import Base, get_db
from startup911.main import app
from startup911.models import VC, Grant, Mentor, Tag

SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Enable foreign key support for SQLite
@event.listens_for(engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()

def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()

@pytest.fixture(scope="function")
def db():
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    yield db
    db.close()
    Base.metadata.drop_all(bind=engine)

@pytest.fixture(scope="function")
def client(db):
    app.dependency_overrides[get_db] = override_get_db
    Base.metadata.create_all(bind=engine)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    Base.metadata.drop_all(bind=engine)


# ---------------------------------------------------------------------------
# Factory helpers: create directory rows quickly and consistently
# ---------------------------------------------------------------------------

_BASE_TIME = datetime(2026, 1, 1, tzinfo=timezone.utc)
_counter = 0

def _next_created_at() -> datetime:
    """Strictly increasing timestamps so insertion order is the repository order."""
    global _counter
    _counter += 1
    return _BASE_TIME + timedelta(seconds=_counter)


def create_tag(db, name, type=None):
    tag = Tag(name=name, type=type)
    db.add(tag)
    db.commit()
    db.refresh(tag)
    return tag


def create_grant(db, name="Test Grant", tags=(), **fields):
    grant = Grant(name=name, tags=list(tags), **fields)
    db.add(grant)
    db.commit()
    db.refresh(grant)
    return grant


def create_vc(db, name="Test VC", tags=(), **fields):
    vc = VC(name=name, tags=list(tags), **fields)
    db.add(vc)
    db.commit()
    db.refresh(vc)
    return vc


def create_mentor(db, name="Test Mentor", tags=(), **fields):
    fields.setdefault("created_at", _next_created_at())
    mentor = Mentor(name=name, tags=list(tags), **fields)
    db.add(mentor)
    db.commit()
    db.refresh(mentor)
    return mentor
