"""
Pytest configuration and fixtures
"""
import os

# Settings are read at import time; point them at a throwaway database first
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("APP_ENV", "local")

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlalchemy.engine import Engine

from leavedesk.main import app
from leavedesk.db.base import Base
from leavedesk.core.deps import get_db
from leavedesk.core.security import hash_password
from leavedesk.models import Employee, LeaveType, Role, User
from leavedesk.schemas.employee import OnboardEmployeeRequest


# Use in-memory SQLite for testing
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


# Enable foreign keys for SQLite
@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db():
    """Create a fresh database for each test"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    db = TestingSessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db):
    """Test client fixture with database override"""
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_user(db):
    """Create an ADMIN login"""
    user = User(username="admin", password_hash=hash_password("adminpass"), role=Role.ADMIN)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def regular_user(db):
    """Create a USER login"""
    user = User(username="user", password_hash=hash_password("userpass"), role=Role.USER)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def get_auth_token(client, username, password):
    """Helper to get auth token"""
    response = client.post(
        "/api/v1/auth/login",
        json={"username": username, "password": password}
    )
    return response.json()["access_token"]


@pytest.fixture
def admin_headers(client, admin_user):
    token = get_auth_token(client, "admin", "adminpass")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers(client, regular_user):
    token = get_auth_token(client, "user", "userpass")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_employee(db):
    """Factory for employees with a given balance map and optional manager"""
    counter = {"n": 0}

    def _make(leave_info=None, manager=None, first_name="Test", last_name="Employee"):
        counter["n"] += 1
        employee = Employee(
            first_name=first_name,
            last_name=last_name,
            phone_number=f"555-000-{counter['n']:04d}",
            email=f"employee{counter['n']}@example.com",
            hire_date=date(2024, 1, 15),
            job_id="DEV",
            salary=5000,
            manager_id=manager.id if manager is not None else None,
            leave_info={t.value: 0 for t in LeaveType} if leave_info is None else dict(leave_info),
        )
        db.add(employee)
        db.commit()
        db.refresh(employee)
        return employee

    return _make


@pytest.fixture
def onboard_payload():
    """Factory for the JSON body of POST /employees"""
    def _payload(**overrides):
        payload = {
            "first_name": "Jane",
            "last_name": "Doe",
            "street": "Main St 1",
            "city": "Springfield",
            "region": "IL",
            "country": "US",
            "zip_code": "62701",
            "apartment": "4B",
            "floor": 4,
            "phone_number": "+1 555-123-4567",
            "email": "jane.doe@example.com",
            "hire_date": "2024-03-01",
            "job_id": "ENG1",
            "salary": 7000,
            "manager_id": None,
        }
        payload.update(overrides)
        return payload

    return _payload


@pytest.fixture
def onboard_request(onboard_payload):
    """Factory for OnboardEmployeeRequest objects"""
    def _request(**overrides) -> OnboardEmployeeRequest:
        return OnboardEmployeeRequest(**onboard_payload(**overrides))

    return _request
