"""
Pytest configuration and fixtures
"""
import pytest
from fastapi.testclient import TestClient

from main import create_app
from student_store.audit import AuditLog
from student_store.config import Settings
from student_store.state import StudentStore


@pytest.fixture
def store():
    return StudentStore()


@pytest.fixture
def log_path(tmp_path):
    return tmp_path / "student.log"


@pytest.fixture
def audit(log_path):
    audit_log = AuditLog(str(log_path))
    yield audit_log
    audit_log.close()


@pytest.fixture
def client(store, audit, log_path):
    """Create a test client backed by a fresh store and a temp audit file"""
    settings = Settings(log_file=str(log_path))
    app = create_app(settings=settings, store=store, audit=audit)
    return TestClient(app)
