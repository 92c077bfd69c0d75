import sqlite3

import pytest
from fastapi.testclient import TestClient

from bizform.core.config import settings
from bizform.db import session as db_session
from bizform.main import app


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "test.db"


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    path = tmp_path / "uploads"
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(path))
    return path


@pytest.fixture
def client(db_path, upload_dir):
    db_session.configure_database(f"sqlite+aiosqlite:///{db_path}")
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def raw_db(client, db_path):
    """绕过接口直接查库（能看到软删除的记录）"""
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    yield conn
    conn.close()
