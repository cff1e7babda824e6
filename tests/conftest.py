from __future__ import annotations

import pytest

from src.event_attendance.event_attendance.main import create_app


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "data" / "attendance.json"


@pytest.fixture
def app(monkeypatch, data_file):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app({"DATA_FILE": str(data_file), "TIMEZONE": ""})


@pytest.fixture
def client(app):
    return app.test_client()
