from __future__ import annotations

from datetime import date, datetime

import pytest

from src.attendance_dashboard.attendance_dashboard.container import Container

from tests.fakes import build_fake_container


@pytest.fixture
def fixed_today() -> date:
    return date(2025, 1, 3)


@pytest.fixture
def fixed_now(fixed_today) -> datetime:
    return datetime.combine(fixed_today, datetime.min.time()).replace(hour=8, minute=30)


@pytest.fixture
def container() -> Container:
    return build_fake_container()


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.attendance_dashboard.attendance_dashboard.main import create_app

    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()
