from __future__ import annotations

from datetime import date

import pytest

from src.timeclock.timeclock.main import create_app
from src.timeclock.timeclock.core.enums import Role
from src.timeclock.timeclock.users.model import CallerIdentity

from tests.fakes import make_container


@pytest.fixture
def today() -> date:
    # A Thursday
    return date(2025, 1, 9)


@pytest.fixture
def admin() -> CallerIdentity:
    return CallerIdentity(user_id=1, role=Role.ADMIN)


@pytest.fixture
def employee() -> CallerIdentity:
    return CallerIdentity(user_id=2, role=Role.USER)


@pytest.fixture
def container():
    return make_container()


@pytest.fixture
def app(container):
    app = create_app(container=container, settings_module="config.testing")
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
