from __future__ import annotations

import pytest

from src.work_hours.work_hours.container import wire
from src.work_hours.work_hours.main import create_app
from tests.fakes import TODAY, FakeLogsRepo, FakeUsersRepo, make_user


@pytest.fixture()
def fixed_today(monkeypatch):
    monkeypatch.setattr("src.work_hours.work_hours.logs.controller.today_local", lambda: TODAY)
    return TODAY


@pytest.fixture()
def logs_repo():
    return FakeLogsRepo()


@pytest.fixture()
def users_repo():
    return FakeUsersRepo([make_user(), make_user(user_id=2, username="sam", password="sam123")])


@pytest.fixture()
def app(fixed_today, logs_repo, users_repo):
    container = wire(users_repo=users_repo, logs_repo=logs_repo)
    return create_app(container=container, settings_module="config.testing")


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def signed_in(client):
    with client.session_transaction() as sess:
        sess["user_id"] = 1
        sess["name"] = "Demo User"
    return client
