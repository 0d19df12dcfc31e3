# tests/conftest.py

import pytest
from fastapi.testclient import TestClient

from application.use_cases import TaskListView
from interfaces.api import get_view
from main import app

from .fakes import FakeScheduler


@pytest.fixture()
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture()
def view(scheduler: FakeScheduler) -> TaskListView:
    return TaskListView(notification_ttl=3.0, scheduler=scheduler)


@pytest.fixture()
def client(view: TaskListView):
    """TestClient whose routes all see the per-test view."""
    app.dependency_overrides[get_view] = lambda: view
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
