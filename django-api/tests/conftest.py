"""Pytest configuration and shared fixtures."""

import pytest
from django.apps import apps
from rest_framework.test import APIClient

from events.domain import SpotStatus
from events.stores import InMemoryEventStore

from tests.factories import make_event, make_spot


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def store() -> InMemoryEventStore:
    return InMemoryEventStore(
        events=[make_event(1), make_event(2, name="Play")],
        spots=[
            make_spot(10, "A1", 1),
            make_spot(11, "A2", 1, SpotStatus.RESERVED),
            make_spot(12, "A1", 2),
            make_spot(13, "B1", 1),
        ],
    )


@pytest.fixture
def installed_store(store, monkeypatch) -> InMemoryEventStore:
    """Serve requests from ``store`` instead of the dataset loaded at startup."""
    monkeypatch.setattr(apps.get_app_config("events"), "store", store)
    return store
