"""Pytest configuration and fixtures for unit tests."""

import pytest

from lif.services.runtime import DashboardRuntime
from tests.unit.mocks import InMemoryStore, RecordingNotifier


@pytest.fixture
def in_memory_store():
    """Provides a fresh InMemoryStore for each test."""
    return InMemoryStore()


@pytest.fixture
def recording_notifier():
    """Provides a notifier that records events instead of delivering them."""
    return RecordingNotifier()


@pytest.fixture
def runtime(in_memory_store, recording_notifier):
    """Runtime wired to in-memory collaborators (not started)."""
    return DashboardRuntime(in_memory_store, recording_notifier)
