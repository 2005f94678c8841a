"""Fixtures for the client tests."""

import pytest
from record_server import FakeRecordServer


@pytest.fixture
def fake_server() -> FakeRecordServer:
    """Healthy server. Flip `fail_saves` / `offline` / `html_only` in a test to break it."""
    return FakeRecordServer()
