"""Shared fixtures for the UIGen test suite."""

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from uigen.auth.coordinator import AuthCompletionCoordinator


@pytest.fixture
def anon_work():
    """Anonymous session with one message and a generated file."""
    return {
        "messages": [{"role": "user", "content": "Hello"}],
        "file_system_data": {
            "/": {"type": "directory"},
            "/test.tsx": {"type": "file", "content": "test"},
        },
    }


@pytest.fixture
def verifier():
    """Credential verifier that accepts everything by default."""
    mock = MagicMock()
    mock.sign_in = AsyncMock(return_value={"success": True})
    mock.sign_up = AsyncMock(return_value={"success": True})
    return mock


@pytest.fixture
def projects():
    """Project repository with no existing projects."""
    mock = MagicMock()
    mock.list_projects = AsyncMock(return_value=[])
    mock.create_project = AsyncMock(return_value={"id": "project-1"})
    return mock


@pytest.fixture
def anon_store():
    """Anonymous-work store holding nothing."""
    mock = MagicMock()
    mock.get = MagicMock(return_value=None)
    mock.clear = MagicMock(return_value=None)
    return mock


@pytest.fixture
def navigate():
    return MagicMock(return_value=None)


@pytest.fixture
def coordinator(verifier, projects, anon_store, navigate, mock_config):
    """Coordinator with a pinned clock (3:04:05 PM) and random source."""
    return AuthCompletionCoordinator(
        verifier=verifier,
        projects=projects,
        anon_work=anon_store,
        navigate=navigate,
        clock=lambda: datetime(2024, 5, 1, 15, 4, 5),
        rng=lambda: 0.12345,
    )


@pytest.fixture
def mock_config():
    """Patch the config singleton with test-friendly values."""
    test_config = {
        "api_base_url": "http://uigen.test",
        "request_timeout": 5.0,
        "api_max_retries": 3,
        "retry_wait_min": 0,
        "retry_wait_max": 0,
        "anon_work_path": "./.uigen/anon_work.json",
        "adopted_name_prefix": "Design from ",
        "default_name_prefix": "New Design #",
        "default_name_range": 100000,
    }
    with patch("uigen.config._config", test_config):
        yield test_config
