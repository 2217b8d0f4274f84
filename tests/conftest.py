"""
Root pytest configuration and fixtures for restfulkit.

Provides common fixtures and test utilities for the test suite.
"""

import os
from pathlib import Path
import sys

import pytest

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def base_url():
    """Test base URL."""
    return "https://api.test"


@pytest.fixture(autouse=True)
def clean_environment():
    """Clean environment variables before each test."""
    original_env = os.environ.copy()

    # Remove restfulkit environment variables
    for key in list(os.environ.keys()):
        if key.startswith("RESTFULKIT_"):
            del os.environ[key]

    yield

    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def transport():
    """Recording transport that never touches the network."""
    from tests.utils.mocks import RecordingTransport

    return RecordingTransport()


@pytest.fixture
def sleeps():
    """Records every delay requested by mock playback."""
    return []


@pytest.fixture
def dispatcher(transport, sleeps):
    from restfulkit import Dispatcher

    return Dispatcher(transport=transport, sleep=sleeps.append)
