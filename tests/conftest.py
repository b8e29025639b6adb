"""
Root pytest configuration and fixtures for mollie_client.

Provides common fixtures and test utilities for the test suite.
"""

import os
from pathlib import Path
import sys

import pytest

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tests.utils.mocks import SpyTransport  # noqa: E402


@pytest.fixture
def api_key():
    """Test API key."""
    return "test_dHar4XY7LxsDOtmnkVtjNVWXLSlXsM"


@pytest.fixture
def base_url():
    """Test base URL."""
    return "https://api.test.mollie.com/v2"


@pytest.fixture(autouse=True)
def clean_environment():
    """Clean environment variables before each test."""
    original_env = os.environ.copy()

    for key in list(os.environ.keys()):
        if key.startswith("MOLLIE_"):
            del os.environ[key]

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def spy():
    """Recording transport with canned responses."""
    return SpyTransport()
