"""
Root conftest.py - Global fixtures and configuration for all test layers.

Test Layers:
    - unit/       : Unit tests (mocked HTTP and storage, no network)
"""
import os
import sys

import pytest

# Load deployment/environments/test.env rather than dev.env
os.environ.setdefault("ENV", "test")

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from tests.mocks.clock import FixedClock
from tests.mocks.http_mock import MockHttpClient


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock frozen at FIXED_NOW"""
    return FixedClock()


@pytest.fixture
def mock_http_client() -> MockHttpClient:
    """Fresh mock httpx client per test"""
    return MockHttpClient()
