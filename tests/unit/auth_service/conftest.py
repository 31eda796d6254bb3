"""
Unit Test Fixtures for Auth Service

Provides storage, balance provider and session store fixtures.
"""

import pytest

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../../.."))

from services.auth_service.auth_session_store import AuthSessionStore
from services.auth_service.session_storage import InMemorySessionStorage
from services.auth_service.wallet import MockBalanceProvider


class FailingBalanceProvider:
    """Balance provider for an unreachable chain"""

    async def get_balance(self, address: str) -> int:
        raise ConnectionError("rpc unavailable")


@pytest.fixture
def storage():
    return InMemorySessionStorage()


@pytest.fixture
def balance_provider():
    return MockBalanceProvider(default_balance_sol=2.5)


@pytest.fixture
def store(storage, balance_provider):
    return AuthSessionStore(storage=storage, balance_provider=balance_provider)


@pytest.fixture
def failing_balance_provider():
    return FailingBalanceProvider()
