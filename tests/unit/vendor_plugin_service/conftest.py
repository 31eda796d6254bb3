"""
Unit Test Fixtures for Vendor Plugin Service

Provides mock fixtures for unit testing.
"""

import pytest
from datetime import timedelta
from typing import Any, Dict, Optional

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../../.."))

from services.auth_service.models import User
from services.vendor_plugin_service.clients import VendorApiClient
from services.vendor_plugin_service.default_plugins import build_default_plugins
from services.vendor_plugin_service.event_aggregator import EventAggregator
from services.vendor_plugin_service.models import LoyaltyPoint, VendorPlugin
from services.vendor_plugin_service.plugin_registry import PluginRegistry
from services.vendor_plugin_service.reward_engine import LoyaltyRewardEngine
from tests.mocks.vendor_mocks import FailingVendorClient


# ====================
# Fixtures
# ====================


@pytest.fixture
def registry(fixed_clock):
    """Registry holding the four built-in plugins"""
    return PluginRegistry(build_default_plugins(fixed_clock()))


@pytest.fixture
def engine(registry, fixed_clock):
    return LoyaltyRewardEngine(registry, clock=fixed_clock)


@pytest.fixture
def failing_client():
    return FailingVendorClient()


@pytest.fixture
def failing_aggregator(registry, failing_client, fixed_clock):
    """Aggregator whose vendors are all down"""
    return EventAggregator(registry, failing_client, clock=fixed_clock)


@pytest.fixture
def vendor_client(mock_http_client):
    return VendorApiClient(client=mock_http_client)


@pytest.fixture
def http_aggregator(registry, vendor_client, fixed_clock):
    """Aggregator talking to vendors through the mock httpx client"""
    return EventAggregator(registry, vendor_client, clock=fixed_clock)


@pytest.fixture
def sample_user():
    return User(
        id="civic-user-1",
        email="alice@example.com",
        name="alice",
        wallet_address="ab" * 32,
        civic_user_id="civic-user-1",
        is_verified=True,
    )


@pytest.fixture
def make_grant(fixed_clock):
    """Factory for point grants earned relative to the fixed clock"""
    counter = {"n": 0}

    def _make(
        vendor_id: str,
        points: int,
        user_id: str = "civic-user-1",
        earned_days_ago: int = 1,
        expires_in_days: Optional[int] = None,
    ) -> LoyaltyPoint:
        counter["n"] += 1
        now = fixed_clock()
        return LoyaltyPoint(
            id=f"grant-{counter['n']}",
            user_id=user_id,
            vendor_id=vendor_id,
            points=points,
            earned_from="ticket_purchase",
            earned_at=now - timedelta(days=earned_days_ago),
            expires_at=now + timedelta(days=expires_in_days) if expires_in_days is not None else None,
        )

    return _make


@pytest.fixture
def make_plugin():
    """Factory for minimal vendor plugins"""

    def _make(plugin_id: str, is_active: bool = True, **overrides: Any) -> VendorPlugin:
        data: Dict[str, Any] = {
            "id": plugin_id,
            "name": plugin_id.title(),
            "api_endpoint": f"https://api.{plugin_id}.test/v1",
            "is_active": is_active,
            "social_impact": {
                "type": "charity",
                "description": "Test impact",
                "beneficiary": "Test beneficiary",
                "impact_metrics": {"total_impact": "n/a", "impact_per_ticket": "n/a"},
            },
        }
        data.update(overrides)
        return VendorPlugin.model_validate(data)

    return _make
