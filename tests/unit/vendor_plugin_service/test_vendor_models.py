"""
Unit Tests for Vendor Plugin Service Models

Tests for validation, aliases and derived properties.
"""

import pytest
from datetime import datetime, timedelta, timezone

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../../.."))

from pydantic import ValidationError

from services.vendor_plugin_service.models import (
    Event,
    LoyaltyPoint,
    RedemptionStatus,
    RewardDetails,
    RewardRedemption,
    RewardTier,
    RewardType,
)


def _tier(**overrides):
    data = {
        "id": "t-1",
        "vendorId": "humanitix",
        "name": "Tier",
        "description": "d",
        "pointsRequired": 100,
        "rewardType": "discount",
        "value": "10% off",
    }
    data.update(overrides)
    return RewardTier.model_validate(data)


class TestRewardTier:
    """Tests for RewardTier"""

    def test_camel_case_aliases(self):
        tier = _tier(maxRedemptions=10, currentRedemptions=4)

        assert tier.points_required == 100
        assert tier.reward_type == RewardType.DISCOUNT
        assert tier.is_capped is True
        assert tier.remaining_redemptions == 6

    def test_uncapped(self):
        tier = _tier()

        assert tier.is_capped is False
        assert tier.remaining_redemptions is None

    def test_negative_points_rejected(self):
        with pytest.raises(ValidationError):
            _tier(pointsRequired=-1)

    def test_unknown_reward_type_rejected(self):
        with pytest.raises(ValidationError):
            _tier(rewardType="cashback")

    def test_naive_valid_until_is_utc(self):
        tier = _tier(validUntil="2025-07-01T00:00:00")

        assert tier.valid_until == datetime(2025, 7, 1, tzinfo=timezone.utc)


class TestLoyaltyPoint:
    """Tests for LoyaltyPoint"""

    def test_expiry(self, fixed_clock):
        grant = LoyaltyPoint(
            id="g", user_id="u", vendor_id="v", points=5,
            expires_at=fixed_clock() + timedelta(seconds=1),
        )

        assert grant.is_expired(fixed_clock()) is False
        assert grant.is_expired(fixed_clock() + timedelta(seconds=2)) is True

    def test_never_expires(self, fixed_clock):
        grant = LoyaltyPoint(id="g", user_id="u", vendor_id="v", points=5)

        assert grant.is_expired(fixed_clock()) is False


class TestRewardRedemption:
    """Tests for RewardRedemption"""

    def test_frozen_and_with_status(self):
        redemption = RewardRedemption(
            id="r", user_id="u", vendor_id="v", reward_tier_id="t", points_used=10,
            reward_type=RewardType.VOUCHER, reward_value="x",
            reward_details=RewardDetails(name="n", description="d"),
        )

        with pytest.raises(ValidationError):
            redemption.points_used = 0

        used = redemption.with_status(RedemptionStatus.USED)
        assert used.status == RedemptionStatus.USED
        assert redemption.status == RedemptionStatus.CONFIRMED


class TestEvent:
    """Tests for Event"""

    def test_capacity(self, fixed_clock):
        event = Event(id="e", name="n", date=fixed_clock(), venue="v", max_capacity=10, tickets_sold=7)

        assert event.tickets_remaining == 3
        assert event.is_full is False

    def test_is_past(self, fixed_clock):
        event = Event(id="e", name="n", date=fixed_clock() - timedelta(hours=1), venue="v")

        assert event.is_past(fixed_clock()) is True
