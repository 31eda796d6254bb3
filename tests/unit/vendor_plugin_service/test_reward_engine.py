"""
Unit Tests for Loyalty Reward Engine

Tests for catalog lookups, balances and redemption rules.
"""

import pytest
from datetime import timedelta

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../../.."))

from services.vendor_plugin_service.models import RedemptionStatus, RewardType
from services.vendor_plugin_service.protocols import (
    ExpiredRewardError,
    InsufficientPointsError,
    RedemptionLimitError,
    RewardNotFoundError,
)
from services.vendor_plugin_service.reward_engine import REWARD_INSTRUCTIONS, instructions_for


def _tier(registry, reward_id):
    for plugin in registry.get_all_plugins():
        catalog = plugin.reward_catalog
        for reward in catalog.tiers + catalog.special_offers:
            if reward.id == reward_id:
                return reward
    raise KeyError(reward_id)


class TestRewardCatalog:
    """Tests for catalog lookups"""

    def test_get_reward_catalog(self, engine):
        catalog = engine.get_reward_catalog("humanitix")

        assert catalog.vendor_name == "Humanitix"
        assert len(catalog.tiers) == 3
        assert len(catalog.special_offers) == 1

    def test_get_reward_catalog_unknown_vendor(self, engine):
        assert engine.get_reward_catalog("nope") is None

    def test_all_available_rewards_spans_active_plugins(self, engine, registry):
        """Available rewards equal active tiers plus active offers of active plugins"""
        expected = sum(
            len([t for t in p.reward_catalog.tiers if t.is_active])
            + len([o for o in p.reward_catalog.special_offers if o.is_active])
            for p in registry.get_active_plugins()
        )

        rewards = engine.get_all_available_rewards()

        assert len(rewards) == expected == 16

    def test_inactive_plugin_rewards_excluded(self, engine, registry):
        registry.set_plugin_status("tickethic", False)

        rewards = engine.get_all_available_rewards()

        assert len(rewards) == 12
        assert all(r.vendor_id != "tickethic" for r in rewards)

    def test_inactive_tier_excluded(self, engine, registry):
        _tier(registry, "humanitix-discount-20").is_active = False

        ids = [r.id for r in engine.get_all_available_rewards()]

        assert "humanitix-discount-20" not in ids
        assert len(ids) == 15

    def test_rewards_keep_registration_order(self, engine):
        vendors = [r.vendor_id for r in engine.get_all_available_rewards()]

        assert vendors[:4] == ["humanitix"] * 4
        assert vendors[-4:] == ["ticketebo"] * 4


class TestVendorBalance:
    """Tests for per-vendor point sums"""

    def test_balance_counts_only_that_vendor(self, engine, make_grant):
        grants = [make_grant("humanitix", 100), make_grant("humanitix", 50), make_grant("tickethic", 400)]

        assert engine.get_vendor_balance(grants, "humanitix") == 150
        assert engine.get_vendor_balances(grants) == {"humanitix": 150, "tickethic": 400}

    def test_expired_grants_ignored(self, engine, make_grant):
        grants = [
            make_grant("humanitix", 100, expires_in_days=-1),
            make_grant("humanitix", 70, expires_in_days=5),
        ]

        assert engine.get_vendor_balance(grants, "humanitix") == 70


class TestRedeemReward:
    """Tests for redeem_reward"""

    def test_redeem_success(self, engine, registry, make_grant, fixed_clock):
        """Successful redemption increments the counter and leaves grants untouched"""
        grants = [make_grant("humanitix", 250)]
        tier = _tier(registry, "humanitix-discount-20")
        before = tier.current_redemptions

        redemption = engine.redeem_reward("civic-user-1", "humanitix-discount-20", grants)

        assert redemption.status == RedemptionStatus.CONFIRMED
        assert redemption.points_used == 200
        assert redemption.vendor_id == "humanitix"
        assert redemption.reward_type == RewardType.DISCOUNT
        assert redemption.redeemed_at == fixed_clock()
        assert redemption.id.startswith("redemption_")
        assert tier.current_redemptions == before + 1
        assert grants[0].points == 250

    def test_voucher_code_for_voucher_types(self, engine, make_grant):
        grants = [make_grant("humanitix", 1000)]

        redemption = engine.redeem_reward("civic-user-1", "humanitix-free-ticket", grants)

        code = redemption.reward_details.voucher_code
        assert code.startswith("HUMANITIX-000001-")
        assert redemption.reward_details.instructions == REWARD_INSTRUCTIONS[RewardType.FREE_TICKET]

    def test_voucher_codes_unique(self, engine, make_grant):
        grants = [make_grant("humanitix", 1000)]

        first = engine.redeem_reward("civic-user-1", "humanitix-discount-20", grants)
        second = engine.redeem_reward("civic-user-1", "humanitix-discount-20", grants)

        assert first.reward_details.voucher_code != second.reward_details.voucher_code

    def test_no_voucher_code_for_experience(self, engine, make_grant):
        grants = [make_grant("humanitix", 300)]

        redemption = engine.redeem_reward("civic-user-1", "humanitix-charity-match", grants)

        assert redemption.reward_details.voucher_code is None
        assert "experience" in redemption.reward_details.instructions.lower()

    def test_unknown_reward(self, engine, make_grant):
        with pytest.raises(RewardNotFoundError) as exc_info:
            engine.redeem_reward("civic-user-1", "no-such-reward", [make_grant("humanitix", 9999)])

        assert exc_info.value.reward_tier_id == "no-such-reward"

    def test_reward_of_inactive_plugin_not_found(self, engine, registry, make_grant):
        registry.set_plugin_status("humanitix", False)

        with pytest.raises(RewardNotFoundError):
            engine.redeem_reward("civic-user-1", "humanitix-discount-20", [make_grant("humanitix", 500)])

    def test_insufficient_points(self, engine, registry, make_grant):
        """Points from other vendors do not count and the counter is unchanged"""
        tier = _tier(registry, "humanitix-discount-20")
        before = tier.current_redemptions
        grants = [make_grant("humanitix", 150), make_grant("tickethic", 5000)]

        with pytest.raises(InsufficientPointsError) as exc_info:
            engine.redeem_reward("civic-user-1", "humanitix-discount-20", grants)

        assert exc_info.value.available == 150
        assert exc_info.value.requested == 200
        assert tier.current_redemptions == before

    def test_redemption_limit_reached(self, engine, registry, make_grant):
        """pointsRequired=200, cap 1: first succeeds, later attempts fail"""
        tier = _tier(registry, "humanitix-discount-20")
        tier.max_redemptions = 1
        tier.current_redemptions = 0
        grants = [make_grant("humanitix", 200)]

        engine.redeem_reward("civic-user-1", "humanitix-discount-20", grants)

        for _ in range(2):
            with pytest.raises(RedemptionLimitError) as exc_info:
                engine.redeem_reward("civic-user-1", "humanitix-discount-20", grants)
            assert exc_info.value.max_redemptions == 1
        assert tier.current_redemptions == 1

    def test_insufficient_checked_before_limit(self, engine, registry, make_grant):
        tier = _tier(registry, "humanitix-discount-20")
        tier.current_redemptions = tier.max_redemptions

        with pytest.raises(InsufficientPointsError):
            engine.redeem_reward("civic-user-1", "humanitix-discount-20", [make_grant("humanitix", 10)])

    def test_expired_reward(self, engine, registry, make_grant, fixed_clock):
        tier = _tier(registry, "humanitix-vip-upgrade")
        fixed_clock.advance(timedelta(days=31))
        grants = [make_grant("humanitix", 1000)]
        before = tier.current_redemptions

        with pytest.raises(ExpiredRewardError) as exc_info:
            engine.redeem_reward("civic-user-1", "humanitix-vip-upgrade", grants)

        assert exc_info.value.valid_until == tier.valid_until
        assert tier.current_redemptions == before

    def test_reward_valid_on_its_last_instant(self, engine, registry, make_grant, fixed_clock):
        tier = _tier(registry, "humanitix-vip-upgrade")
        fixed_clock.now = tier.valid_until

        redemption = engine.redeem_reward("civic-user-1", "humanitix-vip-upgrade", [make_grant("humanitix", 1000)])

        assert redemption.reward_details.valid_until == tier.valid_until

    def test_user_id_required(self, engine, make_grant):
        with pytest.raises(ValueError):
            engine.redeem_reward("", "humanitix-discount-20", [make_grant("humanitix", 500)])


class TestInstructions:
    """Tests for redemption instructions"""

    def test_every_reward_type_has_instructions(self):
        for reward_type in RewardType:
            assert instructions_for(reward_type)

    def test_instructions_accept_raw_values(self):
        assert instructions_for("voucher") == REWARD_INSTRUCTIONS[RewardType.VOUCHER]
