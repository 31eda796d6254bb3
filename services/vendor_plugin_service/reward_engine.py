"""
Loyalty Reward Engine

Reward catalog lookups and point-for-reward redemption.

The engine validates a redemption against the point grants the caller hands
in, but it never deducts points from them: the caller owns the user's point
balance and applies the deduction itself (see LoyaltyProfile.apply_redemption).
The only state the engine mutates is a tier's current_redemptions counter.
"""

import itertools
import logging
import secrets
import threading
import uuid
from typing import Dict, Iterable, List, Optional

from .models import (
    LoyaltyPoint,
    RedemptionStatus,
    RewardCatalog,
    RewardDetails,
    RewardRedemption,
    RewardTier,
    RewardType,
    utc_now,
)
from .plugin_registry import PluginRegistry
from .protocols import (
    ClockProtocol,
    ExpiredRewardError,
    InsufficientPointsError,
    RedemptionLimitError,
    RewardNotFoundError,
)

logger = logging.getLogger(__name__)


# Reward types that come with a code the user presents later
VOUCHER_REWARD_TYPES = frozenset({
    RewardType.DISCOUNT,
    RewardType.VOUCHER,
    RewardType.FREE_TICKET,
})

REWARD_INSTRUCTIONS: Dict[RewardType, str] = {
    RewardType.FREE_TICKET: "Use this code when purchasing your next ticket. The discount will be applied automatically.",
    RewardType.DISCOUNT: "Enter this code at checkout to apply your discount.",
    RewardType.MERCHANDISE: "Your merchandise will be shipped to the address on your account. Tracking details will follow by email.",
    RewardType.UPGRADE: "Present this code at the venue for your upgrade. Subject to availability.",
    RewardType.VOUCHER: "This voucher can be redeemed according to the terms specified.",
    RewardType.EXPERIENCE: "Your experience reward has been activated. You will receive further instructions via email.",
}

_missing_instructions = set(RewardType) - set(REWARD_INSTRUCTIONS)
if _missing_instructions:
    raise RuntimeError(f"No redemption instructions for reward types: {sorted(t.value for t in _missing_instructions)}")


def instructions_for(reward_type: RewardType) -> str:
    return REWARD_INSTRUCTIONS[RewardType(reward_type)]


class LoyaltyRewardEngine:
    """Reward catalogs and redemption rules across vendor plugins"""

    def __init__(
        self,
        registry: PluginRegistry,
        clock: Optional[ClockProtocol] = None,
    ):
        """
        Initialize the engine with injected dependencies

        Args:
            registry: Plugin registry shared with the event aggregator
            clock: Returns the current timezone-aware time (defaults to UTC now)
        """
        self.registry = registry
        self.clock = clock or utc_now
        self._lock = threading.Lock()
        self._voucher_sequence = itertools.count(1)

        logger.info("LoyaltyRewardEngine initialized with dependency injection")

    # ====================
    # Catalog
    # ====================

    def get_reward_catalog(self, vendor_id: str) -> Optional[RewardCatalog]:
        """Reward catalog for a vendor, or None"""
        plugin = self.registry.get_plugin(vendor_id)
        if not plugin:
            return None
        return plugin.reward_catalog

    def get_all_available_rewards(self) -> List[RewardTier]:
        """Active tiers and special offers of every active plugin, in registration order"""
        rewards: List[RewardTier] = []
        for plugin in self.registry.get_active_plugins():
            if plugin.reward_catalog:
                rewards.extend(plugin.reward_catalog.tiers)
                rewards.extend(plugin.reward_catalog.special_offers)
        return [reward for reward in rewards if reward.is_active]

    def find_available_reward(self, reward_tier_id: str) -> Optional[RewardTier]:
        for reward in self.get_all_available_rewards():
            if reward.id == reward_tier_id:
                return reward
        return None

    # ====================
    # Point Balances
    # ====================

    def get_vendor_balance(self, user_point_grants: Iterable[LoyaltyPoint], vendor_id: str) -> int:
        """Spendable points for one vendor, ignoring expired grants"""
        now = self.clock()
        return sum(
            grant.points
            for grant in user_point_grants
            if grant.vendor_id == vendor_id and not grant.is_expired(now)
        )

    def get_vendor_balances(self, user_point_grants: Iterable[LoyaltyPoint]) -> Dict[str, int]:
        """Spendable points per vendor, ignoring expired grants"""
        now = self.clock()
        balances: Dict[str, int] = {}
        for grant in user_point_grants:
            if grant.is_expired(now):
                continue
            balances[grant.vendor_id] = balances.get(grant.vendor_id, 0) + grant.points
        return balances

    # ====================
    # Redemption
    # ====================

    def redeem_reward(
        self,
        user_id: str,
        reward_tier_id: str,
        user_point_grants: List[LoyaltyPoint],
    ) -> RewardRedemption:
        """
        Exchange points for a reward

        Args:
            user_id: Redeeming user
            reward_tier_id: Tier id among get_all_available_rewards()
            user_point_grants: All of the user's point grants (not modified)

        Returns:
            Confirmed RewardRedemption

        Raises:
            RewardNotFoundError: Tier is unknown, inactive, or its vendor is inactive
            InsufficientPointsError: Vendor balance below points_required
            RedemptionLimitError: Tier reached max_redemptions
            ExpiredRewardError: Now is past the tier's valid_until
        """
        if not user_id:
            raise ValueError("user_id is required")

        with self._lock:
            reward = self.find_available_reward(reward_tier_id)
            if not reward:
                raise RewardNotFoundError(
                    f"Reward {reward_tier_id} not found",
                    reward_tier_id=reward_tier_id,
                )

            vendor_points = self.get_vendor_balance(user_point_grants, reward.vendor_id)
            if vendor_points < reward.points_required:
                raise InsufficientPointsError(
                    f"Insufficient points for this reward: need {reward.points_required}, "
                    f"have {vendor_points} from {reward.vendor_id}",
                    available=vendor_points,
                    requested=reward.points_required,
                )

            if reward.max_redemptions is not None and reward.current_redemptions >= reward.max_redemptions:
                raise RedemptionLimitError(
                    f"Reward redemption limit reached for {reward.id}",
                    max_redemptions=reward.max_redemptions,
                )

            now = self.clock()
            if reward.valid_until is not None and now > reward.valid_until:
                raise ExpiredRewardError(
                    f"Reward {reward.id} expired on {reward.valid_until.isoformat()}",
                    valid_until=reward.valid_until,
                )

            voucher_code = None
            if reward.reward_type in VOUCHER_REWARD_TYPES:
                voucher_code = self._generate_voucher_code(reward.vendor_id)

            redemption = RewardRedemption(
                id=f"redemption_{uuid.uuid4().hex[:16]}",
                user_id=user_id,
                vendor_id=reward.vendor_id,
                reward_tier_id=reward.id,
                points_used=reward.points_required,
                reward_type=reward.reward_type,
                reward_value=reward.value,
                reward_details=RewardDetails(
                    name=reward.name,
                    description=reward.description,
                    instructions=instructions_for(reward.reward_type),
                    voucher_code=voucher_code,
                    valid_until=reward.valid_until,
                ),
                redeemed_at=now,
                status=RedemptionStatus.CONFIRMED,
            )

            reward.current_redemptions += 1

        logger.info(
            f"Reward {reward.id} redeemed by {user_id} for {reward.points_required} points "
            f"({reward.current_redemptions}/{reward.max_redemptions if reward.is_capped else 'unlimited'})"
        )
        return redemption

    def _generate_voucher_code(self, vendor_id: str) -> str:
        """VENDOR-<sequence>-<random>; the sequence keeps codes unique per engine"""
        sequence = next(self._voucher_sequence)
        return f"{vendor_id.upper()}-{sequence:06d}-{secrets.token_hex(3).upper()}"


__all__ = [
    "LoyaltyRewardEngine",
    "REWARD_INSTRUCTIONS",
    "VOUCHER_REWARD_TYPES",
    "instructions_for",
]
