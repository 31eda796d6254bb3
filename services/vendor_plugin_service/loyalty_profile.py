"""
Loyalty Profile

Caller-side bookkeeping of a user's point grants and redemption history.
The reward engine validates redemptions against these grants but leaves
deducting points to the owner of the balance, which is this class.
"""

import logging
from typing import Dict, List, Optional, Tuple

from .models import (
    LoyaltyPoint,
    LoyaltyTier,
    RewardRedemption,
    UserLoyaltyProfile,
    utc_now,
)
from .protocols import ClockProtocol

logger = logging.getLogger(__name__)


# Minimum total points for each tier, highest first
TIER_THRESHOLDS: List[Tuple[LoyaltyTier, int]] = [
    (LoyaltyTier.PLATINUM, 2000),
    (LoyaltyTier.GOLD, 1000),
    (LoyaltyTier.SILVER, 500),
    (LoyaltyTier.BRONZE, 0),
]

FAVORITE_VENDOR_COUNT = 3


def tier_for_points(total_points: int) -> LoyaltyTier:
    for tier, threshold in TIER_THRESHOLDS:
        if total_points >= threshold:
            return tier
    return LoyaltyTier.BRONZE


class LoyaltyProfile:
    """A user's point grants and redemptions"""

    def __init__(
        self,
        user_id: str,
        grants: Optional[List[LoyaltyPoint]] = None,
        redemption_history: Optional[List[RewardRedemption]] = None,
        clock: Optional[ClockProtocol] = None,
    ):
        self.user_id = user_id
        self.grants: List[LoyaltyPoint] = list(grants or [])
        self.redemption_history: List[RewardRedemption] = list(redemption_history or [])
        self.clock = clock or utc_now

    def _spendable(self) -> List[LoyaltyPoint]:
        now = self.clock()
        return [grant for grant in self.grants if not grant.is_expired(now)]

    def get_vendor_points(self, vendor_id: str) -> int:
        return sum(grant.points for grant in self._spendable() if grant.vendor_id == vendor_id)

    def get_total_points(self) -> int:
        return sum(grant.points for grant in self._spendable())

    def get_points_by_vendor(self) -> Dict[str, int]:
        balances: Dict[str, int] = {}
        for grant in self._spendable():
            balances[grant.vendor_id] = balances.get(grant.vendor_id, 0) + grant.points
        return balances

    def get_tier(self) -> LoyaltyTier:
        return tier_for_points(self.get_total_points())

    def points_to_next_tier(self) -> Optional[Tuple[LoyaltyTier, int]]:
        """(next tier, points still needed), or None at the highest tier"""
        total = self.get_total_points()
        next_tier = None
        for tier, threshold in TIER_THRESHOLDS:
            if total >= threshold:
                break
            next_tier = (tier, threshold - total)
        return next_tier

    def apply_redemption(self, redemption: RewardRedemption) -> None:
        """
        Deduct a redemption's points from this vendor's grants

        Points come out of the oldest non-expired grants first; grants that
        reach zero are dropped. The redemption is put at the front of the
        history.
        """
        if redemption.user_id != self.user_id:
            raise ValueError(f"Redemption {redemption.id} belongs to {redemption.user_id}, not {self.user_id}")

        available = self.get_vendor_points(redemption.vendor_id)
        if available < redemption.points_used:
            raise ValueError(
                f"Cannot deduct {redemption.points_used} points from {redemption.vendor_id}: only {available} available"
            )

        now = self.clock()
        remaining = redemption.points_used
        updated: List[LoyaltyPoint] = []
        for grant in sorted(self.grants, key=lambda g: g.earned_at):
            if remaining and grant.vendor_id == redemption.vendor_id and not grant.is_expired(now):
                taken = min(grant.points, remaining)
                remaining -= taken
                grant = grant.model_copy(update={"points": grant.points - taken})
            if grant.points > 0:
                updated.append(grant)

        self.grants = updated
        self.redemption_history.insert(0, redemption)
        logger.info(
            f"Deducted {redemption.points_used} {redemption.vendor_id} points from {self.user_id} "
            f"for redemption {redemption.id}"
        )

    def to_profile(self) -> UserLoyaltyProfile:
        spent = sum(redemption.points_used for redemption in self.redemption_history)
        current = self.get_total_points()
        by_vendor = self.get_points_by_vendor()
        favorites = sorted(by_vendor, key=lambda vendor_id: by_vendor[vendor_id], reverse=True)
        return UserLoyaltyProfile(
            user_id=self.user_id,
            total_points_earned=current + spent,
            total_points_spent=spent,
            current_balance=self._spendable(),
            redemption_history=list(self.redemption_history),
            favorite_vendors=favorites[:FAVORITE_VENDOR_COUNT],
            tier=tier_for_points(current),
        )


__all__ = ["LoyaltyProfile", "TIER_THRESHOLDS", "tier_for_points"]
