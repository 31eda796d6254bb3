"""
Vendor Plugin Service Data Models

Pydantic models for vendor plugins, reward catalogs, loyalty points,
redemptions, events and tickets.

Vendor APIs speak camelCase JSON, so every model accepts both the
camelCase alias and the snake_case field name.
"""

from enum import Enum
from typing import Optional, Any, List
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Treat naive timestamps from vendor feeds as UTC"""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class VendorModel(BaseModel):
    """Base model accepting camelCase vendor payloads"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ====================
# Enum Types
# ====================

class PluginType(str, Enum):
    """What a vendor integration provides"""
    TICKETING = "ticketing"
    LOYALTY = "loyalty"
    BOTH = "both"


class ImpactType(str, Enum):
    """Kind of social impact a vendor or event contributes"""
    CHARITY = "charity"
    TREES = "trees"
    CARBON_OFFSET = "carbon-offset"
    EDUCATION = "education"
    HEALTHCARE = "healthcare"


class RewardType(str, Enum):
    """Reward tier types"""
    FREE_TICKET = "free_ticket"
    DISCOUNT = "discount"
    MERCHANDISE = "merchandise"
    UPGRADE = "upgrade"
    VOUCHER = "voucher"
    EXPERIENCE = "experience"


class RedemptionStatus(str, Enum):
    """Redemption lifecycle status"""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    USED = "used"
    EXPIRED = "expired"


class LoyaltyTier(str, Enum):
    """Cross-vendor loyalty tier derived from total points"""
    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"
    PLATINUM = "platinum"


class TicketType(str, Enum):
    """Ticket options offered at purchase"""
    GENERAL = "general"
    VIP = "vip"
    IMPACT = "impact"

    @property
    def price_multiplier(self) -> float:
        return TICKET_PRICE_MULTIPLIERS[self]

    @property
    def points_multiplier(self) -> float:
        return TICKET_POINTS_MULTIPLIERS[self]


TICKET_PRICE_MULTIPLIERS = {
    TicketType.GENERAL: 1.0,
    TicketType.VIP: 2.5,
    TicketType.IMPACT: 1.5,
}

TICKET_POINTS_MULTIPLIERS = {
    TicketType.GENERAL: 1.0,
    TicketType.VIP: 2.0,
    TicketType.IMPACT: 1.5,
}


# ====================
# Social Impact
# ====================

class ImpactMetrics(VendorModel):
    """Headline impact figures"""
    total_impact: str
    impact_per_ticket: str


class SocialImpact(VendorModel):
    """Descriptive impact metadata attached to a vendor or event"""
    type: ImpactType
    description: str
    amount_donated: Optional[float] = None
    trees_planted: Optional[int] = None
    carbon_offset: Optional[float] = None
    beneficiary: str
    impact_metrics: ImpactMetrics


# ====================
# Rewards
# ====================

class RewardTier(VendorModel):
    """Catalog entry exchangeable for points"""
    id: str = Field(..., min_length=1)
    vendor_id: str = Field(..., min_length=1)
    name: str
    description: str
    points_required: int = Field(..., ge=0)
    reward_type: RewardType
    value: str
    image_url: Optional[str] = None
    is_active: bool = True
    max_redemptions: Optional[int] = Field(default=None, ge=0)
    current_redemptions: int = Field(default=0, ge=0)
    valid_until: Optional[datetime] = None
    terms: Optional[str] = None

    @field_validator("valid_until")
    @classmethod
    def normalize_valid_until(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _as_utc(value)

    @property
    def is_capped(self) -> bool:
        return self.max_redemptions is not None

    @property
    def remaining_redemptions(self) -> Optional[int]:
        if self.max_redemptions is None:
            return None
        return max(0, self.max_redemptions - self.current_redemptions)


class RewardCatalog(VendorModel):
    """A vendor's reward tiers and time-limited special offers"""
    vendor_id: str
    vendor_name: str
    tiers: List[RewardTier] = Field(default_factory=list)
    special_offers: List[RewardTier] = Field(default_factory=list)

    @property
    def reward_count(self) -> int:
        return len(self.tiers) + len(self.special_offers)


# ====================
# Vendor Plugins
# ====================

class PluginConfiguration(VendorModel):
    """Per-vendor credentials and feature flags"""
    api_key: Optional[str] = None
    webhook_url: Optional[str] = None
    supported_features: List[str] = Field(default_factory=list)


class VendorPlugin(VendorModel):
    """External ticketing partner integration"""
    id: str = Field(..., min_length=1)
    name: str
    type: PluginType = PluginType.TICKETING
    description: str = ""
    logo_url: Optional[str] = None
    website_url: Optional[str] = None
    api_endpoint: str
    is_active: bool = True
    social_impact: SocialImpact
    configuration: PluginConfiguration = Field(default_factory=PluginConfiguration)
    reward_catalog: Optional[RewardCatalog] = None

    def supports(self, feature: str) -> bool:
        return feature in self.configuration.supported_features


# ====================
# Loyalty Points & Redemptions
# ====================

class LoyaltyPoint(VendorModel):
    """Point grant scoped to one user and one vendor"""
    id: str
    user_id: str
    vendor_id: str
    vendor_name: str = ""
    points: int = Field(..., ge=0)
    token_mint_address: Optional[str] = None
    earned_from: str = ""
    earned_at: datetime = Field(default_factory=utc_now)
    expires_at: Optional[datetime] = None

    @field_validator("earned_at", "expires_at")
    @classmethod
    def normalize_dates(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _as_utc(value)

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        if self.expires_at is None:
            return False
        return self.expires_at < (now or utc_now())


class RewardDetails(VendorModel):
    """What the user received and how to use it"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    name: str
    description: str
    instructions: Optional[str] = None
    voucher_code: Optional[str] = None
    valid_until: Optional[datetime] = None


class RewardRedemption(VendorModel):
    """Immutable record of one completed reward exchange"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    user_id: str
    vendor_id: str
    reward_tier_id: str
    points_used: int = Field(..., ge=0)
    reward_type: RewardType
    reward_value: str
    reward_details: RewardDetails
    redeemed_at: datetime = Field(default_factory=utc_now)
    transaction_hash: Optional[str] = None
    status: RedemptionStatus = RedemptionStatus.CONFIRMED

    def with_status(self, status: RedemptionStatus) -> "RewardRedemption":
        """Return a copy carrying a new status"""
        return self.model_copy(update={"status": status})


class UserLoyaltyProfile(VendorModel):
    """Summary of a user's loyalty standing"""
    user_id: str
    total_points_earned: int = Field(default=0, ge=0)
    total_points_spent: int = Field(default=0, ge=0)
    current_balance: List[LoyaltyPoint] = Field(default_factory=list)
    redemption_history: List[RewardRedemption] = Field(default_factory=list)
    favorite_vendors: List[str] = Field(default_factory=list)
    tier: LoyaltyTier = LoyaltyTier.BRONZE


# ====================
# Events & Tickets
# ====================

class Event(VendorModel):
    """Purchasable event from a vendor feed or the native list"""
    id: str
    name: str
    description: str = ""
    date: datetime
    venue: str
    organizer: str = ""
    image_url: Optional[str] = None
    price: float = Field(default=0.0, ge=0)
    max_capacity: int = Field(default=0, ge=0)
    tickets_sold: int = Field(default=0, ge=0)
    is_anti_scalping_enabled: bool = False
    loyalty_points_reward: int = Field(default=0, ge=0)
    social_impact: Optional[SocialImpact] = None
    vendor_id: Optional[str] = None

    @field_validator("date")
    @classmethod
    def normalize_date(cls, value: datetime) -> datetime:
        return _as_utc(value)

    @property
    def tickets_remaining(self) -> int:
        return self.max_capacity - self.tickets_sold

    @property
    def is_full(self) -> bool:
        return self.tickets_remaining <= 0

    def is_past(self, now: Optional[datetime] = None) -> bool:
        return self.date < (now or utc_now())


class TicketAttribute(VendorModel):
    trait_type: str
    value: str


class TicketMetadata(VendorModel):
    description: str = ""
    image: str = ""
    attributes: List[TicketAttribute] = Field(default_factory=list)


class Ticket(VendorModel):
    """Ticket issued by a vendor (or the mock fallback)"""
    id: str
    event_id: str
    event_name: str
    event_date: datetime
    venue: str
    price: float = Field(default=0.0, ge=0)
    ticket_type: str = "general"
    user_id: str
    nft_mint_address: Optional[str] = None
    qr_code: str
    is_used: bool = False
    metadata: TicketMetadata = Field(default_factory=TicketMetadata)
    social_impact: Optional[SocialImpact] = None

    @field_validator("event_date")
    @classmethod
    def normalize_event_date(cls, value: datetime) -> datetime:
        return _as_utc(value)


# ====================
# Vendor API Envelope
# ====================

class VendorImpactNotice(VendorModel):
    message: str = ""
    metrics: Any = None


class PluginApiResponse(VendorModel):
    """Envelope returned by every vendor endpoint"""
    success: bool
    data: Any = None
    error: Optional[str] = None
    social_impact: Optional[VendorImpactNotice] = None


# ====================
# Response Models
# ====================

class SocialImpactSummary(BaseModel):
    """Cross-vendor impact aggregation"""
    total_trees_planted: int = 0
    total_money_donated: float = 0
    carbon_offset_programs: int = 0
    total_rewards_available: int = 0
    active_plugins: int = 0
    impact_types: List[ImpactType] = Field(default_factory=list)


class PurchaseResult(BaseModel):
    """Outcome of a ticket purchase"""
    ticket: Ticket
    ticket_type: TicketType
    quantity: int = Field(..., ge=1)
    total_price: float = Field(..., ge=0)
    loyalty_points_earned: int = Field(default=0, ge=0)
    transaction_hash: str
    purchased_at: datetime = Field(default_factory=utc_now)


__all__ = [
    "utc_now",
    "PluginType",
    "ImpactType",
    "RewardType",
    "RedemptionStatus",
    "LoyaltyTier",
    "TicketType",
    "TICKET_PRICE_MULTIPLIERS",
    "TICKET_POINTS_MULTIPLIERS",
    "ImpactMetrics",
    "SocialImpact",
    "RewardTier",
    "RewardCatalog",
    "PluginConfiguration",
    "VendorPlugin",
    "LoyaltyPoint",
    "RewardDetails",
    "RewardRedemption",
    "UserLoyaltyProfile",
    "Event",
    "TicketAttribute",
    "TicketMetadata",
    "Ticket",
    "VendorImpactNotice",
    "PluginApiResponse",
    "SocialImpactSummary",
    "PurchaseResult",
]
