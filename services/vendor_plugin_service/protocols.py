"""
Vendor Plugin Service Protocols

Defines interfaces for dependency injection and testing.
Following the protocol-based architecture pattern.
"""

from datetime import datetime
from typing import Any, List, Optional, Protocol

from .models import (
    Event,
    ImpactMetrics,
    Ticket,
    VendorPlugin,
)


# ====================
# Event Source Protocol
# ====================


class EventSourceProtocol(Protocol):
    """Protocol for anything that can list a vendor's events"""

    async def fetch_events(self, plugin: VendorPlugin) -> List[Event]:
        """Return the plugin's events, stamped with vendor_id"""
        ...


# ====================
# Vendor API Client Protocol
# ====================


class VendorApiClientProtocol(Protocol):
    """Protocol for the vendor HTTP API"""

    async def get_events(self, plugin: VendorPlugin) -> List[Event]:
        """GET {api_endpoint}/events"""
        ...

    async def purchase_ticket(
        self,
        plugin: VendorPlugin,
        event_id: str,
        user_id: str,
        ticket_type: str = "general"
    ) -> Ticket:
        """POST {api_endpoint}/tickets/purchase"""
        ...

    async def get_impact_metrics(self, plugin: VendorPlugin) -> Optional[ImpactMetrics]:
        """GET {api_endpoint}/impact/metrics"""
        ...

    async def close(self) -> None:
        """Close HTTP client"""
        ...


# ====================
# Identity Provider Protocol
# ====================


class IdentityProviderProtocol(Protocol):
    """Protocol for the auth/wallet collaborator consulted by purchases"""

    def get_current_user(self) -> Optional[Any]:
        """Signed-in user, or None"""
        ...

    async def verify_identity(self) -> bool:
        """Anti-scalping identity check"""
        ...

    async def get_wallet_data(self) -> Optional[Any]:
        """Wallet address and balance, or None"""
        ...


# ====================
# Clock Protocol
# ====================


class ClockProtocol(Protocol):
    """Callable returning the current timezone-aware time"""

    def __call__(self) -> datetime:
        ...


# ====================
# Custom Exceptions
# ====================


class VendorPluginServiceError(Exception):
    """Base exception for vendor plugin service errors"""
    pass


class PluginNotFoundError(VendorPluginServiceError):
    """Raised when a plugin is unknown or inactive"""

    def __init__(self, message: str, plugin_id: str = ""):
        super().__init__(message)
        self.plugin_id = plugin_id


class RewardNotFoundError(VendorPluginServiceError):
    """Raised when a reward tier is not among the active rewards"""

    def __init__(self, message: str, reward_tier_id: str = ""):
        super().__init__(message)
        self.reward_tier_id = reward_tier_id


class InsufficientPointsError(VendorPluginServiceError):
    """Raised when user has insufficient points for the vendor"""

    def __init__(
        self,
        message: str,
        available: int = 0,
        requested: int = 0
    ):
        super().__init__(message)
        self.available = available
        self.requested = requested


class RedemptionLimitError(VendorPluginServiceError):
    """Raised when a reward tier has reached its redemption cap"""

    def __init__(self, message: str, max_redemptions: int = 0):
        super().__init__(message)
        self.max_redemptions = max_redemptions


class ExpiredRewardError(VendorPluginServiceError):
    """Raised when a reward tier is past its valid_until date"""

    def __init__(self, message: str, valid_until: Optional[datetime] = None):
        super().__init__(message)
        self.valid_until = valid_until


class VerificationRequiredError(VendorPluginServiceError):
    """Raised when a purchase needs a signed-in, verified user"""
    pass


class InsufficientBalanceError(VendorPluginServiceError):
    """Raised when the wallet cannot cover a purchase"""

    def __init__(
        self,
        message: str,
        available: float = 0.0,
        required: float = 0.0
    ):
        super().__init__(message)
        self.available = available
        self.required = required


class VendorApiError(VendorPluginServiceError):
    """Raised by the vendor client on transport or envelope failure"""

    def __init__(self, message: str, vendor_id: str = "", status_code: Optional[int] = None):
        super().__init__(message)
        self.vendor_id = vendor_id
        self.status_code = status_code


__all__ = [
    "EventSourceProtocol",
    "VendorApiClientProtocol",
    "IdentityProviderProtocol",
    "ClockProtocol",
    "VendorPluginServiceError",
    "PluginNotFoundError",
    "RewardNotFoundError",
    "InsufficientPointsError",
    "RedemptionLimitError",
    "ExpiredRewardError",
    "VerificationRequiredError",
    "InsufficientBalanceError",
    "VendorApiError",
]
