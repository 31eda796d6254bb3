"""
Vendor Plugin Service

Vendor plugin registry, loyalty rewards, event aggregation and ticket
purchases for Civic Impact Tickets.
"""

from .event_aggregator import EventAggregator
from .factory import VendorPluginService, create_vendor_plugin_service
from .loyalty_profile import LoyaltyProfile
from .plugin_registry import PluginRegistry
from .purchase_service import TicketPurchaseService
from .reward_engine import LoyaltyRewardEngine

__all__ = [
    "EventAggregator",
    "LoyaltyProfile",
    "LoyaltyRewardEngine",
    "PluginRegistry",
    "TicketPurchaseService",
    "VendorPluginService",
    "create_vendor_plugin_service",
]
