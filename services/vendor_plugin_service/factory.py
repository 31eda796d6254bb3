"""
Vendor Plugin Service Factory

Factory for creating the vendor plugin components with real dependencies.
This is the ONLY module that imports concrete implementations.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from core.config import TicketsConfig, get_settings
from core.logger import setup_service_logger

from .clients import VendorApiClient
from .default_plugins import build_default_plugins
from .event_aggregator import EventAggregator
from .plugin_registry import PluginRegistry
from .protocols import ClockProtocol, IdentityProviderProtocol
from .purchase_service import TicketPurchaseService
from .reward_engine import LoyaltyRewardEngine

logger = logging.getLogger(__name__)


@dataclass
class VendorPluginService:
    """The wired-up vendor plugin components sharing one registry"""

    registry: PluginRegistry
    engine: LoyaltyRewardEngine
    aggregator: EventAggregator
    client: VendorApiClient
    sol_usd_rate: float

    def purchase_service(self, identity: IdentityProviderProtocol) -> TicketPurchaseService:
        return TicketPurchaseService(
            aggregator=self.aggregator,
            identity=identity,
            sol_usd_rate=self.sol_usd_rate,
        )

    async def close(self) -> None:
        await self.client.close()


def create_vendor_plugin_service(
    config: Optional[TicketsConfig] = None,
    http_client: Optional[httpx.AsyncClient] = None,
    clock: Optional[ClockProtocol] = None,
) -> VendorPluginService:
    """
    Create the vendor plugin components with all real dependencies

    Args:
        config: Optional config (global settings if not provided)
        http_client: Optional pre-built httpx client for the vendor API client
        clock: Optional clock shared by the engine and aggregator

    Returns:
        VendorPluginService with the default plugins registered
    """
    if config is None:
        config = get_settings()

    setup_service_logger(__package__, config=config.logging)

    registry = PluginRegistry(build_default_plugins(clock() if clock else None))
    for plugin in registry.get_all_plugins():
        api_key = config.vendors.get_api_key(plugin.id)
        if api_key:
            registry.configure_plugin(plugin.id, {"api_key": api_key})

    client = VendorApiClient(timeout=config.vendors.http_timeout, client=http_client)

    logger.info(f"VendorPluginService created with {len(registry)} plugins")

    return VendorPluginService(
        registry=registry,
        engine=LoyaltyRewardEngine(registry, clock=clock),
        aggregator=EventAggregator(registry, client, clock=clock),
        client=client,
        sol_usd_rate=config.vendors.sol_usd_rate,
    )


__all__ = ["VendorPluginService", "create_vendor_plugin_service"]
