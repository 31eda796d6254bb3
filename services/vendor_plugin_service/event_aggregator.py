"""
Event Aggregator

Unified, date-ordered event listing across active vendor plugins and the
platform's native events, plus ticket purchases and impact figures that go
through the same vendor integrations.

Vendor failures are never surfaced: events, tickets and impact metrics all
fall back to deterministic local data.
"""

import logging
import uuid
from datetime import datetime, timedelta
from typing import Callable, List, Optional

from .default_plugins import build_native_events
from .event_sources import FallbackEventSource, MockEventSource, RemoteEventSource
from .models import (
    Event,
    ImpactMetrics,
    ImpactType,
    SocialImpactSummary,
    Ticket,
    TicketAttribute,
    TicketMetadata,
    VendorPlugin,
    utc_now,
)
from .plugin_registry import PluginRegistry
from .protocols import (
    ClockProtocol,
    EventSourceProtocol,
    PluginNotFoundError,
    VendorApiClientProtocol,
)

logger = logging.getLogger(__name__)

# Vendor id used for tickets the platform issues itself
NATIVE_VENDOR_ID = "civic-platform"


class EventAggregator:
    """Merges vendor and native events; routes purchases to vendors"""

    def __init__(
        self,
        registry: PluginRegistry,
        client: VendorApiClientProtocol,
        event_source: Optional[EventSourceProtocol] = None,
        native_events: Optional[Callable[[datetime], List[Event]]] = None,
        clock: Optional[ClockProtocol] = None,
    ):
        """
        Initialize the aggregator with injected dependencies

        Args:
            registry: Plugin registry shared with the reward engine
            client: Vendor API client (purchases, impact metrics)
            event_source: Where vendor events come from; must not raise
            native_events: Builds the native events for a given "now"
            clock: Returns the current timezone-aware time
        """
        self.registry = registry
        self.client = client
        self.clock = clock or utc_now
        self.mock_source = MockEventSource(clock=self.clock)
        self.event_source = event_source or FallbackEventSource(
            primary=RemoteEventSource(client),
            fallback=self.mock_source,
        )
        self.native_events = native_events or build_native_events

        logger.info("EventAggregator initialized with dependency injection")

    def _require_active_plugin(self, plugin_id: str) -> VendorPlugin:
        plugin = self.registry.get_plugin(plugin_id)
        if not plugin or not plugin.is_active:
            raise PluginNotFoundError(f"Plugin {plugin_id} not found or inactive", plugin_id=plugin_id)
        return plugin

    # ====================
    # Events
    # ====================

    async def fetch_vendor_events(self, plugin_id: str) -> List[Event]:
        """Events of one active vendor (mock events if its API fails)"""
        plugin = self._require_active_plugin(plugin_id)
        return await self._fetch_or_mock(plugin)

    async def get_all_events(self) -> List[Event]:
        """All events of active vendors plus native events, ascending by date"""
        all_events: List[Event] = []

        for plugin in self.registry.get_active_plugins():
            all_events.extend(await self._fetch_or_mock(plugin))

        all_events.extend(self.native_events(self.clock()))

        # list.sort is stable, so equal dates keep their input order
        all_events.sort(key=lambda event: event.date)

        logger.debug(f"Aggregated {len(all_events)} events")
        return all_events

    async def _fetch_or_mock(self, plugin: VendorPlugin) -> List[Event]:
        # The event source already falls back; this guards custom sources too
        try:
            return await self.event_source.fetch_events(plugin)
        except Exception as e:
            logger.warning(f"Failed to load events from {plugin.name}, using mock data: {e}")
            return self.mock_source.build_events(plugin)

    # ====================
    # Tickets
    # ====================

    async def purchase_ticket_through_plugin(
        self,
        plugin_id: str,
        event_id: str,
        user_id: str,
        ticket_type: str = "general",
    ) -> Ticket:
        """Purchase through a vendor; a mock ticket replaces any vendor failure"""
        plugin = self._require_active_plugin(plugin_id)
        try:
            return await self.client.purchase_ticket(plugin, event_id, user_id, ticket_type)
        except Exception as e:
            logger.warning(f"Failed to purchase ticket through {plugin.name}, issuing mock ticket: {e}")
            return self._create_mock_ticket(plugin, event_id, user_id, ticket_type)

    def _create_mock_ticket(
        self,
        plugin: VendorPlugin,
        event_id: str,
        user_id: str,
        ticket_type: str,
    ) -> Ticket:
        ticket_ref = uuid.uuid4().hex[:12]
        return Ticket(
            id=f"{plugin.id}-ticket-{ticket_ref}",
            event_id=event_id,
            event_name=f"Event via {plugin.name}",
            event_date=self.clock() + timedelta(days=7),
            venue="Demo Venue",
            price=50,
            ticket_type=ticket_type,
            user_id=user_id,
            qr_code=f"QR-{plugin.id}-{ticket_ref}",
            metadata=TicketMetadata(
                description=f"Ticket purchased through {plugin.name}",
                image="https://example.com/ticket.png",
                attributes=[
                    TicketAttribute(trait_type="Vendor", value=plugin.name),
                    TicketAttribute(trait_type="Social Impact", value=plugin.social_impact.type.value),
                    TicketAttribute(trait_type="Beneficiary", value=plugin.social_impact.beneficiary),
                ],
            ),
            social_impact=plugin.social_impact,
        )

    def issue_native_ticket(self, event: Event, user_id: str, ticket_type: str = "general") -> Ticket:
        """Ticket for a platform event that no vendor sells"""
        ticket_ref = uuid.uuid4().hex[:12]
        attributes = [TicketAttribute(trait_type="Organizer", value=event.organizer or "Civic Impact")]
        if event.social_impact:
            attributes.append(TicketAttribute(trait_type="Social Impact", value=event.social_impact.type.value))
        return Ticket(
            id=f"{NATIVE_VENDOR_ID}-ticket-{ticket_ref}",
            event_id=event.id,
            event_name=event.name,
            event_date=event.date,
            venue=event.venue,
            price=event.price,
            ticket_type=ticket_type,
            user_id=user_id,
            qr_code=f"QR-{NATIVE_VENDOR_ID}-{ticket_ref}",
            metadata=TicketMetadata(
                description=event.description,
                image=event.image_url or "",
                attributes=attributes,
            ),
            social_impact=event.social_impact,
        )

    # ====================
    # Social Impact
    # ====================

    async def get_plugin_impact_metrics(self, plugin_id: str) -> ImpactMetrics:
        """Live metrics from the vendor, or the plugin's static metrics"""
        plugin = self.registry.get_plugin(plugin_id)
        if not plugin:
            raise PluginNotFoundError(f"Plugin {plugin_id} not found", plugin_id=plugin_id)

        try:
            metrics = await self.client.get_impact_metrics(plugin)
        except Exception as e:
            logger.warning(f"Failed to fetch impact metrics for {plugin.name}: {e}")
            metrics = None
        return metrics or plugin.social_impact.impact_metrics

    def get_aggregated_social_impact(self) -> SocialImpactSummary:
        """Impact totals across active plugins"""
        active_plugins = self.registry.get_active_plugins()

        total_trees_planted = 0
        total_money_donated = 0.0
        carbon_offset_programs = 0
        total_rewards_available = 0
        impact_types: List[ImpactType] = []

        for plugin in active_plugins:
            impact = plugin.social_impact
            if impact.trees_planted:
                total_trees_planted += impact.trees_planted
            if impact.amount_donated:
                total_money_donated += impact.amount_donated
            if impact.type == ImpactType.CARBON_OFFSET:
                carbon_offset_programs += 1
            if plugin.reward_catalog:
                total_rewards_available += plugin.reward_catalog.reward_count
            if impact.type not in impact_types:
                impact_types.append(impact.type)

        return SocialImpactSummary(
            total_trees_planted=total_trees_planted,
            total_money_donated=total_money_donated,
            carbon_offset_programs=carbon_offset_programs,
            total_rewards_available=total_rewards_available,
            active_plugins=len(active_plugins),
            impact_types=impact_types,
        )


__all__ = ["EventAggregator", "NATIVE_VENDOR_ID"]
