"""
Event Sources

Ways of obtaining a vendor's events:

- RemoteEventSource: the vendor's HTTP API
- MockEventSource: deterministic demo events generated from the plugin
- FallbackEventSource: tries a primary source and falls back to a secondary
  one on any failure, so a vendor outage never surfaces to the caller
"""

import logging
from datetime import timedelta
from typing import List, Optional

from .models import Event, VendorPlugin, utc_now
from .protocols import ClockProtocol, EventSourceProtocol, VendorApiClientProtocol

logger = logging.getLogger(__name__)

# Number of events MockEventSource generates per vendor
MOCK_EVENTS_PER_VENDOR = 2


class RemoteEventSource:
    """Events from the vendor's own API"""

    def __init__(self, client: VendorApiClientProtocol):
        self.client = client

    async def fetch_events(self, plugin: VendorPlugin) -> List[Event]:
        events = await self.client.get_events(plugin)
        logger.debug(f"Fetched {len(events)} events from {plugin.name}")
        return events


class MockEventSource:
    """Demo events parameterized by the vendor's name and impact"""

    def __init__(self, clock: Optional[ClockProtocol] = None):
        self.clock = clock or utc_now

    async def fetch_events(self, plugin: VendorPlugin) -> List[Event]:
        return self.build_events(plugin)

    def build_events(self, plugin: VendorPlugin) -> List[Event]:
        now = self.clock()
        impact = plugin.social_impact
        return [
            Event(
                id=f"{plugin.id}-event-1",
                name=f"Charity Concert via {plugin.name}",
                description=f"A benefit concert supporting {impact.beneficiary}",
                date=now + timedelta(days=7),
                venue="Community Arts Center",
                organizer=plugin.name,
                image_url="https://images.unsplash.com/photo-1493225457124-a3eb161ffa5f?w=800&h=600&fit=crop",
                price=35,
                max_capacity=500,
                tickets_sold=120,
                is_anti_scalping_enabled=True,
                loyalty_points_reward=10,
                vendor_id=plugin.id,
                social_impact=impact,
            ),
            Event(
                id=f"{plugin.id}-event-2",
                name=f"Sustainable Tech Conference via {plugin.name}",
                description=f"Technology for good conference with {impact.type.value} impact",
                date=now + timedelta(days=14),
                venue="Green Convention Center",
                organizer=plugin.name,
                image_url="https://images.unsplash.com/photo-1517180102446-f3ece451e9d8?w=800&h=600&fit=crop",
                price=85,
                max_capacity=300,
                tickets_sold=85,
                is_anti_scalping_enabled=True,
                loyalty_points_reward=25,
                vendor_id=plugin.id,
                social_impact=impact,
            ),
        ]


class FallbackEventSource:
    """Primary source with a fallback that is used on any primary failure"""

    def __init__(self, primary: EventSourceProtocol, fallback: MockEventSource):
        self.primary = primary
        self.fallback = fallback

    async def fetch_events(self, plugin: VendorPlugin) -> List[Event]:
        try:
            return await self.primary.fetch_events(plugin)
        except Exception as e:
            logger.warning(f"Failed to fetch events from {plugin.name}, using mock data: {e}")
            return self.fallback.build_events(plugin)


__all__ = [
    "MOCK_EVENTS_PER_VENDOR",
    "RemoteEventSource",
    "MockEventSource",
    "FallbackEventSource",
]
