"""
Vendor API Client

Async HTTP client for the vendor plugin endpoints. Every endpoint answers
with the PluginApiResponse envelope; anything other than a successful
envelope carrying data is reported as VendorApiError.
"""

import logging
from datetime import datetime, timezone
from typing import Any, List, Optional

import httpx
from pydantic import ValidationError

from core.service_client_base import BaseServiceClient

from ..models import (
    Event,
    ImpactMetrics,
    PluginApiResponse,
    Ticket,
    VendorPlugin,
)
from ..protocols import VendorApiError

logger = logging.getLogger(__name__)


class VendorApiClient(BaseServiceClient):
    """HTTP client for vendor plugin APIs"""

    client_name = "vendor_api"

    async def _request_envelope(
        self,
        plugin: VendorPlugin,
        method: str,
        path: str,
        json: Optional[dict] = None,
    ) -> PluginApiResponse:
        url = f"{plugin.api_endpoint.rstrip('/')}{path}"
        token = plugin.configuration.api_key
        try:
            if method == "POST":
                response = await self.post(url, token=token, json=json)
            else:
                response = await self.get(url, token=token)
            response.raise_for_status()
            envelope = PluginApiResponse.model_validate(response.json())
        except httpx.HTTPStatusError as e:
            raise VendorApiError(
                f"{plugin.name} returned HTTP {e.response.status_code} for {path}",
                vendor_id=plugin.id,
                status_code=e.response.status_code,
            ) from e
        except (httpx.HTTPError, ValidationError, ValueError) as e:
            raise VendorApiError(
                f"{plugin.name} request to {path} failed: {e}",
                vendor_id=plugin.id,
            ) from e

        if not envelope.success or envelope.data is None:
            raise VendorApiError(
                envelope.error or f"{plugin.name} request to {path} was not successful",
                vendor_id=plugin.id,
            )
        return envelope

    async def get_events(self, plugin: VendorPlugin) -> List[Event]:
        """Fetch events, stamped with the vendor id and social impact"""
        envelope = await self._request_envelope(plugin, "GET", "/events")
        try:
            events = [Event.model_validate(item) for item in envelope.data]
        except (ValidationError, TypeError) as e:
            raise VendorApiError(f"{plugin.name} sent malformed events: {e}", vendor_id=plugin.id) from e

        return [
            event.model_copy(update={"vendor_id": plugin.id, "social_impact": plugin.social_impact})
            for event in events
        ]

    async def purchase_ticket(
        self,
        plugin: VendorPlugin,
        event_id: str,
        user_id: str,
        ticket_type: str = "general"
    ) -> Ticket:
        """Purchase a ticket; the vendor's social impact is attached to the ticket"""
        payload = {
            "eventId": event_id,
            "userId": user_id,
            "ticketType": ticket_type,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        envelope = await self._request_envelope(plugin, "POST", "/tickets/purchase", json=payload)
        try:
            ticket = Ticket.model_validate(envelope.data)
        except (ValidationError, TypeError) as e:
            raise VendorApiError(f"{plugin.name} sent a malformed ticket: {e}", vendor_id=plugin.id) from e

        if envelope.social_impact:
            logger.info(
                f"Social impact tracked for {plugin.id}: ticket={ticket.id} "
                f"message={envelope.social_impact.message!r}"
            )
        return ticket.model_copy(update={"social_impact": plugin.social_impact})

    async def get_impact_metrics(self, plugin: VendorPlugin) -> Optional[ImpactMetrics]:
        """Live impact metrics for a vendor"""
        envelope = await self._request_envelope(plugin, "GET", "/impact/metrics")
        data: Any = envelope.data
        try:
            return ImpactMetrics.model_validate(data)
        except ValidationError as e:
            raise VendorApiError(f"{plugin.name} sent malformed impact metrics: {e}", vendor_id=plugin.id) from e


__all__ = ["VendorApiClient"]
