"""
Base HTTP Client for External Vendor APIs

Shared httpx client management for the vendor integrations: default
headers, bearer authentication, timeouts and lifecycle.
"""

import httpx
import logging
from typing import Optional, Dict, Any
from abc import ABC

logger = logging.getLogger(__name__)


class BaseServiceClient(ABC):
    """
    Base class for clients of external HTTP APIs

    Handles:
    1. HTTP client management
    2. Bearer token authentication
    3. Timeout control

    Example:
        class VendorApiClient(BaseServiceClient):
            client_name = "vendor_api"

            async def get_events(self, plugin):
                response = await self.get(f"{plugin.api_endpoint}/events",
                                          token=plugin.configuration.api_key)
                return response.json()
    """

    # Subclasses must define this
    client_name: str = None  # e.g. "vendor_api"

    def __init__(
        self,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None
    ):
        """
        Initialize the client

        Args:
            timeout: Request timeout in seconds
            client: Pre-built AsyncClient (tests inject a mock here)
        """
        if not self.client_name:
            raise ValueError(f"{self.__class__.__name__} must define 'client_name'")

        self.timeout = timeout
        self.client = client or httpx.AsyncClient(
            timeout=timeout,
            headers=self._build_default_headers()
        )

        logger.debug(f"Initialized {self.client_name} client (timeout={timeout}s)")

    def _build_default_headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "User-Agent": f"civic-impact-tickets/{self.client_name}"
        }

    @staticmethod
    def _auth_headers(token: Optional[str]) -> Dict[str, str]:
        """Bearer header; the vendors expect the header even without a key"""
        return {
            "Authorization": f"Bearer {token or ''}".rstrip(),
            "Content-Type": "application/json",
        }

    async def close(self):
        """Close HTTP client"""
        await self.client.aclose()
        logger.debug(f"Closed {self.client_name} client")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    # ========================================
    # HTTP helpers
    # ========================================

    async def get(
        self,
        url: str,
        token: Optional[str] = None,
        params: Optional[Dict[str, Any]] = None
    ) -> httpx.Response:
        """GET request"""
        return await self.client.get(url, params=params, headers=self._auth_headers(token))

    async def post(
        self,
        url: str,
        token: Optional[str] = None,
        json: Optional[Dict[str, Any]] = None
    ) -> httpx.Response:
        """POST request"""
        return await self.client.post(url, json=json, headers=self._auth_headers(token))


__all__ = ["BaseServiceClient"]
