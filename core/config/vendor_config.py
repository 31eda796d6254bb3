#!/usr/bin/env python3
"""Vendor plugin configuration

Credentials and HTTP settings for the external ticketing partners
(Humanitix, Citizen Ticket, TickEthic, Ticketebo).
"""
import os
from dataclasses import dataclass, field
from typing import Dict, Optional

def _float(val: str, default: float) -> float:
    try:
        return float(val) if val else default
    except ValueError:
        return default


# Environment variable holding each vendor's API key
VENDOR_API_KEY_ENV = {
    "humanitix": "HUMANITIX_API_KEY",
    "citizen-ticket": "CITIZEN_TICKET_API_KEY",
    "tickethic": "TICKETHIC_API_KEY",
    "ticketebo": "TICKETEBO_API_KEY",
}


@dataclass
class VendorConfig:
    """Vendor API settings"""

    # httpx timeout for every vendor call (seconds)
    http_timeout: float = 10.0

    # vendor id -> API key
    api_keys: Dict[str, str] = field(default_factory=dict)

    # USD price of one SOL used for wallet balance checks
    sol_usd_rate: float = 23.45

    def get_api_key(self, vendor_id: str) -> Optional[str]:
        return self.api_keys.get(vendor_id)

    @classmethod
    def from_env(cls) -> 'VendorConfig':
        """Load vendor configuration from environment variables"""
        api_keys = {}
        for vendor_id, env_name in VENDOR_API_KEY_ENV.items():
            value = os.getenv(env_name)
            if value:
                api_keys[vendor_id] = value

        return cls(
            http_timeout=_float(os.getenv("VENDOR_HTTP_TIMEOUT", ""), 10.0),
            api_keys=api_keys,
            sol_usd_rate=_float(os.getenv("SOL_USD_RATE", ""), 23.45),
        )
