#!/usr/bin/env python3
"""Application configuration

Main configuration for Civic Impact Tickets.
Combines all sub-configs.
"""
import os
from dataclasses import dataclass, field

from .logging_config import LoggingConfig
from .vendor_config import VendorConfig


@dataclass
class TicketsConfig:
    """Top-level configuration"""

    environment: str = "development"
    debug: bool = False

    # Session persistence; empty keeps the session in memory only
    session_storage_path: str = ""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    vendors: VendorConfig = field(default_factory=VendorConfig)

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @classmethod
    def from_env(cls) -> 'TicketsConfig':
        """Load configuration from environment variables"""
        env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
        return cls(
            environment=env,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            session_storage_path=os.getenv("SESSION_STORAGE_PATH", ""),
            logging=LoggingConfig.from_env(),
            vendors=VendorConfig.from_env(),
        )
