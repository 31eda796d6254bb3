#!/usr/bin/env python3
"""
Core Module for Civic Impact Tickets

Shared components used by the services.

COMPONENTS:
    - config/: Dataclass configuration loaded from the environment
    - logger.py: Service logger setup
    - service_client_base.py: Base httpx client for external vendor APIs

USAGE:
    from core.config import get_settings
    from core.logger import setup_service_logger

    settings = get_settings()
    logger = setup_service_logger("vendor_plugin_service")
"""

__version__ = "1.0.0"
