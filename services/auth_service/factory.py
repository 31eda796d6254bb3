"""
Auth Service Factory

Factory for creating AuthSessionStore with real dependencies.
This is the ONLY module that imports concrete implementations.
"""

import logging
from typing import Optional

from core.config import TicketsConfig, get_settings
from core.logger import setup_service_logger

from .auth_session_store import AuthSessionStore
from .session_storage import FileSessionStorage, InMemorySessionStorage
from .wallet import MockBalanceProvider

logger = logging.getLogger(__name__)


def create_auth_session_store(config: Optional[TicketsConfig] = None) -> AuthSessionStore:
    """
    Create AuthSessionStore with all real dependencies

    Args:
        config: Optional config (global settings if not provided)

    Returns:
        AuthSessionStore; call initialize() to restore a persisted session
    """
    if config is None:
        config = get_settings()

    setup_service_logger(__package__, config=config.logging)

    if config.session_storage_path:
        storage = FileSessionStorage(config.session_storage_path)
    else:
        storage = InMemorySessionStorage()

    logger.info(f"AuthSessionStore created with {type(storage).__name__}")

    return AuthSessionStore(
        storage=storage,
        balance_provider=MockBalanceProvider(),
    )


__all__ = ["create_auth_session_store"]
