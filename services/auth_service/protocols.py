"""
Auth Service Protocols

Defines interfaces for dependency injection and testing.
"""

from typing import Optional, Protocol


# ====================
# Session Storage Protocol
# ====================


class SessionStorageProtocol(Protocol):
    """Key/value string storage that survives app restarts"""

    async def get_item(self, key: str) -> Optional[str]:
        """Stored value, or None"""
        ...

    async def set_item(self, key: str, value: str) -> None:
        """Store a value"""
        ...

    async def remove_item(self, key: str) -> None:
        """Delete a value (no-op when missing)"""
        ...


# ====================
# Balance Provider Protocol
# ====================


class BalanceProviderProtocol(Protocol):
    """Source of on-chain balances"""

    async def get_balance(self, address: str) -> int:
        """Balance in lamports"""
        ...


# ====================
# Custom Exceptions
# ====================


class AuthServiceError(Exception):
    """Base exception for auth service errors"""
    pass


class SignInError(AuthServiceError):
    """Raised when sign in fails"""
    pass


class WalletUnavailableError(AuthServiceError):
    """Raised when an operation needs a wallet and none is held"""
    pass


__all__ = [
    "SessionStorageProtocol",
    "BalanceProviderProtocol",
    "AuthServiceError",
    "SignInError",
    "WalletUnavailableError",
]
