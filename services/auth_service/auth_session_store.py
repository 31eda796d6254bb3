"""
Auth Session Store

Single current-user session with an embedded wallet. Sign-in is mocked:
any well-formed email yields a verified user and a fresh wallet keypair.
The session is persisted under two storage keys so it can be restored on
the next start.
"""

import logging
import re
import uuid
from typing import Optional

from pydantic import ValidationError

from .models import StoredWallet, User, WalletData, WalletToken
from .protocols import (
    BalanceProviderProtocol,
    SessionStorageProtocol,
    SignInError,
)
from .wallet import LAMPORTS_PER_SOL, SOL_MINT, EmbeddedWallet

logger = logging.getLogger(__name__)

USER_STORAGE_KEY = "civic_user"
WALLET_STORAGE_KEY = "civic_wallet"

GOOGLE_MOCK_EMAIL = "testuser@gmail.com"
PASSKEY_MOCK_EMAIL = "passkey@example.com"

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class AuthSessionStore:
    """Current user session and wallet"""

    def __init__(
        self,
        storage: SessionStorageProtocol,
        balance_provider: BalanceProviderProtocol,
    ):
        """
        Initialize with injected dependencies

        Args:
            storage: Where the session is persisted
            balance_provider: Wallet balance lookups
        """
        self.storage = storage
        self.balance_provider = balance_provider
        self.current_user: Optional[User] = None
        self.wallet: Optional[EmbeddedWallet] = None

    async def initialize(self) -> None:
        """Restore a persisted session, if any"""
        try:
            stored_user = await self.storage.get_item(USER_STORAGE_KEY)
            stored_wallet = await self.storage.get_item(WALLET_STORAGE_KEY)
            if not stored_user or not stored_wallet:
                return

            user = User.model_validate_json(stored_user)
            wallet = EmbeddedWallet.from_stored(StoredWallet.model_validate_json(stored_wallet))
            if wallet.public_key != user.wallet_address:
                logger.warning(f"Stored wallet does not belong to {user.email}; session not restored")
                return

            self.current_user = user
            self.wallet = wallet
            logger.info(f"Restored user session: {user.email}")
        except (ValidationError, ValueError) as e:
            logger.error(f"Failed to restore session: {e}")

    # ====================
    # Sign In / Out
    # ====================

    async def sign_in_with_email(self, email: str) -> User:
        """Mock Civic sign in: verified user plus a new embedded wallet"""
        email = (email or "").strip()
        if not EMAIL_PATTERN.match(email):
            raise SignInError(f"Invalid email address: {email!r}")

        civic_user_id = f"civic-{uuid.uuid4().hex[:16]}"
        wallet = EmbeddedWallet.generate()
        user = User(
            id=civic_user_id,
            email=email,
            name=email.split("@")[0],
            wallet_address=wallet.public_key,
            civic_user_id=civic_user_id,
            is_verified=True,
        )

        try:
            await self.storage.set_item(USER_STORAGE_KEY, user.model_dump_json())
            await self.storage.set_item(WALLET_STORAGE_KEY, wallet.to_stored().model_dump_json())
        except OSError as e:
            logger.error(f"Sign in failed: {e}")
            raise SignInError("Failed to sign in with Civic Auth") from e

        self.current_user = user
        self.wallet = wallet
        logger.info(f"User signed in successfully: {user.email}")
        return user

    async def sign_in_with_google(self) -> User:
        return await self.sign_in_with_email(GOOGLE_MOCK_EMAIL)

    async def sign_in_with_passkey(self) -> User:
        return await self.sign_in_with_email(PASSKEY_MOCK_EMAIL)

    async def sign_out(self) -> None:
        self.current_user = None
        self.wallet = None
        await self.storage.remove_item(USER_STORAGE_KEY)
        await self.storage.remove_item(WALLET_STORAGE_KEY)
        logger.info("User signed out successfully")

    # ====================
    # Session
    # ====================

    def get_current_user(self) -> Optional[User]:
        return self.current_user

    def is_authenticated(self) -> bool:
        return self.current_user is not None

    def get_wallet_public_key(self) -> Optional[str]:
        return self.wallet.public_key if self.wallet else None

    async def verify_identity(self) -> bool:
        """Anti-scalping identity check"""
        if not self.current_user:
            return False
        verified = self.current_user.is_verified
        logger.info(f"Identity verification: {'PASSED' if verified else 'FAILED'}")
        return verified

    async def get_wallet_data(self) -> Optional[WalletData]:
        """Wallet balance and holdings, or None without a wallet or on lookup failure"""
        if not self.wallet:
            return None

        try:
            lamports = await self.balance_provider.get_balance(self.wallet.public_key)
        except Exception as e:
            logger.error(f"Failed to get wallet data: {e}")
            return None

        return WalletData(
            address=self.wallet.public_key,
            balance=lamports / LAMPORTS_PER_SOL,
            tokens=[WalletToken(mint=SOL_MINT, amount=lamports, decimals=9, symbol="SOL")],
            nfts=[],
        )


__all__ = [
    "AuthSessionStore",
    "USER_STORAGE_KEY",
    "WALLET_STORAGE_KEY",
]
