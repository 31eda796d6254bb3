"""
Embedded Wallet

Ed25519 keypair for the user's embedded wallet, plus the mock balance
provider used in place of a chain connection.
"""

import hashlib
import logging
from typing import Optional

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from .models import StoredWallet

logger = logging.getLogger(__name__)

LAMPORTS_PER_SOL = 1_000_000_000
SOL_MINT = "So11111111111111111111111111111111111111112"


class EmbeddedWallet:
    """Ed25519 keypair; the hex public key is the wallet address"""

    def __init__(self, private_key: Ed25519PrivateKey):
        self._private_key = private_key
        self.public_key = private_key.public_key().public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw,
        ).hex()

    @classmethod
    def generate(cls) -> "EmbeddedWallet":
        wallet = cls(Ed25519PrivateKey.generate())
        logger.info(f"Created embedded wallet: {wallet.public_key}")
        return wallet

    @classmethod
    def from_stored(cls, stored: StoredWallet) -> "EmbeddedWallet":
        """Restore a persisted keypair; the public key must match the secret"""
        wallet = cls(Ed25519PrivateKey.from_private_bytes(bytes(stored.secret_key)))
        if wallet.public_key != stored.public_key:
            raise ValueError("Stored wallet public key does not match its secret key")
        return wallet

    @property
    def secret_key(self) -> bytes:
        return self._private_key.private_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PrivateFormat.Raw,
            encryption_algorithm=serialization.NoEncryption(),
        )

    def to_stored(self) -> StoredWallet:
        # TODO: encrypt the secret key before it reaches session storage
        return StoredWallet(public_key=self.public_key, secret_key=list(self.secret_key))

    def sign(self, message: bytes) -> bytes:
        return self._private_key.sign(message)


class MockBalanceProvider:
    """Deterministic per-address balances, no network"""

    def __init__(self, default_balance_sol: Optional[float] = None):
        self.default_balance_sol = default_balance_sol

    async def get_balance(self, address: str) -> int:
        if self.default_balance_sol is not None:
            return int(self.default_balance_sol * LAMPORTS_PER_SOL)
        # Between 1 and 10 SOL, stable for a given address
        digest = hashlib.sha256(address.encode()).digest()
        return LAMPORTS_PER_SOL + int.from_bytes(digest[:4], "big") % (9 * LAMPORTS_PER_SOL)


__all__ = [
    "EmbeddedWallet",
    "MockBalanceProvider",
    "LAMPORTS_PER_SOL",
    "SOL_MINT",
]
