"""
Auth Service Models

User session and embedded wallet data models.
"""

from typing import Dict, Any, List
from datetime import datetime, timezone
from pydantic import BaseModel, Field


class User(BaseModel):
    """Signed-in user"""
    id: str = Field(..., min_length=1)
    email: str
    name: str
    wallet_address: str
    civic_user_id: str
    is_verified: bool = False
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class StoredWallet(BaseModel):
    """Wallet keypair as persisted in session storage"""
    public_key: str
    secret_key: List[int] = Field(..., min_length=32, max_length=32)


class WalletToken(BaseModel):
    mint: str
    amount: int = Field(..., ge=0)
    decimals: int = Field(default=9, ge=0)
    symbol: str


class WalletNft(BaseModel):
    mint: str
    name: str
    image: str = ""
    metadata: Dict[str, Any] = Field(default_factory=dict)


class WalletData(BaseModel):
    """Wallet address, balance and holdings"""
    address: str
    balance: float = Field(..., ge=0, description="Balance in SOL")
    tokens: List[WalletToken] = Field(default_factory=list)
    nfts: List[WalletNft] = Field(default_factory=list)


__all__ = [
    "User",
    "StoredWallet",
    "WalletToken",
    "WalletNft",
    "WalletData",
]
