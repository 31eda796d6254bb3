"""
Ticket Purchase Service

Purchase flow for a single event: identity and wallet preconditions, the
anti-scalping gate, a balance check, then ticket issuance through the
event's vendor (or the platform for native events).
"""

import logging
import secrets
from typing import Union

from services.auth_service.protocols import WalletUnavailableError

from .event_aggregator import NATIVE_VENDOR_ID, EventAggregator
from .models import Event, PurchaseResult, TicketType, utc_now
from .protocols import (
    IdentityProviderProtocol,
    InsufficientBalanceError,
    VerificationRequiredError,
)

logger = logging.getLogger(__name__)

DEFAULT_SOL_USD_RATE = 23.45
MAX_TICKETS_PER_PURCHASE = 10


def _mock_transaction_hash() -> str:
    return "0x" + secrets.token_hex(20)


class TicketPurchaseService:
    """Validates and executes ticket purchases"""

    def __init__(
        self,
        aggregator: EventAggregator,
        identity: IdentityProviderProtocol,
        sol_usd_rate: float = DEFAULT_SOL_USD_RATE,
    ):
        """
        Initialize with injected dependencies

        Args:
            aggregator: Routes purchases to vendor plugins
            identity: Current user, identity verification and wallet
            sol_usd_rate: USD price of one SOL
        """
        if sol_usd_rate <= 0:
            raise ValueError("sol_usd_rate must be positive")
        self.aggregator = aggregator
        self.identity = identity
        self.sol_usd_rate = sol_usd_rate

    def price_in_sol(self, usd_amount: float) -> float:
        return usd_amount / self.sol_usd_rate

    async def purchase_ticket(
        self,
        event: Event,
        ticket_type: Union[TicketType, str] = TicketType.GENERAL,
        quantity: int = 1,
    ) -> PurchaseResult:
        """
        Purchase tickets for an event

        The ticket type scales both the unit price and the loyalty points
        earned per ticket.

        Raises:
            ValueError: unknown ticket type, or quantity outside 1..10
            VerificationRequiredError: signed out, or anti-scalping check failed
            WalletUnavailableError: no wallet data for the user
            InsufficientBalanceError: wallet cannot cover the total price
            PluginNotFoundError: the event's vendor is unknown or inactive
        """
        ticket_type = TicketType(ticket_type)
        if not 1 <= quantity <= MAX_TICKETS_PER_PURCHASE:
            raise ValueError(f"quantity must be between 1 and {MAX_TICKETS_PER_PURCHASE}")

        user = self.identity.get_current_user()
        if not user:
            raise VerificationRequiredError("Please sign in to purchase tickets")

        wallet = await self.identity.get_wallet_data()
        if not wallet:
            raise WalletUnavailableError("Wallet not available")

        if event.is_anti_scalping_enabled:
            if not await self.identity.verify_identity():
                raise VerificationRequiredError(
                    "This event requires identity verification to prevent scalping"
                )

        total_price = event.price * ticket_type.price_multiplier * quantity
        required_sol = self.price_in_sol(total_price)
        if required_sol > wallet.balance:
            raise InsufficientBalanceError(
                f"Insufficient balance: {required_sol:.4f} SOL required, {wallet.balance:.4f} SOL available",
                available=wallet.balance,
                required=required_sol,
            )

        vendor_id = event.vendor_id or NATIVE_VENDOR_ID
        if vendor_id == NATIVE_VENDOR_ID:
            ticket = self.aggregator.issue_native_ticket(event, user.id, ticket_type.value)
        else:
            ticket = await self.aggregator.purchase_ticket_through_plugin(
                vendor_id, event.id, user.id, ticket_type.value
            )

        result = PurchaseResult(
            ticket=ticket,
            ticket_type=ticket_type,
            quantity=quantity,
            total_price=total_price,
            # fractional points are truncated
            loyalty_points_earned=int(
                event.loyalty_points_reward * ticket_type.points_multiplier * quantity
            ),
            transaction_hash=_mock_transaction_hash(),
            purchased_at=utc_now(),
        )

        logger.info(
            f"User {user.id} purchased {quantity} x {ticket_type.value} for {event.id} "
            f"via {vendor_id}, earned {result.loyalty_points_earned} points"
        )
        return result


__all__ = ["TicketPurchaseService", "DEFAULT_SOL_USD_RATE", "MAX_TICKETS_PER_PURCHASE"]
