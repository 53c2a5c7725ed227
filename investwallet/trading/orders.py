"""Order service for the investment wallet.

This module provides a non-raising order entry layer including:
- Order status and rejection reason enums
- OrderResult dataclass for order outcomes
- OrderService for submitting buy/sell orders against a wallet
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Dict, Optional, Type

from .errors import (
    InsufficientFundsError,
    InvalidArgumentError,
    OfferPriceRejectedError,
    UnknownAssetError,
    WalletError,
)
from .models import Acquisition, Asset
from .wallet import IWallet

logger = logging.getLogger(__name__)


class OrderStatus(Enum):
    """Status of an order after submission."""
    EXECUTED = "executed"
    REJECTED = "rejected"


class OrderRejectionReason(Enum):
    """Reason for order rejection."""
    INVALID_ARGUMENT = "invalid_argument"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    UNKNOWN_ASSET = "unknown_asset"
    OFFER_PRICE_REJECTED = "offer_price_rejected"


_REASONS: Dict[Type[WalletError], OrderRejectionReason] = {
    InvalidArgumentError: OrderRejectionReason.INVALID_ARGUMENT,
    InsufficientFundsError: OrderRejectionReason.INSUFFICIENT_FUNDS,
    UnknownAssetError: OrderRejectionReason.UNKNOWN_ASSET,
    OfferPriceRejectedError: OrderRejectionReason.OFFER_PRICE_REJECTED,
}


@dataclass
class OrderResult:
    """Result of an order submission.

    Attributes:
        status: The status of the order (EXECUTED, REJECTED)
        acquisition: The acquisition record if a buy was executed
        balance: Cash balance returned by an executed sell
        rejection_reason: The reason for rejection if order was rejected
        message: Human-readable message describing the result
    """
    status: OrderStatus
    acquisition: Optional[Acquisition] = None
    balance: Optional[Decimal] = None
    rejection_reason: Optional[OrderRejectionReason] = None
    message: str = ""

    @property
    def executed(self) -> bool:
        return self.status is OrderStatus.EXECUTED


def _rejected(error: WalletError) -> OrderResult:
    reason = next(
        (r for cls, r in _REASONS.items() if isinstance(error, cls)),
        None,
    )
    if reason is None:
        raise error
    return OrderResult(
        status=OrderStatus.REJECTED,
        rejection_reason=reason,
        message=str(error),
    )


class OrderService:
    """Order entry for a wallet that reports outcomes instead of raising.

    Wallet failures become REJECTED results; the wallet is left untouched
    and nothing is retried.
    """

    def __init__(self, wallet: IWallet) -> None:
        """Initialize order service.

        Args:
            wallet: Wallet the orders execute against
        """
        self._wallet = wallet

    def submit_buy(self, asset: Asset, quantity: int, max_price: Decimal) -> OrderResult:
        """Submit a buy order.

        Args:
            asset: Asset to buy
            quantity: Units to buy
            max_price: Highest acceptable ask price per unit

        Returns:
            OrderResult with EXECUTED status and the acquisition if successful,
            REJECTED status with reason otherwise
        """
        try:
            acquisition = self._wallet.buy(asset, quantity, max_price)
        except WalletError as e:
            logger.warning(f"Buy order rejected: {e}")
            return _rejected(e)
        return OrderResult(
            status=OrderStatus.EXECUTED,
            acquisition=acquisition,
            message=f"Bought {quantity} {asset.id} at {acquisition.price}",
        )

    def submit_sell(self, asset: Asset, quantity: int, min_price: Decimal) -> OrderResult:
        """Submit a sell order.

        Args:
            asset: Asset to sell
            quantity: Units to sell
            min_price: Lowest acceptable bid price per unit

        Returns:
            OrderResult with EXECUTED status and the new balance if successful,
            REJECTED status with reason otherwise
        """
        try:
            balance = self._wallet.sell(asset, quantity, min_price)
        except WalletError as e:
            logger.warning(f"Sell order rejected: {e}")
            return _rejected(e)
        return OrderResult(
            status=OrderStatus.EXECUTED,
            balance=balance,
            message=f"Sold {quantity} {asset.id}",
        )
