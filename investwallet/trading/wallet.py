"""Investment wallet: cash balance, asset holdings and acquisition history."""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal
from types import MappingProxyType
from typing import TYPE_CHECKING, Dict, FrozenSet, List, Mapping, Optional, Tuple

from .errors import (
    InsufficientFundsError,
    InvalidArgumentError,
    OfferPriceRejectedError,
    UnknownAssetError,
)
from .models import Acquisition, Asset, Quote

if TYPE_CHECKING:
    from investwallet.data.quotes import IQuoteService

logger = logging.getLogger(__name__)


def _to_decimal(value, name: str) -> Decimal:
    """Convert a money amount to Decimal, rejecting non-numeric input."""
    if isinstance(value, bool) or value is None:
        raise InvalidArgumentError(f"{name} must be a number, got {value!r}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(str(value))
    else:
        raise InvalidArgumentError(f"{name} must be a number, got {value!r}")
    if not result.is_finite():
        raise InvalidArgumentError(f"{name} must be finite, got {value!r}")
    return result


def _require_asset(asset: Asset) -> None:
    if asset is None:
        raise InvalidArgumentError("Asset must not be None")


def _require_positive_quantity(quantity: int) -> None:
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
        raise InvalidArgumentError(f"Quantity must be a positive integer, got {quantity!r}")


def _require_positive_price(value, name: str) -> Decimal:
    price = _to_decimal(value, name)
    if price <= 0:
        raise InvalidArgumentError(f"{name} must be greater than zero, got {value!r}")
    return price


def _require_non_negative_cash(value) -> Decimal:
    cash = _to_decimal(value, "cash")
    if cash < 0:
        raise InvalidArgumentError(f"Negative cash: {value!r}")
    return cash


class IWallet(ABC):
    """Interface for investment wallet operations."""

    @abstractmethod
    def get_balance(self) -> Decimal:
        """Get current cash balance."""
        ...

    @abstractmethod
    def get_holdings(self) -> Mapping[Asset, int]:
        """Get a read-only snapshot of asset quantities held."""
        ...

    @abstractmethod
    def get_quantity(self, asset: Asset) -> int:
        """Get the quantity held of an asset (0 if not held)."""
        ...

    @abstractmethod
    def deposit(self, cash: Decimal) -> Decimal:
        """Add cash and return the new balance."""
        ...

    @abstractmethod
    def withdraw(self, cash: Decimal) -> Decimal:
        """Remove cash and return the new balance."""
        ...

    @abstractmethod
    def buy(self, asset: Asset, quantity: int, max_price: Decimal) -> Acquisition:
        """Buy at the current ask price if it does not exceed max_price."""
        ...

    @abstractmethod
    def sell(self, asset: Asset, quantity: int, min_price: Decimal) -> Decimal:
        """Sell at the current bid price if it is at least min_price."""
        ...

    @abstractmethod
    def get_valuation(self) -> Decimal:
        """Market value of all holdings."""
        ...

    @abstractmethod
    def get_asset_valuation(self, asset: Asset) -> Decimal:
        """Market value of a single holding."""
        ...

    @abstractmethod
    def get_most_valuable_asset(self) -> Optional[Asset]:
        """Held asset with the highest valuation, or None when nothing is held."""
        ...

    @abstractmethod
    def get_all_acquisitions(self) -> Tuple[Acquisition, ...]:
        """All acquisitions, oldest first."""
        ...

    @abstractmethod
    def get_last_n_acquisitions(self, n: int) -> FrozenSet[Acquisition]:
        """The n most recent acquisitions (unordered)."""
        ...


class InvestmentWallet(IWallet):
    """Single-owner wallet pricing every trade against a live quote service.

    Each public operation runs under one lock, so check-then-act
    sequences in buy/sell cannot interleave between threads. A failed
    operation raises before any state is touched.
    """

    def __init__(self, quote_service: IQuoteService, initial_balance: Decimal = Decimal("0")) -> None:
        """Initialize the wallet.

        Args:
            quote_service: Source of live bid/ask quotes
            initial_balance: Starting cash balance (default: 0)

        Raises:
            InvalidArgumentError: If quote_service is None or the balance is negative
        """
        if quote_service is None:
            raise InvalidArgumentError("Quote service must not be None")
        self._quote_service = quote_service
        self._balance = _require_non_negative_cash(initial_balance)
        self._holdings: Dict[Asset, int] = {}
        self._acquisitions: List[Acquisition] = []
        self._lock = threading.Lock()

    def get_balance(self) -> Decimal:
        """Get current cash balance."""
        with self._lock:
            return self._balance

    def get_holdings(self) -> Mapping[Asset, int]:
        """Get a read-only snapshot of asset quantities held."""
        with self._lock:
            return MappingProxyType(dict(self._holdings))

    def get_quantity(self, asset: Asset) -> int:
        """Get the quantity held of an asset (0 if not held)."""
        _require_asset(asset)
        with self._lock:
            return self._holdings.get(asset, 0)

    def deposit(self, cash: Decimal) -> Decimal:
        """Deposit cash.

        Args:
            cash: Amount to add, must be >= 0

        Returns:
            Cash balance after the deposit

        Raises:
            InvalidArgumentError: If cash is negative
        """
        amount = _require_non_negative_cash(cash)
        with self._lock:
            self._balance += amount
            logger.info(f"Deposited {amount}, balance {self._balance}")
            return self._balance

    def withdraw(self, cash: Decimal) -> Decimal:
        """Withdraw cash.

        Args:
            cash: Amount to remove, must be >= 0

        Returns:
            Cash balance after the withdrawal

        Raises:
            InvalidArgumentError: If cash is negative
            InsufficientFundsError: If the balance is lower than cash
        """
        amount = _require_non_negative_cash(cash)
        with self._lock:
            if self._balance < amount:
                logger.warning(f"Withdrawal of {amount} rejected, balance {self._balance}")
                raise InsufficientFundsError(
                    f"Insufficient balance: need {amount}, have {self._balance}"
                )
            self._balance -= amount
            logger.info(f"Withdrew {amount}, balance {self._balance}")
            return self._balance

    def buy(self, asset: Asset, quantity: int, max_price: Decimal) -> Acquisition:
        """Buy an asset at its current ask price.

        Checks run in order: arguments, quote availability, price ceiling,
        cash. The first failing check is raised.

        Args:
            asset: Asset to buy
            quantity: Units to buy, must be > 0
            max_price: Highest acceptable ask price per unit, must be > 0

        Returns:
            The acquisition recorded for this purchase

        Raises:
            InvalidArgumentError: On a None asset or non-positive quantity/max_price
            UnknownAssetError: If the asset has no quote
            OfferPriceRejectedError: If the ask price exceeds max_price
            InsufficientFundsError: If the balance cannot cover quantity x ask
        """
        _require_asset(asset)
        _require_positive_quantity(quantity)
        ceiling = _require_positive_price(max_price, "max_price")

        with self._lock:
            quote = self._require_quote(asset)
            if quote.ask_price > ceiling:
                logger.warning(f"Buy {asset.id} rejected: ask {quote.ask_price} above max {ceiling}")
                raise OfferPriceRejectedError(
                    f"Ask price {quote.ask_price} for {asset.id} is higher than max price {ceiling}"
                )

            total = quote.ask_price * quantity
            if self._balance < total:
                logger.warning(f"Buy {asset.id} rejected: need {total}, have {self._balance}")
                raise InsufficientFundsError(
                    f"Insufficient balance: need {total}, have {self._balance}"
                )

            acquisition = Acquisition(
                price=quote.ask_price,
                timestamp=datetime.now(),
                quantity=quantity,
                asset=asset,
            )
            self._balance -= total
            self._holdings[asset] = self._holdings.get(asset, 0) + quantity
            self._acquisitions.append(acquisition)
            logger.info(f"Bought {quantity} {asset.id} at {quote.ask_price}, balance {self._balance}")
            return acquisition

    def sell(self, asset: Asset, quantity: int, min_price: Decimal) -> Decimal:
        """Sell an asset at its current bid price.

        The held quantity is checked before the quote is looked up, so an
        oversell is reported even when the asset has no quote.

        Args:
            asset: Asset to sell
            quantity: Units to sell, must be > 0
            min_price: Lowest acceptable bid price per unit, must be > 0

        Returns:
            Cash balance after the sale

        Raises:
            InvalidArgumentError: On a None asset or non-positive quantity/min_price
            InsufficientFundsError: If fewer than quantity units are held
            UnknownAssetError: If the asset has no quote
            OfferPriceRejectedError: If the bid price is below min_price
        """
        _require_asset(asset)
        _require_positive_quantity(quantity)
        floor = _require_positive_price(min_price, "min_price")

        with self._lock:
            held = self._holdings.get(asset, 0)
            if held < quantity:
                logger.warning(f"Sell {asset.id} rejected: need {quantity}, hold {held}")
                raise InsufficientFundsError(
                    f"Insufficient holdings of {asset.id}: need {quantity}, have {held}"
                )

            quote = self._require_quote(asset)
            if quote.bid_price < floor:
                logger.warning(f"Sell {asset.id} rejected: bid {quote.bid_price} below min {floor}")
                raise OfferPriceRejectedError(
                    f"Bid price {quote.bid_price} for {asset.id} is lower than min price {floor}"
                )

            remaining = held - quantity
            if remaining == 0:
                del self._holdings[asset]
            else:
                self._holdings[asset] = remaining
            self._balance += quote.bid_price * quantity
            logger.info(f"Sold {quantity} {asset.id} at {quote.bid_price}, balance {self._balance}")
            return self._balance

    def get_valuation(self) -> Decimal:
        """Market value of all holdings at current bid prices (0 when nothing is held).

        Raises:
            UnknownAssetError: If any held asset has no quote
        """
        with self._lock:
            total = Decimal("0")
            for held_asset in list(self._holdings):
                total += self._valuation_of(held_asset)
            return total

    def get_asset_valuation(self, asset: Asset) -> Decimal:
        """Market value of a single holding.

        Raises:
            InvalidArgumentError: If asset is None
            UnknownAssetError: If the asset is not held or has no quote
        """
        _require_asset(asset)
        with self._lock:
            return self._valuation_of(asset)

    def get_most_valuable_asset(self) -> Optional[Asset]:
        """Held asset with the strictly greatest valuation.

        Ties keep the asset met first while iterating holdings. Returns None
        when nothing is held.

        Raises:
            UnknownAssetError: If any held asset has no quote
        """
        with self._lock:
            best: Optional[Asset] = None
            best_value: Optional[Decimal] = None
            for held_asset in list(self._holdings):
                value = self._valuation_of(held_asset)
                if best_value is None or value > best_value:
                    best, best_value = held_asset, value
            return best

    def get_all_acquisitions(self) -> Tuple[Acquisition, ...]:
        """Get every acquisition, oldest first, as an immutable snapshot."""
        with self._lock:
            return tuple(self._acquisitions)

    def get_last_n_acquisitions(self, n: int) -> FrozenSet[Acquisition]:
        """Get the min(n, total) most recent acquisitions.

        The result is a set; it carries no ordering.

        Raises:
            InvalidArgumentError: If n is not a positive integer
        """
        if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
            raise InvalidArgumentError(f"n must be a positive integer, got {n!r}")
        with self._lock:
            return frozenset(self._acquisitions[-n:])

    def _require_quote(self, asset: Asset) -> Quote:
        quote = self._quote_service.get_quote(asset)
        if quote is None:
            logger.warning(f"No quote for {asset.id}")
            raise UnknownAssetError(f"No quote available for asset {asset.id}")
        return quote

    def _valuation_of(self, asset: Asset) -> Decimal:
        held = self._holdings.get(asset)
        if held is None:
            raise UnknownAssetError(f"Asset {asset.id} is not held in the wallet")
        quote = self._require_quote(asset)
        return quote.bid_price * held
