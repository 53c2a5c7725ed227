"""Quote services supplying live bid/ask prices to the wallet.

This module provides:
- IQuoteService interface the wallet prices against
- InMemoryQuoteService backed by a mutable quote table
- BinanceQuoteService reading best bid/ask from the Binance REST API
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from decimal import Decimal, InvalidOperation
from typing import Dict, Mapping, Optional

import httpx

from investwallet.trading.errors import InvalidArgumentError
from investwallet.trading.models import Asset, Quote
from investwallet.util.env import QuoteSettings

logger = logging.getLogger(__name__)


class IQuoteService(ABC):
    """Interface for quote lookup.

    Lookups are side-effect free from the wallet's point of view and the
    wallet never caches their results.
    """

    @abstractmethod
    def get_quote(self, asset: Asset) -> Optional[Quote]:
        """Get the current quote for an asset.

        Args:
            asset: Asset to price

        Returns:
            Current quote, or None if the asset has no quote

        Raises:
            InvalidArgumentError: If asset is None
        """
        ...


class InMemoryQuoteService(IQuoteService):
    """Quote service backed by an in-memory table keyed by asset."""

    def __init__(self, quotes: Mapping[Asset, Quote] | None = None) -> None:
        """Initialize the service.

        Args:
            quotes: Initial asset to quote table (copied)
        """
        self._quotes: Dict[Asset, Quote] = dict(quotes or {})
        self._lock = threading.Lock()

    def get_quote(self, asset: Asset) -> Optional[Quote]:
        if asset is None:
            raise InvalidArgumentError("Asset must not be None")
        with self._lock:
            return self._quotes.get(asset)

    def set_quote(self, asset: Asset, quote: Quote) -> None:
        """Publish or replace the quote for an asset."""
        if not isinstance(asset, Asset):
            raise InvalidArgumentError(f"Expected an Asset, got {asset!r}")
        if not isinstance(quote, Quote):
            raise InvalidArgumentError(f"Expected a Quote, got {quote!r}")
        with self._lock:
            self._quotes[asset] = quote

    def remove_quote(self, asset: Asset) -> None:
        """Withdraw the quote for an asset; a no-op if none is set."""
        if asset is None:
            raise InvalidArgumentError("Asset must not be None")
        with self._lock:
            self._quotes.pop(asset, None)

    def snapshot(self) -> Dict[Asset, Quote]:
        """Get a shallow copy of the quote table."""
        with self._lock:
            return dict(self._quotes)


class BinanceQuoteService(IQuoteService):
    """Live quotes from the Binance order book ticker.

    The asset id is used as the exchange symbol. Unknown symbols and empty
    books yield None; transport and server errors propagate.
    """

    BOOK_TICKER_PATH = "/api/v3/ticker/bookTicker"

    def __init__(
        self,
        settings: QuoteSettings | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            settings: Endpoint and timeout settings (default: from environment)
            client: Preconfigured HTTP client, mainly for tests
        """
        self._settings = settings or QuoteSettings.from_env()
        self._owns_client = client is None
        self._client = client or httpx.Client(
            base_url=self._settings.base_url,
            timeout=self._settings.timeout_s,
        )
        self._lock = threading.Lock()

    def _normalize_symbol(self, s: str) -> str:
        s = s.replace("/", "").replace("-", "").replace(" ", "")
        return s.upper()

    def get_quote(self, asset: Asset) -> Optional[Quote]:
        if asset is None:
            raise InvalidArgumentError("Asset must not be None")
        sym = self._normalize_symbol(asset.id)
        try:
            with self._lock:
                r = self._client.get(self.BOOK_TICKER_PATH, params={"symbol": sym})
            if r.status_code == httpx.codes.BAD_REQUEST:
                # Binance answers unknown symbols with 400 / code -1121
                logger.warning(f"No quote for symbol '{sym}': {r.text}")
                return None
            r.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Failed to fetch quote for '{sym}': {e}")
            raise

        try:
            item = r.json()
        except ValueError as e:
            logger.warning(f"Book ticker for '{sym}' is not JSON: {e}")
            return None

        try:
            ask = Decimal(str(item.get("askPrice", "0")))
            bid = Decimal(str(item.get("bidPrice", "0")))
        except (InvalidOperation, AttributeError):
            logger.warning(f"Malformed book ticker for '{sym}': {item!r}")
            return None
        if not ask.is_finite() or not bid.is_finite() or ask <= 0 or bid <= 0:
            return None
        return Quote(ask_price=ask, bid_price=bid)

    def close(self) -> None:
        """Close the underlying HTTP client if this service created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "BinanceQuoteService":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
