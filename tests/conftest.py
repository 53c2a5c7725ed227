from __future__ import annotations

from decimal import Decimal

import pytest

from investwallet.data.quotes import InMemoryQuoteService
from investwallet.trading.models import Asset, AssetType, Quote
from investwallet.trading.wallet import InvestmentWallet


@pytest.fixture
def btc() -> Asset:
    return Asset("BTCUSDT", "Bitcoin", AssetType.CRYPTOCURRENCY)


@pytest.fixture
def aapl() -> Asset:
    return Asset("AAPL", "Apple Inc.", AssetType.STOCK)


@pytest.fixture
def gold() -> Asset:
    return Asset("XAU", "Gold", AssetType.GOLD)


@pytest.fixture
def quotes(btc: Asset, aapl: Asset) -> InMemoryQuoteService:
    return InMemoryQuoteService({
        btc: Quote(ask_price=Decimal("10"), bid_price=Decimal("9")),
        aapl: Quote(ask_price=Decimal("150.50"), bid_price=Decimal("150.00")),
    })


@pytest.fixture
def wallet(quotes: InMemoryQuoteService) -> InvestmentWallet:
    return InvestmentWallet(quotes, Decimal("1000"))
