# Data module
"""Quote sources for wallet pricing."""

from investwallet.data.quotes import IQuoteService, InMemoryQuoteService, BinanceQuoteService

__all__ = ["IQuoteService", "InMemoryQuoteService", "BinanceQuoteService"]
