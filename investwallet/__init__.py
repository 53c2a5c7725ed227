"""Single-owner investment wallet priced against live market quotes."""

from investwallet.trading import (
    Acquisition,
    Asset,
    AssetType,
    InsufficientFundsError,
    InvalidArgumentError,
    InvestmentWallet,
    IWallet,
    OfferPriceRejectedError,
    OrderRejectionReason,
    OrderResult,
    OrderService,
    OrderStatus,
    Quote,
    UnknownAssetError,
    WalletError,
)
from investwallet.data import BinanceQuoteService, InMemoryQuoteService, IQuoteService

__version__ = "0.1.0"

__all__ = [
    "Acquisition",
    "Asset",
    "AssetType",
    "Quote",
    "IWallet",
    "InvestmentWallet",
    "IQuoteService",
    "InMemoryQuoteService",
    "BinanceQuoteService",
    "OrderService",
    "OrderResult",
    "OrderStatus",
    "OrderRejectionReason",
    "WalletError",
    "InvalidArgumentError",
    "InsufficientFundsError",
    "UnknownAssetError",
    "OfferPriceRejectedError",
]
