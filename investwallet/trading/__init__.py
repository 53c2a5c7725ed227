# Trading module
"""Wallet components including data models, errors, the wallet itself and order entry."""

from .errors import (
    WalletError,
    InvalidArgumentError,
    InsufficientFundsError,
    UnknownAssetError,
    OfferPriceRejectedError,
)
from .models import Acquisition, Asset, AssetType, Quote
from .wallet import IWallet, InvestmentWallet
from .orders import (
    OrderStatus,
    OrderRejectionReason,
    OrderResult,
    OrderService,
)

__all__ = [
    "WalletError",
    "InvalidArgumentError",
    "InsufficientFundsError",
    "UnknownAssetError",
    "OfferPriceRejectedError",
    "Acquisition",
    "Asset",
    "AssetType",
    "Quote",
    "IWallet",
    "InvestmentWallet",
    "OrderStatus",
    "OrderRejectionReason",
    "OrderResult",
    "OrderService",
]
