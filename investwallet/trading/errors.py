"""Exception types raised by wallet operations.

- InvalidArgumentError for structurally invalid input, detected before any
  state is touched.
- InsufficientFundsError when cash or held quantity cannot cover a request.
- UnknownAssetError when no quote exists for an asset, or a single-asset
  valuation targets an asset that is not held.
- OfferPriceRejectedError when the live quote breaks the caller's price limit.

A failed operation leaves the wallet exactly as it was.
"""

from __future__ import annotations

__all__ = [
    "WalletError",
    "InvalidArgumentError",
    "InsufficientFundsError",
    "UnknownAssetError",
    "OfferPriceRejectedError",
]


class WalletError(Exception):
    """Base class for all wallet failures."""


class InvalidArgumentError(WalletError, ValueError):
    """Caller supplied an invalid argument (missing asset, non-positive quantity, ...)."""


class InsufficientFundsError(WalletError):
    """Not enough cash or holdings to complete the request."""


class UnknownAssetError(WalletError):
    """No quote for the asset, or the asset is not held."""


class OfferPriceRejectedError(WalletError):
    """Ask above the buyer's ceiling, or bid below the seller's floor."""
