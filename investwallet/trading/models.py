"""Data models for the investment wallet."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
import uuid

from .errors import InvalidArgumentError


class AssetType(Enum):
    """Category of a tradable instrument."""
    STOCK = "stock"
    CRYPTOCURRENCY = "cryptocurrency"
    GOLD = "gold"
    FIAT_CURRENCY = "fiat_currency"


@dataclass(frozen=True)
class Asset:
    """Identifies a tradable instrument.

    Equality and hashing use all three fields, so two assets built from the
    same values are interchangeable as holdings keys.

    Attributes:
        id: Instrument identifier (e.g., exchange symbol "BTCUSDT")
        name: Human-readable name
        type: Asset category
    """
    id: str
    name: str
    type: AssetType

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id:
            raise InvalidArgumentError("Asset id must be a non-empty string")
        if not isinstance(self.name, str) or not self.name:
            raise InvalidArgumentError("Asset name must be a non-empty string")
        if not isinstance(self.type, AssetType):
            raise InvalidArgumentError(f"Unknown asset type: {self.type!r}")


@dataclass(frozen=True)
class Quote:
    """Market quote for an asset at lookup time.

    Attributes:
        ask_price: Price the market sells at (cost to a buyer)
        bid_price: Price the market buys back at (proceeds to a seller)
    """
    ask_price: Decimal
    bid_price: Decimal

    def __post_init__(self) -> None:
        for name in ("ask_price", "bid_price"):
            value = getattr(self, name)
            if not isinstance(value, Decimal) or not value.is_finite() or value <= 0:
                raise InvalidArgumentError(f"{name} must be a positive finite Decimal, got {value!r}")


@dataclass(frozen=True)
class Acquisition:
    """Record of one completed buy.

    Attributes:
        price: Ask price paid per unit
        timestamp: Time of execution
        quantity: Units bought
        asset: Asset bought
        id: Unique acquisition identifier (UUID)
    """
    price: Decimal
    timestamp: datetime
    quantity: int
    asset: Asset
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def total_cost(self) -> Decimal:
        """Cash paid for this acquisition."""
        return self.price * self.quantity
