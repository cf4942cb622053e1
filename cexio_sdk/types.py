"""Type definitions for the CEX.io SDK."""

from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

T = TypeVar("T")


# ============================================================================
# Enums
# ============================================================================


class OrderType(str, Enum):
    """Order side. Plain strings are accepted by ``place_order`` as well."""

    BUY = "buy"
    SELL = "sell"


# ============================================================================
# Credentials & Signing
# ============================================================================


class Credentials(BaseModel):
    """API credentials. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    user: str
    api_key: str
    api_secret: str = Field(repr=False)


class SignedRequest(BaseModel):
    """Nonce and signature for one authenticated request."""

    model_config = ConfigDict(frozen=True)

    nonce: int
    signature: str


# ============================================================================
# API Response Models
# ============================================================================


class _Payload(BaseModel):
    # Unknown fields are kept so nothing the service sends is lost
    model_config = ConfigDict(extra="allow")


class Ticker(_Payload):
    """Ticker for a pair."""

    timestamp: Optional[int] = None
    bid: Optional[float] = None
    ask: Optional[float] = None
    low: Optional[float] = None
    high: Optional[float] = None
    last: Optional[float] = None
    volume: Optional[float] = None


class OrderBook(_Payload):
    """Order book snapshot. Levels are ``[price, amount]`` pairs."""

    timestamp: Optional[int] = None
    bids: list[list[float]] = Field(default_factory=list)
    asks: list[list[float]] = Field(default_factory=list)

    def spread(self) -> Optional[float]:
        """Best ask minus best bid, or None when either side is empty."""
        if not self.bids or not self.asks:
            return None
        return self.asks[0][0] - self.bids[0][0]


class CurrencyBalance(_Payload):
    """Balance of one currency."""

    available: float = 0.0
    orders: float = 0.0


class Balance(_Payload):
    """Account balance.

    The service returns one top-level key per currency next to
    ``timestamp`` and ``username``; those keys are gathered into
    ``currencies``. Any other top-level key is kept as an extra field.
    """

    timestamp: Optional[int] = None
    username: Optional[str] = None
    currencies: dict[str, CurrencyBalance] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _collect_currencies(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "currencies" in data:
            return data
        fields: dict[str, Any] = {"currencies": {}}
        for key, value in data.items():
            if key not in ("timestamp", "username") and isinstance(value, dict):
                fields["currencies"][key] = value
            else:
                fields[key] = value
        return fields

    def __getitem__(self, ticker: str) -> CurrencyBalance:
        return self.currencies[ticker]


class OpenOrder(_Payload):
    """An open order as listed by ``open_orders``."""

    id: str
    time: Optional[int] = None
    type: Optional[str] = None
    price: Optional[float] = None
    amount: Optional[float] = None
    pending: Optional[float] = None

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, value: Any) -> Any:
        return str(value) if isinstance(value, int) else value


class PlacedOrder(OpenOrder):
    """Order accepted by ``place_order``."""

    pass


# ============================================================================
# Tagged Results
# ============================================================================


class Ok(BaseModel, Generic[T]):
    """The service answered with the expected data."""

    data: T


class ServiceError(BaseModel):
    """The service answered, but reported an error instead of data.

    ``error`` is the service's message, unchanged; ``raw`` is the whole body.
    """

    error: str
    raw: dict[str, Any] = Field(default_factory=dict)
