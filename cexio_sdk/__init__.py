"""CEX.io SDK for Python."""

# Main typed client
from .sdk import ExchangeClient

# Low-level client and its parts
from .client import RestClient
from .session import Session
from .signer import Signer

from .logger import Logger, ConsoleLogger, NoopLogger, LogLevel
from .format import DEFAULT_PAIR, normalize_pair, format_wire_value

# Types
from .types import (
    OrderType,
    Credentials,
    SignedRequest,
    Ticker,
    OrderBook,
    Balance,
    CurrencyBalance,
    OpenOrder,
    PlacedOrder,
    Ok,
    ServiceError,
)

# Exceptions
from .exceptions import (
    CexIoError,
    MissingCredentialError,
    MissingParameterError,
    ReservedParameterError,
    ResponseFormatError,
)

__all__ = [
    # Main client
    "ExchangeClient",
    # Low-level client
    "RestClient",
    "Session",
    "Signer",
    # Logging
    "Logger",
    "ConsoleLogger",
    "NoopLogger",
    "LogLevel",
    # Format utilities
    "DEFAULT_PAIR",
    "normalize_pair",
    "format_wire_value",
    # Domain types
    "OrderType",
    "Credentials",
    "SignedRequest",
    "Ticker",
    "OrderBook",
    "Balance",
    "CurrencyBalance",
    "OpenOrder",
    "PlacedOrder",
    "Ok",
    "ServiceError",
    # Exceptions
    "CexIoError",
    "MissingCredentialError",
    "MissingParameterError",
    "ReservedParameterError",
    "ResponseFormatError",
]

from ._version import __version__
