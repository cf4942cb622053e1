"""Main CEX.io SDK client with typed results."""

from typing import Any, Callable, Optional, Union

import httpx
from pydantic import TypeAdapter, ValidationError

from .client import RestClient
from .exceptions import ResponseFormatError
from .format import DEFAULT_PAIR
from .logger import Logger, LogLevel
from .session import DEFAULT_API_URL, Session
from .types import (
    Balance,
    Ok,
    OpenOrder,
    OrderBook,
    OrderType,
    PlacedOrder,
    ServiceError,
    Ticker,
)


class ExchangeClient:
    """
    CEX.io client returning typed results.

    Every operation returns one of:

    - ``None`` when the request could not be completed (logged as a warning),
    - ``ServiceError`` when the service answered with an ``error`` message,
    - ``Ok`` wrapping the decoded payload.

    Example:
        ```python
        with ExchangeClient(user="me", api_key="key", api_secret="secret") as client:
            result = client.balance()
            if isinstance(result, Ok):
                print(result.data["GHS"].available)
            elif isinstance(result, ServiceError):
                print(result.error)
        ```

    Warning:
        Nonce uniqueness and throttling are handled per client. Do not use
        more than one client (or process) with the same API key at a time.
    """

    def __init__(
        self,
        user: Optional[str] = None,
        api_key: Optional[str] = None,
        api_secret: Optional[str] = None,
        *,
        agent: Optional[str] = None,
        api_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        log_level: LogLevel = LogLevel.INFO,
        logger: Optional[Logger] = None,
        http_client: Optional[httpx.Client] = None,
        clock: Optional[Callable[[], float]] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ):
        """
        Initialize the SDK. Arguments are the same as for ``RestClient``.

        Raises:
            MissingCredentialError: If user, api_key or api_secret is missing
        """
        self.rest = RestClient(
            user,
            api_key,
            api_secret,
            agent=agent,
            api_url=api_url,
            timeout=timeout,
            log_level=log_level,
            logger=logger,
            http_client=http_client,
            clock=clock,
            sleep=sleep,
        )
        self.logger = self.rest.logger

    def __enter__(self) -> "ExchangeClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close all connections."""
        self.rest.close()

    @property
    def session(self) -> Session:
        return self.rest.session

    def _wrap(self, operation: str, payload: Any, model: Any) -> Optional[Union[Ok, ServiceError]]:
        if payload is None:
            return None
        if isinstance(payload, dict) and payload.get("error"):
            return ServiceError(error=str(payload["error"]), raw=payload)
        try:
            data = TypeAdapter(model).validate_python(payload)
        except ValidationError as error:
            raise ResponseFormatError(operation, payload) from error
        return Ok[model](data=data)

    # ========================================================================
    # Public API
    # ========================================================================

    def ticker(self, pair: str = DEFAULT_PAIR) -> Optional[Union[Ok[Ticker], ServiceError]]:
        """Get the ticker for a pair."""
        return self._wrap("ticker", self.rest.ticker(pair), Ticker)

    def order_book(self, pair: str = DEFAULT_PAIR) -> Optional[Union[Ok[OrderBook], ServiceError]]:
        """Get the order book for a pair."""
        return self._wrap("order_book", self.rest.order_book(pair), OrderBook)

    def trade_history(self, pair: str = DEFAULT_PAIR) -> None:
        """Not implemented. Logs a warning and returns None."""
        return self.rest.trade_history(pair)

    # ========================================================================
    # Private API
    # ========================================================================

    def balance(self) -> Optional[Union[Ok[Balance], ServiceError]]:
        """Get the account balance."""
        return self._wrap("balance", self.rest.balance(), Balance)

    def open_orders(self, pair: str = DEFAULT_PAIR) -> Optional[Union[Ok[list[OpenOrder]], ServiceError]]:
        """List open orders for a pair."""
        return self._wrap("open_orders", self.rest.open_orders(pair), list[OpenOrder])

    def cancel_order(self, order_id: Any = None) -> Optional[Union[Ok[bool], ServiceError]]:
        """Cancel an order. ``Ok(data=True)`` means the service accepted it."""
        return self._wrap("cancel_order", self.rest.cancel_order(order_id), bool)

    def place_order(
        self,
        pair: Optional[str] = None,
        type: Optional[OrderType | str] = None,
        amount: Any = None,
        price: Any = None,
    ) -> Optional[Union[Ok[PlacedOrder], ServiceError]]:
        """Place a limit order. See ``RestClient.place_order``."""
        return self._wrap(
            "place_order",
            self.rest.place_order(pair=pair, type=type, amount=amount, price=price),
            PlacedOrder,
        )
