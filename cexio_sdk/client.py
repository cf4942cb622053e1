"""REST client for the CEX.io API.

Responses are returned exactly as decoded from JSON. A body carrying an
``error`` key (for example ``{"error": "Permission denied"}`` when the API
key lacks a privilege) is a normal result; callers should check for it.
A request that fails at the HTTP level is logged and returns ``None``.
"""

from typing import Any, Callable, Optional
from urllib.parse import urlencode

import httpx

from .exceptions import MissingParameterError, ReservedParameterError
from .format import DEFAULT_PAIR, format_wire_value, normalize_pair
from .logger import ConsoleLogger, Logger, LogLevel
from .session import DEFAULT_API_URL, Session
from .signer import Signer
from .types import OrderType
from ._version import __version__

AUTH_FIELDS = ("nonce", "key", "signature")
DEFAULT_AGENT = f"cexio-sdk/{__version__}"


def _is_missing(value: Any) -> bool:
    return value is None or value == ""


class RestClient:
    """
    Low-level client for the CEX.io API.

    Public endpoints are plain GET requests. Private endpoints are signed
    POST requests; all of them are serialized through the session lock so
    that one client never has two signed requests in flight.

    Example:
        ```python
        with RestClient(user="me", api_key="key", api_secret="secret") as api:
            balance = api.balance()
            if balance and "error" not in balance:
                print(balance["BTC"]["available"])
        ```
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
        Initialize the REST client.

        Args:
            user: cex.io user name
            api_key: API key
            api_secret: API secret
            agent: User-Agent header, defaults to the SDK name and version
            api_url: Base URL of the API
            timeout: Request timeout in seconds
            log_level: Minimum log level for the default logger
            logger: Custom logger instance
            http_client: Pre-built httpx client; not closed by this client
            clock: Time source for nonces, defaults to ``time.time``
            sleep: Sleep function used when throttling, defaults to ``time.sleep``

        Raises:
            MissingCredentialError: If user, api_key or api_secret is missing
        """
        self.session = Session(user, api_key, api_secret, api_url=api_url)
        self.logger = logger or ConsoleLogger(level=log_level)

        signer_kwargs: dict[str, Any] = {"logger": self.logger}
        if clock is not None:
            signer_kwargs["clock"] = clock
        if sleep is not None:
            signer_kwargs["sleep"] = sleep
        self.signer = Signer(**signer_kwargs)

        self.agent = agent or DEFAULT_AGENT
        if http_client is None:
            self._http = httpx.Client(timeout=timeout, headers={"User-Agent": self.agent})
            self._owns_http = True
        else:
            self._http = http_client
            self._owns_http = False

    def __enter__(self) -> "RestClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client if this client created it."""
        if self._owns_http:
            self._http.close()

    # ========================================================================
    # Request plumbing
    # ========================================================================

    def _url(self, method: str, pair: Optional[str]) -> str:
        url = f"{self.session.api_url}/{method}/"
        if pair:
            url += pair
        return url

    def _send(self, request: httpx.Request) -> Optional[Any]:
        """Send a request and decode the body, or log and return None on failure."""
        self.logger.debug(f"{request.method} {request.url}")
        try:
            response = self._http.send(request)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as error:
            self.logger.warn(
                f"Request failed: {error.response.status_code} {error.response.reason_phrase}"
            )
        except httpx.HTTPError as error:
            self.logger.warn(f"Request failed: {error}")
        except ValueError as error:
            self.logger.warn(f"Request failed: invalid JSON in response ({error})")
        return None

    def get(self, method: str, pair: Optional[str] = None) -> Optional[Any]:
        """
        Call a public endpoint.

        Args:
            method: API method name, e.g. ``"ticker"``
            pair: Pair appended to the path, used as given

        Returns:
            Decoded JSON, or None if the request failed
        """
        request = self._http.build_request(
            "GET",
            self._url(method, pair),
            headers={"Content-Type": "application/json", "User-Agent": self.agent},
        )
        return self._send(request)

    def post(self, method: str, pair: Optional[str] = None, **params: Any) -> Optional[Any]:
        """
        Call a private endpoint.

        The pair goes into the path, not the body. The body starts with
        ``nonce``, ``key`` and ``signature`` followed by ``params``.

        Args:
            method: API method name, e.g. ``"balance"``
            pair: Pair appended to the path, used as given
            **params: Extra form fields

        Returns:
            Decoded JSON, or None if the request failed

        Raises:
            ReservedParameterError: If params contain nonce, key or signature
        """
        for name in AUTH_FIELDS:
            if name in params:
                raise ReservedParameterError(method, name)
        url = self._url(method, pair)
        with self.session.lock:
            signed = self.signer.sign(self.session)
            fields = {
                "nonce": signed.nonce,
                "key": self.session.api_key,
                "signature": signed.signature,
            }
            for name, value in params.items():
                fields[name] = format_wire_value(value)
            request = self._http.build_request(
                "POST",
                url,
                content=urlencode(fields),
                headers={
                    "Content-Type": "application/x-www-form-urlencoded",
                    "User-Agent": self.agent,
                },
            )
            return self._send(request)

    # ========================================================================
    # Public API
    # ========================================================================

    def ticker(self, pair: str = DEFAULT_PAIR) -> Optional[dict[str, Any]]:
        """Get the ticker for a pair."""
        return self.get("ticker", normalize_pair(pair))

    def order_book(self, pair: str = DEFAULT_PAIR) -> Optional[dict[str, Any]]:
        """Get the order book for a pair."""
        return self.get("order_book", normalize_pair(pair))

    def trade_history(self, pair: str = DEFAULT_PAIR) -> None:
        """Not implemented. Logs a warning and returns None."""
        self.logger.warn("trade_history() is not implemented")
        return None

    # ========================================================================
    # Private API
    # ========================================================================

    def balance(self) -> Optional[dict[str, Any]]:
        """Get the account balance."""
        return self.post("balance")

    def open_orders(self, pair: str = DEFAULT_PAIR) -> Optional[Any]:
        """List open orders for a pair."""
        return self.post("open_orders", normalize_pair(pair))

    def cancel_order(self, order_id: Any = None) -> Optional[Any]:
        """
        Cancel an order.

        Args:
            order_id: ID of the order, as listed by ``open_orders``

        Raises:
            MissingParameterError: If order_id is missing
        """
        if _is_missing(order_id):
            raise MissingParameterError("cancel_order", "id")
        return self.post("cancel_order", id=order_id)

    def place_order(
        self,
        pair: Optional[str] = None,
        type: Optional[OrderType | str] = None,
        amount: Any = None,
        price: Any = None,
    ) -> Optional[Any]:
        """
        Place a limit order.

        The order is only posted; it executes when matched. Values are not
        checked beyond presence: the sign of amount/price and the order
        type are left to the service.

        Args:
            pair: Pair to trade, e.g. ``"GHS/BTC"``
            type: ``"buy"`` or ``"sell"``
            amount: Units to trade
            price: Price per unit

        Raises:
            MissingParameterError: If any parameter is missing
        """
        for name, value in (("pair", pair), ("type", type), ("amount", amount), ("price", price)):
            if _is_missing(value):
                raise MissingParameterError("place_order", name)
        return self.post(
            "place_order", normalize_pair(pair), type=type, amount=amount, price=price
        )
