"""Nonce generation and request signing."""

import hashlib
import hmac
import time
from typing import Callable, Optional

from .logger import Logger, NoopLogger
from .session import Session
from .types import SignedRequest


class Signer:
    """
    Produces the nonce and signature for authenticated requests.

    The nonce is the wall clock in whole seconds. When a second request is
    signed within the same second as the previous one, signing blocks for
    one second before reading the clock again. This keeps nonces strictly
    increasing and keeps the client under the service quota of roughly one
    request per second.

    The check only sees the ``last_nonce`` of the session it is given, so
    nonces are unique per session, not per API key.
    """

    STALL_SECONDS = 1

    def __init__(
        self,
        clock: Callable[[], float] = time.time,
        sleep: Callable[[float], None] = time.sleep,
        logger: Optional[Logger] = None,
    ):
        """
        Initialize signer.

        Args:
            clock: Returns the current time in seconds
            sleep: Blocks for the given number of seconds
            logger: Logger instance
        """
        self._clock = clock
        self._sleep = sleep
        self._logger = logger or NoopLogger()

    def _now(self) -> int:
        return int(self._clock())

    def next_nonce(self, session: Session) -> int:
        """
        Reserve the next nonce for a session.

        Blocks while the clock has not moved past the session's last nonce,
        then commits the new value to ``session.last_nonce``.
        """
        with session.lock:
            nonce = self._now()
            while nonce <= session.last_nonce:
                self._logger.debug(
                    f"Nonce {nonce} already used, waiting {self.STALL_SECONDS}s"
                )
                self._sleep(self.STALL_SECONDS)
                nonce = self._now()
            session.last_nonce = nonce
            return nonce

    @staticmethod
    def signature(nonce: int, user: str, api_key: str, api_secret: str) -> str:
        """Upper-case hex HMAC-SHA256 of ``nonce + user + api_key`` keyed by the secret."""
        message = f"{nonce}{user}{api_key}".encode("utf-8")
        digest = hmac.new(api_secret.encode("utf-8"), message, hashlib.sha256)
        return digest.hexdigest().upper()

    def sign(self, session: Session) -> SignedRequest:
        """
        Sign the next request for a session.

        Args:
            session: Session holding credentials and the last nonce

        Returns:
            Nonce and signature for exactly one request
        """
        with session.lock:
            nonce = self.next_nonce(session)
            signature = self.signature(
                nonce, session.user, session.api_key, session.api_secret
            )
        return SignedRequest(nonce=nonce, signature=signature)
