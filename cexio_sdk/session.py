"""Credential and nonce state shared by the signer and the REST client."""

import threading
from typing import Optional

from .exceptions import MissingCredentialError
from .types import Credentials

DEFAULT_API_URL = "https://cex.io/api"


class Session:
    """
    Per-client session state.

    Holds the credentials, the last nonce used for a signed request and the
    lock that makes signed requests single-flight.

    Warning:
        The service requires a strictly increasing nonce per API key and
        allows 600 requests per 10 minutes. A session guarantees both only
        for requests made through itself. Two sessions (or two processes)
        using the same API key do not coordinate, can send duplicate
        nonces, and may get the key or IP address banned.
    """

    def __init__(
        self,
        user: Optional[str],
        api_key: Optional[str],
        api_secret: Optional[str],
        api_url: str = DEFAULT_API_URL,
    ):
        """
        Create a session.

        Args:
            user: cex.io user name
            api_key: API key
            api_secret: API secret matching the key
            api_url: Base URL of the API

        Raises:
            MissingCredentialError: If a credential is None or empty
        """
        for name, value in (("user", user), ("api_key", api_key), ("api_secret", api_secret)):
            if not value:
                raise MissingCredentialError(name)

        self.api_url = api_url.rstrip("/")
        self.credentials = Credentials(user=user, api_key=api_key, api_secret=api_secret)
        self.last_nonce = 0
        # Held from signing until the response arrives
        self.lock = threading.RLock()

    @property
    def user(self) -> str:
        return self.credentials.user

    @property
    def api_key(self) -> str:
        return self.credentials.api_key

    @property
    def api_secret(self) -> str:
        return self.credentials.api_secret

    def __repr__(self) -> str:
        return (
            f"Session(api_url={self.api_url!r}, user={self.user!r}, "
            f"api_key={self.api_key!r}, last_nonce={self.last_nonce})"
        )
