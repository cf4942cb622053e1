"""Tests for session state."""

import pytest
from pydantic import ValidationError

from cexio_sdk import MissingCredentialError, Session


class TestSession:
    """Test session construction and state."""

    def test_defaults(self):
        """A new session starts at nonce 0 on the public API URL."""
        session = Session("cexio", "key", "secret")
        assert session.api_url == "https://cex.io/api"
        assert session.last_nonce == 0
        assert session.user == "cexio"
        assert session.api_key == "key"

    def test_missing_secret(self):
        """A missing secret is reported by name."""
        with pytest.raises(MissingCredentialError, match="api_secret"):
            Session("cexio", "key", None)

    def test_credentials_are_immutable(self):
        """Credentials cannot be changed after construction."""
        session = Session("cexio", "key", "secret")
        with pytest.raises(ValidationError):
            session.credentials.api_key = "other"

    def test_repr_hides_secret(self):
        """The secret never shows up in repr()."""
        session = Session("cexio", "key", "very-secret")
        assert "very-secret" not in repr(session)
        assert "very-secret" not in repr(session.credentials)
