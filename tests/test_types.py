"""Tests for type imports and usage."""

import pytest
from pydantic import ValidationError


class TestModels:
    """Test response and value models."""

    def test_balance_collects_currency_keys(self):
        """Per-currency objects are gathered into currencies."""
        from cexio_sdk import Balance

        balance = Balance.model_validate(
            {"timestamp": "1", "username": "u", "BTC": {"available": "1", "orders": "0"}, "note": "x"}
        )

        assert list(balance.currencies) == ["BTC"]
        assert balance["BTC"].available == 1.0

    def test_balance_keeps_unknown_fields(self):
        """Unknown top-level and per-currency fields are kept."""
        from cexio_sdk import Balance

        balance = Balance.model_validate(
            {
                "timestamp": "1",
                "username": "u",
                "note": "x",
                "BTC": {"available": "1", "orders": "0", "bonus": "5"},
            }
        )

        assert balance.model_extra == {"note": "x"}
        assert balance["BTC"].model_extra == {"bonus": "5"}
        assert balance.timestamp == 1
        assert balance.username == "u"

    def test_balance_accepts_explicit_currencies(self):
        """Currencies can be given directly."""
        from cexio_sdk import Balance, CurrencyBalance

        balance = Balance(currencies={"NMC": CurrencyBalance(available=3)})
        assert balance["NMC"].orders == 0.0

    def test_open_order_requires_id(self):
        """An order without an id is rejected."""
        from cexio_sdk import OpenOrder

        with pytest.raises(ValidationError):
            OpenOrder.model_validate({"type": "buy"})

    def test_signed_request_is_frozen(self):
        """Signed requests cannot be modified."""
        from cexio_sdk import SignedRequest

        signed = SignedRequest(nonce=1, signature="AB")
        with pytest.raises(ValidationError):
            signed.nonce = 2

    def test_order_type_enum(self):
        """OrderType values match the wire strings."""
        from cexio_sdk import OrderType

        assert OrderType.BUY.value == "buy"
        assert OrderType.SELL.value == "sell"
        assert OrderType("sell") is OrderType.SELL


class TestSingleImport:
    """Everything is importable from the package root."""

    def test_single_import_statement(self):
        """Test importing everything from cexio_sdk."""
        from cexio_sdk import (
            ExchangeClient,
            RestClient,
            Session,
            Signer,
            Ok,
            ServiceError,
            LogLevel,
            ConsoleLogger,
            CexIoError,
            MissingParameterError,
            __version__,
        )

        assert issubclass(MissingParameterError, CexIoError)
        assert issubclass(MissingParameterError, ValueError)
        assert __version__ == "0.1.0"
        assert ExchangeClient is not None
        assert RestClient is not None
