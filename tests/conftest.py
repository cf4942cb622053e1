"""Shared fixtures: fake clock, recording logger and a mocked HTTP transport."""

from typing import Any, Callable

import httpx
import pytest

from cexio_sdk import ExchangeClient, Logger, RestClient


class FakeClock:
    """Clock that only moves when slept on (or advanced by hand)."""

    def __init__(self, now: float = 1383379054.0):
        self.now = now
        self.sleeps: list[float] = []

    def time(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingLogger(Logger):
    """Logger that keeps messages in memory."""

    def __init__(self):
        self.records: list[tuple[str, str]] = []

    def debug(self, message: str, *args: Any) -> None:
        self.records.append(("debug", message))

    def info(self, message: str, *args: Any) -> None:
        self.records.append(("info", message))

    def warn(self, message: str, *args: Any) -> None:
        self.records.append(("warn", message))

    def error(self, message: str, *args: Any) -> None:
        self.records.append(("error", message))

    def messages(self, level: str) -> list[str]:
        return [message for lvl, message in self.records if lvl == level]


class FakeServer:
    """Records requests and answers them with a configurable handler."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(
            200, json={}
        )

    def respond_json(self, payload: Any, status_code: int = 200) -> None:
        self.handler = lambda request: httpx.Response(status_code, json=payload)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


CREDENTIALS = {"user": "cexio", "api_key": "KEY123", "api_secret": "SECRET456"}


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def logger():
    return RecordingLogger()


@pytest.fixture
def server():
    return FakeServer()


@pytest.fixture
def http_client(server):
    client = httpx.Client(transport=httpx.MockTransport(server))
    yield client
    client.close()


@pytest.fixture
def rest(http_client, clock, logger):
    """RestClient wired to the fake server and clock."""
    return RestClient(
        **CREDENTIALS,
        http_client=http_client,
        clock=clock.time,
        sleep=clock.sleep,
        logger=logger,
    )


@pytest.fixture
def sdk(http_client, clock, logger):
    """ExchangeClient wired to the fake server and clock."""
    return ExchangeClient(
        **CREDENTIALS,
        http_client=http_client,
        clock=clock.time,
        sleep=clock.sleep,
        logger=logger,
    )
