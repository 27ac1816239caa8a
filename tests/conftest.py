from __future__ import annotations

from collections.abc import Callable, Iterator

import httpx
import pytest

from igdb_client.client import Client

Handler = Callable[[httpx.Request], httpx.Response]


class TrackingStream(httpx.SyncByteStream):
    """Response body that remembers whether it was closed."""

    def __init__(self, data: bytes, *, fail_with: Exception | None = None) -> None:
        self._data = data
        self._fail_with = fail_with
        self.closed = False

    def __iter__(self) -> Iterator[bytes]:
        if self._fail_with is not None:
            raise self._fail_with
        yield self._data

    def close(self) -> None:
        self.closed = True


@pytest.fixture()
def tracking_stream() -> type[TrackingStream]:
    return TrackingStream


@pytest.fixture(autouse=True)
def _no_ambient_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    # Never let a developer's real key leak into tests
    monkeypatch.delenv("IGDB_API_KEY", raising=False)


@pytest.fixture()
def make_client() -> Iterator[Callable[[Handler], Client]]:
    clients: list[Client] = []

    def _make(handler: Handler) -> Client:
        client = Client(
            api_key="test-key",
            http=httpx.Client(transport=httpx.MockTransport(handler)),
        )
        clients.append(client)
        return client

    yield _make

    # the fixture owns these transports, not the clients
    for c in clients:
        c.transport.close()


@pytest.fixture()
def recorded() -> list[httpx.Request]:
    return []


@pytest.fixture()
def respond_with(recorded: list[httpx.Request]) -> Callable[..., Handler]:
    """Build a handler that records each request and answers with a fixed body."""

    def _respond(body: bytes, status_code: int = 200) -> Handler:
        def handler(request: httpx.Request) -> httpx.Response:
            recorded.append(request)
            return httpx.Response(status_code, content=body)

        return handler

    return _respond
