from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, TypeVar

import httpx

from igdb_client.core.config import IGDB_URL, Settings, settings
from igdb_client.core.errors import RemoteAPIError, TransportError
from igdb_client.query.options import QueryOption, unwrap_options
from igdb_client.request import build_request
from igdb_client.resources.games import GameService
from igdb_client.response import classify, decode

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_TIMEOUT_S = 30.0


def _default_http() -> httpx.Client:
    return httpx.Client(timeout=DEFAULT_TIMEOUT_S)


@dataclass(frozen=True)
class Client:
    """
    Configuration shared by every call against the IGDB: the HTTP transport,
    the root URL and the user's API key.

    Nothing here changes after construction, so one Client can serve concurrent
    callers; each call builds its own request and reads its own response.

    When no `http` client is given a default one is created, and only that one is
    closed by `close()`. A caller-supplied `http` client stays open and remains the
    caller's to close.

    If you need an IGDB API key, please visit: https://api.igdb.com/signup
    """

    api_key: str
    http: httpx.Client | None = field(default=None, repr=False)
    root_url: str = IGDB_URL
    owns_http: bool = field(default=False, kw_only=True, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.http is None:
            object.__setattr__(self, "http", _default_http())
            object.__setattr__(self, "owns_http", True)

    @classmethod
    def from_settings(cls, config: Settings | None = None) -> Client:
        if config is None:
            config = settings
        return cls(
            api_key=config.require_api_key(),
            http=httpx.Client(timeout=config.igdb_timeout_s),
            root_url=config.igdb_base_url,
            owns_http=True,
        )

    @property
    def transport(self) -> httpx.Client:
        # never None once __post_init__ has run
        assert self.http is not None
        return self.http

    @property
    def games(self) -> GameService:
        return GameService(self)

    def close(self) -> None:
        if self.owns_http:
            self.transport.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def request(self, endpoint: str, *options: QueryOption) -> httpx.Request:
        query = unwrap_options(*options)
        return build_request(
            self.transport,
            root_url=self.root_url,
            endpoint=endpoint,
            api_key=self.api_key,
            query=query,
        )

    def send(self, request: httpx.Request, result_type: type[T]) -> T:
        """
        Send the request and decode the response into result_type.

        The response is always closed before returning, whatever the outcome.
        """
        logger.debug("sending %s %s", request.method, request.url)
        try:
            resp = self.transport.send(request, stream=True)
        except httpx.RequestError as e:
            raise TransportError("http client cannot send request") from e

        try:
            body = resp.read()
        except httpx.RequestError as e:
            raise TransportError("cannot read response body") from e
        finally:
            resp.close()

        logger.debug("received status=%s bytes=%d url=%s", resp.status_code, len(body), request.url)

        try:
            classify(resp.status_code, body, reason=resp.reason_phrase)
        except RemoteAPIError as e:
            logger.warning("IGDB error status=%s message=%s url=%s", e.status, e.message, request.url)
            raise

        return decode(body, result_type)

    def get(self, endpoint: str, result_type: type[T], *options: QueryOption) -> T:
        """
        Query `endpoint` with the given options and decode the results into result_type.

        Raises InvalidArgumentError, RequestConstructionError, TransportError,
        NoResultsError, RemoteAPIError or DecodeError depending on the failing stage.
        """
        request = self.request(endpoint, *options)
        return self.send(request, result_type)
