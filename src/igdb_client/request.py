from __future__ import annotations

import logging

import httpx

from igdb_client.core.errors import RequestConstructionError
from igdb_client.query.options import Query

logger = logging.getLogger(__name__)


def _target_url(root_url: str, endpoint: str) -> httpx.URL:
    try:
        url = httpx.URL(f"{root_url.rstrip('/')}/{endpoint.lstrip('/')}")
    except (httpx.InvalidURL, TypeError, ValueError) as e:
        raise RequestConstructionError(f"cannot make request for '{endpoint}' endpoint") from e

    if url.scheme not in ("http", "https") or not url.host:
        raise RequestConstructionError(
            f"cannot make request for '{endpoint}' endpoint: malformed URL {str(url)!r}"
        )
    return url


def build_request(
    http: httpx.Client,
    *,
    root_url: str,
    endpoint: str,
    api_key: str,
    query: Query,
) -> httpx.Request:
    """
    Build (but do not send) a GET request for `root_url + endpoint`.

    The Apicalypse query travels as the request body, which is how the service
    reads it for GET requests.
    """
    url = _target_url(root_url, endpoint)

    try:
        body = query.encode().encode("utf-8")
    except UnicodeEncodeError as e:
        raise RequestConstructionError(f"cannot encode query for '{endpoint}' endpoint") from e

    headers = {
        "user-key": api_key,
        "Accept": "application/json",
    }
    try:
        request = http.build_request("GET", url, content=body, headers=headers)
    except (httpx.InvalidURL, TypeError, ValueError) as e:
        raise RequestConstructionError(f"cannot make request for '{endpoint}' endpoint") from e

    logger.debug("built request endpoint=%s body=%s", endpoint, body.decode("utf-8"))
    return request
