"""Construction of authenticated requests to the API."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Optional

import httpx

from ..constants import HEADER_VALUE_PATTERN, USER_AGENT
from ..errors import AuthorizationError, UrlError

if TYPE_CHECKING:
    from .client import Client


logger = logging.getLogger(__name__)


def bearer_value(auth_key: str) -> str:
    """Return the ``Authorization`` header value for a key.

    Raises
    ------
    AuthorizationError
        If the resulting value contains characters illegal in a header.
    """

    value = auth_key if auth_key.startswith("Bearer ") else f"Bearer {auth_key}"
    if not HEADER_VALUE_PATTERN.fullmatch(value):
        raise AuthorizationError()
    return value


@dataclass(slots=True)
class Request:
    """A request to be sent to the API: always a bodiless GET in practice."""

    endpoint: str = ""
    method: str = "GET"
    headers: Optional[Dict[str, str]] = None
    body: Optional[bytes] = None

    def build(self, client: "Client") -> httpx.Request:
        """Build the request for the blocking transport."""

        return self._generic_build(client.inner, client.auth_key)

    def a_build(self, client: "Client") -> httpx.Request:
        """Build the request for the non-blocking transport."""

        return self._generic_build(client.a_inner, client.auth_key)

    def _generic_build(self, transport: httpx.Client | httpx.AsyncClient, auth_key: str) -> httpx.Request:
        url = _parse_url(self.endpoint)
        headers = self.build_headers(auth_key)
        if self.body is not None:
            headers["Content-Length"] = str(len(self.body))
        logger.debug("Building %s %s", self.method, url)
        return transport.build_request(self.method, url, headers=headers, content=self.body)

    def build_headers(self, auth_key: str) -> Dict[str, str]:
        headers = {
            "User-Agent": USER_AGENT,
            "Authorization": bearer_value(auth_key),
            "Content-Type": "application/json",
            "Content-Length": "0",
        }
        if self.headers:
            headers.update(self.headers)
        return headers


def _parse_url(endpoint: str) -> httpx.URL:
    try:
        url = httpx.URL(endpoint)
    except (httpx.InvalidURL, TypeError) as exc:
        raise UrlError(endpoint) from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise UrlError(endpoint)
    return url


__all__ = ["Request", "bearer_value"]
