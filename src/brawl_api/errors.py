"""Exceptions raised by the Brawl Stars API client and failed-response classification."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from .constants import (
    HEADER_VALUE_PATTERN,
    RATELIMIT_LIMIT_HEADER,
    RATELIMIT_REMAINING_HEADER,
    RATELIMIT_RESET_HEADER,
)


logger = logging.getLogger(__name__)

_UNSIGNED = re.compile(r"^[0-9]+$")


@dataclass(slots=True)
class APIError:
    """Structured body the API sends along with most failed requests.

    Every field is optional on the wire; missing ones fall back to an empty
    reason or ``None``.
    """

    reason: str = ""
    message: Optional[str] = None
    err_type: Optional[str] = None
    detail: Optional[dict[str, Any]] = None

    @classmethod
    def from_json(cls, data: Any) -> "APIError":
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")
        detail = data.get("detail")
        return cls(
            reason=_opt_str(data.get("reason")) or "",
            message=_opt_str(data.get("message")),
            err_type=_opt_str(data.get("type")),
            detail=detail if isinstance(detail, dict) else None,
        )


class BrawlApiError(Exception):
    """Base class for every error raised by this package."""


class FetchError(BrawlApiError):
    """Raised when fetching a model fails, for any reason."""


class RequestError(FetchError):
    """The transport failed before a response was received."""

    def __init__(self, original: httpx.HTTPError) -> None:
        super().__init__(str(original) or type(original).__name__)
        self.original = original


class UrlError(FetchError):
    """A route rendered to a string that is not a usable URL."""

    def __init__(self, url: str) -> None:
        super().__init__("Invalid URL was given/built.")
        self.url = url


class AuthorizationError(FetchError):
    """The API key cannot be sent as an HTTP header value."""

    def __init__(self) -> None:
        super().__init__("Auth key was provided in an invalid format for a header.")


class JsonError(FetchError):
    """The response body could not be decoded into the requested model."""

    def __init__(self, description: str) -> None:
        super().__init__(description)
        self.description = description


class RateLimitedError(FetchError):
    """The API refused the request because the key's rate limit was reached.

    ``time_until_reset`` is the raw ``x-ratelimit-reset`` header value; it is
    left unparsed so the error can be built whatever format the API uses.
    """

    def __init__(
        self,
        limit: Optional[int] = None,
        remaining: Optional[int] = None,
        time_until_reset: Optional[str] = None,
    ) -> None:
        self.limit = limit
        self.remaining = remaining
        self.time_until_reset = time_until_reset
        super().__init__(self._describe())

    def _describe(self) -> str:
        lim_part = f" Limit of {self.limit} requests/min." if self.limit is not None else ""
        time_part = (
            f" Resets at timestamp {self.time_until_reset}." if self.time_until_reset is not None else ""
        )
        dot = "." if self.limit is None and self.time_until_reset is None else ":"
        return f"Ratelimited{dot}{lim_part}{time_part}"


class StatusError(FetchError):
    """The API answered with an unsuccessful status code."""

    def __init__(
        self,
        status: int,
        api_error: Optional[APIError] = None,
        value: Any = None,
    ) -> None:
        self.status = status
        self.api_error = api_error
        self.value = value
        super().__init__(
            httpx.codes.get_reason_phrase(status) or "Unknown HTTP status code error received"
        )


class FetchFromError(FetchError):
    """A model could not be converted into another one."""


class ParseTimeLikeError(BrawlApiError, ValueError):
    """A battle timestamp did not match the expected format."""

    def __init__(self, reason: str, offender: Optional[str] = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.offender = offender


def classify(response: httpx.Response, value: Any = None) -> FetchError:
    """Turn an unsuccessful response into the matching :class:`FetchError`.

    Parameters
    ----------
    response:
        The failed response. Its body must already have been read.
    value:
        The body decoded as JSON, when the caller already did it.

    Returns
    -------
    FetchError
        A :class:`RateLimitedError` whenever the rate-limit reset header is
        present (whatever the status code), a :class:`StatusError` otherwise.
        This function never raises.
    """

    headers = response.headers

    reset = _header_str(headers, RATELIMIT_RESET_HEADER)
    if reset is not None:
        error = RateLimitedError(
            limit=_header_int(headers, RATELIMIT_LIMIT_HEADER),
            remaining=_header_int(headers, RATELIMIT_REMAINING_HEADER),
            time_until_reset=reset,
        )
        logger.debug("Response %s classified as rate limited: %s", response.status_code, error)
        return error

    if value is None:
        value = _read_json(response)

    api_error: Optional[APIError] = None
    if value is not None:
        try:
            api_error = APIError.from_json(value)
        except TypeError:
            api_error = None

    logger.debug("Response %s classified as status error (reason=%r)", response.status_code,
                 api_error.reason if api_error else None)
    return StatusError(response.status_code, api_error, value)


def _read_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except (ValueError, httpx.StreamError):
        return None


def _header_str(headers: httpx.Headers, name: str) -> Optional[str]:
    raw = headers.get(name)
    if raw is None or not HEADER_VALUE_PATTERN.fullmatch(raw):
        return None
    return raw


def _header_int(headers: httpx.Headers, name: str) -> Optional[int]:
    raw = _header_str(headers, name)
    if raw is None or not _UNSIGNED.match(raw.strip()):
        return None
    return int(raw.strip())


def _opt_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


__all__ = [
    "APIError",
    "AuthorizationError",
    "BrawlApiError",
    "FetchError",
    "FetchFromError",
    "JsonError",
    "ParseTimeLikeError",
    "RateLimitedError",
    "RequestError",
    "StatusError",
    "UrlError",
    "classify",
]
