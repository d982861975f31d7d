"""Typed client for the official Brawl Stars API.

Every model can be fetched with a blocking call (``Player.fetch(client, tag)``)
or an awaitable one (``await Player.a_fetch(client, tag)``).
"""
from .config import ClientConfig, Credentials, CredentialLoaderError, load_credentials
from .constants import API_URI, USER_AGENT, Brawlers, __version__
from .errors import (
    APIError,
    AuthorizationError,
    BrawlApiError,
    FetchError,
    FetchFromError,
    JsonError,
    ParseTimeLikeError,
    RateLimitedError,
    RequestError,
    StatusError,
    UrlError,
    classify,
)
from .fetch import (
    PropFetchable,
    a_fetch_from,
    a_fetch_into,
    a_refetch,
    a_refetch_update,
    fetch_from,
    fetch_into,
    refetch,
    refetch_update,
)
from .http import Client, Request, Route, RouteKind, auto_hashtag
from .logging_config import setup_logging
from .models import *  # noqa: F401,F403
from .models import __all__ as _models_all

__all__ = [
    "API_URI",
    "APIError",
    "AuthorizationError",
    "BrawlApiError",
    "Brawlers",
    "Client",
    "ClientConfig",
    "CredentialLoaderError",
    "Credentials",
    "FetchError",
    "FetchFromError",
    "JsonError",
    "ParseTimeLikeError",
    "PropFetchable",
    "RateLimitedError",
    "Request",
    "RequestError",
    "Route",
    "RouteKind",
    "StatusError",
    "USER_AGENT",
    "UrlError",
    "__version__",
    "a_fetch_from",
    "a_fetch_into",
    "a_refetch",
    "a_refetch_update",
    "auto_hashtag",
    "classify",
    "fetch_from",
    "fetch_into",
    "load_credentials",
    "refetch",
    "refetch_update",
    "setup_logging",
    *_models_all,
]
