"""HTTP layer: routes, request construction and the authenticated client."""
from .client import Client
from .request import Request, bearer_value
from .routes import Route, RouteKind, auto_hashtag, render

__all__ = ["Client", "Request", "Route", "RouteKind", "auto_hashtag", "bearer_value", "render"]
