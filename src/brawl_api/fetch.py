"""Property-based fetching shared by every model.

A model plugs in by subclassing :class:`PropFetchable` and supplying three
things: ``get_fetch_prop`` (the property identifying an instance),
``get_route`` (property to :class:`~brawl_api.http.routes.Route`) and
``from_json``. Fetching, refetching and model-to-model conversion are then
provided by the helpers in this module, each issuing at most one request.
"""
from __future__ import annotations

import copy
import dataclasses
import logging
from typing import Any, Callable, Dict, Tuple, Type, TypeVar

import httpx

from .errors import FetchFromError, JsonError, RequestError, classify
from .http.client import Client
from .http.routes import Route


logger = logging.getLogger(__name__)

T = TypeVar("T", bound="PropFetchable")
M = TypeVar("M")

# (target model, source type) -> function deriving the target's property from a source value
_CONVERSIONS: Dict[Tuple[type, type], Callable[[Any], Any]] = {}


class PropFetchable:
    """Base class for models that can be fetched from the API by a property."""

    __slots__ = ()

    def get_fetch_prop(self) -> Any:
        """Return the property that fetches this very instance again."""

        raise NotImplementedError

    @classmethod
    def get_route(cls, prop: Any) -> Route:
        raise NotImplementedError

    @classmethod
    def from_json(cls: Type[T], data: Any) -> T:
        raise NotImplementedError

    @classmethod
    def make_prop(cls, prop: Any, *args: Any) -> Any:
        """Build the fetch property from the arguments given to :meth:`fetch`.

        Models identified by a single value take it as is; models identified by
        several values (leaderboards) override this to pack them together.
        """

        if args:
            raise TypeError(f"{cls.__name__} is fetched by a single property, got {len(args) + 1}")
        return prop

    def _with_prop(self: T, prop: Any) -> T:
        """Hook to fill fields the API does not return from the fetch property."""

        return self

    @classmethod
    def fetch(cls: Type[T], client: Client, prop: Any = None, *args: Any) -> T:
        """Fetch an instance, blocking until the whole response was read."""

        prop = cls.make_prop(prop, *args)
        return fetch_route(client, cls.get_route(prop), cls)._with_prop(prop)

    @classmethod
    async def a_fetch(cls: Type[T], client: Client, prop: Any = None, *args: Any) -> T:
        """Fetch an instance without blocking the event loop."""

        prop = cls.make_prop(prop, *args)
        instance = await a_fetch_route(client, cls.get_route(prop), cls)
        return instance._with_prop(prop)

    def refetch(self: T, client: Client) -> T:
        return refetch(client, self)

    async def a_refetch(self: T, client: Client) -> T:
        return await a_refetch(client, self)

    def refetch_update(self: T, client: Client) -> T:
        return refetch_update(client, self)

    async def a_refetch_update(self: T, client: Client) -> T:
        return await a_refetch_update(client, self)

    @classmethod
    def fetch_from(cls: Type[T], client: Client, value: Any) -> T:
        return fetch_from(client, cls, value)

    @classmethod
    async def a_fetch_from(cls: Type[T], client: Client, value: Any) -> T:
        return await a_fetch_from(client, cls, value)

    def fetch_into(self, client: Client, target: Type[M]) -> M:
        return fetch_into(client, self, target)

    async def a_fetch_into(self, client: Client, target: Type[M]) -> M:
        return await a_fetch_into(client, self, target)


def fetch_route(client: Client, route: Route, model: Type[M]) -> M:
    """Request ``route`` and decode the response body as ``model``.

    Raises
    ------
    FetchError
        A subclass describing why the request or the decoding failed.
    """

    request = client.build_endpoint_get(route)
    logger.debug("GET %s", request.url)
    try:
        response = client.inner.send(request, stream=True)
    except httpx.HTTPError as exc:
        raise RequestError(exc) from exc
    try:
        try:
            response.read()
        except httpx.HTTPError as exc:
            raise RequestError(exc) from exc
        return _decode(response, model)
    finally:
        response.close()


async def a_fetch_route(client: Client, route: Route, model: Type[M]) -> M:
    """Async counterpart of :func:`fetch_route`."""

    request = client.a_build_endpoint_get(route)
    logger.debug("GET %s (async)", request.url)
    try:
        response = await client.a_inner.send(request, stream=True)
    except httpx.HTTPError as exc:
        raise RequestError(exc) from exc
    try:
        try:
            await response.aread()
        except httpx.HTTPError as exc:
            raise RequestError(exc) from exc
        return _decode(response, model)
    finally:
        await response.aclose()


def _decode(response: httpx.Response, model: Type[M]) -> M:
    if not response.is_success:
        error = classify(response)
        logger.debug("GET %s failed: %s", response.request.url, error)
        raise error
    try:
        value = response.json()
    except ValueError as exc:
        raise JsonError(f"Response body is not valid JSON: {exc}") from exc
    try:
        return model.from_json(value)
    except (TypeError, ValueError, AttributeError) as exc:
        raise JsonError(f"Could not decode {model.__name__}: {exc}") from exc


def refetch(client: Client, instance: T) -> T:
    """Fetch a brand new copy of ``instance`` using its own property."""

    return type(instance).fetch(client, instance.get_fetch_prop())


async def a_refetch(client: Client, instance: T) -> T:
    return await type(instance).a_fetch(client, instance.get_fetch_prop())


def refetch_update(client: Client, instance: T) -> T:
    """Refetch ``instance`` and replace its contents with the fresh data."""

    _replace_contents(instance, refetch(client, instance))
    return instance


async def a_refetch_update(client: Client, instance: T) -> T:
    _replace_contents(instance, await a_refetch(client, instance))
    return instance


def _replace_contents(target: Any, source: Any) -> None:
    for f in dataclasses.fields(target):
        setattr(target, f.name, getattr(source, f.name))


def register_conversion(target: type, source: type, derive: Callable[[Any], Any]) -> None:
    """Allow ``target`` to be fetched from a ``source`` value.

    ``derive`` maps the source value to the property passed to
    ``target.fetch``; it may raise :class:`FetchFromError` when the value does
    not carry enough information.
    """

    _CONVERSIONS[(target, source)] = derive


def conversion_prop(target: type, value: Any) -> Any:
    for source in type(value).__mro__:
        derive = _CONVERSIONS.get((target, source))
        if derive is not None:
            return derive(value)
    raise FetchFromError(f"Cannot fetch {target.__name__} from {type(value).__name__}.")


def fetch_from(client: Client, target: Type[T], value: Any) -> T:
    """Fetch a ``target`` model using data found in another model.

    Fetching a model from an instance of itself returns a copy and makes no
    request at all.
    """

    if isinstance(value, target):
        return copy.deepcopy(value)
    return target.fetch(client, conversion_prop(target, value))


async def a_fetch_from(client: Client, target: Type[T], value: Any) -> T:
    if isinstance(value, target):
        return copy.deepcopy(value)
    return await target.a_fetch(client, conversion_prop(target, value))


def fetch_into(client: Client, value: Any, target: Type[T]) -> T:
    return fetch_from(client, target, value)


async def a_fetch_into(client: Client, value: Any, target: Type[T]) -> T:
    return await a_fetch_from(client, target, value)


__all__ = [
    "PropFetchable",
    "a_fetch_from",
    "a_fetch_into",
    "a_fetch_route",
    "a_refetch",
    "a_refetch_update",
    "conversion_prop",
    "fetch_from",
    "fetch_into",
    "fetch_route",
    "refetch",
    "refetch_update",
    "register_conversion",
]
