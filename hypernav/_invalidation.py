from __future__ import annotations

import logging
import types
import typing as tp

import httpx

from hypernav._cache import ResourceCache
from hypernav._headers import parse_link_headers
from hypernav._utils import is_safe_method, resolve

if tp.TYPE_CHECKING:  # pragma: no cover
    from typing_extensions import Self

__all__ = ("AsyncInvalidationClient", "AsyncInvalidationTransport", "before_request", "after_request")

logger = logging.getLogger("hypernav.invalidation")


def before_request(cache: ResourceCache, request: httpx.Request) -> None:
    """Clear the request target before an unsafe request is sent."""
    if is_safe_method(request.method):
        return

    cache.invalidate(str(request.url))


def after_request(cache: ResourceCache, request: httpx.Request, response: httpx.Response) -> None:
    """
    Clear every resource an unsafe response names with `rel="invalidates"`.

    Targets are resolved against the request URI.
    """
    if is_safe_method(request.method):
        return

    request_uri = str(request.url)
    for link in parse_link_headers(response.headers.get_list("Link")):
        if not link.has_rel("invalidates"):
            continue
        uri = resolve(request_uri, link.uri)
        logger.debug(f"{request.method} {request_uri} invalidates {uri}")
        cache.invalidate(uri)


class AsyncInvalidationTransport(httpx.AsyncBaseTransport):
    """
    An HTTPX transport that keeps a `ResourceCache` consistent.

    Every exchange runs as a fixed pipeline: `before_request`, the
    exchange on the wrapped transport, then `after_request`. When the
    wrapped transport raises, the error propagates unchanged and the
    second stage does not run. Responses outside of the 2xx range skip
    the second stage too.

    :param next_transport: `Transport` that performs the actual exchange
    :type next_transport: httpx.AsyncBaseTransport
    :param cache: Cache whose entries get invalidated
    :type cache: ResourceCache
    """

    def __init__(self, next_transport: httpx.AsyncBaseTransport, cache: ResourceCache) -> None:
        self.next_transport = next_transport
        self.cache = cache

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        before_request(self.cache, request)

        response = await self.next_transport.handle_async_request(request)

        if response.is_success:
            after_request(self.cache, request, response)
        return response

    async def aclose(self) -> None:
        await self.next_transport.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: tp.Optional[tp.Type[BaseException]] = None,
        exc_value: tp.Optional[BaseException] = None,
        traceback: tp.Optional[types.TracebackType] = None,
    ) -> None:
        await self.aclose()


class AsyncInvalidationClient(httpx.AsyncClient):
    """
    `httpx.AsyncClient` whose transports, proxy transports included, are
    wrapped in `AsyncInvalidationTransport`.
    """

    def __init__(self, *args: tp.Any, cache: ResourceCache, **kwargs: tp.Any) -> None:
        self._cache = cache
        super().__init__(*args, **kwargs)

    def _init_transport(self, *args, **kwargs) -> AsyncInvalidationTransport:  # type: ignore
        _transport = super()._init_transport(*args, **kwargs)
        return AsyncInvalidationTransport(next_transport=_transport, cache=self._cache)

    def _init_proxy_transport(self, *args, **kwargs) -> AsyncInvalidationTransport:  # type: ignore
        _transport = super()._init_proxy_transport(*args, **kwargs)  # pragma: no cover
        return AsyncInvalidationTransport(next_transport=_transport, cache=self._cache)  # pragma: no cover
