from __future__ import annotations

import logging
import types
import typing as tp

import httpx

from hypernav._cache import ResourceCache
from hypernav._content_types import ContentType, ContentTypeRegistry
from hypernav._factory import create_representor
from hypernav._follower import Follower
from hypernav._invalidation import AsyncInvalidationClient, after_request, before_request
from hypernav._link import Link, LinkVariables
from hypernav._representors import AnyRepresentor
from hypernav._resource import Resource
from hypernav._synchronization import InFlightRequests
from hypernav._utils import resolve
from hypernav._version import __version__

if tp.TYPE_CHECKING:  # pragma: no cover
    from typing_extensions import Self

__all__ = ("Client",)

logger = logging.getLogger("hypernav.client")

USER_AGENT = f"hypernav/{__version__}"


class Client:
    """
    Entry point for a hypermedia API.

    All discovery starts at the bookmark. The client owns one resource per
    URI, the content type table and the HTTP client every request goes
    through, so unsafe requests made through any of its resources (or
    through `fetch`) keep the resource cache consistent.

    Args:
        bookmark: Absolute URI discovery starts from.
        content_types: Content type table. Defaults to HAL, JSON:API,
            Siren, JSON and HTML in that order of preference.
        transport: Transport performing the HTTP exchange. Defaults to
            `httpx.AsyncHTTPTransport`.
        headers: Headers sent with every request.
        **kwargs: Passed on to `httpx.AsyncClient` (`auth`, `timeout`,
            `follow_redirects`, ...).
    """

    def __init__(
        self,
        bookmark: str,
        *,
        content_types: tp.Union[ContentTypeRegistry, tp.Iterable[ContentType], None] = None,
        transport: tp.Optional[httpx.AsyncBaseTransport] = None,
        headers: tp.Optional[tp.Mapping[str, str]] = None,
        **kwargs: tp.Any,
    ) -> None:
        self.bookmark = bookmark

        if isinstance(content_types, ContentTypeRegistry):
            self.content_types = content_types
        else:
            self.content_types = ContentTypeRegistry(content_types)

        self.resource_cache = ResourceCache(resource_factory=lambda uri: Resource(self, uri))
        self.in_flight: InFlightRequests[AnyRepresentor] = InFlightRequests()

        self.http = AsyncInvalidationClient(
            cache=self.resource_cache,
            transport=transport,
            headers={"User-Agent": USER_AGENT, **(headers or {})},
            **kwargs,
        )

    def get_resource(self, uri: tp.Optional[str] = None) -> Resource:
        """
        Returns a resource by its uri.

        No HTTP request is made. Without a uri the bookmark resource is
        returned, relative uris are resolved against the bookmark.
        """
        return self.resource_cache.lookup_or_create(resolve(self.bookmark, uri))

    go = get_resource

    def follow(self, rel: str, variables: tp.Optional[LinkVariables] = None) -> Follower:
        """Shortcut for `get_resource().follow(rel, variables)`."""
        return self.get_resource().follow(rel, variables)

    async def fetch(
        self,
        url_or_request: tp.Union[str, httpx.Request],
        method: str = "GET",
        **kwargs: tp.Any,
    ) -> httpx.Response:
        """
        Perform an arbitrary request.

        The response is returned whatever its status. The request still
        passes through the cache invalidation hooks.
        """
        if isinstance(url_or_request, httpx.Request):
            logger.debug(f"{url_or_request.method} {url_or_request.url}")
            return await self.http.send(url_or_request)

        url = resolve(self.bookmark, url_or_request)
        logger.debug(f"{method} {url}")
        return await self.http.request(method, url, **kwargs)

    def create_representation(
        self,
        uri: str,
        content_type: tp.Optional[str],
        body: tp.Optional[str],
        header_links: tp.Sequence[Link],
    ) -> AnyRepresentor:
        return create_representor(self.content_types, uri, content_type, body, header_links)

    def get_accept_header(self) -> str:
        """Accept header built from the registered content types."""
        return self.content_types.accept_header()

    def before_request(self, request: httpx.Request) -> None:
        before_request(self.resource_cache, request)

    def after_request(self, request: httpx.Request, response: httpx.Response) -> None:
        after_request(self.resource_cache, request, response)

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: tp.Optional[tp.Type[BaseException]] = None,
        exc_value: tp.Optional[BaseException] = None,
        traceback: tp.Optional[types.TracebackType] = None,
    ) -> None:
        await self.aclose()
