from __future__ import annotations

import json
import logging
import typing as tp

import httpx

from hypernav._exceptions import http_error_from_response
from hypernav._follower import Follower
from hypernav._link import Link, LinkVariables, links_from_headers
from hypernav._representors import AnyRepresentor
from hypernav._utils import resolve

if tp.TYPE_CHECKING:  # pragma: no cover
    from hypernav._client import Client

__all__ = ("Resource",)

logger = logging.getLogger("hypernav.resource")

DEFAULT_SEND_CONTENT_TYPE = "application/json"


class Resource:
    """
    Handle for one URI.

    Handles are created by the client's resource cache and are unique per
    URI, so state attached to a handle is visible to every caller that
    looks the URI up again. A handle keeps the last fetched representation
    until it is refreshed or invalidated.
    """

    def __init__(self, client: Client, uri: str) -> None:
        self.client = client
        self.uri = uri
        self.content_type: tp.Optional[str] = None
        self._representation: tp.Optional[AnyRepresentor] = None

    @property
    def is_cached(self) -> bool:
        return self._representation is not None

    def clear_cache(self) -> None:
        self._representation = None

    def cache_representation(self, representor: AnyRepresentor) -> None:
        """
        Store `representor` and prime the handles of its embedded resources.
        """
        self._representation = representor
        self.content_type = representor.content_type

        for uri, body in representor.embedded.items():
            embedded = self.client.create_representation(uri, representor.content_type, body, [])
            self.client.get_resource(uri).cache_representation(embedded)

    async def representation(self) -> AnyRepresentor:
        if self._representation is not None:
            return self._representation
        return await self.refresh()

    async def get(self) -> tp.Any:
        return (await self.representation()).content

    async def refresh(self) -> AnyRepresentor:
        """
        Fetch the resource, whether or not it is cached.

        Concurrent refreshes of the same URI share one request.
        """
        return await self.client.in_flight.run(self.uri, self._refresh)

    async def _refresh(self) -> AnyRepresentor:
        logger.debug(f"Refreshing {self.uri}")
        response = await self.fetch_or_raise(headers={"Accept": self.client.get_accept_header()})
        representor = self.client.create_representation(
            self.uri,
            response.headers.get("Content-Type"),
            response.text,
            links_from_headers(response.headers, self.uri),
        )
        self.cache_representation(representor)
        return representor

    async def put(self, body: tp.Any) -> None:
        await self.fetch_or_raise("PUT", **self._body_kwargs(body))

    async def patch(self, body: tp.Any) -> None:
        await self.fetch_or_raise("PATCH", **self._body_kwargs(body))

    async def delete(self) -> None:
        await self.fetch_or_raise("DELETE")

    async def post(self, body: tp.Any) -> tp.Optional[Resource]:
        """
        POST to this resource.

        Returns the created resource when the server answers with `201
        Created` and a `Location` header, `None` otherwise.
        """
        response = await self.fetch_or_raise("POST", **self._body_kwargs(body))
        location = response.headers.get("Location")
        if response.status_code == 201 and location:
            return self.go(location)
        return None

    async def links(self, rel: tp.Optional[str] = None) -> tp.List[Link]:
        return (await self.representation()).get_links(rel)

    async def link(self, rel: str) -> Link:
        return (await self.representation()).get_link(rel)

    async def has_link(self, rel: str) -> bool:
        return (await self.representation()).has_link(rel)

    def follow(self, rel: str, variables: tp.Optional[LinkVariables] = None) -> Follower:
        return Follower(self, rel, variables)

    async def follow_all(self, rel: str) -> tp.List[Resource]:
        return [self.go(link.resolve()) for link in await self.links(rel)]

    def go(self, uri: str) -> Resource:
        """Return the handle for `uri`, resolved against this resource."""
        return self.client.get_resource(resolve(self.uri, uri))

    async def fetch(self, method: str = "GET", **kwargs: tp.Any) -> httpx.Response:
        return await self.client.fetch(self.uri, method=method, **kwargs)

    async def fetch_or_raise(self, method: str = "GET", **kwargs: tp.Any) -> httpx.Response:
        response = await self.fetch(method, **kwargs)
        if not response.is_success:
            raise http_error_from_response(response)
        return response

    def _body_kwargs(self, body: tp.Any) -> tp.Dict[str, tp.Any]:
        headers = {"Content-Type": self.content_type or DEFAULT_SEND_CONTENT_TYPE}
        if isinstance(body, (str, bytes)):
            return {"content": body, "headers": headers}
        return {"content": json.dumps(body), "headers": headers}

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.uri!r}>"
