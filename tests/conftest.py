import json
import typing as tp

import anyio
import httpx
import pytest

from hypernav import Client, Resource

BOOKMARK = "http://example.org/"


class FakeApi:
    """
    Routing table for `httpx.MockTransport`.

    Routes are keyed by (method, absolute url). Each route builds a fresh
    response per request, so a route can be hit many times.
    """

    def __init__(self) -> None:
        self.routes: tp.Dict[tp.Tuple[str, str], tp.Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: tp.List[httpx.Request] = []
        self.delay: float = 0

    def add(
        self,
        method: str,
        path: str,
        status_code: int = 200,
        body: tp.Any = None,
        content_type: tp.Optional[str] = "application/hal+json",
        headers: tp.Optional[tp.List[tp.Tuple[str, str]]] = None,
    ) -> None:
        def build(request: httpx.Request) -> httpx.Response:
            response_headers = list(headers or [])
            if content_type is not None:
                response_headers.append(("Content-Type", content_type))
            if body is None:
                content = b""
            elif isinstance(body, str):
                content = body.encode()
            else:
                content = json.dumps(body).encode()
            return httpx.Response(status_code, headers=response_headers, content=content)

        self.routes[(method, BOOKMARK.rstrip("/") + path)] = build

    def add_error(self, method: str, path: str, exc: Exception) -> None:
        def build(request: httpx.Request) -> httpx.Response:
            raise exc

        self.routes[(method, BOOKMARK.rstrip("/") + path)] = build

    def count(self, method: str, path: str) -> int:
        url = BOOKMARK.rstrip("/") + path
        return sum(1 for request in self.requests if request.method == method and str(request.url) == url)

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.delay:
            await anyio.sleep(self.delay)
        build = self.routes.get((request.method, str(request.url)))
        if build is None:
            return httpx.Response(404, headers=[("Content-Type", "text/plain")], content=b"Not found")
        return build(request)


@pytest.fixture()
def api() -> FakeApi:
    return FakeApi()


@pytest.fixture()
def client(api: FakeApi) -> Client:
    return Client(BOOKMARK, transport=httpx.MockTransport(api.handler))


def prime(client: Client, path: str, body: tp.Any = None) -> Resource:
    """Put a HAL representation for `path` into the cache without a request."""
    resource = client.get_resource(path)
    resource.cache_representation(
        client.create_representation(resource.uri, "application/hal+json", json.dumps(body or {}), [])
    )
    return resource
