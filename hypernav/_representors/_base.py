from __future__ import annotations

import json
import typing as tp
from abc import ABC, abstractmethod

from hypernav._exceptions import LinkNotFound, ParseError
from hypernav._link import Link

__all__ = ("Representor",)


class Representor(ABC):
    """
    Uniform view over a parsed hypermedia document.

    Every variant is built from the same four arguments and exposes the
    same capabilities: `links`, `embedded` and `content`.

    Args:
        uri: Absolute URI the body was fetched from.
        content_type: Media type of the body, without parameters.
        body: Raw body, or None for empty responses.
        header_links: Links taken from the HTTP `Link` headers.
    """

    def __init__(
        self,
        uri: str,
        content_type: str,
        body: tp.Optional[str],
        header_links: tp.Sequence[Link],
    ) -> None:
        self.uri = uri
        self.content_type = content_type
        self.body = body
        self.links: tp.List[Link] = list(header_links)
        self.embedded: tp.Dict[str, str] = {}
        self.content: tp.Any = None
        self.parse()

    @abstractmethod
    def parse(self) -> None:
        """Populate `links`, `embedded` and `content` from `body`."""

    def get_links(self, rel: tp.Optional[str] = None) -> tp.List[Link]:
        if rel is None:
            return list(self.links)
        return [link for link in self.links if link.rel == rel]

    def get_link(self, rel: str) -> Link:
        for link in self.links:
            if link.rel == rel:
                return link
        raise LinkNotFound(rel, self.uri)

    def has_link(self, rel: str) -> bool:
        return any(link.rel == rel for link in self.links)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.uri!r} links={len(self.links)} embedded={len(self.embedded)}>"


class JsonRepresentor(Representor):
    """Shared body decoding for the JSON based formats."""

    def load_json(self) -> tp.Any:
        if not self.body:
            return None
        try:
            return json.loads(self.body)
        except ValueError as exc:
            raise ParseError(f"Could not parse {self.content_type} body from {self.uri}: {exc}") from exc
