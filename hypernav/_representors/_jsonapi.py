from __future__ import annotations

import typing as tp

from hypernav._link import Link

from ._base import JsonRepresentor

__all__ = ("JsonApiRepresentor",)


class JsonApiRepresentor(JsonRepresentor):
    """
    JSON:API (`application/vnd.api+json`).

    Top-level `links` become links. Each member of a collection that has a
    `links.self` becomes an `item` link.
    """

    def parse(self) -> None:
        body = self.load_json()
        if not isinstance(body, dict):
            self.content = body
            return

        links = body.get("links")
        if isinstance(links, dict):
            for rel, value in links.items():
                href = self._href(value)
                if href is not None:
                    self.links.append(Link(rel=rel, href=href, context=self.uri))

        data = body.get("data")
        if isinstance(data, list):
            for member in data:
                member_links = member.get("links") if isinstance(member, dict) else None
                if not isinstance(member_links, dict):
                    continue
                href = self._href(member_links.get("self"))
                if href is not None:
                    self.links.append(Link(rel="item", href=href, context=self.uri))

        self.content = body

    @staticmethod
    def _href(value: tp.Any) -> tp.Optional[str]:
        # A link object is either a plain URI string or {"href": ..., "meta": ...}
        if isinstance(value, str):
            return value
        if isinstance(value, dict) and isinstance(value.get("href"), str):
            return value["href"]
        return None
