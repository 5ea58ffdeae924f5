from __future__ import annotations

import json
import typing as tp

from hypernav._link import Link
from hypernav._utils import resolve

from ._base import JsonRepresentor

__all__ = ("HalRepresentor",)


class HalRepresentor(JsonRepresentor):
    """
    HAL (`application/hal+json`, draft-kelly-json-hal).

    `_links` become links, `_embedded` resources become both links and
    embedded bodies keyed by their `self` href. Any other JSON value is
    kept as `content` as is.
    """

    def parse(self) -> None:
        body = self.load_json()
        if not isinstance(body, dict):
            self.content = body
            return

        content = dict(body)
        hal_links = content.pop("_links", None)
        hal_embedded = content.pop("_embedded", None)

        if isinstance(hal_links, dict):
            for rel, value in hal_links.items():
                if rel == "curies":
                    continue
                for item in value if isinstance(value, list) else [value]:
                    if isinstance(item, dict) and isinstance(item.get("href"), str):
                        self.links.append(self._make_link(rel, item))

        if isinstance(hal_embedded, dict):
            for rel, value in hal_embedded.items():
                for item in value if isinstance(value, list) else [value]:
                    self._parse_embedded(rel, item)

        self.content = content

    def _parse_embedded(self, rel: str, item: tp.Any) -> None:
        if not isinstance(item, dict):
            return
        item_links = item.get("_links")
        self_link = item_links.get("self") if isinstance(item_links, dict) else None
        if not isinstance(self_link, dict) or not isinstance(self_link.get("href"), str):
            # Embedded resources without a self link cannot be addressed
            return

        link = self._make_link(rel, self_link)
        self.links.append(link)
        self.embedded[resolve(self.uri, link.href)] = json.dumps(item)

    def _make_link(self, rel: str, item: tp.Dict[str, tp.Any]) -> Link:
        return Link(
            rel=rel,
            href=item["href"],
            context=self.uri,
            type=item.get("type"),
            title=item.get("title"),
            name=item.get("name"),
            hreflang=item.get("hreflang"),
            templated=bool(item.get("templated", False)),
        )
