from __future__ import annotations

import json
import typing as tp

from hypernav._exceptions import ParseError
from hypernav._link import Link
from hypernav._utils import resolve

from ._base import JsonRepresentor

__all__ = ("SirenRepresentor",)


def _rels(item: tp.Dict[str, tp.Any]) -> tp.List[str]:
    rel = item.get("rel") or []
    if isinstance(rel, str):
        return [rel]
    return [value for value in rel if isinstance(value, str)] if isinstance(rel, list) else []


def _objects(value: tp.Any) -> tp.List[tp.Dict[str, tp.Any]]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


class SirenRepresentor(JsonRepresentor):
    """
    Siren (`application/vnd.siren+json`).

    `content` is the entity's `properties`. Embedded links add links,
    embedded representations with a `self` link are also exposed as
    embedded bodies. Links and entities that are not objects, or that
    have no `href`, are skipped.
    """

    def parse(self) -> None:
        body = self.load_json()
        if body is None:
            return
        if not isinstance(body, dict):
            raise ParseError(f"Siren entity from {self.uri} must be a JSON object")

        for siren_link in _objects(body.get("links")):
            self._add_links(_rels(siren_link), siren_link)

        for entity in _objects(body.get("entities")):
            if "href" in entity:
                self._add_links(_rels(entity), entity)
                continue

            self_link = next(
                (
                    item
                    for item in _objects(entity.get("links"))
                    if "self" in _rels(item) and isinstance(item.get("href"), str)
                ),
                None,
            )
            if self_link is None:
                continue
            self._add_links(_rels(entity), self_link)
            self.embedded[resolve(self.uri, self_link["href"])] = json.dumps(entity)

        self.content = body.get("properties")

    def _add_links(self, rels: tp.Iterable[str], item: tp.Dict[str, tp.Any]) -> None:
        if not isinstance(item.get("href"), str):
            return
        for rel in rels:
            self.links.append(
                Link(
                    rel=rel,
                    href=item["href"],
                    context=self.uri,
                    type=item.get("type"),
                    title=item.get("title"),
                )
            )
