from __future__ import annotations

import typing as tp
from dataclasses import dataclass

import httpx
import uritemplate

from hypernav._headers import parse_link_headers
from hypernav._utils import resolve

__all__ = ("Link", "LinkVariables", "links_from_headers")

LinkVariables = tp.Mapping[str, tp.Any]


@dataclass(frozen=True)
class Link:
    """
    A typed relation from a context resource to a target.

    `href` is kept exactly as the server sent it (it may be relative or a
    URI template), `context` is the absolute URI it is relative to.
    """

    rel: str
    href: str
    context: str
    type: tp.Optional[str] = None
    title: tp.Optional[str] = None
    name: tp.Optional[str] = None
    hreflang: tp.Optional[str] = None
    templated: bool = False

    def resolve(self, variables: tp.Optional[LinkVariables] = None) -> str:
        """
        Return the absolute target URI, expanding the template if needed.
        """
        href = self.href
        if self.templated:
            href = uritemplate.expand(href, dict(variables or {}))
        return resolve(self.context, href)


def links_from_headers(headers: httpx.Headers, context: str) -> tp.List[Link]:
    """
    Build one `Link` per relation type found in the `Link` headers.
    """
    links: tp.List[Link] = []
    for value in parse_link_headers(headers.get_list("Link")):
        for rel in value.rels:
            links.append(
                Link(
                    rel=rel,
                    href=value.uri,
                    context=context,
                    type=value.get("type"),
                    title=value.get("title"),
                    hreflang=value.get("hreflang"),
                )
            )
    return links
