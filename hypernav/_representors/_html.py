from __future__ import annotations

from bs4 import BeautifulSoup

from hypernav._link import Link

from ._base import Representor

__all__ = ("HtmlRepresentor",)


class HtmlRepresentor(Representor):
    """
    HTML documents: `<link>` and `<a>` elements that carry a `rel`.
    """

    def parse(self) -> None:
        self.content = self.body
        if not self.body:
            return

        soup = BeautifulSoup(self.body, "html.parser")

        for element in soup.find_all(["link", "a"], rel=True, href=True):
            # bs4 already splits multi-valued attributes such as rel
            rels = element["rel"]
            if isinstance(rels, str):
                rels = rels.split()
            for rel in rels:
                self.links.append(
                    Link(
                        rel=rel,
                        href=element["href"],
                        context=self.uri,
                        type=element.get("type"),
                        title=element.get("title"),
                        hreflang=element.get("hreflang"),
                    )
                )
