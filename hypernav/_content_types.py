from __future__ import annotations

import typing as tp
from dataclasses import dataclass

from hypernav._exceptions import UnsupportedContentType
from hypernav._utils import strip_content_type

__all__ = ("ContentType", "ContentTypeRegistry", "DEFAULT_CONTENT_TYPES")


@dataclass(frozen=True)
class ContentType:
    """
    A media type the client understands.

    Attributes:
    ----------
    mime : str
        The media type, without parameters, e.g. `application/hal+json`.

    representor : str
        Tag of the representor that parses bodies of this type. One of
        `hal`, `jsonapi`, `siren` or `html`.

    q : str | None
        Relative preference weight sent in the `Accept` header. Kept as a
        string so `1.0` is sent as `1.0`. When `None`, no weight is sent.
    """

    mime: str
    representor: str
    q: tp.Optional[str] = None


DEFAULT_CONTENT_TYPES: tp.Tuple[ContentType, ...] = (
    ContentType("application/hal+json", "hal", "1.0"),
    ContentType("application/vnd.api+json", "jsonapi", "0.9"),
    ContentType("application/vnd.siren+json", "siren", "0.9"),
    ContentType("application/json", "hal", "0.8"),
    ContentType("text/html", "html", "0.7"),
)


class ContentTypeRegistry:
    """
    Ordered content type table.

    Order and weight only shape the outgoing `Accept` header. Incoming
    content types are matched exactly against `mime`, after dropping
    parameters.
    """

    def __init__(self, entries: tp.Optional[tp.Iterable[ContentType]] = None) -> None:
        self._entries: tp.List[ContentType] = list(DEFAULT_CONTENT_TYPES if entries is None else entries)

    def register(self, mime: str, representor: str, q: tp.Optional[str] = None) -> ContentType:
        entry = ContentType(mime=mime, representor=representor, q=q)
        self._entries.append(entry)
        return entry

    def accept_header(self) -> str:
        items = []
        for entry in self._entries:
            item = entry.mime
            if entry.q:
                item += ";q=" + entry.q
            items.append(item)
        return ", ".join(items)

    def resolve(self, content_type: str) -> ContentType:
        mime = strip_content_type(content_type)
        for entry in self._entries:
            if entry.mime == mime:
                return entry
        raise UnsupportedContentType(content_type, mime)

    def __iter__(self) -> tp.Iterator[ContentType]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.accept_header()!r}>"
