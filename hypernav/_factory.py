from __future__ import annotations

import typing as tp

from hypernav._content_types import ContentTypeRegistry
from hypernav._exceptions import MissingContentType, UnknownRepresentor
from hypernav._link import Link
from hypernav._representors import (
    AnyRepresentor,
    HalRepresentor,
    HtmlRepresentor,
    JsonApiRepresentor,
    SirenRepresentor,
)

__all__ = ("create_representor",)


def create_representor(
    content_types: ContentTypeRegistry,
    uri: str,
    content_type: tp.Optional[str],
    body: tp.Optional[str],
    header_links: tp.Sequence[Link],
) -> AnyRepresentor:
    """
    Pick and build the representor registered for `content_type`.

    Raises:
        MissingContentType: `content_type` is None or blank.
        UnsupportedContentType: no entry matches the media type.
        UnknownRepresentor: the matching entry names a representor that
            does not exist.
    """
    if content_type is None or not content_type.strip():
        raise MissingContentType(uri)

    entry = content_types.resolve(content_type)

    if entry.representor == "html":
        return HtmlRepresentor(uri, entry.mime, body, header_links)
    elif entry.representor == "hal":
        return HalRepresentor(uri, entry.mime, body, header_links)
    elif entry.representor == "jsonapi":
        return JsonApiRepresentor(uri, entry.mime, body, header_links)
    elif entry.representor == "siren":
        return SirenRepresentor(uri, entry.mime, body, header_links)
    raise UnknownRepresentor(entry.representor)
