import typing as tp

from ._base import Representor as Representor
from ._hal import HalRepresentor as HalRepresentor
from ._html import HtmlRepresentor as HtmlRepresentor
from ._jsonapi import JsonApiRepresentor as JsonApiRepresentor
from ._siren import SirenRepresentor as SirenRepresentor

AnyRepresentor = tp.Union[HalRepresentor, JsonApiRepresentor, SirenRepresentor, HtmlRepresentor]

__all__ = (
    "AnyRepresentor",
    "Representor",
    "HalRepresentor",
    "HtmlRepresentor",
    "JsonApiRepresentor",
    "SirenRepresentor",
)
