from hypernav._cache import ResourceCache as ResourceCache
from hypernav._client import Client as Client
from hypernav._content_types import (
    DEFAULT_CONTENT_TYPES as DEFAULT_CONTENT_TYPES,
    ContentType as ContentType,
    ContentTypeRegistry as ContentTypeRegistry,
)
from hypernav._exceptions import (
    HttpError as HttpError,
    HypernavError as HypernavError,
    LinkNotFound as LinkNotFound,
    MissingContentType as MissingContentType,
    ParseError as ParseError,
    Problem as Problem,
    UnknownRepresentor as UnknownRepresentor,
    UnsupportedContentType as UnsupportedContentType,
)
from hypernav._factory import create_representor as create_representor
from hypernav._follower import Follower as Follower
from hypernav._invalidation import (
    AsyncInvalidationClient as AsyncInvalidationClient,
    AsyncInvalidationTransport as AsyncInvalidationTransport,
)
from hypernav._link import Link as Link
from hypernav._representors import (
    AnyRepresentor as AnyRepresentor,
    HalRepresentor as HalRepresentor,
    HtmlRepresentor as HtmlRepresentor,
    JsonApiRepresentor as JsonApiRepresentor,
    Representor as Representor,
    SirenRepresentor as SirenRepresentor,
)
from hypernav._resource import Resource as Resource
from hypernav._version import __version__ as __version__

__all__ = (
    # Client
    "Client",
    "Resource",
    "Follower",
    "Link",
    "ResourceCache",
    ## Transport
    "AsyncInvalidationClient",
    "AsyncInvalidationTransport",
    ## Content types
    "ContentType",
    "ContentTypeRegistry",
    "DEFAULT_CONTENT_TYPES",
    # Representors
    "create_representor",
    "AnyRepresentor",
    "Representor",
    "HalRepresentor",
    "HtmlRepresentor",
    "JsonApiRepresentor",
    "SirenRepresentor",
    # Errors
    "HypernavError",
    "UnsupportedContentType",
    "UnknownRepresentor",
    "ParseError",
    "MissingContentType",
    "LinkNotFound",
    "HttpError",
    "Problem",
    "__version__",
)
