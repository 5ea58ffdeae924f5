from __future__ import annotations

import logging
import typing as tp

if tp.TYPE_CHECKING:  # pragma: no cover
    from hypernav._resource import Resource

__all__ = ("ResourceCache",)

logger = logging.getLogger("hypernav.cache")


class ResourceCache:
    """
    One `Resource` per absolute URI, for the lifetime of a client.

    Entries are created on first lookup and never removed. Invalidation
    clears the cached representation of an entry in place, so references
    held by callers stay valid.

    Args:
        resource_factory: Builds the handle for a URI that is not cached yet.
    """

    def __init__(self, resource_factory: tp.Callable[[str], Resource]) -> None:
        self._resource_factory = resource_factory
        self._resources: tp.Dict[str, Resource] = {}

    def lookup_or_create(self, uri: str) -> Resource:
        resource = self._resources.get(uri)
        if resource is None:
            logger.debug(f"Creating resource for {uri}")
            resource = self._resource_factory(uri)
            self._resources[uri] = resource
        return resource

    def invalidate(self, uri: str) -> bool:
        """
        Clear the cached representation for `uri`.

        Returns whether an entry existed. Unknown URIs are a no-op.
        """
        resource = self._resources.get(uri)
        if resource is None:
            return False
        logger.debug(f"Invalidating {uri}")
        resource.clear_cache()
        return True

    def get(self, uri: str) -> tp.Optional[Resource]:
        return self._resources.get(uri)

    def __contains__(self, uri: object) -> bool:
        return uri in self._resources

    def __iter__(self) -> tp.Iterator[str]:
        return iter(self._resources)

    def __len__(self) -> int:
        return len(self._resources)
