from __future__ import annotations

import typing as tp

from hypernav._link import LinkVariables

if tp.TYPE_CHECKING:  # pragma: no cover
    from hypernav._resource import Resource

__all__ = ("Follower",)


class Follower:
    """
    A pending traversal of one relation.

    Awaiting a follower fetches the source (when it is not cached), finds
    the link and returns the target handle. Followers chain:

        author = await client.follow("posts").follow("first").follow("author")
    """

    def __init__(
        self,
        source: tp.Union[Resource, Follower],
        rel: str,
        variables: tp.Optional[LinkVariables] = None,
    ) -> None:
        self._source = source
        self.rel = rel
        self.variables = variables

    async def resolve(self) -> Resource:
        source = await self._source.resolve() if isinstance(self._source, Follower) else self._source
        link = await source.link(self.rel)
        return source.go(link.resolve(self.variables))

    def follow(self, rel: str, variables: tp.Optional[LinkVariables] = None) -> Follower:
        return Follower(self, rel, variables)

    async def follow_all(self, rel: str) -> tp.List[Resource]:
        return await (await self.resolve()).follow_all(rel)

    def __await__(self) -> tp.Generator[tp.Any, None, Resource]:
        return self.resolve().__await__()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} rel={self.rel!r}>"
