from __future__ import annotations

import logging
import typing as tp

import anyio

from hypernav._exceptions import HypernavError

__all__ = ("InFlightRequests",)

logger = logging.getLogger("hypernav.synchronization")

T = tp.TypeVar("T")


class _PendingCall(tp.Generic[T]):
    def __init__(self) -> None:
        self._done = anyio.Event()
        self._result: tp.Optional[T] = None
        self._exception: tp.Optional[BaseException] = None

    def set_result(self, result: T) -> None:
        self._result = result
        self._done.set()

    def set_exception(self, exception: BaseException) -> None:
        self._exception = exception
        self._done.set()

    @property
    def done(self) -> bool:
        return self._done.is_set()

    async def wait(self) -> T:
        await self._done.wait()
        if self._exception is not None:
            # Each waiter raises with its own traceback
            raise self._exception.with_traceback(None)
        return tp.cast(T, self._result)


class InFlightRequests(tp.Generic[T]):
    """
    Collapses concurrent calls for the same key into one.

    The first caller for a key runs the operation; callers arriving while
    it is pending wait for it and get the same result or exception. The
    key is released as soon as the operation settles.
    """

    def __init__(self) -> None:
        self._calls: tp.Dict[str, _PendingCall[T]] = {}

    async def run(self, key: str, operation: tp.Callable[[], tp.Awaitable[T]]) -> T:
        pending = self._calls.get(key)
        if pending is not None:
            logger.debug(f"Joining in-flight request for {key}")
            return await pending.wait()

        pending = _PendingCall()
        self._calls[key] = pending
        try:
            result = await operation()
        except Exception as exc:
            pending.set_exception(exc)
            raise
        else:
            pending.set_result(result)
            return result
        finally:
            del self._calls[key]
            if not pending.done:
                # The owner was cancelled, the waiters must not hang
                pending.set_exception(HypernavError(f"Request for {key} was cancelled"))

    def __contains__(self, key: object) -> bool:
        return key in self._calls

    def __len__(self) -> int:
        return len(self._calls)
