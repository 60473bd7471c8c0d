"""Observable RemoteData slot shared by the controllers.

One slot per controller, written by its own completions and by ``set``.
Fire-and-forget attempts are kept in a task set until they finish.
"""

from __future__ import annotations

import asyncio
import typing
from collections.abc import Coroutine
from types import TracebackType

import structlog

from .._types import Listener, Unsubscribe
from ..core import RemoteData, not_asked

logger = structlog.get_logger(__name__)


class StateController[S, F]:
    def __init__(self) -> None:
        self._state: RemoteData[S, F] = not_asked
        self._listeners: list[Listener[S, F]] = []
        self._tasks: set[asyncio.Task[typing.Any]] = set()

    @property
    def state(self) -> RemoteData[S, F]:
        return self._state

    def subscribe(self, listener: Listener[S, F]) -> Unsubscribe:
        """Call ``listener`` with every new state. Returns an unsubscribe handle."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_state(self, value: RemoteData[S, F]) -> None:
        logger.debug("state_changed", controller=type(self).__name__, status=value.status)
        self._state = value
        for listener in list(self._listeners):
            listener(value)

    def _spawn(self, coro: Coroutine[typing.Any, typing.Any, typing.Any]) -> None:
        # Needs a running loop
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    @property
    def pending(self) -> int:
        """Number of fire-and-forget attempts still running."""
        return len(self._tasks)

    async def settled(self) -> None:
        """Wait until every scheduled attempt has finished."""
        while self._tasks:
            await asyncio.gather(*self._tasks)

    def mount(self) -> None:
        raise NotImplementedError

    async def __aenter__(self) -> typing.Self:
        self.mount()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.settled()


__all__ = ("StateController",)
