"""
Service controller
==================

Runs one async operation and exposes its RemoteData lifecycle:
NotAsked -> Loading -> Success | Failure -> (reload) Loading -> ...

Overlapping attempts are not cancelled. By default the attempt that
resolves last wins, whichever started last. With ``discard_stale=True`` only
the most recently started attempt may write the state.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

import structlog

from .._types import Operation, Updater
from ..core import RemoteDataResult, Success, loading, success
from ..lift.call import attempt
from ._state import StateController

logger = structlog.get_logger(__name__)


class ServiceController[S, F](StateController[S, F]):
    """
    Example:
        controller = ServiceController(lambda: client.get(make_reference("Patient", "1")))
        async with controller:
            ...                    # state is Loading here
        controller.state           # Success(...) or Failure(...)

        controller.set(lambda patient: {**patient, "active": False})
        await controller.soft_reload_async()
    """

    def __init__(
        self,
        operation: Operation[S, F],
        deps: tuple[typing.Any, ...] = (),
        *,
        discard_stale: bool = False,
    ) -> None:
        super().__init__()
        self._operation = operation
        self._deps = deps
        self._discard_stale = discard_stale
        self._attempts = 0

    @property
    def deps(self) -> tuple[typing.Any, ...]:
        return self._deps

    def mount(self) -> None:
        """Start the first attempt."""
        self.reload()

    def reload(self) -> None:
        """Fire-and-forget: Loading now, one attempt in the background."""
        self._set_state(loading)
        self._spawn(self._load(self._next_attempt()))

    async def reload_async(self) -> RemoteDataResult[S, F]:
        """Loading, then one attempt. Returns the attempt's outcome."""
        self._set_state(loading)
        return await self._load(self._next_attempt())

    async def soft_reload_async(self) -> RemoteDataResult[S, F]:
        """One attempt without passing through Loading."""
        return await self._load(self._next_attempt())

    def set(self, value: S | Updater[S]) -> None:
        """
        Overwrite the state locally.

        A callable is an updater applied to the Success payload; for any
        other state it is a no-op. Any other value becomes ``success(value)``.
        Wrap callable payloads in an updater: ``set(lambda _: fn)``.
        """
        if callable(value):
            updater = typing.cast(Callable[[S], S], value)
            if isinstance(self._state, Success):
                self._set_state(Success(updater(self._state.data)))
            return
        self._set_state(success(typing.cast(S, value)))

    def set_deps(self, *deps: typing.Any) -> None:
        """Rerun once when the dependency tuple changes."""
        if deps == self._deps:
            return
        self._deps = deps
        self.reload()

    def _next_attempt(self) -> int:
        self._attempts += 1
        return self._attempts

    async def _load(self, attempt_no: int) -> RemoteDataResult[S, F]:
        result = await attempt(self._operation)
        if self._discard_stale and attempt_no != self._attempts:
            logger.debug("stale_result_discarded", attempt=attempt_no, latest=self._attempts)
            return result
        self._set_state(result)
        return result


__all__ = ("ServiceController",)
