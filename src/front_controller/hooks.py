"""DispatchHook base and convenience hook classes."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable

from front_controller.context import DispatchContext, Stage
from front_controller.exceptions import FrontControllerError


class DispatchHook:
    """Base abstraction for lifecycle hooks. All methods are no-op by default.

    ``on_request`` runs during pre-processing, before routing; raising
    ``DispatchAbort`` from it short-circuits the request. ``on_stage``
    fires after every stage with the stage's error, if any.
    ``on_complete`` fires exactly once per request, on success or failure.
    """

    async def on_request(self, ctx: DispatchContext) -> None:
        pass

    async def on_stage(
        self,
        ctx: DispatchContext,
        stage: Stage,
        error: FrontControllerError | None,
    ) -> None:
        pass

    async def on_complete(self, ctx: DispatchContext) -> None:
        pass


class BeforeRequest(DispatchHook):
    """Convenience hook that only fires during pre-processing."""

    def __init__(self, callback: Callable[[DispatchContext], Awaitable[None]]) -> None:
        self._callback = callback

    async def on_request(self, ctx: DispatchContext) -> None:
        await self._callback(ctx)


class AfterStage(DispatchHook):
    """Convenience hook that fires after each stage."""

    def __init__(
        self,
        callback: Callable[
            [DispatchContext, Stage, FrontControllerError | None], Awaitable[None]
        ],
    ) -> None:
        self._callback = callback

    async def on_stage(
        self,
        ctx: DispatchContext,
        stage: Stage,
        error: FrontControllerError | None,
    ) -> None:
        await self._callback(ctx, stage, error)


class AfterComplete(DispatchHook):
    """Convenience hook that only fires once the output is produced."""

    def __init__(self, callback: Callable[[DispatchContext], Awaitable[None]]) -> None:
        self._callback = callback

    async def on_complete(self, ctx: DispatchContext) -> None:
        await self._callback(ctx)


async def notify_stage(
    hooks: Iterable[DispatchHook],
    ctx: DispatchContext,
    stage: Stage,
    error: FrontControllerError | None = None,
) -> None:
    for hook in hooks:
        await hook.on_stage(ctx, stage, error)
