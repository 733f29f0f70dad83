"""Router - resolves a handler, runs it and renders its view."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from front_controller.context import DispatchContext, Stage
from front_controller.exceptions import DispatchAbort, HandlerFailure, RenderFailure
from front_controller.handlers import Handler
from front_controller.hooks import DispatchHook, notify_stage
from front_controller.registry import HandlerRegistry, RouteTable
from front_controller.renderers import Output, Renderer
from front_controller.request import Request
from front_controller.view import ViewResult

logger = logging.getLogger("front_controller.router")


class Router:
    """Maps each request to exactly one handler and renders the result.

    The route table is resolved once, at construction, and shared
    read-only by every request. Failures are reported as
    ``DispatchAbort`` subclasses and never handled here.
    """

    def __init__(
        self, routes: HandlerRegistry | RouteTable, renderer: Renderer
    ) -> None:
        if isinstance(routes, HandlerRegistry):
            routes = routes.resolve()
        self._table = routes
        self._renderer = renderer

    @property
    def table(self) -> RouteTable:
        return self._table

    @property
    def renderer(self) -> Renderer:
        return self._renderer

    def resolve(self, request: Request) -> Handler:
        return self._table.lookup(request.path)

    async def dispatch(
        self,
        request: Request,
        ctx: DispatchContext | None = None,
        *,
        hooks: Sequence[DispatchHook] = (),
    ) -> Output:
        if ctx is None:
            ctx = DispatchContext(request=request)

        try:
            handler = self.resolve(request)
        except DispatchAbort as exc:
            await notify_stage(hooks, ctx, Stage.ROUTE, exc)
            raise
        ctx.handler = handler
        logger.debug("Routed %r to %s", request.path, handler.name)
        await notify_stage(hooks, ctx, Stage.ROUTE)

        result = await self._process(handler, request, ctx, hooks)
        ctx.result = result
        await notify_stage(hooks, ctx, Stage.PROCESS)

        output = await self._render(result, ctx, hooks)
        ctx.output = output
        await notify_stage(hooks, ctx, Stage.RENDER)
        return output

    async def _process(
        self,
        handler: Handler,
        request: Request,
        ctx: DispatchContext,
        hooks: Sequence[DispatchHook],
    ) -> ViewResult:
        try:
            result = await handler.process(request)
        except DispatchAbort as exc:
            await notify_stage(hooks, ctx, Stage.PROCESS, exc)
            raise
        except Exception as exc:
            failure = HandlerFailure(f"Handler {handler.name} failed", cause=exc)
            await notify_stage(hooks, ctx, Stage.PROCESS, failure)
            raise failure from exc

        if not isinstance(result, ViewResult):
            failure = HandlerFailure(
                f"Handler {handler.name} returned {type(result).__name__}, "
                "expected ViewResult"
            )
            await notify_stage(hooks, ctx, Stage.PROCESS, failure)
            raise failure
        return result

    async def _render(
        self,
        result: ViewResult,
        ctx: DispatchContext,
        hooks: Sequence[DispatchHook],
    ) -> Output:
        try:
            return self._renderer.render(result)
        except DispatchAbort as exc:
            await notify_stage(hooks, ctx, Stage.RENDER, exc)
            raise
        except Exception as exc:
            failure = RenderFailure(result.view, cause=exc)
            await notify_stage(hooks, ctx, Stage.RENDER, failure)
            raise failure from exc
