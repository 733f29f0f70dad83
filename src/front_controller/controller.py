"""FrontController - the single ingress for every request."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from front_controller.context import DispatchContext, Stage
from front_controller.exceptions import (
    DispatchAbort,
    DispatchInternalError,
    MalformedRequest,
)
from front_controller.hooks import DispatchHook, notify_stage
from front_controller.renderers import Output
from front_controller.request import Request
from front_controller.router import Router
from front_controller.trace import TraceRecorder

logger = logging.getLogger("front_controller")


def _validate(request: object) -> None:
    if not isinstance(request, Request):
        raise MalformedRequest(f"Expected Request, got {type(request).__name__}")
    if not isinstance(request.path, str):
        raise MalformedRequest("Request path must be a string")
    if not isinstance(request.params, Mapping):
        raise MalformedRequest("Request params must be a mapping")
    for key, value in request.params.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise MalformedRequest(f"Invalid request parameter {key!r}")


def _error_output(status_code: int, detail: str) -> Output:
    return Output(body=detail, status_code=status_code, media_type="text/plain")


class FrontController:
    """Pre-processes each request once, then delegates to the Router.

    Every failure raised below this point is turned into an error
    ``Output`` here; callers never see an exception from ``handle``
    unless a hook's ``on_complete`` raises.
    """

    def __init__(
        self,
        router: Router,
        *,
        hooks: Iterable[DispatchHook] = (),
        debug: bool = False,
    ) -> None:
        self._router = router
        self._hooks: tuple[DispatchHook, ...] = tuple(hooks)
        if debug and not any(isinstance(h, TraceRecorder) for h in self._hooks):
            self._hooks = (TraceRecorder(), *self._hooks)
        self._debug = debug

    @property
    def router(self) -> Router:
        return self._router

    @property
    def hooks(self) -> tuple[DispatchHook, ...]:
        return self._hooks

    @property
    def debug(self) -> bool:
        return self._debug

    def add_hook(self, hook: DispatchHook) -> FrontController:
        self._hooks = (*self._hooks, hook)
        return self

    async def handle(self, request: Request) -> Output:
        ctx = await self.execute(request)
        if ctx.output is None:
            raise DispatchInternalError("Dispatch finished without output")
        return ctx.output

    async def execute(self, request: Request) -> DispatchContext:
        ctx = DispatchContext(request=request)
        path = getattr(request, "path", None)
        logger.info("Request received: %r", path)

        try:
            await self._preprocess(ctx)
            await self._router.dispatch(request, ctx, hooks=self._hooks)
        except DispatchAbort as exc:
            logger.warning("%d %r: %s", exc.status_code, path, exc.detail)
            ctx.error = exc
            ctx.output = _error_output(exc.status_code, exc.detail)
        except DispatchInternalError as exc:
            logger.error("500 %r", path, exc_info=exc.cause)
            ctx.error = exc
            ctx.output = _error_output(500, exc.detail)
        except Exception as exc:
            logger.exception("500 %r", path)
            wrapped = DispatchInternalError("Internal dispatch error", cause=exc)
            ctx.error = wrapped
            ctx.output = _error_output(500, wrapped.detail)

        for hook in self._hooks:
            await hook.on_complete(ctx)
        return ctx

    async def _preprocess(self, ctx: DispatchContext) -> None:
        try:
            _validate(ctx.request)
            for hook in self._hooks:
                await hook.on_request(ctx)
        except DispatchAbort as exc:
            await notify_stage(self._hooks, ctx, Stage.PREPROCESS, exc)
            raise
        except Exception as exc:
            wrapped = DispatchInternalError("Internal dispatch error", cause=exc)
            await notify_stage(self._hooks, ctx, Stage.PREPROCESS, wrapped)
            raise wrapped from exc
        await notify_stage(self._hooks, ctx, Stage.PREPROCESS)
