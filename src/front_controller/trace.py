"""DispatchTrace, TraceEntry and TraceRecorder - debug execution recording."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Literal

from front_controller.context import DispatchContext, Stage
from front_controller.exceptions import DispatchAbort, FrontControllerError
from front_controller.hooks import DispatchHook

TRACE_KEY = "trace"
_MARK_KEY = "_trace_mark"
_START_KEY = "_trace_start"
_OWNER_KEY = "_trace_owner"


@dataclass(frozen=True)
class TraceEntry:
    """Single stage execution record."""

    stage: Stage
    name: str
    duration_ms: float
    outcome: Literal["OK", "FAILED"]
    reason: str | None = None


@dataclass
class DispatchTrace:
    """Structured record of a single request's trip through the chain."""

    entries: list[TraceEntry] = field(default_factory=list)
    total_duration_ms: float = 0.0
    outcome: Literal["OK", "ABORTED", "ERROR"] = "OK"
    error: FrontControllerError | None = None


def _stage_name(ctx: DispatchContext, stage: Stage) -> str:
    if stage is Stage.PREPROCESS:
        return "FrontController"
    if stage is Stage.RENDER and ctx.result is not None:
        return ctx.result.view
    if ctx.handler is not None:
        return ctx.handler.name
    return "Router"


class TraceRecorder(DispatchHook):
    """Stores a DispatchTrace in ``ctx.state["trace"]``.

    Timing state lives in the context, so one recorder can serve
    concurrent requests. The first recorder to see a request owns its
    trace; any other recorder on the same controller stays idle.
    """

    def _ensure(self, ctx: DispatchContext) -> DispatchTrace | None:
        if TRACE_KEY not in ctx.state:
            now = time.perf_counter()
            ctx.state[TRACE_KEY] = DispatchTrace()
            ctx.state[_START_KEY] = now
            ctx.state[_MARK_KEY] = now
            ctx.state[_OWNER_KEY] = self
        elif ctx.state.get(_OWNER_KEY) is not self:
            return None
        trace: DispatchTrace = ctx.state[TRACE_KEY]
        return trace

    async def on_request(self, ctx: DispatchContext) -> None:
        self._ensure(ctx)

    async def on_stage(
        self,
        ctx: DispatchContext,
        stage: Stage,
        error: FrontControllerError | None,
    ) -> None:
        trace = self._ensure(ctx)
        if trace is None:
            return
        now = time.perf_counter()
        elapsed = (now - ctx.state[_MARK_KEY]) * 1000
        ctx.state[_MARK_KEY] = now
        trace.entries.append(
            TraceEntry(
                stage=stage,
                name=_stage_name(ctx, stage),
                duration_ms=elapsed,
                outcome="OK" if error is None else "FAILED",
                reason=None if error is None else str(error),
            )
        )

    async def on_complete(self, ctx: DispatchContext) -> None:
        trace = self._ensure(ctx)
        if trace is None:
            return
        trace.total_duration_ms = (time.perf_counter() - ctx.state[_START_KEY]) * 1000
        del ctx.state[_MARK_KEY]
        del ctx.state[_START_KEY]
        del ctx.state[_OWNER_KEY]
        trace.error = ctx.error
        if ctx.error is None:
            trace.outcome = "OK"
        elif isinstance(ctx.error, DispatchAbort):
            trace.outcome = "ABORTED"
        else:
            trace.outcome = "ERROR"
