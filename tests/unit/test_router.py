"""Tests for Router dispatch."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock

import pytest

from front_controller.context import DispatchContext, Stage
from front_controller.exceptions import (
    DispatchAbort,
    HandlerFailure,
    RenderFailure,
    UnroutableRequest,
)
from front_controller.handlers import CallbackHandler, DefaultHandler, UserHandler
from front_controller.hooks import AfterStage
from front_controller.registry import HandlerRegistry
from front_controller.renderers import Output, Renderer, TemplateRenderer
from front_controller.request import Request
from front_controller.router import Router
from front_controller.view import ViewResult


def _router(renderer: Renderer | None = None, **kwargs: Any) -> Router:
    registry = HandlerRegistry({"/user": UserHandler()}, **kwargs)
    return Router(registry, renderer or TemplateRenderer())


class _BrokenRenderer(Renderer):
    def render(self, result: ViewResult) -> Output:
        raise KeyError(result.view)


class TestRouterInit:
    def test_accepts_registry(self) -> None:
        registry = HandlerRegistry({"/user": UserHandler()})
        router = Router(registry, TemplateRenderer())
        assert router.table is registry.resolve()

    def test_accepts_route_table(self) -> None:
        table = HandlerRegistry().resolve()
        router = Router(table, TemplateRenderer())
        assert router.table is table

    def test_later_registration_does_not_change_router(self) -> None:
        registry = HandlerRegistry()
        router = Router(registry, TemplateRenderer())
        registry.register("/user", UserHandler())
        assert isinstance(router.resolve(Request("/user")), DefaultHandler)


class TestRouterResolve:
    @pytest.mark.parametrize("path", ["/user", "/USER", "/User"])
    def test_user_path_selects_user_handler(self, path: str) -> None:
        assert isinstance(_router().resolve(Request(path)), UserHandler)

    @pytest.mark.parametrize("path", ["/unknown", "", "/user/x", "//user"])
    def test_other_paths_select_default_handler(self, path: str) -> None:
        assert isinstance(_router().resolve(Request(path)), DefaultHandler)


class TestRouterDispatch:
    async def test_user_path_renders_user_view(
        self, make_request: Any, spy_renderer: Any
    ) -> None:
        output = await _router(spy_renderer).dispatch(
            make_request("/user", {"id": "7"})
        )
        assert output.status_code == 200
        assert [r.view for r in spy_renderer.calls] == ["userView"]

    async def test_unknown_path_renders_default_view(
        self, make_request: Any, spy_renderer: Any
    ) -> None:
        await _router(spy_renderer).dispatch(make_request("/unknown"))
        assert [r.view for r in spy_renderer.calls] == ["defaultView"]

    async def test_renderer_receives_exact_handler_result(
        self, make_request: Any, spy_renderer: Any
    ) -> None:
        result = ViewResult("defaultView", {"path": "custom"})
        handler = CallbackHandler(AsyncMock(return_value=result), name="custom")
        router = Router(HandlerRegistry(default=handler), spy_renderer)
        await router.dispatch(make_request("/anything"))
        assert len(spy_renderer.calls) == 1
        assert spy_renderer.calls[0] is result

    async def test_fills_context(self, make_request: Any) -> None:
        request = make_request("/user")
        ctx = DispatchContext(request=request)
        output = await _router().dispatch(request, ctx)
        assert isinstance(ctx.handler, UserHandler)
        assert ctx.result is not None
        assert ctx.result.view == "userView"
        assert ctx.output is output

    async def test_stage_hooks_fire_in_order(self, make_request: Any) -> None:
        stages: list[tuple[Stage, Any]] = []

        async def record(ctx: DispatchContext, stage: Stage, error: Any) -> None:
            stages.append((stage, error))

        await _router().dispatch(make_request("/user"), hooks=[AfterStage(record)])
        assert stages == [
            (Stage.ROUTE, None),
            (Stage.PROCESS, None),
            (Stage.RENDER, None),
        ]


class TestRouterFailures:
    async def test_strict_unknown_path_raises(self, make_request: Any) -> None:
        with pytest.raises(UnroutableRequest):
            await _router(strict=True).dispatch(make_request("/unknown"))

    async def test_handler_exception_wrapped(self, make_request: Any) -> None:
        handler = CallbackHandler(AsyncMock(side_effect=RuntimeError("boom")), name="b")
        router = Router(HandlerRegistry(default=handler), TemplateRenderer())
        with pytest.raises(HandlerFailure) as exc_info:
            await router.dispatch(make_request("/x"))
        assert isinstance(exc_info.value.cause, RuntimeError)
        assert exc_info.value.detail == "Handler b failed"

    async def test_handler_abort_passes_through(self, make_request: Any) -> None:
        abort = DispatchAbort("conflict", status_code=409)
        handler = CallbackHandler(AsyncMock(side_effect=abort), name="c")
        router = Router(HandlerRegistry(default=handler), TemplateRenderer())
        with pytest.raises(DispatchAbort) as exc_info:
            await router.dispatch(make_request("/x"))
        assert exc_info.value is abort

    async def test_non_view_result_is_handler_failure(
        self, make_request: Any, spy_renderer: Any
    ) -> None:
        handler = CallbackHandler(AsyncMock(return_value="userView"), name="s")
        router = Router(HandlerRegistry(default=handler), spy_renderer)
        with pytest.raises(HandlerFailure):
            await router.dispatch(make_request("/x"))
        assert spy_renderer.calls == []

    async def test_renderer_not_called_after_handler_failure(
        self, make_request: Any, spy_renderer: Any
    ) -> None:
        handler = CallbackHandler(AsyncMock(side_effect=ValueError()), name="v")
        router = Router(HandlerRegistry(default=handler), spy_renderer)
        with pytest.raises(HandlerFailure):
            await router.dispatch(make_request("/x"))
        assert spy_renderer.calls == []

    async def test_unknown_view_is_render_failure(self, make_request: Any) -> None:
        handler = CallbackHandler(
            AsyncMock(return_value=ViewResult("missingView")), name="m"
        )
        router = Router(HandlerRegistry(default=handler), TemplateRenderer())
        with pytest.raises(RenderFailure) as exc_info:
            await router.dispatch(make_request("/x"))
        assert exc_info.value.view == "missingView"

    async def test_renderer_exception_wrapped(self, make_request: Any) -> None:
        with pytest.raises(RenderFailure) as exc_info:
            await _router(_BrokenRenderer()).dispatch(make_request("/user"))
        assert isinstance(exc_info.value.cause, KeyError)

    async def test_failed_stage_reported_to_hooks(self, make_request: Any) -> None:
        stages: list[tuple[Stage, Any]] = []

        async def record(ctx: DispatchContext, stage: Stage, error: Any) -> None:
            stages.append((stage, error))

        with pytest.raises(RenderFailure):
            await _router(_BrokenRenderer()).dispatch(
                make_request("/user"), hooks=[AfterStage(record)]
            )
        assert [s for s, _ in stages] == [Stage.ROUTE, Stage.PROCESS, Stage.RENDER]
        assert isinstance(stages[-1][1], RenderFailure)
