"""Shared pytest fixtures for front-controller tests."""

from __future__ import annotations

from typing import Any

import pytest
from starlette.requests import Request as StarletteRequest

from front_controller.renderers import Output, Renderer, TemplateRenderer
from front_controller.request import Request
from front_controller.view import ViewResult


class SpyRenderer(Renderer):
    """Records every ViewResult it is asked to render."""

    def __init__(self, inner: Renderer | None = None) -> None:
        self.inner = inner or TemplateRenderer()
        self.calls: list[ViewResult] = []

    def render(self, result: ViewResult) -> Output:
        self.calls.append(result)
        return self.inner.render(result)


@pytest.fixture
def make_request() -> Any:
    """Factory for front controller Request objects."""

    def _make(path: str = "/", params: dict[str, str] | None = None) -> Request:
        return Request(path=path, params=params or {})

    return _make


@pytest.fixture
def make_starlette_request() -> Any:
    """Factory for creating Starlette Request objects from a raw scope."""

    def _make(
        method: str = "GET",
        path: str = "/",
        headers: dict[str, str] | None = None,
        query_string: str = "",
    ) -> StarletteRequest:
        scope: dict[str, Any] = {
            "type": "http",
            "method": method,
            "path": path,
            "query_string": query_string.encode(),
            "headers": [
                (k.lower().encode(), v.encode()) for k, v in (headers or {}).items()
            ],
            "root_path": "",
        }
        return StarletteRequest(scope)

    return _make


@pytest.fixture
def spy_renderer() -> SpyRenderer:
    return SpyRenderer()
