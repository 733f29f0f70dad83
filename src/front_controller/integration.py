"""FastAPI/Starlette integration - mount a FrontController as a catch-all route."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence

from fastapi import FastAPI
from starlette.requests import Request as StarletteRequest
from starlette.responses import Response

from front_controller.controller import FrontController
from front_controller.request import Request

DEFAULT_METHODS: tuple[str, ...] = ("GET", "POST", "PUT", "PATCH", "DELETE")


def front_controller_endpoint(
    controller: FrontController,
) -> Callable[[StarletteRequest], Awaitable[Response]]:
    """Return a Starlette-compatible endpoint that runs the controller."""

    async def endpoint(request: StarletteRequest) -> Response:
        # Catch-all parameter is relative to any mount prefix
        tail = request.path_params.get("path")
        path = None if tail is None else "/" + tail
        output = await controller.handle(Request.from_starlette(request, path=path))
        return Response(
            content=output.body,
            status_code=output.status_code,
            media_type=output.media_type,
        )

    return endpoint


def mount_front_controller(
    app: FastAPI,
    controller: FrontController,
    *,
    methods: Sequence[str] = DEFAULT_METHODS,
    include_in_schema: bool = False,
) -> None:
    """Route every path of ``app`` through ``controller``.

    Call this after any explicit routes: the catch-all only receives
    requests no earlier route matched.
    """
    app.add_api_route(
        "/{path:path}",
        front_controller_endpoint(controller),
        methods=list(methods),
        include_in_schema=include_in_schema,
    )
