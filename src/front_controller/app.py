"""Ready-made wiring of the ``/user`` example."""

from __future__ import annotations

from collections.abc import Iterable

from fastapi import FastAPI

from front_controller.controller import FrontController
from front_controller.handlers import DefaultHandler, UserHandler
from front_controller.hooks import DispatchHook
from front_controller.integration import mount_front_controller
from front_controller.registry import HandlerRegistry
from front_controller.renderers import Renderer, TemplateRenderer
from front_controller.router import Router

USER_PATH = "/user"


def create_registry(*, strict: bool = False) -> HandlerRegistry:
    return HandlerRegistry(
        {USER_PATH: UserHandler()},
        default=DefaultHandler(),
        strict=strict,
    )


def create_front_controller(
    *,
    renderer: Renderer | None = None,
    hooks: Iterable[DispatchHook] = (),
    debug: bool = False,
    strict: bool = False,
) -> FrontController:
    router = Router(create_registry(strict=strict), renderer or TemplateRenderer())
    return FrontController(router, hooks=hooks, debug=debug)


def create_app(
    *,
    renderer: Renderer | None = None,
    hooks: Iterable[DispatchHook] = (),
    debug: bool = False,
    strict: bool = False,
) -> FastAPI:
    app = FastAPI()
    mount_front_controller(
        app,
        create_front_controller(
            renderer=renderer, hooks=hooks, debug=debug, strict=strict
        ),
    )
    return app
