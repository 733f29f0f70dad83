"""Handler abstract base class and the built-in handlers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable

from front_controller.request import Request
from front_controller.view import ViewResult

logger = logging.getLogger("front_controller.handlers")


class Handler(ABC):
    """Executes domain logic for one request and names the view to render.

    Instances are registered once and shared by every request, so
    implementations must not keep per-request state on ``self``.
    """

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    async def process(self, request: Request) -> ViewResult: ...


class UserHandler(Handler):
    """Serves the ``/user`` route."""

    view = "userView"

    async def process(self, request: Request) -> ViewResult:
        logger.debug("UserHandler processing %s", request.path)
        return ViewResult(self.view, {"params": dict(request.params)})


class DefaultHandler(Handler):
    """Fallback for every path without a registered handler."""

    view = "defaultView"

    async def process(self, request: Request) -> ViewResult:
        logger.debug("DefaultHandler processing %r", request.path)
        return ViewResult(self.view, {"path": request.path})


class CallbackHandler(Handler):
    """Adapts an async callable into a handler."""

    def __init__(
        self,
        callback: Callable[[Request], Awaitable[ViewResult]],
        *,
        name: str | None = None,
    ) -> None:
        self._callback = callback
        self._name = name or getattr(callback, "__name__", type(self).__name__)

    @property
    def name(self) -> str:
        return self._name

    async def process(self, request: Request) -> ViewResult:
        return await self._callback(request)
