"""DispatchContext and Stage - per-request state container."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from front_controller.request import Request

if TYPE_CHECKING:
    from front_controller.exceptions import FrontControllerError
    from front_controller.handlers import Handler
    from front_controller.renderers import Output
    from front_controller.view import ViewResult


class Stage(Enum):
    """Steps of the dispatch chain, in execution order."""

    PREPROCESS = "preprocess"
    ROUTE = "route"
    PROCESS = "process"
    RENDER = "render"

    @property
    def order(self) -> int:
        _ORDER = {
            "preprocess": 1,
            "route": 2,
            "process": 3,
            "render": 4,
        }
        return _ORDER[self.value]


@dataclass
class DispatchContext:
    """Lightweight per-request record filled in as the chain progresses."""

    request: Request
    handler: Handler | None = None
    result: ViewResult | None = None
    output: Output | None = None
    error: FrontControllerError | None = None
    state: dict[str, Any] = field(default_factory=dict)
