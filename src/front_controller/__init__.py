"""Front Controller - a single ingress that routes, handles and renders requests."""

from front_controller.app import create_app, create_front_controller, create_registry
from front_controller.context import DispatchContext, Stage
from front_controller.controller import FrontController
from front_controller.exceptions import (
    ConfigurationError,
    DispatchAbort,
    DispatchInternalError,
    FrontControllerError,
    HandlerFailure,
    MalformedRequest,
    RenderFailure,
    UnroutableRequest,
)
from front_controller.handlers import (
    CallbackHandler,
    DefaultHandler,
    Handler,
    UserHandler,
)
from front_controller.hooks import (
    AfterComplete,
    AfterStage,
    BeforeRequest,
    DispatchHook,
)
from front_controller.integration import (
    front_controller_endpoint,
    mount_front_controller,
)
from front_controller.registry import HandlerRegistry, RouteTable
from front_controller.renderers import (
    DEFAULT_TEMPLATES,
    JSONRenderer,
    Output,
    Renderer,
    TemplateRenderer,
)
from front_controller.request import Request
from front_controller.router import Router
from front_controller.trace import DispatchTrace, TraceEntry, TraceRecorder
from front_controller.view import ViewResult

__all__ = [
    "DEFAULT_TEMPLATES",
    "AfterComplete",
    "AfterStage",
    "BeforeRequest",
    "CallbackHandler",
    "ConfigurationError",
    "DefaultHandler",
    "DispatchAbort",
    "DispatchContext",
    "DispatchHook",
    "DispatchInternalError",
    "DispatchTrace",
    "FrontController",
    "FrontControllerError",
    "Handler",
    "HandlerFailure",
    "HandlerRegistry",
    "JSONRenderer",
    "MalformedRequest",
    "Output",
    "RenderFailure",
    "Renderer",
    "Request",
    "RouteTable",
    "Router",
    "Stage",
    "TemplateRenderer",
    "TraceEntry",
    "TraceRecorder",
    "UnroutableRequest",
    "UserHandler",
    "ViewResult",
    "create_app",
    "create_front_controller",
    "create_registry",
    "front_controller_endpoint",
    "mount_front_controller",
]
