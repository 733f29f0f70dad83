"""HandlerRegistry and RouteTable - path to handler mapping."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from front_controller.exceptions import ConfigurationError, UnroutableRequest
from front_controller.handlers import DefaultHandler, Handler


def normalize_path(path: str) -> str:
    """Route key used for registration and lookup (case-insensitive, exact)."""
    return path.casefold()


@dataclass(frozen=True)
class RouteTable:
    """Immutable, pre-computed routing plan shared by all requests."""

    routes: Mapping[str, Handler]
    default: Handler
    strict: bool = False

    def lookup(self, path: object) -> Handler:
        """Return the handler for ``path``.

        Unknown, empty and non-string paths fall back to the default
        handler unless the table is strict.
        """
        if isinstance(path, str):
            handler = self.routes.get(normalize_path(path))
            if handler is not None:
                return handler
        if self.strict:
            raise UnroutableRequest(str(path))
        return self.default


class HandlerRegistry:
    """Startup-time builder for a RouteTable."""

    def __init__(
        self,
        routes: Mapping[str, Handler] | None = None,
        *,
        default: Handler | None = None,
        strict: bool = False,
    ) -> None:
        self._routes: dict[str, Handler] = {}
        self._default: Handler = default or DefaultHandler()
        self._strict = strict
        self._resolved: RouteTable | None = None
        for path, handler in (routes or {}).items():
            self.register(path, handler)

    def register(self, path: str, handler: Handler) -> HandlerRegistry:
        if not isinstance(path, str):
            raise ConfigurationError(f"Route path must be a string, got {path!r}")
        if not isinstance(handler, Handler):
            raise ConfigurationError(
                f"Route {path!r} must map to a Handler, got {type(handler).__name__}"
            )
        key = normalize_path(path)
        if key in self._routes:
            raise ConfigurationError(f"Duplicate route for path {path!r}")
        self._routes[key] = handler
        self._resolved = None
        return self

    def set_default(self, handler: Handler) -> HandlerRegistry:
        if not isinstance(handler, Handler):
            raise ConfigurationError(
                f"Default must be a Handler, got {type(handler).__name__}"
            )
        self._default = handler
        self._resolved = None
        return self

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and normalize_path(path) in self._routes

    def __len__(self) -> int:
        return len(self._routes)

    def resolve(self) -> RouteTable:
        if self._resolved is not None:
            return self._resolved

        self._resolved = RouteTable(
            routes=MappingProxyType(dict(self._routes)),
            default=self._default,
            strict=self._strict,
        )
        return self._resolved
