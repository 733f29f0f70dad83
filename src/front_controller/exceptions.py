"""FrontControllerError hierarchy for controlled dispatch failures."""

from __future__ import annotations


class FrontControllerError(Exception):
    """Base for all front controller exceptions."""


class ConfigurationError(FrontControllerError):
    """Handler registration is invalid. Raised at startup, never per request."""


class DispatchAbort(FrontControllerError):
    """Controlled abort with HTTP status code and detail."""

    def __init__(self, detail: str, *, status_code: int = 400) -> None:
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail


class MalformedRequest(DispatchAbort):
    """Request rejected during pre-processing (400)."""

    def __init__(self, detail: str = "Malformed request") -> None:
        super().__init__(detail, status_code=400)


class UnroutableRequest(DispatchAbort):
    """No handler registered for the path and fallback is disabled (404)."""

    def __init__(self, path: str, detail: str | None = None) -> None:
        super().__init__(detail or f"No handler for path {path!r}", status_code=404)
        self.path = path


class HandlerFailure(DispatchAbort):
    """Domain logic inside a handler failed (500)."""

    def __init__(
        self, detail: str = "Handler failed", *, cause: Exception | None = None
    ) -> None:
        super().__init__(detail, status_code=500)
        self.cause = cause


class RenderFailure(DispatchAbort):
    """View identifier could not be turned into output (500)."""

    def __init__(
        self,
        view: str,
        detail: str | None = None,
        *,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(detail or f"Cannot render view {view!r}", status_code=500)
        self.view = view
        self.cause = cause


class DispatchInternalError(FrontControllerError):
    """Engine-level error wrapping unexpected exceptions."""

    def __init__(self, detail: str, *, cause: Exception | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.cause = cause
