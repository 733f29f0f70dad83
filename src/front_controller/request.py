"""Request - immutable request descriptor consumed by the dispatch chain."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from starlette.requests import Request as StarletteRequest


@dataclass(frozen=True)
class Request:
    """Path identifier plus read-only key/value parameters.

    Non-mapping ``params`` are kept as given; the FrontController rejects
    them as malformed during pre-processing.
    """

    path: str
    params: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.params is None:
            object.__setattr__(self, "params", MappingProxyType({}))
        elif isinstance(self.params, Mapping):
            # Copy so callers cannot mutate the request through their own dict
            object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    @classmethod
    def from_starlette(
        cls, request: StarletteRequest, *, path: str | None = None
    ) -> Request:
        """Build from a Starlette request; repeated query keys keep the last value.

        ``path`` overrides ``request.url.path``, which still carries the
        mount prefix when the app is mounted under another one.
        """
        return cls(
            path=request.url.path if path is None else path,
            params=dict(request.query_params),
        )
