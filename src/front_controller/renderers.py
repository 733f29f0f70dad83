"""Renderer abstract base class, Output value and built-in renderers."""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass

from jinja2 import DictLoader, Environment, StrictUndefined, TemplateError

from front_controller.exceptions import RenderFailure
from front_controller.view import ViewResult

logger = logging.getLogger("front_controller.renderers")

DEFAULT_TEMPLATES: dict[str, str] = {
    "userView": (
        "<h1>User</h1>"
        "{% for key, value in params|dictsort %}"
        "<p>{{ key }}: {{ value }}</p>"
        "{% endfor %}"
    ),
    "defaultView": "<h1>Default</h1><p>{{ path }}</p>",
}


@dataclass(frozen=True)
class Output:
    """Rendered response body ready for delivery."""

    body: str
    status_code: int = 200
    media_type: str = "text/html"


class Renderer(ABC):
    """Turns a ViewResult into an Output."""

    @abstractmethod
    def render(self, result: ViewResult) -> Output: ...


class TemplateRenderer(Renderer):
    """Renders each view identifier with its own Jinja2 template.

    The view's ``data`` becomes the template context, together with
    ``view`` (the identifier itself). Missing variables are errors.
    """

    def __init__(
        self,
        templates: Mapping[str, str] | None = None,
        *,
        media_type: str = "text/html",
    ) -> None:
        if templates is None:
            templates = DEFAULT_TEMPLATES
        self._env = Environment(
            loader=DictLoader(dict(templates)),
            undefined=StrictUndefined,
            autoescape=True,
        )
        self._media_type = media_type

    def render(self, result: ViewResult) -> Output:
        try:
            template = self._env.get_template(result.view)
            body = template.render({**result.data, "view": result.view})
        except TemplateError as exc:
            raise RenderFailure(result.view, cause=exc) from exc
        logger.debug("Rendered view %s (%d chars)", result.view, len(body))
        return Output(body=body, media_type=self._media_type)


class JSONRenderer(Renderer):
    """Serializes the view identifier and data as a JSON document."""

    def render(self, result: ViewResult) -> Output:
        try:
            body = json.dumps({"view": result.view, "data": dict(result.data)})
        except (TypeError, ValueError) as exc:
            raise RenderFailure(result.view, cause=exc) from exc
        return Output(body=body, media_type="application/json")
