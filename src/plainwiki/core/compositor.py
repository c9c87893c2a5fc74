"""Two-layer template rendering.

A content template renders one payload; its output is then embedded as
trusted markup in the ``base.html`` layout.
"""

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateError,
    select_autoescape,
)
from markupsafe import Markup

from plainwiki.core.errors import RenderError, TemplateNotFound
from plainwiki.core.models import PagePayload

logger = logging.getLogger(__name__)

LAYOUT_TEMPLATE = "base.html"


class TemplateCompositor:
    """Holds the parsed template set and renders full HTML documents.

    All templates under ``directory`` are parsed once, at construction.
    The set is read-only afterwards and safe to share between requests.
    """

    def __init__(self, directory: Path, app_title: str = "PlainWiki"):
        self.directory = Path(directory)
        self.env = Environment(
            loader=FileSystemLoader(str(self.directory)),
            autoescape=select_autoescape(["html"]),
            undefined=StrictUndefined,
            auto_reload=False,
        )
        self.env.globals["app_title"] = app_title
        self._templates: Mapping[str, Template] = MappingProxyType(
            {name: self.env.get_template(name) for name in self.env.list_templates()}
        )
        logger.info(
            "Loaded %d templates from %s", len(self._templates), self.directory
        )

    @property
    def template_names(self) -> list[str]:
        """Names of all loaded templates."""
        return sorted(self._templates)

    def _lookup(self, name: str) -> Template:
        try:
            return self._templates[name]
        except KeyError:
            raise TemplateNotFound(name) from None

    def render(self, title: str, template_name: str, payload: PagePayload) -> str:
        """Render ``payload`` with a content template wrapped in the layout.

        Args:
            title: Document title passed to the layout.
            template_name: Content template name, without the ``.html`` suffix.
            payload: Presentation payload; its ``kind`` must name the template.

        Returns:
            The complete HTML document. Nothing is returned on failure, so a
            caller never writes a partial body.
        """
        layout = self._lookup(LAYOUT_TEMPLATE)
        content_template = self._lookup(f"{template_name}.html")

        if payload.kind != template_name:
            raise RenderError(
                f"Payload of kind {payload.kind!r} cannot render "
                f"template {template_name!r}"
            )

        try:
            content = content_template.render(**dict(payload))
        except TemplateError as e:
            logger.exception("Failed to render template %s", template_name)
            raise RenderError(f"Failed to render {template_name}: {e}") from e

        try:
            # Content was escaped by its own template; embed it verbatim.
            return layout.render(title=title, content=Markup(content))
        except TemplateError as e:
            logger.exception("Failed to render layout for %s", template_name)
            raise RenderError(f"Failed to render layout: {e}") from e

    def render_payload(self, title: str, payload: PagePayload) -> str:
        """Render using the content template named by the payload's kind."""
        return self.render(title, payload.kind, payload)
