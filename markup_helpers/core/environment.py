"""
Template Environment
====================

Jinja2 environment with every markup helper registered as a global.
Jinja passes the body of a ``{% call %}`` block to the called function as
``caller``, which is exactly the content-producing callback the builders
expect.
"""

from typing import Any, Optional

import jinja2
from markupsafe import Markup

from markup_helpers.config.logging import get_logger
from markup_helpers.config.settings import Settings, get_settings
from markup_helpers.core.context import MarkupContext
from markup_helpers.exceptions import TemplateRenderError
from markup_helpers.helpers import TemplateHelpers
from markup_helpers.helpers.description_list import humanize

logger = get_logger(__name__)


def create_environment(
    settings: Optional[Settings] = None, helpers: Optional[TemplateHelpers] = None
) -> jinja2.Environment:
    """
    Create an autoescaping Jinja2 environment with the helpers registered.

    Args:
        settings: Application settings, defaults to the global settings
        helpers: Helper set to register, defaults to one bound to a new context

    Returns:
        Configured Jinja2 environment
    """
    settings = settings or get_settings()
    helpers = helpers or TemplateHelpers(MarkupContext(settings))

    loader = (
        jinja2.FileSystemLoader(str(settings.template_path)) if settings.template_path else None
    )
    env = jinja2.Environment(
        loader=loader,
        autoescape=jinja2.select_autoescape(default_for_string=True, default=True),
        undefined=jinja2.StrictUndefined,
    )

    env.globals.update(helpers.as_globals())
    env.filters["humanize"] = humanize

    return env


class TemplateRenderer:
    """Renders templates and template strings through a helper-aware environment."""

    def __init__(self, env: Optional[jinja2.Environment] = None) -> None:
        self.env = env or create_environment()
        self.logger: Any = logger.bind(component="template_renderer")

    def render(self, template_name: str, **context: Any) -> Markup:
        """
        Render a named template from the configured loader.

        Raises:
            TemplateRenderError: If the template is missing or fails to render
        """
        if self.env.loader is None:
            raise TemplateRenderError(
                f"Cannot load template '{template_name}': no template_path configured"
            )

        try:
            template = self.env.get_template(template_name)
            html = Markup(template.render(**context))
        except jinja2.TemplateError as e:
            error_msg = f"Template rendering failed: {e}"
            self.logger.error("Template rendering failed", template=template_name, error=str(e))
            raise TemplateRenderError(error_msg) from e

        self.logger.debug("Template rendered", template=template_name, html_length=len(html))
        return html

    def render_string(self, source: str, **context: Any) -> Markup:
        """
        Render a template given as a string.

        Raises:
            TemplateRenderError: If the source fails to compile or render
        """
        try:
            html = Markup(self.env.from_string(source).render(**context))
        except jinja2.TemplateError as e:
            error_msg = f"Template rendering failed: {e}"
            self.logger.error("Template rendering failed", error=str(e))
            raise TemplateRenderError(error_msg) from e

        self.logger.debug("Template string rendered", html_length=len(html))
        return html
