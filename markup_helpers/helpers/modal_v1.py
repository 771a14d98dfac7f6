"""
Modal Helper (eager content)
============================

Bootstrap-style modal dialog assembled from content supplied up front.
The ``Modal`` class keeps each part of the markup (header, close button,
title, body) in its own method so the structure reads top-down.
"""

from typing import Any, List

from markupsafe import Markup

from markup_helpers.config.logging import get_logger
from markup_helpers.core.context import MarkupContext

logger = get_logger(__name__)


class Modal:
    """Modal dialog whose body content is known at construction time."""

    def __init__(self, context: MarkupContext, id: str, title: Any, content: Any = None) -> None:
        self.context = context
        self._id = id
        self._title = title
        self._content = content

    @property
    def id(self) -> str:
        return self._id

    @property
    def title(self) -> Any:
        return self._title

    def render(self) -> Markup:
        """Assemble the modal fragment."""
        return self._wrap([self._header(), self._body()])

    def _wrap(self, parts: List[Markup]) -> Markup:
        """Nest the sections inside the modal, dialog and content containers."""
        ctx = self.context
        content = ctx.content_tag("div", ctx.safe_join(parts), class_="modal-content")
        dialog = ctx.content_tag("div", content, class_="modal-dialog")
        return ctx.content_tag("div", dialog, class_="modal", id=self._id)

    def _body(self) -> Markup:
        return self.context.content_tag("div", self._content, class_="modal-body")

    def _header(self) -> Markup:
        tags = [self._close_button(), self._title_tag()]
        return self.context.content_tag("div", self.context.safe_join(tags), class_="modal-header")

    def _close_button(self) -> Markup:
        ctx = self.context
        icon = ctx.content_tag("span", Markup("&times;"), aria_hidden=True)
        return ctx.content_tag(
            "button",
            icon,
            type="button",
            class_="close",
            data={"dismiss": "modal"},
            aria_label=ctx.settings.modal_close_label,
        )

    def _title_tag(self) -> Markup:
        return self.context.content_tag("h4", self._title, class_="modal-title")


def build_modal(context: MarkupContext, id: str, title: Any, content: Any) -> Markup:
    """
    Render a modal with the given body content.

    Args:
        context: Markup context
        id: DOM id of the outer container
        title: Header title
        content: Body content, escaped unless it is Markup

    Returns:
        Markup fragment for the modal
    """
    html = Modal(context, id, title, content).render()
    logger.debug("Modal rendered", variant="v1", modal_id=id, html_length=len(html))
    return html
