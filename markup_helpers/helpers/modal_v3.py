"""
Modal Helper (named sections)
=============================

Modal builder handed to the caller so the caller can fill named sections.
The caller receives the builder as an ordinary argument and may call
``body()`` and ``footer()`` on it in any order; the rendered fragment is
always header, body, footer. Anything the builder does not provide is
reached through ``modal.context``.

Template usage::

    {% call(modal) modal_v3("m1", "Confirm") %}
      {% call modal.footer() %}<button>OK</button>{% endcall %}
      {% call modal.body() %}Are you sure?{% endcall %}
    {% endcall %}

Calling ``body()`` or ``footer()`` again replaces the earlier capture.
"""

from typing import Any, List

from markupsafe import Markup

from markup_helpers.config.logging import get_logger
from markup_helpers.core.context import ContentCallback, MarkupContext
from markup_helpers.exceptions import BuilderStateError
from markup_helpers.helpers import modal_v1

logger = get_logger(__name__)


class Modal(modal_v1.Modal):
    """Single-use modal builder with body and footer slots."""

    def __init__(self, context: MarkupContext, id: str, title: Any) -> None:
        super().__init__(context, id, title)
        self._footer_content: Any = None
        self._rendered = False

    @property
    def rendered(self) -> bool:
        return self._rendered

    def body(self, caller: ContentCallback) -> Markup:
        """Capture the body section. Returns an empty fragment."""
        self._ensure_open("body")
        self._content = self.context.capture(caller)
        return Markup("")

    def footer(self, caller: ContentCallback) -> Markup:
        """Capture the footer section. Returns an empty fragment."""
        self._ensure_open("footer")
        self._footer_content = self.context.capture(caller)
        return Markup("")

    def render(self) -> Markup:
        """
        Assemble header, body and footer inside the modal containers.

        Raises:
            BuilderStateError: If the modal was already rendered
        """
        self._ensure_open("render")
        self._rendered = True

        parts: List[Markup] = [self._header(), self._body(), self._footer()]
        return self._wrap(parts)

    def _footer(self) -> Markup:
        return self.context.content_tag("div", self._footer_content, class_="modal-footer")

    def _ensure_open(self, operation: str) -> None:
        if self._rendered:
            raise BuilderStateError(f"Cannot {operation} modal '{self._id}': already rendered")


def build_modal(context: MarkupContext, id: str, title: Any, caller: ContentCallback) -> Markup:
    """
    Render a modal whose sections are filled by ``caller(modal)``.

    The caller runs exactly once before rendering; whatever it returns is
    discarded, only the captured sections are used.

    Args:
        context: Markup context
        id: DOM id of the outer container
        title: Header title
        caller: Callback receiving the ``Modal`` builder

    Returns:
        Markup fragment for the modal
    """
    modal = Modal(context, id, title)
    context.capture(caller, modal)
    html = modal.render()
    logger.debug("Modal rendered", variant="v3", modal_id=id, html_length=len(html))
    return html
