"""
Modal Helper (captured body)
============================

Same markup as the eager modal, with the body produced by a callback.
In templates the callback is the body of a ``{% call %}`` block::

    {% call modal_v2("confirm", "Confirm") %}Are you sure?{% endcall %}
"""

from typing import Any

from markupsafe import Markup

from markup_helpers.config.logging import get_logger
from markup_helpers.core.context import ContentCallback, MarkupContext
from markup_helpers.helpers.modal_v1 import Modal

logger = get_logger(__name__)


def build_modal(context: MarkupContext, id: str, title: Any, caller: ContentCallback) -> Markup:
    """Capture ``caller()`` once and render it as the modal body."""
    content = context.capture(caller)
    html = Modal(context, id, title, content).render()
    logger.debug("Modal rendered", variant="v2", modal_id=id, html_length=len(html))
    return html
