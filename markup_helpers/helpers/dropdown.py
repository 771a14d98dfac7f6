"""
Dropdown Helper
===============

Dropdown menu builder: the caller receives a ``Dropdown`` and adds items
to it, then the builder renders the toggle link and the item list.
"""

from typing import Any, List, Tuple

from markupsafe import Markup

from markup_helpers.config.logging import get_logger
from markup_helpers.core.context import ContentCallback, MarkupContext
from markup_helpers.exceptions import BuilderStateError

logger = get_logger(__name__)


class Dropdown:
    """Single-use dropdown builder collecting ``(name, url)`` items."""

    def __init__(self, context: MarkupContext) -> None:
        self.context = context
        self._items: List[Tuple[Any, str]] = []
        self._rendered = False

    @property
    def items(self) -> List[Tuple[Any, str]]:
        return list(self._items)

    def add_item(self, name: Any, url: str) -> Markup:
        """Append a menu entry. Returns an empty fragment."""
        if self._rendered:
            raise BuilderStateError("Cannot add items to a dropdown that was already rendered")
        self._items.append((name, url))
        return Markup("")

    def render(self) -> Markup:
        """Assemble the trigger and the menu list."""
        if self._rendered:
            raise BuilderStateError("Dropdown was already rendered")
        self._rendered = True

        parts = [self._trigger(), self._list()]
        return self.context.content_tag("div", self.context.safe_join(parts), class_="dropdown")

    def _trigger(self) -> Markup:
        ctx = self.context
        label = ctx.safe_join(
            [ctx.settings.dropdown_trigger_label, ctx.content_tag("span", class_="caret")]
        )
        return ctx.link_to(label, "javascript:void(0)", data={"toggle": "dropdown"})

    def _list(self) -> Markup:
        entries = [
            self.context.content_tag("li", self.context.link_to(name, url))
            for name, url in self._items
        ]
        return self.context.content_tag("ul", self.context.safe_join(entries), class_="dropdown-menu")


def build_dropdown(context: MarkupContext, caller: ContentCallback) -> Markup:
    """Render a dropdown whose items are added by ``caller(dropdown)``."""
    dropdown = Dropdown(context)
    context.capture(caller, dropdown)
    html = dropdown.render()
    logger.debug("Dropdown rendered", item_count=len(dropdown.items), html_length=len(html))
    return html
