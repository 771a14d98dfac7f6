"""
Template Helpers
================

Domain helpers built on top of the generic ``MarkupContext`` primitives.

Modules:
- description_list: ``<dl>`` rendering of record attributes
- modal_v1: modal with eager body content
- modal_v2: modal with a captured body callback
- modal_v3: modal builder with named body and footer sections
- dropdown: dropdown menu builder
"""

from typing import Any, Callable, Dict, Iterable, Optional

from markupsafe import Markup

from markup_helpers.core.context import ContentCallback, MarkupContext, get_context
from markup_helpers.helpers import description_list, dropdown, modal_v1, modal_v2, modal_v3


class TemplateHelpers:
    """All helpers bound to a single markup context."""

    def __init__(self, context: Optional[MarkupContext] = None) -> None:
        self.context = context or get_context()

    def render_pair(self, term: Any, definition: Any) -> Markup:
        return description_list.render_pair(self.context, term, definition)

    def render_pair_for(self, record: Any, attribute: str) -> Markup:
        return description_list.render_pair_for(self.context, record, attribute)

    def render_list(self, record: Any, attributes: Iterable[str], horizontal: bool = False) -> Markup:
        return description_list.render_list(self.context, record, attributes, horizontal)

    def modal_v1(self, id: str, title: Any, content: Any) -> Markup:
        return modal_v1.build_modal(self.context, id, title, content)

    def modal_v2(self, id: str, title: Any, caller: ContentCallback) -> Markup:
        return modal_v2.build_modal(self.context, id, title, caller)

    def modal_v3(self, id: str, title: Any, caller: ContentCallback) -> Markup:
        return modal_v3.build_modal(self.context, id, title, caller)

    def dropdown(self, caller: ContentCallback) -> Markup:
        return dropdown.build_dropdown(self.context, caller)

    def as_globals(self) -> Dict[str, Callable[..., Any]]:
        """Name -> callable mapping for template registration."""
        return {
            "render_pair": self.render_pair,
            "render_pair_for": self.render_pair_for,
            "render_list": self.render_list,
            "modal_v1": self.modal_v1,
            "modal_v2": self.modal_v2,
            "modal_v3": self.modal_v3,
            "dropdown": self.dropdown,
            "content_tag": self.context.content_tag,
            "link_to": self.context.link_to,
            "safe_join": self.context.safe_join,
        }
