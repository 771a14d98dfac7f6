"""
Markup Context
==============

Generic templating primitives that the domain helpers are built on top of:
tag construction, safe joining, block capture and links. Every primitive
returns a ``markupsafe.Markup`` fragment; plain strings are escaped on the
way in, fragments are inserted verbatim.
"""

import re
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from markupsafe import Markup, escape

from markup_helpers.config.logging import get_logger
from markup_helpers.config.settings import Settings, get_settings
from markup_helpers.exceptions import TagConstructionError

logger = get_logger(__name__)

ContentCallback = Callable[..., Any]

TAG_NAME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9-]*$")
ATTRIBUTE_NAME_PATTERN = re.compile(r"^[^\s\"'<>/=\x00-\x1f]+$")

# Rendered as name="name" when set to True
BOOLEAN_ATTRIBUTES = frozenset(
    {
        "allowfullscreen",
        "async",
        "autofocus",
        "autoplay",
        "checked",
        "controls",
        "default",
        "defer",
        "disabled",
        "formnovalidate",
        "hidden",
        "ismap",
        "loop",
        "multiple",
        "muted",
        "novalidate",
        "open",
        "readonly",
        "required",
        "reversed",
        "selected",
    }
)

# Mapping values under these keys expand into prefixed attributes
PREFIXED_ATTRIBUTES = ("data", "aria")


class MarkupContext:
    """Templating capability set handed to every helper and builder."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()
        self.logger: Any = logger.bind(component="markup_context")

    def content_tag(
        self,
        name: str,
        content: Any = None,
        attrs: Optional[Mapping[str, Any]] = None,
        /,
        *,
        caller: Optional[ContentCallback] = None,
        **options: Any,
    ) -> Markup:
        """
        Build a ``<name>content</name>`` fragment.

        Args:
            name: Tag name
            content: Literal content, escaped unless it is already Markup
            attrs: Attribute mapping with keys used verbatim
            caller: Content-producing callback, captured instead of ``content``
            **options: Attribute keywords (``class_`` -> ``class``, ``aria_label`` -> ``aria-label``);
                ``name`` and ``content`` keywords are attributes too

        Returns:
            Markup fragment for the element

        Raises:
            TagConstructionError: If the tag or an attribute name is malformed
        """
        if not isinstance(name, str) or not TAG_NAME_PATTERN.match(name):
            raise TagConstructionError(f"Invalid tag name: {name!r}")

        if caller is not None:
            content = self.capture(caller)

        attributes = self._merge_attributes(attrs, options)
        body = escape(content) if content is not None else Markup("")

        return Markup(f"<{name}{self._build_attributes(attributes)}>{body}</{name}>")

    def safe_join(self, parts: Iterable[Any], separator: str = "") -> Markup:
        """Join fragments in order, escaping anything that is not Markup."""
        return escape(separator).join(part for part in parts if part is not None)

    def capture(self, callback: ContentCallback, *args: Any) -> Markup:
        """
        Run a content-producing callback once and keep its output as a fragment.

        ``None`` results become an empty fragment and plain strings are escaped.
        """
        result = callback(*args)
        if result is None:
            return Markup("")
        return escape(result)

    def link_to(
        self,
        name: Any,
        url: str,
        attrs: Optional[Mapping[str, Any]] = None,
        /,
        *,
        caller: Optional[ContentCallback] = None,
        **options: Any,
    ) -> Markup:
        """Build an anchor pointing at ``url`` with ``name`` (or the captured caller) as its text."""
        attributes: Dict[str, Any] = {"href": url}
        attributes.update(attrs or {})
        return self.content_tag("a", name, attributes, caller=caller, **options)

    def _merge_attributes(
        self, attrs: Optional[Mapping[str, Any]], options: Mapping[str, Any]
    ) -> Dict[str, Any]:
        """Combine an explicit attribute mapping with keyword options."""
        attributes: Dict[str, Any] = dict(attrs or {})
        for key, value in options.items():
            attributes[self._normalize_key(key)] = value
        return attributes

    def _normalize_key(self, key: str) -> str:
        return key.rstrip("_").replace("_", "-")

    def _build_attributes(self, attributes: Mapping[str, Any]) -> str:
        """Build HTML attributes string."""
        attr_pairs: List[str] = []
        for key, value in attributes.items():
            if key in PREFIXED_ATTRIBUTES and isinstance(value, Mapping):
                for sub_key, sub_value in value.items():
                    pair = self._build_attribute(f"{key}-{self._normalize_key(sub_key)}", sub_value)
                    if pair:
                        attr_pairs.append(pair)
                continue

            pair = self._build_attribute(key, value)
            if pair:
                attr_pairs.append(pair)

        return " " + " ".join(attr_pairs) if attr_pairs else ""

    def _build_attribute(self, name: str, value: Any) -> Optional[str]:
        if not ATTRIBUTE_NAME_PATTERN.match(name):
            raise TagConstructionError(f"Invalid attribute name: {name!r}")

        if value is None or value is False:
            return None
        if value is True:
            value = name if name in BOOLEAN_ATTRIBUTES else "true"
        elif isinstance(value, (list, tuple)):
            value = " ".join(str(item) for item in value if item is not None)

        return f'{name}="{escape(value)}"'


# Global context instance - will be initialized when needed
context = None


def get_context() -> MarkupContext:
    """Get the global markup context."""
    global context
    if context is None:
        context = MarkupContext()
    return context
