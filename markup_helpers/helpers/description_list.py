"""
Description List Helpers
========================

Render records as ``<dl>`` fragments, pairing humanized attribute labels
with attribute values. Built on the generic tag and join primitives of
``MarkupContext``.
"""

import inspect
import re
from collections.abc import Sized
from typing import Any, Iterable

from markupsafe import Markup

from markup_helpers.config.logging import get_logger
from markup_helpers.core.context import MarkupContext
from markup_helpers.exceptions import AttributeLookupError

logger = get_logger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_SEPARATORS = re.compile(r"[\s_\-]+")


def humanize(attribute: Any) -> str:
    """
    Turn an attribute name into a display label.

    Examples:
        >>> humanize("first_name")
        'First Name'
        >>> humanize("createdAt")
        'Created At'
        >>> humanize("author_id")
        'Author'
        >>> humanize("HTMLParser")
        'Html Parser'
    """
    text = str(attribute)
    if text.endswith("_id") and len(text) > 3:
        text = text[:-3]
    text = _CAMEL_BOUNDARY.sub(" ", text)
    return " ".join(word.capitalize() for word in _SEPARATORS.split(text) if word)


def is_blank(value: Any) -> bool:
    """None, False, whitespace-only strings and empty collections are blank."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def read_attribute(record: Any, attribute: str) -> Any:
    """Read ``attribute`` off ``record``, calling it when it is an accessor method."""
    try:
        value = getattr(record, attribute)
    except AttributeError as e:
        if hasattr(type(record), attribute):
            # defined on the class, so the error comes from inside the accessor
            raise
        logger.error(
            "Attribute lookup failed", record_type=type(record).__name__, attribute=attribute
        )
        raise AttributeLookupError(record, attribute) from e

    if inspect.ismethod(value):
        value = value()
    return value


def render_pair(context: MarkupContext, term: Any, definition: Any) -> Markup:
    """Render a ``<dt>``/``<dd>`` pair, substituting the placeholder for blank definitions."""
    if is_blank(definition):
        definition = context.settings.blank_placeholder

    tags = [
        context.content_tag("dt", term),
        context.content_tag("dd", definition),
    ]
    return context.safe_join(tags)


def render_pair_for(context: MarkupContext, record: Any, attribute: str) -> Markup:
    """
    Render the pair for one attribute of a record.

    Args:
        context: Markup context
        record: Object the value is read from
        attribute: Attribute name, humanized into the term

    Returns:
        Markup fragment with the term and definition

    Raises:
        AttributeLookupError: If the record has no such attribute
    """
    attribute = str(attribute)
    term = humanize(attribute)
    definition = read_attribute(record, attribute)

    return render_pair(context, term, definition)


def render_list(
    context: MarkupContext, record: Any, attributes: Iterable[str], horizontal: bool = False
) -> Markup:
    """
    Render a ``<dl>`` with one pair per attribute, in the given order.

    Args:
        context: Markup context
        record: Object the values are read from
        attributes: Attribute names; duplicates are rendered again
        horizontal: Add the horizontal layout class to the container

    Returns:
        Markup fragment for the whole list

    Raises:
        AttributeLookupError: If the record lacks any of the attributes
    """
    pairs = [render_pair_for(context, record, attribute) for attribute in attributes]
    css_class = context.settings.horizontal_list_class if horizontal else None

    html = context.content_tag("dl", context.safe_join(pairs), class_=css_class)

    logger.debug(
        "Description list rendered",
        record_type=type(record).__name__,
        pair_count=len(pairs),
        horizontal=horizontal,
    )
    return html
