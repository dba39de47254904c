"""Conversion between Notion's typed property values and plain values.

Reading goes through :func:`simplify_properties`, which reduces every
value to a string, list, number, bool or date object. The reduction is
lossy: the kind tag is dropped, so simplified values cannot be written
back. Writing goes through :func:`build_properties`, which expects
already-typed JSON for everything except the title.
"""

import json
from typing import Any, Callable, Dict, Iterable, Mapping, Optional

from .errors import MalformedInputError
from .types import PropertyKind, PropertyValue, SimplifiedValue, TextFragment, TypedProperty

DEFAULT_TITLE_PROPERTY = "Name"
UNTITLED = "Untitled"


def plain_text(fragments: Optional[Iterable[TextFragment]]) -> str:
    """Concatenate the text of title/rich_text fragments, in order."""
    parts = []
    for fragment in fragments or []:
        text = fragment.get("text") or {}
        content = text.get("content")
        if content is None:
            # mentions and equations only carry plain_text
            content = fragment.get("plain_text", "")
        parts.append(content)
    return "".join(parts)


def _option_name(option: Optional[Mapping[str, Any]]) -> Optional[str]:
    if not option:
        return None
    return option.get("name")


def _option_names(options: Optional[Iterable[Mapping[str, Any]]]) -> list:
    return [o.get("name") for o in options or []]


def _identity(payload: Any) -> Any:
    return payload


_SIMPLIFIERS: Dict[PropertyKind, Callable[[Any], SimplifiedValue]] = {
    PropertyKind.TITLE: plain_text,
    PropertyKind.RICH_TEXT: plain_text,
    PropertyKind.SELECT: _option_name,
    PropertyKind.MULTI_SELECT: _option_names,
    PropertyKind.STATUS: _option_name,
    PropertyKind.DATE: _identity,
    PropertyKind.NUMBER: _identity,
    PropertyKind.CHECKBOX: _identity,
    PropertyKind.EMAIL: _identity,
    PropertyKind.URL: _identity,
}


def resolve_kind(value: Mapping[str, Any]) -> Optional[PropertyKind]:
    """Return the kind of a property value, or None if it is not recognized.

    The first kind (in :class:`PropertyKind` order) whose key is present
    wins. When no kind key is present, the ``type`` tag decides.
    """
    for kind in PropertyKind:
        if kind.value in value:
            return kind
    try:
        return PropertyKind(value.get("type"))
    except ValueError:
        return None


def parse_property(value: Mapping[str, Any]) -> TypedProperty:
    kind = resolve_kind(value)
    payload = value.get(kind.value) if kind is not None else None
    return TypedProperty(kind=kind, payload=payload, raw=dict(value))


def simplify_property(value: Mapping[str, Any]) -> SimplifiedValue:
    """Reduce one typed property value; unknown kinds pass through unchanged."""
    prop = parse_property(value)
    if prop.kind is None:
        return value  # type: ignore[return-value]
    return _SIMPLIFIERS[prop.kind](prop.payload)


def simplify_properties(props: Optional[Mapping[str, PropertyValue]]) -> Dict[str, SimplifiedValue]:
    return {name: simplify_property(value) for name, value in (props or {}).items()}


def extract_title(obj: Mapping[str, Any]) -> str:
    """Title of a page or database object, or ``Untitled``.

    Databases carry a top-level ``title`` array; pages keep it in their
    title-kind property.
    """
    if isinstance(obj.get("title"), list):
        return plain_text(obj["title"]) or UNTITLED
    for prop in (obj.get("properties") or {}).values():
        if resolve_kind(prop) is PropertyKind.TITLE:
            return plain_text(prop.get("title")) or UNTITLED
    return UNTITLED


def title_value(text: str) -> Dict[str, Any]:
    """Typed value for a title property holding ``text``."""
    return {"title": [{"type": "text", "text": {"content": text}}]}


def load_json_object(raw: str, option: str) -> Dict[str, Any]:
    """Parse a flag value that must hold a JSON object.

    Raises:
        MalformedInputError: if ``raw`` is not valid JSON or not an object.
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedInputError(f"{option} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise MalformedInputError(f"{option} must be a JSON object, got {type(data).__name__}")
    return data


def build_properties(
    title: Optional[str] = None,
    extra: Optional[str] = None,
    title_property: str = DEFAULT_TITLE_PROPERTY,
) -> Dict[str, Any]:
    """Assemble the properties payload for page create/update.

    Args:
        title: Text for the title property. Empty means no title entry.
        extra: Raw JSON object of already-typed property values, merged
            over the title entry.
        title_property: Name of the database's title property.

    Returns:
        The property map, possibly empty. Notion enforces completeness.
    """
    properties: Dict[str, Any] = {}
    if title:
        properties[title_property] = title_value(title)
    if extra is not None:
        properties.update(load_json_object(extra, "--properties"))
    return properties
