"""Type definitions and constants for Notion API."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, TypedDict, Union


class PropertyKind(str, Enum):
    """Property kinds the simplifier understands.

    Declaration order is the precedence order used when a value object
    carries more than one recognized key.
    """

    TITLE = "title"
    RICH_TEXT = "rich_text"
    SELECT = "select"
    MULTI_SELECT = "multi_select"
    STATUS = "status"
    DATE = "date"
    NUMBER = "number"
    CHECKBOX = "checkbox"
    EMAIL = "email"
    URL = "url"


class TextFragment(TypedDict, total=False):
    """One element of a title or rich_text array."""

    type: str
    text: Dict[str, Any]
    plain_text: str
    annotations: Dict[str, Any]
    href: Optional[str]


class PropertyValue(TypedDict, total=False):
    """A Notion property value as returned by the API."""

    id: str
    type: str
    title: List[TextFragment]
    rich_text: List[TextFragment]
    select: Optional[Dict[str, Any]]
    multi_select: List[Dict[str, Any]]
    status: Optional[Dict[str, Any]]
    date: Optional[Dict[str, Any]]
    number: Optional[Union[int, float]]
    checkbox: bool
    email: Optional[str]
    url: Optional[str]


SimplifiedValue = Union[str, List[str], int, float, bool, Dict[str, Any], None]


@dataclass(frozen=True)
class TypedProperty:
    """A property value resolved to its kind.

    ``kind`` is None for kinds the simplifier does not know about; those
    keep their raw object.
    """

    kind: Optional[PropertyKind]
    payload: Any
    raw: Dict[str, Any]


@dataclass
class PageSummary:
    """Summary information about a Notion page."""

    id: str
    title: str
    url: Optional[str] = None
    created_time: Optional[str] = None
    last_edited_time: Optional[str] = None
    properties: Dict[str, SimplifiedValue] = field(default_factory=dict)


@dataclass
class DatabaseSummary:
    """Summary of a database with its raw property schema."""

    id: str
    title: str
    url: Optional[str] = None
    created_time: Optional[str] = None
    last_edited_time: Optional[str] = None
    properties: Dict[str, Any] = field(default_factory=dict)


@dataclass
class SearchHit:
    id: str
    title: str
    url: Optional[str]
    type: str
