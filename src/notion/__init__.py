"""Notion API client."""

from .client import NotionClient
from .database import NotionDatabase
from .ids import normalize_id, short_id
from .page import NotionPage
from .properties import build_properties, simplify_properties
from .types import DatabaseSummary, PageSummary, PropertyKind, SearchHit

__all__ = [
    "NotionClient",
    "NotionDatabase",
    "NotionPage",
    "DatabaseSummary",
    "PageSummary",
    "PropertyKind",
    "SearchHit",
    "build_properties",
    "normalize_id",
    "short_id",
    "simplify_properties",
]
