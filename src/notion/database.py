"""Notion Database operations."""

from typing import Any, Dict, List, Optional

from loguru import logger

from .client import NotionClient
from .ids import normalize_id
from .page import summarize_page
from .properties import extract_title
from .types import DatabaseSummary, PageSummary


class NotionDatabase:
    """A Notion database: schema, queries and new entries."""

    def __init__(self, client: NotionClient, database_id: str) -> None:
        """Initialize a database.

        Args:
            client: The NotionClient instance to use for API calls
            database_id: The ID of the database, hyphenated or not
        """
        self.client = client
        self.database_id = normalize_id(database_id)

    async def retrieve(self) -> Dict[str, Any]:
        return await self.client.get(f"databases/{self.database_id}")

    async def summary(self) -> DatabaseSummary:
        """Database metadata with its raw property schema."""
        data = await self.retrieve()
        return DatabaseSummary(
            id=data["id"],
            title=extract_title(data),
            url=data.get("url"),
            created_time=data.get("created_time"),
            last_edited_time=data.get("last_edited_time"),
            properties=data.get("properties", {}),
        )

    async def query(
        self, filter: Optional[Dict[str, Any]] = None, page_size: int = 100
    ) -> List[Dict[str, Any]]:
        """Query the first page of entries.

        Args:
            filter: Filter object in Notion's query-filter shape, or None
            page_size: Number of results to return (Notion caps it at 100)

        Returns:
            Raw page objects
        """
        payload: Dict[str, Any] = {"page_size": page_size}
        if filter is not None:
            payload["filter"] = filter
        data = await self.client.post(f"databases/{self.database_id}/query", payload)
        pages = data.get("results", [])
        if data.get("has_more"):
            logger.debug(f"[notion] {self.database_id} has more than {len(pages)} entries, returning first page")
        return pages

    def summarize_pages(self, pages: List[Dict[str, Any]]) -> List[PageSummary]:
        """Create summaries of pages with simplified properties."""
        return [summarize_page(p) for p in pages]

    async def add_entry(self, properties: Dict[str, Any]) -> Dict[str, Any]:
        """Create a page in this database."""
        result = await self.client.post(
            "pages", {"parent": {"database_id": self.database_id}, "properties": properties}
        )
        logger.info(f"[notion] created page {result.get('id')} in {self.database_id}")
        return result
