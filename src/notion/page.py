"""Notion Page operations."""

import asyncio
from typing import Any, Dict, List, Optional, Tuple

from loguru import logger

from .client import NotionClient
from .ids import normalize_id
from .properties import extract_title, simplify_properties
from .types import PageSummary


class NotionPage:
    """A Notion page with its properties and operations."""

    def __init__(self, client: NotionClient, page_id: str) -> None:
        """Initialize a page.

        Args:
            client: The NotionClient instance to use for API calls
            page_id: The ID of the page, hyphenated or not
        """
        self.client = client
        self.id = normalize_id(page_id)
        self._data: Optional[Dict[str, Any]] = None

    async def refresh(self) -> Dict[str, Any]:
        """Refresh the page data from Notion."""
        self._data = await self.client.get(f"pages/{self.id}")
        return self._data

    @property
    def data(self) -> Dict[str, Any]:
        """The page data from the last fetch, empty before the first one."""
        return self._data or {}

    async def blocks(self, page_size: int = 100) -> List[Dict[str, Any]]:
        """First page of child blocks."""
        data = await self.client.get(f"blocks/{self.id}/children", params={"page_size": page_size})
        return data.get("results", [])

    async def load_with_blocks(self, page_size: int = 100) -> Tuple[Dict[str, Any], List[Dict[str, Any]]]:
        """Fetch the page and its child blocks concurrently.

        Either request failing fails the whole call; the other one is cancelled.
        """
        tasks = [
            asyncio.ensure_future(self.refresh()),
            asyncio.ensure_future(self.blocks(page_size=page_size)),
        ]
        try:
            page, blocks = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
        return page, blocks

    async def update(self, properties: Dict[str, Any]) -> Dict[str, Any]:
        """Apply property updates in a single API call."""
        result = await self.client.patch(f"pages/{self.id}", {"properties": properties})
        logger.info(f"[notion] updated {len(properties)} properties for {self.id}")
        self._data = result
        return result

    def summary(self) -> PageSummary:
        return summarize_page(self.data)


def summarize_page(page: Dict[str, Any]) -> PageSummary:
    return PageSummary(
        id=page["id"],
        title=extract_title(page),
        url=page.get("url"),
        created_time=page.get("created_time"),
        last_edited_time=page.get("last_edited_time"),
        properties=simplify_properties(page.get("properties")),
    )
