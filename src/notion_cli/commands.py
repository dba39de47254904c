"""Command handlers.

Each handler receives an open client, the settings and the parsed
command parameters, and returns the value to print. Handlers raise on
failure; the dispatcher turns errors into exit codes.
"""

from typing import Any, Dict, Optional, Tuple

from notion import NotionClient, NotionDatabase, NotionPage, short_id
from notion.errors import MissingArgumentError
from notion.properties import build_properties, load_json_object

from .settings import Settings


async def check_connection(client: NotionClient, settings: Settings) -> str:
    """List up to 20 accessible pages/databases."""
    hits = await client.search_hits(page_size=20)
    lines = [
        "✅ Connected to Notion!",
        f"Found {len(hits)} accessible pages/databases:",
        "",
    ]
    for i, hit in enumerate(hits, start=1):
        marker = "📊" if hit.type == "database" else "📄"
        lines.append(f"{i}. {marker} {hit.title} ({short_id(hit.id)})")
    return "\n".join(lines)


async def query_database(
    client: NotionClient, settings: Settings, database_id: str, filter_json: Optional[str] = None
) -> Any:
    filter = load_json_object(filter_json, "--filter") if filter_json is not None else None
    db = NotionDatabase(client, database_id)
    pages = await db.query(filter=filter, page_size=100)
    return db.summarize_pages(pages)


async def add_entry(
    client: NotionClient,
    settings: Settings,
    database_id: str,
    title: Optional[str] = None,
    properties_json: Optional[str] = None,
    title_property: Optional[str] = None,
) -> Dict[str, Any]:
    properties = build_properties(
        title=title,
        extra=properties_json,
        title_property=title_property or settings.title_property,
    )
    result = await NotionDatabase(client, database_id).add_entry(properties)
    return {"id": result.get("id"), "url": result.get("url"), "created": result.get("created_time")}


async def get_page(client: NotionClient, settings: Settings, page_id: str, simple: bool = False) -> Dict[str, Any]:
    page = NotionPage(client, page_id)
    data, blocks = await page.load_with_blocks(page_size=100)
    return {"page": page.summary() if simple else data, "blocks": blocks}


async def update_page(
    client: NotionClient, settings: Settings, page_id: str, properties_json: Optional[str] = None
) -> Dict[str, Any]:
    if not properties_json:
        raise MissingArgumentError("--properties required")
    properties = build_properties(extra=properties_json)
    result = await NotionPage(client, page_id).update(properties)
    return {"id": result.get("id"), "url": result.get("url"), "last_edited": result.get("last_edited_time")}


async def search(client: NotionClient, settings: Settings, query: Tuple[str, ...] = ()) -> Any:
    return await client.search_hits(" ".join(query) or None, page_size=20)


async def get_database(client: NotionClient, settings: Settings, database_id: str) -> Any:
    return await NotionDatabase(client, database_id).summary()
