"""Base client for Notion API interactions."""

import os
from typing import Any, Dict, List, Optional

import httpx
from loguru import logger

from .errors import ConfigurationError, RemoteError, RemoteNotFoundError
from .properties import extract_title
from .types import SearchHit

TOKEN_HINT = "Add to your environment or .env: NOTION_TOKEN=secret_xxxxxxxxxx"


class NotionClient:
    """Async client for the Notion REST API.

    Use as an async context manager; one HTTP connection pool is shared
    by every request made inside the block.
    """

    API_BASE = "https://api.notion.com/v1"
    API_VERSION = "2022-06-28"  # stable version

    def __init__(
        self,
        token: Optional[str] = None,
        *,
        api_base: Optional[str] = None,
        version: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize the client.

        Args:
            token: Notion API token. If not provided, will look for NOTION_TOKEN env var.
            api_base: Override for the API root URL.
            version: Value of the Notion-Version header.
            timeout: Transport timeout in seconds.
            transport: Custom httpx transport, used by tests.
        """
        self.token = token or os.getenv("NOTION_TOKEN")
        if not self.token:
            raise ConfigurationError("NOTION_TOKEN not set", hint=TOKEN_HINT)
        self.api_base = (api_base or self.API_BASE).rstrip("/")
        self.version = version or self.API_VERSION
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "NotionClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    def _headers(self) -> Dict[str, str]:
        """Get the headers required for Notion API requests."""
        return {
            "Authorization": f"Bearer {self.token}",
            "Notion-Version": self.version,
            "Content-Type": "application/json",
        }

    def _url(self, path: str) -> str:
        """Construct a full URL from a path."""
        return f"{self.api_base}/{path.lstrip('/')}"

    def _http(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers=self._headers(), timeout=self.timeout, transport=self._transport
            )
        return self._client

    async def request(
        self,
        method: str,
        path: str,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Send a request and return the decoded JSON body.

        Raises:
            RemoteNotFoundError: if Notion answers ``object_not_found``.
            RemoteError: for any other error response or transport failure.
        """
        logger.debug(f"[notion] {method} {path}")
        try:
            r = await self._http().request(method, self._url(path), json=json, params=params)
        except httpx.HTTPError as e:
            logger.warning(f"[notion] {method} {path} failed: {e!r}")
            raise RemoteError(f"Request to Notion failed: {e}") from e

        try:
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise self._error_from_response(r) from e
        try:
            return r.json()
        except ValueError as e:
            logger.warning(f"[notion] {method} {path} returned a non-JSON body ({r.status_code})")
            raise RemoteError(
                f"Notion returned a non-JSON response ({r.status_code})", status=r.status_code
            ) from e

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Make a GET request to the Notion API."""
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json: Dict[str, Any]) -> Dict[str, Any]:
        """Make a POST request to the Notion API."""
        return await self.request("POST", path, json=json)

    async def patch(self, path: str, json: Dict[str, Any]) -> Dict[str, Any]:
        """Make a PATCH request to the Notion API."""
        return await self.request("PATCH", path, json=json)

    @staticmethod
    def _extract_error_detail(response: httpx.Response) -> Dict[str, Any]:
        """Extract the error object from a Notion API response."""
        try:
            body = response.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {}

    @classmethod
    def _error_from_response(cls, response: httpx.Response) -> RemoteError:
        detail = cls._extract_error_detail(response)
        code = detail.get("code")
        message = detail.get("message") or "No details available"
        logger.warning(f"[notion] API error ({response.status_code}) {code}: {message}")
        if code == "object_not_found":
            return RemoteNotFoundError(message, status=response.status_code, code=code)
        return RemoteError(
            f"Notion API error ({response.status_code}): {message}",
            status=response.status_code,
            code=code,
        )

    async def search(self, query: Optional[str] = None, page_size: int = 20) -> List[Dict[str, Any]]:
        """Search pages and databases shared with the integration."""
        payload: Dict[str, Any] = {"page_size": page_size}
        if query:
            payload["query"] = query
        data = await self.post("search", payload)
        return data.get("results", [])

    async def search_hits(self, query: Optional[str] = None, page_size: int = 20) -> List[SearchHit]:
        return [
            SearchHit(
                id=item["id"],
                title=extract_title(item),
                url=item.get("url"),
                type=item.get("object", ""),
            )
            for item in await self.search(query, page_size=page_size)
        ]
