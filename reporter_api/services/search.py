"""Algolia search client.

Queries go straight to the Algolia REST endpoint:
https://www.algolia.com/doc/rest-api/search/#search-index-post
"""

from __future__ import annotations

from typing import Any, Dict, Optional
from urllib.parse import urlencode

import httpx

from ..core.exceptions import SearchError
from ..core.logging import get_logger

logger = get_logger(__name__)

AUTHORS_INDEX = "contacts-index"
POSTS_INDEX = "posts-index"


class AlgoliaSearchClient:
    """Runs keyword queries against hosted Algolia indices."""

    def __init__(
        self,
        application_id: str,
        api_key: str,
        *,
        timeout: float = 20,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.application_id = application_id
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport

    @property
    def base_url(self) -> str:
        return f"https://{self.application_id}-dsn.algolia.net/1/indexes"

    async def search(
        self,
        index_name: str,
        keywords: str = "",
        *,
        filters: str = "",
        hits_per_page: int = 10,
        page: int = 0,
    ) -> Dict[str, Any]:
        """Return Algolia's response (``hits``, ``nbHits``, ``page``...) for a query."""

        params = {
            "query": keywords,
            "filters": filters,
            "hitsPerPage": hits_per_page,
            "page": page,
        }
        url = f"{self.base_url}/{index_name}/query"
        headers = {
            "X-Algolia-Application-Id": self.application_id,
            "X-Algolia-API-Key": self.api_key,
        }
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    url, json={"params": urlencode(params)}, headers=headers
                )
                response.raise_for_status()
                return response.json()
        except httpx.HTTPError as exc:
            logger.error("services.search.%s: %s", index_name, exc)
            raise SearchError() from exc


__all__ = ["AUTHORS_INDEX", "AlgoliaSearchClient", "POSTS_INDEX"]
