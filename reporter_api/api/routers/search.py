"""Keyword search over the hosted authors and posts indices."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from fastapi import APIRouter, Depends, Query

from ...services.search import AUTHORS_INDEX, POSTS_INDEX, AlgoliaSearchClient
from ..deps import SearchClientDep, cache_control

router = APIRouter(
    prefix="/v1/search",
    tags=["search"],
    dependencies=[Depends(cache_control("public,max-age=3600"))],
)


@dataclass
class SearchParams:
    keywords: str
    filters: str
    hits_per_page: int
    page: int


def search_params(
    keywords: str = Query(""),
    filters: str = Query(""),
    hits_per_page: int = Query(10, alias="hitsPerPage", ge=1, le=100),
    page: int = Query(0, ge=0),
) -> SearchParams:
    return SearchParams(keywords, filters, hits_per_page, page)


async def _search(
    client: AlgoliaSearchClient, index_name: str, params: SearchParams
) -> Dict[str, Any]:
    return await client.search(
        index_name,
        params.keywords,
        filters=params.filters,
        hits_per_page=params.hits_per_page,
        page=params.page,
    )


@router.get("/authors")
async def search_authors(
    client: SearchClientDep, params: SearchParams = Depends(search_params)
):
    return await _search(client, AUTHORS_INDEX, params)


@router.get("/posts")
async def search_posts(
    client: SearchClientDep, params: SearchParams = Depends(search_params)
):
    return await _search(client, POSTS_INDEX, params)


__all__ = ["router"]
