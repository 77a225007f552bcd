from collections.abc import Callable

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from countryatlas.models.country import Country
from countryatlas.services import query_service

router = APIRouter(tags=["stats"])

_GROUPINGS: dict[str, Callable[[], dict[str, list[Country]]]] = {
    "continent": query_service.group_by_continent,
    "region": query_service.group_by_region,
    "currency": query_service.group_by_currency,
    "language": query_service.group_by_language,
}


class StatsResponse(BaseModel):
    total: int
    by_continent: dict[str, int]
    by_region: dict[str, int]


@router.get("/stats", response_model=StatsResponse)
async def stats():
    return StatsResponse(
        total=query_service.get_total_count(),
        by_continent=query_service.count_by_continent(),
        by_region=query_service.count_by_region(),
    )


@router.get("/groups/{key}", response_model=dict[str, list[Country]])
async def groups(key: str):
    group_fn = _GROUPINGS.get(key)
    if group_fn is None:
        raise HTTPException(
            status_code=404,
            detail=f"Unknown grouping '{key}'. Use one of: {', '.join(_GROUPINGS)}",
        )
    return group_fn()
