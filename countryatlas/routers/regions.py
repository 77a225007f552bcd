from fastapi import APIRouter, HTTPException

from countryatlas.models.country import REGION_SUBREGION_MAP, Country
from countryatlas.services import query_service

router = APIRouter(prefix="/regions", tags=["regions"])


def _check_region(region: str) -> None:
    if region not in REGION_SUBREGION_MAP:
        raise HTTPException(status_code=404, detail=f"Unknown region: {region}")


@router.get("", response_model=list[str])
async def list_regions():
    return query_service.get_all_regions()


@router.get("/{region}/subregions", response_model=list[str])
async def list_subregions(region: str):
    _check_region(region)
    return query_service.get_subregions(region)


@router.get("/{region}/countries", response_model=list[Country])
async def list_region_countries(region: str, subregion: str | None = None):
    _check_region(region)
    return query_service.get_countries_by_region(region, subregion)
