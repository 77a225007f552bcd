import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from countryatlas.config import settings
from countryatlas.models.country import Country, CountryComparison, CountryFilters
from countryatlas.services import query_service
from countryatlas.services.query_service import InvalidFieldError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/countries", tags=["countries"])

limiter = Limiter(key_func=get_remote_address)


def _found(country: Country | None, what: str) -> Country:
    if country is None:
        logger.info("Country not found: %s", what)
        raise HTTPException(status_code=404, detail="Country not found")
    return country


@router.get("", response_model=list[Country] | list[dict[str, Any]])
async def list_countries(
    region: str | None = None,
    subregion: str | None = None,
    continent: str | None = None,
    language: str | None = None,
    currency: str | None = None,
    phone_code: str | None = None,
    fields: list[str] | None = Query(default=None),
):
    filters = CountryFilters(
        region=region,
        subregion=subregion,
        continent=continent,
        language=language,
        currency=currency,
        phone_code=phone_code,
    )
    if fields:
        try:
            return query_service.get_countries_by_fields(filters, fields)
        except InvalidFieldError as e:
            raise HTTPException(status_code=400, detail=str(e))
    return query_service.get_countries_by_multiple_filters(filters)


@router.get("/search", response_model=list[Country])
@limiter.limit(settings.search_rate_limit)
async def search(request: Request, q: str = ""):
    return query_service.search_countries(q.strip())


@router.get("/compare", response_model=CountryComparison)
async def compare(code1: str, code2: str):
    return query_service.compare_countries(code1.upper(), code2.upper())


@router.get("/by-name/{name}", response_model=Country)
async def get_by_name(name: str):
    return _found(query_service.get_country_by_name(name), name)


@router.get("/by-capital/{capital}", response_model=Country)
async def get_by_capital(capital: str):
    return _found(query_service.get_country_by_capital(capital), capital)


@router.get("/{code}", response_model=Country)
async def get_country(code: str):
    return _found(query_service.get_country_by_any_code(code), code)


@router.get("/{code}/neighbors", response_model=list[Country])
async def get_neighbors(code: str):
    country = _found(query_service.get_country_by_any_code(code), code)
    return query_service.get_potential_neighbors(country.alpha2)
