from fastapi import APIRouter

from countryatlas.models.country import Currency
from countryatlas.services import query_service

router = APIRouter(prefix="/metadata", tags=["metadata"])


@router.get("/continents", response_model=list[str])
async def continents():
    return query_service.get_all_continents()


@router.get("/currencies", response_model=list[Currency])
async def currencies():
    return query_service.get_all_currencies()


@router.get("/languages", response_model=list[str])
async def languages():
    return query_service.get_all_languages()


@router.get("/phone-codes", response_model=list[str])
async def phone_codes():
    return query_service.get_all_phone_codes()
