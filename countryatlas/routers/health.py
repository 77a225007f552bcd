import time

from fastapi import APIRouter

from countryatlas import __version__
from countryatlas.config import settings
from countryatlas.services import query_service

router = APIRouter(tags=["health"])

_start_time = time.time()


@router.get("/health")
async def health_check():
    return {
        "status": "ok",
        "uptime_seconds": round(time.time() - _start_time),
        "version": __version__,
        "data_file": settings.countries_data_path.name,
        "countries": query_service.get_total_count(),
    }
