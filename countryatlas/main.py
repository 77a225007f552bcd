import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from countryatlas.config import settings
from countryatlas.routers import countries, health, metadata, regions, stats
from countryatlas.services import country_service

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="CountryAtlas", version="0.1.0")

# Search is the only rate-limited route; its router owns the limiter.
app.state.limiter = countries.limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(countries.router)
app.include_router(regions.router)
app.include_router(metadata.router)
app.include_router(stats.router)


@app.get("/")
async def root():
    return {
        "name": "CountryAtlas API",
        "version": "0.1.0",
        "endpoints": ["/health", "/countries", "/regions", "/metadata", "/stats", "/groups"],
    }


@app.on_event("startup")
async def startup():
    count = len(country_service.get_all())
    logger.info("CountryAtlas API is running with %d countries", count)
