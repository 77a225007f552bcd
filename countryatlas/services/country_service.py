import json
import logging
from pathlib import Path

from pydantic import ValidationError

from countryatlas.config import settings
from countryatlas.models.country import Country

logger = logging.getLogger(__name__)

_countries: tuple[Country, ...] | None = None


class CountryDataError(Exception):
    """Raised when the country data file is missing or malformed."""


def load_countries(path: Path | str) -> tuple[Country, ...]:
    """Read and validate a country data file.

    The file must hold a JSON array of country objects. The returned
    tuple keeps the file order.
    """
    path = Path(path)
    logger.info("Loading country data from %s", path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        logger.error("Country data file not found: %s", path)
        raise CountryDataError(f"Country data file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        logger.error("Country data file is not valid JSON: %s (%s)", path, exc)
        raise CountryDataError(f"Invalid JSON in {path}: {exc}") from exc

    if not isinstance(raw, list):
        raise CountryDataError(
            f"Expected a JSON array of countries in {path}, got {type(raw).__name__}"
        )

    try:
        countries = tuple(Country(**c) for c in raw)
    except (TypeError, ValidationError) as exc:
        logger.error("Country record failed validation in %s: %s", path, exc)
        raise CountryDataError(f"Invalid country record in {path}: {exc}") from exc

    logger.info("Loaded %d countries", len(countries))
    return countries


def _load() -> tuple[Country, ...]:
    global _countries
    if _countries is None:
        _countries = load_countries(settings.countries_data_path)
    return _countries


def get_all() -> tuple[Country, ...]:
    return _load()
