"""Read-only queries over the country table.

Every function scans the shared table returned by
``country_service.get_all()`` and builds a new result on each call.
Lookups return ``None`` when nothing matches; filters and aggregations
return empty containers.
"""

from collections import Counter
from collections.abc import Iterable, Sequence
from typing import Any

from countryatlas.models.country import (
    COUNTRY_FIELDS,
    REGION_SUBREGION_MAP,
    Country,
    CountryComparison,
    CountryFilters,
    Currency,
)
from countryatlas.services.country_service import get_all


class InvalidFieldError(ValueError):
    """Raised when a projection names fields a country does not have."""

    def __init__(self, fields: Sequence[str]):
        self.fields = list(fields)
        super().__init__(
            f"Unknown country field(s): {', '.join(self.fields)}. "
            f"Valid fields: {', '.join(COUNTRY_FIELDS)}"
        )


def normalize_phone_code(phone_code: str) -> str:
    phone_code = phone_code.strip()
    return phone_code if phone_code.startswith("+") else f"+{phone_code}"


# ── Lookups ──────────────────────────────────────────────────────────


def get_country_by_name(name: str) -> Country | None:
    return next((c for c in get_all() if c.name == name), None)


def get_country_by_alpha2(code: str) -> Country | None:
    return next((c for c in get_all() if c.alpha2 == code), None)


def get_country_by_alpha3(code: str) -> Country | None:
    return next((c for c in get_all() if c.alpha3 == code), None)


def get_country_by_any_code(code: str) -> Country | None:
    """Match alpha2 or alpha3 case-insensitively, or the numeric code exactly."""
    upper = code.upper()
    return next(
        (c for c in get_all() if c.alpha2 == upper or c.alpha3 == upper or c.numeric == code),
        None,
    )


def get_country_by_capital(capital: str) -> Country | None:
    capital = capital.lower()
    return next(
        (c for c in get_all() if c.capital and c.capital.lower() == capital),
        None,
    )


def search_countries(query: str) -> list[Country]:
    """Case-insensitive substring search over common, official and native names."""
    query = query.lower()
    return [c for c in get_all() if any(query in n.lower() for n in c.search_names)]


# ── Filters ──────────────────────────────────────────────────────────


def get_countries_by_currency(code: str) -> list[Country]:
    return [c for c in get_all() if c.currency is not None and c.currency.code == code]


def get_countries_by_continent(continents: Iterable[str] | str) -> list[Country]:
    if isinstance(continents, str):
        continents = {continents}
    else:
        continents = set(continents)
    return [c for c in get_all() if c.continent in continents]


def get_countries_by_region(region: str, subregion: str | None = None) -> list[Country]:
    if subregion and subregion not in REGION_SUBREGION_MAP.get(region, ()):
        return []
    return [
        c for c in get_all()
        if c.region == region and (not subregion or c.subregion == subregion)
    ]


def get_countries_by_language(language: str) -> list[Country]:
    return [c for c in get_all() if language in c.languages]


def get_countries_by_phone_code(phone_code: str) -> list[Country]:
    phone_code = normalize_phone_code(phone_code)
    return [c for c in get_all() if c.phone_code == phone_code]


def _matches(country: Country, filters: CountryFilters) -> bool:
    if filters.region and country.region != filters.region:
        return False
    if filters.subregion and country.subregion != filters.subregion:
        return False
    if filters.continent and country.continent != filters.continent:
        return False
    if filters.language and filters.language not in country.languages:
        return False
    if filters.currency and (country.currency is None or country.currency.code != filters.currency):
        return False
    if filters.phone_code and country.phone_code != normalize_phone_code(filters.phone_code):
        return False
    return True


def get_countries_by_multiple_filters(
    filters: CountryFilters | None = None, **criteria: str | None
) -> list[Country]:
    """AND together region, subregion, continent, language, currency and phone_code.

    Pass either a ``CountryFilters`` instance or the criteria as keyword
    arguments. Unknown criteria raise a pydantic ``ValidationError``.
    """
    if filters is None:
        filters = CountryFilters(**criteria)
    return [c for c in get_all() if _matches(c, filters)]


# ── Projection ───────────────────────────────────────────────────────


def get_countries_by_fields(
    filters: CountryFilters | dict[str, Any] | None, fields: Sequence[str]
) -> list[dict[str, Any]]:
    unknown = [f for f in fields if f not in COUNTRY_FIELDS]
    if unknown:
        raise InvalidFieldError(unknown)

    if filters is None:
        filters = CountryFilters()
    elif isinstance(filters, dict):
        filters = CountryFilters(**filters)

    return [
        {f: getattr(c, f) for f in fields}
        for c in get_all()
        if _matches(c, filters)
    ]


# ── Metadata ─────────────────────────────────────────────────────────


def get_all_regions() -> list[str]:
    return list(REGION_SUBREGION_MAP)


def get_subregions(region: str) -> list[str]:
    return list(REGION_SUBREGION_MAP.get(region, ()))


def get_all_continents() -> list[str]:
    return list(dict.fromkeys(c.continent for c in get_all()))


def get_all_currencies() -> list[Currency]:
    seen: dict[str, Currency] = {}
    for c in get_all():
        if c.currency is not None and c.currency.code not in seen:
            seen[c.currency.code] = c.currency
    return list(seen.values())


def get_all_languages() -> list[str]:
    return list(dict.fromkeys(lang for c in get_all() for lang in c.languages))


def get_country_names() -> list[str]:
    return [c.name for c in get_all()]


def get_country_alpha2_codes() -> list[str]:
    return [c.alpha2 for c in get_all()]


def get_country_alpha3_codes() -> list[str]:
    return [c.alpha3 for c in get_all()]


def get_all_phone_codes() -> list[str]:
    return list(dict.fromkeys(c.phone_code for c in get_all() if c.phone_code))


# ── Grouping and counting ────────────────────────────────────────────


def group_by_continent() -> dict[str, list[Country]]:
    groups: dict[str, list[Country]] = {}
    for c in get_all():
        groups.setdefault(c.continent, []).append(c)
    return groups


def group_by_region() -> dict[str, list[Country]]:
    groups: dict[str, list[Country]] = {}
    for c in get_all():
        groups.setdefault(c.region, []).append(c)
    return groups


def group_by_currency() -> dict[str, list[Country]]:
    """Countries keyed by currency code. Countries without a currency are left out."""
    groups: dict[str, list[Country]] = {}
    for c in get_all():
        if c.currency is not None:
            groups.setdefault(c.currency.code, []).append(c)
    return groups


def group_by_language() -> dict[str, list[Country]]:
    """Countries keyed by language; a multilingual country appears under each of its languages."""
    groups: dict[str, list[Country]] = {}
    for c in get_all():
        for lang in c.languages:
            groups.setdefault(lang, []).append(c)
    return groups


def count_by_continent() -> dict[str, int]:
    return dict(Counter(c.continent for c in get_all()))


def count_by_region() -> dict[str, int]:
    return dict(Counter(c.region for c in get_all()))


def get_total_count() -> int:
    return len(get_all())


# ── Validation ───────────────────────────────────────────────────────


def is_valid_country_code(code: str) -> bool:
    return get_country_by_any_code(code) is not None


def is_valid_currency_code(code: str) -> bool:
    return any(c.currency is not None and c.currency.code == code for c in get_all())


def is_valid_language(language: str) -> bool:
    return any(language in c.languages for c in get_all())


# ── Derived ──────────────────────────────────────────────────────────


def get_potential_neighbors(code: str) -> list[Country]:
    """Other countries in the same subregion as the given alpha2 code."""
    country = get_country_by_alpha2(code)
    if country is None:
        return []
    return [
        c for c in get_all()
        if c.subregion == country.subregion and c.alpha2 != country.alpha2
    ]


def compare_countries(code1: str, code2: str) -> CountryComparison:
    """Compare two countries by alpha2 code.

    A missing country makes every flag false and shares no languages.
    Two countries share a currency only when both have one with the same code.
    """
    c1 = get_country_by_alpha2(code1)
    c2 = get_country_by_alpha2(code2)

    if c1 is None or c2 is None:
        return CountryComparison(
            country1=c1,
            country2=c2,
            same_currency=False,
            same_region=False,
            same_continent=False,
            shared_languages=[],
        )

    same_currency = (
        c1.currency is not None
        and c2.currency is not None
        and c1.currency.code == c2.currency.code
    )
    return CountryComparison(
        country1=c1,
        country2=c2,
        same_currency=same_currency,
        same_region=c1.region == c2.region,
        same_continent=c1.continent == c2.continent,
        shared_languages=[lang for lang in c1.languages if lang in c2.languages],
    )
