"""Country reference data and read-only queries over it."""

from countryatlas.models.country import (
    COUNTRY_FIELDS,
    REGION_SUBREGION_MAP,
    Country,
    CountryComparison,
    CountryField,
    CountryFilters,
    Currency,
)
from countryatlas.services.country_service import CountryDataError, get_all, load_countries
from countryatlas.services.query_service import (
    InvalidFieldError,
    compare_countries,
    count_by_continent,
    count_by_region,
    get_all_continents,
    get_all_currencies,
    get_all_languages,
    get_all_phone_codes,
    get_all_regions,
    get_countries_by_continent,
    get_countries_by_currency,
    get_countries_by_fields,
    get_countries_by_language,
    get_countries_by_multiple_filters,
    get_countries_by_phone_code,
    get_countries_by_region,
    get_country_alpha2_codes,
    get_country_alpha3_codes,
    get_country_by_alpha2,
    get_country_by_alpha3,
    get_country_by_any_code,
    get_country_by_capital,
    get_country_by_name,
    get_country_names,
    get_potential_neighbors,
    get_subregions,
    get_total_count,
    group_by_continent,
    group_by_currency,
    group_by_language,
    group_by_region,
    is_valid_country_code,
    is_valid_currency_code,
    is_valid_language,
    normalize_phone_code,
    search_countries,
)

__version__ = "0.1.0"
