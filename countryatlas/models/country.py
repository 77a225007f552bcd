from types import MappingProxyType
from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict

Region = Literal["Americas", "Africa", "Asia", "Europe", "Oceania", "Antarctica"]

Continent = Literal[
    "Africa",
    "Antarctica",
    "Asia",
    "Europe",
    "North America",
    "Oceania",
    "South America",
]

# Region -> valid subregions, in declared order.
REGION_SUBREGION_MAP = MappingProxyType({
    "Americas": (
        "Northern America",
        "South America",
        "Central America",
        "Caribbean",
    ),
    "Africa": (
        "Southern Africa",
        "Western Africa",
        "Northern Africa",
        "Middle Africa",
        "Eastern Africa",
    ),
    "Asia": (
        "Eastern Asia",
        "Southern Asia",
        "Western Asia",
        "South-Eastern Asia",
        "Central Asia",
    ),
    "Europe": (
        "Northern Europe",
        "Western Europe",
        "Eastern Europe",
        "Southern Europe",
    ),
    "Oceania": (
        "Australia and New Zealand",
        "Melanesia",
        "Micronesia",
        "Polynesia",
    ),
    "Antarctica": ("Antarctica",),
})


class Currency(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    symbol: str


class Country(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    official_name: str | None = None
    native_name: str | None = None
    alpha2: str
    alpha3: str
    numeric: str
    region: Region
    subregion: str
    continent: Continent
    currency: Currency | None = None
    languages: tuple[str, ...] = ()
    capital: str | None = None
    phone_code: str | None = None

    @property
    def search_names(self) -> list[str]:
        """Name variants matched by free-text search."""
        return [n for n in (self.name, self.official_name, self.native_name) if n]


CountryField = Literal[
    "name",
    "official_name",
    "native_name",
    "alpha2",
    "alpha3",
    "numeric",
    "region",
    "subregion",
    "continent",
    "currency",
    "languages",
    "capital",
    "phone_code",
]

COUNTRY_FIELDS: tuple[str, ...] = get_args(CountryField)


class CountryFilters(BaseModel):
    """Optional criteria combined with AND. Empty values are not applied."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    region: str | None = None
    subregion: str | None = None
    continent: str | None = None
    language: str | None = None
    currency: str | None = None
    phone_code: str | None = None


class CountryComparison(BaseModel):
    country1: Country | None
    country2: Country | None
    same_currency: bool
    same_region: bool
    same_continent: bool
    shared_languages: list[str]
