"""Query engine tests against the packaged country table."""

import pytest
from pydantic import ValidationError

from countryatlas.models.country import REGION_SUBREGION_MAP, CountryFilters
from countryatlas.services import query_service as qs
from countryatlas.services.country_service import get_all


def _codes(countries):
    return [c.alpha2 for c in countries]


# Lookups

def test_by_alpha2_every_known_code():
    for country in get_all():
        found = qs.get_country_by_alpha2(country.alpha2)
        assert found is not None
        assert found.alpha2 == country.alpha2


def test_by_alpha2_unknown_and_case_sensitive():
    assert qs.get_country_by_alpha2("ZZ") is None
    assert qs.get_country_by_alpha2("us") is None
    assert qs.get_country_by_alpha2("") is None


def test_by_alpha3():
    assert qs.get_country_by_alpha3("DEU").name == "Germany"
    assert qs.get_country_by_alpha3("deu") is None


def test_by_name_is_exact():
    assert qs.get_country_by_name("Japan").alpha2 == "JP"
    assert qs.get_country_by_name("japan") is None
    assert qs.get_country_by_name("Jap") is None


def test_by_any_code():
    for code in ("us", "US", "usa", "USA", "840"):
        assert qs.get_country_by_any_code(code).alpha2 == "US"
    assert qs.get_country_by_any_code("999") is None


def test_by_capital_case_insensitive():
    assert qs.get_country_by_capital("paris").alpha2 == "FR"
    assert qs.get_country_by_capital("WASHINGTON, D.C.").alpha2 == "US"
    assert qs.get_country_by_capital("Atlantis") is None
    # Records without a capital never match.
    assert qs.get_country_by_capital("") is None


def test_search_matches_all_name_variants():
    names = [c.name for c in qs.search_countries("repub")]
    assert "Czech Republic" in names
    assert "Dominican Republic" in names
    # "French Republic" is only the official name.
    assert "France" in names
    for country in qs.search_countries("repub"):
        assert any("repub" in n.lower() for n in country.search_names)


def test_search_native_name():
    assert "DE" in _codes(qs.search_countries("deutsch"))


def test_search_empty_query_matches_all():
    assert len(qs.search_countries("")) == qs.get_total_count()


# Filters

def test_by_currency():
    euro = qs.get_countries_by_currency("EUR")
    assert {"FR", "DE", "IT", "ES"} <= set(_codes(euro))
    assert all(c.currency.code == "EUR" for c in euro)
    assert qs.get_countries_by_currency("XXX") == []


def test_by_continent_accepts_one_or_many():
    antarctic = qs.get_countries_by_continent(["Antarctica"])
    assert _codes(antarctic) == ["AQ", "BV", "TF", "HM", "GS"]
    assert qs.get_countries_by_continent("Antarctica") == antarctic

    both = qs.get_countries_by_continent(["Antarctica", "Oceania"])
    assert {c.continent for c in both} == {"Antarctica", "Oceania"}
    assert qs.get_countries_by_continent([]) == []


def test_by_region_and_subregion():
    northern = qs.get_countries_by_region("Europe", "Northern Europe")
    assert northern
    assert all(c.subregion == "Northern Europe" for c in northern)
    assert {"GB", "SE", "NO"} <= set(_codes(northern))

    europe = qs.get_countries_by_region("Europe")
    assert len(europe) > len(northern)
    assert all(c.region == "Europe" for c in europe)


def test_by_region_empty_subregion_is_ignored():
    europe = qs.get_countries_by_region("Europe")
    assert qs.get_countries_by_region("Europe", "") == europe
    assert len(europe) > 0


def test_by_region_invalid_combination_is_empty():
    assert qs.get_countries_by_region("Europe", "Antarctica") == []
    assert qs.get_countries_by_region("Atlantis") == []


def test_by_language():
    german = _codes(qs.get_countries_by_language("German"))
    assert {"DE", "AT", "CH", "LI"} <= set(german)
    assert qs.get_countries_by_language("german") == []


def test_by_phone_code_normalizes_prefix():
    plus44 = qs.get_countries_by_phone_code("+44")
    assert set(_codes(plus44)) == {"GG", "IM", "JE", "GB"}
    assert qs.get_countries_by_phone_code("44") == plus44


def test_multiple_filters_and_together():
    result = qs.get_countries_by_multiple_filters(
        region="Europe", language="German", currency="EUR"
    )
    assert _codes(result) == ["AT", "BE", "DE", "LU"]


def test_multiple_filters_accepts_model_and_skips_empty_values():
    filters = CountryFilters(region="Oceania", subregion="", language=None)
    result = qs.get_countries_by_multiple_filters(filters)
    assert result == qs.get_countries_by_region("Oceania")


def test_multiple_filters_without_criteria_returns_all():
    assert len(qs.get_countries_by_multiple_filters()) == qs.get_total_count()


def test_multiple_filters_rejects_unknown_criteria():
    with pytest.raises(ValidationError):
        qs.get_countries_by_multiple_filters(population="big")


# Projection

def test_by_fields_projects_in_requested_order():
    rows = qs.get_countries_by_fields({"subregion": "Australia and New Zealand"}, ["alpha2", "name"])
    assert {"alpha2": "AU", "name": "Australia"} in rows
    assert all(list(row) == ["alpha2", "name"] for row in rows)


def test_by_fields_keeps_absent_values():
    rows = qs.get_countries_by_fields(CountryFilters(continent="Antarctica"), ["alpha2", "capital"])
    assert {"alpha2": "AQ", "capital": None} in rows


def test_by_fields_without_filters():
    rows = qs.get_countries_by_fields(None, ["numeric"])
    assert len(rows) == qs.get_total_count()


def test_by_fields_rejects_unknown_field():
    with pytest.raises(qs.InvalidFieldError) as exc_info:
        qs.get_countries_by_fields(None, ["name", "population", "gdp"])
    assert exc_info.value.fields == ["population", "gdp"]
    assert isinstance(exc_info.value, ValueError)


# Metadata

def test_all_regions_declared_order():
    assert qs.get_all_regions() == ["Americas", "Africa", "Asia", "Europe", "Oceania", "Antarctica"]


def test_subregions():
    assert qs.get_subregions("Antarctica") == ["Antarctica"]
    assert qs.get_subregions("Europe") == list(REGION_SUBREGION_MAP["Europe"])
    assert qs.get_subregions("Atlantis") == []


def test_all_continents():
    continents = qs.get_all_continents()
    assert len(continents) == len(set(continents))
    assert set(continents) == {
        "Africa", "Antarctica", "Asia", "Europe", "North America", "Oceania", "South America",
    }


def test_all_currencies_unique_by_code():
    codes = [c.code for c in qs.get_all_currencies()]
    assert len(codes) == len(set(codes))
    assert "EUR" in codes


def test_all_languages_unique():
    languages = qs.get_all_languages()
    assert len(languages) == len(set(languages))
    assert "Romansh" in languages


def test_code_and_name_lists_follow_table_order():
    countries = get_all()
    assert qs.get_country_names() == [c.name for c in countries]
    assert qs.get_country_alpha2_codes() == [c.alpha2 for c in countries]
    assert qs.get_country_alpha3_codes() == [c.alpha3 for c in countries]


def test_all_phone_codes_skip_absent():
    phone_codes = qs.get_all_phone_codes()
    assert len(phone_codes) == len(set(phone_codes))
    assert None not in phone_codes
    assert all(p.startswith("+") for p in phone_codes)


# Grouping and counting

def test_group_by_continent_and_region_cover_table():
    total = qs.get_total_count()
    assert sum(len(g) for g in qs.group_by_continent().values()) == total
    assert sum(len(g) for g in qs.group_by_region().values()) == total


def test_group_by_currency_skips_countries_without_currency():
    groups = qs.group_by_currency()
    assert "AQ" not in [c.alpha2 for g in groups.values() for c in g]
    assert "US" in _codes(groups["USD"])


def test_group_by_language_fans_out():
    groups = qs.group_by_language()
    swiss = qs.get_country_by_alpha2("CH")
    for language in swiss.languages:
        assert swiss in groups[language]
    assert sum(len(g) for g in groups.values()) >= qs.get_total_count()


def test_counts_sum_to_total():
    total = qs.get_total_count()
    assert sum(qs.count_by_continent().values()) == total
    assert sum(qs.count_by_region().values()) == total
    assert qs.count_by_continent()["Antarctica"] == 5


def test_repeated_calls_are_identical():
    assert qs.group_by_language() == qs.group_by_language()
    assert qs.count_by_region() == qs.count_by_region()
    assert qs.get_countries_by_region("Asia", "Central Asia") == qs.get_countries_by_region("Asia", "Central Asia")


# Validation

def test_is_valid_country_code():
    assert qs.is_valid_country_code("de")
    assert qs.is_valid_country_code("DEU")
    assert qs.is_valid_country_code("276")
    assert not qs.is_valid_country_code("XX")


def test_is_valid_currency_code():
    assert qs.is_valid_currency_code("JPY")
    assert not qs.is_valid_currency_code("jpy")
    assert not qs.is_valid_currency_code("XYZ")


def test_is_valid_language():
    assert qs.is_valid_language("Swahili")
    assert not qs.is_valid_language("Klingon")


# Neighbours and comparison

def test_potential_neighbors():
    germany = qs.get_country_by_alpha2("DE")
    neighbors = qs.get_potential_neighbors("DE")
    assert neighbors
    assert "DE" not in _codes(neighbors)
    assert all(c.subregion == germany.subregion for c in neighbors)
    assert {"FR", "AT", "NL"} <= set(_codes(neighbors))


def test_potential_neighbors_unknown_code():
    assert qs.get_potential_neighbors("ZZ") == []


def test_compare_with_itself():
    result = qs.compare_countries("CH", "CH")
    assert result.same_currency and result.same_region and result.same_continent
    assert result.shared_languages == list(qs.get_country_by_alpha2("CH").languages)


def test_compare_two_countries():
    result = qs.compare_countries("DE", "AT")
    assert result.same_currency
    assert result.same_region
    assert result.same_continent
    assert result.shared_languages == ["German"]

    result = qs.compare_countries("US", "GB")
    assert not result.same_currency
    assert not result.same_region
    assert result.shared_languages == ["English"]


def test_compare_without_currency_is_not_same_currency():
    result = qs.compare_countries("AQ", "AQ")
    assert result.same_currency is False
    assert result.same_region is True


def test_compare_missing_country():
    result = qs.compare_countries("DE", "ZZ")
    assert result.country1.alpha2 == "DE"
    assert result.country2 is None
    assert not (result.same_currency or result.same_region or result.same_continent)
    assert result.shared_languages == []


def test_normalize_phone_code():
    assert qs.normalize_phone_code("33") == "+33"
    assert qs.normalize_phone_code(" +33 ") == "+33"
