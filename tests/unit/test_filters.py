"""Tests for apartment search filter validation."""

import pytest
from pydantic import ValidationError

from app.errors import FilterValidationError
from app.schemas.filters import ApartmentFilters, EMPTY_FILTER_VALUE, INVALID_FILTER_VALUE


def _errors_by_field(exc_info) -> dict:
    return {error["field"]: error for error in exc_info.value.errors}


@pytest.mark.unit
def test_empty_query_constrains_nothing():
    filters = ApartmentFilters.from_query({})

    assert filters.search is None
    assert filters.min_price is None
    assert filters.is_available is None
    assert not filters.has_name_filters


@pytest.mark.unit
def test_camel_case_params_are_normalized():
    filters = ApartmentFilters.from_query({
        "minPrice": "500",
        "maxPrice": "1500.5",
        "bedrooms": "2",
        "listingType": " Sale ",
        "compoundName": "  west ",
        "isAvailable": "true",
    })

    assert filters.min_price == 500.0
    assert filters.max_price == 1500.5
    assert filters.bedrooms == 2
    assert filters.listing_type == "sale"
    assert filters.compound_name == "west"
    assert filters.is_available is True
    assert filters.has_name_filters


@pytest.mark.unit
def test_snake_case_params_are_accepted():
    filters = ApartmentFilters.from_query({"min_square_feet": "80", "developer_name": "Palm"})

    assert filters.min_square_feet == 80.0
    assert filters.developer_name == "Palm"


@pytest.mark.unit
@pytest.mark.parametrize("raw, expected", [("true", True), ("false", False), ("yes", False), ("1", False)])
def test_is_available_only_literal_true_means_true(raw, expected):
    assert ApartmentFilters.from_query({"isAvailable": raw}).is_available is expected


@pytest.mark.unit
@pytest.mark.parametrize("raw", ["", "abc", "nan", "inf", "-1"])
def test_bad_numbers_are_rejected(raw):
    with pytest.raises(FilterValidationError) as exc_info:
        ApartmentFilters.from_query({"minPrice": raw})

    errors = _errors_by_field(exc_info)
    assert errors["minPrice"]["kind"] == INVALID_FILTER_VALUE


@pytest.mark.unit
@pytest.mark.parametrize("raw", ["2.5", "11"])
def test_room_counts_must_be_small_whole_numbers(raw):
    with pytest.raises(FilterValidationError) as exc_info:
        ApartmentFilters.from_query({"bathrooms": raw})

    assert _errors_by_field(exc_info)["bathrooms"]["kind"] == INVALID_FILTER_VALUE


@pytest.mark.unit
def test_room_count_accepts_zero_and_ten():
    filters = ApartmentFilters.from_query({"bedrooms": "0", "bathrooms": "10"})

    assert filters.bedrooms == 0
    assert filters.bathrooms == 10


@pytest.mark.unit
def test_blank_text_is_rejected():
    with pytest.raises(FilterValidationError) as exc_info:
        ApartmentFilters.from_query({"city": "   "})

    assert _errors_by_field(exc_info)["city"]["kind"] == EMPTY_FILTER_VALUE


@pytest.mark.unit
def test_unknown_listing_type_is_rejected():
    with pytest.raises(FilterValidationError) as exc_info:
        ApartmentFilters.from_query({"listingType": "lease"})

    assert _errors_by_field(exc_info)["listingType"]["kind"] == INVALID_FILTER_VALUE


@pytest.mark.unit
def test_every_bad_field_is_reported():
    with pytest.raises(FilterValidationError) as exc_info:
        ApartmentFilters.from_query({"minPrice": "cheap", "bedrooms": "99", "search": ""})

    errors = _errors_by_field(exc_info)
    assert set(errors) == {"minPrice", "bedrooms", "search"}
    assert exc_info.value.to_dict()["errors"] == exc_info.value.errors


@pytest.mark.unit
def test_inverted_range_is_allowed():
    filters = ApartmentFilters.from_query({"minPrice": "2000", "maxPrice": "1000"})

    assert filters.min_price > filters.max_price


@pytest.mark.unit
def test_unknown_params_are_ignored():
    filters = ApartmentFilters.from_query({"page": "3", "city": "Cairo"})

    assert filters.city == "Cairo"


@pytest.mark.unit
def test_filters_are_frozen():
    filters = ApartmentFilters.from_query({"city": "Cairo"})

    with pytest.raises(ValidationError):
        filters.city = "Giza"
