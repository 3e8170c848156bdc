from decimal import Decimal

import pytest

from apps.catalog.models import Product
from apps.catalog.serializers import ProductWriteSerializer
from apps.catalog.validators import (
    PRICE_DECIMAL_PLACES,
    PRICE_MAX,
    PRICE_MAX_DIGITS,
    validate,
)


def valid_product(**overrides):
    data = {
        "title": "Chair",
        "price": 49,
        "text": "Wooden chair",
        "imgurl": "https://example.com/chair.png",
        "category": "Furniture",
    }
    data.update(overrides)
    return data


def fields_of(errors):
    return [e.field for e in errors]


def test_valid_product_has_no_errors_in_create_mode():
    assert validate(valid_product(), is_create=True) == []


def test_imgurl_is_optional_on_create():
    data = valid_product()
    data.pop("imgurl")
    assert validate(data, is_create=True) == []


@pytest.mark.parametrize("missing", ["title", "price", "text", "category"])
def test_missing_required_field_adds_single_combined_error(missing):
    data = valid_product()
    data.pop(missing)
    errors = validate(data, is_create=True)
    assert fields_of(errors) == ["error"]


def test_missing_fields_are_allowed_outside_create_mode():
    assert validate({"title": "Only a title"}) == []
    assert validate({}) == []


def test_none_counts_as_absent():
    errors = validate(valid_product(title=None), is_create=True)
    assert fields_of(errors) == ["error"]


@pytest.mark.parametrize(
    "field,value",
    [
        ("title", ""),
        ("title", "x" * 129),
        ("title", 12),
        ("text", ""),
        ("text", "x" * 513),
        ("category", ""),
        ("category", "c" * 129),
        ("category", ["Furniture"]),
        ("imgurl", 5),
        ("price", -1),
        ("price", "49"),
        ("price", True),
        ("price", float("nan")),
        ("price", float("inf")),
    ],
)
def test_out_of_range_values_name_the_field(field, value):
    errors = validate(valid_product(**{field: value}), is_create=True)
    assert fields_of(errors) == [field]
    assert errors[0].message


@pytest.mark.parametrize(
    "field,value",
    [
        ("title", "x" * 128),
        ("title", "x"),
        ("text", "x" * 512),
        ("category", "c" * 128),
        ("price", 0),
        ("price", 0.5),
        ("price", Decimal("12.50")),
        ("imgurl", ""),
    ],
)
def test_boundary_values_are_accepted(field, value):
    assert validate(valid_product(**{field: value}), is_create=True) == []


def test_errors_accumulate_in_field_order():
    errors = validate(
        {"title": "", "price": -5, "text": 3, "imgurl": 1, "category": ""},
        is_create=True,
    )
    assert fields_of(errors) == ["title", "price", "text", "imgurl", "category"]


def test_combined_error_comes_before_field_errors():
    errors = validate({"title": "", "price": 10}, is_create=True)
    assert fields_of(errors) == ["error", "title"]


def test_each_failing_field_reports_exactly_once():
    errors = validate({"price": -1})
    assert len(errors) == 1
    assert errors[0].field == "price"


@pytest.mark.parametrize(
    "price",
    [
        Decimal("9999999999.99"),
        9999999999,
        49.99,
        Decimal("49.990"),
    ],
)
def test_prices_the_column_can_hold_are_accepted(price):
    assert validate({"price": price}) == []


@pytest.mark.parametrize(
    "price",
    [
        Decimal("10000000000.00"),
        10**10,
        10**12,
        1e300,
        49.999,
        Decimal("0.001"),
    ],
)
def test_prices_too_large_or_too_precise_are_rejected(price):
    errors = validate({"price": price})
    assert fields_of(errors) == ["price"]


def test_price_limits_match_column_and_documented_payload():
    column = Product._meta.get_field("price")
    documented = ProductWriteSerializer().fields["price"]
    assert (column.max_digits, column.decimal_places) == (PRICE_MAX_DIGITS, PRICE_DECIMAL_PLACES)
    assert (documented.max_digits, documented.decimal_places) == (
        PRICE_MAX_DIGITS,
        PRICE_DECIMAL_PLACES,
    )
    assert documented.max_value == PRICE_MAX
    assert len(PRICE_MAX.as_tuple().digits) == PRICE_MAX_DIGITS
