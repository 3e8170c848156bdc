import math
from decimal import Decimal
from typing import Any, Callable, Dict, List, Mapping, Tuple

from django.utils.translation import gettext as _

from .dtos import FieldError

TITLE_MAX_LENGTH = 128
TEXT_MAX_LENGTH = 512
CATEGORY_MAX_LENGTH = 128
# products.price is numeric(12, 2)
PRICE_MAX_DIGITS = 12
PRICE_DECIMAL_PLACES = 2
PRICE_MAX = Decimal("9999999999.99")

REQUIRED_ON_CREATE = ("title", "price", "text", "category")


def required_fields_message() -> str:
    return _("A new product must include a title, price, text and category")


def category_message() -> str:
    return _("Category name must be a string of 1 to 128 characters")


def _is_bounded_string(value: Any, max_length: int) -> bool:
    return isinstance(value, str) and 1 <= len(value) <= max_length


def _is_price(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return False
    if isinstance(value, float) and not math.isfinite(value):
        return False
    if isinstance(value, Decimal) and not value.is_finite():
        return False
    # str() keeps floats at their shortest repr, e.g. 49.99 rather than 49.9899...
    amount = Decimal(str(value))
    if not 0 <= amount <= PRICE_MAX:
        return False
    return amount == amount.quantize(Decimal(1).scaleb(-PRICE_DECIMAL_PLACES))


# field -> (check, message factory); order here is the order errors are reported
_FIELD_RULES: Dict[str, Tuple[Callable[[Any], bool], Callable[[], str]]] = {
    "title": (
        lambda v: _is_bounded_string(v, TITLE_MAX_LENGTH),
        lambda: _("Title must be a string of 1 to 128 characters"),
    ),
    "price": (
        _is_price,
        lambda: _(
            "Price must be a number from 0 to 9999999999.99 with at most 2 decimal places"
        ),
    ),
    "text": (
        lambda v: _is_bounded_string(v, TEXT_MAX_LENGTH),
        lambda: _("Text must be a string of 1 to 512 characters"),
    ),
    "imgurl": (
        lambda v: isinstance(v, str),
        lambda: _("Image URL must be a string"),
    ),
    "category": (
        lambda v: _is_bounded_string(v, CATEGORY_MAX_LENGTH),
        category_message,
    ),
}


def validate(fields: Mapping[str, Any], is_create: bool = False) -> List[FieldError]:
    """
    Check product/category input and return every problem found.

    Only fields that are present (not ``None``) are checked, so an empty
    string is still validated. In create mode a missing title, price, text
    or category adds one combined error on the ``error`` field ahead of the
    per-field errors. Never raises; an empty list means the input is valid.
    """
    fields = fields or {}
    errors: List[FieldError] = []

    if is_create and any(fields.get(name) is None for name in REQUIRED_ON_CREATE):
        errors.append(FieldError("error", required_fields_message()))

    for name, (check, message) in _FIELD_RULES.items():
        value = fields.get(name)
        if value is not None and not check(value):
            errors.append(FieldError(name, message()))

    return errors
