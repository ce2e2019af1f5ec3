"""Argument checks shared by the resource methods and parameter objects."""

import math
import re
from typing import Any, Iterable, Sized

from formstack_api.consts import PER_PAGE_MAX, PER_PAGE_MIN
from formstack_api.error import FormstackConfigurationError

DECIMAL_RE = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)")


def is_numeric(value: Any) -> bool:
    """True for finite ints and floats, and for strings holding a plain decimal number.

    Booleans, NaN, infinity and strings such as "inf", "1e3" or "1_000" are rejected.
    """
    if isinstance(value, bool) or value is None:
        return False
    if isinstance(value, (int, float)):
        return math.isfinite(value)
    if isinstance(value, str):
        return DECIMAL_RE.fullmatch(value.strip()) is not None
    return False


def require_numeric(value: Any, message: str) -> Any:
    if not is_numeric(value):
        raise FormstackConfigurationError(message)
    return value


def require_id(value: Any, name: str) -> Any:
    return require_numeric(value, f"{name} ID is required and must be numeric")


def require_field_ids(field_ids: Iterable[Any]) -> None:
    for field_id in field_ids:
        if not is_numeric(field_id):
            raise FormstackConfigurationError(
                f"Field IDs must be numeric! {field_id!r} given"
            )


def require_pairs(ids: Sized, values: Sized) -> None:
    """Ids and values must have a one to one relationship"""
    if len(ids) != len(values):
        raise FormstackConfigurationError(
            "You must have a one to one relationship between Field ids and Field values"
        )


def require_choice(value: Any, choices: Iterable[Any], message: str) -> Any:
    if value not in choices:
        raise FormstackConfigurationError(message)
    return value


def require_per_page(per_page: Any) -> Any:
    require_numeric(per_page, "The per_page value must be numeric")
    if not PER_PAGE_MIN <= float(per_page) <= PER_PAGE_MAX:
        raise FormstackConfigurationError(
            f"You can only retrieve a minimum of {PER_PAGE_MIN} and maximum of {PER_PAGE_MAX} Submissions per request"
        )
    return per_page
