import re
from datetime import datetime
from decimal import Decimal
from typing import Any


def is_str(x) -> bool:
    return isinstance(x, str)


def is_non_empty_str(x) -> bool:
    return isinstance(x, str) and len(x.strip()) > 0


def is_bool(x) -> bool:
    return isinstance(x, bool)


def is_number(x) -> bool:
    # bool is an int subclass
    return isinstance(x, (int, Decimal)) and not isinstance(x, bool)


def is_non_negative_number(x) -> bool:
    return is_number(x) and x >= 0


def is_number_in_range(x, min_value, max_value) -> bool:
    return is_number(x) and min_value <= x <= max_value


def is_str_list(x) -> bool:
    return isinstance(x, list) and all(isinstance(item, str) for item in x)


def matches(pattern: str, x) -> bool:
    return isinstance(x, str) and re.match(pattern, x) is not None


def is_one_of(values, x) -> bool:
    return x in values


def is_iso_datetime(x) -> bool:
    if not isinstance(x, str):
        return False
    # fromisoformat accepts "Z" only from Python 3.11
    if x.endswith('Z'):
        x = f'{x[:-1]}+00:00'
    try:
        datetime.fromisoformat(x)
    except ValueError:
        return False
    return True


def to_decimal(value: Any) -> Any:
    """
    DynamoDB doesn't accept float, everything else is left as is
    so the validation can reject it
    """
    if isinstance(value, float):
        return Decimal(str(value))
    return value
