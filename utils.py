'''
Validation facade used by the hotel entities.

The validate_* functions group the primitives from Validation.helpers under
domain names and answer True/False. The require_* helpers turn a failed check
into the matching domain error for a given field.
'''
from datetime import date, datetime
from typing import Any

from Config.settings import get_settings
from Validation.errors import InvalidValueError, MissingValueError
from Validation.helpers import (
    is_calendar_date,
    is_date_on_or_after,
    is_integer,
    is_non_empty_string,
    is_non_negative,
    is_not_null,
    is_positive,
    is_valid_email,
)


def today() -> date:
    '''Current calendar date, in the configured hotel timezone when set.'''
    zone = get_settings().zone()
    if zone is None:
        return date.today()
    return datetime.now(zone).date()


def validate_email(email: Any) -> bool:
    return is_valid_email(email)


def validate_string(text: Any) -> bool:
    return is_non_empty_string(text)


def validate_date(compare_date: Any, threshold_date: Any) -> bool:
    '''Validate that compare_date is not before threshold_date.'''
    return is_date_on_or_after(compare_date, threshold_date)


def validate_positive_number(number: Any) -> bool:
    return is_positive(number)


def validate_non_negative_number(number: Any) -> bool:
    return is_non_negative(number)


def validate_object(obj: Any) -> bool:
    return is_not_null(obj)


def validate_integer(number: Any) -> bool:
    return is_integer(number)


def validate_calendar_date(value: Any) -> bool:
    return is_calendar_date(value)


def validate_check_in_date(check_in_date: Any) -> bool:
    '''A check-in date must be present and not in the past.'''
    return validate_object(check_in_date) and validate_date(check_in_date, today())


def require_present(value: Any, field: str, label: str) -> Any:
    '''Raise MissingValueError if value is None, otherwise return it.'''
    if not validate_object(value):
        raise MissingValueError(field, f"{label} can't be None")
    return value


def require(valid: bool, field: str, message: str) -> None:
    '''Raise InvalidValueError with message unless valid.'''
    if not valid:
        raise InvalidValueError(field, message)


def require_date(value: Any, field: str, label: str) -> Any:
    '''Validate a required plain date; datetimes are rejected.'''
    require_present(value, field, label)
    require(validate_calendar_date(value), field, f"{label} must be a date")
    return value


def require_instance(value: Any, kind: type, field: str, label: str) -> Any:
    '''Validate a required reference to another entity.'''
    require_present(value, field, label)
    require(isinstance(value, kind), field, f"{label} must be a {kind.__name__} instance")
    return value


def require_not_past(value: Any, field: str, label: str) -> Any:
    '''Validate a required date that may not fall before today.'''
    require_date(value, field, label)
    require(validate_date(value, today()), field, f"{label} can't be in the past")
    return value
