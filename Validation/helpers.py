'''
Validation primitives shared by every hotel entity.

All predicates are total: they never raise and simply answer False for
inputs of the wrong type.
'''
import re
from datetime import date, datetime
from numbers import Real
from typing import Any

EMAIL_PATTERN = re.compile(r"^[\w.-]+@[\w.-]+\.[a-z]{2,}$", re.ASCII)


def is_non_empty_string(value: Any) -> bool:
    '''Check that value is a string with at least one non-blank character.'''
    return isinstance(value, str) and len(value.strip()) > 0


def is_valid_email(value: Any) -> bool:
    '''Check that value looks like local@domain.tld (lowercase tld).'''
    return isinstance(value, str) and EMAIL_PATTERN.fullmatch(value) is not None


def _as_date(value: Any) -> date | None:
    # datetime is a date subclass but does not compare with plain dates
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return None


def is_date_on_or_after(value: Any, threshold: Any) -> bool:
    '''Check that value falls on threshold or on a later calendar day.'''
    day = _as_date(value)
    limit = _as_date(threshold)
    if day is None or limit is None:
        return False
    return day >= limit


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def is_positive(value: Any) -> bool:
    return _is_number(value) and value > 0


def is_non_negative(value: Any) -> bool:
    return _is_number(value) and value >= 0


def is_not_null(value: Any) -> bool:
    return value is not None


def is_integer(value: Any) -> bool:
    '''Check that value is a whole int (bools excluded).'''
    return isinstance(value, int) and not isinstance(value, bool)


def is_calendar_date(value: Any) -> bool:
    '''Check that value is a plain date without a time part.'''
    return isinstance(value, date) and not isinstance(value, datetime)
