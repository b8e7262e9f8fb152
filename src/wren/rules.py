"""Built-in validation predicates.

Each rule is a pure function with the signature::

    def rule(value: str, *params) -> bool:
        '''Return True when the value passes.'''

FieldChain decides what to do with a failure.
All patterns use ASCII semantics, so ``\\d`` means ``[0-9]`` only.
"""

import re

from wren.errors import RuleArgumentError

# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


def is_empty(value: str) -> bool:
    """Value is empty or whitespace only."""
    return not value.strip()


def is_not_empty(value: str) -> bool:
    """Value has at least one non-whitespace character."""
    return not is_empty(value)


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------

# local@domain.tld; checks structure, not deliverability
_EMAIL_RE = re.compile(
    r"[a-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[a-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r"@(?:[a-z0-9](?:[a-z0-9-]*[a-z0-9])?\.)+[a-z]{2,}",
    re.IGNORECASE | re.ASCII,
)
_LETTERS_RE = re.compile(r"[a-zA-Z\s]+", re.ASCII)


def is_email(value: str) -> bool:
    """Value is a ``local@domain.tld`` address."""
    return _EMAIL_RE.fullmatch(value) is not None


def is_letters(value: str) -> bool:
    """Value holds only letters and whitespace (and at least one of them)."""
    return _LETTERS_RE.fullmatch(value) is not None


def matches(value: str, pattern: str | re.Pattern[str]) -> bool:
    """Value matches *pattern* in full."""
    return re.fullmatch(pattern, value) is not None


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------

_NUMERIC_RE = re.compile(r"\d+(?:\.\d+)?|\.\d+", re.ASCII)
_POSITIVE_RE = re.compile(r"[1-9][0-9]*")
_NEGATIVE_RE = re.compile(r"-[1-9][0-9]*")


def is_numeric(value: str) -> bool:
    """Unsigned base-10 numeral, optionally fractional: ``42``, ``3.14``, ``.5``."""
    return _NUMERIC_RE.fullmatch(value) is not None


def is_positive_number(value: str) -> bool:
    """Nonzero whole number with no sign and no leading zero."""
    return _POSITIVE_RE.fullmatch(value) is not None


def is_negative_number(value: str) -> bool:
    """``-`` followed by a nonzero whole number with no leading zero."""
    return _NEGATIVE_RE.fullmatch(value) is not None


# ---------------------------------------------------------------------------
# Dates and times
# ---------------------------------------------------------------------------

_TIME = r"(?P<hour>[01]?[0-9]|2[0-3]):(?P<minute>[0-5][0-9]):(?P<second>[0-5][0-9])"
_DATE = r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"

_TIME_RE = re.compile(_TIME, re.ASCII)
_DATE_RE = re.compile(_DATE, re.ASCII)
_DATE_TIME_RE = re.compile(f"{_DATE} {_TIME}", re.ASCII)

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Gregorian rule: divisible by 4, not by 100 unless by 400."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def is_valid_calendar_date(year: int, month: int, day: int) -> bool:
    """True if *year*-*month*-*day* exists on the Gregorian calendar."""
    if year < 1 or not 1 <= month <= 12:
        return False
    days = _DAYS_IN_MONTH[month - 1]
    if month == 2 and is_leap_year(year):
        days = 29
    return 1 <= day <= days


def _calendar_match(match: re.Match[str] | None) -> bool:
    if match is None:
        return False
    return is_valid_calendar_date(
        int(match["year"]), int(match["month"]), int(match["day"])
    )


def is_date_time(value: str) -> bool:
    """``YYYY-MM-DD HH:MM:SS`` naming a real calendar date."""
    return _calendar_match(_DATE_TIME_RE.fullmatch(value))


def is_date(value: str) -> bool:
    """``YYYY-MM-DD`` naming a real calendar date."""
    return _calendar_match(_DATE_RE.fullmatch(value))


def is_time(value: str) -> bool:
    """``HH:MM:SS`` with hour 0-23 (one or two digits), minute and second 0-59."""
    return _TIME_RE.fullmatch(value) is not None


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


def check_length_bounds(rule: str, **bounds: int) -> None:
    """Raise ``RuleArgumentError`` unless every bound is a non-negative int
    and ``min <= max`` when both are given.
    """
    for name, bound in bounds.items():
        if isinstance(bound, bool) or not isinstance(bound, int):
            raise RuleArgumentError(rule, f"{name} must be an int, got {bound!r}")
        if bound < 0:
            raise RuleArgumentError(rule, f"{name} must not be negative, got {bound}")
    low, high = bounds.get("min"), bounds.get("max")
    if low is not None and high is not None and low > high:
        raise RuleArgumentError(rule, f"min ({low}) is greater than max ({high})")


def is_minimum_length(value: str, min: int) -> bool:  # noqa: A002
    """String is at least *min* characters."""
    check_length_bounds("is_minimum_length", min=min)
    return len(value) >= min


def is_maximum_length(value: str, max: int) -> bool:  # noqa: A002
    """String is at most *max* characters."""
    check_length_bounds("is_maximum_length", max=max)
    return len(value) <= max


def is_length_within(value: str, min: int, max: int) -> bool:  # noqa: A002
    """String length lies in ``[min, max]``."""
    check_length_bounds("is_length_within", min=min, max=max)
    return min <= len(value) <= max


# ---------------------------------------------------------------------------
# Character classes (handy for passwords)
# ---------------------------------------------------------------------------

_UPPER_RE = re.compile(r"[A-Z]")
_LOWER_RE = re.compile(r"[a-z]")
_DIGIT_RE = re.compile(r"[0-9]")


def has_upper_case(value: str) -> bool:
    """At least one ``A-Z`` character."""
    return _UPPER_RE.search(value) is not None


def has_lower_case(value: str) -> bool:
    """At least one ``a-z`` character."""
    return _LOWER_RE.search(value) is not None


def has_number(value: str) -> bool:
    """At least one ``0-9`` digit."""
    return _DIGIT_RE.search(value) is not None
