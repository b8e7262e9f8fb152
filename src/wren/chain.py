"""FieldChain — the sequence of rule calls bound to one field.

A chain is created by ``ValidationSession.check()`` and holds the field's
resolved value plus a ``ChainState``. Every rule method has the same shape:
if the chain is ``ACTIVE`` and the value fails the rule, the session logs
one error for the field and the chain becomes ``TRIPPED``. Later rules on
a tripped or dormant chain are still safe to call; they just record nothing.

Usage::

    session.check("password") \\
        .is_not_empty("Choose a password") \\
        .is_minimum_length(8, "At least 8 characters") \\
        .has_number("Include a digit")
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import TYPE_CHECKING

from wren import rules
from wren.errors import RuleArgumentError

if TYPE_CHECKING:
    from collections.abc import Callable

    from wren._internal.types import Predicate
    from wren.session import ValidationSession

logger = logging.getLogger("wren.chain")


class ChainState(Enum):
    """Where a chain stands in its short-circuit lifecycle."""

    ACTIVE = "active"  # no rule has failed yet
    TRIPPED = "tripped"  # a rule failed (or the field is missing); terminal
    DORMANT = "dormant"  # optional field absent from the input; terminal


class _Missing:
    """Sentinel for a field absent from the input bag."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __str__(self) -> str:
        return ""


MISSING = _Missing()


class FieldChain:
    """Rule methods for one field of one session. Each returns ``self``."""

    __slots__ = ("_field", "_session", "_state", "_value")

    def __init__(
        self,
        session: ValidationSession,
        field: str,
        value: str | _Missing,
        state: ChainState = ChainState.ACTIVE,
    ) -> None:
        self._session = session
        self._field = field
        self._value = value
        self._state = state

    @property
    def field(self) -> str:
        return self._field

    @property
    def value(self) -> str | _Missing:
        """The coerced string value, or ``MISSING``."""
        return self._value

    @property
    def state(self) -> ChainState:
        return self._state

    @property
    def active(self) -> bool:
        """True while no rule in this chain has failed."""
        return self._state is ChainState.ACTIVE

    def __repr__(self) -> str:
        return f"FieldChain({self._field!r}, {self._value!r}, {self._state.name})"

    # -- plumbing --

    def _apply(
        self,
        rule: str,
        passes: Callable[[str], bool],
        message: str | None,
        **params: object,
    ) -> FieldChain:
        if self._state is not ChainState.ACTIVE:
            return self
        # ACTIVE chains always hold a real string
        if passes(str(self._value)):
            return self
        if message is None:
            message = self._session.config.message_for(rule, **params)
        logger.debug("%s failed %s", self._field, rule)
        self._session.log_error(self._field, message)
        self._state = ChainState.TRIPPED
        return self

    # -- presence --

    def is_empty(self, message: str | None = None) -> FieldChain:
        return self._apply("is_empty", rules.is_empty, message)

    def is_not_empty(self, message: str | None = None) -> FieldChain:
        return self._apply("is_not_empty", rules.is_not_empty, message)

    # -- format --

    def is_email(self, message: str | None = None) -> FieldChain:
        return self._apply("is_email", rules.is_email, message)

    def is_letters(self, message: str | None = None) -> FieldChain:
        """Letters and whitespace only."""
        return self._apply("is_letters", rules.is_letters, message)

    def matches(self, pattern: str | re.Pattern[str], message: str | None = None) -> FieldChain:
        """Value must match *pattern* in full.

        An invalid pattern raises ``RuleArgumentError`` straight away.
        """
        try:
            compiled = re.compile(pattern)
        except re.error as exc:
            raise RuleArgumentError("matches", f"invalid pattern {pattern!r}: {exc}") from exc
        return self._apply(
            "matches",
            lambda value: rules.matches(value, compiled),
            message,
            pattern=compiled.pattern,
        )

    def satisfies(self, predicate: Predicate, message: str | None = None) -> FieldChain:
        """Value must make *predicate* return True."""
        if not callable(predicate):
            raise RuleArgumentError("satisfies", f"predicate must be callable, got {predicate!r}")
        return self._apply("satisfies", predicate, message)

    # -- numbers --

    def is_numeric(self, message: str | None = None) -> FieldChain:
        return self._apply("is_numeric", rules.is_numeric, message)

    def is_positive_number(self, message: str | None = None) -> FieldChain:
        return self._apply("is_positive_number", rules.is_positive_number, message)

    def is_not_positive_number(self, message: str | None = None) -> FieldChain:
        return self._apply(
            "is_not_positive_number",
            lambda value: not rules.is_positive_number(value),
            message,
        )

    def is_negative_number(self, message: str | None = None) -> FieldChain:
        return self._apply("is_negative_number", rules.is_negative_number, message)

    def is_not_negative_number(self, message: str | None = None) -> FieldChain:
        return self._apply(
            "is_not_negative_number",
            lambda value: not rules.is_negative_number(value),
            message,
        )

    # -- dates and times --

    def is_date_time(self, message: str | None = None) -> FieldChain:
        """``YYYY-MM-DD HH:MM:SS`` on a real calendar date."""
        return self._apply("is_date_time", rules.is_date_time, message)

    def is_date(self, message: str | None = None) -> FieldChain:
        return self._apply("is_date", rules.is_date, message)

    def is_time(self, message: str | None = None) -> FieldChain:
        return self._apply("is_time", rules.is_time, message)

    # -- length --

    def is_minimum_length(self, min: int, message: str | None = None) -> FieldChain:  # noqa: A002
        rules.check_length_bounds("is_minimum_length", min=min)
        return self._apply(
            "is_minimum_length",
            lambda value: rules.is_minimum_length(value, min),
            message,
            min=min,
        )

    def is_maximum_length(self, max: int, message: str | None = None) -> FieldChain:  # noqa: A002
        rules.check_length_bounds("is_maximum_length", max=max)
        return self._apply(
            "is_maximum_length",
            lambda value: rules.is_maximum_length(value, max),
            message,
            max=max,
        )

    def is_length_within(
        self,
        min: int,  # noqa: A002
        max: int,  # noqa: A002
        message: str | None = None,
    ) -> FieldChain:
        """Length in ``[min, max]``. ``min > max`` raises ``RuleArgumentError``."""
        rules.check_length_bounds("is_length_within", min=min, max=max)
        return self._apply(
            "is_length_within",
            lambda value: rules.is_length_within(value, min, max),
            message,
            min=min,
            max=max,
        )

    # -- character classes --

    def has_upper_case(self, message: str | None = None) -> FieldChain:
        return self._apply("has_upper_case", rules.has_upper_case, message)

    def has_lower_case(self, message: str | None = None) -> FieldChain:
        return self._apply("has_lower_case", rules.has_lower_case, message)

    def has_number(self, message: str | None = None) -> FieldChain:
        return self._apply("has_number", rules.has_number, message)
