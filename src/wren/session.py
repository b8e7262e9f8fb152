"""ValidationSession — one validation pass over one input bag.

The session owns the input, the error map and the configuration, and
hands out a ``FieldChain`` per ``check()`` call. It is the only writer of
the error map, and the first error recorded for a field wins for the rest
of the session.

Usage::

    session = ValidationSession(form)
    session.check("email").is_not_empty("Required").is_email("Not an email")
    session.check("nickname", optional=True).is_maximum_length(20)
    if not session:
        return render_form(form, errors=session.errors)

A session is not safe for concurrent ``check()`` calls; validate
sequentially from one caller.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from wren._internal.types import InputBag
from wren.chain import MISSING, ChainState, FieldChain
from wren.config import ValidatorConfig
from wren.result import ValidationResult

logger = logging.getLogger("wren.session")


def coerce(value: object) -> str:
    """String form of a raw input value.

    ``None`` and ``False`` become ``""`` and ``True`` becomes ``"1"``, the
    way a checked checkbox posts. A list or tuple (multi-value query
    parsing) contributes its first item.
    """
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    return str(value)


class ValidationSession:
    """Validation state for one input bag."""

    __slots__ = ("_checked", "_config", "_data", "_errors")

    def __init__(self, data: InputBag, config: ValidatorConfig | None = None) -> None:
        self._data = data
        self._config = config or ValidatorConfig()
        self._errors: dict[str, str] = {}
        # field -> coerced value, for every present field passed to check()
        self._checked: dict[str, str] = {}

    @property
    def config(self) -> ValidatorConfig:
        return self._config

    def has(self, field: str) -> bool:
        """True if *field* is a key of the input, whatever its value."""
        return field in self._data

    def check(
        self,
        field: str,
        options: Mapping[str, object] | None = None,
        **extra: object,
    ) -> FieldChain:
        """Start a rule chain for *field*.

        Options come from *options* and/or keywords. ``optional`` (default
        False) makes an absent field a no-op instead of an error. Unknown
        options are ignored.

        A required field that is absent gets ``config.missing_message``
        logged right away, and the returned chain records nothing further.
        """
        opts = {**(options or {}), **extra}

        if not self.has(field):
            if opts.get("optional", False):
                logger.debug("%s absent and optional, chain dormant", field)
                return FieldChain(self, field, MISSING, ChainState.DORMANT)
            self.log_error(field, self._config.missing_message)
            return FieldChain(self, field, MISSING, ChainState.TRIPPED)

        value = coerce(self._data[field])
        self._checked[field] = value
        return FieldChain(self, field, value)

    def log_error(self, field: str, message: str) -> bool:
        """Record *message* for *field* unless it already has one.

        Returns True if the message was recorded.
        """
        if field in self._errors:
            logger.debug("%s already has an error, ignoring %r", field, message)
            return False
        self._errors[field] = message
        logger.debug("%s: %s", field, message)
        return True

    @property
    def is_valid(self) -> bool:
        """True if no error has been recorded."""
        return not self._errors

    def __bool__(self) -> bool:
        """Falsy when invalid, so ``if not session:`` reads naturally."""
        return self.is_valid

    @property
    def errors(self) -> Mapping[str, str]:
        """Read-only view of field -> message, in first-error order."""
        return MappingProxyType(self._errors)

    def result(self) -> ValidationResult:
        """Freeze the current outcome into a ``ValidationResult``."""
        data = {
            field: value
            for field, value in self._checked.items()
            if field not in self._errors
        }
        return ValidationResult(data=data, errors=dict(self._errors))

    def __repr__(self) -> str:
        return f"ValidationSession(fields={len(self._data)}, errors={len(self._errors)})"
