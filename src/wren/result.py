"""Validation result — immutable snapshot of a finished session."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """The outcome of a validation session.

    ``is_valid`` is True when there are no errors.
    The result is falsy when invalid, so you can write::

        result = session.result()
        if not result:
            return render_form(form, errors=result.errors)

    ``data`` holds the string value of every checked field that was present
    and did not fail.

    ``errors`` maps field names to their single error message, in the order
    the errors were first recorded::

        {"title": "This field is required",
         "email": "Must be a valid email address"}
    """

    data: dict[str, str]
    errors: dict[str, str]

    @property
    def is_valid(self) -> bool:
        """True if validation passed with no errors."""
        return not self.errors

    def __bool__(self) -> bool:
        """Falsy when invalid, for the ``if not result:`` pattern."""
        return self.is_valid
