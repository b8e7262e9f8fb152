"""Wren — chained, per-field string validation for form input.

Declare a chain of rules per field; the first failing rule in a chain
records the field's single error message.

Basic usage::

    from wren import ValidationSession

    session = ValidationSession({"email": "martyn@yahoo.com", "password": "abc"})
    session.check("email").is_not_empty("Required").is_email("Not an email")
    session.check("password").is_minimum_length(8, "Too short").has_number("Add a digit")
    session.check("age", optional=True).is_positive_number()

    session.is_valid  # False
    session.errors    # {"password": "Too short"}

Standalone predicates live in ``wren.rules``::

    from wren.rules import is_date
    is_date("2021-02-30")  # False
"""

__version__ = "0.1.0"
__all__ = [
    "MISSING",
    "ChainState",
    "ConfigurationError",
    "FieldChain",
    "RuleArgumentError",
    "ValidationResult",
    "ValidationSession",
    "ValidatorConfig",
    "WrenError",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    if name == "ValidationSession":
        from wren.session import ValidationSession

        return ValidationSession

    if name in ("FieldChain", "ChainState", "MISSING"):
        from wren import chain as _chain

        return getattr(_chain, name)

    if name == "ValidationResult":
        from wren.result import ValidationResult

        return ValidationResult

    if name == "ValidatorConfig":
        from wren.config import ValidatorConfig

        return ValidatorConfig

    if name in ("WrenError", "ConfigurationError", "RuleArgumentError"):
        from wren import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
