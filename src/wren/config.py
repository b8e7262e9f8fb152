"""Validator configuration.

ValidatorConfig is a frozen dataclass, immutable after creation and shared
safely between sessions.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from string import Formatter
from types import MappingProxyType

from wren.errors import ConfigurationError

# Default message per rule. Parameterized rules are formatted with their
# arguments, e.g. "{min}" for is_minimum_length.
DEFAULT_MESSAGES: Mapping[str, str] = MappingProxyType(
    {
        "is_empty": "Must be empty",
        "is_not_empty": "This field is required",
        "is_email": "Must be a valid email address",
        "is_letters": "Must contain letters only",
        "is_numeric": "Must be a number",
        "is_positive_number": "Must be a positive whole number",
        "is_not_positive_number": "Must not be a positive whole number",
        "is_negative_number": "Must be a negative whole number",
        "is_not_negative_number": "Must not be a negative whole number",
        "is_date_time": "Must be a date and time (YYYY-MM-DD HH:MM:SS)",
        "is_date": "Must be a date (YYYY-MM-DD)",
        "is_time": "Must be a time (HH:MM:SS)",
        "is_minimum_length": "Must be at least {min} characters",
        "is_maximum_length": "Must be at most {max} characters",
        "is_length_within": "Must be between {min} and {max} characters",
        "has_upper_case": "Must contain an upper case letter",
        "has_lower_case": "Must contain a lower case letter",
        "has_number": "Must contain a number",
        "matches": "Must match pattern: {pattern}",
        "satisfies": "Invalid value",
    }
)

# Placeholders each rule can fill in its message; literal braces are "{{" and "}}"
RULE_PARAMS: Mapping[str, frozenset[str]] = MappingProxyType(
    {
        "is_minimum_length": frozenset({"min"}),
        "is_maximum_length": frozenset({"max"}),
        "is_length_within": frozenset({"min", "max"}),
        "matches": frozenset({"pattern"}),
    }
)
_SAMPLE_PARAMS: Mapping[str, object] = {"min": 1, "max": 2, "pattern": "x"}


def _check_placeholders(rule: str, message: str) -> None:
    """Raise ``ConfigurationError`` if *message* cannot be formatted for *rule*."""
    allowed = RULE_PARAMS.get(rule, frozenset())
    try:
        parsed = list(Formatter().parse(message))
    except ValueError as exc:
        raise ConfigurationError(f"Malformed message for {rule}: {message!r} ({exc})") from exc
    for _literal, name, _spec, _conversion in parsed:
        if name is None:
            continue
        if name not in allowed:
            known = ", ".join(f"{{{p}}}" for p in sorted(allowed)) or "none"
            raise ConfigurationError(
                f"Message for {rule} uses unknown placeholder {{{name}}}; "
                f"available: {known}. Write literal braces as '{{{{' and '}}}}'."
            )
    # Bad format specs or conversions only surface when formatting
    samples = {name: _SAMPLE_PARAMS[name] for name in allowed}
    try:
        message.format(**samples)
    except (ValueError, TypeError, KeyError, IndexError) as exc:
        raise ConfigurationError(f"Malformed message for {rule}: {message!r} ({exc})") from exc


@dataclass(frozen=True, slots=True)
class ValidatorConfig:
    """Session configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ValidatorConfig(missing_message="Please fill in this field")
        config = config.with_messages(is_email="That doesn't look like an email")
    """

    # Logged by check() when a required field is absent from the input
    missing_message: str = "This field is required"

    # Fallback message per rule when the caller passes none
    messages: Mapping[str, str] = field(default_factory=lambda: DEFAULT_MESSAGES)

    def __post_init__(self) -> None:
        unknown = set(self.messages) - set(DEFAULT_MESSAGES)
        if unknown:
            names = ", ".join(sorted(unknown))
            raise ConfigurationError(f"Unknown rule name(s) in messages: {names}")
        for rule, message in self.messages.items():
            _check_placeholders(rule, message)
        merged = {**DEFAULT_MESSAGES, **self.messages}
        object.__setattr__(self, "messages", MappingProxyType(merged))

    def with_messages(self, **overrides: str) -> "ValidatorConfig":
        """Return a copy with some default rule messages replaced."""
        return replace(self, messages={**self.messages, **overrides})

    def message_for(self, rule: str, **params: object) -> str:
        """Default message for *rule*, formatted with the rule's arguments."""
        return self.messages[rule].format(**params)
