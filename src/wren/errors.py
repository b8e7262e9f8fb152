"""Wren exception hierarchy.

Only programmer errors are raised. Bad input data is never an exception:
it is recorded as a message in the session's error map.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when a ``ValidatorConfig`` is built with invalid settings."""


class RuleArgumentError(WrenError, ValueError):
    """Raised when a rule is called with malformed arguments.

    Signals a bug in the calling code (e.g. ``min > max`` in
    ``is_length_within``), so it is raised immediately, whatever the
    state of the chain.
    """

    def __init__(self, rule: str, detail: str) -> None:
        self.rule = rule
        self.detail = detail
        super().__init__(f"{rule}: {detail}")
