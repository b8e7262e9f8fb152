"""Tests for wren.chain — FieldChain state machine and rule methods."""

import pytest

from wren.chain import MISSING, ChainState, FieldChain
from wren.config import ValidatorConfig
from wren.errors import RuleArgumentError
from wren.session import ValidationSession


def _chain(value: str, field: str = "name") -> tuple[ValidationSession, FieldChain]:
    session = ValidationSession({field: value})
    return session, session.check(field)


# ---------------------------------------------------------------------------
# State machine
# ---------------------------------------------------------------------------


class TestChainState:
    def test_present_field_starts_active(self) -> None:
        _, chain = _chain("alice")
        assert chain.state is ChainState.ACTIVE
        assert chain.active is True
        assert chain.value == "alice"
        assert chain.field == "name"

    def test_pass_keeps_active(self) -> None:
        _, chain = _chain("alice")
        chain.is_not_empty().is_letters().is_maximum_length(10)
        assert chain.state is ChainState.ACTIVE

    def test_failure_trips(self) -> None:
        _, chain = _chain("")
        chain.is_not_empty("required")
        assert chain.state is ChainState.TRIPPED
        assert chain.active is False

    def test_tripped_never_returns_to_active(self) -> None:
        _, chain = _chain("abc")
        chain.has_upper_case().has_lower_case().has_number()
        assert chain.state is ChainState.TRIPPED

    def test_rules_return_the_chain(self) -> None:
        _, chain = _chain("alice")
        assert chain.is_not_empty() is chain
        assert chain.is_email() is chain
        assert chain.is_not_empty() is chain  # tripped chains too

    def test_dormant_chain_ignores_every_rule(self) -> None:
        session = ValidationSession({})
        chain = session.check("age", optional=True)
        (
            chain.is_not_empty()
            .is_empty()
            .is_email()
            .is_letters()
            .is_numeric()
            .is_positive_number()
            .is_not_positive_number()
            .is_negative_number()
            .is_not_negative_number()
            .is_date_time()
            .is_date()
            .is_time()
            .is_minimum_length(3)
            .is_maximum_length(1)
            .is_length_within(2, 3)
            .has_upper_case()
            .has_lower_case()
            .has_number()
            .matches(r"\d+")
            .satisfies(lambda value: False)
        )
        assert chain.state is ChainState.DORMANT
        assert chain.value is MISSING
        assert session.is_valid

    def test_repr(self) -> None:
        _, chain = _chain("alice")
        assert repr(chain) == "FieldChain('name', 'alice', ACTIVE)"

    def test_missing_sentinel(self) -> None:
        assert repr(MISSING) == "MISSING"
        assert str(MISSING) == ""


# ---------------------------------------------------------------------------
# Short-circuit
# ---------------------------------------------------------------------------


class TestShortCircuit:
    def test_first_failure_wins(self) -> None:
        session, chain = _chain("abc", field="password")
        chain.is_minimum_length(8, "short").has_number("need digit")
        assert session.errors == {"password": "short"}

    def test_checking_stops_when_error_found(self) -> None:
        session, chain = _chain("", field="email")
        chain.is_not_empty("Value is empty").is_email("Value is not valid email")
        assert session.errors["email"] == "Value is empty"

    def test_later_failure_after_passes(self) -> None:
        session, chain = _chain("12345678901234", field="password")
        chain.is_minimum_length(4).is_maximum_length(8)
        assert session.errors == {"password": "Must be at most 8 characters"}


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------


class TestMessages:
    def test_custom_message(self) -> None:
        session, chain = _chain("")
        chain.is_not_empty("Please enter your name")
        assert session.errors["name"] == "Please enter your name"

    def test_default_message(self) -> None:
        session, chain = _chain("nope")
        chain.is_email()
        assert session.errors["name"] == "Must be a valid email address"

    def test_default_message_formats_parameters(self) -> None:
        session, chain = _chain("a")
        chain.is_length_within(2, 4)
        assert session.errors["name"] == "Must be between 2 and 4 characters"

    def test_default_from_config(self) -> None:
        config = ValidatorConfig().with_messages(has_number="Add a digit")
        session = ValidationSession({"password": "abc"}, config)
        session.check("password").has_number()
        assert session.errors["password"] == "Add a digit"

    def test_matches_default_message_names_pattern(self) -> None:
        session, chain = _chain("abc")
        chain.matches(r"\d+")
        assert session.errors["name"] == r"Must match pattern: \d+"


# ---------------------------------------------------------------------------
# Individual rule methods
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("rule", "args", "passing", "failing"),
    [
        ("is_empty", (), "  ", "something"),
        ("is_not_empty", (), "0", "   "),
        ("is_email", (), "martyn@yahoo.com", "martyn@yahoo"),
        ("is_letters", (), "Martyn Bissett", "Martyn99"),
        ("is_numeric", (), "3.14", "-3"),
        ("is_positive_number", (), "12", "012"),
        ("is_not_positive_number", (), "-12", "12"),
        ("is_negative_number", (), "-12", "12"),
        ("is_not_negative_number", (), "0", "-12"),
        ("is_date_time", (), "2020-02-29 12:00:00", "2021-02-29 12:00:00"),
        ("is_date", (), "2020-02-29", "2021-02-29"),
        ("is_time", (), "23:59:59", "23:59"),
        ("is_minimum_length", (8,), "12345678", "1234567"),
        ("is_maximum_length", (8,), "12345678", "123456789"),
        ("is_length_within", (2, 3), "ab", "abcd"),
        ("has_upper_case", (), "Abc", "abc"),
        ("has_lower_case", (), "aBC", "ABC"),
        ("has_number", (), "1bc", "abc"),
        ("matches", (r"[a-z]+",), "abc", "abc1"),
    ],
)
def test_rule_method(rule: str, args: tuple[object, ...], passing: str, failing: str) -> None:
    session, chain = _chain(passing)
    getattr(chain, rule)(*args, "bad")
    assert session.is_valid, f"{rule} rejected {passing!r}"

    session, chain = _chain(failing)
    getattr(chain, rule)(*args, "bad")
    assert session.errors == {"name": "bad"}, f"{rule} accepted {failing!r}"


class TestSatisfies:
    def test_predicate_pass(self) -> None:
        session, chain = _chain("alice")
        chain.satisfies(lambda value: value.islower(), "lower case only")
        assert session.is_valid

    def test_predicate_fail(self) -> None:
        session, chain = _chain("Alice")
        chain.satisfies(lambda value: value.islower(), "lower case only")
        assert session.errors == {"name": "lower case only"}

    def test_not_callable(self) -> None:
        _, chain = _chain("alice")
        with pytest.raises(RuleArgumentError, match="callable"):
            chain.satisfies("islower")  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Malformed rule arguments fail fast
# ---------------------------------------------------------------------------


class TestLengthBounds:
    @pytest.mark.parametrize("value", ["ab", "abcd"])
    def test_within_is_inclusive(self, value: str) -> None:
        session, chain = _chain(value)
        chain.is_length_within(2, 4, "bad length")
        assert session.is_valid
        assert chain.active is True

    @pytest.mark.parametrize("value", ["a", "abcde"])
    def test_just_outside_fails(self, value: str) -> None:
        session, chain = _chain(value)
        chain.is_length_within(2, 4, "bad length")
        assert session.errors == {"name": "bad length"}

    def test_equal_bounds(self) -> None:
        session, chain = _chain("abc")
        chain.is_length_within(3, 3)
        assert session.is_valid


class TestRuleArguments:
    def test_min_greater_than_max(self) -> None:
        _, chain = _chain("abc")
        with pytest.raises(RuleArgumentError, match="is_length_within"):
            chain.is_length_within(5, 2)

    def test_raised_on_tripped_chain(self) -> None:
        _, chain = _chain("")
        chain.is_not_empty()
        with pytest.raises(RuleArgumentError):
            chain.is_length_within(5, 2)

    def test_raised_on_dormant_chain(self) -> None:
        chain = ValidationSession({}).check("bio", optional=True)
        with pytest.raises(RuleArgumentError):
            chain.is_maximum_length(-1)

    def test_invalid_pattern(self) -> None:
        _, chain = _chain("abc")
        with pytest.raises(RuleArgumentError, match="invalid pattern"):
            chain.matches("[unclosed")

    def test_no_error_recorded(self) -> None:
        session, chain = _chain("abc")
        with pytest.raises(RuleArgumentError):
            chain.is_minimum_length("8")  # type: ignore[arg-type]
        assert session.is_valid
        assert chain.active is True
