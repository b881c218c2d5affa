"""Unit tests for Deadline and the timeout policies."""

from __future__ import annotations

import math
from fractions import Fraction

import pytest

from mp_deadline.config.validation import ConfigError, InvalidDeadlineError, InvalidSettingValueError
from mp_deadline.kernel.errors import TimeoutError as AppTimeoutError
from mp_deadline.resilience.timeouts import (
    DEFAULT_MESSAGE_TEMPLATE,
    UNBOUNDED,
    Deadline,
    DefaultTimeout,
    FallbackTimeout,
    RaiseTimeout,
    resolve_policy,
)


# ---------------------------------------------------------------------------
# Deadline
# ---------------------------------------------------------------------------


class TestDeadline:
    def test_keeps_number_as_given(self) -> None:
        assert Deadline(200).milliseconds == 200
        assert isinstance(Deadline(200).milliseconds, int)

    def test_zero_is_valid(self) -> None:
        assert Deadline(0).seconds == 0.0

    def test_seconds(self) -> None:
        assert Deadline(1500).seconds == 1.5

    def test_accepts_other_real_numbers(self) -> None:
        assert Deadline(Fraction(25, 2)).seconds == 0.0125

    def test_unbounded(self) -> None:
        assert Deadline.unbounded().is_unbounded
        assert Deadline(UNBOUNDED).milliseconds == math.inf
        assert not Deadline(10).is_unbounded

    def test_integer_past_float_range_is_unbounded(self) -> None:
        d = Deadline(10**400)
        assert d.is_unbounded
        assert d.milliseconds == 10**400
        assert d.seconds == math.inf

    def test_fraction_past_float_range_is_unbounded(self) -> None:
        assert Deadline(Fraction(10**400, 3)).is_unbounded

    def test_large_negative_integer_rejected(self) -> None:
        with pytest.raises(InvalidDeadlineError, match="must not be negative"):
            Deadline(-(10**400))

    def test_of_passes_instances_through(self) -> None:
        d = Deadline(10)
        assert Deadline.of(d) is d
        assert Deadline.of(10) == d

    @pytest.mark.parametrize("value", [-1, -0.001, -math.inf])
    def test_negative_rejected(self, value: float) -> None:
        with pytest.raises(InvalidDeadlineError, match="must not be negative"):
            Deadline(value)

    @pytest.mark.parametrize("value", ["100", None, True, False, [100], object()])
    def test_non_numeric_rejected(self, value: object) -> None:
        with pytest.raises(InvalidDeadlineError, match="expected a number"):
            Deadline(value)

    def test_nan_rejected(self) -> None:
        with pytest.raises(InvalidDeadlineError, match="NaN"):
            Deadline(math.nan)

    def test_frozen(self) -> None:
        d = Deadline(10)
        with pytest.raises((AttributeError, TypeError)):
            d.milliseconds = 20  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Policies
# ---------------------------------------------------------------------------


class TestDefaultTimeout:
    def test_default_message(self) -> None:
        err = DefaultTimeout().build_error(Deadline(50))
        assert isinstance(err, AppTimeoutError)
        assert err.message == "Promise timed out after 50 milliseconds"
        assert err.milliseconds == 50

    def test_fractional_milliseconds_render_as_given(self) -> None:
        err = DefaultTimeout().build_error(Deadline(0.5))
        assert str(err) == "Promise timed out after 0.5 milliseconds"

    def test_custom_template(self) -> None:
        err = DefaultTimeout("gave up after {milliseconds}ms").build_error(Deadline(75))
        assert str(err) == "gave up after 75ms"

    def test_builds_fresh_error_each_time(self) -> None:
        policy = DefaultTimeout()
        assert policy.build_error(Deadline(1)) is not policy.build_error(Deadline(1))


class TestRaiseTimeout:
    def test_message_wrapped_in_timeout_error(self) -> None:
        err = RaiseTimeout("inventory lookup timed out").build_error(Deadline(10))
        assert isinstance(err, AppTimeoutError)
        assert err.message == "inventory lookup timed out"

    def test_exception_used_verbatim(self) -> None:
        supplied = LookupError("no stock")
        assert RaiseTimeout(supplied).build_error(Deadline(10)) is supplied

    def test_rejects_other_types(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            RaiseTimeout(42)  # type: ignore[arg-type]

    def test_rejects_exception_class(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            RaiseTimeout(LookupError)  # type: ignore[arg-type]


class TestFallbackTimeout:
    def test_accepts_callable(self) -> None:
        policy = FallbackTimeout(lambda: "cached")
        assert policy.producer() == "cached"

    def test_rejects_non_callable(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            FallbackTimeout("cached")  # type: ignore[arg-type]


class TestResolvePolicy:
    def test_default(self) -> None:
        assert resolve_policy() == DefaultTimeout(DEFAULT_MESSAGE_TEMPLATE)

    def test_default_uses_template(self) -> None:
        assert resolve_policy(template="late {milliseconds}") == DefaultTimeout("late {milliseconds}")

    def test_message(self) -> None:
        assert resolve_policy(message="late") == RaiseTimeout("late")

    def test_fallback(self) -> None:
        producer = lambda: 1  # noqa: E731
        assert resolve_policy(fallback=producer) == FallbackTimeout(producer)

    def test_explicit_policy_passes_through(self) -> None:
        policy = RaiseTimeout("late")
        assert resolve_policy(policy) is policy

    def test_more_than_one_rejected(self) -> None:
        with pytest.raises(ConfigError, match="message, fallback"):
            resolve_policy(message="late", fallback=lambda: 1)

    def test_unknown_policy_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            resolve_policy("late")  # type: ignore[arg-type]


class TestPublicReExports:
    def test_all_symbols_importable(self) -> None:
        import importlib

        for module in ("mp_deadline", "mp_deadline.resilience", "mp_deadline.resilience.timeouts"):
            mod = importlib.import_module(module)
            for name in mod.__all__:
                assert hasattr(mod, name), f"{module}.{name!r} missing"

    def test_timeouts_surface(self) -> None:
        import mp_deadline.resilience.timeouts as timeouts

        assert set(timeouts.__all__) == {
            "Cancelable",
            "DEFAULT_MESSAGE_TEMPLATE",
            "Deadline",
            "DeadlineRacer",
            "DefaultTimeout",
            "FallbackTimeout",
            "RaceSettings",
            "RaiseTimeout",
            "TimeoutPolicy",
            "UNBOUNDED",
            "race",
            "resolve_policy",
            "timeout",
        }
