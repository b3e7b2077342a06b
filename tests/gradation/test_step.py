"""Tests for the Step model and built-in scales."""

import pytest
from pydantic import ValidationError

from time_ago.gradation import CANONICAL, CONVENIENT, SCALES, Step, get_step
from time_ago.types import FunctionStepFormatter
from time_ago.units import HOUR, MINUTE


class TestStep:
    """Test Step validation."""

    def test_factor_alias_for_divisor(self) -> None:
        """"factor" is accepted as the divisor."""
        assert Step(unit="minute", factor=60).divisor == 60
        assert Step(unit="minute", divisor=60).divisor == 60

    def test_flat_threshold_for_keys(self) -> None:
        """threshold_for_<unit> keys are folded into threshold_for."""
        step = Step.model_validate(
            {"unit": "hour", "factor": 3600, "threshold": 2550, "threshold_for_minute": 3150}
        )
        assert step.threshold_for == {"minute": 3150}

    def test_flat_and_nested_threshold_for_merge(self) -> None:
        """Flat keys merge with an explicit threshold_for mapping."""
        step = Step.model_validate(
            {"unit": "second", "divisor": 1, "threshold_for": {"now": 45}, "threshold_for_day": 2}
        )
        assert step.threshold_for == {"now": 45, "day": 2}

    def test_requires_unit_or_formatter(self) -> None:
        """A step with neither unit nor formatter is rejected."""
        with pytest.raises(ValidationError, match="unit or a formatter"):
            Step(threshold=10)

    def test_granularity_requires_divisor(self) -> None:
        """Granularity without divisor is rejected."""
        with pytest.raises(ValidationError, match="no divisor"):
            Step(unit="minute", granularity=5)

    def test_unit_requires_divisor(self) -> None:
        """A time unit without divisor would count raw seconds."""
        with pytest.raises(ValidationError, match="'minute' has no divisor"):
            Step(unit="minute", threshold=60)
        with pytest.raises(ValidationError, match="no divisor"):
            Step(unit="minute", threshold=60, formatter=lambda value, locale: None)

    def test_now_and_formatter_steps_need_no_divisor(self) -> None:
        """Only "now" and formatter-only steps may omit the divisor."""
        assert Step(unit="now").divisor is None
        assert Step(threshold=10, formatter=lambda value, locale: "x").divisor is None

    def test_divisor_must_be_positive(self) -> None:
        """Zero or negative divisors are rejected."""
        with pytest.raises(ValidationError):
            Step(unit="minute", divisor=0)

    def test_unknown_fields_rejected(self) -> None:
        """Typos in step fields fail loudly."""
        with pytest.raises(ValidationError):
            Step.model_validate({"unit": "minute", "divisr": 60})

    def test_callable_formatter_wrapped(self) -> None:
        """Plain functions are wrapped into step formatters."""
        step = Step(formatter=lambda value, locale: f"{locale}:{value}", threshold=1)
        assert isinstance(step.formatter, FunctionStepFormatter)
        assert step.formatter.attempt_format(5, "en") == "en:5"

    def test_has_threshold(self) -> None:
        """A threshold can come from threshold, threshold_for or divisor."""
        assert Step(unit="minute", divisor=60).has_threshold
        assert Step(formatter=lambda v, l: None, threshold=3).has_threshold
        assert not Step(formatter=lambda v, l: None).has_threshold

    def test_frozen(self) -> None:
        """Steps are immutable."""
        step = Step(unit="minute", divisor=60)
        with pytest.raises(ValidationError):
            step.divisor = 30


class TestScales:
    """Test built-in scales."""

    def test_scale_registry(self) -> None:
        """Both built-in scales are registered by name."""
        assert SCALES == {"canonical": CANONICAL, "convenient": CONVENIENT}

    @pytest.mark.parametrize("scale", [CANONICAL, CONVENIENT])
    def test_thresholds_ascend(self, scale: tuple[Step, ...]) -> None:
        """Steps are ordered by ascending threshold."""
        thresholds = [step.threshold or 0 for step in scale]
        assert thresholds == sorted(thresholds)

    def test_get_step(self) -> None:
        """get_step returns the first step for a unit."""
        assert get_step(CANONICAL, "hour").threshold == 59.5 * MINUTE
        assert get_step(CONVENIENT, "minute").granularity is None
        assert get_step(CONVENIENT, "hour").threshold_for == {"minute": 52.5 * MINUTE}
        assert get_step(CANONICAL, "hour").divisor == HOUR

    def test_get_step_missing_unit(self) -> None:
        """Missing units raise KeyError."""
        with pytest.raises(KeyError):
            get_step(CANONICAL, "half-hour")
