"""Gradation step model."""

import logging
from collections.abc import Callable
from typing import Any, Self

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from time_ago.types import FunctionStepFormatter, StepFormatter
from time_ago.units import NOW

logger = logging.getLogger(__name__)

__all__ = ["Step", "Threshold", "ThresholdFunction"]

# Thresholds may depend on the current instant (e.g. "the start of this
# year"). Called as threshold(now_ms, future).
ThresholdFunction = Callable[[float, bool], float]
Threshold = float | ThresholdFunction

THRESHOLD_FOR_PREFIX = "threshold_for_"


class Step(BaseModel):
    """One entry of a gradation (time scale).

    Attributes:
        unit: Time unit this step formats in ("minute", "half-hour", ...).
            None for steps that only render through `formatter`.
        divisor: Seconds per unit (e.g. 60 for "minute"). Also accepted as
            ``factor``. Absent for "now" and formatter-only steps.
        threshold: Minimum elapsed seconds for this step to apply. May be a
            function of ``(now_ms, future)``.
        threshold_for: Per-previous-unit threshold overrides. Flat
            ``threshold_for_<unit>`` keys are folded into this mapping.
        granularity: Step size for the unit amount (e.g. 5 for "0, 5, 10
            minutes").
        formatter: Replaces locale template substitution for this step.

    Example:
        >>> step = Step(unit="minute", factor=60, threshold=45)
        >>> step.divisor
        60.0

    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
        populate_by_name=True,
        extra="forbid",
    )

    unit: str | None = None
    divisor: float | None = Field(
        default=None,
        gt=0,
        validation_alias=AliasChoices("divisor", "factor"),
    )
    threshold: float | ThresholdFunction | None = None
    threshold_for: dict[str, float | ThresholdFunction] = Field(default_factory=dict)
    granularity: float | None = Field(default=None, gt=0)
    formatter: StepFormatter | None = None

    @model_validator(mode="before")
    @classmethod
    def collect_threshold_overrides(cls, data: Any) -> Any:
        """Fold flat ``threshold_for_<unit>`` keys into `threshold_for`."""
        if not isinstance(data, dict):
            return data
        flat = {key: value for key, value in data.items() if key.startswith(THRESHOLD_FOR_PREFIX)}
        if not flat:
            return data
        data = {key: value for key, value in data.items() if key not in flat}
        overrides = dict(data.get("threshold_for") or {})
        for key, value in flat.items():
            overrides[key[len(THRESHOLD_FOR_PREFIX) :]] = value
        data["threshold_for"] = overrides
        return data

    @field_validator("formatter", mode="before")
    @classmethod
    def wrap_callable_formatter(cls, v: Any) -> Any:
        """Plain functions become FunctionStepFormatter strategies."""
        if v is not None and not hasattr(v, "attempt_format") and callable(v):
            return FunctionStepFormatter(v)
        return v

    @model_validator(mode="after")
    def validate_step(self) -> Self:
        """A step must be renderable, and units other than "now" need a divisor."""
        if self.unit is None and self.formatter is None:
            raise ValueError("Step must define a unit or a formatter")
        if self.granularity is not None and self.divisor is None:
            raise ValueError(f"Step {self.unit!r} has a granularity but no divisor")
        # Without a divisor the amount would be raw seconds ("120 minutes").
        if self.unit is not None and self.unit != NOW and self.divisor is None:
            raise ValueError(f"Step {self.unit!r} has no divisor")
        return self

    @property
    def has_threshold(self) -> bool:
        """Whether any entry threshold can be derived for this step."""
        return self.threshold is not None or bool(self.threshold_for) or self.divisor is not None
