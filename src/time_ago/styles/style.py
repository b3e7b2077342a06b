"""Style model: which labels, which scale, which units."""

import logging
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from time_ago.gradation import CONVENIENT, SCALES, Step
from time_ago.types import FunctionOverride, StyleOverride

logger = logging.getLogger(__name__)

__all__ = ["Style"]


class Style(BaseModel):
    """Relative time formatting style.

    Attributes:
        flavour: Label flavours to try in order ("mini-time", "short", ...).
            "long" is always tried last.
        gradation: Scale definition, or the name of a built-in scale
            ("canonical", "convenient").
        units: Allowed units. None allows every unit of the locale data.
        custom: Override that may format the value itself before any
            unit selection happens.

    Example:
        >>> style = Style(flavour="short", gradation="canonical", units=["minute", "hour"])
        >>> style.flavour
        ('short',)

    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True, extra="forbid")

    flavour: tuple[str, ...] = ()
    gradation: tuple[Step, ...] = CONVENIENT
    units: tuple[str, ...] | None = None
    custom: StyleOverride | None = None

    @field_validator("flavour", mode="before")
    @classmethod
    def coerce_flavour(cls, v: Any) -> Any:
        """A single flavour name is a one-item preference list."""
        if v is None:
            return ()
        if isinstance(v, str):
            return (v,)
        return v

    @field_validator("gradation", mode="before")
    @classmethod
    def resolve_scale_name(cls, v: Any) -> Any:
        """Look up built-in scales by name."""
        if isinstance(v, str):
            if v not in SCALES:
                raise ValueError(f"Unknown gradation {v!r}, expected one of {sorted(SCALES)}")
            return SCALES[v]
        return v

    @field_validator("custom", mode="before")
    @classmethod
    def wrap_callable_override(cls, v: Any) -> Any:
        """Plain functions become FunctionOverride strategies."""
        if v is not None and not hasattr(v, "attempt_format") and callable(v):
            return FunctionOverride(v)
        return v

    @model_validator(mode="after")
    def validate_thresholds(self) -> Self:
        """Every step but the first needs some way to derive its threshold."""
        if not self.gradation:
            raise ValueError("Style gradation must have at least one step")
        for step in self.gradation[1:]:
            if not step.has_threshold:
                raise ValueError(
                    f"Each step of a gradation must have a threshold defined "
                    f"except for the first one. Step: {step!r}"
                )
        return self
