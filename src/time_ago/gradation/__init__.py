"""Gradation (time scale) definitions and step selection.

Example:
    >>> from time_ago.gradation import CANONICAL, grade
    >>> grade(3600, now=0, units=["second", "minute", "hour"], gradation=CANONICAL).unit
    'hour'

"""

from time_ago.gradation.grade import get_allowed_steps, get_threshold, grade, step_amount
from time_ago.gradation.scales import CANONICAL, CONVENIENT, SCALES, get_step
from time_ago.gradation.step import Step, Threshold, ThresholdFunction

__all__ = [
    "CANONICAL",
    "CONVENIENT",
    "SCALES",
    "Step",
    "Threshold",
    "ThresholdFunction",
    "get_allowed_steps",
    "get_step",
    "get_threshold",
    "grade",
    "step_amount",
]
