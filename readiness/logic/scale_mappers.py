"""
Scale Mappers

Convert raw grade inputs (percentages, degree classes) into 0-10 scores and
blend the undergraduate and postgraduate results into one grade.
"""

import math
from typing import Optional, Union

from .constants import (
    PERCENT_BREAKPOINTS,
    PG_CLASS_SCORE_MAP,
    PG_GRADE_WEIGHT,
    PGClass,
    SCORE_MAX,
    SCORE_MIN,
    UG_CLASS_SCORE_MAP,
    UG_GRADE_WEIGHT,
    UGClass,
)
from .contracts import PercentRecord


def clamp(value: float, low: float = SCORE_MIN, high: float = SCORE_MAX) -> float:
    return min(high, max(low, value))


def percent_to_score(percent: Optional[float]) -> Optional[float]:
    """
    Map a percentage average onto the 0-10 scale.

    Piecewise linear through (50, 5), (60, 7), (70, 9), (85, 10); flat at 5
    below 50 and at 10 above 85. Returns None for absent or NaN input.
    """
    if percent is None or math.isnan(percent):
        return None

    first_pct, first_score = PERCENT_BREAKPOINTS[0]
    if percent <= first_pct:
        return first_score

    for (low_pct, low_score), (high_pct, high_score) in zip(
        PERCENT_BREAKPOINTS, PERCENT_BREAKPOINTS[1:]
    ):
        if percent <= high_pct:
            slope = (high_score - low_score) / (high_pct - low_pct)
            return low_score + slope * (percent - low_pct)

    return PERCENT_BREAKPOINTS[-1][1]


def class_to_score(grade_class: Optional[Union[UGClass, PGClass]]) -> Optional[float]:
    """Look up a degree classification; the level is implied by the enum type."""
    if grade_class is None:
        return None
    if isinstance(grade_class, UGClass):
        return UG_CLASS_SCORE_MAP[grade_class]
    return PG_CLASS_SCORE_MAP[grade_class]


def record_to_score(record) -> Optional[float]:
    """Score whichever branch of a grade record is authoritative."""
    if isinstance(record, PercentRecord):
        return percent_to_score(record.percent)
    return class_to_score(record.grade_class)


def combine_grades(
    undergraduate: Optional[float],
    postgraduate: Optional[float]
) -> float:
    """
    Blend UG and PG scores (40/60). An absent side is excluded rather than
    counted as zero; with neither present the grade is 0.
    """
    if undergraduate is not None and postgraduate is not None:
        return clamp(UG_GRADE_WEIGHT * undergraduate + PG_GRADE_WEIGHT * postgraduate)
    if undergraduate is not None:
        return clamp(undergraduate)
    if postgraduate is not None:
        return clamp(postgraduate)
    return 0.0
