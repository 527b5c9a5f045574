"""
Tests for grade scale mapping and the UG/PG blend.
"""

import math

import pytest

from readiness.logic.constants import PGClass, UGClass
from readiness.logic.contracts import PercentRecord, PGClassRecord, UGClassRecord
from readiness.logic.scale_mappers import (
    class_to_score,
    clamp,
    combine_grades,
    percent_to_score,
    record_to_score,
)


# =============================================================================
# PERCENT MAPPING
# =============================================================================

@pytest.mark.parametrize("percent", [0, 10, 35.5, 49.99, 50])
def test_percent_at_or_below_50_is_flat_5(percent):
    assert percent_to_score(percent) == 5


@pytest.mark.parametrize("percent,expected", [
    (55, 6.0),
    (60, 7.0),
    (65, 8.0),
    (70, 9.0),
    (77.5, 9.5),
    (85, 10.0),
])
def test_percent_breakpoints_and_interpolation(percent, expected):
    assert percent_to_score(percent) == pytest.approx(expected)


@pytest.mark.parametrize("percent", [85, 90, 100])
def test_percent_at_or_above_85_is_flat_10(percent):
    assert percent_to_score(percent) == 10


def test_percent_strictly_increasing_between_50_and_60():
    scores = [percent_to_score(50 + step) for step in range(11)]
    assert scores[0] == pytest.approx(5.0)
    assert scores[-1] == pytest.approx(7.0)
    assert all(a < b for a, b in zip(scores, scores[1:]))


def test_percent_absent_or_nan_is_undefined():
    assert percent_to_score(None) is None
    assert percent_to_score(math.nan) is None


# =============================================================================
# CLASS MAPPING
# =============================================================================

@pytest.mark.parametrize("grade_class,expected", [
    (UGClass.FIRST, 9.2),
    (UGClass.UPPER, 8.0),
    (UGClass.LOWER, 6.5),
    (UGClass.THIRD, 5.0),
    (UGClass.OTHER, 4.5),
    (PGClass.DISTINCTION, 9.0),
    (PGClass.MERIT, 8.0),
    (PGClass.PASS, 6.5),
    (PGClass.OTHER, 5.0),
])
def test_class_lookup(grade_class, expected):
    assert class_to_score(grade_class) == expected


def test_other_class_differs_by_level():
    # "other" is a separate id per level, not a shared key
    assert class_to_score(UGClass.OTHER) != class_to_score(PGClass.OTHER)


def test_record_to_score_uses_authoritative_branch():
    assert record_to_score(UGClassRecord(grade_class="first")) == 9.2
    assert record_to_score(PGClassRecord(grade_class="merit")) == 8.0
    assert record_to_score(PercentRecord(percent=70)) == pytest.approx(9.0)
    assert record_to_score(UGClassRecord()) is None
    assert record_to_score(PercentRecord()) is None


# =============================================================================
# COMBINATION
# =============================================================================

def test_combine_both_grades():
    assert combine_grades(9.2, 9.0) == pytest.approx(9.08)


def test_combine_single_grade_is_not_averaged_with_zero():
    assert combine_grades(8.0, None) == 8.0
    assert combine_grades(None, 6.5) == 6.5


def test_combine_no_grades_is_zero():
    assert combine_grades(None, None) == 0.0


def test_clamp_bounds():
    assert clamp(-1) == 0.0
    assert clamp(11) == 10.0
    assert clamp(2.5, -1.2, 1.2) == 1.2
