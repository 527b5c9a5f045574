"""
Tests for the five sub-score formulas and the aggregator.
"""

import pytest

from readiness.logic import aggregator, dimension_scorers
from readiness.logic.aggregator import adjustment_delta, aggregate_scores, select_weights
from readiness.logic.constants import EvaluationState, SubScore, WeightScheme
from readiness.logic.contracts import (
    AdjustmentFlags,
    ExperienceInput,
    ProposalInput,
    ReadinessInput,
    RecommendationInput,
)
from readiness.logic.dimension_scorers import (
    academic_score,
    compute_academic_breakdown,
    experience_points,
    proposal_score,
    ra_points,
    recommendation_score,
    score_academic,
    score_interview,
)


# =============================================================================
# ACADEMIC
# =============================================================================

def test_academic_formula():
    # (0.55*8 + 0.25*8 + 0.10*7 + 0) * 1.3 = 9.23
    assert academic_score(8.0, 8.0, 7.0, 0.0) == pytest.approx(9.23)


def test_academic_missing_prestige_counts_as_zero():
    assert academic_score(8.0, None, 7.0, 0.0) == pytest.approx((4.4 + 0.7) * 1.3)


def test_academic_clamped():
    assert academic_score(10.0, 10.0, 10.0, 1.2) == 10.0
    assert academic_score(0.0, None, 0.0, -1.2) == 0.0


def test_academic_breakdown_end_to_end():
    inputs = ReadinessInput(
        undergraduate_record={"method": "class", "grade_class": "first"},
        postgraduate_record={"method": "class", "grade_class": "distinction"},
        undergraduate_institution={"qs_tier": "qs_21_50"},
        postgraduate_institution={"qs_tier": "qs_top10"},
        target_institution={"qs_tier": "qs_51_100"},
        curriculum_rigor=9,
    )
    breakdown = compute_academic_breakdown(inputs)

    assert breakdown.undergraduate_score == 9.2
    assert breakdown.postgraduate_score == 9.0
    assert breakdown.combined_grade == pytest.approx(9.08)
    assert breakdown.source_prestige == pytest.approx(9.35)
    assert breakdown.target_prestige == 8.5
    assert breakdown.relative_advantage == pytest.approx(0.55)
    assert breakdown.academic_score == 10.0


def test_academic_breakdown_reset_state():
    breakdown = compute_academic_breakdown(ReadinessInput())
    assert breakdown.undergraduate_score is None
    assert breakdown.postgraduate_score is None
    assert breakdown.combined_grade == 0.0
    assert breakdown.source_prestige is None
    assert breakdown.relative_advantage == 0.0
    assert breakdown.academic_score == pytest.approx(0.91)


# =============================================================================
# PROPOSAL / RECOMMENDATION / INTERVIEW
# =============================================================================

def test_proposal_is_plain_mean():
    proposal = ProposalInput(innovation=10, feasibility=6, fit=8, writing=4)
    assert proposal_score(proposal) == pytest.approx(7.0)


def test_recommendation_is_mean_of_two():
    assert recommendation_score(RecommendationInput(letter_a=9, letter_b=6)) == pytest.approx(7.5)


def test_interview_passes_through():
    weights = select_weights(WeightScheme.DEFAULT)
    dim = score_interview(ReadinessInput(interview_score=6.5), weights)
    assert dim.score == 6.5
    assert dim.weight == 0.08
    assert dim.weighted_score == pytest.approx(0.52)


# =============================================================================
# EXPERIENCE
# =============================================================================

def test_experience_reference_case():
    experience = ExperienceInput(top_first_author=1, thesis_honor=True, ra_months=6, awards=3)
    assert experience_points(experience) == 9


def test_experience_point_values():
    experience = ExperienceInput(top_co_author=1, good_first_author=1, good_co_author=2)
    assert experience_points(experience) == 2 + 3 + 2


def test_experience_capped_at_10():
    assert experience_points(ExperienceInput(top_first_author=5)) == 10


def test_experience_empty_is_zero():
    assert experience_points(ExperienceInput()) == 0


@pytest.mark.parametrize("months,expected", [(0, 0), (2, 0), (3, 1), (5, 1), (6, 2), (24, 2)])
def test_ra_months(months, expected):
    assert ra_points(months) == expected


def test_awards_capped_at_two():
    assert experience_points(ExperienceInput(awards=1)) == 1
    assert experience_points(ExperienceInput(awards=7)) == 2


# =============================================================================
# WEIGHTS & DELTA
# =============================================================================

@pytest.mark.parametrize("scheme", list(WeightScheme))
def test_weights_sum_to_one(scheme):
    weights = select_weights(scheme)
    assert sum(weights.values()) == pytest.approx(1.0)
    assert weights[SubScore.PROPOSAL] + weights[SubScore.EXPERIENCE] == pytest.approx(0.5)
    assert weights[SubScore.ACADEMIC] == 0.30
    assert weights[SubScore.RECOMMENDATION] == 0.12
    assert weights[SubScore.INTERVIEW] == 0.08


def test_scheme_specific_weights():
    assert select_weights(WeightScheme.ENGINEERING)[SubScore.EXPERIENCE] == 0.25
    assert select_weights(WeightScheme.HUMANITIES)[SubScore.PROPOSAL] == 0.35
    assert select_weights("default")[SubScore.PROPOSAL] == 0.30


def test_select_weights_returns_copy():
    weights = select_weights(WeightScheme.DEFAULT)
    weights[SubScore.ACADEMIC] = 0.0
    assert select_weights(WeightScheme.DEFAULT)[SubScore.ACADEMIC] == 0.30


def test_supervisor_bonus_needs_strong_proposal():
    flags = AdjustmentFlags(supervisor_intent=True)
    assert adjustment_delta(flags, 7.9) == 0.0
    assert adjustment_delta(flags, 8.0) == 0.5


def test_delta_maximum():
    flags = AdjustmentFlags(external_funding=True, supervisor_intent=True)
    assert adjustment_delta(flags, 9.0) == 1.0
    assert adjustment_delta(AdjustmentFlags(external_funding=True), 0.0) == 0.5
    assert adjustment_delta(AdjustmentFlags(), 10.0) == 0.0


# =============================================================================
# AGGREGATION
# =============================================================================

def test_aggregate_reset_state():
    scored = aggregate_scores(ReadinessInput(), WeightScheme.DEFAULT)

    assert scored.state == EvaluationState.EVALUATED
    assert scored.dimension_scores[SubScore.PROPOSAL].score == 8.0
    assert scored.dimension_scores[SubScore.EXPERIENCE].score == 0.0
    # 0.3*0.91 + 0.3*8 + 0.2*0 + 0.12*8 + 0.08*8
    assert scored.final_score == pytest.approx(4.273)


def test_aggregate_gate_failed_withholds_total():
    scored = aggregate_scores(ReadinessInput(english_gate_passed=False), WeightScheme.DEFAULT)

    assert scored.state == EvaluationState.GATED_FAIL
    assert scored.final_score is None
    assert len(scored.dimension_scores) == 5


def test_aggregate_adds_delta_and_clamps():
    inputs = ReadinessInput(
        proposal={"innovation": 10, "feasibility": 10, "fit": 10, "writing": 10},
        experience={"top_first_author": 3},
        recommendation={"letter_a": 10, "letter_b": 10},
        interview_score=10,
        curriculum_rigor=10,
        undergraduate_record={"percent": 95},
        undergraduate_institution={"qs_tier": "qs_top10"},
        adjustments={"external_funding": True, "supervisor_intent": True},
    )
    scored = aggregate_scores(inputs, WeightScheme.DEFAULT)
    assert scored.delta == 1.0
    assert scored.final_score == 10.0


def test_aggregate_computes_academic_breakdown_once(monkeypatch):
    calls = []

    def counting_breakdown(inputs):
        calls.append(inputs)
        return compute_academic_breakdown(inputs)

    monkeypatch.setattr(aggregator, "compute_academic_breakdown", counting_breakdown)
    monkeypatch.setattr(dimension_scorers, "compute_academic_breakdown", counting_breakdown)

    inputs = ReadinessInput(undergraduate_record={"percent": 72})
    scored = aggregate_scores(inputs, WeightScheme.DEFAULT)

    assert len(calls) == 1
    assert scored.dimension_scores[SubScore.ACADEMIC].score == scored.academic.academic_score


def test_score_academic_reuses_given_breakdown():
    inputs = ReadinessInput(undergraduate_record={"percent": 72})
    breakdown = compute_academic_breakdown(inputs)
    weights = select_weights(WeightScheme.DEFAULT)

    assert score_academic(inputs, weights, breakdown=breakdown) == score_academic(inputs, weights)
