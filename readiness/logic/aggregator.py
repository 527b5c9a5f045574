"""
Score Aggregator

Combines the five sub-scores into the total score.
Applies the scheme weights, the adjustment delta and the English gate.
"""

import logging
from typing import Dict

from .constants import (
    EvaluationState,
    FUNDING_BONUS,
    SUB_SCORE_ORDER,
    SUPERVISOR_BONUS,
    SUPERVISOR_PROPOSAL_THRESHOLD,
    SubScore,
    WEIGHT_SCHEMES,
    WeightScheme,
)
from .contracts import AdjustmentFlags, DimensionScore, ReadinessInput, ScoredProfile
from .dimension_scorers import (
    compute_academic_breakdown,
    score_academic,
    score_experience,
    score_interview,
    score_proposal,
    score_recommendation,
)
from .scale_mappers import clamp

logger = logging.getLogger(__name__)


def select_weights(scheme: WeightScheme) -> Dict[SubScore, float]:
    """Weight vector for a scheme (a copy, callers may not mutate the table)."""
    return dict(WEIGHT_SCHEMES[WeightScheme(scheme)])


def adjustment_delta(adjustments: AdjustmentFlags, proposal: float) -> float:
    """
    Small bonus for externally verified advantages.

    Supervisor intent only counts once the proposal itself is strong (>= 8),
    so a weak proposal cannot be rescued by it.
    """
    delta = 0.0
    if adjustments.external_funding:
        delta += FUNDING_BONUS
    if adjustments.supervisor_intent and proposal >= SUPERVISOR_PROPOSAL_THRESHOLD:
        delta += SUPERVISOR_BONUS
    return delta


def aggregate_scores(
    inputs: ReadinessInput,
    scheme: WeightScheme
) -> ScoredProfile:
    """
    Compute all sub-scores and aggregate into the total score.

    Sub-scores are always computed; the total is withheld (None) when the
    English gate is not met.

    Args:
        inputs: Calculator snapshot
        scheme: Resolved weight scheme

    Returns:
        ScoredProfile with all sub-scores, delta and total
    """
    weights = select_weights(scheme)
    academic = compute_academic_breakdown(inputs)
    dimension_scores: Dict[SubScore, DimensionScore] = {
        SubScore.ACADEMIC: score_academic(inputs, weights, breakdown=academic),
    }

    # Score the remaining dimensions
    scorers = [
        score_proposal,
        score_experience,
        score_recommendation,
        score_interview,
    ]

    for scorer in scorers:
        score = scorer(inputs, weights)
        dimension_scores[score.dimension] = score

    delta = adjustment_delta(
        inputs.adjustments,
        dimension_scores[SubScore.PROPOSAL].score
    )

    if not inputs.english_gate_passed:
        state = EvaluationState.GATED_FAIL
        final_score = None
        logger.info("English gate not met, total score withheld")
    else:
        state = EvaluationState.EVALUATED
        weighted_sum = sum(
            dimension_scores[key].weighted_score for key in SUB_SCORE_ORDER
        )
        final_score = clamp(weighted_sum + delta)
        logger.debug(f"Weighted sum {weighted_sum:.4f} + delta {delta:.2f} -> {final_score:.4f}")

    return ScoredProfile(
        state=state,
        weight_scheme=scheme,
        weights=weights,
        dimension_scores=dimension_scores,
        academic=academic,
        delta=delta,
        final_score=final_score,
    )
