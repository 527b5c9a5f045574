"""
Dimension Scorers

Individual scoring functions for each sub-score.
Each scorer produces a score between 0.0 and 10.0.
All logic is deterministic - no AI/ML components.
"""

from typing import Dict, Optional

from .constants import (
    ACADEMIC_GRADE_WEIGHT,
    ACADEMIC_HEADROOM_MULTIPLIER,
    ACADEMIC_PRESTIGE_WEIGHT,
    ACADEMIC_RIGOR_WEIGHT,
    AWARD_POINTS_CAP,
    EXPERIENCE_POINTS,
    RA_MONTHS_POINTS,
    SubScore,
)
from .contracts import (
    AcademicBreakdown,
    DimensionScore,
    ExperienceInput,
    ProposalInput,
    ReadinessInput,
    RecommendationInput,
)
from .prestige import institution_prestige, relative_advantage, source_prestige
from .scale_mappers import clamp, combine_grades, record_to_score


# =============================================================================
# RAW FORMULAS
# =============================================================================

def academic_score(
    combined_grade: float,
    prestige: Optional[float],
    rigor: float,
    advantage: float
) -> float:
    """
    Academic* = (0.55 G + 0.25 P + 0.10 R + A) x 1.30, clamped.

    The inner sum rarely reaches 10 on its own, so the fixed multiplier restores
    headroom. Missing source prestige counts as 0 here.
    """
    inner = (
        ACADEMIC_GRADE_WEIGHT * combined_grade
        + ACADEMIC_PRESTIGE_WEIGHT * (prestige if prestige is not None else 0.0)
        + ACADEMIC_RIGOR_WEIGHT * rigor
        + advantage
    )
    return clamp(inner * ACADEMIC_HEADROOM_MULTIPLIER)


def proposal_score(proposal: ProposalInput) -> float:
    """Equal-weighted mean of innovation, feasibility, fit and writing."""
    return clamp(
        (proposal.innovation + proposal.feasibility + proposal.fit + proposal.writing) / 4
    )


def ra_points(months: int) -> float:
    for min_months, points in RA_MONTHS_POINTS:
        if months >= min_months:
            return points
    return 0.0


def experience_points(experience: ExperienceInput) -> float:
    """
    Accumulate evidence points, capped at 10 overall.
    Only the award term has its own cap.
    """
    points = 0.0
    points += experience.top_first_author * EXPERIENCE_POINTS["top_first_author"]
    points += experience.top_co_author * EXPERIENCE_POINTS["top_co_author"]
    points += experience.good_first_author * EXPERIENCE_POINTS["good_first_author"]
    points += experience.good_co_author * EXPERIENCE_POINTS["good_co_author"]
    if experience.thesis_honor:
        points += EXPERIENCE_POINTS["thesis_honor"]
    points += ra_points(experience.ra_months)
    points += min(AWARD_POINTS_CAP, experience.awards)
    return clamp(points)


def recommendation_score(recommendation: RecommendationInput) -> float:
    return clamp((recommendation.letter_a + recommendation.letter_b) / 2)


def compute_academic_breakdown(inputs: ReadinessInput) -> AcademicBreakdown:
    """Every intermediate value behind Academic*, for scoring and display."""
    ug_score = record_to_score(inputs.undergraduate_record)
    pg_score = record_to_score(inputs.postgraduate_record)
    combined = combine_grades(ug_score, pg_score)

    ug_prestige = institution_prestige(inputs.undergraduate_institution)
    pg_prestige = institution_prestige(inputs.postgraduate_institution)
    src_prestige = source_prestige(ug_prestige, pg_prestige)
    tgt_prestige = institution_prestige(inputs.target_institution)
    advantage = relative_advantage(src_prestige, tgt_prestige)

    return AcademicBreakdown(
        undergraduate_score=ug_score,
        postgraduate_score=pg_score,
        combined_grade=combined,
        undergraduate_prestige=ug_prestige,
        postgraduate_prestige=pg_prestige,
        source_prestige=src_prestige,
        target_prestige=tgt_prestige,
        rigor=inputs.curriculum_rigor,
        relative_advantage=advantage,
        academic_score=academic_score(
            combined, src_prestige, inputs.curriculum_rigor, advantage
        ),
    )


# =============================================================================
# DIMENSION SCORERS
# =============================================================================

def _dimension(
    dimension: SubScore,
    score: float,
    weights: Dict[SubScore, float],
    explanation: str
) -> DimensionScore:
    weight = weights[dimension]
    return DimensionScore(
        dimension=dimension,
        score=score,
        weight=weight,
        weighted_score=score * weight,
        explanation=explanation,
    )


def score_academic(
    inputs: ReadinessInput,
    weights: Dict[SubScore, float],
    breakdown: Optional[AcademicBreakdown] = None
) -> DimensionScore:
    """
    Score academic background.

    Considers:
    - UG/PG grades (classification or percentage)
    - Prestige of the applicant's institutions
    - Curriculum rigor
    - Relative advantage over the target institution

    A breakdown already computed for the same inputs can be passed in.
    """
    if breakdown is None:
        breakdown = compute_academic_breakdown(inputs)
    prestige = breakdown.source_prestige if breakdown.source_prestige is not None else 0.0
    return _dimension(
        SubScore.ACADEMIC,
        breakdown.academic_score,
        weights,
        f"(0.55x{breakdown.combined_grade:.2f} + 0.25x{prestige:.2f} + "
        f"0.10x{breakdown.rigor:.2f} + {breakdown.relative_advantage:.2f}) x1.30"
    )


def score_proposal(
    inputs: ReadinessInput,
    weights: Dict[SubScore, float]
) -> DimensionScore:
    p = inputs.proposal
    return _dimension(
        SubScore.PROPOSAL,
        proposal_score(p),
        weights,
        f"Innovation: {p.innovation:.1f}, Feasibility: {p.feasibility:.1f}, "
        f"Fit: {p.fit:.1f}, Writing: {p.writing:.1f}"
    )


def score_experience(
    inputs: ReadinessInput,
    weights: Dict[SubScore, float]
) -> DimensionScore:
    e = inputs.experience
    return _dimension(
        SubScore.EXPERIENCE,
        experience_points(e),
        weights,
        f"Top FA: {e.top_first_author}, Top co: {e.top_co_author}, "
        f"Good FA: {e.good_first_author}, Good co: {e.good_co_author}, "
        f"Thesis honor: {e.thesis_honor}, RA months: {e.ra_months}, Awards: {e.awards}"
    )


def score_recommendation(
    inputs: ReadinessInput,
    weights: Dict[SubScore, float]
) -> DimensionScore:
    r = inputs.recommendation
    return _dimension(
        SubScore.RECOMMENDATION,
        recommendation_score(r),
        weights,
        f"Letter A: {r.letter_a:.1f}, Letter B: {r.letter_b:.1f}"
    )


def score_interview(
    inputs: ReadinessInput,
    weights: Dict[SubScore, float]
) -> DimensionScore:
    # Already bounded to [0, 10] by the input contract
    return _dimension(
        SubScore.INTERVIEW,
        inputs.interview_score,
        weights,
        f"Interview: {inputs.interview_score:.1f}"
    )
