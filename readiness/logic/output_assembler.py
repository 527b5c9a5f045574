"""
Output Assembler

Transforms internal scoring data into the final ReadinessOutput contract.
Attaches localized labels and the weighted contribution breakdown.
"""

from typing import List, Optional

from .constants import EvaluationState, Locale, SUB_SCORE_ORDER, Verdict
from .contracts import (
    DimensionScore,
    ImprovementSuggestion,
    ReadinessOutput,
    ScoredProfile,
)
from .labels import SUB_SCORE_LABELS, VERDICT_LABELS

ENGINE_VERSION = "1.0.0"
UNDETERMINED = "undetermined"


def format_score(final_score: Optional[float]) -> str:
    if final_score is None:
        return UNDETERMINED
    return f"{final_score:.2f}"


def _build_breakdown(
    scored: ScoredProfile,
    locale: Locale
) -> List[DimensionScore]:
    """Sub-scores in display order, each with its contribution w x v."""
    breakdown = []
    for key in SUB_SCORE_ORDER:
        dim = scored.dimension_scores[key]
        breakdown.append(dim.model_copy(update={
            "label": SUB_SCORE_LABELS[locale][key],
            "weighted_score": round(dim.weighted_score, 2),
        }))
    return breakdown


def assemble_output(
    scored: ScoredProfile,
    verdict: Verdict,
    suggestions: List[ImprovementSuggestion],
    locale: Locale = Locale.EN
) -> ReadinessOutput:
    """
    Assemble the final ReadinessOutput.

    Args:
        scored: Aggregated sub-scores and total
        verdict: Verdict tier
        suggestions: Ranked advice (or the gate message)
        locale: Language for labels

    Returns:
        Complete ReadinessOutput
    """
    final_score = scored.final_score
    if scored.state == EvaluationState.GATED_FAIL:
        final_score = None

    return ReadinessOutput(
        state=scored.state,
        final_score=final_score,
        final_score_text=format_score(final_score),

        verdict=verdict,
        verdict_label=VERDICT_LABELS[locale][verdict],

        weight_scheme=scored.weight_scheme,
        weights=scored.weights,
        sub_scores={
            key: scored.dimension_scores[key].score for key in SUB_SCORE_ORDER
        },
        dimension_scores=_build_breakdown(scored, locale),
        academic=scored.academic,
        delta=scored.delta,

        suggestions=suggestions,

        locale=locale,
        engine_version=ENGINE_VERSION,
    )
