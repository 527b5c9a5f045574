"""
Ranker

Ranks sub-scores by how much the total would gain if each were raised to the
target line, and turns the top entries into improvement suggestions.
"""

from typing import Dict, List, Tuple

from .constants import (
    DEFAULT_MAX_SUGGESTIONS,
    Locale,
    SUB_SCORE_ORDER,
    SUGGESTION_TARGET,
    SubScore,
)
from .contracts import DimensionScore, ImprovementSuggestion
from .labels import GATE_FAILED_MESSAGE, IMPROVEMENT_TIPS, SUB_SCORE_LABELS, SUGGESTION_TEMPLATES


def marginal_gain(value: float, weight: float, target: float = SUGGESTION_TARGET) -> float:
    """Total-score gain from raising a sub-score to the target, never negative."""
    return max(0.0, target - value) * weight


def rank_dimensions(
    dimension_scores: Dict[SubScore, DimensionScore],
    target: float = SUGGESTION_TARGET
) -> List[Tuple[SubScore, float]]:
    """
    Order sub-scores by marginal gain (descending).

    Ties, including sub-scores already at or above the target, are broken by
    the unclamped headroom x weight and then by the fixed sub-score order.

    Returns:
        List of (sub-score, gain) pairs
    """
    keyed = []
    for position, key in enumerate(SUB_SCORE_ORDER):
        dim = dimension_scores[key]
        gain = marginal_gain(dim.score, dim.weight, target)
        raw = (target - dim.score) * dim.weight
        keyed.append((-gain, -raw, position, key, gain))

    keyed.sort()
    return [(key, gain) for _, _, _, key, gain in keyed]


def rank_suggestions(
    dimension_scores: Dict[SubScore, DimensionScore],
    gate_passed: bool,
    locale: Locale = Locale.EN,
    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
    target: float = SUGGESTION_TARGET
) -> List[ImprovementSuggestion]:
    """
    Build the advice list.

    If the gate is not met, the only advice is to satisfy the language
    requirement; ranking is skipped.

    Args:
        dimension_scores: Sub-scores with their active weights
        gate_passed: Whether the English gate was met
        locale: Language for labels and tips
        max_suggestions: Number of entries to emit
        target: Target line each sub-score is measured against

    Returns:
        List of ImprovementSuggestion, best opportunity first
    """
    if not gate_passed:
        return [ImprovementSuggestion(message=GATE_FAILED_MESSAGE[locale])]

    suggestions = []
    for key, gain in rank_dimensions(dimension_scores, target)[:max_suggestions]:
        tip = IMPROVEMENT_TIPS[locale][key]
        gain = round(gain, 2)
        suggestions.append(ImprovementSuggestion(
            area=key,
            label=SUB_SCORE_LABELS[locale][key],
            gain=gain,
            tip=tip,
            message=SUGGESTION_TEMPLATES[locale].format(
                key=key.value, target=target, gain=gain, tip=tip
            ),
        ))

    return suggestions
