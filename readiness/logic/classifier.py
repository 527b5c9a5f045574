"""
Classifier

Maps the total score onto a verdict tier:
- Highly competitive
- Competitive
- Borderline (match-dependent)
- Recommend strengthening
- Gate not met (English requirement failed)
"""

from typing import Optional

from .constants import EvaluationState, VERDICT_FALLBACK, VERDICT_THRESHOLDS, Verdict
from .contracts import ScoredProfile


def classify_score(final_score: Optional[float], gate_passed: bool = True) -> Verdict:
    """
    Classify a total score.

    Args:
        final_score: Total score, None when undetermined
        gate_passed: Whether the English gate was met

    Returns:
        Verdict enum value
    """
    if not gate_passed or final_score is None:
        return Verdict.GATE_NOT_MET

    # Check thresholds from highest to lowest
    for verdict, lower_bound in VERDICT_THRESHOLDS:
        if final_score >= lower_bound:
            return verdict

    return VERDICT_FALLBACK


def classify_profile(scored: ScoredProfile) -> Verdict:
    return classify_score(
        scored.final_score,
        gate_passed=scored.state == EvaluationState.EVALUATED,
    )
