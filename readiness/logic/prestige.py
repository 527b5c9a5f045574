"""
Prestige Resolver

Institution prestige from the QS and CN ranking tiers, the blended prestige of
the applicant's own institutions, and the relative advantage over the target.
"""

from typing import Optional

from .constants import (
    CN_PRESTIGE_MAP,
    CNTier,
    PG_PRESTIGE_WEIGHT,
    QS_PRESTIGE_MAP,
    QSTier,
    RELATIVE_ADVANTAGE_CAP,
    RELATIVE_ADVANTAGE_DEADZONE,
    UG_PRESTIGE_WEIGHT,
)
from .contracts import InstitutionSelection
from .scale_mappers import clamp


def prestige_from(
    qs_tier: Optional[QSTier],
    cn_tier: Optional[CNTier]
) -> Optional[float]:
    """
    Prestige of one institution: the more favourable of the two rankings.
    None if neither tier is selected.
    """
    scores = []
    if qs_tier is not None:
        scores.append(QS_PRESTIGE_MAP[qs_tier])
    if cn_tier is not None:
        scores.append(CN_PRESTIGE_MAP[cn_tier])
    if not scores:
        return None
    return max(scores)


def institution_prestige(selection: InstitutionSelection) -> Optional[float]:
    return prestige_from(selection.qs_tier, selection.cn_tier)


def source_prestige(
    undergraduate: Optional[float],
    postgraduate: Optional[float]
) -> Optional[float]:
    """Blend UG and PG institution prestige 65/35, falling back to either one."""
    if undergraduate is not None and postgraduate is not None:
        return UG_PRESTIGE_WEIGHT * undergraduate + PG_PRESTIGE_WEIGHT * postgraduate
    if undergraduate is not None:
        return undergraduate
    return postgraduate


def relative_advantage(
    source: Optional[float],
    target: Optional[float]
) -> float:
    """
    Deadzoned, capped gap between source and target prestige.

    Differences within the deadzone count as noise (0). Larger differences
    are shrunk toward zero by the deadzone width and capped at +/- the cap.
    """
    if source is None or target is None:
        return 0.0

    diff = source - target
    if abs(diff) <= RELATIVE_ADVANTAGE_DEADZONE:
        return 0.0

    if diff > 0:
        adjusted = diff - RELATIVE_ADVANTAGE_DEADZONE
    else:
        adjusted = diff + RELATIVE_ADVANTAGE_DEADZONE
    return clamp(adjusted, -RELATIVE_ADVANTAGE_CAP, RELATIVE_ADVANTAGE_CAP)
