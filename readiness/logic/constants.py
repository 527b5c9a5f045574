"""
Scoring Engine Constants

Defines all band mappings, weights, thresholds, and enums used by the readiness
scoring engine. All values are deterministic with no AI/ML components.
"""

from enum import Enum
from typing import Dict, List, Tuple


# =============================================================================
# ENUMS
# =============================================================================

class WeightScheme(str, Enum):
    """Discipline profile selecting the weight vector."""
    DEFAULT = "default"            # Science / CS
    ENGINEERING = "engineering"    # Applied engineering
    HUMANITIES = "humanities"      # Humanities & social sciences


class UGClass(str, Enum):
    """Undergraduate degree classification."""
    FIRST = "first"
    UPPER = "upper"    # 2:1
    LOWER = "lower"    # 2:2
    THIRD = "third"
    OTHER = "other"


class PGClass(str, Enum):
    """Taught postgraduate degree classification."""
    DISTINCTION = "distinction"
    MERIT = "merit"
    PASS = "pass"
    OTHER = "other"


class QSTier(str, Enum):
    """QS World University Rankings band."""
    TOP_10 = "qs_top10"
    RANK_11_20 = "qs_11_20"
    RANK_21_50 = "qs_21_50"
    RANK_51_100 = "qs_51_100"
    RANK_101_200 = "qs_101_200"
    RANK_201_300 = "qs_201_300"
    RANK_301_500 = "qs_301_500"
    RANK_501_800 = "qs_501_800"
    RANK_800_PLUS = "qs_800_plus"


class CNTier(str, Enum):
    """Chinese domestic university tier."""
    C9 = "cn_c9"
    PROJECT_985 = "cn_985"
    PROJECT_211 = "cn_211"
    TIER_ONE = "cn_1ben"
    BELOW_TIER_ONE = "cn_below"


class SubScore(str, Enum):
    """The five weighted components of the total score."""
    ACADEMIC = "AG"
    PROPOSAL = "RP"
    EXPERIENCE = "RE"
    RECOMMENDATION = "RL"
    INTERVIEW = "PI"


class Verdict(str, Enum):
    """Qualitative readiness tier."""
    HIGHLY_COMPETITIVE = "highly_competitive"
    COMPETITIVE = "competitive"
    BORDERLINE = "borderline"
    NEEDS_STRENGTHENING = "needs_strengthening"
    GATE_NOT_MET = "gate_not_met"


class EvaluationState(str, Enum):
    """Final composer state. GATED_FAIL is terminal for one evaluation."""
    GATED_FAIL = "gated_fail"
    EVALUATED = "evaluated"


class Locale(str, Enum):
    EN = "en"
    ZH = "zh"


# =============================================================================
# SCALE MAPPINGS
# =============================================================================

SCORE_MIN = 0.0
SCORE_MAX = 10.0

# Percentage average -> score breakpoints, linear between points,
# flat below the first and above the last.
PERCENT_BREAKPOINTS: List[Tuple[float, float]] = [
    (50.0, 5.0),
    (60.0, 7.0),
    (70.0, 9.0),
    (85.0, 10.0),
]

UG_CLASS_SCORE_MAP: Dict[UGClass, float] = {
    UGClass.FIRST: 9.2,
    UGClass.UPPER: 8.0,
    UGClass.LOWER: 6.5,
    UGClass.THIRD: 5.0,
    UGClass.OTHER: 4.5,
}

PG_CLASS_SCORE_MAP: Dict[PGClass, float] = {
    PGClass.DISTINCTION: 9.0,
    PGClass.MERIT: 8.0,
    PGClass.PASS: 6.5,
    PGClass.OTHER: 5.0,
}

# UG/PG blend when both grades are known
UG_GRADE_WEIGHT = 0.4
PG_GRADE_WEIGHT = 0.6

# =============================================================================
# PRESTIGE
# =============================================================================

QS_PRESTIGE_MAP: Dict[QSTier, float] = {
    QSTier.TOP_10: 10.0,
    QSTier.RANK_11_20: 9.5,
    QSTier.RANK_21_50: 9.0,
    QSTier.RANK_51_100: 8.5,
    QSTier.RANK_101_200: 8.0,
    QSTier.RANK_201_300: 7.5,
    QSTier.RANK_301_500: 7.0,
    QSTier.RANK_501_800: 6.5,
    QSTier.RANK_800_PLUS: 6.0,
}

CN_PRESTIGE_MAP: Dict[CNTier, float] = {
    CNTier.C9: 9.2,
    CNTier.PROJECT_985: 8.0,
    CNTier.PROJECT_211: 7.2,
    CNTier.TIER_ONE: 6.5,
    CNTier.BELOW_TIER_ONE: 5.0,
}

# Source prestige blend (undergraduate institution dominates)
UG_PRESTIGE_WEIGHT = 0.65
PG_PRESTIGE_WEIGHT = 0.35

# Relative advantage between source and target institution
RELATIVE_ADVANTAGE_DEADZONE = 0.3
RELATIVE_ADVANTAGE_CAP = 1.2

# =============================================================================
# ACADEMIC SUB-SCORE
# =============================================================================

ACADEMIC_GRADE_WEIGHT = 0.55
ACADEMIC_PRESTIGE_WEIGHT = 0.25
ACADEMIC_RIGOR_WEIGHT = 0.10
ACADEMIC_HEADROOM_MULTIPLIER = 1.30

RIGOR_LEVELS: Dict[str, float] = {
    "general": 5.0,
    "medium": 7.0,
    "high": 9.0,
}

# =============================================================================
# EXPERIENCE SUB-SCORE
# =============================================================================

EXPERIENCE_POINTS: Dict[str, float] = {
    "top_first_author": 4.0,
    "top_co_author": 2.0,
    "good_first_author": 3.0,
    "good_co_author": 1.0,
    "thesis_honor": 1.0,
}

# (minimum RA months, points), checked from the top
RA_MONTHS_POINTS: List[Tuple[int, float]] = [
    (6, 2.0),
    (3, 1.0),
]

AWARD_POINTS_CAP = 2

# =============================================================================
# ADJUSTMENT DELTA
# =============================================================================

FUNDING_BONUS = 0.5
SUPERVISOR_BONUS = 0.5
SUPERVISOR_PROPOSAL_THRESHOLD = 8.0
MAX_DELTA = FUNDING_BONUS + SUPERVISOR_BONUS

# =============================================================================
# WEIGHTS
# =============================================================================

# Each vector sums to 1.0; RP + RE stays at 0.50 across schemes
WEIGHT_SCHEMES: Dict[WeightScheme, Dict[SubScore, float]] = {
    WeightScheme.DEFAULT: {
        SubScore.ACADEMIC: 0.30,
        SubScore.PROPOSAL: 0.30,
        SubScore.EXPERIENCE: 0.20,
        SubScore.RECOMMENDATION: 0.12,
        SubScore.INTERVIEW: 0.08,
    },
    WeightScheme.ENGINEERING: {
        SubScore.ACADEMIC: 0.30,
        SubScore.PROPOSAL: 0.25,
        SubScore.EXPERIENCE: 0.25,
        SubScore.RECOMMENDATION: 0.12,
        SubScore.INTERVIEW: 0.08,
    },
    WeightScheme.HUMANITIES: {
        SubScore.ACADEMIC: 0.30,
        SubScore.PROPOSAL: 0.35,
        SubScore.EXPERIENCE: 0.15,
        SubScore.RECOMMENDATION: 0.12,
        SubScore.INTERVIEW: 0.08,
    },
}

# Fixed display / tie-break order
SUB_SCORE_ORDER: List[SubScore] = [
    SubScore.ACADEMIC,
    SubScore.PROPOSAL,
    SubScore.EXPERIENCE,
    SubScore.RECOMMENDATION,
    SubScore.INTERVIEW,
]

# =============================================================================
# CLASSIFICATION THRESHOLDS
# =============================================================================

# Lower bounds, checked from the top
VERDICT_THRESHOLDS: List[Tuple[Verdict, float]] = [
    (Verdict.HIGHLY_COMPETITIVE, 8.4),
    (Verdict.COMPETITIVE, 7.4),
    (Verdict.BORDERLINE, 6.9),
]
VERDICT_FALLBACK = Verdict.NEEDS_STRENGTHENING

# =============================================================================
# SUGGESTIONS
# =============================================================================

SUGGESTION_TARGET = 8.0
DEFAULT_MAX_SUGGESTIONS = 3

# =============================================================================
# DEFAULT VALUES
# =============================================================================

DEFAULT_RIGOR = 7.0
DEFAULT_RATING = 8.0
