"""
Readiness Logic Module

Provides the deterministic scoring engine for the PhD readiness calculator.
"""

from .contracts import (
    ReadinessInput,
    ReadinessOutput,
    UGClassRecord,
    PGClassRecord,
    PercentRecord,
    InstitutionSelection,
    ProposalInput,
    ExperienceInput,
    RecommendationInput,
    AdjustmentFlags,
    DimensionScore,
    AcademicBreakdown,
    ImprovementSuggestion,
    ScoredProfile,
)
from .engine import ReadinessEngine, evaluate
from .constants import (
    WeightScheme,
    UGClass,
    PGClass,
    QSTier,
    CNTier,
    SubScore,
    Verdict,
    EvaluationState,
    Locale,
)
from .errors import ReadinessError, InvalidInputError

__all__ = [
    # Main engine
    "ReadinessEngine",
    "evaluate",

    # Contracts
    "ReadinessInput",
    "ReadinessOutput",
    "UGClassRecord",
    "PGClassRecord",
    "PercentRecord",
    "InstitutionSelection",
    "ProposalInput",
    "ExperienceInput",
    "RecommendationInput",
    "AdjustmentFlags",
    "DimensionScore",
    "AcademicBreakdown",
    "ImprovementSuggestion",
    "ScoredProfile",

    # Enums
    "WeightScheme",
    "UGClass",
    "PGClass",
    "QSTier",
    "CNTier",
    "SubScore",
    "Verdict",
    "EvaluationState",
    "Locale",

    # Errors
    "ReadinessError",
    "InvalidInputError",
]
