"""
Data Contracts for the Readiness Scoring Engine

Defines Pydantic models for ReadinessInput (input) and ReadinessOutput (output).
These contracts are the API boundary for the scoring engine: every numeric
field is clamped or floored here, so the pipeline only ever sees in-range values.
"""

import logging
import math
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Discriminator, Field, Tag, ValidationInfo, field_validator

from .constants import (
    CNTier,
    DEFAULT_RATING,
    DEFAULT_RIGOR,
    EvaluationState,
    Locale,
    PGClass,
    QSTier,
    RIGOR_LEVELS,
    SCORE_MAX,
    SCORE_MIN,
    SubScore,
    UGClass,
    Verdict,
    WeightScheme,
)

logger = logging.getLogger(__name__)


# =============================================================================
# BOUNDARY COERCION
# =============================================================================

def _to_float(value: Any) -> Optional[float]:
    """Parse a number; None for blanks, non-numeric values and NaN."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.warning(f"Non-numeric input {value!r} treated as absent")
        return None
    if math.isnan(number):
        return None
    return number


def _clamp_input(number: float, low: float, high: float, field: str) -> float:
    if number < low or number > high:
        clamped = min(high, max(low, number))
        logger.warning(f"{field}={number} outside [{low}, {high}], clamped to {clamped}")
        return clamped
    return number


def _bounded_rating(model: type, value: Any, info: ValidationInfo) -> float:
    """0-10 rating; absent values fall back to the field default."""
    number = _to_float(value)
    if number is None:
        return model.model_fields[info.field_name].default
    return _clamp_input(number, SCORE_MIN, SCORE_MAX, info.field_name)


def _null_to_default(model: type, value: Any, info: ValidationInfo) -> Any:
    """An explicit null means the field was left empty."""
    if value is None:
        return model.model_fields[info.field_name].get_default(call_default_factory=True)
    return value


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class UGClassRecord(BaseModel):
    """Undergraduate result given as a degree classification."""
    method: Literal["class"] = "class"
    grade_class: Optional[UGClass] = None

    @field_validator("method", mode="before")
    @classmethod
    def null_method_is_default(cls, value: Any, info: ValidationInfo) -> Any:
        return _null_to_default(cls, value, info)

    @field_validator("grade_class", mode="before")
    @classmethod
    def blank_class_is_unset(cls, value: Any) -> Any:
        return _blank_to_none(value)

    class Config:
        frozen = True


class PGClassRecord(BaseModel):
    """Postgraduate result given as a degree classification."""
    method: Literal["class"] = "class"
    grade_class: Optional[PGClass] = None

    @field_validator("method", mode="before")
    @classmethod
    def null_method_is_default(cls, value: Any, info: ValidationInfo) -> Any:
        return _null_to_default(cls, value, info)

    @field_validator("grade_class", mode="before")
    @classmethod
    def blank_class_is_unset(cls, value: Any) -> Any:
        return _blank_to_none(value)

    class Config:
        frozen = True


class PercentRecord(BaseModel):
    """Result given as a percentage average (0-100)."""
    method: Literal["percent"] = "percent"
    percent: Optional[float] = None

    @field_validator("method", mode="before")
    @classmethod
    def null_method_is_default(cls, value: Any, info: ValidationInfo) -> Any:
        return _null_to_default(cls, value, info)

    @field_validator("percent", mode="before")
    @classmethod
    def bound_percent(cls, value: Any) -> Optional[float]:
        number = _to_float(value)
        if number is None:
            return None
        return _clamp_input(number, 0.0, 100.0, "percent")

    class Config:
        frozen = True


def _grade_method(value: Any) -> str:
    """Pick the authoritative branch; a bare percentage implies the percent method."""
    if isinstance(value, dict):
        method = value.get("method")
        if method:
            return method
        return "percent" if "percent" in value else "class"
    return getattr(value, "method", "class")


UndergraduateRecord = Annotated[
    Union[
        Annotated[UGClassRecord, Tag("class")],
        Annotated[PercentRecord, Tag("percent")],
    ],
    Discriminator(_grade_method),
]

PostgraduateRecord = Annotated[
    Union[
        Annotated[PGClassRecord, Tag("class")],
        Annotated[PercentRecord, Tag("percent")],
    ],
    Discriminator(_grade_method),
]


class InstitutionSelection(BaseModel):
    """Ranking tier of one institution under either ranking system."""
    qs_tier: Optional[QSTier] = None
    cn_tier: Optional[CNTier] = None

    @field_validator("qs_tier", "cn_tier", mode="before")
    @classmethod
    def blank_tier_is_unset(cls, value: Any) -> Any:
        return _blank_to_none(value)

    class Config:
        frozen = True


class ProposalInput(BaseModel):
    innovation: float = DEFAULT_RATING
    feasibility: float = DEFAULT_RATING
    fit: float = DEFAULT_RATING
    writing: float = DEFAULT_RATING

    @field_validator("innovation", "feasibility", "fit", "writing", mode="before")
    @classmethod
    def bound_rating(cls, value: Any, info: ValidationInfo) -> float:
        return _bounded_rating(cls, value, info)

    class Config:
        frozen = True


class ExperienceInput(BaseModel):
    """Publication record and other research evidence."""
    top_first_author: int = 0
    top_co_author: int = 0
    good_first_author: int = 0
    good_co_author: int = 0
    thesis_honor: bool = False
    ra_months: int = 0
    awards: int = 0

    @field_validator(
        "top_first_author",
        "top_co_author",
        "good_first_author",
        "good_co_author",
        "ra_months",
        "awards",
        mode="before",
    )
    @classmethod
    def floor_count(cls, value: Any, info: ValidationInfo) -> int:
        number = _to_float(value)
        if number is None or math.isinf(number):
            return 0
        if number < 0:
            logger.warning(f"{info.field_name}={number} is negative, floored to 0")
            return 0
        return int(math.floor(number))

    @field_validator("thesis_honor", mode="before")
    @classmethod
    def null_flag_is_default(cls, value: Any, info: ValidationInfo) -> Any:
        return _null_to_default(cls, value, info)

    class Config:
        frozen = True


class RecommendationInput(BaseModel):
    letter_a: float = DEFAULT_RATING
    letter_b: float = DEFAULT_RATING

    @field_validator("letter_a", "letter_b", mode="before")
    @classmethod
    def bound_rating(cls, value: Any, info: ValidationInfo) -> float:
        return _bounded_rating(cls, value, info)

    class Config:
        frozen = True


class AdjustmentFlags(BaseModel):
    external_funding: bool = False    # scholarship / self-funding secured
    supervisor_intent: bool = False   # supervisor confirmed willingness to take you

    @field_validator("external_funding", "supervisor_intent", mode="before")
    @classmethod
    def null_flag_is_default(cls, value: Any, info: ValidationInfo) -> Any:
        return _null_to_default(cls, value, info)

    class Config:
        frozen = True


class ReadinessInput(BaseModel):
    """
    Input contract for the scoring engine.
    A full snapshot of the calculator form; the no-argument instance is the
    form's reset state.
    """
    # Gate & scheme
    english_gate_passed: bool = True
    weight_scheme: Optional[WeightScheme] = None  # None -> configured default

    # Academic background
    undergraduate_record: UndergraduateRecord = Field(default_factory=UGClassRecord)
    postgraduate_record: PostgraduateRecord = Field(default_factory=PGClassRecord)
    undergraduate_institution: InstitutionSelection = Field(default_factory=InstitutionSelection)
    postgraduate_institution: InstitutionSelection = Field(default_factory=InstitutionSelection)
    target_institution: InstitutionSelection = Field(default_factory=InstitutionSelection)
    curriculum_rigor: float = DEFAULT_RIGOR

    # Other components
    proposal: ProposalInput = Field(default_factory=ProposalInput)
    experience: ExperienceInput = Field(default_factory=ExperienceInput)
    recommendation: RecommendationInput = Field(default_factory=RecommendationInput)
    interview_score: float = DEFAULT_RATING

    adjustments: AdjustmentFlags = Field(default_factory=AdjustmentFlags)

    @field_validator(
        "english_gate_passed",
        "undergraduate_record",
        "postgraduate_record",
        "undergraduate_institution",
        "postgraduate_institution",
        "target_institution",
        "proposal",
        "experience",
        "recommendation",
        "adjustments",
        mode="before",
    )
    @classmethod
    def null_is_default(cls, value: Any, info: ValidationInfo) -> Any:
        return _null_to_default(cls, value, info)

    @field_validator("weight_scheme", mode="before")
    @classmethod
    def blank_scheme_is_default(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @field_validator("curriculum_rigor", mode="before")
    @classmethod
    def bound_rigor(cls, value: Any, info: ValidationInfo) -> float:
        # Named levels ("general" / "medium" / "high") are accepted as well
        if isinstance(value, str) and value.strip().lower() in RIGOR_LEVELS:
            return RIGOR_LEVELS[value.strip().lower()]
        return _bounded_rating(cls, value, info)

    @field_validator("interview_score", mode="before")
    @classmethod
    def bound_interview(cls, value: Any, info: ValidationInfo) -> float:
        return _bounded_rating(cls, value, info)

    class Config:
        frozen = True


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class DimensionScore(BaseModel):
    """Individual sub-score with its weight and contribution."""
    dimension: SubScore
    label: str = ""
    score: float = Field(ge=0.0, le=10.0)
    weight: float = Field(ge=0.0, le=1.0)
    weighted_score: float = Field(ge=0.0, le=10.0)
    explanation: str = ""


class AcademicBreakdown(BaseModel):
    """Intermediate values behind the Academic* sub-score. None means absent."""
    undergraduate_score: Optional[float] = None
    postgraduate_score: Optional[float] = None
    combined_grade: float = 0.0
    undergraduate_prestige: Optional[float] = None
    postgraduate_prestige: Optional[float] = None
    source_prestige: Optional[float] = None
    target_prestige: Optional[float] = None
    rigor: float = DEFAULT_RIGOR
    relative_advantage: float = Field(default=0.0, ge=-1.2, le=1.2)
    academic_score: float = Field(default=0.0, ge=0.0, le=10.0)


class ImprovementSuggestion(BaseModel):
    """
    One advice entry. The gate-failure message has no area and no gain.
    """
    area: Optional[SubScore] = None
    label: str = ""
    gain: Optional[float] = None
    tip: str = ""
    message: str


class ReadinessOutput(BaseModel):
    """
    Output contract for the scoring engine.
    Everything the presentation layer needs to render one evaluation.
    """
    state: EvaluationState
    final_score: Optional[float] = Field(default=None, ge=0.0, le=10.0)
    final_score_text: str = "undetermined"

    verdict: Verdict
    verdict_label: str

    weight_scheme: WeightScheme
    weights: Dict[SubScore, float] = Field(default_factory=dict)
    sub_scores: Dict[SubScore, float] = Field(default_factory=dict)
    dimension_scores: List[DimensionScore] = Field(default_factory=list)
    academic: AcademicBreakdown = Field(default_factory=AcademicBreakdown)
    delta: float = Field(default=0.0, ge=0.0, le=1.0)

    suggestions: List[ImprovementSuggestion] = Field(default_factory=list)

    locale: Locale = Locale.EN
    engine_version: str = "1.0.0"


# =============================================================================
# INTERMEDIATE DATA STRUCTURES
# =============================================================================

class ScoredProfile(BaseModel):
    """
    A snapshot with computed sub-scores.
    Used between aggregation and classification stages.
    """
    state: EvaluationState
    weight_scheme: WeightScheme
    weights: Dict[SubScore, float]
    dimension_scores: Dict[SubScore, DimensionScore] = Field(default_factory=dict)
    academic: AcademicBreakdown
    delta: float = 0.0
    final_score: Optional[float] = None
