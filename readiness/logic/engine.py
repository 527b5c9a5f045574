"""
Readiness Engine

Main orchestrator that combines all scoring components into a single pipeline.
This is the primary entry point for evaluating a calculator snapshot.
"""

import logging
import time
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from ..settings import Settings, settings as default_settings
from .aggregator import aggregate_scores
from .catalog import build_option_catalog
from .classifier import classify_profile
from .constants import EvaluationState, Locale, WeightScheme
from .contracts import ReadinessInput, ReadinessOutput
from .errors import InvalidInputError
from .output_assembler import ENGINE_VERSION, assemble_output
from .ranker import rank_suggestions

logger = logging.getLogger(__name__)


class ReadinessEngine:
    """
    Main readiness engine that orchestrates the scoring pipeline.

    Pipeline flow:
    1. Scale mapping - Grades and ranking tiers to 0-10 scores
    2. Dimension Scoring - Score each sub-score independently
    3. Aggregation - Weighted sum plus adjustment delta, gated by English
    4. Classification - Verdict tier
    5. Ranking - Improvement suggestions by marginal gain
    6. Output Assembly - Build final ReadinessOutput

    The engine holds configuration only; every call is a pure function of the
    snapshot it receives.
    """

    def __init__(self, config: Optional[Settings] = None):
        """
        Initialize the readiness engine.

        Args:
            config: Optional settings. If None, uses environment settings.
        """
        self.config = config or default_settings
        self.version = ENGINE_VERSION

    def resolve_scheme(self, inputs: ReadinessInput) -> WeightScheme:
        if inputs.weight_scheme is not None:
            return WeightScheme(inputs.weight_scheme)
        return WeightScheme(self.config.DEFAULT_SCHEME)

    def resolve_locale(self, locale: Optional[Union[Locale, str]]) -> Locale:
        return Locale(locale if locale is not None else self.config.LOCALE)

    def evaluate(
        self,
        inputs: ReadinessInput,
        locale: Optional[Union[Locale, str]] = None,
        max_suggestions: Optional[int] = None
    ) -> ReadinessOutput:
        """
        Evaluate one calculator snapshot.

        Args:
            inputs: Full input snapshot
            locale: Output language, defaults to settings
            max_suggestions: Suggestion count, defaults to settings

        Returns:
            ReadinessOutput with total, verdict, sub-scores and suggestions
        """
        start_time = time.perf_counter()
        scheme = self.resolve_scheme(inputs)
        lang = self.resolve_locale(locale)
        limit = max_suggestions if max_suggestions is not None else self.config.MAX_SUGGESTIONS

        logger.info(f"Evaluating readiness (scheme={scheme.value}, gate={inputs.english_gate_passed})")

        # Steps 1-3: Score and aggregate
        scored = aggregate_scores(inputs, scheme)

        # Step 4: Classify
        verdict = classify_profile(scored)

        # Step 5: Rank suggestions
        suggestions = rank_suggestions(
            scored.dimension_scores,
            gate_passed=scored.state == EvaluationState.EVALUATED,
            locale=lang,
            max_suggestions=limit,
        )

        # Step 6: Assemble output
        output = assemble_output(scored, verdict, suggestions, locale=lang)

        processing_time = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"Readiness evaluated: score={output.final_score_text}, "
            f"verdict={verdict.value} ({processing_time:.2f}ms)"
        )
        return output

    def evaluate_from_dict(
        self,
        payload: Dict[str, Any],
        **kwargs
    ) -> ReadinessOutput:
        """
        Evaluate a plain dictionary snapshot.

        Convenience method for front-end integration.

        Args:
            payload: Dictionary matching ReadinessInput fields
            **kwargs: Additional arguments passed to evaluate()

        Returns:
            ReadinessOutput

        Raises:
            InvalidInputError: if a categorical id is unknown
        """
        try:
            inputs = ReadinessInput.model_validate(payload)
        except ValidationError as e:
            raise InvalidInputError.from_validation_error(e) from e
        return self.evaluate(inputs, **kwargs)

    def list_options(
        self,
        locale: Optional[Union[Locale, str]] = None
    ) -> Dict[str, List[Dict[str, Any]]]:
        """Selectable options for every categorical input."""
        return build_option_catalog(self.resolve_locale(locale))


# Convenience function for simple usage
def evaluate(
    inputs: Optional[ReadinessInput] = None,
    locale: Optional[Union[Locale, str]] = None
) -> ReadinessOutput:
    """
    Convenience function to evaluate a snapshot.

    Args:
        inputs: Input snapshot, the reset state if None
        locale: Output language

    Returns:
        ReadinessOutput
    """
    engine = ReadinessEngine()
    return engine.evaluate(inputs or ReadinessInput(), locale=locale)
