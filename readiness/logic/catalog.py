"""
Option Catalog

Every enumerated choice the calculator accepts, with its label and score, so a
presentation layer can render selectors without duplicating the tables.
"""

from typing import Any, Dict, List

from .constants import (
    CN_PRESTIGE_MAP,
    Locale,
    PG_CLASS_SCORE_MAP,
    QS_PRESTIGE_MAP,
    RIGOR_LEVELS,
    UG_CLASS_SCORE_MAP,
    WEIGHT_SCHEMES,
)
from .labels import (
    CN_TIER_LABELS,
    PG_CLASS_LABELS,
    QS_TIER_LABELS,
    RIGOR_LABELS,
    SCHEME_LABELS,
    UG_CLASS_LABELS,
)


def _scored_options(score_map, label_map) -> List[Dict[str, Any]]:
    return [
        {"id": key.value, "label": label_map[key], "score": score}
        for key, score in score_map.items()
    ]


def build_option_catalog(locale: Locale = Locale.EN) -> Dict[str, List[Dict[str, Any]]]:
    return {
        "weight_schemes": [
            {
                "id": scheme.value,
                "label": SCHEME_LABELS[locale][scheme],
                "weights": {key.value: w for key, w in weights.items()},
            }
            for scheme, weights in WEIGHT_SCHEMES.items()
        ],
        "undergraduate_classes": _scored_options(UG_CLASS_SCORE_MAP, UG_CLASS_LABELS[locale]),
        "postgraduate_classes": _scored_options(PG_CLASS_SCORE_MAP, PG_CLASS_LABELS[locale]),
        "qs_tiers": _scored_options(QS_PRESTIGE_MAP, QS_TIER_LABELS[locale]),
        "cn_tiers": _scored_options(CN_PRESTIGE_MAP, CN_TIER_LABELS[locale]),
        "rigor_levels": [
            {"id": level, "label": RIGOR_LABELS[locale][level], "score": score}
            for level, score in RIGOR_LEVELS.items()
        ],
    }
