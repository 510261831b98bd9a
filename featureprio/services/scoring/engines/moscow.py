# feature_priority_dashboard/featureprio/services/scoring/engines/moscow.py

from __future__ import annotations

from typing import Dict, List, Optional

from featureprio.services.scoring.defaults import MOSCOW_CATEGORY_SCORES, MOSCOW_DEFAULTS, MoSCoWDefaults
from featureprio.services.scoring.interfaces import (
    MoSCoWCategory,
    ScoreFactors,
    ScoreFlag,
    ScoreInputs,
    ScoreResult,
    ScoringFramework,
)
from featureprio.services.scoring.utils import round_half_up

CATEGORY_LABELS: Dict[MoSCoWCategory, str] = {
    MoSCoWCategory.MUST: "Must Have",
    MoSCoWCategory.SHOULD: "Should Have",
    MoSCoWCategory.COULD: "Could Have",
    MoSCoWCategory.WONT: "Won't Have",
}

CATEGORY_DESCRIPTIONS: Dict[MoSCoWCategory, str] = {
    MoSCoWCategory.MUST: "Critical - the solution will fail without this",
    MoSCoWCategory.SHOULD: "Important but not vital - painful to leave out",
    MoSCoWCategory.COULD: "Nice to have - desirable but not essential",
    MoSCoWCategory.WONT: "Not a priority for this timeframe",
}

CATEGORY_COLORS: Dict[MoSCoWCategory, str] = {
    MoSCoWCategory.MUST: "red",
    MoSCoWCategory.SHOULD: "orange",
    MoSCoWCategory.COULD: "blue",
    MoSCoWCategory.WONT: "gray",
}

# factors averaged when no explicit category is set
INFERENCE_FACTORS = (
    "revenue_impact",
    "enterprise_readiness",
    "strategic_alignment",
    "capability_gap",
    "value",
)


def inference_average(factors: ScoreFactors, defaults: MoSCoWDefaults = MOSCOW_DEFAULTS) -> Optional[float]:
    """Average of the present value-type factors, or None when none are present."""
    values: List[float] = [
        getattr(factors, name) for name in INFERENCE_FACTORS if getattr(factors, name) is not None
    ]
    if factors.impact is not None:
        impact = factors.impact
        if impact <= defaults.rice_impact_ceiling:
            impact = impact * defaults.rice_impact_scale
        values.append(impact)

    if not values:
        return None
    return sum(values) / len(values)


def infer_moscow_category(factors: ScoreFactors, defaults: MoSCoWDefaults = MOSCOW_DEFAULTS) -> MoSCoWCategory:
    if factors.moscow is not None:
        return factors.moscow

    avg = inference_average(factors, defaults)
    if avg is None:
        return defaults.category
    if avg >= defaults.must_threshold:
        return MoSCoWCategory.MUST
    if avg >= defaults.should_threshold:
        return MoSCoWCategory.SHOULD
    if avg >= defaults.could_threshold:
        return MoSCoWCategory.COULD
    return MoSCoWCategory.WONT


class MoSCoWScoringEngine:
    """MoSCoW categorical engine.

    Uses an explicit `moscow` category when present, otherwise infers one from the
    averaged value factors. Base score comes from a fixed table (must=10, should=7,
    could=4, wont=1). Emits the category as a flag.
    """

    framework = ScoringFramework.MOSCOW

    def __init__(self, defaults: MoSCoWDefaults = MOSCOW_DEFAULTS) -> None:
        self.defaults = defaults

    def compute(self, inputs: ScoreInputs) -> ScoreResult:
        factors = inputs.factors
        category = infer_moscow_category(factors, self.defaults)
        base_score = MOSCOW_CATEGORY_SCORES[category]
        multiplier = inputs.tier_multipliers.for_tier(inputs.customer_tier)

        return ScoreResult(
            framework=self.framework,
            scores=factors,
            base_score=base_score,
            multiplier=multiplier,
            final_score=round_half_up(base_score * multiplier, 2),
            flags=[ScoreFlag.from_category(category)],
            components={
                "category": category.value,
                "explicit": factors.moscow is not None,
                "inference_average": None if factors.moscow is not None else inference_average(factors, self.defaults),
            },
        )


__all__ = [
    "MoSCoWScoringEngine",
    "infer_moscow_category",
    "inference_average",
    "CATEGORY_LABELS",
    "CATEGORY_DESCRIPTIONS",
    "CATEGORY_COLORS",
]
