# feature_priority_dashboard/featureprio/services/scoring/dispatcher.py

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from featureprio.schemas.feature import FeatureRequest
from featureprio.services.products import stage_for_product
from featureprio.services.scoring.defaults import DEFAULT_TIER_MULTIPLIERS, default_weights_for_stage
from featureprio.services.scoring.interfaces import (
    ScoreFactors,
    ScoreInputs,
    ScoreResult,
    ScoringFramework,
    TierMultipliers,
    WeightConfig,
)
from featureprio.services.scoring.registry import get_engine, resolve_framework
from featureprio.services.scoring.utils import overlay

logger = logging.getLogger("featureprio.services.scoring")

FactorsLike = Union[ScoreFactors, Mapping[str, Any], None]


def as_factors(value: FactorsLike) -> ScoreFactors:
    if value is None:
        return ScoreFactors()
    if isinstance(value, ScoreFactors):
        return value
    return ScoreFactors.model_validate(dict(value))


def build_score_inputs(
    feature: FeatureRequest,
    scores: FactorsLike,
    overrides: FactorsLike = None,
    weights: Union[WeightConfig, Mapping[str, float], None] = None,
    multipliers: Union[TierMultipliers, Mapping[str, float], None] = None,
) -> ScoreInputs:
    """Map a feature plus raw factors onto engine inputs.

    Overrides win over scores factor by factor. Partial weights are overlaid on
    the product stage's defaults; partial multipliers on the default tier table.
    """
    merged = as_factors(scores).merged_with(as_factors(overrides) if overrides is not None else None)
    stage = stage_for_product(feature.product)
    return ScoreInputs(
        factors=merged,
        customer_tier=feature.customer_tier,
        product=feature.product,
        weights=overlay(default_weights_for_stage(stage), weights),
        tier_multipliers=overlay(DEFAULT_TIER_MULTIPLIERS, multipliers),
    )


def apply_framework_scoring(
    feature: FeatureRequest,
    scores: FactorsLike,
    framework: Union[ScoringFramework, str, None],
    overrides: FactorsLike = None,
    weights: Union[WeightConfig, Mapping[str, float], None] = None,
    multipliers: Union[TierMultipliers, Mapping[str, float], None] = None,
) -> ScoreResult:
    """Score one feature under the chosen framework.

    Unknown framework ids score as Weighted. No I/O; identical inputs give an
    identical result.
    """
    resolved = resolve_framework(framework)
    inputs = build_score_inputs(feature, scores, overrides, weights, multipliers)
    result = get_engine(resolved).compute(inputs)

    for warn in result.warnings:
        logger.warning(
            "scoring.warning",
            extra={"feature_id": feature.id, "framework": resolved.value, "warning": warn},
        )

    logger.debug(
        "scoring.computed",
        extra={
            "feature_id": feature.id,
            "framework": resolved.value,
            "base_score": result.base_score,
            "final_score": result.final_score,
        },
    )
    return result


__all__ = ["apply_framework_scoring", "build_score_inputs", "as_factors", "FactorsLike"]
