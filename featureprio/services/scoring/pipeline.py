# feature_priority_dashboard/featureprio/services/scoring/pipeline.py
"""
Full scoring pipeline: AI suggestions + manual overrides -> framework -> flags -> priority.

Every function here is pure. The service layer adds settings and logging on top.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Union

from pydantic import BaseModel

from featureprio.llm.model_compare import select_primary_result
from featureprio.llm.models import AIProvider, AIScoreRecord
from featureprio.schemas.feature import FeatureRequest
from featureprio.schemas.scored_feature import ScoredFeature
from featureprio.schemas.settings import ProductWeights
from featureprio.services.products import stage_for_product
from featureprio.services.scoring.dispatcher import FactorsLike, apply_framework_scoring, as_factors
from featureprio.services.scoring.flags import combine_flags, general_flags
from featureprio.services.scoring.interfaces import (
    ScoreFactors,
    ScoringFramework,
    TierMultipliers,
    WeightConfig,
    factor_field,
)
from featureprio.services.scoring.priority import map_score_to_priority

WeightsLike = Union[ProductWeights, WeightConfig, Mapping[str, float], None]
MultipliersLike = Union[TierMultipliers, Mapping[str, float], None]


class FrameworkScore(BaseModel):
    base_score: float
    final_score: float


def extract_ai_scores(
    ai_score: Optional[AIScoreRecord],
    default_provider: AIProvider = AIProvider.ANTHROPIC,
) -> ScoreFactors:
    """Numeric factor scores from the primary provider's suggestions.

    Unknown factor names are skipped, as is any numeric "moscow" suggestion.
    """
    primary = select_primary_result(ai_score, default_provider)
    if primary is None:
        return ScoreFactors()

    data: Dict[str, float] = {}
    for suggestion in primary.suggestions:
        field = factor_field(suggestion.factor)
        if field is None or field == "moscow":
            continue
        data[field] = suggestion.score
    return ScoreFactors.model_validate(data)


def merge_factors(ai_scores: FactorsLike, overrides: FactorsLike = None) -> ScoreFactors:
    """Overrides win over AI scores, factor by factor."""
    base = as_factors(ai_scores)
    if overrides is None:
        return base
    return base.merged_with(as_factors(overrides))


def _weights_for(weights: WeightsLike, feature: FeatureRequest) -> Union[WeightConfig, Mapping[str, float], None]:
    if isinstance(weights, ProductWeights):
        return weights.for_stage(stage_for_product(feature.product))
    return weights


def score_feature(
    feature: FeatureRequest,
    framework: Union[ScoringFramework, str, None],
    ai_score: Optional[AIScoreRecord] = None,
    overrides: FactorsLike = None,
    weights: WeightsLike = None,
    multipliers: MultipliersLike = None,
    default_provider: AIProvider = AIProvider.ANTHROPIC,
) -> ScoredFeature:
    has_ai_score = ai_score is not None and ai_score.has_usable_result()
    manual = as_factors(overrides) if overrides is not None else None
    scores = merge_factors(extract_ai_scores(ai_score, default_provider), manual)

    result = apply_framework_scoring(
        feature,
        scores,
        framework,
        weights=_weights_for(weights, feature),
        multipliers=multipliers,
    )
    flags = combine_flags(general_flags(feature, scores, has_ai_score), result.flags)

    return ScoredFeature(
        **feature.model_dump(include=set(FeatureRequest.model_fields)),
        scores=result.scores,
        manual_overrides=manual,
        ai_suggestions=ai_score,
        base_score=result.base_score,
        multiplier=result.multiplier,
        final_score=result.final_score,
        flags=flags,
        mapped_priority=map_score_to_priority(result.final_score),
        framework=result.framework,
        components=result.components,
        warnings=result.warnings,
    )


def score_and_sort_features(
    features: Iterable[FeatureRequest],
    framework: Union[ScoringFramework, str, None],
    ai_scores: Optional[Mapping[str, AIScoreRecord]] = None,
    overrides: Optional[Mapping[str, FactorsLike]] = None,
    weights: WeightsLike = None,
    multipliers: MultipliersLike = None,
    default_provider: AIProvider = AIProvider.ANTHROPIC,
) -> List[ScoredFeature]:
    """Score every feature; AI-scored features first, then final score descending."""
    ai_scores = ai_scores or {}
    overrides = overrides or {}
    scored = [
        score_feature(
            feature,
            framework,
            ai_scores.get(feature.id),
            overrides.get(feature.id),
            weights,
            multipliers,
            default_provider,
        )
        for feature in features
    ]
    return sort_scored_features(scored)


def sort_scored_features(scored: Iterable[ScoredFeature]) -> List[ScoredFeature]:
    return sorted(scored, key=lambda s: (not s.has_ai_score, -s.final_score))


def compare_framework_scores(
    feature: FeatureRequest,
    ai_score: Optional[AIScoreRecord] = None,
    overrides: FactorsLike = None,
    weights: WeightsLike = None,
    multipliers: MultipliersLike = None,
    default_provider: AIProvider = AIProvider.ANTHROPIC,
) -> Dict[ScoringFramework, FrameworkScore]:
    """Base and final score of one feature under every framework."""
    results: Dict[ScoringFramework, FrameworkScore] = {}
    for framework in ScoringFramework:
        scored = score_feature(feature, framework, ai_score, overrides, weights, multipliers, default_provider)
        results[framework] = FrameworkScore(base_score=scored.base_score, final_score=scored.final_score)
    return results


__all__ = [
    "FrameworkScore",
    "WeightsLike",
    "MultipliersLike",
    "extract_ai_scores",
    "merge_factors",
    "score_feature",
    "score_and_sort_features",
    "sort_scored_features",
    "compare_framework_scores",
]
