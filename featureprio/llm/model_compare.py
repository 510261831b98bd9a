# feature_priority_dashboard/featureprio/llm/model_compare.py
"""
Reconciling the answers of several LLM providers for one feature.

The providers are called elsewhere; everything here works on the stored
results only.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from featureprio.llm.models import (
    AIModelResult,
    AIProvider,
    AIScoreRecord,
    AIScoringSuggestion,
    FactorDisagreement,
    ModelComparison,
)
from featureprio.services.scoring.utils import round_half_up

PROVIDER_ORDER: Tuple[AIProvider, ...] = (AIProvider.OPENAI, AIProvider.ANTHROPIC, AIProvider.GEMINI)

AGREEMENT_TOLERANCE = 1.0
DISAGREEMENT_THRESHOLD = 2.0


def provider_preference(default_provider: AIProvider = AIProvider.ANTHROPIC) -> List[AIProvider]:
    """Default provider first, then the rest in fixed order."""
    return [default_provider] + [p for p in PROVIDER_ORDER if p != default_provider]


def select_primary_result(
    record: Optional[AIScoreRecord],
    default_provider: AIProvider = AIProvider.ANTHROPIC,
) -> Optional[AIModelResult]:
    """First usable (non-errored) result in preference order, or None."""
    if record is None:
        return None
    for provider in provider_preference(default_provider):
        result = record.result_for(provider)
        if result is not None and result.ok:
            return result
    return None


def _scores_by_factor(result: AIModelResult) -> Dict[str, float]:
    scores: Dict[str, float] = {}
    for suggestion in result.suggestions:
        scores.setdefault(suggestion.factor, suggestion.score)
    return scores


def compare_model_results(a: AIModelResult, b: AIModelResult) -> ModelComparison:
    scores_a = _scores_by_factor(a)
    scores_b = _scores_by_factor(b)
    shared = [factor for factor in scores_a if factor in scores_b]

    disagreements: List[FactorDisagreement] = []
    agreements = 0
    for factor in shared:
        difference = abs(scores_a[factor] - scores_b[factor])
        if difference <= AGREEMENT_TOLERANCE:
            agreements += 1
        if difference >= DISAGREEMENT_THRESHOLD:
            disagreements.append(
                FactorDisagreement(
                    factor=factor,
                    score_a=scores_a[factor],
                    score_b=scores_b[factor],
                    difference=difference,
                )
            )

    agreement_score: Optional[int] = None
    if shared:
        agreement_score = int(round_half_up(agreements / len(shared) * 100))

    disagreements.sort(key=lambda d: d.difference, reverse=True)
    return ModelComparison(
        provider_a=a.model,
        provider_b=b.model,
        agreement_score=agreement_score,
        disagreements=disagreements,
        total_tokens=a.tokens_used + b.tokens_used,
        total_cost=a.cost + b.cost,
    )


def merge_model_results(
    record: Optional[AIScoreRecord],
    default_provider: AIProvider = AIProvider.ANTHROPIC,
) -> Optional[AIModelResult]:
    """Primary provider's suggestions, gap-filled from the other usable providers.

    Tokens and cost are summed over every usable result. Returns None when no
    provider produced a usable result.
    """
    primary = select_primary_result(record, default_provider)
    if primary is None or record is None:
        return None

    suggestions: List[AIScoringSuggestion] = list(primary.suggestions)
    covered = {s.factor for s in suggestions}
    tokens = primary.tokens_used
    cost = primary.cost

    for provider in provider_preference(default_provider):
        result = record.result_for(provider)
        if result is None or not result.ok or result is primary:
            continue
        tokens += result.tokens_used
        cost += result.cost
        for suggestion in result.suggestions:
            if suggestion.factor not in covered:
                suggestions.append(suggestion)
                covered.add(suggestion.factor)

    return primary.model_copy(update={"suggestions": suggestions, "tokens_used": tokens, "cost": cost})


__all__ = [
    "PROVIDER_ORDER",
    "provider_preference",
    "select_primary_result",
    "compare_model_results",
    "merge_model_results",
]
