# feature_priority_dashboard/featureprio/services/scoring/engines/weighted.py

from __future__ import annotations

from typing import Any, Dict, List, Tuple

from featureprio.schemas.feature import ProductStage
from featureprio.services.products import stage_for_product
from featureprio.services.scoring.defaults import EFFORT_SCALE_MAX, MAX_SCORE
from featureprio.services.scoring.interfaces import (
    ScoreInputs,
    ScoreResult,
    ScoringFramework,
)
from featureprio.services.scoring.utils import round_half_up

# (factor field, display label), in breakdown order
MATURE_FACTORS: List[Tuple[str, str]] = [
    ("revenue_impact", "Revenue Impact"),
    ("enterprise_readiness", "Enterprise Readiness"),
    ("request_volume", "Request Volume"),
    ("competitive_parity", "Competitive Parity"),
    ("strategic_alignment", "Strategic Alignment"),
    ("effort", "Effort (inverse)"),
]

NEW_FACTORS: List[Tuple[str, str]] = [
    ("capability_gap", "Capability Gap Filled"),
    ("strategic_alignment", "Strategic Alignment"),
    ("competitive_differentiation", "Competitive Differentiation"),
    ("request_volume", "Request Volume"),
    ("effort", "Effort (inverse)"),
]

_WEIGHT_SUM_TOLERANCE = 1e-6


def factors_for_stage(stage: ProductStage) -> List[Tuple[str, str]]:
    return NEW_FACTORS if stage == ProductStage.NEW else MATURE_FACTORS


class WeightedScoringEngine:
    """Weighted multi-factor scoring engine.

    Formula: sum(weight[f] * score[f]) over the product stage's factor set
    - Only factors with weight > 0 AND a present score contribute (partial scoring is legal)
    - Effort is inverted: contribution uses (10 - effort)
    - final = min(round(base * tier multiplier, 2), 10); Weighted is the only framework
      that caps the final score
    """

    framework = ScoringFramework.WEIGHTED

    def compute(self, inputs: ScoreInputs) -> ScoreResult:
        factors = inputs.factors
        weights = inputs.weights
        stage = stage_for_product(inputs.product)

        breakdown: List[Dict[str, Any]] = []
        total = 0.0
        weight_sum = 0.0
        for name, label in factors_for_stage(stage):
            weight = getattr(weights, name)
            weight_sum += max(weight, 0.0)
            score = getattr(factors, name)
            if weight <= 0 or score is None:
                continue
            if name == "effort":
                score = EFFORT_SCALE_MAX - score
            contribution = weight * score
            breakdown.append(
                {"factor": label, "key": name, "weight": weight, "score": score, "contribution": contribution}
            )
            total += contribution

        warnings: List[str] = []
        if abs(weight_sum - 1.0) > _WEIGHT_SUM_TOLERANCE:
            warnings.append(f"WEIGHTED: {stage.value} weights sum to {weight_sum:g}, expected 1.0.")

        multiplier = inputs.tier_multipliers.for_tier(inputs.customer_tier)
        base_score = round_half_up(total, 2)
        final_score = min(round_half_up(base_score * multiplier, 2), MAX_SCORE)

        return ScoreResult(
            framework=self.framework,
            scores=factors,
            base_score=base_score,
            multiplier=multiplier,
            final_score=final_score,
            components={
                "stage": stage.value,
                "breakdown": breakdown,
                "weighted_sum": total,
            },
            warnings=warnings,
        )


__all__ = ["WeightedScoringEngine", "MATURE_FACTORS", "NEW_FACTORS", "factors_for_stage"]
