# feature_priority_dashboard/featureprio/services/scoring/engines/rice.py

from __future__ import annotations

from typing import Dict, List

from featureprio.services.scoring.defaults import MAX_SCORE, RICE_DEFAULTS, RiceDefaults
from featureprio.services.scoring.interfaces import ScoreInputs, ScoreResult, ScoringFramework
from featureprio.services.scoring.utils import floor_denominator, round_half_up

IMPACT_VALUES: Dict[str, float] = {
    "minimal": 0.25,
    "low": 0.5,
    "medium": 1.0,
    "high": 2.0,
    "massive": 3.0,
}

CONFIDENCE_VALUES: Dict[str, float] = {
    "low": 0.5,
    "medium": 0.8,
    "high": 1.0,
}


def impact_value(label: str) -> float:
    """Map a RICE impact label (minimal..massive) to its numeric scale."""
    return IMPACT_VALUES[label.lower()]


def confidence_value(label: str) -> float:
    return CONFIDENCE_VALUES[label.lower()]


class RiceScoringEngine:
    """RICE scoring engine.

    RICE formula: (Reach * Impact * Confidence) / Effort
    - Reach: 1-10 (default 5)
    - Impact: 0.25-3 (default 1)
    - Confidence: 0-1 (default 0.8)
    - Effort: person-months, floored to 1 (default 5)

    The raw ratio is renormalised onto the shared 0-10 scale: base = min(round(raw * 10, 1), 10).
    The final score is NOT capped after the tier multiplier.
    """

    framework = ScoringFramework.RICE

    def __init__(self, defaults: RiceDefaults = RICE_DEFAULTS) -> None:
        self.defaults = defaults

    def compute(self, inputs: ScoreInputs) -> ScoreResult:
        factors = inputs.factors
        d = self.defaults

        reach = factors.reach if factors.reach is not None else d.reach
        impact = factors.impact if factors.impact is not None else d.impact
        confidence = factors.confidence if factors.confidence is not None else d.confidence
        raw_effort = factors.effort if factors.effort is not None else d.effort
        effort, warn = floor_denominator(raw_effort, d.min_effort)

        warnings: List[str] = []
        if warn:
            warnings.append(f"RICE: {warn}")

        raw_score = (reach * impact * confidence) / effort
        base_score = min(round_half_up(raw_score * 10, 1), MAX_SCORE)
        multiplier = inputs.tier_multipliers.for_tier(inputs.customer_tier)

        return ScoreResult(
            framework=self.framework,
            scores=factors,
            base_score=base_score,
            multiplier=multiplier,
            final_score=round_half_up(base_score * multiplier, 2),
            components={
                "reach": reach,
                "impact": impact,
                "confidence": confidence,
                "effort": effort,
                "raw_score": raw_score,
            },
            warnings=warnings,
        )


__all__ = ["RiceScoringEngine", "impact_value", "confidence_value", "IMPACT_VALUES", "CONFIDENCE_VALUES"]
