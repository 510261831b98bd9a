# feature_priority_dashboard/featureprio/services/scoring/engines/ice.py

from __future__ import annotations

from featureprio.services.scoring.defaults import ICE_DEFAULTS, MAX_SCORE, IceDefaults
from featureprio.services.scoring.interfaces import ScoreFactors, ScoreInputs, ScoreResult, ScoringFramework
from featureprio.services.scoring.utils import round_half_up


def normalize_confidence(confidence: float) -> float:
    """Bring confidence onto the 1-10 ICE scale.

    Values <= 1 are RICE-style fractions and get scaled x10; larger values are
    already native ICE values.
    """
    if confidence <= 1:
        return confidence * 10
    return confidence


def resolve_ease(factors: ScoreFactors, defaults: IceDefaults = ICE_DEFAULTS) -> float:
    """Ease is effort's inverse on the shared 1-10 scale when not given directly."""
    if factors.ease is not None:
        return factors.ease
    if factors.effort is not None:
        return defaults.ease_from_effort_base - factors.effort
    return defaults.ease


class IceScoringEngine:
    """ICE scoring engine.

    ICE formula: Impact * Confidence * Ease, each on 1-10.
    raw = (I * C * E) / 100; base = min(round(raw * 10, 1), 10).
    """

    framework = ScoringFramework.ICE

    def __init__(self, defaults: IceDefaults = ICE_DEFAULTS) -> None:
        self.defaults = defaults

    def compute(self, inputs: ScoreInputs) -> ScoreResult:
        factors = inputs.factors
        d = self.defaults

        impact = factors.impact if factors.impact is not None else d.impact
        confidence = (
            normalize_confidence(factors.confidence) if factors.confidence is not None else d.confidence
        )
        ease = resolve_ease(factors, d)

        raw_score = (impact * confidence * ease) / 100
        base_score = min(round_half_up(raw_score * 10, 1), MAX_SCORE)
        multiplier = inputs.tier_multipliers.for_tier(inputs.customer_tier)

        return ScoreResult(
            framework=self.framework,
            scores=factors,
            base_score=base_score,
            multiplier=multiplier,
            final_score=round_half_up(base_score * multiplier, 2),
            components={
                "impact": impact,
                "confidence": confidence,
                "ease": ease,
                "raw_score": raw_score,
            },
        )


__all__ = ["IceScoringEngine", "normalize_confidence", "resolve_ease"]
