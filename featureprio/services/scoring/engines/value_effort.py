# feature_priority_dashboard/featureprio/services/scoring/engines/value_effort.py

from __future__ import annotations

from typing import Dict, List

from featureprio.services.scoring.defaults import MAX_SCORE, VALUE_EFFORT_DEFAULTS, ValueEffortDefaults
from featureprio.services.scoring.interfaces import (
    ScoreFlag,
    ScoreInputs,
    ScoreResult,
    ScoringFramework,
    ValueEffortQuadrant,
)
from featureprio.services.scoring.utils import floor_denominator, round_half_up

QUADRANT_LABELS: Dict[ValueEffortQuadrant, str] = {
    ValueEffortQuadrant.QUICK_WINS: "Quick Wins",
    ValueEffortQuadrant.BIG_BETS: "Big Bets",
    ValueEffortQuadrant.FILL_INS: "Fill-ins",
    ValueEffortQuadrant.TIME_SINKS: "Time Sinks",
}

QUADRANT_DESCRIPTIONS: Dict[ValueEffortQuadrant, str] = {
    ValueEffortQuadrant.QUICK_WINS: "High value, low effort - do these first",
    ValueEffortQuadrant.BIG_BETS: "High value, high effort - plan carefully",
    ValueEffortQuadrant.FILL_INS: "Low value, low effort - nice to have",
    ValueEffortQuadrant.TIME_SINKS: "Low value, high effort - avoid",
}

QUADRANT_COLORS: Dict[ValueEffortQuadrant, str] = {
    ValueEffortQuadrant.QUICK_WINS: "green",
    ValueEffortQuadrant.BIG_BETS: "blue",
    ValueEffortQuadrant.FILL_INS: "yellow",
    ValueEffortQuadrant.TIME_SINKS: "red",
}

# quick wins first, time sinks last
QUADRANT_PRIORITY: Dict[ValueEffortQuadrant, int] = {
    ValueEffortQuadrant.QUICK_WINS: 4,
    ValueEffortQuadrant.BIG_BETS: 3,
    ValueEffortQuadrant.FILL_INS: 2,
    ValueEffortQuadrant.TIME_SINKS: 1,
}


def get_quadrant(
    value: float,
    effort: float,
    threshold: float = VALUE_EFFORT_DEFAULTS.high_threshold,
) -> ValueEffortQuadrant:
    """Classify on a strict '> threshold' test; exactly 5 counts as low."""
    high_value = value > threshold
    high_effort = effort > threshold

    if high_value and not high_effort:
        return ValueEffortQuadrant.QUICK_WINS
    if high_value and high_effort:
        return ValueEffortQuadrant.BIG_BETS
    if not high_effort:
        return ValueEffortQuadrant.FILL_INS
    return ValueEffortQuadrant.TIME_SINKS


class ValueEffortScoringEngine:
    """Value vs Effort 2x2 matrix engine.

    raw = (value / max(effort, 1)) * 2; base = min(round(raw * 10, 1), 10).
    Emits the quadrant as a flag.
    """

    framework = ScoringFramework.VALUE_EFFORT

    def __init__(self, defaults: ValueEffortDefaults = VALUE_EFFORT_DEFAULTS) -> None:
        self.defaults = defaults

    def compute(self, inputs: ScoreInputs) -> ScoreResult:
        factors = inputs.factors
        d = self.defaults

        value = factors.value if factors.value is not None else d.value
        effort = factors.effort if factors.effort is not None else d.effort
        quadrant = get_quadrant(value, effort, d.high_threshold)

        denominator, warn = floor_denominator(effort, d.min_effort)
        warnings: List[str] = []
        if warn:
            warnings.append(f"VALUE_EFFORT: {warn}")

        raw_score = (value / denominator) * 2
        base_score = min(round_half_up(raw_score * 10, 1), MAX_SCORE)
        multiplier = inputs.tier_multipliers.for_tier(inputs.customer_tier)

        return ScoreResult(
            framework=self.framework,
            scores=factors,
            base_score=base_score,
            multiplier=multiplier,
            final_score=round_half_up(base_score * multiplier, 2),
            flags=[ScoreFlag.from_quadrant(quadrant)],
            components={
                "value": value,
                "effort": effort,
                "quadrant": quadrant.value,
                "raw_score": raw_score,
            },
            warnings=warnings,
        )


__all__ = [
    "ValueEffortScoringEngine",
    "get_quadrant",
    "QUADRANT_LABELS",
    "QUADRANT_DESCRIPTIONS",
    "QUADRANT_COLORS",
    "QUADRANT_PRIORITY",
]
