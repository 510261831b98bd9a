# feature_priority_dashboard/featureprio/services/scoring/defaults.py
"""
Default-value tables for every scoring framework.

Engines resolve absent factors from these tables before any formula runs, so
the defaulting rules live in one place and can be asserted on directly.
"""

from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, ConfigDict

from featureprio.schemas.feature import ProductStage
from featureprio.services.scoring.interfaces import (
    MoSCoWCategory,
    TierMultipliers,
    WeightConfig,
)


class RiceDefaults(BaseModel):
    model_config = ConfigDict(frozen=True)

    reach: float = 5.0  # 1-10
    impact: float = 1.0  # 0.25-3
    confidence: float = 0.8  # 0-1
    effort: float = 5.0  # person-months
    min_effort: float = 1.0


class IceDefaults(BaseModel):
    model_config = ConfigDict(frozen=True)

    impact: float = 5.0
    confidence: float = 5.0
    ease: float = 5.0
    # ease = ease_from_effort_base - effort, when only effort is known
    ease_from_effort_base: float = 11.0


class ValueEffortDefaults(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: float = 5.0
    effort: float = 5.0
    min_effort: float = 1.0
    high_threshold: float = 5.0  # strictly greater means "high"


class MoSCoWDefaults(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: MoSCoWCategory = MoSCoWCategory.COULD
    must_threshold: float = 8.0
    should_threshold: float = 6.0
    could_threshold: float = 4.0
    # impact at or below this is treated as a RICE-scale (0.25-3) value
    rice_impact_ceiling: float = 3.0
    rice_impact_scale: float = 3.33


RICE_DEFAULTS = RiceDefaults()
ICE_DEFAULTS = IceDefaults()
VALUE_EFFORT_DEFAULTS = ValueEffortDefaults()
MOSCOW_DEFAULTS = MoSCoWDefaults()

MOSCOW_CATEGORY_SCORES: Dict[MoSCoWCategory, float] = {
    MoSCoWCategory.MUST: 10.0,
    MoSCoWCategory.SHOULD: 7.0,
    MoSCoWCategory.COULD: 4.0,
    MoSCoWCategory.WONT: 1.0,
}

# Frameworks normalised to a 0-10 scale cap their base score here.
MAX_SCORE = 10.0
# Weighted scoring inverts effort on this scale (low effort -> high contribution).
EFFORT_SCALE_MAX = 10.0

MATURE_PRODUCT_WEIGHTS = WeightConfig(
    revenue_impact=0.30,
    enterprise_readiness=0.20,
    request_volume=0.15,
    competitive_parity=0.15,
    strategic_alignment=0.10,
    effort=0.10,
)

NEW_PRODUCT_WEIGHTS = WeightConfig(
    request_volume=0.15,
    strategic_alignment=0.25,
    effort=0.15,
    capability_gap=0.30,
    competitive_differentiation=0.15,
)

DEFAULT_TIER_MULTIPLIERS = TierMultipliers(C1=1.3, C2=1.25, C3=1.1, C4=1.0, C5=1.0)


def default_weights_for_stage(stage: ProductStage) -> WeightConfig:
    return NEW_PRODUCT_WEIGHTS if stage == ProductStage.NEW else MATURE_PRODUCT_WEIGHTS


__all__ = [
    "RiceDefaults",
    "IceDefaults",
    "ValueEffortDefaults",
    "MoSCoWDefaults",
    "RICE_DEFAULTS",
    "ICE_DEFAULTS",
    "VALUE_EFFORT_DEFAULTS",
    "MOSCOW_DEFAULTS",
    "MOSCOW_CATEGORY_SCORES",
    "MAX_SCORE",
    "EFFORT_SCALE_MAX",
    "MATURE_PRODUCT_WEIGHTS",
    "NEW_PRODUCT_WEIGHTS",
    "DEFAULT_TIER_MULTIPLIERS",
    "default_weights_for_stage",
]
