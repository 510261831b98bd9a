# feature_priority_dashboard/featureprio/services/scoring/flags.py

from __future__ import annotations

from typing import Iterable, List, Optional

from featureprio.schemas.feature import CustomerTier, FeatureRequest
from featureprio.services.scoring.interfaces import ScoreFactors, ScoreFlag

HIGH_TIERS = (CustomerTier.C1, CustomerTier.C2)
HIGH_FACTOR_THRESHOLD = 8.0


def _is_high(value: Optional[float]) -> bool:
    return value is not None and value >= HIGH_FACTOR_THRESHOLD


def general_flags(feature: FeatureRequest, factors: ScoreFactors, has_ai_score: bool) -> List[ScoreFlag]:
    """Framework-independent flags, always in this order:
    pending-ai-score, high-tier-customer, high-demand, enterprise, strategic-priority.
    """
    flags: List[ScoreFlag] = []
    if not has_ai_score:
        flags.append(ScoreFlag.PENDING_AI_SCORE)
    if feature.customer_tier in HIGH_TIERS:
        flags.append(ScoreFlag.HIGH_TIER_CUSTOMER)
    if _is_high(factors.request_volume):
        flags.append(ScoreFlag.HIGH_DEMAND)
    if _is_high(factors.enterprise_readiness):
        flags.append(ScoreFlag.ENTERPRISE)
    if _is_high(factors.strategic_alignment):
        flags.append(ScoreFlag.STRATEGIC_PRIORITY)
    return flags


def combine_flags(general: Iterable[ScoreFlag], framework_flags: Iterable[ScoreFlag]) -> List[ScoreFlag]:
    """General flags first, then the strategy's quadrant/category flags."""
    return [*general, *framework_flags]


__all__ = ["general_flags", "combine_flags", "HIGH_TIERS", "HIGH_FACTOR_THRESHOLD"]
