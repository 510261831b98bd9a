# feature_priority_dashboard/featureprio/services/scoring/interfaces.py

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Protocol

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from featureprio.schemas.feature import CustomerTier, Product


class ScoringFramework(str, Enum):
    """Supported scoring framework identifiers."""
    WEIGHTED = "weighted"
    RICE = "rice"
    ICE = "ice"
    VALUE_EFFORT = "value-effort"
    MOSCOW = "moscow"


class MoSCoWCategory(str, Enum):
    MUST = "must"
    SHOULD = "should"
    COULD = "could"
    WONT = "wont"


class ValueEffortQuadrant(str, Enum):
    QUICK_WINS = "quick-wins"
    BIG_BETS = "big-bets"
    FILL_INS = "fill-ins"
    TIME_SINKS = "time-sinks"


class ScoreFlag(str, Enum):
    """Display tags attached to a scored feature.

    General flags are derived from factor values and the feature itself; the
    quadrant and category members are emitted by the Value/Effort and MoSCoW
    engines respectively and share their string values.
    """
    PENDING_AI_SCORE = "pending-ai-score"
    HIGH_TIER_CUSTOMER = "high-tier-customer"
    HIGH_DEMAND = "high-demand"
    ENTERPRISE = "enterprise"
    STRATEGIC_PRIORITY = "strategic-priority"

    QUICK_WINS = "quick-wins"
    BIG_BETS = "big-bets"
    FILL_INS = "fill-ins"
    TIME_SINKS = "time-sinks"

    MUST = "must"
    SHOULD = "should"
    COULD = "could"
    WONT = "wont"

    @classmethod
    def from_quadrant(cls, quadrant: ValueEffortQuadrant) -> "ScoreFlag":
        return cls(quadrant.value)

    @classmethod
    def from_category(cls, category: MoSCoWCategory) -> "ScoreFlag":
        return cls(category.value)


class ScoreFactors(BaseModel):
    """Sparse factor map shared by all frameworks.

    Every factor is optional; each engine reads the subset it needs and applies
    its own defaults for the rest. Accepts camelCase names (as emitted by the
    LLM providers and the dashboard) or snake_case field names.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
        allow_inf_nan=False,
    )

    # Weighted (mature products)
    revenue_impact: Optional[float] = None
    enterprise_readiness: Optional[float] = None
    request_volume: Optional[float] = None
    competitive_parity: Optional[float] = None
    strategic_alignment: Optional[float] = None
    effort: Optional[float] = None

    # Weighted (new products)
    capability_gap: Optional[float] = None
    competitive_differentiation: Optional[float] = None

    # RICE / ICE
    reach: Optional[float] = None
    impact: Optional[float] = None
    confidence: Optional[float] = None
    ease: Optional[float] = None

    # Value vs Effort
    value: Optional[float] = None

    # MoSCoW
    moscow: Optional[MoSCoWCategory] = None

    def present(self) -> Dict[str, Any]:
        """Return only the factors that have a value."""
        return self.model_dump(exclude_none=True)

    def merged_with(self, other: Optional["ScoreFactors"]) -> "ScoreFactors":
        """Return a new map where factors set on `other` win."""
        if other is None:
            return self
        data = self.present()
        data.update(other.present())
        return ScoreFactors.model_validate(data)


NUMERIC_FACTORS: List[str] = [
    name for name in ScoreFactors.model_fields if name != "moscow"
]

# "revenueImpact" -> "revenue_impact"; field names map to themselves
FACTOR_FIELDS: Dict[str, str] = {
    **{to_camel(name): name for name in ScoreFactors.model_fields},
    **{name: name for name in ScoreFactors.model_fields},
}


def factor_field(name: str) -> Optional[str]:
    """Field name for a factor given in camelCase or snake_case; None if unknown."""
    return FACTOR_FIELDS.get(name.strip())


class WeightConfig(BaseModel):
    """Weight per weighted-scoring factor. Zero disables a factor."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True, allow_inf_nan=False)

    revenue_impact: float = 0.0
    enterprise_readiness: float = 0.0
    request_volume: float = 0.0
    competitive_parity: float = 0.0
    strategic_alignment: float = 0.0
    effort: float = 0.0
    capability_gap: float = 0.0
    competitive_differentiation: float = 0.0


class TierMultipliers(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    C1: float = 1.0
    C2: float = 1.0
    C3: float = 1.0
    C4: float = 1.0
    C5: float = 1.0

    def for_tier(self, tier: CustomerTier) -> float:
        # zero or missing means "no adjustment"
        return getattr(self, tier.value, None) or 1.0


class ScoreInputs(BaseModel):
    """Everything an engine needs; engines only read the subset they require."""
    model_config = ConfigDict(frozen=True)

    factors: ScoreFactors = Field(default_factory=ScoreFactors)
    customer_tier: CustomerTier = CustomerTier.C4
    product: Product = Product.CHAT
    weights: WeightConfig = Field(default_factory=WeightConfig)
    tier_multipliers: TierMultipliers = Field(default_factory=TierMultipliers)


class ScoreResult(BaseModel):
    """Result returned by every scoring engine.

    scores: merged factor map the engine scored
    base_score: framework formula result before the tier multiplier
    multiplier: tier multiplier applied
    final_score: base_score x multiplier (rounded, capped where the framework caps)
    flags: framework-specific flags (quadrant / category)
    components: resolved inputs and intermediates, for transparency
    warnings: non-fatal computation notes (e.g., denominator floored)
    """
    framework: ScoringFramework
    scores: ScoreFactors = Field(default_factory=ScoreFactors)
    base_score: float = 0.0
    multiplier: float = 1.0
    final_score: float = 0.0
    flags: List[ScoreFlag] = Field(default_factory=list)

    components: Dict[str, Any] = Field(default_factory=dict)
    warnings: List[str] = Field(default_factory=list)


class ScoringEngine(Protocol):
    """Protocol that all scoring engines must satisfy."""

    framework: ScoringFramework

    def compute(self, inputs: ScoreInputs) -> ScoreResult:  # pragma: no cover - interface only
        ...


__all__ = [
    "ScoringFramework",
    "MoSCoWCategory",
    "ValueEffortQuadrant",
    "ScoreFlag",
    "ScoreFactors",
    "NUMERIC_FACTORS",
    "FACTOR_FIELDS",
    "factor_field",
    "WeightConfig",
    "TierMultipliers",
    "ScoreInputs",
    "ScoreResult",
    "ScoringEngine",
]
