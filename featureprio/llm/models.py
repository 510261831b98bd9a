# feature_priority_dashboard/featureprio/llm/models.py

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AIProvider(str, Enum):
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    GEMINI = "gemini"


class AIErrorCode(str, Enum):
    API_KEY_MISSING = "API_KEY_MISSING"
    API_KEY_INVALID = "API_KEY_INVALID"
    API_ERROR = "API_ERROR"


class SuggestionConfidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class AIScoringSuggestion(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True, allow_inf_nan=False)

    factor: str  # factor name as emitted by the provider, e.g. "revenueImpact"
    score: float
    reasoning: str = ""
    confidence: SuggestionConfidence = SuggestionConfidence.MEDIUM
    evidence: Optional[str] = None


class AIModelResult(BaseModel):
    """One provider's answer for one feature.

    Providers are independent; an errored result carries `error` and is ignored
    when extracting factors.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    model: AIProvider
    suggestions: List[AIScoringSuggestion] = Field(default_factory=list)
    total_score: float = 0.0
    summary: str = ""
    tokens_used: int = 0
    cost: float = 0.0
    error: Optional[AIErrorCode] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class AIScoreRecord(BaseModel):
    """Stored AI results of one feature, one slot per provider."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    feature_id: Optional[str] = None
    openai: Optional[AIModelResult] = None
    anthropic: Optional[AIModelResult] = None
    gemini: Optional[AIModelResult] = None
    scored_at: Optional[str] = None

    def result_for(self, provider: AIProvider) -> Optional[AIModelResult]:
        return getattr(self, provider.value)

    def results(self) -> Dict[AIProvider, AIModelResult]:
        found: Dict[AIProvider, AIModelResult] = {}
        for provider in AIProvider:
            result = self.result_for(provider)
            if result is not None:
                found[provider] = result
        return found

    def has_usable_result(self) -> bool:
        return any(result.ok for result in self.results().values())


class FactorDisagreement(BaseModel):
    factor: str
    score_a: float
    score_b: float
    difference: float


class ModelComparison(BaseModel):
    """Agreement between two providers' suggestions.

    agreement_score: % of shared factors whose scores are within 1 point (None when
    the providers share no factor)
    disagreements: shared factors differing by 2+ points, largest first
    """
    provider_a: AIProvider
    provider_b: AIProvider
    agreement_score: Optional[int] = None
    disagreements: List[FactorDisagreement] = Field(default_factory=list)
    total_tokens: int = 0
    total_cost: float = 0.0


__all__ = [
    "AIProvider",
    "AIErrorCode",
    "SuggestionConfidence",
    "AIScoringSuggestion",
    "AIModelResult",
    "AIScoreRecord",
    "FactorDisagreement",
    "ModelComparison",
]
