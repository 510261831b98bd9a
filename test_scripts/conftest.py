# Shared factories for the scoring tests
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import pytest

from featureprio.llm.models import AIErrorCode, AIModelResult, AIProvider, AIScoreRecord, AIScoringSuggestion
from featureprio.schemas.feature import CustomerTier, FeatureRequest, Product

logger = logging.getLogger(__name__)


@pytest.fixture
def make_feature():
    """Build a FeatureRequest with sensible defaults (chat, C4)."""

    def _make(
        feature_id: str = "f-1",
        product: Product = Product.CHAT,
        customer_tier: CustomerTier = CustomerTier.C4,
        **kwargs: Any,
    ) -> FeatureRequest:
        kwargs.setdefault("title", f"Feature {feature_id}")
        return FeatureRequest(id=feature_id, product=product, customer_tier=customer_tier, **kwargs)

    return _make


@pytest.fixture
def make_result():
    """Build one provider's AIModelResult from a {factor: score} dict."""

    def _make(
        provider: AIProvider,
        scores: Optional[Dict[str, float]] = None,
        error: Optional[AIErrorCode] = None,
        tokens_used: int = 100,
        cost: float = 0.01,
    ) -> AIModelResult:
        suggestions = [
            AIScoringSuggestion(factor=factor, score=score, reasoning=f"{factor} reasoning")
            for factor, score in (scores or {}).items()
        ]
        return AIModelResult(
            model=provider,
            suggestions=suggestions,
            tokens_used=tokens_used if error is None else 0,
            cost=cost if error is None else 0.0,
            error=error,
        )

    return _make


@pytest.fixture
def make_record(make_result):
    """Build an AIScoreRecord: make_record(openai={...}, anthropic={...}, gemini=AIErrorCode.API_ERROR)."""

    def _make(feature_id: str = "f-1", **providers: Any) -> AIScoreRecord:
        slots: Dict[str, AIModelResult] = {}
        for name, spec in providers.items():
            provider = AIProvider(name)
            if isinstance(spec, AIErrorCode):
                slots[name] = make_result(provider, error=spec)
            else:
                slots[name] = make_result(provider, spec)
        return AIScoreRecord(feature_id=feature_id, **slots)

    return _make
