# feature_priority_dashboard/featureprio/schemas/settings.py

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from featureprio.llm.models import AIProvider
from featureprio.schemas.feature import Product, ProductStage
from featureprio.services.products import stage_for_product
from featureprio.services.scoring.defaults import (
    DEFAULT_TIER_MULTIPLIERS,
    MATURE_PRODUCT_WEIGHTS,
    NEW_PRODUCT_WEIGHTS,
)
from featureprio.services.scoring.interfaces import ScoringFramework, TierMultipliers, WeightConfig
from featureprio.services.scoring.registry import resolve_framework
from featureprio.services.scoring.utils import overlay


class ProductWeights(BaseModel):
    """Weighted-scoring weights per product stage.

    A partial mapping for either stage is overlaid on that stage's defaults.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    mature: WeightConfig = Field(default_factory=lambda: MATURE_PRODUCT_WEIGHTS)
    new: WeightConfig = Field(default_factory=lambda: NEW_PRODUCT_WEIGHTS)

    @field_validator("mature", mode="before")
    @classmethod
    def _overlay_mature(cls, v: Any) -> Any:
        return overlay(MATURE_PRODUCT_WEIGHTS, v) if isinstance(v, dict) else v

    @field_validator("new", mode="before")
    @classmethod
    def _overlay_new(cls, v: Any) -> Any:
        return overlay(NEW_PRODUCT_WEIGHTS, v) if isinstance(v, dict) else v

    def for_stage(self, stage: ProductStage) -> WeightConfig:
        return self.new if stage == ProductStage.NEW else self.mature


class ScoringSettings(BaseModel):
    """User-editable scoring configuration (active framework, weights, multipliers)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    active_framework: ScoringFramework = ScoringFramework.WEIGHTED
    weights: ProductWeights = Field(default_factory=ProductWeights)
    tier_multipliers: TierMultipliers = Field(default_factory=lambda: DEFAULT_TIER_MULTIPLIERS)
    default_model: AIProvider = AIProvider.ANTHROPIC

    @field_validator("active_framework", mode="before")
    @classmethod
    def _resolve_framework(cls, v: Any) -> ScoringFramework:
        return resolve_framework(v)

    @field_validator("tier_multipliers", mode="before")
    @classmethod
    def _overlay_multipliers(cls, v: Any) -> Any:
        return overlay(DEFAULT_TIER_MULTIPLIERS, v) if isinstance(v, dict) else v

    def weights_for(self, product: Product) -> WeightConfig:
        return self.weights.for_stage(stage_for_product(product))


__all__ = ["ProductWeights", "ScoringSettings"]
