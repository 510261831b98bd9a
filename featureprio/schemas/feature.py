# feature_priority_dashboard/featureprio/schemas/feature.py

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Product(str, Enum):
    CHAT = "chat"
    CALLING = "calling"
    AI_AGENTS = "ai-agents"
    BYOA = "byoa"


class ProductStage(str, Enum):
    """Maturity stage of a product; decides which weighted factors apply."""
    MATURE = "mature"
    NEW = "new"


class CustomerTier(str, Enum):
    C1 = "C1"
    C2 = "C2"
    C3 = "C3"
    C4 = "C4"
    C5 = "C5"


class FeatureType(str, Enum):
    FEATURE = "feature"
    ENHANCEMENT = "enhancement"
    BUG = "bug"


class FeatureSource(str, Enum):
    FEATUREBASE = "featurebase"
    INTERNAL = "internal"
    SUPPORT = "support"


class FeatureComment(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    body: str
    created_at: Optional[str] = None


class FeatureRequest(BaseModel):
    """An issue imported from the tracker.

    Immutable once synced; a re-sync replaces the whole object. Accepts both the
    tracker's camelCase payload keys and snake_case field names.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    identifier: str = ""
    title: str
    description: str = ""
    url: Optional[str] = None

    product: Product = Product.CHAT
    customer_tier: CustomerTier = CustomerTier.C4
    type: FeatureType = FeatureType.FEATURE
    source: FeatureSource = FeatureSource.INTERNAL

    labels: List[str] = Field(default_factory=list)
    comments: List[FeatureComment] = Field(default_factory=list)

    project_name: Optional[str] = None
    tracker_state: Optional[str] = None
    tracker_priority: Optional[int] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


__all__ = [
    "Product",
    "ProductStage",
    "CustomerTier",
    "FeatureType",
    "FeatureSource",
    "FeatureComment",
    "FeatureRequest",
]
