# feature_priority_dashboard/featureprio/services/products.py
"""
Product catalogue and the label/project heuristics used to classify tracker issues.

tracker_sync uses these to turn raw tracker issues into FeatureRequests; the
weighted engine uses the product stage to pick its factor set. Depends only on
the feature schema.
"""

from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict

from featureprio.schemas.feature import CustomerTier, FeatureSource, FeatureType, Product, ProductStage


class ProductConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: Product
    name: str
    stage: ProductStage
    project_patterns: List[str]
    label_patterns: List[str]


PRODUCT_CONFIGS: List[ProductConfig] = [
    ProductConfig(
        id=Product.CHAT,
        name="Chat & Messaging",
        stage=ProductStage.MATURE,
        project_patterns=[
            "Product Icebox (In-app Messaging)",
            "Product Icebox (UI Kits)",
            "Product Icebox (SDKs)",
            "In-app Messaging",
            "Chat",
            "UI Kits",
            "SDKs",
        ],
        label_patterns=["Chat", "Messaging", "UI Kits", "Chat SDKs", "In-app Messaging"],
    ),
    ProductConfig(
        id=Product.CALLING,
        name="Voice & Video Calling",
        stage=ProductStage.MATURE,
        project_patterns=[
            "Product Icebox (Voice & Video Calling)",
            "Voice & Video Calling",
            "Calling",
            "Calls SDKs",
        ],
        label_patterns=["Calling", "Voice", "Video", "Calls SDKs", "Voice & Video"],
    ),
    ProductConfig(
        id=Product.AI_AGENTS,
        name="AI Agents Platform",
        stage=ProductStage.NEW,
        project_patterns=["Product Icebox (AI Agents)", "AI Agents", "Agentic-Service", "AI Platform"],
        label_patterns=["AI", "Agents", "AI Agents", "Agentic-Service", "AI Platform"],
    ),
    ProductConfig(
        id=Product.BYOA,
        name="Bring Your Own Agent",
        stage=ProductStage.NEW,
        project_patterns=["Product Icebox (BYOA)", "BYOA", "Bring Your Own Agent"],
        label_patterns=["BYOA", "Bring Your Own Agent"],
    ),
]

_CONFIGS_BY_ID: Dict[Product, ProductConfig] = {c.id: c for c in PRODUCT_CONFIGS}

# "C2", "c 3", "Customer Priority → C1", "Customer Priority 4"
_TIER_PATTERN = re.compile(r"(?:Customer Priority|C)(?:\s*→?\s*)?(C?[1-5])", re.IGNORECASE)

DEFAULT_PRODUCT = Product.CHAT
DEFAULT_CUSTOMER_TIER = CustomerTier.C4


def get_product_config(product: Product) -> Optional[ProductConfig]:
    return _CONFIGS_BY_ID.get(product)


def stage_for_product(product: Product) -> ProductStage:
    config = get_product_config(product)
    if config is not None and config.stage == ProductStage.NEW:
        return ProductStage.NEW
    return ProductStage.MATURE


def product_from_project(project_name: Optional[str]) -> Product:
    """Match a tracker project name against product patterns (substring, case-insensitive)."""
    if not project_name:
        return DEFAULT_PRODUCT
    lower_name = project_name.lower()
    for config in PRODUCT_CONFIGS:
        for pattern in config.project_patterns:
            if pattern.lower() in lower_name:
                return config.id
    return DEFAULT_PRODUCT


def product_from_labels(labels: Iterable[str]) -> Optional[Product]:
    lower_labels = [label.lower() for label in labels]
    for config in PRODUCT_CONFIGS:
        for pattern in config.label_patterns:
            needle = pattern.lower()
            if any(needle in label for label in lower_labels):
                return config.id
    return None


def customer_tier_from_labels(labels: Iterable[str]) -> CustomerTier:
    for label in labels:
        match = _TIER_PATTERN.search(label)
        if match:
            tier = match.group(1).upper()
            if not tier.startswith("C"):
                tier = f"C{tier}"
            return CustomerTier(tier)
    return DEFAULT_CUSTOMER_TIER


def feature_type_from_labels(labels: Iterable[str]) -> FeatureType:
    lower_labels = [label.lower() for label in labels]
    if any("bug" in label or "defect" in label for label in lower_labels):
        return FeatureType.BUG
    if any("enhancement" in label or "improve" in label for label in lower_labels):
        return FeatureType.ENHANCEMENT
    return FeatureType.FEATURE


def feature_source_from_labels(labels: Iterable[str]) -> FeatureSource:
    lower_labels = [label.lower() for label in labels]
    if any("featurebase" in label for label in lower_labels):
        return FeatureSource.FEATUREBASE
    if any("support" in label or "zendesk" in label for label in lower_labels):
        return FeatureSource.SUPPORT
    return FeatureSource.INTERNAL


def product_display_name(product: Product) -> str:
    config = get_product_config(product)
    return config.name if config else product.value


__all__ = [
    "ProductConfig",
    "PRODUCT_CONFIGS",
    "DEFAULT_PRODUCT",
    "DEFAULT_CUSTOMER_TIER",
    "get_product_config",
    "stage_for_product",
    "product_from_project",
    "product_from_labels",
    "customer_tier_from_labels",
    "feature_type_from_labels",
    "feature_source_from_labels",
    "product_display_name",
]
