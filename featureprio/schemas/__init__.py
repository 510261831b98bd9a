# feature_priority_dashboard/featureprio/schemas/__init__.py

# Only the leaf feature schema is re-exported here; override, scored_feature and
# settings import the scoring package, which itself imports schemas.feature.
from .feature import (
    CustomerTier,
    FeatureComment,
    FeatureRequest,
    FeatureSource,
    FeatureType,
    Product,
    ProductStage,
)

__all__ = [
    "CustomerTier",
    "FeatureComment",
    "FeatureRequest",
    "FeatureSource",
    "FeatureType",
    "Product",
    "ProductStage",
]
