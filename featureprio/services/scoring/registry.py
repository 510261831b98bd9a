# feature_priority_dashboard/featureprio/services/scoring/registry.py

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from featureprio.schemas.feature import Product
from featureprio.services.products import stage_for_product
from featureprio.services.scoring.defaults import MOSCOW_CATEGORY_SCORES, default_weights_for_stage
from featureprio.services.scoring.engines import (
    IceScoringEngine,
    MoSCoWScoringEngine,
    RiceScoringEngine,
    ValueEffortScoringEngine,
    WeightedScoringEngine,
)
from featureprio.services.scoring.engines.moscow import CATEGORY_COLORS, CATEGORY_DESCRIPTIONS, CATEGORY_LABELS
from featureprio.services.scoring.engines.value_effort import (
    QUADRANT_COLORS,
    QUADRANT_DESCRIPTIONS,
    QUADRANT_LABELS,
    QUADRANT_PRIORITY,
)
from featureprio.services.scoring.engines.weighted import factors_for_stage
from featureprio.services.scoring.interfaces import ScoringEngine, ScoringFramework

logger = logging.getLogger("featureprio.services.scoring")

DEFAULT_FRAMEWORK = ScoringFramework.WEIGHTED


@dataclass(frozen=True)
class FactorDescriptor:
    key: str
    label: str
    description: str
    scale: Optional[str] = None
    weight: Optional[float] = None


@dataclass(frozen=True)
class CategoryDescriptor:
    """One bucket of a categorical framework (a quadrant or a MoSCoW category)."""
    key: str
    label: str
    description: str
    color: str
    rank: int
    score: Optional[float] = None


@dataclass(frozen=True)
class FrameworkInfo:
    name: ScoringFramework
    label: str
    description: str
    formula: str
    methodology: str
    best_for: str
    factors: List[FactorDescriptor]
    engine: ScoringEngine
    categories: List[CategoryDescriptor] = field(default_factory=list)


WEIGHTED_FACTOR_DESCRIPTIONS: Dict[str, str] = {
    "revenue_impact": "Potential revenue from this feature",
    "enterprise_readiness": "How much this enables enterprise sales",
    "request_volume": "Number of customer requests for this",
    "competitive_parity": "Do competitors have this?",
    "strategic_alignment": "Alignment with company strategy",
    "effort": "Development effort required",
    "capability_gap": "How much this fills a product capability gap",
    "competitive_differentiation": "How much this differentiates from competitors",
}

RICE_FACTORS: List[FactorDescriptor] = [
    FactorDescriptor("reach", "Reach", "How many customers will this affect per quarter?", "1-10 (1 = few, 10 = all users)"),
    FactorDescriptor(
        "impact",
        "Impact",
        "How much will it impact each customer?",
        "0.25 = minimal, 0.5 = low, 1 = medium, 2 = high, 3 = massive",
    ),
    FactorDescriptor("confidence", "Confidence", "How confident are we in our estimates?", "0.5 = low, 0.8 = medium, 1.0 = high"),
    FactorDescriptor("effort", "Effort", "Engineering effort in person-months", "1-10 (1 = days, 10 = months)"),
]

ICE_FACTORS: List[FactorDescriptor] = [
    FactorDescriptor("impact", "Impact", "How much will this impact our key metrics?", "1-10 (1 = minimal, 10 = transformative)"),
    FactorDescriptor("confidence", "Confidence", "How confident are we in success?", "1-10 (1 = guess, 10 = certain)"),
    FactorDescriptor("ease", "Ease", "How easy is this to implement?", "1-10 (1 = very hard, 10 = very easy)"),
]

VALUE_EFFORT_FACTORS: List[FactorDescriptor] = [
    FactorDescriptor("value", "Value", "Overall business value of this feature", "1-10 (1 = minimal value, 10 = critical value)"),
    FactorDescriptor("effort", "Effort", "Development effort required", "1-10 (1 = trivial, 10 = major project)"),
]

MOSCOW_FACTORS: List[FactorDescriptor] = [
    FactorDescriptor(
        "moscow",
        "MoSCoW Category",
        "Explicit category; inferred from value factors when absent",
        "must / should / could / wont",
    ),
]


# highest rank first: quick wins before time sinks
VALUE_EFFORT_QUADRANTS: List[CategoryDescriptor] = [
    CategoryDescriptor(
        key=quadrant.value,
        label=QUADRANT_LABELS[quadrant],
        description=QUADRANT_DESCRIPTIONS[quadrant],
        color=QUADRANT_COLORS[quadrant],
        rank=QUADRANT_PRIORITY[quadrant],
    )
    for quadrant in sorted(QUADRANT_PRIORITY, key=QUADRANT_PRIORITY.get, reverse=True)
]

MOSCOW_CATEGORIES: List[CategoryDescriptor] = [
    CategoryDescriptor(
        key=category.value,
        label=CATEGORY_LABELS[category],
        description=CATEGORY_DESCRIPTIONS[category],
        color=CATEGORY_COLORS[category],
        rank=len(MOSCOW_CATEGORY_SCORES) - i,
        score=MOSCOW_CATEGORY_SCORES[category],
    )
    for i, category in enumerate(sorted(MOSCOW_CATEGORY_SCORES, key=MOSCOW_CATEGORY_SCORES.get, reverse=True))
]


def weighted_factors(product: Product = Product.CHAT) -> List[FactorDescriptor]:
    """Weighted factor set for a product's stage, with the stage's default weights."""
    stage = stage_for_product(product)
    weights = default_weights_for_stage(stage)
    return [
        FactorDescriptor(
            key=name,
            label=label,
            description=WEIGHTED_FACTOR_DESCRIPTIONS[name],
            weight=getattr(weights, name),
        )
        for name, label in factors_for_stage(stage)
    ]


SCORING_FRAMEWORKS: Dict[ScoringFramework, FrameworkInfo] = {
    ScoringFramework.WEIGHTED: FrameworkInfo(
        name=ScoringFramework.WEIGHTED,
        label="Weighted Scoring",
        description="Multi-factor analysis with customizable weights for comprehensive prioritization",
        formula="Σ(Weight × Score)",
        methodology=(
            "Evaluates features across multiple dimensions (revenue, enterprise readiness, request volume, "
            "competitive parity, strategic alignment, effort), each weighted by importance."
        ),
        best_for="Teams wanting comprehensive, balanced prioritization across multiple factors",
        factors=weighted_factors(Product.CHAT),
        engine=WeightedScoringEngine(),
    ),
    ScoringFramework.RICE: FrameworkInfo(
        name=ScoringFramework.RICE,
        label="RICE",
        description="Data-driven framework developed by Intercom",
        formula="(Reach × Impact × Confidence) / Effort",
        methodology=(
            "Quantitative framework that produces objective, comparable scores. Reach = users affected, "
            "Impact = degree of effect (0.25-3), Confidence = estimate certainty (0-1), "
            "Effort = person-months required."
        ),
        best_for="Teams with good data who want objective, comparable scores",
        factors=RICE_FACTORS,
        engine=RiceScoringEngine(),
    ),
    ScoringFramework.ICE: FrameworkInfo(
        name=ScoringFramework.ICE,
        label="ICE",
        description="Simple scoring for rapid decision-making",
        formula="Impact × Confidence × Ease",
        methodology=(
            "Simplified prioritization using three 1-10 factors. Impact = effect on metrics, "
            "Confidence = certainty of success, Ease = implementation simplicity (inverse of effort)."
        ),
        best_for="Fast-moving teams, early-stage products, quick prioritization sessions",
        factors=ICE_FACTORS,
        engine=IceScoringEngine(),
    ),
    ScoringFramework.VALUE_EFFORT: FrameworkInfo(
        name=ScoringFramework.VALUE_EFFORT,
        label="Value vs Effort",
        description="2×2 matrix prioritization",
        formula="Value / Effort → Quadrant",
        methodology=(
            "Plots features on a 2D matrix. Quick Wins (high value, low effort) are done first, "
            "Big Bets (high value, high effort) are planned carefully, Fill-ins are nice to have "
            "and Time Sinks are avoided."
        ),
        best_for="Maximum simplicity, visual prioritization, stakeholder communication",
        factors=VALUE_EFFORT_FACTORS,
        engine=ValueEffortScoringEngine(),
        categories=VALUE_EFFORT_QUADRANTS,
    ),
    ScoringFramework.MOSCOW: FrameworkInfo(
        name=ScoringFramework.MOSCOW,
        label="MoSCoW",
        description="Categorical prioritization for releases",
        formula="Must / Should / Could / Won't",
        methodology=(
            "Categorizes features into four buckets: Must Have (critical, non-negotiable), Should Have "
            "(important but not critical), Could Have (nice to have), Won't Have (out of scope this time)."
        ),
        best_for="Release planning, scope definition, stakeholder alignment",
        factors=MOSCOW_FACTORS,
        engine=MoSCoWScoringEngine(),
        categories=MOSCOW_CATEGORIES,
    ),
}


def resolve_framework(framework: Union[ScoringFramework, str, None]) -> ScoringFramework:
    """Map a framework id (enum or raw string) onto a known framework.

    Accepts "value-effort", "value_effort" and "VALUE-EFFORT" alike. Anything
    unrecognised falls back to Weighted; a warning is logged, nothing is raised.
    """
    if isinstance(framework, ScoringFramework):
        return framework
    if framework is None:
        return DEFAULT_FRAMEWORK

    normalized = str(framework).strip().lower().replace("_", "-")
    try:
        return ScoringFramework(normalized)
    except ValueError:
        logger.warning(
            "scoring.unknown_framework",
            extra={"framework": str(framework), "fallback": DEFAULT_FRAMEWORK.value},
        )
        return DEFAULT_FRAMEWORK


def get_engine(framework: Union[ScoringFramework, str, None]) -> ScoringEngine:
    return SCORING_FRAMEWORKS[resolve_framework(framework)].engine


def get_framework_info(framework: Union[ScoringFramework, str, None]) -> FrameworkInfo:
    return SCORING_FRAMEWORKS[resolve_framework(framework)]


def get_all_frameworks() -> List[FrameworkInfo]:
    return list(SCORING_FRAMEWORKS.values())


def get_framework_factors(
    framework: Union[ScoringFramework, str, None],
    product: Product = Product.CHAT,
) -> List[FactorDescriptor]:
    """Factor descriptors for display; the Weighted set depends on the product stage."""
    resolved = resolve_framework(framework)
    if resolved == ScoringFramework.WEIGHTED:
        return weighted_factors(product)
    return list(SCORING_FRAMEWORKS[resolved].factors)


def get_framework_categories(framework: Union[ScoringFramework, str, None]) -> List[CategoryDescriptor]:
    """Quadrants or MoSCoW categories, best first; empty for the numeric frameworks."""
    return list(get_framework_info(framework).categories)


__all__ = [
    "DEFAULT_FRAMEWORK",
    "FactorDescriptor",
    "CategoryDescriptor",
    "FrameworkInfo",
    "SCORING_FRAMEWORKS",
    "resolve_framework",
    "get_engine",
    "get_framework_info",
    "get_all_frameworks",
    "get_framework_factors",
    "get_framework_categories",
    "VALUE_EFFORT_QUADRANTS",
    "MOSCOW_CATEGORIES",
    "weighted_factors",
]
