from .interfaces import (
    ScoringFramework,
    MoSCoWCategory,
    ValueEffortQuadrant,
    ScoreFlag,
    ScoreFactors,
    WeightConfig,
    TierMultipliers,
    ScoreInputs,
    ScoreResult,
    ScoringEngine,
)
from .registry import (
    FactorDescriptor,
    CategoryDescriptor,
    FrameworkInfo,
    SCORING_FRAMEWORKS,
    resolve_framework,
    get_engine,
    get_framework_info,
    get_all_frameworks,
    get_framework_factors,
    get_framework_categories,
)
from .dispatcher import apply_framework_scoring, build_score_inputs
from .flags import general_flags
from .priority import TrackerPriority, map_score_to_priority, priority_label

__all__ = [
    "ScoringFramework",
    "MoSCoWCategory",
    "ValueEffortQuadrant",
    "ScoreFlag",
    "ScoreFactors",
    "WeightConfig",
    "TierMultipliers",
    "ScoreInputs",
    "ScoreResult",
    "ScoringEngine",
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
    "apply_framework_scoring",
    "build_score_inputs",
    "general_flags",
    "TrackerPriority",
    "map_score_to_priority",
    "priority_label",
]
