# feature_priority_dashboard/featureprio/schemas/scored_feature.py

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import Field

from featureprio.llm.models import AIScoreRecord
from featureprio.schemas.feature import FeatureRequest
from featureprio.services.scoring.interfaces import ScoreFactors, ScoreFlag, ScoringFramework
from featureprio.services.scoring.priority import TrackerPriority


class ScoredFeature(FeatureRequest):
    """A feature together with its computed score.

    Derived view: rebuilt from the feature, its factors and the scoring
    settings every time scoring runs. Never the source of truth.
    """

    scores: ScoreFactors = Field(default_factory=ScoreFactors)
    manual_overrides: Optional[ScoreFactors] = None
    ai_suggestions: Optional[AIScoreRecord] = None

    base_score: float = 0.0
    multiplier: float = 1.0
    final_score: float = 0.0
    flags: List[ScoreFlag] = Field(default_factory=list)
    mapped_priority: TrackerPriority = TrackerPriority.LOW
    framework: ScoringFramework = ScoringFramework.WEIGHTED

    components: Dict[str, Any] = Field(default_factory=dict)
    warnings: List[str] = Field(default_factory=list)

    @property
    def has_ai_score(self) -> bool:
        return ScoreFlag.PENDING_AI_SCORE not in self.flags

    def feature(self) -> FeatureRequest:
        """The underlying feature request without score data."""
        return FeatureRequest.model_validate(self.model_dump(include=set(FeatureRequest.model_fields)))


__all__ = ["ScoredFeature"]
