# feature_priority_dashboard/featureprio/services/scoring_service.py

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Union

from featureprio.config import settings
from featureprio.llm.models import AIScoreRecord
from featureprio.schemas.feature import FeatureRequest
from featureprio.schemas.scored_feature import ScoredFeature
from featureprio.schemas.settings import ScoringSettings
from featureprio.services.scoring import ScoringFramework, resolve_framework
from featureprio.services.scoring.dispatcher import FactorsLike
from featureprio.services.scoring.pipeline import (
    FrameworkScore,
    compare_framework_scores,
    score_feature,
    sort_scored_features,
)
from featureprio.services.tracker_sync import TrackerUpdatePayload, build_tracker_updates

logger = logging.getLogger("featureprio.services.scoring")


class ScoringService:
    """Service layer for scoring features with the configured settings.

    Responsibilities:
    - Resolve the active framework, weights, tier multipliers and default provider
    - Delegate to the pure scoring pipeline
    - Batch scoring that logs and skips failing features
    - Build tracker write-back payloads for scored features
    """

    def __init__(self, scoring: Optional[ScoringSettings] = None):
        self.scoring = scoring or settings.SCORING

    def _framework(self, framework: Union[ScoringFramework, str, None]) -> ScoringFramework:
        if framework is None:
            return self.scoring.active_framework
        return resolve_framework(framework)

    def score_feature(
        self,
        feature: FeatureRequest,
        ai_score: Optional[AIScoreRecord] = None,
        overrides: FactorsLike = None,
        framework: Union[ScoringFramework, str, None] = None,
    ) -> ScoredFeature:
        """Score a single feature. Errors propagate to the caller."""
        return score_feature(
            feature,
            self._framework(framework),
            ai_score,
            overrides,
            weights=self.scoring.weights,
            multipliers=self.scoring.tier_multipliers,
            default_provider=self.scoring.default_model,
        )

    def score_all(
        self,
        features: Iterable[FeatureRequest],
        ai_scores: Optional[Mapping[str, AIScoreRecord]] = None,
        overrides: Optional[Mapping[str, FactorsLike]] = None,
        framework: Union[ScoringFramework, str, None] = None,
        log_every: Optional[int] = None,
    ) -> List[ScoredFeature]:
        """Score many features and return them ranked.

        A feature that fails to score is logged and left out; the rest of the
        batch continues. Ranking: AI-scored features first, then final score
        descending.
        """
        chosen = self._framework(framework)
        ai_scores = ai_scores or {}
        overrides = overrides or {}
        batch_size = log_every or settings.SCORING_BATCH_LOG_EVERY

        items = list(features)
        total = len(items)
        logger.info("scoring.batch_start", extra={"framework": chosen.value, "total": total})

        scored: List[ScoredFeature] = []
        failed = 0
        for idx, feature in enumerate(items, start=1):
            try:
                scored.append(
                    self.score_feature(
                        feature,
                        ai_scores.get(feature.id),
                        overrides.get(feature.id),
                        framework=chosen,
                    )
                )
            except Exception:
                failed += 1
                logger.exception(
                    "scoring.feature_error",
                    extra={"feature_id": getattr(feature, "id", None), "framework": chosen.value},
                )
                # Continue processing; don't let one bad feature stop the batch

            if batch_size and (idx % batch_size == 0):
                logger.info("scoring.batch_progress", extra={"count": idx, "total": total})

        logger.info(
            "scoring.batch_done",
            extra={"framework": chosen.value, "scored": len(scored), "failed": failed},
        )
        return sort_scored_features(scored)

    def compare_frameworks(
        self,
        feature: FeatureRequest,
        ai_score: Optional[AIScoreRecord] = None,
        overrides: FactorsLike = None,
    ) -> Dict[ScoringFramework, FrameworkScore]:
        return compare_framework_scores(
            feature,
            ai_score,
            overrides,
            weights=self.scoring.weights,
            multipliers=self.scoring.tier_multipliers,
            default_provider=self.scoring.default_model,
        )

    def tracker_updates(
        self,
        scored: Iterable[ScoredFeature],
        add_comments: Optional[bool] = None,
    ) -> List[TrackerUpdatePayload]:
        if add_comments is None:
            add_comments = settings.TRACKER_ADD_COMMENTS
        return build_tracker_updates(
            scored,
            add_comments=add_comments,
            sort_order_start=settings.TRACKER_SORT_ORDER_START,
        )


__all__ = ["ScoringService"]
