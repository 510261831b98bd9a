# Tests for ScoringService (settings-driven scoring, batch policy, tracker payloads)
import logging
from types import SimpleNamespace

import pytest

from featureprio.schemas.feature import CustomerTier, Product
from featureprio.schemas.settings import ScoringSettings
from featureprio.services.scoring import ScoreFlag, ScoringFramework
from featureprio.services.scoring_service import ScoringService


def test_score_feature_uses_active_framework(make_feature):
    service = ScoringService(ScoringSettings(active_framework="rice"))

    scored = service.score_feature(make_feature())

    assert scored.framework == ScoringFramework.RICE
    assert scored.final_score == 8.0
    assert ScoreFlag.PENDING_AI_SCORE in scored.flags


def test_explicit_framework_overrides_settings(make_feature):
    service = ScoringService(ScoringSettings(active_framework="rice"))

    scored = service.score_feature(make_feature(), framework="moscow")

    assert scored.framework == ScoringFramework.MOSCOW
    assert scored.base_score == 4.0


def test_settings_weights_and_multipliers_apply(make_feature):
    scoring = ScoringSettings.model_validate(
        {
            "weights": {"new": {"capabilityGap": 1.0, "strategicAlignment": 0, "effort": 0,
                                "requestVolume": 0, "competitiveDifferentiation": 0}},
            "tierMultipliers": {"C2": 1.5},
        }
    )
    service = ScoringService(scoring)
    feature = make_feature(product=Product.AI_AGENTS, customer_tier=CustomerTier.C2)

    scored = service.score_feature(feature, overrides={"capabilityGap": 6})

    assert scored.base_score == 6.0
    assert scored.multiplier == 1.5
    assert scored.final_score == 9.0


def test_score_all_ranks_and_skips_failures(caplog, make_feature, make_record):
    service = ScoringService(ScoringSettings(active_framework="value-effort"))
    features = [
        make_feature("slow", customer_tier=CustomerTier.C4),
        SimpleNamespace(id="broken"),
        make_feature("quick", customer_tier=CustomerTier.C4),
    ]
    ai_scores = {"quick": make_record("quick", openai={"value": 9, "effort": 2})}
    overrides = {"slow": {"value": 1, "effort": 9}}

    with caplog.at_level(logging.INFO, logger="featureprio.services.scoring"):
        ranked = service.score_all(features, ai_scores, overrides, log_every=1)

    assert [s.id for s in ranked] == ["quick", "slow"]
    messages = [r.getMessage() for r in caplog.records]
    assert "scoring.batch_start" in messages
    assert "scoring.feature_error" in messages
    done = [r for r in caplog.records if r.getMessage() == "scoring.batch_done"][0]
    assert done.scored == 2
    assert done.failed == 1


def test_compare_frameworks_uses_settings(make_feature):
    service = ScoringService(ScoringSettings())

    results = service.compare_frameworks(make_feature(), overrides={"moscow": "must"})

    assert results[ScoringFramework.MOSCOW].final_score == 10.0
    assert results[ScoringFramework.RICE].base_score == 8.0


def test_tracker_updates_use_configured_sort_start(make_feature):
    service = ScoringService(ScoringSettings(active_framework="moscow"))
    ranked = service.score_all(
        [make_feature("a", project_name="Chat"), make_feature("b", project_name="Chat")],
        overrides={"b": {"moscow": "must"}},
    )

    payloads = service.tracker_updates(ranked, add_comments=False)

    assert [(p.issue_id, p.sort_order) for p in payloads] == [("b", -1000), ("a", -999)]
    assert payloads[0].comment is None


@pytest.mark.parametrize("framework", list(ScoringFramework))
def test_every_framework_scores_without_inputs(make_feature, framework):
    scored = ScoringService(ScoringSettings()).score_feature(make_feature(), framework=framework)
    assert scored.final_score >= 0
