# Tests for general flags and tracker priority mapping
import pytest

from featureprio.schemas.feature import CustomerTier
from featureprio.services.scoring import ScoreFlag, TrackerPriority, general_flags, map_score_to_priority, priority_label
from featureprio.services.scoring.flags import combine_flags
from featureprio.services.scoring.interfaces import ScoreFactors


@pytest.mark.parametrize(
    "score,expected",
    [
        (10.0, TrackerPriority.URGENT),
        (8.0, TrackerPriority.URGENT),
        (7.9999, TrackerPriority.HIGH),
        (6.0, TrackerPriority.HIGH),
        (5.99, TrackerPriority.NORMAL),
        (4.0, TrackerPriority.NORMAL),
        (3.99, TrackerPriority.LOW),
        (0.0, TrackerPriority.LOW),
        (13.0, TrackerPriority.URGENT),
    ],
)
def test_priority_boundaries(score, expected):
    assert map_score_to_priority(score) == expected


def test_priority_labels():
    assert priority_label(TrackerPriority.URGENT) == "P0 - Urgent"
    assert priority_label(TrackerPriority.LOW) == "P3 - Low"
    assert int(TrackerPriority.HIGH) == 2


def test_all_general_flags_in_fixed_order(make_feature):
    feature = make_feature(customer_tier=CustomerTier.C2)
    factors = ScoreFactors(request_volume=8, enterprise_readiness=9, strategic_alignment=10)

    assert general_flags(feature, factors, has_ai_score=False) == [
        ScoreFlag.PENDING_AI_SCORE,
        ScoreFlag.HIGH_TIER_CUSTOMER,
        ScoreFlag.HIGH_DEMAND,
        ScoreFlag.ENTERPRISE,
        ScoreFlag.STRATEGIC_PRIORITY,
    ]


def test_no_general_flags_below_thresholds(make_feature):
    feature = make_feature(customer_tier=CustomerTier.C3)
    factors = ScoreFactors(request_volume=7.9, enterprise_readiness=7, strategic_alignment=1)

    assert general_flags(feature, factors, has_ai_score=True) == []


def test_strategy_flags_follow_general_flags(make_feature):
    general = general_flags(make_feature(customer_tier=CustomerTier.C1), ScoreFactors(), has_ai_score=True)
    combined = combine_flags(general, [ScoreFlag.QUICK_WINS])

    assert combined == [ScoreFlag.HIGH_TIER_CUSTOMER, ScoreFlag.QUICK_WINS]
    assert [f.value for f in combined] == ["high-tier-customer", "quick-wins"]
