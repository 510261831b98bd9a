# Tests for the Value/Effort and MoSCoW engines
import pytest

from featureprio.schemas.feature import CustomerTier
from featureprio.services.scoring import MoSCoWCategory, ScoreFlag, ScoringFramework, ValueEffortQuadrant, get_engine
from featureprio.services.scoring.defaults import DEFAULT_TIER_MULTIPLIERS
from featureprio.services.scoring.engines.moscow import infer_moscow_category
from featureprio.services.scoring.engines.value_effort import QUADRANT_LABELS, get_quadrant
from featureprio.services.scoring.interfaces import ScoreFactors, ScoreInputs


def _inputs(tier=CustomerTier.C4, **factors):
    return ScoreInputs(
        factors=ScoreFactors(**factors),
        customer_tier=tier,
        tier_multipliers=DEFAULT_TIER_MULTIPLIERS,
    )


@pytest.mark.parametrize(
    "value,effort,expected",
    [
        (8, 3, ValueEffortQuadrant.QUICK_WINS),
        (5, 3, ValueEffortQuadrant.FILL_INS),
        (6, 6, ValueEffortQuadrant.BIG_BETS),
        (8, 5, ValueEffortQuadrant.QUICK_WINS),
        (5, 5, ValueEffortQuadrant.FILL_INS),
        (1, 8, ValueEffortQuadrant.TIME_SINKS),
    ],
)
def test_quadrant_boundaries(value, effort, expected):
    assert get_quadrant(value, effort) == expected


def test_value_effort_quick_win_emits_flag():
    res = get_engine(ScoringFramework.VALUE_EFFORT).compute(_inputs(value=8, effort=3))

    assert res.flags == [ScoreFlag.QUICK_WINS]
    assert res.components["quadrant"] == "quick-wins"
    assert res.base_score == 10.0


def test_value_effort_time_sink_score():
    res = get_engine(ScoringFramework.VALUE_EFFORT).compute(_inputs(value=1, effort=8))

    assert res.flags == [ScoreFlag.TIME_SINKS]
    assert res.base_score == pytest.approx(2.5)


def test_value_effort_defaults():
    res = get_engine(ScoringFramework.VALUE_EFFORT).compute(_inputs())

    assert res.flags == [ScoreFlag.FILL_INS]
    # (5 / 5) * 2 = 2 -> 20 -> capped
    assert res.base_score == 10.0


def test_value_effort_zero_effort_floored():
    res = get_engine(ScoringFramework.VALUE_EFFORT).compute(_inputs(value=0.2, effort=0))

    assert res.components["raw_score"] == pytest.approx(0.4)
    assert res.base_score == pytest.approx(4.0)
    assert any(w.startswith("VALUE_EFFORT:") for w in res.warnings)


def test_quadrant_labels_cover_every_quadrant():
    assert set(QUADRANT_LABELS) == set(ValueEffortQuadrant)


def test_moscow_no_factors_defaults_to_could():
    res = get_engine(ScoringFramework.MOSCOW).compute(_inputs())

    assert res.components["category"] == "could"
    assert res.base_score == 4.0
    assert res.final_score == 4.0
    assert res.flags == [ScoreFlag.COULD]


def test_moscow_explicit_category_wins():
    res = get_engine(ScoringFramework.MOSCOW).compute(
        _inputs(tier=CustomerTier.C1, moscow="must", revenue_impact=1)
    )

    assert res.base_score == 10.0
    assert res.final_score == pytest.approx(13.0)
    assert res.flags == [ScoreFlag.MUST]


@pytest.mark.parametrize(
    "factors,expected",
    [
        ({"revenue_impact": 9, "strategic_alignment": 8}, MoSCoWCategory.MUST),
        ({"value": 6}, MoSCoWCategory.SHOULD),
        ({"impact": 2}, MoSCoWCategory.SHOULD),
        ({"enterprise_readiness": 4, "capability_gap": 5}, MoSCoWCategory.COULD),
        ({"value": 3}, MoSCoWCategory.WONT),
        ({"reach": 10, "effort": 1}, MoSCoWCategory.COULD),
    ],
)
def test_moscow_inference(factors, expected):
    assert infer_moscow_category(ScoreFactors(**factors)) == expected


def test_moscow_wont_base_score():
    res = get_engine(ScoringFramework.MOSCOW).compute(_inputs(value=3))
    assert res.base_score == 1.0
    assert res.flags == [ScoreFlag.WONT]
