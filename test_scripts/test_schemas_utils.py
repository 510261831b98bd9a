# Tests for schema parsing and scoring utilities
import pytest
from pydantic import ValidationError

from featureprio.schemas.feature import CustomerTier, FeatureRequest, Product
from featureprio.schemas.override import ManualOverride, overrides_by_feature
from featureprio.llm.models import AIScoringSuggestion
from featureprio.services.scoring.interfaces import (
    MoSCoWCategory,
    ScoreFactors,
    TierMultipliers,
    WeightConfig,
    factor_field,
)
from featureprio.services.scoring.utils import floor_denominator, overlay, round_half_up


def test_feature_request_accepts_camel_case_payload():
    feature = FeatureRequest.model_validate(
        {
            "id": "iss-1",
            "title": "Threads",
            "product": "ai-agents",
            "customerTier": "C2",
            "projectName": "AI Agents",
            "comments": [{"body": "+1", "createdAt": "2025-01-01"}],
        }
    )

    assert feature.product == Product.AI_AGENTS
    assert feature.customer_tier == CustomerTier.C2
    assert feature.comments[0].created_at == "2025-01-01"


def test_feature_request_rejects_unknown_tier():
    with pytest.raises(ValidationError):
        FeatureRequest(id="x", title="x", customer_tier="C9")


def test_score_factors_aliases_and_merge():
    ai = ScoreFactors.model_validate({"revenueImpact": 6, "effort": 4, "unknownFactor": 1})
    manual = ScoreFactors(effort=2, moscow="should")

    merged = ai.merged_with(manual)

    assert merged.present() == {"revenue_impact": 6, "effort": 2, "moscow": MoSCoWCategory.SHOULD}
    assert ai.merged_with(None) is ai


def test_score_factors_reject_non_numeric():
    with pytest.raises(ValidationError):
        ScoreFactors(reach="lots")


def test_factor_field_lookup():
    assert factor_field("competitiveDifferentiation") == "competitive_differentiation"
    assert factor_field("effort") == "effort"
    assert factor_field("nope") is None


def test_manual_override_validation():
    ok = ManualOverride(feature_id="f", factor="moscow", value="wont", updated_by="pm")
    assert ok.value == MoSCoWCategory.WONT

    with pytest.raises(ValidationError):
        ManualOverride(feature_id="f", factor="notAFactor", value=3, updated_by="pm")
    with pytest.raises(ValidationError):
        ManualOverride(feature_id="f", factor="effort", value="must", updated_by="pm")
    with pytest.raises(ValidationError):
        ManualOverride(feature_id="f", factor="moscow", value=3, updated_by="pm")


def test_overrides_grouped_by_feature():
    grouped = overrides_by_feature(
        [
            ManualOverride(feature_id="a", factor="effort", value=3, updated_by="pm"),
            ManualOverride(feature_id="b", factor="value", value=9, updated_by="pm"),
        ]
    )

    assert grouped["a"].effort == 3
    assert grouped["b"].value == 9


@pytest.mark.parametrize(
    "value,ndigits,expected",
    [
        (1.25, 1, 1.3),
        (2.5, 0, 3.0),
        (9.375, 2, 9.38),
        (44.8, 1, 44.8),
        (0.0, 2, 0.0),
    ],
)
def test_round_half_up(value, ndigits, expected):
    assert round_half_up(value, ndigits) == pytest.approx(expected)


def test_floor_denominator():
    assert floor_denominator(4.0) == (4.0, None)
    value, warning = floor_denominator(0.0)
    assert value == 1.0
    assert "floored to 1" in warning


def test_overlay_mapping_vs_model():
    base = TierMultipliers(C1=1.3, C2=1.25)

    assert overlay(base, None) is base
    assert overlay(base, {"C2": 2.0}).C1 == 1.3
    assert overlay(base, {"C2": 2.0}).C2 == 2.0
    assert overlay(base, TierMultipliers()).C1 == 1.0


@pytest.mark.parametrize("raw", ["inf", "-inf", "nan", float("inf"), float("nan")])
def test_non_finite_factor_values_rejected(raw):
    with pytest.raises(ValidationError):
        ScoreFactors.model_validate({"reach": raw})
    with pytest.raises(ValidationError):
        ScoreFactors.model_validate({"value": raw})


def test_non_finite_weights_and_multipliers_rejected():
    with pytest.raises(ValidationError):
        WeightConfig(effort=float("inf"))
    with pytest.raises(ValidationError):
        TierMultipliers(C1=float("nan"))


def test_non_finite_override_and_suggestion_rejected():
    with pytest.raises(ValidationError):
        ManualOverride(feature_id="f", factor="effort", value=float("inf"), updated_by="pm")
    with pytest.raises(ValidationError):
        AIScoringSuggestion(factor="reach", score=float("nan"))


def test_schemas_package_reexports_feature_types():
    import featureprio.schemas as schemas

    assert schemas.FeatureRequest is FeatureRequest
    assert schemas.CustomerTier is CustomerTier
    assert "FeatureRequest" in schemas.__all__
