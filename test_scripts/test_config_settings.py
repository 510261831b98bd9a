# Tests for Settings / ScoringSettings loading
import json

import pytest

from featureprio.config import Settings
from featureprio.llm.models import AIProvider
from featureprio.schemas.feature import Product
from featureprio.schemas.settings import ScoringSettings
from featureprio.services.scoring import ScoringFramework


def test_scoring_settings_defaults():
    scoring = ScoringSettings()

    assert scoring.active_framework == ScoringFramework.WEIGHTED
    assert scoring.tier_multipliers.C1 == 1.3
    assert scoring.default_model == AIProvider.ANTHROPIC
    assert scoring.weights_for(Product.CHAT).revenue_impact == 0.30
    assert scoring.weights_for(Product.BYOA).capability_gap == 0.30


def test_scoring_settings_accepts_loose_framework_ids():
    assert ScoringSettings(activeFramework="VALUE_EFFORT").active_framework == ScoringFramework.VALUE_EFFORT
    assert ScoringSettings(active_framework="not-a-framework").active_framework == ScoringFramework.WEIGHTED


def test_partial_weights_and_multipliers_overlay_defaults():
    scoring = ScoringSettings.model_validate(
        {
            "weights": {"mature": {"effort": 0.2}},
            "tierMultipliers": {"C1": 2.0},
        }
    )

    assert scoring.weights.mature.effort == 0.2
    assert scoring.weights.mature.revenue_impact == 0.30
    assert scoring.weights.new.capability_gap == 0.30
    assert scoring.tier_multipliers.C1 == 2.0
    assert scoring.tier_multipliers.C2 == 1.25


def test_settings_load_scoring_file(tmp_path):
    cfg = tmp_path / "scoring.json"
    cfg.write_text(json.dumps({"activeFramework": "ice", "defaultModel": "gemini"}), encoding="utf-8")

    loaded = Settings(SCORING_CONFIG_FILE=str(cfg))

    assert loaded.SCORING.active_framework == ScoringFramework.ICE
    assert loaded.SCORING.default_model == AIProvider.GEMINI


def test_settings_missing_scoring_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Settings(SCORING_CONFIG_FILE=str(tmp_path / "nope.json"))


def test_settings_scoring_file_must_be_object(tmp_path):
    cfg = tmp_path / "scoring.json"
    cfg.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ValueError):
        Settings(SCORING_CONFIG_FILE=str(cfg))


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("SCORING__ACTIVE_FRAMEWORK", "rice")
    monkeypatch.setenv("TRACKER_SORT_ORDER_START", "-50")

    loaded = Settings()

    assert loaded.SCORING.active_framework == ScoringFramework.RICE
    assert loaded.TRACKER_SORT_ORDER_START == -50
