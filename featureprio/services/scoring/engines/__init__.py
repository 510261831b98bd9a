# feature_priority_dashboard/featureprio/services/scoring/engines/__init__.py

from .weighted import WeightedScoringEngine
from .rice import RiceScoringEngine
from .ice import IceScoringEngine
from .value_effort import ValueEffortScoringEngine
from .moscow import MoSCoWScoringEngine

__all__ = [
    "WeightedScoringEngine",
    "RiceScoringEngine",
    "IceScoringEngine",
    "ValueEffortScoringEngine",
    "MoSCoWScoringEngine",
]
