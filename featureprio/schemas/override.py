# feature_priority_dashboard/featureprio/schemas/override.py

from __future__ import annotations

from typing import Dict, Iterable, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic.alias_generators import to_camel

from featureprio.services.scoring.interfaces import MoSCoWCategory, ScoreFactors, factor_field

OverrideValue = Union[float, MoSCoWCategory]


class ManualOverride(BaseModel):
    """A user-entered value for one factor of one feature.

    The override store keeps these append-only; the latest entry per
    (feature_id, factor) is the effective one.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True, allow_inf_nan=False)

    feature_id: str
    factor: str
    value: OverrideValue
    updated_by: str
    updated_at: Optional[str] = None
    reason: Optional[str] = None
    previous_value: Optional[OverrideValue] = None

    @field_validator("factor")
    @classmethod
    def _normalize_factor(cls, v: str) -> str:
        field = factor_field(v)
        if field is None:
            raise ValueError(f"Unknown score factor: {v!r}")
        return field

    @model_validator(mode="after")
    def _check_value_kind(self) -> "ManualOverride":
        is_category = isinstance(self.value, MoSCoWCategory)
        if (self.factor == "moscow") != is_category:
            raise ValueError(
                f"Factor {self.factor!r} does not accept value {self.value!r}"
            )
        return self


def overrides_to_factors(overrides: Iterable[ManualOverride]) -> ScoreFactors:
    """Fold an override log into a factor map; later entries win."""
    data: Dict[str, OverrideValue] = {}
    for override in overrides:
        data[override.factor] = override.value
    return ScoreFactors.model_validate(data)


def overrides_by_feature(overrides: Iterable[ManualOverride]) -> Dict[str, ScoreFactors]:
    grouped: Dict[str, list] = {}
    for override in overrides:
        grouped.setdefault(override.feature_id, []).append(override)
    return {feature_id: overrides_to_factors(items) for feature_id, items in grouped.items()}


__all__ = ["ManualOverride", "OverrideValue", "overrides_to_factors", "overrides_by_feature"]
