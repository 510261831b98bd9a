# feature_priority_dashboard/featureprio/services/scoring/utils.py

from __future__ import annotations

import math
from typing import Any, Mapping, Optional, Tuple, TypeVar, Union

from pydantic import BaseModel

M = TypeVar("M", bound=BaseModel)


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round half away from zero for positives (2.25 -> 2.3), unlike built-in round().

    Scores are displayed and bucketed on these values, so ties must not flip
    depending on banker's rounding.
    """
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def floor_denominator(value: float, floor: float = 1.0) -> Tuple[float, Optional[str]]:
    """Floor a denominator so division never fails.

    Returns (denominator, warning). The warning is None when no flooring happened.
    """
    if value < floor:
        return floor, f"Denominator {value:g} below {floor:g}; floored to {floor:g}."
    return value, None


def overlay(base: M, override: Union[M, Mapping[str, Any], None]) -> M:
    """Overlay caller-supplied values on a default model.

    - None: the base is returned unchanged
    - a model instance: treated as a complete replacement
    - a mapping (snake_case or camelCase keys): only the given keys replace base values
    """
    if override is None:
        return base
    if isinstance(override, BaseModel):
        return override  # type: ignore[return-value]
    parsed = type(base).model_validate(dict(override))
    updates = {name: getattr(parsed, name) for name in parsed.model_fields_set}
    return base.model_copy(update=updates)


__all__ = ["round_half_up", "floor_denominator", "overlay"]
