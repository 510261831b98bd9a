# feature_priority_dashboard/featureprio/services/scoring/priority.py

from __future__ import annotations

from enum import IntEnum
from typing import Dict


class TrackerPriority(IntEnum):
    """Issue-tracker priority levels (1 is most urgent)."""
    URGENT = 1
    HIGH = 2
    NORMAL = 3
    LOW = 4


PRIORITY_LABELS: Dict[TrackerPriority, str] = {
    TrackerPriority.URGENT: "P0 - Urgent",
    TrackerPriority.HIGH: "P1 - High",
    TrackerPriority.NORMAL: "P2 - Normal",
    TrackerPriority.LOW: "P3 - Low",
}

URGENT_THRESHOLD = 8.0
HIGH_THRESHOLD = 6.0
NORMAL_THRESHOLD = 4.0


def map_score_to_priority(final_score: float) -> TrackerPriority:
    """Bucket a final score, the same way for every framework. Thresholds are inclusive."""
    if final_score >= URGENT_THRESHOLD:
        return TrackerPriority.URGENT
    if final_score >= HIGH_THRESHOLD:
        return TrackerPriority.HIGH
    if final_score >= NORMAL_THRESHOLD:
        return TrackerPriority.NORMAL
    return TrackerPriority.LOW


def priority_label(priority: TrackerPriority) -> str:
    return PRIORITY_LABELS[priority]


__all__ = ["TrackerPriority", "PRIORITY_LABELS", "map_score_to_priority", "priority_label"]
