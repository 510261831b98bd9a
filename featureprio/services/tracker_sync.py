# feature_priority_dashboard/featureprio/services/tracker_sync.py

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel

from featureprio.schemas.feature import FeatureRequest, Product
from featureprio.schemas.scored_feature import ScoredFeature
from featureprio.services.products import (
    customer_tier_from_labels,
    feature_source_from_labels,
    feature_type_from_labels,
    product_from_labels,
    product_from_project,
)
from featureprio.services.scoring.priority import TrackerPriority

logger = logging.getLogger("featureprio.services.tracker_sync")

UNKNOWN_PROJECT = "unknown"
DEFAULT_SORT_ORDER_START = -1000
MAX_ISSUE_COMMENTS = 10
BACKLOG_STATE_TYPE = "backlog"

# factors listed in the score comment, in this order
COMMENT_FACTORS: List[Tuple[str, str]] = [
    ("revenue_impact", "Revenue Impact"),
    ("enterprise_readiness", "Enterprise Readiness"),
    ("request_volume", "Request Volume"),
    ("competitive_parity", "Competitive Parity"),
    ("strategic_alignment", "Strategic Alignment"),
    ("capability_gap", "Capability Gap"),
    ("effort", "Effort"),
]


def _nodes(value: Any) -> List[Any]:
    # tracker connections arrive as {"nodes": [...]}; plain lists are accepted too
    if value is None:
        return []
    if isinstance(value, Mapping):
        return list(value.get("nodes") or [])
    return list(value)


def issue_labels(issue: Mapping[str, Any]) -> List[str]:
    return [node["name"] if isinstance(node, Mapping) else str(node) for node in _nodes(issue.get("labels"))]


def is_backlog_issue(issue: Mapping[str, Any]) -> bool:
    state = issue.get("state") or {}
    return str(state.get("type") or "").lower() == BACKLOG_STATE_TYPE


def feature_from_tracker_issue(
    issue: Mapping[str, Any],
    project_mappings: Optional[Mapping[str, Union[Product, str]]] = None,
) -> FeatureRequest:
    """Build a FeatureRequest from one raw tracker issue.

    Product comes from an explicit project mapping, else the project name, and a
    matching label overrides either. Tier, type and source are read from labels.
    Only the most recent comments are kept.
    """
    labels = issue_labels(issue)
    project = issue.get("project") or {}
    project_id = project.get("id")

    if project_mappings and project_id in project_mappings:
        product = Product(project_mappings[project_id])
    else:
        product = product_from_project(project.get("name"))
    product = product_from_labels(labels) or product

    comments = [
        {"body": node.get("body") or "", "createdAt": node.get("createdAt")}
        for node in _nodes(issue.get("comments"))[:MAX_ISSUE_COMMENTS]
    ]
    state = issue.get("state") or {}

    return FeatureRequest.model_validate(
        {
            "id": issue["id"],
            "identifier": issue.get("identifier") or "",
            "title": issue["title"],
            "description": issue.get("description") or "",
            "url": issue.get("url"),
            "product": product,
            "customerTier": customer_tier_from_labels(labels),
            "type": feature_type_from_labels(labels),
            "source": feature_source_from_labels(labels),
            "labels": labels,
            "comments": comments,
            "projectName": project.get("name"),
            "trackerState": state.get("name"),
            "trackerPriority": issue.get("priority"),
            "createdAt": issue.get("createdAt"),
            "updatedAt": issue.get("updatedAt"),
        }
    )


def features_from_tracker_issues(
    issues: Iterable[Mapping[str, Any]],
    project_mappings: Optional[Mapping[str, Union[Product, str]]] = None,
    excluded_projects: Iterable[str] = (),
) -> List[FeatureRequest]:
    """Backlog issues outside the excluded project ids, mapped to FeatureRequests."""
    excluded = set(excluded_projects)
    issues = list(issues)
    features = [
        feature_from_tracker_issue(issue, project_mappings)
        for issue in issues
        if is_backlog_issue(issue) and (issue.get("project") or {}).get("id") not in excluded
    ]
    logger.info(
        "tracker.issues_mapped",
        extra={"count": len(features), "total": len(issues)},
    )
    return features


class TrackerUpdatePayload(BaseModel):
    """One issue update for the tracker client to send."""
    issue_id: str
    project_name: str
    priority: TrackerPriority
    sort_order: int
    comment: Optional[str] = None
    audit_note: str = ""


def format_score_comment(feature: ScoredFeature) -> str:
    """Markdown score breakdown posted on the tracker issue."""
    lines = [
        "## Priority Score Breakdown",
        "",
        f"**Final Score**: {feature.final_score:.1f}/10",
        f"**Framework**: {feature.framework.value}",
        f"**Customer Tier**: {feature.customer_tier.value} ({feature.multiplier:g}x multiplier)",
        "",
        "### Factor Scores:",
    ]
    for name, label in COMMENT_FACTORS:
        value = getattr(feature.scores, name)
        if value is not None:
            lines.append(f"- {label}: {value:g}/10")

    if feature.flags:
        lines.extend(["", "### Flags:"])
        lines.extend(f"- {flag.value}" for flag in feature.flags)

    lines.extend(["", "*Scored by the feature priority dashboard*"])
    return "\n".join(lines)


def group_by_project(features: Iterable[ScoredFeature]) -> Dict[str, List[ScoredFeature]]:
    """Group by project name, keeping first-seen project order."""
    grouped: Dict[str, List[ScoredFeature]] = {}
    for feature in features:
        grouped.setdefault(feature.project_name or UNKNOWN_PROJECT, []).append(feature)
    return grouped


def build_tracker_updates(
    features: Iterable[ScoredFeature],
    add_comments: bool = False,
    sort_order_start: int = DEFAULT_SORT_ORDER_START,
) -> List[TrackerUpdatePayload]:
    """Per-project priority and sort-order updates.

    Within each project, features are ordered by final score (highest first) and
    numbered from `sort_order_start`; lower sort order sits higher in the tracker.
    """
    payloads: List[TrackerUpdatePayload] = []
    grouped = group_by_project(features)

    for project_name, project_features in grouped.items():
        ranked = sorted(project_features, key=lambda f: f.final_score, reverse=True)
        for i, feature in enumerate(ranked):
            sort_order = sort_order_start + i
            priority = feature.mapped_priority
            payloads.append(
                TrackerUpdatePayload(
                    issue_id=feature.id,
                    project_name=project_name,
                    priority=priority,
                    sort_order=sort_order,
                    comment=format_score_comment(feature) if add_comments else None,
                    audit_note=f"Priority: {int(priority)}, SortOrder: {sort_order} (in {project_name})",
                )
            )

    logger.info(
        "tracker.updates_built",
        extra={"count": len(payloads), "projects": len(grouped)},
    )
    return payloads


__all__ = [
    "TrackerUpdatePayload",
    "UNKNOWN_PROJECT",
    "DEFAULT_SORT_ORDER_START",
    "MAX_ISSUE_COMMENTS",
    "issue_labels",
    "is_backlog_issue",
    "feature_from_tracker_issue",
    "features_from_tracker_issues",
    "format_score_comment",
    "group_by_project",
    "build_tracker_updates",
]
