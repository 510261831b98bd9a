#!/usr/bin/env python3
"""
CLI entrypoint for scoring a JSON fixture of features.

Usage examples:
    # Rank with the configured framework
    python -m test_scripts.score_features_cli --input test_scripts/fixtures/sample_features.json
    # Force RICE and show every framework side by side
    python -m test_scripts.score_features_cli --input data.json --framework rice --compare
    # Also print the tracker write-back payloads
    python -m test_scripts.score_features_cli --input data.json --tracker --comments

Fixture shape:
    {"features": [...], "aiScores": {"<feature id>": {...}}, "overrides": [{...}, ...]}

Flags:
    --input PATH          JSON fixture (required)
    --framework NAME      weighted, rice, ice, value-effort, moscow (default: settings.SCORING.active_framework)
    --compare             Print base/final score under every framework
    --tracker             Print tracker update payloads (priority + sort order)
    --comments            Include the markdown score comment in tracker payloads
    --json-logs           Emit JSON logs instead of plain text
    --log-level LEVEL     Logging level (INFO, DEBUG, etc.)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

from featureprio.config import setup_json_logging
from featureprio.llm.models import AIScoreRecord
from featureprio.schemas.feature import FeatureRequest
from featureprio.schemas.override import ManualOverride, overrides_by_feature
from featureprio.services.scoring import priority_label
from featureprio.services.scoring_service import ScoringService


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Score and rank features from a JSON fixture.")
    parser.add_argument("--input", type=str, required=True, help="Path to the JSON fixture.")
    parser.add_argument(
        "--framework",
        type=str,
        default=None,
        help="weighted, rice, ice, value-effort or moscow. Omit to use the configured framework.",
    )
    parser.add_argument("--compare", action="store_true", help="Show scores under every framework.")
    parser.add_argument("--tracker", action="store_true", help="Show tracker update payloads.")
    parser.add_argument("--comments", action="store_true", help="Include score comments in payloads.")
    parser.add_argument("--json-logs", action="store_true", help="Emit JSON logs.")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (e.g. INFO, DEBUG).",
    )
    return parser.parse_args()


def configure_logging(level: str, json_logs: bool) -> None:
    lvl = getattr(logging, level.upper(), logging.INFO)
    if json_logs:
        setup_json_logging(lvl)
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s %(levelname)s %(name)s :: %(message)s",
    )


def load_fixture(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, dict):
        raise ValueError("Fixture must be a JSON object with a 'features' list.")

    features: List[FeatureRequest] = [FeatureRequest.model_validate(item) for item in raw.get("features", [])]
    ai_scores = {
        feature_id: AIScoreRecord.model_validate(record)
        for feature_id, record in (raw.get("aiScores") or {}).items()
    }
    overrides = overrides_by_feature(ManualOverride.model_validate(item) for item in raw.get("overrides", []))
    return {"features": features, "ai_scores": ai_scores, "overrides": overrides}


def main() -> int:
    args = parse_args()
    configure_logging(args.log_level, args.json_logs)
    logger = logging.getLogger("featureprio.cli")
    logger.info("scoring.cli.start")

    try:
        data = load_fixture(Path(args.input))
        service = ScoringService()
        ranked = service.score_all(
            data["features"],
            ai_scores=data["ai_scores"],
            overrides=data["overrides"],
            framework=args.framework,
        )

        print(f"{'#':>3}  {'ID':<12} {'Final':>6} {'Base':>6} {'x':>5}  {'Priority':<12} Flags")
        for rank, scored in enumerate(ranked, start=1):
            flags = ", ".join(flag.value for flag in scored.flags)
            print(
                f"{rank:>3}  {scored.identifier or scored.id:<12} {scored.final_score:>6.2f} "
                f"{scored.base_score:>6.2f} {scored.multiplier:>5.2f}  "
                f"{priority_label(scored.mapped_priority):<12} {flags}"
            )

        if args.compare:
            print()
            for feature in data["features"]:
                comparison = service.compare_frameworks(
                    feature,
                    data["ai_scores"].get(feature.id),
                    data["overrides"].get(feature.id),
                )
                row = "  ".join(
                    f"{framework.value}={score.final_score:.2f}" for framework, score in comparison.items()
                )
                print(f"{feature.identifier or feature.id:<12} {row}")

        if args.tracker:
            print()
            for payload in service.tracker_updates(ranked, add_comments=args.comments or None):
                print(json.dumps(payload.model_dump(mode="json"), indent=2))

        logger.info("scoring.cli.done", extra={"scored": len(ranked)})
        return 0
    except KeyboardInterrupt:
        logger.warning("scoring.cli.interrupted")
        return 130
    except Exception:
        logger.exception("scoring.cli.error")
        return 1


if __name__ == "__main__":
    sys.exit(main())
