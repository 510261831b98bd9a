# feature_priority_dashboard/featureprio/config.py

from typing import Optional
from pathlib import Path
import json
import logging
import sys

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv
from pythonjsonlogger.json import JsonFormatter

from featureprio.schemas.settings import ScoringSettings

load_dotenv()

# Custom JSON formatter that excludes null/None fields
class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter that only includes fields with non-None values."""

    def add_fields(self, log_record, record, message_dict):
        """Override to filter out None values before adding to JSON output."""
        super().add_fields(log_record, record, message_dict)

        for key, value in dict(log_record).items():
            if value is None:
                del log_record[key]

def setup_json_logging(log_level: int = logging.INFO) -> None:
    """Initialize JSON logging for the featureprio logger tree."""
    handler = logging.StreamHandler(sys.stdout)

    # fields shared by the scoring, service and tracker loggers
    formatter = CustomJsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s "
        "%(feature_id)s %(framework)s %(fallback)s "
        "%(base_score)s %(final_score)s %(warning)s "
        "%(count)s %(total)s %(scored)s %(failed)s %(projects)s"
    )

    handler.setFormatter(formatter)

    root_logger = logging.getLogger("featureprio")
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers = []

    root_logger.addHandler(handler)

    # Prevent propagation to avoid duplicate logs
    root_logger.propagate = False


BASE_DIR = Path(__file__).resolve().parent.parent  # project root folder


class Settings(BaseSettings):
    # App
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # Scoring: inline (SCORING__ACTIVE_FRAMEWORK=rice) or from a JSON file
    SCORING: ScoringSettings = Field(default_factory=ScoringSettings)
    SCORING_CONFIG_FILE: Optional[str] = None
    SCORING_BATCH_LOG_EVERY: int = 100

    # Tracker write-back
    TRACKER_SORT_ORDER_START: int = -1000
    TRACKER_ADD_COMMENTS: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )

    @model_validator(mode="after")
    def load_scoring_from_file(self) -> "Settings":
        """
        If SCORING_CONFIG_FILE is set, read that JSON file
        and use it to populate SCORING.
        """
        if self.SCORING_CONFIG_FILE:
            cfg_path = Path(self.SCORING_CONFIG_FILE)
            if not cfg_path.is_absolute():
                cfg_path = BASE_DIR / cfg_path

            if not cfg_path.exists():
                raise FileNotFoundError(
                    f"SCORING_CONFIG_FILE points to {cfg_path}, but it does not exist."
                )

            with cfg_path.open("r", encoding="utf-8") as f:
                raw = json.load(f)

            if not isinstance(raw, dict):
                raise ValueError(
                    "SCORING config file must contain a JSON object (activeFramework, weights, tierMultipliers, defaultModel)."
                )

            self.SCORING = ScoringSettings.model_validate(raw)

        return self

    def log_level_value(self) -> int:
        level = logging.getLevelName(self.LOG_LEVEL.upper())
        return level if isinstance(level, int) else logging.INFO


settings = Settings()
