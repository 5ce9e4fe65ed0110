"""Configuration management for Attendo."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .core.planner import InvalidConfiguration, WorkingHours
from .core.timeutil import time_to_minutes

logger = logging.getLogger(__name__)

ATTENDO_HOME = Path(os.environ.get("ATTENDO_HOME", Path.home() / "attendo"))
CONFIG_FILE = ATTENDO_HOME / "config" / "attendo.conf"
DATA_DIR = ATTENDO_HOME / "data"


@dataclass
class Config:
    """Attendo configuration."""

    recommendation_api_url: str = "http://localhost:8000/recommendations/"
    recommendation_timeout: float = 10.0
    working_hours: str = "09:00-18:00"
    break_duration_minutes: int = 15
    lookahead_days: int = 7
    plan_retention_days: int = 30
    data_dir: str = ""
    precompute_time: str = "22:00"
    timezone: str = "Asia/Kolkata"

    def working_hours_window(self) -> WorkingHours:
        """Parse working_hours ("HH:MM-HH:MM") into a WorkingHours window."""
        start_str, sep, end_str = self.working_hours.partition("-")
        if not sep:
            raise InvalidConfiguration(f"Invalid working hours: {self.working_hours!r}")
        return WorkingHours(
            start_minutes=time_to_minutes(start_str),
            end_minutes=time_to_minutes(end_str),
        )

    def resolve_data_dir(self) -> Path:
        """Configured data directory, or the default under ATTENDO_HOME."""
        if self.data_dir:
            return Path(self.data_dir).expanduser()
        return DATA_DIR


def _parse_int(key: str, value: str, default: int) -> int:
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid integer for {key.upper()}: {value!r}, using {default}")
        return default


def load_config(path: Path | None = None) -> Config:
    """Load configuration from attendo.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = value.strip()

        # Handle quoted values with inline comments: "value" # comment
        if value[:1] in ('"', "'"):
            quote = value[0]
            end_quote = value.find(quote, 1)
            value = value[1:end_quote] if end_quote != -1 else value[1:]
        elif "#" in value:
            value = value.split("#")[0].strip()

        match key:
            case "recommendation_api_url":
                config.recommendation_api_url = value
            case "recommendation_timeout":
                try:
                    config.recommendation_timeout = float(value)
                except ValueError:
                    logger.warning(f"Invalid RECOMMENDATION_TIMEOUT: {value!r}")
            case "working_hours":
                config.working_hours = value
            case "break_duration_minutes":
                config.break_duration_minutes = _parse_int(key, value, config.break_duration_minutes)
            case "lookahead_days":
                config.lookahead_days = _parse_int(key, value, config.lookahead_days)
            case "plan_retention_days":
                config.plan_retention_days = _parse_int(key, value, config.plan_retention_days)
            case "data_dir":
                config.data_dir = value
            case "precompute_time":
                config.precompute_time = value
            case "timezone":
                config.timezone = value

    return config
