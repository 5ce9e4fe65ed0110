"""Tests for configuration loading."""

from pathlib import Path

import pytest

from attendo.config import DATA_DIR, Config, load_config
from attendo.core.planner import InvalidConfiguration, WorkingHours


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "attendo.conf")
        assert config == Config()

    def test_parses_keys(self, tmp_path):
        path = tmp_path / "attendo.conf"
        path.write_text(
            "# Attendo settings\n"
            "RECOMMENDATION_API_URL=http://rag.internal:8000/recommendations/\n"
            "RECOMMENDATION_TIMEOUT=2.5\n"
            'WORKING_HOURS="08:30-17:00"  # campus hours\n'
            "BREAK_DURATION_MINUTES=20\n"
            "LOOKAHEAD_DAYS=3 # short horizon\n"
            "PLAN_RETENTION_DAYS=14\n"
            "DATA_DIR='~/attendo-data'\n"
            "PRECOMPUTE_TIME=21:30\n"
            "TIMEZONE=Europe/London\n"
            "not a setting\n"
            "UNKNOWN_KEY=ignored\n"
        )

        config = load_config(path)

        assert config.recommendation_api_url == "http://rag.internal:8000/recommendations/"
        assert config.recommendation_timeout == 2.5
        assert config.working_hours == "08:30-17:00"
        assert config.break_duration_minutes == 20
        assert config.lookahead_days == 3
        assert config.plan_retention_days == 14
        assert config.data_dir == "~/attendo-data"
        assert config.precompute_time == "21:30"
        assert config.timezone == "Europe/London"

    def test_bad_integer_keeps_default(self, tmp_path):
        path = tmp_path / "attendo.conf"
        path.write_text("LOOKAHEAD_DAYS=a week\n")
        assert load_config(path).lookahead_days == 7


class TestWorkingHoursWindow:
    def test_default(self):
        assert Config().working_hours_window() == WorkingHours(540, 1080)

    def test_custom(self):
        assert Config(working_hours="08:30-17:15").working_hours_window() == WorkingHours(510, 1035)

    def test_twelve_hour_clock(self):
        assert Config(working_hours="9:00 AM-6:00 PM").working_hours_window() == WorkingHours(540, 1080)

    @pytest.mark.parametrize("value", ["09:00", "nine-five", "18:00-09:00", "09:00-24:00"])
    def test_invalid(self, value):
        with pytest.raises(InvalidConfiguration):
            Config(working_hours=value).working_hours_window()


class TestResolveDataDir:
    def test_default(self):
        assert Config().resolve_data_dir() == DATA_DIR

    def test_configured(self, tmp_path):
        assert Config(data_dir=str(tmp_path)).resolve_data_dir() == Path(tmp_path)
