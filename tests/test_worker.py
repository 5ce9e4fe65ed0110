"""Tests for the background worker."""

from unittest.mock import MagicMock, patch

import pytest

from attendo.config import Config
from attendo.worker import run_precompute, setup_scheduler


@pytest.fixture
def services():
    services = MagicMock()
    services.config = Config(precompute_time="21:45", timezone="UTC")
    return services


class TestSetupScheduler:
    def test_schedules_precompute_job(self, services):
        scheduler = setup_scheduler(services)
        job = scheduler.get_job("precompute_plans")
        assert job is not None
        assert job.args == (services,)
        assert "hour='21'" in str(job.trigger)
        assert "minute='45'" in str(job.trigger)

    def test_invalid_time(self, services):
        services.config.precompute_time = "late evening"
        with pytest.raises(ValueError, match="PRECOMPUTE_TIME"):
            setup_scheduler(services)


class TestRunPrecompute:
    @patch("attendo.worker.precompute_plans")
    def test_calls_workflow(self, mock_precompute, services):
        run_precompute(services)
        mock_precompute.assert_called_once()
        assert mock_precompute.call_args.args[0] is services

    @patch("attendo.worker.precompute_plans")
    def test_logs_failures(self, mock_precompute, services, caplog):
        mock_precompute.side_effect = RuntimeError("disk full")
        run_precompute(services)
        assert "Plan precomputation failed: disk full" in caplog.text
