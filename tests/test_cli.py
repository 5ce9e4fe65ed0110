"""Tests for the click CLI."""

import json
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from attendo.adapters.file_student_repo import FileStudentRepository
from attendo.cli import main
from attendo.config import Config
from attendo.core.students import ClassEntry, Student


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def config(tmp_path):
    return Config(data_dir=str(tmp_path))


@pytest.fixture
def seeded(config, tmp_path):
    repo = FileStudentRepository(tmp_path / "students")
    repo.save(
        Student(
            roll_no="21CS001",
            name="Asha",
            subjects=[
                ClassEntry("CS101", "Wednesday", "09:00", "60 minutes"),
                ClassEntry("MA102", "Monday", "11:00", "90 minutes"),
            ],
        )
    )
    return repo


@pytest.fixture
def plan_files(tmp_path):
    timetable = tmp_path / "timetable.json"
    timetable.write_text(
        json.dumps(
            [
                {"subject_code": "CS101", "day": "Wednesday", "start_time": "09:00", "duration": "60 minutes"},
                {"subject_code": "MA102", "day": "Thursday", "start_time": "10:00", "duration": "60 minutes"},
            ]
        )
    )
    candidates = tmp_path / "candidates.json"
    candidates.write_text(
        json.dumps(
            [
                {"task_id": "t1", "title": "Revise graphs", "estimated_time": 30, "urgency_level": "high"},
                {"task_id": "t2", "title": "Read chapter 4"},
            ]
        )
    )
    return timetable, candidates


class TestPlanCommand:
    def test_plans_around_classes(self, runner, config, plan_files):
        timetable, candidates = plan_files
        with patch("attendo.cli.load_config", return_value=config):
            result = runner.invoke(main, ["plan", str(timetable), str(candidates), "--date", "2025-01-15"])

        assert result.exit_code == 0, result.output
        assert "Wednesday, January 15 (09:00-18:00)" in result.output
        assert "10:00-10:30 [high] Revise graphs" in result.output
        assert "10:35-10:50 [medium] Read chapter 4" in result.output

    def test_json_output(self, runner, config, plan_files):
        timetable, candidates = plan_files
        with patch("attendo.cli.load_config", return_value=config):
            result = runner.invoke(
                main,
                ["plan", str(timetable), str(candidates), "--date", "2025-01-15", "--json"],
            )

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert [t["taskId"] for t in data] == ["t1", "t2"]

    def test_invalid_working_hours(self, runner, config, plan_files):
        timetable, candidates = plan_files
        with patch("attendo.cli.load_config", return_value=config):
            result = runner.invoke(
                main,
                ["plan", str(timetable), str(candidates), "--working-hours", "17:00-09:00"],
            )

        assert result.exit_code == 1
        assert "must be before" in result.output

    def test_invalid_date(self, runner, config, plan_files):
        timetable, candidates = plan_files
        with patch("attendo.cli.load_config", return_value=config):
            result = runner.invoke(main, ["plan", str(timetable), str(candidates), "--date", "15/01/2025"])

        assert result.exit_code == 2


class TestScheduleCommand:
    def test_unknown_student(self, runner, config):
        with patch("attendo.cli.load_config", return_value=config):
            result = runner.invoke(main, ["schedule", "nobody", "--date", "2025-01-15"])

        assert result.exit_code == 1
        assert "Student not found" in result.output

    def test_json_schedule_for_past_date(self, runner, config, seeded):
        recommender = MagicMock()
        recommender.fetch.return_value = []
        with patch("attendo.cli.load_config", return_value=config), patch(
            "attendo.workflows.RecommendationAPIAdapter", return_value=recommender
        ):
            result = runner.invoke(main, ["schedule", "21CS001", "--date", "2025-01-15", "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["day"] == "Wednesday"
        assert [c["subject"] for c in data["classes"]] == ["CS101"]


    def test_rejects_path_like_roll_number(self, runner, config, tmp_path):
        with patch("attendo.cli.load_config", return_value=config):
            result = runner.invoke(main, ["schedule", "../x", "--date", "2025-01-15"])

        assert result.exit_code == 1
        assert "Invalid roll number" in result.output
        assert not (tmp_path / "x.json").exists()


class TestCoursesCommand:
    def test_lists_courses(self, runner, config, seeded):
        with patch("attendo.cli.load_config", return_value=config):
            result = runner.invoke(main, ["courses", "21CS001", "--json"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == ["CS101", "MA102"]


class TestAttendCommand:
    def test_marks_then_rejects_duplicate(self, runner, config, seeded):
        with patch("attendo.cli.load_config", return_value=config):
            first = runner.invoke(main, ["attend", "21CS001", "s-1", "CS101"])
            second = runner.invoke(main, ["attend", "21CS001", "s-1", "CS101"])

        assert first.exit_code == 0, first.output
        assert "Attendance marked for CS101 (1 present)" in first.output
        assert second.exit_code == 1
        assert "already marked" in second.output


class TestInterestsCommand:
    def test_sets_interests(self, runner, config, seeded):
        with patch("attendo.cli.load_config", return_value=config):
            result = runner.invoke(main, ["interests", "21CS001", "robotics", "ml"])

        assert result.exit_code == 0, result.output
        assert seeded.get("21CS001").interests == ["robotics", "ml"]


class TestCleanupCommand:
    def test_rejects_path_like_roll_number(self, runner, config):
        with patch("attendo.cli.load_config", return_value=config):
            result = runner.invoke(main, ["cleanup", "../students"])

        assert result.exit_code == 1
        assert "Invalid roll number" in result.output
