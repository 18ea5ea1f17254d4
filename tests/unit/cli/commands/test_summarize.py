"""Unit tests for the summarize command."""

import json

from timelog_report.cli import cli


class TestSummarizeCommand:
    """Test suite for summarize command."""

    def test_table_output(self, runner, export_file):
        result = runner.invoke(cli, ["summarize", str(export_file)])

        assert result.exit_code == 0, result.output
        assert "Project: app" in result.output
        assert "Tracked time:    1.50h (1h 30m)" in result.output
        assert "Contributors:    2" in result.output
        assert "Alice" in result.output
        assert "#7 Fix login" in result.output

    def test_from_filters_entries(self, runner, export_file):
        result = runner.invoke(cli, ["summarize", str(export_file), "--from", "2024-01-10"])

        assert result.exit_code == 0, result.output
        assert "Tracked time:    0.50h (30m)" in result.output

    def test_json_report_file(self, runner, export_file, tmp_path):
        output = tmp_path / "report.json"

        result = runner.invoke(
            cli,
            ["summarize", str(export_file), "--month", "2024-01", "--format", "json",
             "--output", str(output)],
        )

        assert result.exit_code == 0, result.output
        report = json.loads(output.read_text(encoding="utf-8"))
        assert report["project"]["name"] == "app"
        assert report["range"] == {"from": "2024-01-01T00:00:00Z", "to": "2024-02-01T00:00:00Z"}
        assert report["summary"]["total_seconds"] == 5400
        assert [g["label"] for g in report["summary"]["by_user"]] == ["Alice", "Bob"]
        assert report["generated_at"].endswith("Z")
        assert report["warnings"] == []

    def test_project_name_falls_back_to_setting(self, runner, list_export_file, tmp_path):
        output = tmp_path / "report.json"

        result = runner.invoke(
            cli,
            ["summarize", str(list_export_file), "--format", "json", "--output", str(output)],
        )

        assert result.exit_code == 0, result.output
        assert json.loads(output.read_text())["project"]["name"] == "group/app"

    def test_commit_activity(self, runner, export_file, tmp_path):
        commits = tmp_path / "commits.json"
        commits.write_text(
            json.dumps([{"committed_date": "2024-01-08T12:00:00Z"}] * 3), encoding="utf-8"
        )
        output = tmp_path / "report.json"

        result = runner.invoke(
            cli,
            ["summarize", str(export_file), "--commits", str(commits), "--commit-month",
             "2024-01", "--format", "json", "--output", str(output)],
        )

        assert result.exit_code == 0, result.output
        report = json.loads(output.read_text())
        assert len(report["commit_activity"]) == 31
        assert report["commit_activity"][7] == {"date": "2024-01-08", "count": 3}
        assert report["commit_range"]["from"] == "2024-01-01T00:00:00Z"

    def test_failing_commit_activity_becomes_warning(self, runner, export_file, tmp_path):
        commits = tmp_path / "commits.json"
        commits.write_text(json.dumps([]), encoding="utf-8")

        result = runner.invoke(cli, ["summarize", str(export_file), "--commits", str(commits)])

        assert result.exit_code == 0, result.output
        assert "Month must use YYYY-MM format" in result.output
        assert "Tracked time:" in result.output

    def test_month_with_from_is_usage_error(self, runner, export_file):
        result = runner.invoke(
            cli, ["summarize", str(export_file), "--month", "2024-01", "--from", "2024-01-01"]
        )

        assert result.exit_code == 2

    def test_invalid_export(self, runner, tmp_path):
        broken = tmp_path / "broken.json"
        broken.write_text("{not json", encoding="utf-8")

        result = runner.invoke(cli, ["summarize", str(broken)])

        assert result.exit_code == 3

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(cli, ["summarize", str(tmp_path / "missing.json")])
        assert result.exit_code == 2

    def test_invalid_settings(self, runner, export_file, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "VERBOSE")

        result = runner.invoke(cli, ["summarize", str(export_file)])

        assert result.exit_code == 1

    def test_unwritable_output(self, runner, export_file, tmp_path):
        output = tmp_path / "missing-dir" / "report.json"

        result = runner.invoke(
            cli, ["summarize", str(export_file), "--format", "json", "--output", str(output)]
        )

        assert result.exit_code == 4
        assert "Processing Error" in result.output
