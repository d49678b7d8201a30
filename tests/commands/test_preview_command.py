"""Unit tests for the 'preview' command."""

from __future__ import annotations

import json
from datetime import date, timedelta

from typer.testing import CliRunner

from taskrecur.main import app

runner = CliRunner()


def _lines(result) -> list[str]:
    return [line for line in result.output.splitlines() if line.strip()]


class TestPreviewCommand:
    def test_weekly_on_listed_days(self):
        result = runner.invoke(
            app,
            [
                "preview",
                "--kind", "weekly",
                "--days", "mon,wed,fri",
                "--start", "2024-01-01",
                "--max", "4",
                "-o", "quiet",
            ],
        )
        assert result.exit_code == 0, result.output
        assert _lines(result) == [
            "2024-01-01",
            "2024-01-03",
            "2024-01-05",
            "2024-01-08",
            "2024-01-10",
        ]

    def test_numeric_weekdays(self):
        result = runner.invoke(
            app,
            ["preview", "-k", "weekly", "--days", "1,3,5", "-s", "2024-01-01", "-n", "2", "-o", "quiet"],
        )
        assert _lines(result) == ["2024-01-01", "2024-01-03", "2024-01-05"]

    def test_positional_rule(self):
        result = runner.invoke(
            app,
            [
                "preview",
                "--kind", "monthly",
                "--position", "last",
                "--weekday", "friday",
                "--start", "2024-01-15",
                "--max", "3",
                "-o", "quiet",
            ],
        )
        assert result.exit_code == 0, result.output
        assert _lines(result)[1:] == ["2024-02-23", "2024-03-29", "2024-04-26"]

    def test_json_output(self):
        result = runner.invoke(
            app,
            ["preview", "--preset", "weekdays", "--start", "2024-06-01", "--max", "5", "-o", "json"],
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert len(data) == 6
        assert data[0]["id"] == "original"
        assert data[0]["is_generated"] is False
        assert [item["date"] for item in data[1:]] == [
            "2024-06-03",
            "2024-06-04",
            "2024-06-05",
            "2024-06-06",
            "2024-06-07",
        ]

    def test_yaml_output(self):
        result = runner.invoke(
            app,
            ["preview", "--preset", "yearly", "--start", "2024-02-29", "--max", "1", "-o", "yaml"],
        )
        assert result.exit_code == 0, result.output
        assert "date: '2025-02-28'" in result.output

    def test_pretty_output(self):
        result = runner.invoke(
            app, ["preview", "--preset", "weekly", "--start", "2024-01-01", "--max", "2"]
        )
        assert result.exit_code == 0, result.output
        assert "Weekly, never ends" in result.output
        assert "2024-01-15" in result.output
        assert "2 generated occurrence(s) after the original" in result.output

    def test_uses_configured_default_max(self):
        result = runner.invoke(
            app, ["preview", "--preset", "daily", "--start", "2024-01-01", "-o", "quiet"]
        )
        assert len(_lines(result)) == 11

    def test_count(self):
        result = runner.invoke(
            app,
            ["preview", "--preset", "daily", "--count", "3", "--start", "2024-01-01", "-o", "quiet"],
        )
        assert _lines(result) == ["2024-01-01", "2024-01-02", "2024-01-03", "2024-01-04"]

    def test_until(self):
        start = date.today() + timedelta(days=1)
        until = start + timedelta(days=4)
        result = runner.invoke(
            app,
            [
                "preview",
                "--kind", "daily",
                "--start", start.isoformat(),
                "--until", until.isoformat(),
                "--max", "50",
                "-o", "quiet",
            ],
        )
        assert result.exit_code == 0, result.output
        assert len(_lines(result)) == 5
        assert _lines(result)[-1] == until.isoformat()

    def test_warns_when_rule_ends_immediately(self):
        result = runner.invoke(
            app, ["preview", "--kind", "daily", "--start", "today", "--until", "today"]
        )
        assert result.exit_code == 0, result.output
        assert "Warning:" in result.output

    def test_fields_file(self, tmp_path):
        fields = tmp_path / "fields.json"
        fields.write_text(
            json.dumps({"pattern": "monthly", "customMonthDays": [1, 15]}), encoding="utf-8"
        )
        result = runner.invoke(
            app,
            ["preview", "--fields", str(fields), "--start", "2024-01-10", "--max", "3", "-o", "quiet"],
        )
        assert result.exit_code == 0, result.output
        assert _lines(result) == ["2024-01-10", "2024-01-15", "2024-02-01", "2024-02-15"]


class TestPreviewErrors:
    def test_invalid_rule_reports_errors(self):
        result = runner.invoke(
            app, ["preview", "--kind", "daily", "--interval", "0", "--start", "2024-01-01"]
        )
        assert result.exit_code == 2
        assert "Interval must be at least 1" in result.output

    def test_past_end_date(self):
        result = runner.invoke(
            app, ["preview", "--kind", "daily", "--until", "2001-01-01"]
        )
        assert result.exit_code == 2
        assert "End date cannot be in the past" in result.output

    def test_unknown_preset(self):
        result = runner.invoke(app, ["preview", "--preset", "hourly"])
        assert result.exit_code == 5
        assert "Unknown preset: hourly" in result.output

    def test_no_rule_given(self):
        result = runner.invoke(app, ["preview", "--start", "2024-01-01"])
        assert result.exit_code == 2
        assert "--preset, --kind or --fields" in result.output

    def test_max_above_limit(self):
        result = runner.invoke(app, ["preview", "--preset", "daily", "--max", "501"])
        assert result.exit_code == 2
        assert "--max must be between 0 and 500" in result.output

    def test_until_and_count_together(self):
        result = runner.invoke(
            app, ["preview", "--preset", "daily", "--until", "2099-01-01", "--count", "2"]
        )
        assert result.exit_code == 2

    def test_bad_start_date(self):
        result = runner.invoke(app, ["preview", "--preset", "daily", "--start", "someday"])
        assert result.exit_code == 2
        assert "Invalid start date" in result.output

    def test_unknown_weekday(self):
        result = runner.invoke(app, ["preview", "--kind", "weekly", "--days", "funday"])
        assert result.exit_code == 2
        assert "Unknown weekday: funday" in result.output

    def test_missing_fields_file(self, tmp_path):
        result = runner.invoke(app, ["preview", "--fields", str(tmp_path / "missing.json")])
        assert result.exit_code == 5

    def test_fields_file_not_an_object(self, tmp_path):
        fields = tmp_path / "fields.json"
        fields.write_text("[1, 2]", encoding="utf-8")
        result = runner.invoke(app, ["preview", "--fields", str(fields)])
        assert result.exit_code == 2
        assert "JSON object" in result.output
