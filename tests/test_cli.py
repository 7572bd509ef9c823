"""Tests for Encore CLI commands."""

import json
from pathlib import Path

from typer.testing import CliRunner

from encore import __version__
from encore.cli import app

runner = CliRunner()


def _json(output: str) -> object:
    return json.loads(output)


class TestVersionCommand:
    """Tests for the --version flag."""

    def test_version_shows_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"Encore v{__version__}" in result.stdout


class TestGlobalOptions:
    """Tests for global options."""

    def test_invalid_log_level(self) -> None:
        result = runner.invoke(app, ["--log-level", "LOUD", "codes"])
        assert result.exit_code == 2

    def test_invalid_log_format(self) -> None:
        result = runner.invoke(app, ["--log-format", "xml", "codes"])
        assert result.exit_code == 2

    def test_log_level_is_case_insensitive(self) -> None:
        result = runner.invoke(app, ["--log-level", "debug", "codes", "--json"])
        assert result.exit_code == 0

    def test_config_file_drives_retry_schedule(self, sample_yaml_config: Path) -> None:
        result = runner.invoke(
            app,
            [
                "--config",
                str(sample_yaml_config),
                "classify",
                "FUNCTION_INVOCATION_TIMEOUT",
                "--json",
            ],
        )
        assert result.exit_code == 0
        data = _json(result.stdout)
        assert data["maxAttempts"] == 5
        assert data["backoffMs"] == [500, 1000, 2000, 4000]

    def test_invalid_config_file(self, tmp_path: Path) -> None:
        config_path = tmp_path / "bad.yaml"
        config_path.write_text("retry:\n  max_attempts: 0\n")
        result = runner.invoke(app, ["--config", str(config_path), "codes"])
        assert result.exit_code == 2
        assert "Error loading config" in result.output

    def test_missing_config_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["--config", str(tmp_path / "none.yaml"), "codes"])
        assert result.exit_code == 2


class TestCodesCommand:
    """Tests for the codes command."""

    def test_json_lists_every_code(self) -> None:
        result = runner.invoke(app, ["codes", "--json"])
        assert result.exit_code == 0
        data = _json(result.stdout)
        assert len(data) == 75
        codes = {entry["code"] for entry in data}
        assert "FUNCTION_THROTTLED" in codes
        assert "NOT_FOUND" in codes

    def test_shared_code_listed_once_with_platform_entry(self) -> None:
        data = _json(runner.invoke(app, ["codes", "--json"]).stdout)
        throttled = [entry for entry in data if entry["code"] == "FUNCTION_THROTTLED"]
        assert len(throttled) == 1
        assert throttled[0]["category"] == "Internal"

    def test_category_filter(self) -> None:
        result = runner.invoke(app, ["codes", "--category", "sandbox", "--json"])
        assert result.exit_code == 0
        assert [entry["code"] for entry in _json(result.stdout)] == [
            "SANDBOX_NOT_FOUND",
            "SANDBOX_NOT_LISTENING",
            "SANDBOX_STOPPED",
        ]

    def test_table_output(self) -> None:
        result = runner.invoke(app, ["codes", "--category", "Sandbox"])
        assert result.exit_code == 0
        assert "SANDBOX_STOPPED" in result.stdout
        assert "3 code(s)" in result.stdout

    def test_unknown_category(self) -> None:
        result = runner.invoke(app, ["codes", "--category", "Bogus"])
        assert result.exit_code == 2


class TestExplainCommand:
    """Tests for the explain command."""

    def test_default_page(self) -> None:
        result = runner.invoke(app, ["explain", "--json"])
        assert result.exit_code == 0
        assert _json(result.stdout) == {
            "code": "NOT_FOUND",
            "message": "The page you're looking for doesn't exist.",
            "category": "Deployment",
            "statusCode": 404,
            "actionable": True,
            "contactSupport": False,
        }

    def test_default_page_rendered(self) -> None:
        result = runner.invoke(app, ["explain"])
        assert result.exit_code == 0
        assert "NOT_FOUND" in result.stdout
        assert "Try again" in result.stdout

    def test_platform_code_shows_support_notice(self) -> None:
        result = runner.invoke(app, ["explain", "FUNCTION_THROTTLED"])
        assert result.exit_code == 0
        assert "FUNCTION_THROTTLED" in result.stdout
        assert "platform issue" in result.stdout
        assert "Try again" not in result.stdout

    def test_unknown_code_hides_code_line(self) -> None:
        result = runner.invoke(app, ["explain", "mystery"])
        assert result.exit_code == 0
        assert "mystery" in result.stdout
        assert "Error Code" not in result.stdout
        assert "Try again" in result.stdout

    def test_details(self) -> None:
        result = runner.invoke(app, ["explain", "NOT_FOUND", "--details", "--json"])
        data = _json(result.stdout)
        assert data["description"] == "The requested resource could not be found."
        assert data["technicalMessage"] == "Resource not found"


class TestClassifyCommand:
    """Tests for the classify command."""

    def test_retryable_code(self) -> None:
        result = runner.invoke(app, ["classify", "FUNCTION_INVOCATION_TIMEOUT", "--json"])
        assert result.exit_code == 0
        data = _json(result.stdout)
        assert data["code"] == "FUNCTION_INVOCATION_TIMEOUT"
        assert data["statusCode"] == 504
        assert data["retryable"] is True
        assert data["maxAttempts"] == 3
        assert data["backoffMs"] == [1000, 2000]

    def test_throttled_schedule(self) -> None:
        result = runner.invoke(
            app, ["classify", "FUNCTION_THROTTLED", "--max-attempts", "4", "--json"]
        )
        assert _json(result.stdout)["backoffMs"] == [5000, 5000, 5000]

    def test_response_without_registered_header(self) -> None:
        result = runner.invoke(
            app,
            [
                "classify",
                "NOPE",
                "--status",
                "503",
                "--status-text",
                "Service Unavailable",
                "--json",
            ],
        )
        data = _json(result.stdout)
        assert data["code"] == "HTTP_503"
        assert data["category"] == "HTTP"
        assert data["message"] == "Service Unavailable"
        assert data["httpStatus"] == 503
        assert data["retryable"] is True

    def test_not_retryable_response(self) -> None:
        result = runner.invoke(
            app, ["classify", "RESOURCE_NOT_FOUND", "--status", "404", "--json"]
        )
        data = _json(result.stdout)
        assert data["code"] == "RESOURCE_NOT_FOUND"
        assert data["retryable"] is False
        assert data["backoffMs"] == []

    def test_free_text(self) -> None:
        result = runner.invoke(app, ["classify", "something odd", "--json"])
        data = _json(result.stdout)
        assert data["code"] == "UNKNOWN_ERROR"
        assert data["userMessage"] == "something odd"

    def test_table_output(self) -> None:
        result = runner.invoke(app, ["classify", "DNS_HOSTNAME_SERVER_ERROR"])
        assert result.exit_code == 0
        assert "DNS_HOSTNAME_SERVER_ERROR" in result.stdout
        assert "Retryable" in result.stdout
        assert "1.0s, 2.0s" in result.stdout

    def test_invalid_max_attempts(self) -> None:
        result = runner.invoke(app, ["classify", "NOT_FOUND", "--max-attempts", "0"])
        assert result.exit_code == 2
