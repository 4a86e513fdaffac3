"""End-to-end tests for the command-line interface."""

import json

import pytest
from click.testing import CliRunner

from keystone_preflight import __version__
from keystone_preflight.cli import cli
from tests.helpers import command_failed


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def with_project(monkeypatch):
    monkeypatch.setenv("GCP_PROJECT_ID", "keystone-test")


class TestRunCommand:
    """Test full preflight runs against faked tools."""

    def test_all_checks_pass(self, runner, healthy_environment, with_project):
        """Test a healthy environment is ready to deploy."""
        result = runner.invoke(cli, [])
        assert result.exit_code == 0, result.output
        assert "Passed: 10" in result.output
        assert "Failed: 0" in result.output
        assert "Ready to deploy" in result.output

    def test_run_subcommand(self, runner, healthy_environment, with_project):
        """Test the explicit run command behaves like the default."""
        result = runner.invoke(cli, ["run", "--environment", "staging"])
        assert result.exit_code == 0, result.output
        assert "Environment: staging" in result.output
        assert healthy_environment.ran("gsutil", "ls", "-b", "gs://keystone-terraform-state-staging")

    def test_missing_required_tool_blocks(self, runner, healthy_environment, installed_tools, with_project):
        """Test a missing required tool fails the run."""
        installed_tools.discard("terraform")
        result = runner.invoke(cli, [])
        assert result.exit_code == 1
        assert "Terraform not found" in result.output
        assert "Failed: 1" in result.output
        assert "Not ready to deploy" in result.output

    def test_optional_failures_only_warn(self, runner, healthy_environment, tmp_path, with_project):
        """Test optional failures produce warnings and still allow deployment."""
        (tmp_path / ".env").unlink()
        healthy_environment.set(["terraform", "fmt"], command_failed(3, stdout="terraform/main.tf\n"))
        result = runner.invoke(cli, [])
        assert result.exit_code == 0, result.output
        assert "Failed: 0" in result.output
        assert "Warnings: 2" in result.output
        assert ".env file not found" in result.output
        assert "Ready to deploy" in result.output

    def test_no_project_id(self, runner, healthy_environment):
        """Test a missing project id fails its dependent checks without calling gcloud."""
        result = runner.invoke(cli, [])
        assert result.exit_code == 1
        assert "GCP_PROJECT_ID not set" in result.output
        assert "Failed: 3" in result.output
        assert not healthy_environment.ran("gcloud", "services")
        assert not healthy_environment.ran("gsutil", "ls", "-b", "gs://keystone-terraform-state-dev")

    def test_project_id_option(self, runner, healthy_environment):
        """Test --project-id supplies the project."""
        result = runner.invoke(cli, ["run", "-p", "from-flag"])
        assert result.exit_code == 0, result.output
        assert healthy_environment.ran("gcloud", "services", "list", "--enabled", "--project=from-flag")

    def test_json_report_from_environment(self, runner, healthy_environment, tmp_path, monkeypatch, with_project):
        """Test PREFLIGHT_JSON writes a report matching the verdict."""
        monkeypatch.setenv("PREFLIGHT_JSON", "true")
        result = runner.invoke(cli, [])
        assert result.exit_code == 0, result.output
        assert "Report saved to" in result.output

        reports = list(tmp_path.glob("preflight-report-*.json"))
        assert len(reports) == 1
        data = json.loads(reports[0].read_text())
        assert data["CanDeploy"] is True
        assert data["TotalChecks"] == 10
        assert data["Environment"] == "dev"

    def test_no_json_by_default(self, runner, healthy_environment, tmp_path, with_project):
        """Test no artifact is written unless requested."""
        runner.invoke(cli, [])
        assert list(tmp_path.glob("preflight-report-*.json")) == []

    def test_json_report_failure_keeps_verdict(self, runner, healthy_environment, tmp_path, with_project):
        """Test an unwritable report directory does not change the exit code."""
        result = runner.invoke(cli, ["run", "--json", "--report-dir", str(tmp_path / "missing")])
        assert result.exit_code == 0, result.output
        assert "Error writing JSON report" in result.output

    def test_invalid_config_file(self, runner, healthy_environment, tmp_path):
        """Test an invalid config file exits with an error."""
        path = tmp_path / "preflight.yaml"
        path.write_text("command_timeout: -1\n")
        result = runner.invoke(cli, ["run", "--config", str(path)])
        assert result.exit_code == 1
        assert "Configuration error" in result.output
        assert healthy_environment.calls == []


class TestOtherCommands:
    """Test the informational commands."""

    def test_list(self, runner):
        """Test the registered checks are listed."""
        result = runner.invoke(cli, ["list"])
        assert result.exit_code == 0, result.output
        assert "gcloud-installed" in result.output
        assert "terraform-formatted" in result.output

    def test_version(self, runner):
        """Test --version prints the package version."""
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
