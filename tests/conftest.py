"""Shared fixtures for preflight tests."""

import json

import pytest

from keystone_preflight.config import PreflightConfig
from keystone_preflight.preflight.checks import auth, gcp, storage, terraform
from tests.helpers import FakeCommands, command_ok

PROJECT_ID = "keystone-test"

ALL_APIS = (
    "run.googleapis.com\n"
    "sqladmin.googleapis.com\n"
    "storage-api.googleapis.com\n"
    "compute.googleapis.com\n"
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the caller's environment from leaking into configuration."""
    for var in ("APP_ENV", "GCP_PROJECT_ID", "PREFLIGHT_JSON", "PREFLIGHT_REPORT_DIR", "PREFLIGHT_DEBUG"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def config() -> PreflightConfig:
    return PreflightConfig(project_id=PROJECT_ID)


@pytest.fixture
def fake_commands(monkeypatch) -> FakeCommands:
    """Replace external command execution in every probe module."""
    fake = FakeCommands()
    for module in (auth, gcp, storage, terraform):
        monkeypatch.setattr(module, "run_command", fake)
    return fake


@pytest.fixture
def installed_tools(monkeypatch):
    """Control which executables shutil.which finds; remove names to uninstall."""
    tools = {"gcloud", "terraform", "gsutil"}

    def which(name, *args, **kwargs):
        return f"/usr/bin/{name}" if name in tools else None

    monkeypatch.setattr("shutil.which", which)
    return tools


@pytest.fixture
def healthy_environment(fake_commands, installed_tools, tmp_path, monkeypatch):
    """A working directory and fake tools where every check passes."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("SOME_SETTING=1\n")
    (tmp_path / "terraform").mkdir()
    (tmp_path / "terraform" / "main.tf").write_text("terraform {}\n")

    fake_commands.set(["gcloud", "auth"], command_ok("deployer@example.com\n"))
    fake_commands.set(
        ["terraform", "version"],
        command_ok(json.dumps({"terraform_version": "1.7.5", "platform": "linux_amd64"})),
    )
    fake_commands.set(["gcloud", "services", "list"], command_ok(ALL_APIS))
    fake_commands.set(["gsutil", "ls"], command_ok("gs://bucket/\n"))
    fake_commands.set(["terraform", "fmt"], command_ok())
    return fake_commands
