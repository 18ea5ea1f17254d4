"""Fixtures shared by CLI tests."""

import json

import pytest
from click.testing import CliRunner

from timelog_report.config.logging_config import reset_logging


@pytest.fixture(autouse=True)
def cli_env(mock_env):
    """Run every command against the test environment and clean logging up."""
    yield mock_env
    reset_logging()


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def export_file(tmp_path, sample_issue_node):
    """GraphQL project export with one issue and two timelogs."""
    payload = {
        "data": {
            "project": {
                "id": "gid://gitlab/Project/1",
                "name": "app",
                "webUrl": "https://gitlab.example.com/group/app",
                "issues": {"nodes": [sample_issue_node]},
            }
        }
    }
    path = tmp_path / "issues.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture
def list_export_file(tmp_path, sample_issue_node):
    """Plain list export without project metadata."""
    path = tmp_path / "backlog.json"
    path.write_text(json.dumps([sample_issue_node]), encoding="utf-8")
    return path
