"""
Global pytest configuration and fixtures.
"""
import os
from typing import Any, Dict, List

import pytest

from timelog_report.config import TimelogReportConfig, reload_config
from timelog_report.models import Contributor, Epic, TimeEntry, WorkItem


@pytest.fixture(scope="session")
def test_env_vars() -> Dict[str, str]:
    """Test environment variables for configuration."""
    return {
        'PROJECT_PATH': 'group/app',
        'ENVIRONMENT': 'testing',
        'DEBUG': 'false',
        'LOG_LEVEL': 'DEBUG',
        'LOG_FORMAT': 'standard',
        'TOP_N': '10',
    }


@pytest.fixture
def mock_env(test_env_vars, monkeypatch):
    """Mock environment variables for testing."""
    for key, value in test_env_vars.items():
        monkeypatch.setenv(key, value)
    for key in ('DEFAULT_RANGE_FROM', 'DEFAULT_RANGE_TO', 'LOG_FILE'):
        monkeypatch.delenv(key, raising=False)

    # Clear the global config to force reload with test values
    import timelog_report.config.settings
    timelog_report.config.settings._config = None

    yield test_env_vars

    # Clean up
    timelog_report.config.settings._config = None


@pytest.fixture
def test_config(mock_env) -> TimelogReportConfig:
    """Test configuration instance."""
    return reload_config()


@pytest.fixture
def alice() -> Contributor:
    return Contributor(id='gid://gitlab/User/1', name='Alice', username='alice')


@pytest.fixture
def bob() -> Contributor:
    return Contributor(id='gid://gitlab/User/2', name='Bob', username='bob')


@pytest.fixture
def sample_issue_node() -> Dict[str, Any]:
    """Sample issue node as returned by the GitLab GraphQL API."""
    return {
        'id': 'gid://gitlab/Issue/101',
        'iid': '7',
        'title': 'Fix login',
        'webUrl': 'https://gitlab.example.com/group/app/-/issues/7',
        'state': 'opened',
        'timeEstimate': 7200,
        'labels': {'nodes': [{'title': 'bug'}, {'title': 'backend'}]},
        'epic': {
            'id': 'gid://gitlab/Epic/3',
            'iid': '3',
            'title': 'Auth',
            'webUrl': 'https://gitlab.example.com/groups/group/-/epics/3',
        },
        'timelogs': {
            'nodes': [
                {
                    'id': 'gid://gitlab/Timelog/1',
                    'spentAt': '2024-01-08T10:00:00Z',
                    'timeSpent': 3600,
                    'summary': 'Investigated',
                    'user': {
                        'id': 'gid://gitlab/User/1',
                        'name': 'Alice',
                        'username': 'alice',
                    },
                },
                {
                    'id': 'gid://gitlab/Timelog/2',
                    'spentAt': '2024-01-15T09:00:00Z',
                    'timeSpent': 1800,
                    'summary': None,
                    'user': {
                        'id': 'gid://gitlab/User/2',
                        'name': 'Bob',
                        'username': 'bob',
                    },
                },
            ]
        },
    }


@pytest.fixture
def sample_work_items(alice, bob) -> List[WorkItem]:
    """Two issues with entries spread over two weeks."""
    return [
        WorkItem(
            id='gid://gitlab/Issue/101',
            iid='7',
            title='Fix login',
            web_url='https://gitlab.example.com/group/app/-/issues/7',
            state='opened',
            labels=['bug', 'backend'],
            epic=Epic(id='gid://gitlab/Epic/3', iid='3', title='Auth'),
            time_estimate=7200,
            timelogs=[
                TimeEntry(id='t1', spent_at='2024-01-08T10:00:00Z', seconds=3600, user=alice),
                TimeEntry(id='t2', spent_at='2024-01-15T09:00:00Z', seconds=1800, user=bob),
            ],
        ),
        WorkItem(
            id='gid://gitlab/Issue/102',
            iid='8',
            title='Write docs',
            web_url='https://gitlab.example.com/group/app/-/issues/8',
            state='closed',
            labels=[],
            epic=None,
            timelogs=[
                TimeEntry(id='t3', spent_at='2024-01-09T12:00:00Z', seconds=5400, user=bob),
            ],
        ),
    ]


@pytest.fixture(autouse=True)
def cleanup_test_files():
    """Clean up any test files created during testing."""
    yield

    # Remove test coverage files in case they're created
    test_files = ['coverage.xml', '.coverage']
    for file in test_files:
        if os.path.exists(file):
            os.remove(file)


# Pytest configuration for different test types
def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on location."""
    for item in items:
        # Add unit marker for tests in tests/unit/
        if "tests/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        # Add integration marker for tests in tests/integration/
        elif "tests/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
