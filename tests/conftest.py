from unittest.mock import Mock

import pytest
from click.testing import CliRunner
from html2slack.models.nodes import Element
from html2slack.parser import parse_html


@pytest.fixture
def parse():
    """Parse an HTML fragment into its document root"""
    return parse_html


@pytest.fixture
def first_element():
    """Return the first top-level element of an HTML fragment"""

    def _first_element(html: str) -> Element:
        return parse_html(html.strip()).child_elements()[0]

    return _first_element


@pytest.fixture
def mock_slack_response():
    """Mock successful Slack webhook response"""
    mock_response = Mock()
    mock_response.status_code = 200
    mock_response.text = "ok"
    mock_response.raise_for_status.return_value = None
    return mock_response


@pytest.fixture
def runner():
    """Click CLI runner"""
    return CliRunner()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove Slack settings from the environment"""
    for var in ("SLACK_WEBHOOK_URL", "SLACK_REQUEST_TIMEOUT"):
        monkeypatch.delenv(var, raising=False)
