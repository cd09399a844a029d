"""Shared fixtures for the jira_simple tests."""

import json
from unittest.mock import MagicMock, patch

import pytest

from jira_simple.mcp.dispatcher import JiraToolDispatcher
from jira_simple.mcp.jira_api import JiraGateway
from jira_simple.utils.config import Config

BASE_URL = "https://example.atlassian.net"


@pytest.fixture
def config():
    return Config(base_url=BASE_URL, email="me@example.com", api_token="secret-token")


@pytest.fixture
def make_response():
    """Build a stand-in for requests.Response."""

    def _make(status=200, payload=None, text=None, reason="OK"):
        resp = MagicMock()
        resp.status_code = status
        resp.ok = 200 <= status < 400
        resp.reason = reason
        if text is None:
            text = json.dumps(payload) if payload is not None else ""
        resp.text = text
        resp.content = text.encode()
        if payload is not None:
            resp.json.return_value = payload
        else:
            resp.json.side_effect = ValueError("Expecting value")
        return resp

    return _make


@pytest.fixture
def mock_request():
    with patch("jira_simple.mcp.jira_api.requests.request") as request:
        yield request


@pytest.fixture
def dispatcher(config):
    return JiraToolDispatcher(JiraGateway(config))


@pytest.fixture
def issue_payload():
    return {
        "key": "LB-8283",
        "fields": {
            "summary": "Checkout button does nothing",
            "status": {"name": "In Progress"},
            "priority": {"name": "High"},
            "issuetype": {"name": "Bug"},
            "project": {"name": "Lightbox"},
            "assignee": {"displayName": "Ana Ruiz"},
            "reporter": {"displayName": "Sam Lee"},
            "created": "2024-01-14T09:00:00.000+0000",
            "updated": "2024-01-15T10:30:00.000+0000",
        },
    }
