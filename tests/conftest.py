"""Shared test fixtures."""

import json
from typing import Any, Callable, List, Optional

import httpx
import pytest

from jira_client import JiraClient

HOST = "https://example.atlassian.net"


class RecordingHandler:
    """httpx.MockTransport handler that records requests and replays a canned response."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._respond: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(
            200, json={}
        )

    def respond(
        self, status_code: int = 200, json_body: Any = None, content: Optional[bytes] = None
    ) -> None:
        if content is not None:
            self._respond = lambda request: httpx.Response(status_code, content=content)
        else:
            self._respond = lambda request: httpx.Response(status_code, json=json_body)

    def respond_with(self, func: Callable[[httpx.Request], httpx.Response]) -> None:
        self._respond = func

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._respond(request)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture
def handler():
    """Request recorder backing the mock HTTP transport."""
    return RecordingHandler()


@pytest.fixture
def http_client(handler):
    """httpx client routed to the recording handler."""
    return httpx.AsyncClient(base_url=HOST + "/", transport=httpx.MockTransport(handler))


@pytest.fixture
def jira(http_client):
    """Jira client authenticated with test credentials."""
    return JiraClient(
        HOST, mail="bot@example.com", token="secret-token", http_client=http_client
    )


@pytest.fixture
def sample_field():
    """Sample custom field as returned by rest/api/3/field."""
    return {
        "id": "customfield_10038",
        "key": "customfield_10038",
        "name": "Release train",
        "custom": True,
        "orderable": True,
        "navigable": True,
        "searchable": True,
        "clauseNames": ["cf[10038]", "Release train"],
        "schema": {
            "type": "option",
            "custom": "com.atlassian.jira.plugin.system.customfieldtypes:select",
            "customId": 10038,
        },
    }
