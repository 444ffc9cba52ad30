import json
from typing import Any, AsyncIterator, Dict, List, Optional, Tuple

import httpx
import pytest
import pytest_asyncio

from jira_api_client import JiraClient, JiraClientConfig

BASE_URL = "https://example.atlassian.net"
API_PREFIX = "/rest/api/3"


class FakeJira:
    """Routes (method, path) to canned responses and records every request."""

    def __init__(self, api_prefix: str = API_PREFIX):
        self.api_prefix = api_prefix
        self.routes: Dict[Tuple[str, str], Tuple[int, Any]] = {}
        self.requests: List[httpx.Request] = []

    def on(self, method: str, path: str, status_code: int = 200, json: Any = None) -> None:
        self.routes[(method, self.api_prefix + path)] = (status_code, json)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path)
        if key not in self.routes:
            return httpx.Response(404, json={"errorMessages": [f"No route for {key}"], "errors": {}})
        status_code, body = self.routes[key]
        if callable(body):
            body = body(request)
        if body is None:
            return httpx.Response(status_code)
        return httpx.Response(status_code, json=body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def calls(self, method: str, path: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == self.api_prefix + path]

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def body(self, request: Optional[httpx.Request] = None) -> Any:
        return json.loads((request or self.last).content)


@pytest.fixture
def config() -> JiraClientConfig:
    return JiraClientConfig.from_credentials(BASE_URL, "test-token", email="test@example.com")


@pytest.fixture
def fake_jira() -> FakeJira:
    return FakeJira()


@pytest_asyncio.fixture
async def jira(config: JiraClientConfig, fake_jira: FakeJira) -> AsyncIterator[JiraClient]:
    async with JiraClient(config, transport=fake_jira.transport) as client:
        yield client


@pytest.fixture
def make_fake_jira():
    return FakeJira
