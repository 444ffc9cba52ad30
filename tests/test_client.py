import base64

import httpx
import pytest

from jira_api_client import (
    ErrorCode,
    IssuesApiClient,
    JiraClient,
    JiraClientConfig,
    JiraError,
    ProjectsApiClient,
    UsersApiClient,
)
from jira_api_client.api.base import BaseApiClient

BASE_URL = "https://example.atlassian.net"


@pytest.mark.asyncio
async def test_client_exposes_resource_clients(jira):
    assert isinstance(jira.issues, IssuesApiClient)
    assert isinstance(jira.projects, ProjectsApiClient)
    assert isinstance(jira.users, UsersApiClient)


@pytest.mark.asyncio
async def test_resource_clients_share_one_connection_pool(jira):
    assert jira.issues._http is jira.projects._http is jira.users._http


@pytest.mark.asyncio
async def test_requests_carry_auth_and_json_headers(jira, fake_jira):
    fake_jira.on("GET", "/myself", json={"accountId": "abc"})

    await jira.users.get_current_user()

    request = fake_jira.last
    expected = base64.b64encode(b"test@example.com:test-token").decode("ascii")
    assert request.headers["Authorization"] == f"Basic {expected}"
    assert request.headers["Accept"] == "application/json"
    assert request.url.host == "example.atlassian.net"
    assert request.url.path == "/rest/api/3/myself"


@pytest.mark.asyncio
async def test_api_version_selects_path_prefix(make_fake_jira):
    fake = make_fake_jira(api_prefix="/rest/api/2")
    fake.on("GET", "/myself", json={"accountId": "abc"})
    config = JiraClientConfig.from_credentials(BASE_URL + "/", "pat", api_version=2)

    async with JiraClient(config, transport=fake.transport) as jira:
        await jira.users.get_current_user()

    assert fake.last.url.path == "/rest/api/2/myself"
    assert fake.last.headers["Authorization"] == "Bearer pat"


@pytest.mark.asyncio
async def test_timeout_is_applied(config):
    async with JiraClient(config.model_copy(update={"timeout": 1500})) as jira:
        assert jira._http.timeout.read == 1.5


@pytest.mark.asyncio
async def test_from_env(monkeypatch):
    monkeypatch.setenv("JIRA_BASE_URL", BASE_URL)
    monkeypatch.setenv("JIRA_API_TOKEN", "env-token")
    monkeypatch.delenv("JIRA_EMAIL", raising=False)
    monkeypatch.delenv("JIRA_API_VERSION", raising=False)
    monkeypatch.delenv("JIRA_REQUEST_TIMEOUT", raising=False)

    async with JiraClient.from_env() as jira:
        assert jira.config.api_base_url == BASE_URL + "/rest/api/3"


@pytest.mark.asyncio
async def test_http_error_becomes_jira_error(jira, fake_jira):
    fake_jira.on("GET", "/issue/NOPE-1", status_code=404, json={"errorMessages": ["Issue does not exist"], "errors": {}})

    with pytest.raises(JiraError) as info:
        await jira.issues.get_issue("NOPE-1")

    assert info.value.status_code == 404
    assert info.value.message == "Issue does not exist"
    assert info.value.messages == ("Issue does not exist",)
    assert dict(info.value.field_errors) == {}
    assert info.value.code == ErrorCode.NOT_FOUND


@pytest.mark.asyncio
async def test_transport_failure_becomes_network_error(config):
    def handler(request):
        raise httpx.ConnectError("Name or service not known", request=request)

    async with JiraClient(config, transport=httpx.MockTransport(handler)) as jira:
        with pytest.raises(JiraError) as info:
            await jira.users.get_current_user()

    assert info.value.status_code == 500
    assert info.value.code == ErrorCode.NETWORK_ERROR
    assert isinstance(info.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_timeout_becomes_network_error(config):
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    async with JiraClient(config, transport=httpx.MockTransport(handler)) as jira:
        with pytest.raises(JiraError) as info:
            await jira.issues.get_issue("PROJ-1")

    assert info.value.status_code == 500
    assert info.value.code == ErrorCode.NETWORK_ERROR
    assert isinstance(info.value.__cause__, httpx.TimeoutException)


@pytest.mark.asyncio
async def test_malformed_success_body_becomes_jira_error(jira, fake_jira):
    fake_jira.on("GET", "/myself", json={"displayName": "No account id"})

    with pytest.raises(JiraError) as info:
        await jira.users.get_current_user()

    assert info.value.status_code == 500
    assert info.value.code == ErrorCode.UNKNOWN_ERROR


@pytest.mark.asyncio
async def test_empty_success_body_returns_none(jira, fake_jira):
    fake_jira.on("PUT", "/issue/PROJ-1", status_code=204)
    assert await jira.issues.update_issue("PROJ-1", {"fields": {"summary": "x"}}) is None


@pytest.mark.asyncio
async def test_standalone_resource_client_owns_its_pool(config, fake_jira):
    fake_jira.on("GET", "/project/PROJ", json={"id": "1", "key": "PROJ", "name": "Project"})

    async with ProjectsApiClient(config, transport=fake_jira.transport) as projects:
        project = await projects.get_project("PROJ")
        assert project.key == "PROJ"

    assert projects._http.is_closed


@pytest.mark.asyncio
async def test_shared_pool_closed_by_facade_only(config, fake_jira):
    jira = JiraClient(config, transport=fake_jira.transport)
    await jira.issues.aclose()
    assert not jira._http.is_closed
    await jira.aclose()
    assert jira._http.is_closed


@pytest.mark.asyncio
async def test_context_manager_closes_shared_pool(config, fake_jira):
    async with JiraClient(config, transport=fake_jira.transport) as jira:
        assert not jira._http.is_closed
    assert jira._http.is_closed


@pytest.mark.asyncio
async def test_generic_verbs(config, fake_jira):
    fake_jira.on("GET", "/serverInfo", json={"version": "1001.0.0"})
    fake_jira.on("POST", "/issue/PROJ-1/watchers", status_code=204)

    async with BaseApiClient(config, transport=fake_jira.transport) as api:
        assert await api.get("/serverInfo") == {"version": "1001.0.0"}
        assert await api.post("/issue/PROJ-1/watchers", json="abc") is None

    assert fake_jira.body() == "abc"
