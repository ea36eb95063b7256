import logging

import httpx
import pytest

from gitroast.crawlers.github.client import GitHubClient
from gitroast.crawlers.github.contracts import FetchState


def _recording_transport(responses: list[httpx.Response], seen: list[httpx.Request]) -> httpx.MockTransport:
    queue = responses.copy()

    async def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if not queue:
            raise AssertionError("No more mock responses available")
        return queue.pop(0)

    return httpx.MockTransport(handler)


@pytest.mark.asyncio
async def test_get_user_returns_ok_contract_and_sends_auth_header() -> None:
    seen: list[httpx.Request] = []
    transport = _recording_transport([httpx.Response(200, json={"login": "octocat", "followers": 3})], seen)
    client = GitHubClient(token="ghp_test", transport=transport)

    result = await client.get_user("octocat")
    await client.aclose()

    assert result.state == FetchState.OK
    assert result.data == {"login": "octocat", "followers": 3}
    assert seen[0].url.path == "/users/octocat"
    assert seen[0].headers["Authorization"] == "Bearer ghp_test"
    assert seen[0].headers["Accept"] == "application/vnd.github+json"


@pytest.mark.asyncio
async def test_anonymous_client_sends_no_auth_header() -> None:
    seen: list[httpx.Request] = []
    transport = _recording_transport([httpx.Response(200, json={"login": "octocat"})], seen)

    async with GitHubClient(transport=transport) as client:
        await client.get_user("octocat")

    assert "Authorization" not in seen[0].headers


@pytest.mark.asyncio
async def test_list_repos_sorts_by_update_and_limits_page() -> None:
    seen: list[httpx.Request] = []
    transport = _recording_transport([httpx.Response(200, json=[{"name": "demo"}])], seen)
    client = GitHubClient(transport=transport)

    result = await client.list_repos("octocat", limit=10)
    await client.aclose()

    assert result.is_ok
    assert seen[0].url.path == "/users/octocat/repos"
    assert seen[0].url.params["sort"] == "updated"
    assert seen[0].url.params["per_page"] == "10"


@pytest.mark.asyncio
async def test_list_commits_and_events_use_expected_paths() -> None:
    seen: list[httpx.Request] = []
    transport = _recording_transport(
        [httpx.Response(200, json=[{"commit": {"message": "fix"}}]), httpx.Response(200, json=[{"type": "PushEvent"}])],
        seen,
    )
    client = GitHubClient(transport=transport)

    commits = await client.list_commits("octocat", "demo", limit=5)
    events = await client.list_public_events("octocat", limit=30)
    await client.aclose()

    assert commits.is_ok and events.is_ok
    assert seen[0].url.path == "/repos/octocat/demo/commits"
    assert seen[0].url.params["per_page"] == "5"
    assert seen[1].url.path == "/users/octocat/events/public"
    assert seen[1].url.params["per_page"] == "30"


@pytest.mark.asyncio
async def test_empty_list_returns_empty_contract() -> None:
    client = GitHubClient(transport=_recording_transport([httpx.Response(200, json=[])], []))

    result = await client.list_public_events("octocat")
    await client.aclose()

    assert result.state == FetchState.EMPTY
    assert result.data == []


@pytest.mark.asyncio
async def test_404_returns_not_found_contract() -> None:
    client = GitHubClient(transport=_recording_transport([httpx.Response(404, json={"message": "Not Found"})], []))

    result = await client.get_user("nobody")
    await client.aclose()

    assert result.state == FetchState.NOT_FOUND
    assert result.status_code == 404
    assert result.data is None


@pytest.mark.asyncio
async def test_server_error_returns_failed_contract_with_redacted_error(caplog: pytest.LogCaptureFixture) -> None:
    transport = _recording_transport([httpx.Response(502, text="upstream said token=ghp_leaked_value")], [])
    client = GitHubClient(token="ghp_test", transport=transport)

    with caplog.at_level(logging.WARNING):
        result = await client.list_repos("octocat")
    await client.aclose()

    assert result.state == FetchState.FAILED
    assert result.status_code == 502
    assert "ghp_leaked_value" not in (result.error or "")
    assert "ghp_leaked_value" not in str([record.__dict__ for record in caplog.records])
    assert "GitHub request failed" in caplog.text


@pytest.mark.asyncio
async def test_transport_error_returns_failed_contract() -> None:
    async def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = GitHubClient(transport=httpx.MockTransport(handler))

    result = await client.get_user("octocat")
    await client.aclose()

    assert result.state == FetchState.FAILED
    assert result.status_code is None
    assert "ConnectError" in (result.error or "")


@pytest.mark.asyncio
async def test_non_json_body_returns_failed_contract() -> None:
    client = GitHubClient(transport=_recording_transport([httpx.Response(200, text="<html>oops</html>")], []))

    result = await client.get_user("octocat")
    await client.aclose()

    assert result.state == FetchState.FAILED
    assert result.error == "invalid JSON body"
