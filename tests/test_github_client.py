# tests/test_github_client.py

import httpx
import pytest

from devhub.github_client import GitHubClient
from devhub.models import Contribution, Repository
from tests.helpers import github_router, pr_payload, repo_payload

pytestmark = pytest.mark.asyncio


async def test_list_user_repos_keeps_upstream_order(make_github_client):
    repos = [repo_payload(3, "zeta"), repo_payload(1, "alpha"), repo_payload(2, "mid")]
    client = make_github_client(github_router(repos=repos))

    result = await client.list_user_repos("gho_test")

    assert [r.name for r in result] == ["zeta", "alpha", "mid"]
    assert all(isinstance(r, Repository) for r in result)


async def test_requests_carry_bearer_token_and_github_headers(make_github_client):
    client = make_github_client(github_router(repos=[]))

    await client.list_user_repos("gho_test")

    request = client.requests[0]
    assert request.method == "GET"
    assert str(request.url) == "https://api.github.com/user/repos"
    assert request.headers["Authorization"] == "Bearer gho_test"
    assert request.headers["Accept"] == "application/vnd.github+json"


async def test_list_user_repos_raises_on_error_status(make_github_client):
    client = make_github_client(github_router(repos_status=401))

    with pytest.raises(httpx.HTTPStatusError):
        await client.list_user_repos("bad")


async def test_search_builds_merged_pr_query(make_github_client):
    client = make_github_client(github_router(prs=[pr_payload(7, "Fix bug")]))

    result = await client.search_merged_pull_requests("gho_test", "octocat")

    request = client.requests[0]
    assert request.url.path == "/search/issues"
    assert request.url.params["q"] == "author:octocat type:pr is:merged"
    assert result == [Contribution.model_validate(pr_payload(7, "Fix bug"))]


async def test_search_keeps_item_order(make_github_client):
    prs = [pr_payload(i, f"PR {i}") for i in (9, 2, 5)]
    client = make_github_client(github_router(prs=prs))

    result = await client.search_merged_pull_requests("gho_test", "octocat")

    assert [c.id for c in result] == [9, 2, 5]


async def test_proxy_returns_upstream_error_without_raising(make_github_client):
    def handler(request):
        return httpx.Response(401, json={"message": "Bad credentials"})

    client = make_github_client(handler)

    status, body = await client.proxy_user_repos("abc")

    assert status == 401
    assert body == {"message": "Bad credentials"}
    assert client.requests[0].headers["Authorization"] == "Bearer abc"


async def test_proxy_without_token_sends_empty_bearer(make_github_client):
    client = make_github_client(lambda request: httpx.Response(200, json=[]))

    await client.proxy_user_repos(None)

    assert client.requests[0].headers["Authorization"] == "Bearer"


async def test_owned_http_client_is_closed():
    client = GitHubClient(base_url="https://api.github.com")
    async with client:
        pass
    assert client._client.is_closed
