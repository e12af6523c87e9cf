"""Shared fixtures: sessions and a GitHub client backed by httpx.MockTransport."""
import httpx
import pytest

from devhub.github_client import GitHubClient
from devhub.models import Session, SessionUser

API_BASE = "https://api.github.com"


@pytest.fixture
def session():
    return Session(access_token="gho_test", user=SessionUser(name="octocat"))


@pytest.fixture
def make_github_client():
    """
    Factory for a GitHubClient whose requests go to ``handler``.
    Every request seen is appended to the returned client's ``requests`` list.
    """
    def _make(handler):
        seen = []

        def _record(request: httpx.Request):
            seen.append(request)
            return handler(request)

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(_record))
        client = GitHubClient(base_url=API_BASE, http_client=http_client)
        client.requests = seen
        return client

    return _make
