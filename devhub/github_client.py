"""
GitHub API client - lists the authenticated user's repositories and searches
merged pull requests. All calls are async and take the caller's token.
"""
import logging
from typing import Any, Dict, List, Optional, Tuple

import httpx

from .config import settings
from .models import Contribution, Repository

logger = logging.getLogger(__name__)

USER_REPOS_PATH = "/user/repos"
SEARCH_ISSUES_PATH = "/search/issues"


# ── Helpers ────────────────────────────────────────────────────────────────


def _headers(token: Optional[str]) -> Dict[str, str]:
    return {
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": "2022-11-28",
        "Authorization": f"Bearer {token or ''}".rstrip(),
    }


def merged_pull_requests_query(author: str) -> str:
    """Search qualifier for merged pull requests authored by ``author``."""
    return f"author:{author} type:pr is:merged"


class GitHubClient:
    """
    Thin async wrapper around the GitHub REST API.

    Pass ``http_client`` to reuse an existing ``httpx.AsyncClient``; otherwise
    the client owns one and closes it in :meth:`aclose`.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = (base_url or settings.github_api_base).rstrip("/")
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=timeout if timeout is not None else settings.github_timeout
        )

    async def __aenter__(self) -> "GitHubClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    # ── Core fetch helper ─────────────────────────────────────────────────

    async def _get(
        self,
        path: str,
        token: Optional[str],
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Perform a GET request and return parsed JSON, raising on non-2xx."""
        resp = await self._client.get(self._url(path), headers=_headers(token), params=params)
        resp.raise_for_status()
        return resp.json()

    # ── Public methods ────────────────────────────────────────────────────

    async def list_user_repos(self, token: str) -> List[Repository]:
        """
        Fetch the first page of the token owner's repositories.

        Raises:
            httpx.HTTPStatusError: upstream answered with a non-2xx status.
            httpx.RequestError: the request could not be completed.
        """
        raw = await self._get(USER_REPOS_PATH, token)
        repos = [Repository.model_validate(r) for r in raw]
        logger.info(f"Fetched {len(repos)} repositories")
        return repos

    async def search_merged_pull_requests(self, token: str, author: str) -> List[Contribution]:
        """
        Search merged pull requests authored by ``author``.

        Items keep the order GitHub's search returns them in.
        """
        raw = await self._get(
            SEARCH_ISSUES_PATH,
            token,
            params={"q": merged_pull_requests_query(author)},
        )
        items = [Contribution.model_validate(i) for i in raw.get("items", [])]
        logger.info(f"Fetched {len(items)} merged pull requests for {author}")
        return items

    async def proxy_user_repos(self, token: Optional[str]) -> Tuple[int, Any]:
        """
        Forward ``GET /user/repos`` with ``token`` and hand back the upstream
        status code and JSON body unmodified. Upstream error statuses do not
        raise.
        """
        resp = await self._client.get(self._url(USER_REPOS_PATH), headers=_headers(token))
        if resp.is_error:
            logger.warning(f"Upstream answered {resp.status_code} for proxied repository listing")
        return resp.status_code, resp.json()


_github_client: Optional[GitHubClient] = None


def get_github_client() -> GitHubClient:
    """Get or create the process-wide GitHub client."""
    global _github_client
    if _github_client is None:
        _github_client = GitHubClient()
    return _github_client


async def close_github_client() -> None:
    """Close the process-wide GitHub client, if one was created."""
    global _github_client
    if _github_client is not None:
        await _github_client.aclose()
        _github_client = None
