"""Payload builders and mock GitHub handlers used across the tests."""
import httpx


def repo_payload(id, name, stars=0, forks=0, description=None):
    return {
        "id": id,
        "name": name,
        "full_name": f"octocat/{name}",
        "description": description,
        "stargazers_count": stars,
        "forks_count": forks,
        "private": False,
    }


def pr_payload(id, title, repo="widgets", created_at="2024-03-05T10:00:00Z"):
    return {
        "id": id,
        "number": id,
        "title": title,
        "html_url": f"https://github.com/acme/{repo}/pull/{id}",
        "repository_url": f"https://api.github.com/repos/acme/{repo}",
        "created_at": created_at,
        "state": "closed",
    }


def github_router(repos=None, prs=None, repos_status=200, prs_status=200):
    """Build a MockTransport handler answering the two dashboard endpoints."""
    def handler(request: httpx.Request):
        if request.url.path == "/user/repos":
            return httpx.Response(repos_status, json=repos if repos is not None else [])
        if request.url.path == "/search/issues":
            items = prs if prs is not None else []
            return httpx.Response(prs_status, json={"total_count": len(items), "items": items})
        return httpx.Response(404, json={"message": "Not Found"})

    return handler
