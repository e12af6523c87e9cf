"""
Repository proxy - forwards ``GET /user/repos`` to GitHub with the token the
caller sends in the ``token`` header and relays the JSON body as-is.

The upstream status is not propagated unless ``proxy_propagate_status`` is
enabled, so by default "no repositories", "bad credentials" and other
upstream errors all come back as 200.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Header
from fastapi.responses import JSONResponse

from devhub.config import settings
from devhub.dependencies import get_client
from devhub.github_client import GitHubClient
from devhub.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["Proxy"])


@router.api_route("/repos", methods=["GET", "POST"])
async def proxy_repositories(
    token: Optional[str] = Header(default=None),
    client: GitHubClient = Depends(get_client),
):
    """List the token owner's repositories through the server."""
    upstream_status, body = await client.proxy_user_repos(token)
    status_code = upstream_status if settings.proxy_propagate_status else 200
    logger.debug(f"Proxied repository listing: upstream {upstream_status}, replying {status_code}")
    return JSONResponse(content=body, status_code=status_code)
