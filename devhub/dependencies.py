"""
FastAPI dependencies shared by the routers.

The identity provider in front of this service hands the session over in
request headers: ``Authorization: Bearer <token>`` and ``X-GitHub-User``.
"""
from typing import Optional

from fastapi import Header

from .github_client import GitHubClient, get_github_client
from .models import Session, SessionUser


def get_client() -> GitHubClient:
    return get_github_client()


def get_session(
    authorization: Optional[str] = Header(default=None),
    x_github_user: Optional[str] = Header(default=None),
) -> Optional[Session]:
    """Build the request's session, or ``None`` when it carries none."""
    if not authorization or not x_github_user:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return Session(access_token=token.strip(), user=SessionUser(name=x_github_user))
