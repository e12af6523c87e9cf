"""
Data models for GitHub entities shown on the dashboard.

These mirror the subset of GitHub's REST response schema the dashboard
reads; any other upstream field is ignored.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Repository(BaseModel):
    """A repository from ``GET /user/repos``."""
    model_config = ConfigDict(extra="ignore")

    id: int
    name: str
    description: Optional[str] = None
    stargazers_count: int = 0
    forks_count: int = 0


class Contribution(BaseModel):
    """A merged pull request from ``GET /search/issues``."""
    model_config = ConfigDict(extra="ignore")

    id: int
    title: str
    html_url: str
    repository_url: str
    created_at: str


class SessionUser(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str


class Session(BaseModel):
    """Authenticated session handed over by the identity provider."""
    model_config = ConfigDict(frozen=True)

    access_token: str
    user: SessionUser
