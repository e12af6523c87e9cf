"""
Dashboard routes.

    GET /dashboard      - rendered HTML
    GET /api/dashboard  - the same state as JSON
"""
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from devhub.dashboard import DashboardView
from devhub.dependencies import get_client, get_session
from devhub.github_client import GitHubClient
from devhub.models import Session

router = APIRouter(tags=["Dashboard"])


async def load_dashboard(
    session: Optional[Session] = Depends(get_session),
    client: GitHubClient = Depends(get_client),
) -> DashboardView:
    view = DashboardView(session, client)
    await view.activate()
    return view


@router.get("/dashboard", response_class=HTMLResponse)
async def dashboard_page(view: DashboardView = Depends(load_dashboard)):
    return HTMLResponse(view.render())


@router.get("/api/dashboard")
async def dashboard_data(view: DashboardView = Depends(load_dashboard)):
    return view.snapshot()
