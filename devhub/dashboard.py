"""
Dashboard view - loads a user's repositories and merged pull requests and
derives the repository grid, contribution list and leaderboard from them.

The view is driven by an explicit session. Each session change bumps an
epoch counter; fetch results tagged with an older epoch are dropped so a
slow response for a previous session never overwrites current state.
"""
import asyncio
from datetime import datetime
from typing import Any, Dict, List, Optional

from jinja2 import Environment, PackageLoader, select_autoescape
from pydantic import BaseModel

from .config import settings
from .github_client import GitHubClient
from .logger import get_logger
from .models import Contribution, Repository, Session

logger = get_logger(__name__)

_templates = Environment(
    loader=PackageLoader("devhub", "templates"),
    autoescape=select_autoescape(["html"]),
)

INVALID_DATE = "Invalid Date"


def extract_repository_name(repository_url: str) -> str:
    """Return the text after the last ``/`` of a repository API URL."""
    return repository_url.rsplit("/", 1)[-1]


def format_created_date(timestamp: str) -> str:
    """Format an ISO-8601 timestamp as ``M/D/YYYY``."""
    try:
        created = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except ValueError:
        return INVALID_DATE
    return f"{created.month}/{created.day}/{created.year}"


class ContributionRow(BaseModel):
    id: int
    title: str
    url: str
    repository: str
    created: str


class LeaderboardEntry(BaseModel):
    rank: int
    id: int
    title: str
    url: str


class DashboardView:
    """
    State holder and renderer for one user's dashboard.

    Attributes:
        repositories: Last successfully fetched repositories, upstream order.
        contributions: Last successfully fetched merged pull requests.
        loading: True until the repository fetch reaches a terminal state.
    """

    def __init__(self, session: Optional[Session], client: GitHubClient):
        self.session = session
        self.client = client
        self.repositories: List[Repository] = []
        self.contributions: List[Contribution] = []
        self.loading = True
        self.epoch = 0

    @property
    def is_active(self) -> bool:
        return self.session is not None

    def _is_current(self, epoch: int) -> bool:
        return epoch == self.epoch

    async def activate(self) -> None:
        """Start both fetches concurrently. Does nothing without a session."""
        if not self.is_active:
            logger.debug("No session, dashboard stays inactive")
            return
        await asyncio.gather(self.load_repositories(), self.load_contributions())

    async def set_session(self, session: Optional[Session]) -> None:
        """Switch to a new session and reload for it."""
        self.session = session
        self.epoch += 1
        await self.activate()

    async def load_repositories(self) -> None:
        session, epoch = self.session, self.epoch
        if session is None:
            return

        self.loading = True
        try:
            repositories = await self.client.list_user_repos(session.access_token)
        except Exception:
            logger.exception("Error fetching repositories")
        else:
            if self._is_current(epoch):
                self.repositories = repositories
            else:
                logger.debug("Discarding repositories fetched for a previous session")
        finally:
            if self._is_current(epoch):
                self.loading = False

    async def load_contributions(self) -> None:
        # Deliberately leaves ``loading`` alone.
        session, epoch = self.session, self.epoch
        if session is None:
            return

        try:
            contributions = await self.client.search_merged_pull_requests(
                session.access_token, session.user.name
            )
        except Exception:
            logger.exception("Error fetching contributions")
            return

        if self._is_current(epoch):
            self.contributions = contributions
        else:
            logger.debug("Discarding contributions fetched for a previous session")

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    def repository_cards(self) -> List[Repository]:
        return list(self.repositories)

    def contribution_rows(self) -> List[ContributionRow]:
        return [
            ContributionRow(
                id=c.id,
                title=c.title,
                url=c.html_url,
                repository=extract_repository_name(c.repository_url),
                created=format_created_date(c.created_at),
            )
            for c in self.contributions
        ]

    def leaderboard(self, size: Optional[int] = None) -> List[LeaderboardEntry]:
        """First ``size`` contributions in collection order, ranked from 1."""
        size = settings.leaderboard_size if size is None else size
        return [
            LeaderboardEntry(rank=rank, id=c.id, title=c.title, url=c.html_url)
            for rank, c in enumerate(self.contributions[:size], start=1)
        ]

    def render(self) -> str:
        """Render the dashboard as HTML from current state."""
        if self.loading:
            return _templates.get_template("loading.html").render()
        return _templates.get_template("dashboard.html").render(
            repositories=self.repository_cards(),
            contributions=self.contribution_rows(),
            leaderboard=self.leaderboard(),
        )

    def snapshot(self) -> Dict[str, Any]:
        return {
            "loading": self.loading,
            "repositories": [r.model_dump() for r in self.repository_cards()],
            "contributions": [c.model_dump() for c in self.contribution_rows()],
            "leaderboard": [e.model_dump() for e in self.leaderboard()],
        }
