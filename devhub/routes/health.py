from fastapi import APIRouter

from devhub.config import settings

router = APIRouter(tags=["Health"])


@router.get("/health")
def health():
    return {
        "status": "ok",
        "service": "devhub-dashboard",
        "environment": settings.app_env,
        "github_api_base": settings.github_api_base,
    }
