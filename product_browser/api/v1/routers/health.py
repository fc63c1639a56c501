# product_browser/api/v1/routers/health.py
import time
import subprocess
from fastapi import APIRouter, Depends
from product_browser.api.deps import product_cache_dep
from product_browser.core.config import get_settings
from product_browser.domain.repositories.product_cache_repo import ProductCacheRepo

router = APIRouter()
START_TIME = time.time()


def _git_sha(short: bool = True) -> str:
    try:
        cmd = ["git", "rev-parse", "--short", "HEAD"] if short else ["git", "rev-parse", "HEAD"]
        return subprocess.check_output(cmd, stderr=subprocess.DEVNULL).decode().strip()
    except (OSError, subprocess.CalledProcessError):
        return "unknown"


# resolved once at import
GIT_SHA = _git_sha()


@router.get("/health")
async def health(cache: ProductCacheRepo = Depends(product_cache_dep)):
    """Liveness plus basic info. Upstream is not pinged."""
    settings = get_settings()
    checks: dict[str, object] = {
        "app_name": settings.APP_NAME,
        "env": settings.APP_ENV,
        "debug": settings.DEBUG,
        "version": settings.GIT_SHA if settings.GIT_SHA != "unknown" else GIT_SHA,
        "uptime_seconds": int(time.time() - START_TIME),
        "upstream": settings.UPSTREAM_BASE_URL,
        "product_cache_entries": len(cache),
    }
    return {"status": "ok", "checks": checks, "timestamp": int(time.time())}
