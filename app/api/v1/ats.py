from fastapi import APIRouter, Header, HTTPException, Request, status

from app.core.ats_rate_limit import AtsRateLimitExceeded, enforce_ats_rate_limit
from app.core.config import settings
from app.core.rate_limit import client_identity
from app.core.security import check_api_key
from app.schemas.ats import ATSScoreRequest, ATSScoreResponse
from app.services.ats_service import run_ats_score

router = APIRouter()


def _enforce_ats_rate_limit(request: Request) -> None:
    try:
        enforce_ats_rate_limit(
            client_key=client_identity(request),
            route_key=request.url.path,
            limit=settings.ats_rate_limit_per_minute,
            window_seconds=settings.ats_rate_limit_window_seconds,
        )
    except AtsRateLimitExceeded as exc:
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail=f"Too many scoring requests. Please wait {exc.retry_after_seconds} seconds and try again.",
            headers={"Retry-After": str(exc.retry_after_seconds)},
        ) from exc


@router.post("/ats/score", response_model=ATSScoreResponse)
async def ats_score(
    request: Request,
    payload: ATSScoreRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    check_api_key(x_api_key)
    _enforce_ats_rate_limit(request)
    return run_ats_score(payload)
