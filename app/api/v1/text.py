from fastapi import APIRouter, Header, Request

from app.core.rate_limit import rate_limit
from app.core.security import check_api_key
from app.schemas.text import TextCleanRequest, TextCleanResponse, TextQualityReport, TextValidateRequest
from app.services.ats_service import run_text_clean, run_text_validate

router = APIRouter()


@router.post("/text/clean", response_model=TextCleanResponse)
@rate_limit()
async def text_clean(
    request: Request,
    payload: TextCleanRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    _ = request
    check_api_key(x_api_key)
    return run_text_clean(payload)


@router.post("/text/validate", response_model=TextQualityReport)
@rate_limit()
async def text_validate(
    request: Request,
    payload: TextValidateRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    _ = request
    check_api_key(x_api_key)
    return run_text_validate(payload)
