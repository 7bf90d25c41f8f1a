"""
구간 / 요금 조회 REST API 엔드포인트
"""

from fastapi import APIRouter, Depends, Query
import logging

from commute_pass.core.config import settings
from commute_pass.models.responses import ErrorResponse, ZoneFareResponse
from commute_pass.services.commute_plan_service import (
    CommutePlanService,
    get_commute_plan_service,
)

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get(
    "/zone",
    response_model=ZoneFareResponse,
    responses={503: {"model": ErrorResponse, "description": "데이터 미로드"}},
)
async def get_zone_fares(
    km: float = Query(..., ge=0, description="거리 (km)"),
    work_days: int = Query(settings.DEFAULT_WORK_DAYS, ge=1, le=31, description="한 달 출근 일수"),
    service: CommutePlanService = Depends(get_commute_plan_service),
):
    """
    거리에 해당하는 구간과 IC카드/정기권 요금

    Example:
        GET /api/v1/fares/zone?km=7.5&work_days=20
    """
    logger.debug(f"구간 요금 조회: km={km}, work_days={work_days}")
    return service.zone_fares(km, work_days)
