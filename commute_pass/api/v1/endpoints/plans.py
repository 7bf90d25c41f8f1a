"""
경로 / 정기권 계산 REST API 엔드포인트
"""

from fastapi import APIRouter, Depends
import logging

from commute_pass.models.requests import PlanRequest, RouteRequest
from commute_pass.models.responses import ErrorResponse, PlanResponse, RouteResponse
from commute_pass.services.commute_plan_service import (
    CommutePlanService,
    get_commute_plan_service,
)

router = APIRouter()
logger = logging.getLogger(__name__)

# 도메인 예외 응답 (main.py 예외 핸들러)
ERROR_RESPONSES = {
    404: {"model": ErrorResponse, "description": "역 또는 경로를 찾을 수 없음"},
    503: {"model": ErrorResponse, "description": "데이터 미로드"},
}


@router.post("/route", response_model=RouteResponse, responses=ERROR_RESPONSES)
async def calculate_route(
    request: RouteRequest,
    service: CommutePlanService = Depends(get_commute_plan_service),
):
    """
    최단 거리 경로 계산

    - **origin**: 출발역 이름
    - **destination**: 도착역 이름

    경로가 없으면 404 (ROUTE_NOT_FOUND)
    """
    logger.info(f"REST 경로 계산: {request.origin} → {request.destination}")
    return service.calculate_route(request.origin, request.destination)


@router.post("/calculate", response_model=PlanResponse, responses=ERROR_RESPONSES)
async def calculate_plan(
    request: PlanRequest,
    service: CommutePlanService = Depends(get_commute_plan_service),
):
    """
    경로 + IC카드/정기권 비용 + 손익분기 + 확장 정기권 추천

    경로가 없으면 route 이하 결과는 모두 null

    Example:
        POST /api/v1/plans/calculate
        {
            "origin": "名古屋",
            "destination": "栄",
            "work_days": 20
        }
    """
    logger.info(
        f"REST 정기권 계산: {request.origin} → {request.destination}, "
        f"work_days={request.work_days}"
    )
    return service.plan(request.origin, request.destination, request.work_days)
