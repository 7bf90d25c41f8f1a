from pydantic import BaseModel, Field

from commute_pass.core.config import settings

# service별 requests 구조 정의


# 최단 경로 조회
class RouteRequest(BaseModel):
    origin: str = Field(..., min_length=1, description="출발역 이름")
    destination: str = Field(..., min_length=1, description="도착역 이름")


# 경로 + 요금 + 손익분기 + 확장 정기권
class PlanRequest(RouteRequest):
    work_days: int = Field(
        default=settings.DEFAULT_WORK_DAYS,
        ge=1,
        le=31,
        description="한 달 출근 일수",
    )
