"""
pydantic models for 요청, 응답 + 도메인 객체
"""

from commute_pass.models.domain import (
    Segment,
    Route,
    RegularFare,
    CommuterPassFare,
    BreakEven,
    FareResult,
    TermAnalysis,
    Recommendation,
    CostAnalysis,
    ExtendedPassCandidate,
)
from commute_pass.models.requests import RouteRequest, PlanRequest
from commute_pass.models.responses import (
    RouteResponse,
    PlanResponse,
    ZoneFareResponse,
    ErrorResponse,
)

__all__ = [
    "Segment",
    "Route",
    "RegularFare",
    "CommuterPassFare",
    "BreakEven",
    "FareResult",
    "TermAnalysis",
    "Recommendation",
    "CostAnalysis",
    "ExtendedPassCandidate",
    "RouteRequest",
    "PlanRequest",
    "RouteResponse",
    "PlanResponse",
    "ZoneFareResponse",
    "ErrorResponse",
]
