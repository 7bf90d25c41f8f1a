from typing import Dict, List, Optional
from pydantic import BaseModel, Field

# service 별 응답 구조 정의


class SegmentResponse(BaseModel):
    from_station: str
    to_station: str
    km: float
    line_id: Optional[str] = None


# 최단 경로 응답
class RouteResponse(BaseModel):
    km: float = Field(..., description="총 거리 (km)")
    path: List[str] = Field(..., description="역 순서")
    segments: List[SegmentResponse] = Field(default_factory=list, description="구간 리스트")
    lines: List[Optional[str]] = Field(default_factory=list, description="구간별 노선 id")
    transfers: int = Field(..., description="환승 횟수")
    transfer_station_indices: List[int] = Field(
        default_factory=list, description="환승역의 path 인덱스"
    )


class RegularFareResponse(BaseModel):
    zone: int
    one_way: int = Field(..., description="편도 운임 (엔)")
    daily: int = Field(..., description="왕복 운임 (엔)")
    monthly: int = Field(..., description="월 IC카드 비용 (엔)")


class CommuterPassFareResponse(BaseModel):
    zone: int
    months: int
    price: int = Field(..., description="정기권 가격 (엔)")


class FareResultResponse(BaseModel):
    regular: RegularFareResponse
    commuter: Dict[str, CommuterPassFareResponse] = Field(
        ..., description="기간(개월) -> 정기권 가격"
    )


class TermAnalysisResponse(BaseModel):
    months: int
    status: str = Field(..., description="pass_better | ic_better")
    diff_yen: int
    break_even_days: int
    extra_days_beyond_break_even: int
    more_days_to_break_even: int


class RecommendationResponse(BaseModel):
    type: str = Field(..., description="pass => 정기권 추천, ic => 참고용 (정기권 비추천)")
    months: int
    yen: int


class CostAnalysisResponse(BaseModel):
    daily: int
    terms: Dict[str, TermAnalysisResponse]
    best: RecommendationResponse


class ExtendedPassResponse(BaseModel):
    from_station: str
    to_station: str
    km: float
    path: List[str]
    segments: List[SegmentResponse]
    transfers: int
    zone: int
    price: int
    extra_stations: int
    my_zone: int
    my_pass_price: int


# 경로 계산 전체 응답 => 경로가 없으면 하위 결과는 모두 null
class PlanResponse(BaseModel):
    origin: str
    destination: str
    work_days: int
    route: Optional[RouteResponse] = None
    km: Optional[float] = None
    fare_result: Optional[FareResultResponse] = None
    pass_analysis: Optional[CostAnalysisResponse] = None
    best_extended_pass: Optional[ExtendedPassResponse] = None
    my_transfer_indices: List[int] = Field(default_factory=list)
    pass_transfer_indices: List[int] = Field(default_factory=list)


# 구간/요금 조회 응답
class ZoneFareResponse(BaseModel):
    km: float
    zone: int
    regular: Optional[RegularFareResponse] = None
    commuter: Dict[str, CommuterPassFareResponse] = Field(default_factory=dict)


# 노선별 역 목록
class StationCatalogResponse(BaseModel):
    stations_by_line: Dict[str, List[str]] = Field(..., description="노선 id -> 역 목록 (ALL 포함)")
    total_stations: int


class LineInfo(BaseModel):
    id: str
    name: Optional[str] = None
    station_count: int = 0


class LinesResponse(BaseModel):
    lines: List[LineInfo]
    total_lines: int


# 역 검색 응답 (자동완성)
class StationSearchResponse(BaseModel):
    keyword: str = Field(..., description="검색 키워드")
    count: int = Field(..., description="검색 결과 수")
    results: List[str] = Field(default_factory=list, description="역 이름 리스트")


# 에러 응답
class ErrorResponse(BaseModel):
    error: str = Field(..., description="에러 메시지")
    code: Optional[str] = Field(None, description="에러 코드")
