"""
역 목록 / 검색 REST API 엔드포인트
"""

from fastapi import APIRouter, Query
import logging

from commute_pass.core.config import ALL_LINES_KEY
from commute_pass.db.cache import (
    get_line_names,
    get_stations_by_line,
    search_stations_by_name,
)
from commute_pass.models.responses import (
    LinesResponse,
    StationCatalogResponse,
    StationSearchResponse,
)

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("", response_model=StationCatalogResponse)
async def get_station_catalog():
    """
    노선별 역 목록 (역 선택용)

    Returns:
        {
            "stations_by_line": {"ALL": [...], "H": ["高畑", ...], ...},
            "total_stations": 87
        }
    """
    catalog = get_stations_by_line()
    return {
        "stations_by_line": catalog,
        "total_stations": len(catalog.get(ALL_LINES_KEY, [])),
    }


@router.get("/lines", response_model=LinesResponse)
async def get_all_lines():
    """전체 노선 목록 조회"""
    catalog = get_stations_by_line()
    lines = [
        {"id": line_id, "name": name, "station_count": len(catalog.get(line_id, []))}
        for line_id, name in get_line_names().items()
    ]
    return {"lines": lines, "total_lines": len(lines)}


@router.get("/search", response_model=StationSearchResponse)
async def search_stations(
    q: str = Query(..., description="검색 키워드", min_length=1, max_length=50),
    limit: int = Query(10, ge=1, le=50, description="최대 결과 수"),
):
    """
    역 검색 (자동완성용)

    - **q**: 검색 키워드 (1-50자)
    - **limit**: 최대 결과 수 (1-50, 기본값 10)

    Example:
        GET /api/v1/stations/search?q=名古屋&limit=5
    """
    logger.info(f"역 검색: keyword={q}, limit={limit}")
    results = search_stations_by_name(q, limit)
    return {"keyword": q, "count": len(results), "results": results}
