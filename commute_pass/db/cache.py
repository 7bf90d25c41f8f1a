"""
singleton caching 전략 사용
Thread Lock으로 서버 시작 시 한 번만 로드하여 메모리에 유지
=> 거리/역 메타/요금 데이터는 정적 데이터이므로 유리
=> 그래프도 데이터가 바뀔 때만 다시 구축 (경로 탐색마다 재사용)
"""

import json
import logging
from pathlib import Path
from threading import Lock
from typing import Dict, List, Optional

from commute_pass.algorithms.graph_builder import (
    StationGraph,
    build_graph,
    stations_by_line,
)
from commute_pass.core.config import ALL_LINES_KEY, settings
from commute_pass.core.exceptions import DataNotLoadedException

logger = logging.getLogger(__name__)

_cache_lock = Lock()
_cache_init = False
# initialize_cache 로 데이터를 로드할 때마다 증가 => 서비스 재생성 기준
_cache_generation = 0

# cache data
_distance_doc: Dict = {}  # distances.json
_station_meta: Dict = {}  # stations-meta.json
_fare_doc: Dict = {}  # fares.json
_graph: Optional[StationGraph] = None
_stations_by_line_cache: Dict[str, List[str]] = {}  # {line_id: [station, ...]}
_line_names_cache: Dict[str, str] = {}  # {line_id: line_name}


def _load_json(path: Path) -> Dict:
    if not path.exists():
        raise DataNotLoadedException(f"데이터 파일이 없습니다: {path}")
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def initialize_cache(
    distance_doc: Optional[Dict] = None,
    station_meta: Optional[Dict] = None,
    fares: Optional[Dict] = None,
):
    """
    서버 시작 시 모든 정적 데이터를 메모리에 로드
    Thread-safe singleton pattern

    문서를 직접 넘기면 파일을 읽지 않음 (테스트, 외부 로더용)
    """
    global _cache_init, _cache_generation
    global _distance_doc, _station_meta, _fare_doc, _graph
    global _stations_by_line_cache, _line_names_cache

    with _cache_lock:
        if _cache_init:
            logger.info("캐시가 이미 초기화되었습니다.")
            return

        logger.info("데이터 캐시 초기화 시작")

        # 1. 입력 문서 로드
        if distance_doc is None:
            distance_doc = _load_json(settings.data_path(settings.DISTANCES_FILE))
        if station_meta is None:
            station_meta = _load_json(settings.data_path(settings.STATIONS_META_FILE))
        if fares is None:
            fares = _load_json(settings.data_path(settings.FARES_FILE))

        _distance_doc = distance_doc
        _station_meta = station_meta
        _fare_doc = fares
        logger.info(
            f"✓ 거리 데이터 로드 완료: 역 {len(_distance_doc.get('stations') or [])}개, "
            f"구간 {len(_distance_doc.get('edges') or [])}개"
        )

        # 2. 그래프 구축
        _graph = build_graph(_station_meta, _distance_doc)
        logger.info(f"✓ 그래프 구축 완료: 역 {len(_graph)}개")

        # 3. 노선별 역 목록
        _stations_by_line_cache = stations_by_line(_distance_doc, _station_meta)
        _line_names_cache = {
            line["id"]: line.get("name", line["id"])
            for line in _station_meta.get("lines") or []
        }
        logger.info(f"✓ 노선 데이터 로드 완료: {len(_line_names_cache)}개 노선")

        _cache_generation += 1
        _cache_init = True
        logger.info(f"데이터 캐시 초기화 완료 (generation={_cache_generation})")


def is_initialized() -> bool:
    return _cache_init


def get_cache_generation() -> int:
    if not _cache_init:
        initialize_cache()
    return _cache_generation


def get_distance_doc() -> Dict:
    if not _cache_init:
        initialize_cache()
    return _distance_doc


def get_station_meta() -> Dict:
    if not _cache_init:
        initialize_cache()
    return _station_meta


def get_fare_doc() -> Dict:
    if not _cache_init:
        initialize_cache()
    return _fare_doc


def get_graph() -> StationGraph:
    if not _cache_init:
        initialize_cache()
    return _graph


def get_stations_by_line() -> Dict[str, List[str]]:
    if not _cache_init:
        initialize_cache()
    return _stations_by_line_cache


def get_line_names() -> Dict[str, str]:
    if not _cache_init:
        initialize_cache()
    return _line_names_cache


def station_exists(station_name: str) -> bool:
    if not _cache_init:
        initialize_cache()
    return station_name.strip() in _stations_by_line_cache.get(ALL_LINES_KEY, [])


def search_stations_by_name(keyword: str, limit: int = 10) -> List[str]:
    if not _cache_init:
        initialize_cache()

    keyword = keyword.strip().lower()
    results = []

    for name in _stations_by_line_cache.get(ALL_LINES_KEY, []):
        name_lower = name.lower()
        if keyword in name_lower:
            if name_lower == keyword:
                priority = 1
            elif name_lower.startswith(keyword):
                priority = 2
            else:
                priority = 3
            results.append((priority, len(name), name))

    results.sort()
    return [name for _, _, name in results[:limit]]


def clear_cache():
    global _cache_init
    global _distance_doc, _station_meta, _fare_doc, _graph
    global _stations_by_line_cache, _line_names_cache

    with _cache_lock:
        _distance_doc = {}
        _station_meta = {}
        _fare_doc = {}
        _graph = None
        _stations_by_line_cache = {}
        _line_names_cache = {}

        _cache_init = False
        logger.info("캐시 초기화됨")


def reload_cache():
    clear_cache()
    initialize_cache()
