"""
Pytest 설정 및 공통 Fixture
"""

import sys
from pathlib import Path

import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


# ============================================================
# 노선 데이터 Fixtures
# ============================================================
#
# H (東山線): 名古屋 -1.5- 伏見 -1.0- 栄 -0.9- 新栄町
# M (名城線): 金山 -1.1- 東別院 -(거리 없음)- 上前津 -0.6- 矢場町 -0.7- 栄 -1.8- 市役所
# T (鶴舞線): 伏見 -0.8- 大須観音 -0.8- 上前津
# => 伏見-栄 사이에 우회로(T + M) 존재, 金山/東別院은 분리된 컴포넌트


@pytest.fixture
def distance_doc():
    """테스트용 거리 데이터 (distances.json)"""
    return {
        "stations": [
            "名古屋",
            "伏見",
            "栄",
            "新栄町",
            "上前津",
            "矢場町",
            "市役所",
            "大須観音",
            "金山",
            "東別院",
        ],
        "edges": [
            {"from": "名古屋", "to": "伏見", "km": 1.5},
            {"from": "伏見", "to": "栄", "km": 1.0},
            {"from": "栄", "to": "新栄町", "km": 0.9},
            {"from": "上前津", "to": "矢場町", "km": 0.6},
            {"from": "矢場町", "to": "栄", "km": 0.7},
            {"from": "栄", "to": "市役所", "km": 1.8},
            {"from": "伏見", "to": "大須観音", "km": 0.8},
            {"from": "大須観音", "to": "上前津", "km": 0.8},
            {"from": "金山", "to": "東別院", "km": 1.1},
        ],
    }


@pytest.fixture
def station_meta():
    """테스트용 역 메타데이터 (stations-meta.json)"""
    return {
        "lines": [
            {"id": "H", "name": "東山線"},
            {"id": "M", "name": "名城線"},
            {"id": "T", "name": "鶴舞線"},
        ],
        "stations": [
            {"name": "名古屋", "lines": ["H"], "orders": {"H": 8}},
            {"name": "伏見", "lines": ["H", "T"], "orders": {"H": 9, "T": 8}},
            {"name": "栄", "lines": ["H", "M"], "orders": {"H": 10, "M": 5}},
            {"name": "新栄町", "lines": ["H"], "orders": {"H": 11}},
            {"name": "金山", "lines": ["M"], "orders": {"M": 1}},
            {"name": "東別院", "lines": ["M"], "orders": {"M": 2}},
            {"name": "上前津", "lines": ["M", "T"], "orders": {"M": 3, "T": 10}},
            {"name": "矢場町", "lines": ["M"], "orders": {"M": 4}},
            {"name": "市役所", "lines": ["M"], "orders": {"M": 6}},
            {"name": "大須観音", "lines": ["T"], "orders": {"T": 9}},
        ],
    }


@pytest.fixture
def fare_doc():
    """테스트용 요금표 (fares.json) => 1구간 ~3km, 2구간 ~7km, 3구간 그 이상"""
    return {
        "distanceZones": [
            {"zone": 1, "maxKm": 3},
            {"zone": 2, "maxKm": 7},
            {"zone": 3, "maxKm": None},
        ],
        "regularFare": {"adult": {"1": 210, "2": 250, "3": 280}},
        "commuterPass": {
            "1": {"1": 8000, "2": 9900, "3": 11100},
            "3": {"1": 22800, "2": 28220, "3": 31640},
            "6": {"1": 43200, "2": 53460, "3": 59940},
        },
    }


@pytest.fixture
def simple_fares():
    """2구간 요금표 (10km 경계)"""
    return {
        "distanceZones": [
            {"zone": 1, "maxKm": 10},
            {"zone": 2, "maxKm": None},
        ],
        "regularFare": {"adult": {"1": 200, "2": 300}},
        "commuterPass": {
            "1": {"1": 6000, "2": 7000},
            "3": {"1": 17100, "2": 19950},
            "6": {"1": 32400, "2": 37800},
        },
    }


@pytest.fixture
def graph(station_meta, distance_doc):
    """테스트용 그래프"""
    from commute_pass.algorithms.graph_builder import build_graph

    return build_graph(station_meta, distance_doc)


@pytest.fixture
def plan_service(distance_doc, station_meta, fare_doc):
    """CommutePlanService 인스턴스"""
    from commute_pass.services.commute_plan_service import CommutePlanService

    return CommutePlanService(distance_doc, station_meta, fare_doc)


@pytest.fixture
def loaded_cache(distance_doc, station_meta, fare_doc):
    """in-memory 문서로 캐시 초기화, 테스트 후 정리"""
    from commute_pass.db import cache

    cache.clear_cache()
    cache.initialize_cache(distance_doc, station_meta, fare_doc)

    yield cache

    cache.clear_cache()
