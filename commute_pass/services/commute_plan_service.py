# 통근 경로 / 정기권 계산 서비스

import json
import logging
import time
from collections import OrderedDict
from functools import lru_cache
from typing import Any, Dict, Optional, Tuple

from commute_pass.algorithms.cost_analyzer import analyze_cost
from commute_pass.algorithms.dijkstra import shortest_path
from commute_pass.algorithms.fare_model import (
    commuter_pass_cost,
    fare_summary,
    regular_monthly_cost,
    zone_for_distance,
)
from commute_pass.algorithms.graph_builder import StationGraph, build_graph
from commute_pass.algorithms.pass_extender import find_best_extended_pass
from commute_pass.core.config import PASS_TERMS, settings
from commute_pass.core.exceptions import (
    MissingFareDataException,
    RouteNotFoundException,
    StationNotFoundException,
)
from commute_pass.db.cache import (
    get_cache_generation,
    get_distance_doc,
    get_fare_doc,
    get_graph,
    get_station_meta,
)
from commute_pass.models.domain import ExtendedPassCandidate, Route

logger = logging.getLogger(__name__)


class CommutePlanService:

    def __init__(
        self,
        distance_doc: Dict,
        station_meta: Dict,
        fares: Dict,
        graph: Optional[StationGraph] = None,
    ):
        self.distance_doc = distance_doc
        self.station_meta = station_meta
        self.fares = fares
        # 그래프는 문서가 바뀔 때만 구축
        self.graph = graph if graph is not None else build_graph(station_meta, distance_doc)

        # 내 경로(path) -> 확장 정기권 결과, 문서가 바뀌면 서비스 자체를 다시 생성
        self._pass_cache: "OrderedDict[Tuple[str, ...], Optional[ExtendedPassCandidate]]" = (
            OrderedDict()
        )
        logger.info(f"CommutePlanService 초기화 완료: 역 {len(self.graph)}개")

    def _validate_stations(self, origin: str, destination: str) -> Tuple[str, str]:
        origin = origin.strip()
        destination = destination.strip()

        if origin not in self.graph:
            raise StationNotFoundException(f"출발역을 찾을 수 없습니다: {origin}")
        if destination not in self.graph:
            raise StationNotFoundException(f"도착역을 찾을 수 없습니다: {destination}")
        return origin, destination

    def find_route(self, origin: str, destination: str) -> Optional[Route]:
        """경로가 없으면 None"""
        origin, destination = self._validate_stations(origin, destination)
        return shortest_path(self.graph, origin, destination)

    def calculate_route(self, origin: str, destination: str) -> Dict[str, Any]:
        """
        최단 경로 계산

        Raises:
            StationNotFoundException: 역을 찾을 수 없을 때
            RouteNotFoundException: 경로를 찾을 수 없을 때
        """
        route = self.find_route(origin, destination)
        if route is None:
            raise RouteNotFoundException(
                f"{origin}에서 {destination}까지 경로를 찾을 수 없습니다"
            )

        logger.info(
            f"경로 계산: {origin} → {destination}, {route.km}km, "
            f"역 {len(route.path)}개, 환승 {route.transfers}회"
        )
        return route.to_dict()

    def best_extended_pass(self, route: Route) -> Optional[ExtendedPassCandidate]:
        """확장 정기권 탐색 (O(S^2)) => 내 경로 기준 캐싱"""
        cache_key = route.path
        if cache_key in self._pass_cache:
            logger.debug(f"확장 정기권 캐시 HIT: {route.origin} → {route.destination}")
            self._pass_cache.move_to_end(cache_key)
            return self._pass_cache[cache_key]

        logger.debug(f"확장 정기권 캐시 미스: {route.origin} → {route.destination}")
        result = find_best_extended_pass(route, self.graph, self.distance_doc, self.fares)

        self._pass_cache[cache_key] = result
        while len(self._pass_cache) > settings.PASS_CACHE_MAX_ENTRIES:
            self._pass_cache.popitem(last=False)
        return result

    def plan(self, origin: str, destination: str, work_days: int) -> Dict[str, Any]:
        """
        경로 + 요금 + 손익분기 + 확장 정기권

        경로가 없으면 하위 결과는 모두 None (예외 없음)
        요금표에 필요한 조합이 없으면 요금/손익분기 결과는 None
        1개월 가격이 없으면 확장 정기권 결과도 None

        Raises:
            StationNotFoundException: 역을 찾을 수 없을 때
        """
        start_time = time.time()
        route = self.find_route(origin, destination)

        result: Dict[str, Any] = {
            "origin": origin,
            "destination": destination,
            "work_days": work_days,
            "route": None,
            "km": None,
            "fare_result": None,
            "pass_analysis": None,
            "best_extended_pass": None,
            "my_transfer_indices": [],
            "pass_transfer_indices": [],
        }

        if route is None:
            logger.info(f"경로 없음: {origin} → {destination}")
            return result

        result["route"] = route.to_dict()
        result["km"] = route.km
        result["my_transfer_indices"] = sorted(route.transfer_station_indices)

        pass_analysis = None
        try:
            fare_result = fare_summary(route.km, work_days, self.fares)
            pass_analysis = analyze_cost(route.km, work_days, self.fares)
        except MissingFareDataException as e:
            # 기본 가격으로 대체하지 않음 => 요금/손익분기 결과 전체를 사용 불가로 처리
            logger.warning(f"요금 계산 불가 ({origin} → {destination}): {e.message}")
        else:
            result["fare_result"] = fare_result.to_dict()
            result["pass_analysis"] = pass_analysis.to_dict()

        # 확장 정기권은 1개월 가격만 필요 => 3/6개월 가격이 없어도 계산
        extended = None
        try:
            extended = self.best_extended_pass(route)
        except MissingFareDataException as e:
            logger.warning(f"확장 정기권 계산 불가 ({origin} → {destination}): {e.message}")

        if extended is not None:
            result["best_extended_pass"] = extended.to_dict()
            result["pass_transfer_indices"] = sorted(
                extended.route.transfer_station_indices
            )

        elapsed_time = time.time() - start_time
        recommendation = (
            f"{pass_analysis.best.type}/{pass_analysis.best.months}개월"
            if pass_analysis is not None
            else "없음"
        )
        logger.info(
            f"정기권 계산 완료: {origin} → {destination}, {route.km}km, "
            f"추천={recommendation}, "
            f"응답시간={elapsed_time*1000:.1f}ms"
        )
        self._log_metrics(
            response_time_ms=elapsed_time * 1000,
            origin=origin,
            destination=destination,
            km=route.km,
            extended_found=extended is not None,
        )
        return result

    def zone_fares(self, km: float, work_days: int) -> Dict[str, Any]:
        """거리 -> 구간 및 요금 (요금표에 없는 조합은 생략)"""
        result: Dict[str, Any] = {
            "km": km,
            "zone": zone_for_distance(km, self.fares.get("distanceZones")),
            "regular": None,
            "commuter": {},
        }
        try:
            result["regular"] = regular_monthly_cost(km, work_days, self.fares).to_dict()
        except MissingFareDataException as e:
            logger.warning(f"보통운임 없음: {e.message}")

        for months in PASS_TERMS:
            try:
                result["commuter"][str(months)] = commuter_pass_cost(
                    km, months, self.fares
                ).to_dict()
            except MissingFareDataException as e:
                logger.warning(f"정기권 가격 없음: {e.message}")
        return result

    def _log_metrics(
        self,
        response_time_ms: float,
        origin: str,
        destination: str,
        km: float,
        extended_found: bool,
    ) -> None:
        """
        메트릭 로깅 => 로그 수집기에서 분석하기
        """
        if not settings.ENABLE_CACHE_METRICS:
            return

        metrics = {
            "event": "commute_plan",
            "response_time_ms": round(response_time_ms, 2),
            "origin": origin,
            "destination": destination,
            "km": km,
            "extended_pass_found": extended_found,
            "pass_cache_size": len(self._pass_cache),
        }
        logger.info(f"METRICS: {json.dumps(metrics, ensure_ascii=False)}")


# lru_cache 사용하여 싱글톤 패턴과 유사한 효과, 의존성 주입
# 캐시 세대를 키로 사용 => reload 후에는 새 문서로 서비스 재생성
@lru_cache(maxsize=1)
def _build_commute_plan_service(generation: int) -> CommutePlanService:
    logger.info(f"CommutePlanService 생성 (cache generation={generation})")
    return CommutePlanService(
        distance_doc=get_distance_doc(),
        station_meta=get_station_meta(),
        fares=get_fare_doc(),
        graph=get_graph(),
    )


def get_commute_plan_service() -> CommutePlanService:
    return _build_commute_plan_service(get_cache_generation())
