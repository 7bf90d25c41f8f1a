import logging
from typing import Dict, Optional

from commute_pass.algorithms.dijkstra import shortest_path_tree
from commute_pass.algorithms.fare_model import commuter_pass_cost, zone_for_distance
from commute_pass.algorithms.graph_builder import StationGraph
from commute_pass.algorithms.route_utils import (
    compare_routes_for_recommend,
    is_valid_pass_candidate,
)
from commute_pass.core.exceptions import MissingFareDataException
from commute_pass.models.domain import ExtendedPassCandidate, Route

logger = logging.getLogger(__name__)

# 확장 정기권 비교 기준 기간
BASE_TERM_MONTHS = 1

_NO_PRICE = object()


def find_best_extended_pass(
    route: Route, graph: StationGraph, distance_doc: Dict, fares: Dict
) -> Optional[ExtendedPassCandidate]:
    """
    같은 1개월 정기권 가격으로 내 경로를 포함하면서 더 넓은 구간을 커버하는 역 쌍 탐색

    모든 역 쌍 (u, v) (역 목록에서 u가 앞) 에 대해
    - 경로가 없으면 제외
    - 1개월 정기권 가격이 내 가격과 다르면 제외 (구간이 아닌 가격 비교)
    - 내 경로가 연속으로, 같은 방향으로 포함되지 않으면 제외
    남은 후보 중 compare_routes_for_recommend 기준 최선

    출발역마다 최단 경로 트리를 한 번만 계산 => 쌍마다 탐색하는 것과 결과 동일

    Returns:
        ExtendedPassCandidate, 후보가 없거나 최선이 내 경로 자체이면 None
    """
    if route is None:
        return None

    # 내 구간/가격은 루프 밖에서 한 번만 계산
    my_pass = commuter_pass_cost(route.km, BASE_TERM_MONTHS, fares)
    my_zone, my_price = my_pass.zone, my_pass.price
    zones = fares.get("distanceZones")
    # 구간 -> 1개월 가격 (쿼리 한 번 안에서만 사용)
    prices: Dict[int, object] = {my_zone: my_price}

    stations = list((distance_doc or {}).get("stations") or [])
    best: Optional[Route] = None
    best_pair = None
    best_zone = None
    candidates = 0

    for a, u in enumerate(stations):
        tree = shortest_path_tree(graph, u)
        if tree is None:
            continue

        for v in stations[a + 1 :]:
            if v == u:
                continue
            km = tree.distance_to(v)
            if km is None:
                continue

            zone = zone_for_distance(km, zones)
            price = prices.get(zone)
            if price is None:
                try:
                    price = commuter_pass_cost(km, BASE_TERM_MONTHS, fares).price
                except MissingFareDataException:
                    # 가격을 알 수 없는 구간 => 같은 가격일 수 없음
                    price = _NO_PRICE
                prices[zone] = price
            if price != my_price:
                continue

            pass_route = tree.route_to(v)
            if not is_valid_pass_candidate(pass_route, route):
                continue

            candidates += 1
            if best is None or compare_routes_for_recommend(pass_route, best) < 0:
                best = pass_route
                best_pair = (u, v)
                best_zone = zone

    logger.debug(
        f"확장 정기권 탐색: 역 {len(stations)}개, 후보 {candidates}개, "
        f"기준 가격 {my_price}엔"
    )

    if best is None or best.path == route.path:
        return None

    return ExtendedPassCandidate(
        from_station=best_pair[0],
        to_station=best_pair[1],
        route=best,
        zone=best_zone,
        price=my_price,
        extra_stations=max(0, len(best.path) - len(route.path)),
        my_zone=my_zone,
        my_pass_price=my_price,
    )
