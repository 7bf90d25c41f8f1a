import math
from typing import Optional, Sequence, Set, Tuple

from commute_pass.models.domain import Route, Segment


def count_transfers(segments: Sequence[Segment]) -> int:
    """연속한 구간의 노선이 바뀌는 횟수 (노선 정보 없는 구간은 제외)"""
    if not segments:
        return 0

    transfers = 0
    cur = segments[0].line_id
    for seg in segments[1:]:
        nxt = seg.line_id
        if cur is not None and nxt is not None and nxt != cur:
            transfers += 1
        cur = nxt
    return transfers


def transfer_station_indices(route: Optional[Route]) -> Set[int]:
    """
    환승역의 path 인덱스 집합

    segments[i]는 path[i] -> path[i+1] 구간이므로 환승역은 path[i]
    """
    result: Set[int] = set()
    if route is None or not route.segments or not route.path:
        return result

    for i in range(1, len(route.segments)):
        prev_line = route.segments[i - 1].line_id
        cur_line = route.segments[i].line_id
        if prev_line and cur_line and prev_line != cur_line:
            result.add(i)
    return result


def is_transfer_station(route: Optional[Route], path_index: int) -> bool:
    if route is None or not route.segments:
        return False
    if path_index <= 0 or path_index >= len(route.segments):
        return False

    prev_line = route.segments[path_index - 1].line_id
    cur_line = route.segments[path_index].line_id
    return bool(prev_line) and bool(cur_line) and prev_line != cur_line


def path_includes_segment(path: Sequence[str], from_station: str, to_station: str) -> bool:
    """두 역이 모두 경로에 있고 from이 to보다 앞(또는 같은 위치)인지"""
    try:
        i = path.index(from_station)
        j = path.index(to_station)
    except ValueError:
        return False
    return i <= j


def contains_subpath(outer: Sequence[str], inner: Sequence[str]) -> bool:
    """
    inner가 outer 안에 연속으로, 같은 방향으로 들어 있는지

    역방향으로 같은 구간을 지나는 경우는 포함으로 보지 않음
    """
    if not inner:
        return False

    outer = tuple(outer)
    inner = tuple(inner)
    first = inner[0]
    size = len(inner)
    for start in range(len(outer) - size + 1):
        if outer[start] != first:
            continue
        if outer[start : start + size] == inner:
            return True
    return False


def summarize_route(route: Optional[Route]) -> Tuple[float, float, int]:
    """(커버 km, 환승 횟수, 역 개수)"""
    if route is None or route.km is None:
        return (-math.inf, math.inf, 0)
    return (route.km, count_transfers(route.segments), len(route.path))


def compare_routes_for_recommend(a: Optional[Route], b: Optional[Route]) -> int:
    """
    a가 더 좋으면 음수, b가 더 좋으면 양수, 우열이 없으면 0

    1. 커버 km (클수록)
    2. 환승 횟수 (적을수록)
    3. 역 개수 (많을수록)
    """
    a_km, a_transfers, a_stations = summarize_route(a)
    b_km, b_transfers, b_stations = summarize_route(b)

    if a_km != b_km:
        return -1 if a_km > b_km else 1
    if a_transfers != b_transfers:
        return -1 if a_transfers < b_transfers else 1
    if a_stations != b_stations:
        return -1 if a_stations > b_stations else 1
    return 0


def is_valid_pass_candidate(pass_route: Optional[Route], my_route: Optional[Route]) -> bool:
    if pass_route is None or my_route is None:
        return False
    # 출발/도착역 순서 먼저 확인
    if not path_includes_segment(pass_route.path, my_route.origin, my_route.destination):
        return False
    return contains_subpath(pass_route.path, my_route.path)
