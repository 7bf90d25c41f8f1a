import heapq
import itertools
import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from commute_pass.algorithms.graph_builder import StationGraph
from commute_pass.models.domain import Route, Segment

# (이전 역 인덱스, 사용한 구간)
Predecessor = Optional[Tuple[int, Segment]]


def _search(
    graph: StationGraph, start: int, goal: Optional[int] = None
) -> Tuple[List[float], List[Predecessor]]:
    """
    Dijkstra 탐색 (goal이 주어지면 goal을 꺼낸 시점에 종료)

    heap 원소 => (거리, 삽입 순서, 역 인덱스)
    거리가 같으면 먼저 들어간 원소가 먼저 나옴 => 구현 내에서 결정적
    """
    n = len(graph)
    dist = [math.inf] * n
    prev: List[Predecessor] = [None] * n
    visited = [False] * n

    counter = itertools.count()
    dist[start] = 0.0
    heap = [(0.0, next(counter), start)]

    while heap:
        d, _, node = heapq.heappop(heap)
        if visited[node]:
            continue
        visited[node] = True

        if node == goal:
            break

        for edge in graph.adjacency[node]:
            nd = d + edge.km
            # 엄격하게 더 짧을 때만 갱신
            if nd < dist[edge.to]:
                dist[edge.to] = nd
                prev[edge.to] = (
                    node,
                    Segment(
                        from_station=graph.stations[node],
                        to_station=graph.stations[edge.to],
                        km=edge.km,
                        line_id=edge.line_id,
                    ),
                )
                heapq.heappush(heap, (nd, next(counter), edge.to))

    return dist, prev


def _reconstruct(
    graph: StationGraph,
    start: int,
    goal: int,
    dist: List[float],
    prev: List[Predecessor],
) -> Optional[Route]:
    """goal -> start 역추적 후 뒤집기"""
    if math.isinf(dist[goal]):
        return None

    path = []
    segments = []
    cur = goal
    while cur != start:
        p = prev[cur]
        if p is None:
            return None
        path.append(graph.stations[cur])
        segments.append(p[1])
        cur = p[0]
    path.append(graph.stations[start])

    path.reverse()
    segments.reverse()
    return Route(km=dist[goal], path=tuple(path), segments=tuple(segments))


def shortest_path(graph: StationGraph, start: str, goal: str) -> Optional[Route]:
    """
    두 역 사이 최단 거리 경로

    Returns:
        Route, 경로가 없으면 None (그래프가 끊겨 있을 수 있음 => 정상 결과)
    """
    if start == goal:
        return Route(km=0, path=(start,), segments=())

    start_idx = graph.index_of(start)
    goal_idx = graph.index_of(goal)
    if start_idx is None or goal_idx is None:
        return None

    dist, prev = _search(graph, start_idx, goal_idx)
    return _reconstruct(graph, start_idx, goal_idx, dist, prev)


@dataclass(frozen=True)
class ShortestPathTree:
    """한 출발역에서 모든 역까지의 최단 경로 트리"""

    graph: StationGraph
    start: int
    dist: List[float]
    prev: List[Predecessor]

    def distance_to(self, goal: str) -> Optional[float]:
        idx = self.graph.index_of(goal)
        if idx is None or math.isinf(self.dist[idx]):
            return None
        return self.dist[idx]

    def route_to(self, goal: str) -> Optional[Route]:
        start_name = self.graph.stations[self.start]
        if goal == start_name:
            return Route(km=0, path=(start_name,), segments=())
        idx = self.graph.index_of(goal)
        if idx is None:
            return None
        return _reconstruct(self.graph, self.start, idx, self.dist, self.prev)


def shortest_path_tree(graph: StationGraph, start: str) -> Optional[ShortestPathTree]:
    """
    goal 없이 끝까지 탐색

    goal을 꺼내기 전까지의 탐색 순서가 shortest_path와 같으므로
    tree.route_to(goal) == shortest_path(graph, start, goal)
    """
    start_idx = graph.index_of(start)
    if start_idx is None:
        return None
    dist, prev = _search(graph, start_idx)
    return ShortestPathTree(graph=graph, start=start_idx, dist=dist, prev=prev)
