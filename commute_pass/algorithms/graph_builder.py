import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from commute_pass.core.config import ALL_LINES_KEY

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GraphEdge:
    to: int  # 이웃 역 인덱스
    km: float
    line_id: str


@dataclass
class StationGraph:
    """
    노선 정보를 가진 역 그래프

    역 이름마다 한 번만 정수 인덱스를 부여하고(arena), 인접 리스트는 인덱스 기반으로 저장
    같은 두 역이 여러 노선으로 연결되면 간선을 중복 제거하지 않고 모두 유지
    빌드 후에는 읽기 전용
    """

    stations: List[str] = field(default_factory=list)
    adjacency: List[List[GraphEdge]] = field(default_factory=list)
    _index: Dict[str, int] = field(default_factory=dict, repr=False)

    def _add_station(self, name: str) -> int:
        idx = self._index.get(name)
        if idx is None:
            idx = len(self.stations)
            self._index[name] = idx
            self.stations.append(name)
            self.adjacency.append([])
        return idx

    def _add_edge(self, a: str, b: str, km: float, line_id: str) -> None:
        ia = self._add_station(a)
        ib = self._add_station(b)
        # 양방향
        self.adjacency[ia].append(GraphEdge(ib, km, line_id))
        self.adjacency[ib].append(GraphEdge(ia, km, line_id))

    def index_of(self, name: str) -> Optional[int]:
        return self._index.get(name)

    def neighbors(self, name: str) -> List[Tuple[str, float, str]]:
        """(이웃 역 이름, km, 노선) 리스트"""
        idx = self._index.get(name)
        if idx is None:
            return []
        return [(self.stations[e.to], e.km, e.line_id) for e in self.adjacency[idx]]

    @property
    def edge_count(self) -> int:
        # 양방향 저장 => 2로 나눔
        return sum(len(edges) for edges in self.adjacency) // 2

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __len__(self) -> int:
        return len(self.stations)


def _build_km_map(distance_doc: Dict) -> Dict[Tuple[str, str], float]:
    """무방향 쌍 => 거리, 중복 시 마지막 값 사용"""
    km_map: Dict[Tuple[str, str], float] = {}
    for edge in distance_doc.get("edges") or []:
        a, b, km = edge["from"], edge["to"], edge["km"]
        km_map[(a, b)] = km
        km_map[(b, a)] = km
    return km_map


def _line_sequence(station_meta: Dict, line_id: str) -> List[str]:
    """order 기준으로 정렬된 노선의 역 목록"""
    members = [
        s
        for s in station_meta.get("stations") or []
        if (s.get("orders") or {}).get(line_id) is not None
    ]
    members.sort(key=lambda s: s["orders"][line_id])
    return [s["name"] for s in members]


def build_graph(station_meta: Dict, distance_doc: Dict) -> StationGraph:
    """
    역 메타데이터 + 거리 데이터로 그래프 구축

    같은 노선에서 order가 연속된 두 역 사이에 거리 데이터가 있을 때만 연결
    거리 데이터가 없으면 해당 구간은 연결하지 않음 (에러 아님)
    """
    graph = StationGraph()
    station_meta = station_meta or {}
    distance_doc = distance_doc or {}

    # arena 구축: 거리 데이터 역 목록 -> 메타데이터 역 -> 간선 끝점 순서
    for name in distance_doc.get("stations") or []:
        graph._add_station(name)
    for s in station_meta.get("stations") or []:
        graph._add_station(s["name"])

    km_map = _build_km_map(distance_doc)
    for a, b in km_map:
        graph._add_station(a)
        graph._add_station(b)

    skipped = 0
    for line in station_meta.get("lines") or []:
        line_id = line["id"]
        sequence = _line_sequence(station_meta, line_id)

        for a, b in zip(sequence, sequence[1:]):
            km = km_map.get((a, b))
            if km is None:
                skipped += 1
                continue
            graph._add_edge(a, b, km, line_id)

    logger.info(
        f"그래프 구축 완료: 역 {len(graph)}개, 간선 {graph.edge_count}개, "
        f"거리 없는 구간 {skipped}개 생략"
    )
    return graph


def stations_by_line(distance_doc: Dict, station_meta: Dict) -> Dict[str, List[str]]:
    """
    노선별 역 목록 (역 선택 목록용)

    ALL => 거리 데이터의 역 목록 그대로
    노선별 => order 있는 역 먼저 order 순, 없는 역은 이름순
    """
    if not distance_doc or not station_meta:
        return {ALL_LINES_KEY: []}

    all_stations = list(distance_doc.get("stations") or [])
    result = {ALL_LINES_KEY: list(all_stations)}
    meta_map = {s["name"]: s for s in station_meta.get("stations") or []}

    for line in station_meta.get("lines") or []:
        line_id = line["id"]

        members = [
            name
            for name in all_stations
            if line_id in (meta_map.get(name, {}).get("lines") or [])
        ]

        def sort_key(name: str):
            order = (meta_map[name].get("orders") or {}).get(line_id)
            if order is not None:
                return (0, order, "")
            return (1, 0, name)

        result[line_id] = sorted(members, key=sort_key)

    return result
