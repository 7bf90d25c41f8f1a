from dataclasses import dataclass, field, asdict
from typing import Dict, Optional, Set, Tuple

# domain 정의
# 모든 결과 객체는 쿼리마다 새로 계산 => frozen으로 변경 방지


@dataclass(frozen=True, slots=True)
class Segment:
    from_station: str
    to_station: str
    km: float
    line_id: Optional[str]  # 간선을 추가한 노선

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class Route:
    km: float
    path: Tuple[str, ...]  # 출발역 ~ 도착역, 길이 >= 1
    segments: Tuple[Segment, ...] = ()  # len(path) - 1

    @property
    def origin(self) -> str:
        return self.path[0]

    @property
    def destination(self) -> str:
        return self.path[-1]

    @property
    def transfers(self) -> int:
        from commute_pass.algorithms.route_utils import count_transfers

        return count_transfers(self.segments)

    @property
    def transfer_station_indices(self) -> Set[int]:
        from commute_pass.algorithms.route_utils import transfer_station_indices

        return transfer_station_indices(self)

    @property
    def lines(self) -> Tuple[Optional[str], ...]:
        return tuple(seg.line_id for seg in self.segments)

    def to_dict(self) -> Dict:
        return {
            "km": self.km,
            "path": list(self.path),
            "segments": [seg.to_dict() for seg in self.segments],
            "lines": list(self.lines),
            "transfers": self.transfers,
            "transfer_station_indices": sorted(self.transfer_station_indices),
        }


@dataclass(frozen=True, slots=True)
class RegularFare:
    """IC카드 (성인) 월 비용"""

    zone: int
    one_way: int
    daily: int  # 왕복
    monthly: int

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class CommuterPassFare:
    zone: int
    months: int
    price: int

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class BreakEven:
    """기간 전체 기준 손익분기 탑승일수"""

    zone: int
    months: int
    days: int
    pass_price: int
    daily: int

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class FareResult:
    regular: RegularFare
    commuter: Dict[int, CommuterPassFare] = field(default_factory=dict)

    def to_dict(self) -> Dict:
        return {
            "regular": self.regular.to_dict(),
            "commuter": {
                str(months): fare.to_dict() for months, fare in self.commuter.items()
            },
        }


@dataclass(frozen=True, slots=True)
class TermAnalysis:
    months: int
    status: str  # pass_better | ic_better
    diff_yen: int  # 이득을 보는 쪽의 절약 금액
    break_even_days: int
    extra_days_beyond_break_even: int = 0
    more_days_to_break_even: int = 0

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class Recommendation:
    type: str  # pass => 정기권 구매, ic => 참고용 (정기권 비추천)
    months: int
    yen: int

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class CostAnalysis:
    daily: int
    terms: Dict[int, TermAnalysis]
    best: Recommendation

    def to_dict(self) -> Dict:
        return {
            "daily": self.daily,
            "terms": {
                str(months): term.to_dict() for months, term in self.terms.items()
            },
            "best": self.best.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class ExtendedPassCandidate:
    """같은 1개월 정기권 가격으로 더 넓은 구간을 커버하는 대안"""

    from_station: str
    to_station: str
    route: Route
    zone: int
    price: int
    extra_stations: int
    my_zone: int
    my_pass_price: int

    def to_dict(self) -> Dict:
        return {
            "from_station": self.from_station,
            "to_station": self.to_station,
            "km": self.route.km,
            "path": list(self.route.path),
            "segments": [seg.to_dict() for seg in self.route.segments],
            "transfers": self.route.transfers,
            "zone": self.zone,
            "price": self.price,
            "extra_stations": self.extra_stations,
            "my_zone": self.my_zone,
            "my_pass_price": self.my_pass_price,
        }
