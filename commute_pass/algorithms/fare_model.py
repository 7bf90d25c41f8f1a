import math
from typing import Dict, List

from commute_pass.core.config import FALLBACK_ZONE, PASS_TERMS
from commute_pass.core.exceptions import MissingFareDataException
from commute_pass.models.domain import (
    BreakEven,
    CommuterPassFare,
    FareResult,
    RegularFare,
)


def _is_number(value) -> bool:
    # bool은 int 하위 타입 => 제외
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def zone_for_distance(km: float, zones: List[Dict]) -> int:
    """
    km -> 구간 결정 (maxKm 오름차순, 마지막 구간은 상한 없음)

    구간표가 비어 있거나 형식이 잘못되면 가장 비싼 구간(FALLBACK_ZONE)
    """
    if not isinstance(zones, (list, tuple)):
        return FALLBACK_ZONE

    for z in zones:
        if not isinstance(z, dict) or "zone" not in z:
            return FALLBACK_ZONE
        max_km = z.get("maxKm")
        if max_km is None:
            return z["zone"]
        if not _is_number(max_km):
            return FALLBACK_ZONE
        if km <= max_km:
            return z["zone"]
    return FALLBACK_ZONE


def _yen(value, message: str):
    # null, 문자열 등 => 조회 실패와 같게 처리
    if not _is_number(value):
        raise MissingFareDataException(message)
    return value


def _one_way_fare(zone: int, fares: Dict) -> int:
    message = f"{zone}구간 보통운임이 요금표에 없습니다"
    try:
        value = fares["regularFare"]["adult"][str(zone)]
    except (KeyError, TypeError):
        raise MissingFareDataException(message)
    return _yen(value, message)


def _pass_price(zone: int, months: int, fares: Dict) -> int:
    message = f"{months}개월 {zone}구간 정기권 가격이 요금표에 없습니다"
    try:
        value = fares["commuterPass"][str(months)][str(zone)]
    except (KeyError, TypeError):
        raise MissingFareDataException(message)
    return _yen(value, message)


def regular_monthly_cost(km: float, work_days: int, fares: Dict) -> RegularFare:
    """IC카드 월 비용 (성인, 왕복 기준)"""
    zone = zone_for_distance(km, fares.get("distanceZones"))
    one_way = _one_way_fare(zone, fares)
    return RegularFare(
        zone=zone,
        one_way=one_way,
        daily=one_way * 2,
        monthly=one_way * 2 * work_days,
    )


def commuter_pass_cost(km: float, months: int, fares: Dict) -> CommuterPassFare:
    """통근 정기권 비용"""
    zone = zone_for_distance(km, fares.get("distanceZones"))
    return CommuterPassFare(zone=zone, months=months, price=_pass_price(zone, months, fares))


def break_even_days(km: float, months: int, fares: Dict) -> BreakEven:
    """
    손익분기 탑승일수

    기간 전체에서 왕복 횟수가 이 값 이상이면 정기권이 IC카드보다 비싸지 않음
    days = ceil(정기권 가격 / 왕복 운임)
    """
    zone = zone_for_distance(km, fares.get("distanceZones"))
    daily = _one_way_fare(zone, fares) * 2
    pass_price = _pass_price(zone, months, fares)

    if daily <= 0:
        raise MissingFareDataException(f"{zone}구간 보통운임이 0 이하입니다")

    return BreakEven(
        zone=zone,
        months=months,
        days=math.ceil(pass_price / daily),
        pass_price=pass_price,
        daily=daily,
    )


def fare_summary(km: float, work_days: int, fares: Dict) -> FareResult:
    """IC카드 월 비용 + 기간별 정기권 가격"""
    return FareResult(
        regular=regular_monthly_cost(km, work_days, fares),
        commuter={months: commuter_pass_cost(km, months, fares) for months in PASS_TERMS},
    )
