from typing import Dict, List

from commute_pass.algorithms.fare_model import break_even_days
from commute_pass.core.config import (
    PASS_TERMS,
    RECOMMEND_IC,
    RECOMMEND_PASS,
    STATUS_IC_BETTER,
    STATUS_PASS_BETTER,
)
from commute_pass.models.domain import CostAnalysis, Recommendation, TermAnalysis


def analyze_term(
    months: int, work_days: int, daily: int, pass_price: int, break_even: int
) -> TermAnalysis:
    actual_days = work_days * months
    ic_cost = daily * actual_days

    diff = ic_cost - pass_price  # 양수면 정기권 이득
    if diff >= 0:
        return TermAnalysis(
            months=months,
            status=STATUS_PASS_BETTER,
            diff_yen=diff,
            break_even_days=break_even,
            extra_days_beyond_break_even=max(0, actual_days - break_even),
            more_days_to_break_even=0,
        )
    return TermAnalysis(
        months=months,
        status=STATUS_IC_BETTER,
        diff_yen=-diff,
        break_even_days=break_even,
        extra_days_beyond_break_even=0,
        more_days_to_break_even=max(0, break_even - actual_days),
    )


def recommend(terms: List[TermAnalysis]) -> Recommendation:
    """
    정기권이 이득인 기간 중 절약액이 가장 큰 것
    전부 IC카드가 이득이면 손해가 가장 작은 기간 (참고용, 정기권 비추천)
    """
    pass_better = [t for t in terms if t.status == STATUS_PASS_BETTER]
    if pass_better:
        best = max(pass_better, key=lambda t: t.diff_yen)
        return Recommendation(type=RECOMMEND_PASS, months=best.months, yen=best.diff_yen)

    closest = min(terms, key=lambda t: t.diff_yen)
    return Recommendation(type=RECOMMEND_IC, months=closest.months, yen=closest.diff_yen)


def analyze_cost(km: float, work_days: int, fares: Dict) -> CostAnalysis:
    """기간(1/3/6개월)별 정기권 vs IC카드 비교"""
    terms: Dict[int, TermAnalysis] = {}
    daily = None

    for months in PASS_TERMS:
        be = break_even_days(km, months, fares)
        daily = be.daily  # 구간이 같으므로 모든 기간에서 동일
        terms[months] = analyze_term(months, work_days, be.daily, be.pass_price, be.days)

    return CostAnalysis(daily=daily, terms=terms, best=recommend(list(terms.values())))
