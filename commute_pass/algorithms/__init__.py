"""
그래프 구축, Dijkstra 경로 탐색, 요금/손익분기 계산, 확장 정기권 탐색
"""

from commute_pass.algorithms.graph_builder import StationGraph, build_graph, stations_by_line
from commute_pass.algorithms.dijkstra import shortest_path, shortest_path_tree
from commute_pass.algorithms.fare_model import (
    zone_for_distance,
    regular_monthly_cost,
    commuter_pass_cost,
    break_even_days,
    fare_summary,
)
from commute_pass.algorithms.cost_analyzer import analyze_cost
from commute_pass.algorithms.pass_extender import find_best_extended_pass

__all__ = [
    "StationGraph",
    "build_graph",
    "stations_by_line",
    "shortest_path",
    "shortest_path_tree",
    "zone_for_distance",
    "regular_monthly_cost",
    "commuter_pass_cost",
    "break_even_days",
    "fare_summary",
    "analyze_cost",
    "find_best_extended_pass",
]
