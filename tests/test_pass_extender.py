"""
PassExtender 테스트 (같은 가격으로 더 넓은 구간을 커버하는 정기권)
"""

import pytest

from commute_pass.algorithms.dijkstra import shortest_path
from commute_pass.algorithms.fare_model import commuter_pass_cost
from commute_pass.algorithms.pass_extender import find_best_extended_pass
from commute_pass.algorithms.route_utils import contains_subpath
from commute_pass.core.exceptions import MissingFareDataException


class TestFindBestExtendedPass:
    """find_best_extended_pass 테스트 클래스"""

    def test_extends_to_longest_same_price_route(self, graph, distance_doc, fare_doc):
        """
        Given: 伏見 → 栄 (1.0km, 1구간 8000엔)
        When: 확장 정기권 탐색
        Then: 같은 1구간 중 가장 긴 伏見 → 市役所 (2.8km)
              (名古屋 → 栄 2.5km, 伏見 → 新栄町 1.9km 보다 김)
        """
        route = shortest_path(graph, "伏見", "栄")

        best = find_best_extended_pass(route, graph, distance_doc, fare_doc)

        assert best is not None
        assert best.from_station == "伏見"
        assert best.to_station == "市役所"
        assert best.route.path == ("伏見", "栄", "市役所")
        assert best.route.km == pytest.approx(2.8)
        assert best.zone == 1
        assert best.price == 8000
        assert best.my_zone == 1
        assert best.my_pass_price == 8000
        assert best.extra_stations == 1

    def test_result_covers_my_route_at_same_price(self, graph, distance_doc, fare_doc):
        """결과 경로는 항상 내 경로를 같은 방향으로 포함, 가격 동일, 거리 이상"""
        for origin, destination in [
            ("伏見", "栄"),
            ("名古屋", "伏見"),
            ("大須観音", "上前津"),
            ("栄", "矢場町"),
        ]:
            route = shortest_path(graph, origin, destination)
            best = find_best_extended_pass(route, graph, distance_doc, fare_doc)
            if best is None:
                continue

            assert contains_subpath(best.route.path, route.path)
            assert best.route.path != route.path
            assert best.route.km >= route.km
            assert commuter_pass_cost(best.route.km, 1, fare_doc).price == best.my_pass_price

    def test_already_optimal_returns_none(self, graph, distance_doc, fare_doc):
        """
        Given: 名古屋 → 市役所 (4.3km, 2구간)
        Then: 더 넓은 같은 가격 후보가 없음 => None
        """
        route = shortest_path(graph, "名古屋", "市役所")

        assert find_best_extended_pass(route, graph, distance_doc, fare_doc) is None

    def test_no_route_returns_none(self, graph, distance_doc, fare_doc):
        assert find_best_extended_pass(None, graph, distance_doc, fare_doc) is None

    def test_missing_my_price_raises(self, graph, distance_doc, fare_doc):
        """내 구간의 1개월 가격이 없으면 MissingFareDataException"""
        del fare_doc["commuterPass"]["1"]["1"]
        route = shortest_path(graph, "伏見", "栄")

        with pytest.raises(MissingFareDataException):
            find_best_extended_pass(route, graph, distance_doc, fare_doc)

    def test_candidate_without_price_is_skipped(self, graph, distance_doc, fare_doc):
        """다른 구간의 가격이 없어도 탐색은 계속"""
        del fare_doc["commuterPass"]["1"]["2"]
        route = shortest_path(graph, "伏見", "栄")

        best = find_best_extended_pass(route, graph, distance_doc, fare_doc)

        assert best.to_station == "市役所"

    def test_same_price_in_other_zone_counts(self, graph, distance_doc, fare_doc):
        """구간이 달라도 1개월 가격이 같으면 후보"""
        # 2구간 가격을 1구간과 같게
        fare_doc["commuterPass"]["1"]["2"] = 8000
        route = shortest_path(graph, "伏見", "栄")

        best = find_best_extended_pass(route, graph, distance_doc, fare_doc)

        # 名古屋 → 市役所 4.3km (2구간)
        assert best.route.path == ("名古屋", "伏見", "栄", "市役所")
        assert best.zone == 2
        assert best.my_zone == 1
        assert best.price == 8000

    def test_to_dict(self, graph, distance_doc, fare_doc):
        route = shortest_path(graph, "伏見", "栄")

        data = find_best_extended_pass(route, graph, distance_doc, fare_doc).to_dict()

        assert data["from_station"] == "伏見"
        assert data["path"] == ["伏見", "栄", "市役所"]
        assert data["transfers"] == 1
        assert len(data["segments"]) == 2


class TestListOrderDirection:
    """역 목록 순서와 반대로 가는 내 경로 (역 쌍은 목록에서 앞선 역 -> 뒤 역 방향만 탐색)"""

    def test_reverse_route_misses_mirror_candidate(self, graph, distance_doc, fare_doc):
        """
        Given: 栄 → 伏見 (伏見 → 栄 의 반대 방향)
        Then: 伏見 → 市役所 의 반대 방향(市役所 → 伏見, 2.8km)은 탐색되지 않고
              목록 순서 방향의 新栄町 → 大須観音 (2.7km) 이 최선
        """
        route = shortest_path(graph, "栄", "伏見")

        best = find_best_extended_pass(route, graph, distance_doc, fare_doc)

        assert best.from_station == "新栄町"
        assert best.to_station == "大須観音"
        assert best.route.path == ("新栄町", "栄", "伏見", "大須観音")
        assert best.route.km == pytest.approx(2.7)
        assert contains_subpath(best.route.path, route.path)

    def test_reverse_route_without_same_direction_candidate(
        self, graph, distance_doc, fare_doc
    ):
        """
        Given: 市役所 → 栄 (1.8km, 1구간)
        Then: 반대 방향 伏見 → 栄 → 市役所 는 포함으로 보지 않음 => None
        """
        forward = shortest_path(graph, "栄", "市役所")
        backward = shortest_path(graph, "市役所", "栄")

        assert find_best_extended_pass(forward, graph, distance_doc, fare_doc) is not None
        assert find_best_extended_pass(backward, graph, distance_doc, fare_doc) is None
