"""
REST API 엔드포인트 테스트
"""

import pytest
from fastapi.testclient import TestClient

from commute_pass.main import app
from commute_pass.models.responses import ErrorResponse


@pytest.fixture
def client(loaded_cache):
    """lifespan 없이 in-memory 캐시로 동작하는 클라이언트"""
    return TestClient(app)


class TestPlanEndpoints:
    """/api/v1/plans 테스트"""

    def test_route(self, client):
        response = client.post(
            "/api/v1/plans/route", json={"origin": "名古屋", "destination": "市役所"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["path"] == ["名古屋", "伏見", "栄", "市役所"]
        assert data["transfers"] == 1
        assert data["segments"][2]["line_id"] == "M"
        assert data["lines"] == ["H", "H", "M"]

    def test_route_unknown_station(self, client):
        response = client.post(
            "/api/v1/plans/route", json={"origin": "東京", "destination": "栄"}
        )

        assert response.status_code == 404
        body = response.json()
        assert body["code"] == "STATION_NOT_FOUND"
        assert set(body) == set(ErrorResponse.model_fields)

    def test_route_not_found(self, client):
        response = client.post(
            "/api/v1/plans/route", json={"origin": "名古屋", "destination": "金山"}
        )

        assert response.status_code == 404
        assert response.json()["code"] == "ROUTE_NOT_FOUND"

    def test_route_empty_name_rejected(self, client):
        response = client.post(
            "/api/v1/plans/route", json={"origin": "", "destination": "栄"}
        )

        assert response.status_code == 422

    def test_calculate(self, client):
        response = client.post(
            "/api/v1/plans/calculate",
            json={"origin": "伏見", "destination": "栄", "work_days": 20},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["fare_result"]["commuter"]["1"]["price"] == 8000
        assert data["pass_analysis"]["best"]["type"] == "pass"
        assert data["best_extended_pass"]["path"] == ["伏見", "栄", "市役所"]

    def test_calculate_default_work_days(self, client):
        response = client.post(
            "/api/v1/plans/calculate", json={"origin": "伏見", "destination": "栄"}
        )

        assert response.json()["work_days"] == 20

    def test_calculate_no_route(self, client):
        """경로 없음 => 200, 하위 결과 null"""
        response = client.post(
            "/api/v1/plans/calculate",
            json={"origin": "名古屋", "destination": "金山", "work_days": 20},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["route"] is None
        assert data["fare_result"] is None
        assert data["best_extended_pass"] is None

    @pytest.mark.parametrize("work_days", [0, 32])
    def test_calculate_invalid_work_days(self, client, work_days):
        response = client.post(
            "/api/v1/plans/calculate",
            json={"origin": "伏見", "destination": "栄", "work_days": work_days},
        )

        assert response.status_code == 422


class TestStationEndpoints:
    """/api/v1/stations 테스트"""

    def test_catalog(self, client):
        response = client.get("/api/v1/stations")

        assert response.status_code == 200
        data = response.json()
        assert data["total_stations"] == 10
        assert data["stations_by_line"]["H"] == ["名古屋", "伏見", "栄", "新栄町"]

    def test_lines(self, client):
        response = client.get("/api/v1/stations/lines")

        data = response.json()
        assert data["total_lines"] == 3
        assert {"id": "T", "name": "鶴舞線", "station_count": 3} in data["lines"]

    def test_search(self, client):
        response = client.get("/api/v1/stations/search", params={"q": "栄"})

        data = response.json()
        assert data["keyword"] == "栄"
        assert data["count"] == 2
        assert data["results"][0] == "栄"

    def test_search_requires_keyword(self, client):
        response = client.get("/api/v1/stations/search")

        assert response.status_code == 422


class TestFareEndpoints:
    """/api/v1/fares 테스트"""

    def test_zone_fares(self, client):
        response = client.get("/api/v1/fares/zone", params={"km": 2.5, "work_days": 20})

        assert response.status_code == 200
        data = response.json()
        assert data["zone"] == 1
        assert data["regular"]["monthly"] == 8400
        assert data["commuter"]["3"]["price"] == 22800

    def test_negative_km_rejected(self, client):
        response = client.get("/api/v1/fares/zone", params={"km": -1})

        assert response.status_code == 422


class TestHealth:
    def test_root(self, client):
        assert client.get("/").json()["status"] == "running"

    def test_healthy(self, client):
        data = client.get("/health").json()

        assert data["status"] == "healthy"
        assert data["graph"] == {"stations": 10, "edges": 9}

    def test_unhealthy_without_data(self):
        from commute_pass.db import cache

        cache.clear_cache()
        response = TestClient(app).get("/health")

        assert response.status_code == 503
        assert response.json()["components"]["data"] == "not_loaded"

    def test_openapi_documents_error_model(self, client):
        """도메인 예외 응답 모델이 OpenAPI 문서에 포함"""
        schema = client.get("/openapi.json").json()
        route_responses = schema["paths"]["/api/v1/plans/route"]["post"]["responses"]

        assert "404" in route_responses
        assert "ErrorResponse" in schema["components"]["schemas"]
