"""HTTP Controllers 단위 테스트."""

from __future__ import annotations

import asyncio
import time
from typing import Iterator
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from places.application.common.exceptions import SearchExecutionError
from places.application.search import FindNearbyPlacesQuery, PlaceDocumentBuilder
from places.domain.entities import Place
from places.domain.exceptions import PlaceNotFoundError
from places.domain.value_objects import Coordinates
from places.infrastructure.search import InMemoryPlaceSearchIndex
from places.main import app
from places.setup.config import Settings, get_settings
from places.setup.dependencies import (
    get_add_place_command,
    get_find_nearby_places_query,
    get_place_query,
    get_rebuild_place_index_command,
    get_remove_place_command,
    get_update_place_command,
)

ADMIN_SUB = "admin-1"
USER_SUB = "user-1"

NEARBY_URL = "/api/v1/places/nearby"


def _token(sub: str = USER_SUB, token_type: str = "access") -> str:
    now = int(time.time())
    return jwt.encode(
        {
            "sub": sub,
            "jti": f"jti-{sub}",
            "type": token_type,
            "exp": now + 3600,
            "iat": now,
            "provider": "google",
        },
        "test-secret",
        algorithm="HS256",
    )


def _auth(sub: str = USER_SUB, token_type: str = "access") -> dict[str, str]:
    return {"Authorization": f"Bearer {_token(sub, token_type)}"}


@pytest.fixture
def client() -> Iterator[TestClient]:
    """TestClient 인스턴스 (관리자 목록이 고정된 설정)."""
    settings = Settings(admin_subjects=[ADMIN_SUB], auth_disabled=False)
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def mock_query() -> AsyncMock:
    query = AsyncMock()
    query.execute = AsyncMock(return_value=[])
    return query


@pytest.fixture
def indexed_query(nearby_places: list[Place]) -> FindNearbyPlacesQuery:
    """장소 5개가 색인된 인메모리 인덱스 기반 Query."""
    index = InMemoryPlaceSearchIndex()
    builder = PlaceDocumentBuilder()

    async def fill() -> None:
        for place in nearby_places:
            await index.put(builder.build_from_place(place))

    asyncio.run(fill())
    return FindNearbyPlacesQuery(index)


class TestHealthController:
    """Health Controller 테스트."""

    def test_health_check(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_ready(self, client: TestClient) -> None:
        response = client.get("/ready")
        assert response.status_code == 200
        assert response.json()["status"] == "ready"


class TestNearbyController:
    """주변 장소 조회 테스트."""

    def test_returns_nearest_first(
        self, client: TestClient, indexed_query: FindNearbyPlacesQuery
    ) -> None:
        app.dependency_overrides[get_find_nearby_places_query] = lambda: indexed_query

        response = client.get(
            NEARBY_URL,
            params={"latitude": "37.4221", "longitude": "-122.0841", "distance_km": 10, "count": 3},
            headers=_auth(),
        )

        assert response.status_code == 200
        data = response.json()
        assert [entry["place_id"] for entry in data] == [1, 2, 3]
        assert data[0]["distance_km"] < data[1]["distance_km"] < data[2]["distance_km"]
        assert data[0]["name"] == "Place 1"

    def test_clamps_distance_and_count(self, client: TestClient, mock_query: AsyncMock) -> None:
        """500km, 1000개 요청은 100km, 100개로 제한."""
        app.dependency_overrides[get_find_nearby_places_query] = lambda: mock_query

        response = client.get(
            NEARBY_URL,
            params={"latitude": "37.4", "longitude": "-122.0", "distance_km": 500, "count": 1000},
            headers=_auth(),
        )

        assert response.status_code == 200
        assert response.json() == []
        request = mock_query.execute.call_args.args[0]
        assert request.max_distance_meters == 100_000
        assert request.max_results == 100

    def test_requires_token(self, client: TestClient, mock_query: AsyncMock) -> None:
        app.dependency_overrides[get_find_nearby_places_query] = lambda: mock_query

        response = client.get(
            NEARBY_URL,
            params={"latitude": "37.4", "longitude": "-122.0", "distance_km": 1, "count": 1},
        )

        assert response.status_code == 401
        mock_query.execute.assert_not_called()

    def test_rejects_refresh_token(self, client: TestClient, mock_query: AsyncMock) -> None:
        app.dependency_overrides[get_find_nearby_places_query] = lambda: mock_query

        response = client.get(
            NEARBY_URL,
            params={"latitude": "37.4", "longitude": "-122.0", "distance_km": 1, "count": 1},
            headers=_auth(token_type="refresh"),
        )

        assert response.status_code == 401

    def test_rejects_malformed_token(self, client: TestClient, mock_query: AsyncMock) -> None:
        app.dependency_overrides[get_find_nearby_places_query] = lambda: mock_query

        response = client.get(
            NEARBY_URL,
            params={"latitude": "37.4", "longitude": "-122.0", "distance_km": 1, "count": 1},
            headers={"Authorization": "Bearer not-a-jwt"},
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Malformed token"

    @pytest.mark.parametrize(
        ("params", "detail"),
        [
            (
                {"latitude": "abc", "longitude": "-122.0", "distance_km": 1, "count": 1},
                "Invalid value of 'latitude' argument",
            ),
            (
                {"latitude": "95", "longitude": "-122.0", "distance_km": 1, "count": 1},
                "Invalid pair of 'latitude' and 'longitude' arguments",
            ),
            (
                {"latitude": "37.4", "longitude": "-122.0", "distance_km": 1, "count": 0},
                "Invalid value of 'count' argument",
            ),
            (
                {"latitude": "37.4", "longitude": "-122.0", "distance_km": -5, "count": 1},
                "Invalid value of 'distanceInKm' argument",
            ),
        ],
    )
    def test_invalid_arguments(
        self,
        client: TestClient,
        mock_query: AsyncMock,
        params: dict[str, object],
        detail: str,
    ) -> None:
        """잘못된 파라미터는 400."""
        app.dependency_overrides[get_find_nearby_places_query] = lambda: mock_query

        response = client.get(NEARBY_URL, params=params, headers=_auth())

        assert response.status_code == 400
        assert response.json() == {"detail": detail, "code": "INVALID_ARGUMENT"}
        mock_query.execute.assert_not_called()

    def test_missing_argument(self, client: TestClient, mock_query: AsyncMock) -> None:
        app.dependency_overrides[get_find_nearby_places_query] = lambda: mock_query

        response = client.get(NEARBY_URL, params={"latitude": "37.4"}, headers=_auth())
        assert response.status_code == 422

    def test_search_failure_is_service_unavailable(
        self, client: TestClient, mock_query: AsyncMock
    ) -> None:
        mock_query.execute.side_effect = SearchExecutionError("Place search failed: down")
        app.dependency_overrides[get_find_nearby_places_query] = lambda: mock_query

        response = client.get(
            NEARBY_URL,
            params={"latitude": "37.4", "longitude": "-122.0", "distance_km": 1, "count": 1},
            headers=_auth(),
        )

        assert response.status_code == 503
        assert response.json()["code"] == "SEARCH_FAILED"


class TestPlaceCatalogController:
    """장소 CRUD 테스트."""

    @pytest.fixture
    def sample_place(self) -> Place:
        return Place(
            id=3,
            name="Cafe",
            address="Main St",
            location=Coordinates(latitude=37.0, longitude=-122.0),
        )

    def test_non_admin_is_forbidden(self, client: TestClient, mock_query: AsyncMock) -> None:
        app.dependency_overrides[get_place_query] = lambda: mock_query

        response = client.get("/api/v1/places/3", headers=_auth(USER_SUB))

        assert response.status_code == 403
        assert response.json()["detail"] == "You are not authorized to perform this operation"
        mock_query.execute.assert_not_called()

    def test_get_place(
        self, client: TestClient, mock_query: AsyncMock, sample_place: Place
    ) -> None:
        mock_query.execute.return_value = sample_place
        app.dependency_overrides[get_place_query] = lambda: mock_query

        response = client.get("/api/v1/places/3", headers=_auth(ADMIN_SUB))

        assert response.status_code == 200
        assert response.json() == {
            "id": 3,
            "name": "Cafe",
            "address": "Main St",
            "latitude": 37.0,
            "longitude": -122.0,
        }

    def test_get_missing_place(self, client: TestClient, mock_query: AsyncMock) -> None:
        mock_query.execute.side_effect = PlaceNotFoundError(3)
        app.dependency_overrides[get_place_query] = lambda: mock_query

        response = client.get("/api/v1/places/3", headers=_auth(ADMIN_SUB))

        assert response.status_code == 404
        assert response.json() == {"detail": "Place 3 not found", "code": "PLACE_NOT_FOUND"}

    def test_insert_place(
        self, client: TestClient, mock_query: AsyncMock, sample_place: Place
    ) -> None:
        mock_query.execute.return_value = sample_place
        app.dependency_overrides[get_add_place_command] = lambda: mock_query

        response = client.post(
            "/api/v1/places",
            json={"name": "Cafe", "address": "Main St", "latitude": 37.0, "longitude": -122.0},
            headers=_auth(ADMIN_SUB),
        )

        assert response.status_code == 201
        assert response.json()["id"] == 3
        data = mock_query.execute.call_args.args[0]
        assert data.name == "Cafe"

    def test_insert_invalid_coordinates(self, client: TestClient, mock_query: AsyncMock) -> None:
        app.dependency_overrides[get_add_place_command] = lambda: mock_query

        response = client.post(
            "/api/v1/places",
            json={"name": "Cafe", "address": "", "latitude": 91, "longitude": 0},
            headers=_auth(ADMIN_SUB),
        )

        assert response.status_code == 422

    def test_update_place(
        self, client: TestClient, mock_query: AsyncMock, sample_place: Place
    ) -> None:
        mock_query.execute.return_value = sample_place
        app.dependency_overrides[get_update_place_command] = lambda: mock_query

        response = client.put(
            "/api/v1/places/3",
            json={"name": "Cafe", "address": "Main St", "latitude": 37.0, "longitude": -122.0},
            headers=_auth(ADMIN_SUB),
        )

        assert response.status_code == 200
        assert mock_query.execute.call_args.args[0] == 3

    def test_remove_place(self, client: TestClient, mock_query: AsyncMock) -> None:
        mock_query.execute.return_value = False
        app.dependency_overrides[get_remove_place_command] = lambda: mock_query

        response = client.delete("/api/v1/places/3", headers=_auth(ADMIN_SUB))

        assert response.status_code == 204
        mock_query.execute.assert_called_once_with(3)


class TestMaintenanceController:
    """검색 인덱스 재구축 테스트."""

    URL = "/api/v1/maintenance/search-index"

    def test_rebuild_success(self, client: TestClient, mock_query: AsyncMock) -> None:
        mock_query.execute.return_value = True
        app.dependency_overrides[get_rebuild_place_index_command] = lambda: mock_query

        response = client.post(self.URL, headers=_auth(ADMIN_SUB))

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "MaintenanceTasks completed"}

    def test_rebuild_failure(self, client: TestClient, mock_query: AsyncMock) -> None:
        mock_query.execute.return_value = False
        app.dependency_overrides[get_rebuild_place_index_command] = lambda: mock_query

        response = client.post(self.URL, headers=_auth(ADMIN_SUB))

        assert response.status_code == 503
        assert response.json() == {
            "success": False,
            "message": "MaintenanceTasks failed. Try again by refreshing.",
        }

    def test_rebuild_requires_admin(self, client: TestClient, mock_query: AsyncMock) -> None:
        app.dependency_overrides[get_rebuild_place_index_command] = lambda: mock_query

        response = client.post(self.URL, headers=_auth(USER_SUB))

        assert response.status_code == 403
        mock_query.execute.assert_not_called()
