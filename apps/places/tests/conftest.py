"""Test fixtures for places tests."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from places.application.search.dto import PlaceDocument
from places.domain.entities import Place
from places.domain.value_objects import Coordinates

MOUNTAIN_VIEW = Coordinates(latitude=37.4221, longitude=-122.0841)
SAN_JOSE = Coordinates(latitude=37.3382, longitude=-121.8863)


@pytest.fixture
def origin() -> Coordinates:
    """검색 기준 좌표 (Mountain View)."""
    return MOUNTAIN_VIEW


@pytest.fixture
def mock_search_index() -> AsyncMock:
    """PlaceSearchIndex mock."""
    index = AsyncMock()
    index.put = AsyncMock(return_value=None)
    index.get_ids = AsyncMock(return_value=[])
    index.delete = AsyncMock(return_value=None)
    index.search = AsyncMock(return_value=[])
    return index


@pytest.fixture
def mock_place_repository() -> AsyncMock:
    """PlaceRepository mock."""
    repository = AsyncMock()
    repository.list_all = AsyncMock(return_value=[])
    repository.find_by_id = AsyncMock(return_value=None)
    repository.add = AsyncMock()
    repository.update = AsyncMock()
    repository.delete = AsyncMock(return_value=None)
    return repository


@pytest.fixture
def sample_place() -> Place:
    """테스트용 Place."""
    return Place(
        id=1,
        name="Googleplex",
        address="1600 Amphitheatre Pkwy, Mountain View",
        location=Coordinates(latitude=37.4220, longitude=-122.0841),
    )


@pytest.fixture
def nearby_places() -> list[Place]:
    """기준 좌표에서 북쪽으로 약 1.1km 간격인 장소 5개 (먼 순서로 정렬)."""
    return [
        Place(
            id=step,
            name=f"Place {step}",
            address=f"{step} Castro St, Mountain View",
            location=Coordinates(
                latitude=MOUNTAIN_VIEW.latitude + 0.01 * step,
                longitude=MOUNTAIN_VIEW.longitude,
            ),
        )
        for step in range(5, 0, -1)
    ]


@pytest.fixture
def unlocated_documents() -> list[PlaceDocument]:
    """좌표가 0으로 반환된 문서 5개 (geo 검색 불가 환경)."""
    return [
        PlaceDocument(
            doc_id=str(doc_id),
            name=f"Place {doc_id}",
            address=f"{doc_id} Main St",
            latitude=0.0,
            longitude=0.0,
            marker=1,
        )
        for doc_id in range(1, 6)
    ]
