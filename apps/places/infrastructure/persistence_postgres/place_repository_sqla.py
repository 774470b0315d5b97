"""SQLAlchemy Place Repository Implementation."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from places.application.catalog.ports import PlaceRepository
from places.domain.entities import Place
from places.domain.value_objects import Coordinates
from places.infrastructure.persistence_postgres.models import PlaceModel


class SqlaPlaceRepository(PlaceRepository):
    """SQLAlchemy 기반 장소 저장소.

    PlaceRepository Port를 구현합니다.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize.

        Args:
            session: SQLAlchemy 비동기 세션
        """
        self._session = session

    async def list_all(self) -> Sequence[Place]:
        result = await self._session.execute(select(PlaceModel).order_by(PlaceModel.id))
        return [self._to_domain(row) for row in result.scalars().all()]

    async def find_by_id(self, place_id: int) -> Place | None:
        model = await self._session.get(PlaceModel, place_id)
        if model is None:
            return None
        return self._to_domain(model)

    async def add(self, place: Place) -> Place:
        model = PlaceModel(
            name=place.name,
            address=place.address,
            latitude=place.location.latitude,
            longitude=place.location.longitude,
        )
        self._session.add(model)
        await self._session.commit()
        return place.with_id(model.id)

    async def update(self, place: Place) -> Place:
        model = await self._session.merge(
            PlaceModel(
                id=place.id,
                name=place.name,
                address=place.address,
                latitude=place.location.latitude,
                longitude=place.location.longitude,
            )
        )
        await self._session.commit()
        return self._to_domain(model)

    async def delete(self, place_id: int) -> None:
        await self._session.execute(delete(PlaceModel).where(PlaceModel.id == place_id))
        await self._session.commit()

    @staticmethod
    def _to_domain(model: PlaceModel) -> Place:
        """ORM 모델을 도메인 엔티티로 변환합니다."""
        return Place(
            id=int(model.id),
            name=model.name,
            address=model.address,
            location=Coordinates(latitude=model.latitude, longitude=model.longitude),
        )
