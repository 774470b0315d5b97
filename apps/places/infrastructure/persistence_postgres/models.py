"""Place ORM Models."""

from sqlalchemy import BigInteger, Float, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Places 서비스 ORM 베이스."""


class PlaceModel(Base):
    """장소 ORM 모델.

    places.places 테이블에 매핑됩니다.
    """

    __tablename__ = "places"
    __table_args__ = {"schema": "places"}

    id: Mapped[int] = mapped_column(
        BigInteger,
        primary_key=True,
        autoincrement=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)
