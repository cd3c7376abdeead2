import uuid
from typing import Optional

from sqlalchemy import Column, Text, Float, Integer, TIMESTAMP, Uuid, Index
from sqlalchemy.orm import relationship

from core.geo import GeoPoint
from .base import Base, RecordKind, utcnow


class User(Base):
    """
    A person reached over a conversational channel, identified by phone number.

    Organization-affiliated users own Needs; anyone may own Resources.
    """
    __tablename__ = RecordKind.USER.value
    kind = RecordKind.USER

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    phone_number = Column(Text, nullable=False, unique=True)
    name = Column(Text)

    # Coordinates are unset unless both are present
    latitude = Column(Float)
    longitude = Column(Float)

    # Communication preferences (DayFlags bit set)
    reminder_frequency = Column(Integer, nullable=False, default=0)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    resources = relationship("Resource", back_populates="owner", cascade="all, delete-orphan")
    needs = relationship("Need", back_populates="owner", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_users_lat_lon', 'latitude', 'longitude'),
    )

    @property
    def coordinates(self) -> Optional[GeoPoint]:
        if self.latitude is None or self.longitude is None:
            return None
        return GeoPoint(lat=self.latitude, lon=self.longitude)

    @coordinates.setter
    def coordinates(self, point: Optional[GeoPoint]) -> None:
        if point is None:
            self.latitude = None
            self.longitude = None
        else:
            self.latitude = point.lat
            self.longitude = point.lon
