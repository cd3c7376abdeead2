from typing import Any, List, Optional

from sqlalchemy import select

from core.geo import GeoPoint, bounding_box
from database.models import User
from database.repositories.base import BaseRepository


class UserRepository(BaseRepository):
    def get_by_id(self, user_id: Any) -> Optional[User]:
        stmt = select(User).where(User.id == user_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_by_phone_number(self, phone_number: str) -> Optional[User]:
        stmt = select(User).where(User.phone_number == phone_number)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_by_ids(self, user_ids: List[Any]) -> List[User]:
        if not user_ids:
            return []
        stmt = select(User).where(User.id.in_(user_ids))
        return list(self.db.execute(stmt).scalars().all())

    def list_in_bounding_box(self, center: GeoPoint, radius_m: float) -> List[User]:
        """
        Users whose coordinates fall inside the lat/lon window around center.

        Coarse prefilter only; the window contains every point within
        radius_m but also some beyond it.
        """
        min_lat, max_lat, min_lon, max_lon = bounding_box(center, radius_m)

        stmt = select(User).where(
            User.latitude.is_not(None),
            User.longitude.is_not(None),
            User.latitude >= min_lat,
            User.latitude <= max_lat
        )

        # A window crossing the antimeridian is filtered on latitude only
        if min_lon >= -180.0 and max_lon <= 180.0:
            stmt = stmt.where(User.longitude >= min_lon, User.longitude <= max_lon)

        stmt = stmt.order_by(User.id)
        return list(self.db.execute(stmt).scalars().all())
