from typing import Any, List

from sqlalchemy import select

from database.models import Feedback
from database.repositories.base import BaseRepository


class FeedbackRepository(BaseRepository):
    def get_by_id(self, record_id: Any):
        stmt = select(Feedback).where(Feedback.id == record_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def list_for_owner(self, owner_id: Any) -> List[Feedback]:
        stmt = select(Feedback).where(
            Feedback.created_by_id == owner_id
        ).order_by(Feedback.created_at)
        return list(self.db.execute(stmt).scalars().all())
