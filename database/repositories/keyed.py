from typing import Any, List

from sqlalchemy import select

from database.repositories.base import BaseRepository


class KeyedItemRepository(BaseRepository):
    """
    Queries shared by records keyed by (owner, category, name).

    Subclasses set ``model`` to a mapped class with created_by_id, category,
    name and created_at columns.
    """
    model = None

    def get_by_id(self, record_id: Any):
        stmt = select(self.model).where(self.model.id == record_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_for_owner(self, owner_id: Any, category: str, name: str):
        stmt = select(self.model).where(
            self.model.created_by_id == owner_id,
            self.model.category == category,
            self.model.name == name
        )
        return self.db.execute(stmt).scalars().first()

    def list_by_category_and_name(self, category: str, name: str) -> List[Any]:
        # Ordered so repeated queries enumerate in the same sequence
        stmt = select(self.model).where(
            self.model.category == category,
            self.model.name == name
        ).order_by(self.model.created_at, self.model.id)
        return list(self.db.execute(stmt).scalars().all())

    def list_for_owner(self, owner_id: Any) -> List[Any]:
        stmt = select(self.model).where(
            self.model.created_by_id == owner_id
        ).order_by(self.model.category, self.model.name)
        return list(self.db.execute(stmt).scalars().all())

