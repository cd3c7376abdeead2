import uuid

from sqlalchemy import Column, Text, Boolean, Integer, TIMESTAMP, Uuid, ForeignKey, Index
from sqlalchemy.orm import relationship

from .base import Base, RecordKind, utcnow


class Need(Base):
    """
    Unmet demand registered by an organization-affiliated user.

    quantity is the outstanding amount; a need with quantity <= 0 is
    satisfied and no longer matches anything.
    """
    __tablename__ = RecordKind.NEED.value
    kind = RecordKind.NEED

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    created_by_id = Column(Uuid, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)

    category = Column(Text, nullable=False)
    name = Column(Text, nullable=False)
    quantity = Column(Integer, nullable=False, default=0)
    unopened_only = Column(Boolean, nullable=False, default=False)
    instructions = Column(Text, nullable=False, default='')

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    owner = relationship("User", back_populates="needs")

    __table_args__ = (
        Index('idx_needs_category_name', 'category', 'name'),
        Index('idx_needs_owner', 'created_by_id'),
    )

    def __repr__(self) -> str:
        return f"<Need {self.category}/{self.name} x{self.quantity} owner={self.created_by_id}>"
