import uuid

from sqlalchemy import Column, Text, Boolean, Integer, TIMESTAMP, Uuid, ForeignKey, UniqueConstraint, CheckConstraint, Index
from sqlalchemy.orm import relationship

from .base import Base, RecordKind, utcnow


class Resource(Base):
    """
    An item a user offers to donate.

    At most one live Resource per owner per (category, name). A quantity of
    zero means the record must not exist.
    """
    __tablename__ = RecordKind.RESOURCE.value
    kind = RecordKind.RESOURCE

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    created_by_id = Column(Uuid, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)

    category = Column(Text, nullable=False)
    name = Column(Text, nullable=False)
    quantity = Column(Integer, nullable=False)
    is_unopened = Column(Boolean, nullable=False, default=False)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    owner = relationship("User", back_populates="resources")

    __table_args__ = (
        UniqueConstraint('created_by_id', 'category', 'name', name='uq_resources_owner_key'),
        CheckConstraint('quantity > 0', name='ck_resources_quantity_positive'),
        Index('idx_resources_category_name', 'category', 'name'),
    )

    def __repr__(self) -> str:
        return f"<Resource {self.category}/{self.name} x{self.quantity} owner={self.created_by_id}>"
