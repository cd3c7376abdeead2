import uuid

from sqlalchemy import Column, Text, TIMESTAMP, Uuid, ForeignKey

from .base import Base, RecordKind, utcnow


class Feedback(Base):
    """Free-text feedback left by a user."""
    __tablename__ = RecordKind.FEEDBACK.value
    kind = RecordKind.FEEDBACK

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    created_by_id = Column(Uuid, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    text = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)
