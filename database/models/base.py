import enum
from datetime import datetime, timezone

from sqlalchemy.orm import declarative_base

Base = declarative_base()


class RecordKind(str, enum.Enum):
    """
    Which collection a record belongs to.

    Every model carries its kind as a class attribute; the value is the
    collection (table) name.
    """
    USER = 'users'
    RESOURCE = 'resources'
    NEED = 'needs'
    FEEDBACK = 'feedback'


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
