from .base import Base, RecordKind
from .user import User
from .resource import Resource
from .need import Need
from .feedback import Feedback

__all__ = [
    'Base',
    'RecordKind',
    'User',
    'Resource',
    'Need',
    'Feedback',
]
