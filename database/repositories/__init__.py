from database.repositories.base import BaseRepository
from database.repositories.keyed import KeyedItemRepository
from database.repositories.user import UserRepository
from database.repositories.resource import ResourceRepository
from database.repositories.need import NeedRepository
from database.repositories.feedback import FeedbackRepository

__all__ = [
    'BaseRepository',
    'KeyedItemRepository',
    'UserRepository',
    'ResourceRepository',
    'NeedRepository',
    'FeedbackRepository',
]
